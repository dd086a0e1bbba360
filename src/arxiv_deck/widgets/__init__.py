"""Widget classes for the card screen."""

from arxiv_deck.widgets.card import (
    BOOKMARKED_LABEL,
    NOT_BOOKMARKED_LABEL,
    CardScroll,
    PaperCard,
    render_card_markup,
)
from arxiv_deck.widgets.chrome import ContextFooter, SwipeSurface, TopBar

__all__ = [
    "BOOKMARKED_LABEL",
    "NOT_BOOKMARKED_LABEL",
    "CardScroll",
    "ContextFooter",
    "PaperCard",
    "SwipeSurface",
    "TopBar",
    "render_card_markup",
]
