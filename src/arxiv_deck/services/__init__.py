"""Service layer for network access."""

from arxiv_deck.services.feed_service import (
    FetchError,
    NetworkError,
    ParseError,
    fetch_papers,
    shuffle_papers,
)

__all__ = [
    "FetchError",
    "NetworkError",
    "ParseError",
    "fetch_papers",
    "shuffle_papers",
]
