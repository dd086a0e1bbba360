"""Internal UI constants for the ArxivDeck app."""

from __future__ import annotations

from textual.binding import Binding, BindingType

LOADING_MESSAGE = "Loading papers..."
EMPTY_MESSAGE = "No papers found."

APP_CSS = """
Screen {
    background: $th-background;
}

#main-content {
    height: 1fr;
    padding: 1 2;
}

#status-message {
    width: 100%;
    height: 1fr;
    content-align: center middle;
    color: $th-text;
}

#status-message.error {
    color: $error;
}
"""

APP_BINDINGS: list[BindingType] = [
    Binding("q", "quit", "Quit", show=False),
    # Keyboard navigation (arrow keys plus vim-style j/k)
    Binding("down", "key_down", "Next", show=False),
    Binding("j", "key_down", "Next", show=False),
    Binding("up", "key_up", "Previous", show=False),
    Binding("k", "key_up", "Previous", show=False),
    Binding("x", "toggle_bookmark", "Bookmark", show=False),
    Binding("o", "open_pdf", "Open PDF", show=False),
    Binding("b", "toggle_bookmarks", "Bookmarks", show=False),
    Binding("d", "toggle_dark_mode", "Dark/Light", show=False),
    # Abstract scrolling on the current card
    Binding("pagedown", "card_page_down", "Scroll down", show=False),
    Binding("pageup", "card_page_up", "Scroll up", show=False),
    Binding("end", "card_end", "Abstract end", show=False),
    Binding("home", "card_home", "Abstract start", show=False),
]

# Actions that act on the visible card; disabled while the bookmark overlay is open
CARD_ACTIONS: frozenset[str] = frozenset(
    {
        "key_down",
        "key_up",
        "toggle_bookmark",
        "open_pdf",
        "card_page_down",
        "card_page_up",
        "card_end",
        "card_home",
    }
)

FOOTER_BINDINGS: list[tuple[str, str]] = [
    ("↑/↓", "prev/next"),
    ("PgUp/PgDn", "scroll"),
    ("x", "bookmark"),
    ("o", "PDF"),
    ("b", "bookmarks"),
    ("d", "dark/light"),
    ("q", "quit"),
]

__all__ = [
    "APP_BINDINGS",
    "APP_CSS",
    "CARD_ACTIONS",
    "EMPTY_MESSAGE",
    "FOOTER_BINDINGS",
    "LOADING_MESSAGE",
]
