"""Bookmark list overlay."""

from __future__ import annotations

import logging
from collections.abc import Callable

from textual import on
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.events import Click
from textual.screen import ModalScreen
from textual.widgets import Button, Label, ListItem, ListView

from arxiv_deck.models import PaperRecord
from arxiv_deck.parsing import clean_latex

logger = logging.getLogger(__name__)

NO_BOOKMARKS_MESSAGE = "No bookmarks yet."


class BookmarkListItem(ListItem):
    """List row for one bookmarked paper."""

    def __init__(self, record: PaperRecord) -> None:
        super().__init__(Label(clean_latex(record.title), markup=False))
        self.record = record


class BookmarksScreen(ModalScreen[str | None]):
    """Overlay listing bookmarked papers in insertion order.

    Selecting an entry calls ``on_select``; the overlay closes (returning the
    entry's pdf_link) only when that callback reports the jump succeeded.
    """

    BINDINGS = [
        Binding("escape", "close", "Close"),
    ]

    CSS = """
    BookmarksScreen {
        align: right top;
    }

    #bookmarks-dialog {
        width: 60;
        max-width: 90%;
        height: 100%;
        background: $th-background;
        border-left: tall $th-accent;
        padding: 0 1;
    }

    #bookmarks-header {
        height: auto;
    }

    #bookmarks-title {
        width: 1fr;
        text-style: bold;
        color: $th-accent-alt;
        padding: 1 0;
    }

    #bookmark-list {
        height: 1fr;
        background: $th-panel;
    }

    #no-bookmarks {
        color: $th-muted;
        padding: 1 0;
    }
    """

    def __init__(
        self,
        bookmarks: list[PaperRecord],
        on_select: Callable[[PaperRecord], bool],
    ) -> None:
        super().__init__()
        self._bookmarks = list(bookmarks)
        self._on_select = on_select

    def compose(self) -> ComposeResult:
        with Vertical(id="bookmarks-dialog"):
            with Horizontal(id="bookmarks-header"):
                yield Label("Bookmarked Papers", id="bookmarks-title")
                yield Button("✖", id="close-btn")
            if self._bookmarks:
                yield ListView(
                    *(BookmarkListItem(record) for record in self._bookmarks),
                    id="bookmark-list",
                )
            else:
                yield Label(NO_BOOKMARKS_MESSAGE, id="no-bookmarks")

    def on_mount(self) -> None:
        if self._bookmarks:
            self.query_one("#bookmark-list", ListView).focus()

    def choose(self, record: PaperRecord) -> bool:
        """Jump to record; dismiss the overlay if the jump succeeded."""
        if self._on_select(record):
            self.dismiss(record.pdf_link)
            return True
        logger.debug("Bookmark %r is not in the loaded sequence", record.pdf_link)
        return False

    @on(ListView.Selected, "#bookmark-list")
    def on_bookmark_selected(self, event: ListView.Selected) -> None:
        item = event.item
        if isinstance(item, BookmarkListItem):
            self.choose(item.record)

    @on(Button.Pressed, "#close-btn")
    def on_close_pressed(self) -> None:
        self.dismiss(None)

    def on_click(self, event: Click) -> None:
        # Clicks that land on the dimmed backdrop rather than the dialog
        if event.widget is self:
            self.dismiss(None)

    def action_close(self) -> None:
        self.dismiss(None)


__all__ = ["NO_BOOKMARKS_MESSAGE", "BookmarkListItem", "BookmarksScreen"]
