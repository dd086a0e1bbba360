"""Explicit per-run session state shared by the input and rendering layers."""

from __future__ import annotations

import logging

from arxiv_deck.bookmarks import is_bookmarked, toggle_bookmark
from arxiv_deck.config import (
    KeyValueStore,
    load_bookmarks,
    load_dark_mode,
    save_bookmarks,
    save_dark_mode,
)
from arxiv_deck.models import LoadState, PaperRecord
from arxiv_deck.navigation import InputEvent, NavAction, apply_action, jump_to, translate_input

logger = logging.getLogger(__name__)


class DeckSession:
    """Paper sequence, cursor, bookmarks and display mode for one run.

    Bookmarks and the display mode are loaded from ``store`` on construction
    and written back in full after every change. After :meth:`close`, load
    results are ignored so a fetch finishing during teardown changes nothing.
    """

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store
        self.papers: list[PaperRecord] = []
        self.cursor: int = 0
        self.state: LoadState = LoadState.LOADING
        self.error_message: str = ""
        self.bookmarks: list[PaperRecord] = load_bookmarks(store)
        self.dark_mode: bool = load_dark_mode(store)
        self.last_save_ok: bool = True
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        self._closed = True

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def start_loading(self) -> None:
        if self._closed:
            return
        self.state = LoadState.LOADING
        self.error_message = ""

    def load_papers(self, papers: list[PaperRecord]) -> bool:
        """Install the session's paper sequence. Returns False if the session is closed."""
        if self._closed:
            logger.debug("Ignoring %d papers delivered after session close", len(papers))
            return False
        self.papers = list(papers)
        self.cursor = 0
        self.state = LoadState.READY if self.papers else LoadState.EMPTY
        return True

    def fail(self, message: str) -> bool:
        """Enter the terminal error state. Returns False if the session is closed."""
        if self._closed:
            logger.debug("Ignoring fetch error after session close: %s", message)
            return False
        self.papers = []
        self.cursor = 0
        self.state = LoadState.ERROR
        self.error_message = message
        return True

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    @property
    def can_navigate(self) -> bool:
        return self.state is LoadState.READY and bool(self.papers)

    @property
    def current(self) -> PaperRecord | None:
        if not self.can_navigate:
            return None
        return self.papers[self.cursor]

    @property
    def position_label(self) -> str:
        if not self.can_navigate:
            return ""
        return f"{self.cursor + 1} / {len(self.papers)}"

    def apply(self, action: NavAction) -> bool:
        """Move the cursor. Returns False when there is nothing to navigate."""
        if not self.can_navigate:
            return False
        self.cursor = apply_action(action, self.cursor, len(self.papers))
        return True

    def handle_input(self, event: InputEvent) -> bool:
        return self.apply(translate_input(event))

    def next(self) -> bool:
        return self.apply(NavAction.NEXT)

    def previous(self) -> bool:
        return self.apply(NavAction.PREVIOUS)

    def jump_to(self, pdf_link: str) -> bool:
        """Point the cursor at the paper with this pdf_link, if it is loaded."""
        index = jump_to(pdf_link, self.papers)
        if index is None:
            return False
        self.cursor = index
        return True

    # ------------------------------------------------------------------
    # Bookmarks and display mode
    # ------------------------------------------------------------------

    def is_bookmarked(self, record: PaperRecord | None = None) -> bool:
        target = record if record is not None else self.current
        if target is None:
            return False
        return is_bookmarked(target, self.bookmarks)

    def toggle_bookmark(self, record: PaperRecord | None = None) -> bool:
        """Toggle the bookmark for record (default: current paper).

        Returns the new membership. The full set is persisted; ``last_save_ok``
        reports whether that write succeeded.
        """
        target = record if record is not None else self.current
        if target is None:
            return False
        self.bookmarks = toggle_bookmark(target, self.bookmarks)
        self.last_save_ok = save_bookmarks(self._store, self.bookmarks)
        return is_bookmarked(target, self.bookmarks)

    def toggle_dark_mode(self) -> bool:
        self.dark_mode = not self.dark_mode
        self.last_save_ok = save_dark_mode(self._store, self.dark_mode)
        return self.dark_mode


__all__ = ["DeckSession"]
