#!/usr/bin/env python3
"""arXiv Deck TUI - Flip through the newest arXiv papers one card at a time.

Usage:
    arxiv-deck                         # Newest cs.AI papers, shuffled
    arxiv-deck --category cs.LG        # Another category
    arxiv-deck --list-bookmarks        # Print bookmarks and exit

Key bindings:
    down / j  - Next paper (also: wheel down, drag up)
    up / k    - Previous paper (also: wheel up, drag down)
    PgDn / PgUp - Scroll the abstract (Home / End: top / bottom)
    x         - Toggle bookmark on the current paper
    o         - Open the current paper's PDF in the browser
    b         - Show / hide the bookmark list
    d         - Toggle dark / light mode
    q         - Quit
"""

from __future__ import annotations

import asyncio
import logging
import random
import sys
import webbrowser
from collections.abc import Awaitable, Callable
from typing import Any

import httpx
from textual import on
from textual.app import App, ComposeResult
from textual.widgets import Button, Static

from arxiv_deck.action_messages import (
    build_bookmark_not_loaded_warning,
    build_bookmark_toggled_notice,
    build_browser_failure_error,
    build_missing_pdf_warning,
    build_storage_failure_error,
)
from arxiv_deck.cli import main as _cli_main
from arxiv_deck.config import KeyValueStore
from arxiv_deck.modals import BookmarksScreen
from arxiv_deck.models import DEFAULT_CATEGORY, DEFAULT_MAX_RESULTS, LoadState, PaperRecord
from arxiv_deck.navigation import InputEvent
from arxiv_deck.services.feed_service import FetchError, fetch_papers
from arxiv_deck.session import DeckSession
from arxiv_deck.themes import TEXTUAL_THEMES, palette_for, theme_name_for
from arxiv_deck.ui_constants import (
    APP_BINDINGS,
    APP_CSS,
    CARD_ACTIONS,
    EMPTY_MESSAGE,
    FOOTER_BINDINGS,
    LOADING_MESSAGE,
)
from arxiv_deck.widgets import ContextFooter, PaperCard, SwipeSurface, TopBar

logger = logging.getLogger(__name__)

FetchFn = Callable[..., Awaitable[list[PaperRecord]]]


def build_status_message(session: DeckSession) -> str:
    """Text for the non-card display states."""
    if session.state is LoadState.ERROR:
        return f"Error: {session.error_message}"
    if session.state is LoadState.EMPTY:
        return EMPTY_MESSAGE
    return LOADING_MESSAGE


class ArxivDeck(App):
    """A TUI application that shows arXiv papers one card at a time."""

    TITLE = "arXiv Deck"

    CSS = APP_CSS

    BINDINGS = APP_BINDINGS

    def __init__(
        self,
        session: DeckSession | None = None,
        *,
        category: str = DEFAULT_CATEGORY,
        max_results: int = DEFAULT_MAX_RESULTS,
        rng: random.Random | None = None,
        fetch_fn: FetchFn = fetch_papers,
    ) -> None:
        super().__init__()
        # Register themes so $th-* CSS variables resolve before compose()
        for textual_theme in TEXTUAL_THEMES.values():
            self.register_theme(textual_theme)
        self._session = session if session is not None else DeckSession(KeyValueStore())
        self._category = category
        self._max_results = max_results
        self._rng = rng
        self._fetch_fn = fetch_fn
        self._fetch_token: int = 0

        # Background task tracking (prevent GC of fire-and-forget tasks)
        self._background_tasks: set[asyncio.Task[None]] = set()

        # Shared HTTP client (created in on_mount)
        self._http_client: httpx.AsyncClient | None = None

        self._apply_theme()

    @property
    def session(self) -> DeckSession:
        return self._session

    def compose(self) -> ComposeResult:
        yield TopBar(self._session.dark_mode)
        with SwipeSurface(id="main-content"):
            yield Static(LOADING_MESSAGE, id="status-message", markup=False)
            yield PaperCard(id="paper-card")
        yield ContextFooter()

    def on_mount(self) -> None:
        """Start the feed load and render the loading state."""
        self._http_client = httpx.AsyncClient()
        self._apply_theme()
        self._update_footer()
        self._start_fetch()
        logger.debug(
            "App mounted: category=%s, max_results=%d, bookmarks=%d, dark=%s",
            self._category,
            self._max_results,
            len(self._session.bookmarks),
            self._session.dark_mode,
        )

    async def on_unmount(self) -> None:
        """Cancel the in-flight fetch, close the HTTP client, close the session."""
        self._session.close()

        background_tasks = getattr(self, "_background_tasks", set())
        pending = [task for task in background_tasks if not task.done()]
        for task in pending:
            task.cancel()
        if pending:
            _, still_pending = await asyncio.wait(pending, timeout=0.5)
            for task in still_pending:
                logger.debug("Background task did not cancel before shutdown: %r", task)
        self._background_tasks.clear()

        client = self._http_client
        self._http_client = None
        if client is not None:
            try:
                await client.aclose()
            except Exception as e:
                logger.debug(
                    "Failed to close shared HTTP client during shutdown: %s", e, exc_info=True
                )

    # ------------------------------------------------------------------
    # Background tasks and feed loading
    # ------------------------------------------------------------------

    def _track_task(self, coro: Any) -> asyncio.Task[None]:
        """Create an asyncio task and track it to prevent garbage collection."""
        task = asyncio.create_task(coro)
        self._background_tasks.add(task)
        task.add_done_callback(self._background_tasks.discard)
        task.add_done_callback(self._on_task_done)
        return task

    @staticmethod
    def _on_task_done(task: asyncio.Task[None]) -> None:
        """Log unhandled exceptions from background tasks."""
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error("Unhandled exception in background task: %s", exc, exc_info=exc)

    def _start_fetch(self) -> asyncio.Task[None]:
        self._fetch_token += 1
        self._session.start_loading()
        self._refresh_view()
        return self._track_task(self._load_papers(self._fetch_token))

    def _is_current_fetch(self, token: int) -> bool:
        return token == self._fetch_token and not self._session.closed

    async def _load_papers(self, token: int) -> None:
        try:
            papers = await self._fetch_fn(
                client=self._http_client,
                category=self._category,
                max_results=self._max_results,
                rng=self._rng,
            )
        except FetchError as exc:
            if not self._is_current_fetch(token):
                return
            logger.warning("Feed load failed: %s", exc.message)
            self._session.fail(exc.message)
        else:
            if not self._is_current_fetch(token):
                logger.debug("Discarding stale feed result (token %d)", token)
                return
            self._session.load_papers(papers)
        self._refresh_view()

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _get_card(self) -> PaperCard:
        return self.query_one("#paper-card", PaperCard)

    def _get_status(self) -> Static:
        return self.query_one("#status-message", Static)

    def _get_top_bar(self) -> TopBar:
        return self.query_one(TopBar)

    def _apply_theme(self) -> None:
        try:
            self.theme = theme_name_for(self._session.dark_mode)
        except Exception as e:
            logger.debug("Skipping theme activation in current context: %s", e, exc_info=True)

    def _refresh_view(self) -> None:
        """Show the card for READY, otherwise the loading/error/empty message."""
        card = self._get_card()
        status = self._get_status()
        record = self._session.current
        if record is not None:
            status.display = False
            card.display = True
            card.update_paper(
                record,
                bookmarked=self._session.is_bookmarked(record),
                palette=palette_for(self._session.dark_mode),
            )
        else:
            card.display = False
            status.display = True
            status.update(build_status_message(self._session))
            status.set_class(self._session.state is LoadState.ERROR, "error")
        self._get_top_bar().set_position(self._session.position_label)

    def _update_footer(self) -> None:
        self.query_one(ContextFooter).render_bindings(
            FOOTER_BINDINGS, palette_for(self._session.dark_mode)
        )

    # ------------------------------------------------------------------
    # Navigation input (keyboard, wheel, swipe)
    # ------------------------------------------------------------------

    def handle_input(self, event: InputEvent) -> bool:
        """Apply one navigation gesture from any input source."""
        moved = self._session.handle_input(event)
        if moved:
            self._refresh_view()
        return moved

    def action_key_down(self) -> None:
        self.handle_input(InputEvent.KEY_DOWN)

    def action_key_up(self) -> None:
        self.handle_input(InputEvent.KEY_UP)

    def on_swipe_surface_gesture(self, message: SwipeSurface.Gesture) -> None:
        self.handle_input(message.event)

    def check_action(self, action: str, parameters: tuple[object, ...]) -> bool | None:
        """Disable card actions while the bookmark overlay covers the card."""
        if action in CARD_ACTIONS and isinstance(self.screen, BookmarksScreen):
            return False
        return True

    # ------------------------------------------------------------------
    # Abstract scrolling
    # ------------------------------------------------------------------

    def _scroll_card(self, scroll: Callable[[PaperCard], None]) -> None:
        if self._session.current is None:
            return
        scroll(self._get_card())

    def action_card_page_down(self) -> None:
        self._scroll_card(lambda card: card.scroll_page(forward=True))

    def action_card_page_up(self) -> None:
        self._scroll_card(lambda card: card.scroll_page(forward=False))

    def action_card_end(self) -> None:
        self._scroll_card(lambda card: card.scroll_edge(end=True))

    def action_card_home(self) -> None:
        self._scroll_card(lambda card: card.scroll_edge(end=False))

    # ------------------------------------------------------------------
    # Bookmarks
    # ------------------------------------------------------------------

    def _notify_if_save_failed(self, title: str) -> None:
        if not self._session.last_save_ok:
            self.notify(build_storage_failure_error(), title=title, severity="error", timeout=8)

    def action_toggle_bookmark(self) -> None:
        """Toggle the bookmark on the current card."""
        record = self._session.current
        if record is None:
            return
        bookmarked = self._session.toggle_bookmark(record)
        self._notify_if_save_failed("Bookmarks")
        self._get_card().set_bookmarked(bookmarked)
        self.notify(build_bookmark_toggled_notice(record, bookmarked), title="Bookmarks")

    @on(Button.Pressed, "#bookmark-btn")
    def on_bookmark_pressed(self) -> None:
        self.action_toggle_bookmark()

    def action_toggle_bookmarks(self) -> None:
        """Open the bookmark list overlay, or close it if already open."""
        if isinstance(self.screen, BookmarksScreen):
            self.screen.dismiss(None)
            return
        self.push_screen(BookmarksScreen(self._session.bookmarks, on_select=self._jump_to_bookmark))

    @on(Button.Pressed, "#bookmarks-btn")
    def on_bookmarks_pressed(self) -> None:
        self.action_toggle_bookmarks()

    def _jump_to_bookmark(self, record: PaperRecord) -> bool:
        if not self._session.jump_to(record.pdf_link):
            self.notify(
                build_bookmark_not_loaded_warning(record), title="Bookmarks", severity="warning"
            )
            return False
        self._refresh_view()
        return True

    # ------------------------------------------------------------------
    # Display mode
    # ------------------------------------------------------------------

    def action_toggle_dark_mode(self) -> None:
        dark_mode = self._session.toggle_dark_mode()
        self._notify_if_save_failed("Display")
        self._apply_theme()
        self._get_top_bar().set_dark_mode(dark_mode)
        self._update_footer()
        self._refresh_view()

    @on(Button.Pressed, "#mode-btn")
    def on_mode_pressed(self) -> None:
        self.action_toggle_dark_mode()

    # ------------------------------------------------------------------
    # External link
    # ------------------------------------------------------------------

    def _safe_browser_open(self, url: str) -> bool:
        """Open a URL in the browser with error handling. Returns True on success."""
        try:
            webbrowser.open(url)
            return True
        except (webbrowser.Error, OSError) as e:
            logger.warning("Failed to open browser for %s: %s", url, e)
            self.notify(
                build_browser_failure_error(),
                title="Browser",
                severity="error",
                timeout=8,
            )
            return False

    def action_open_pdf(self) -> None:
        record = self._session.current
        if record is None:
            return
        if not record.pdf_link:
            self.notify(build_missing_pdf_warning(), title="PDF", severity="warning")
            return
        self._safe_browser_open(record.pdf_link)

    @on(Button.Pressed, "#pdf-btn")
    def on_pdf_pressed(self) -> None:
        self.action_open_pdf()


def main() -> int:
    """Main entry point wrapper for CLI/bootstrap logic."""
    return _cli_main(app_factory=ArxivDeck)


if __name__ == "__main__":
    sys.exit(main())
