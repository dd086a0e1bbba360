"""Paper card widget: the single visible paper with its bookmark and PDF controls."""

from __future__ import annotations

from rich.markup import escape as escape_markup
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.events import MouseScrollDown, MouseScrollUp
from textual.widgets import Button, Static

from arxiv_deck.models import PaperRecord
from arxiv_deck.parsing import clean_latex, format_authors, format_published_date

BOOKMARKED_LABEL = "★ Bookmarked"
NOT_BOOKMARKED_LABEL = "☆ Bookmark"
VIEW_PDF_LABEL = "View PDF"


def escape_rich_text(text: str) -> str:
    """Escape text for safe Rich markup rendering."""
    return escape_markup(text) if text else ""


def bookmark_label(bookmarked: bool) -> str:
    return BOOKMARKED_LABEL if bookmarked else NOT_BOOKMARKED_LABEL


def render_card_markup(record: PaperRecord, palette: dict[str, str]) -> str:
    """Render the card body (title, authors, date, abstract) as Rich markup."""
    accent = palette["accent"]
    accent_alt = palette["accent_alt"]
    muted = palette["muted"]

    title = escape_rich_text(clean_latex(record.title))
    authors = escape_rich_text(clean_latex(format_authors(record.authors)))
    published = escape_rich_text(format_published_date(record.published))
    summary = escape_rich_text(clean_latex(record.summary))

    lines = [f"[bold {accent}]{title}[/]", ""]
    if authors:
        lines.append(f"[{accent_alt}]{authors}[/]")
    lines.append(f"[{muted}]Published: {published}[/]")
    lines.append("")
    lines.append(summary)
    if record.pdf_link:
        lines.append("")
        lines.append(f"[{muted}]{escape_rich_text(record.pdf_link)}[/]")
    return "\n".join(lines)


class CardScroll(VerticalScroll):
    """Scrollable card body. Never focused; wheel events pass through to the swipe surface."""

    can_focus = False

    def on_mouse_scroll_down(self, event: MouseScrollDown) -> None:
        event.prevent_default()

    def on_mouse_scroll_up(self, event: MouseScrollUp) -> None:
        event.prevent_default()


class PaperCard(Vertical):
    """Shows one paper; owns the per-card bookmark toggle and PDF link controls."""

    DEFAULT_CSS = """
    PaperCard {
        height: 1fr;
        border: round $th-border;
        background: $th-panel;
        padding: 1 2;
    }

    #card-scroll {
        height: 1fr;
        scrollbar-size-vertical: 1;
    }

    #card-body {
        height: auto;
        color: $th-text;
    }

    #card-actions {
        height: auto;
        align-horizontal: left;
    }

    #card-actions Button {
        margin-right: 2;
    }
    """

    def __init__(self, id: str | None = None) -> None:
        super().__init__(id=id)
        self._record: PaperRecord | None = None

    @property
    def record(self) -> PaperRecord | None:
        return self._record

    def compose(self) -> ComposeResult:
        with CardScroll(id="card-scroll"):
            yield Static("", id="card-body")
        with Horizontal(id="card-actions"):
            yield Button(NOT_BOOKMARKED_LABEL, id="bookmark-btn")
            yield Button(VIEW_PDF_LABEL, id="pdf-btn")

    def update_paper(self, record: PaperRecord, bookmarked: bool, palette: dict[str, str]) -> None:
        """Render record and the bookmark state on the card."""
        self._record = record
        self.query_one("#card-body", Static).update(render_card_markup(record, palette))
        self._get_scroll().scroll_home(animate=False)
        self.set_bookmarked(bookmarked)

    def set_bookmarked(self, bookmarked: bool) -> None:
        self.query_one("#bookmark-btn", Button).label = bookmark_label(bookmarked)

    def _get_scroll(self) -> CardScroll:
        return self.query_one("#card-scroll", CardScroll)

    def scroll_page(self, forward: bool) -> None:
        """Scroll the abstract by one page."""
        body = self._get_scroll()
        if forward:
            body.scroll_page_down(animate=False)
        else:
            body.scroll_page_up(animate=False)

    def scroll_edge(self, end: bool) -> None:
        """Jump to the top or the bottom of the abstract."""
        body = self._get_scroll()
        if end:
            body.scroll_end(animate=False)
        else:
            body.scroll_home(animate=False)


__all__ = [
    "BOOKMARKED_LABEL",
    "NOT_BOOKMARKED_LABEL",
    "VIEW_PDF_LABEL",
    "CardScroll",
    "PaperCard",
    "bookmark_label",
    "escape_rich_text",
    "render_card_markup",
]
