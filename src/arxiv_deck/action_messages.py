"""UI-facing copy for notices, status lines and CLI errors."""

from __future__ import annotations

from arxiv_deck.models import PaperRecord
from arxiv_deck.parsing import clean_latex

NOTICE_TITLE_MAX_LEN = 50


def _ensure_sentence(text: str) -> str:
    """Return text with terminal sentence punctuation."""
    cleaned = text.strip()
    if not cleaned:
        return ""
    if cleaned.endswith((".", "!", "?")):
        return cleaned
    return f"{cleaned}."


def build_next_step_hint(next_step: str) -> str:
    return f"Next step: {_ensure_sentence(next_step)}"


def build_actionable_error(
    action: str,
    *,
    next_step: str,
    why: str | None = None,
) -> str:
    """Build a 2-3 line actionable error message."""
    lines = [f"Could not {action.strip()}."]
    if why:
        lines.append(f"Why: {_ensure_sentence(why)}")
    lines.append(build_next_step_hint(next_step))
    return "\n".join(lines)


def short_title(record: PaperRecord, max_len: int = NOTICE_TITLE_MAX_LEN) -> str:
    """Plain-text title truncated for one-line notices."""
    title = clean_latex(record.title)
    if len(title) <= max_len:
        return title
    return title[:max_len] + "..."


def build_bookmark_toggled_notice(record: PaperRecord, bookmarked: bool) -> str:
    verb = "Bookmarked" if bookmarked else "Removed bookmark"
    return f"{verb}: {short_title(record)}"


def build_storage_failure_error() -> str:
    return build_actionable_error(
        "save your changes",
        why="the storage file could not be written",
        next_step="check permissions on the arxiv-deck config folder",
    )


def build_missing_pdf_warning() -> str:
    return build_actionable_error(
        "open the PDF",
        why="this entry has no PDF link in the feed",
        next_step="move to another paper with the arrow keys",
    )


def build_browser_failure_error() -> str:
    return build_actionable_error(
        "open your browser",
        why="the system browser command failed",
        next_step="open the link shown on the card manually",
    )


def build_bookmark_not_loaded_warning(record: PaperRecord) -> str:
    return (
        f"{_ensure_sentence(short_title(record))}\n"
        "This bookmark is not in the current listing."
    )


__all__ = [
    "NOTICE_TITLE_MAX_LEN",
    "build_actionable_error",
    "build_bookmark_not_loaded_warning",
    "build_bookmark_toggled_notice",
    "build_browser_failure_error",
    "build_missing_pdf_warning",
    "build_next_step_hint",
    "build_storage_failure_error",
    "short_title",
]
