"""Bookmark set operations and the persisted bookmark JSON shape."""

from __future__ import annotations

import json
import logging
from typing import Any

from arxiv_deck.models import PaperRecord

logger = logging.getLogger(__name__)

# Stored field names (pdfLink is camelCase in the storage file)
_STORED_FIELDS = ("title", "summary", "published", "authors", "pdfLink")


def is_bookmarked(record: PaperRecord, bookmarks: list[PaperRecord]) -> bool:
    """Return True when a bookmark shares the record's pdf_link."""
    return any(b.pdf_link == record.pdf_link for b in bookmarks)


def toggle_bookmark(record: PaperRecord, bookmarks: list[PaperRecord]) -> list[PaperRecord]:
    """Return a new bookmark list with the record removed if present, else appended."""
    if is_bookmarked(record, bookmarks):
        return [b for b in bookmarks if b.pdf_link != record.pdf_link]
    return [*bookmarks, record]


def record_to_dict(record: PaperRecord) -> dict[str, Any]:
    """Serialize a PaperRecord to its stored JSON object."""
    return {
        "title": record.title,
        "summary": record.summary,
        "published": record.published,
        "authors": list(record.authors),
        "pdfLink": record.pdf_link,
    }


def record_from_dict(data: Any) -> PaperRecord | None:
    """Deserialize a stored bookmark, returning None when the shape is wrong."""
    if not isinstance(data, dict):
        return None
    if not all(isinstance(data.get(key), str) for key in _STORED_FIELDS if key != "authors"):
        return None
    authors = data.get("authors")
    if not isinstance(authors, list) or not all(isinstance(a, str) for a in authors):
        return None
    return PaperRecord(
        title=data["title"],
        summary=data["summary"],
        published=data["published"],
        authors=list(authors),
        pdf_link=data["pdfLink"],
    )


def bookmarks_to_json(bookmarks: list[PaperRecord]) -> str:
    """Serialize the bookmark set as a JSON array."""
    return json.dumps([record_to_dict(b) for b in bookmarks], ensure_ascii=False)


def bookmarks_from_json(text: str | None) -> list[PaperRecord]:
    """Parse a stored bookmark array, dropping malformed entries.

    Missing or invalid data yields an empty list rather than an error.
    """
    if not text:
        return []
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        logger.warning("Stored bookmarks are not valid JSON, starting empty: %s", e)
        return []
    if not isinstance(data, list):
        logger.warning("Stored bookmarks are not a JSON array, starting empty")
        return []

    result: list[PaperRecord] = []
    for item in data:
        record = record_from_dict(item)
        if record is None:
            logger.warning("Dropping malformed stored bookmark: %r", item)
            continue
        result.append(record)
    return result


__all__ = [
    "bookmarks_from_json",
    "bookmarks_to_json",
    "is_bookmarked",
    "record_from_dict",
    "record_to_dict",
    "toggle_bookmark",
]
