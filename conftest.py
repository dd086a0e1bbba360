"""Shared test fixtures for arXiv Deck tests."""

from __future__ import annotations

from xml.sax.saxutils import escape, quoteattr

import pytest

from arxiv_deck.config import KeyValueStore
from arxiv_deck.models import PaperRecord

ATOM_NS = "http://www.w3.org/2005/Atom"

# ── Factories ────────────────────────────────────────────────────────────────


@pytest.fixture
def make_record():
    """Factory fixture for creating PaperRecord instances with sensible defaults."""

    def _make(
        n: int = 1,
        *,
        title: str | None = None,
        summary: str = "Test abstract content.",
        published: str = "2024-01-15T18:00:00Z",
        authors: list[str] | None = None,
        pdf_link: str | None = None,
    ) -> PaperRecord:
        return PaperRecord(
            title=title if title is not None else f"Paper {n}",
            summary=summary,
            published=published,
            authors=list(authors) if authors is not None else ["Test Author"],
            pdf_link=pdf_link if pdf_link is not None else f"https://arxiv.org/pdf/2401.{n:05d}v1",
        )

    return _make


def _entry_xml(entry: dict) -> str:
    parts = ["<entry>"]
    if entry.get("title") is not None:
        parts.append(f"<title>{escape(entry['title'])}</title>")
    if entry.get("summary") is not None:
        parts.append(f"<summary>{escape(entry['summary'])}</summary>")
    if entry.get("published") is not None:
        parts.append(f"<published>{escape(entry['published'])}</published>")
    for name in entry.get("authors", []):
        parts.append(f"<author><name>{escape(name)}</name></author>")
    if entry.get("pdf_link") is not None:
        parts.append(
            f"<link title=\"pdf\" href={quoteattr(entry['pdf_link'])} "
            'rel="related" type="application/pdf"/>'
        )
    parts.append("</entry>")
    return "".join(parts)


@pytest.fixture
def make_feed():
    """Factory fixture building an arXiv-style Atom document from entry dicts.

    Each dict may carry ``title``, ``summary``, ``published``, ``authors`` and
    ``pdf_link``; omitted keys produce entries without that element.
    """

    def _make(*entries: dict) -> str:
        body = "".join(_entry_xml(entry) for entry in entries)
        return (
            '<?xml version="1.0" encoding="UTF-8"?>'
            f'<feed xmlns="{ATOM_NS}"><title>ArXiv Query</title>{body}</feed>'
        )

    return _make


@pytest.fixture
def store(tmp_path) -> KeyValueStore:
    """A KeyValueStore backed by a temp storage file."""
    return KeyValueStore(tmp_path / "arxiv-deck" / "storage.json")
