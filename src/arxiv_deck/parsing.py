"""Atom feed parsing, LaTeX cleaning, and display formatting for paper records."""

from __future__ import annotations

import logging
import re
import time
import xml.etree.ElementTree as ET
from collections.abc import Iterator
from datetime import datetime

from arxiv_deck.models import (
    ET_AL,
    MAX_AUTHORS,
    NO_ABSTRACT,
    NO_PUBLISH_DATE,
    NO_TITLE,
    PDF_MIME_TYPE,
    PaperRecord,
)

logger = logging.getLogger(__name__)

# Display format for publish dates (e.g., "Mon, 15 Jan 2024")
DISPLAY_DATE_FORMAT = "%a, %d %b %Y"

# Placeholder using control characters (cannot appear in academic text)
_ESCAPED_DOLLAR = "\x00ESCAPED_DOLLAR\x00"

# Pre-compiled regex patterns for LaTeX cleaning
# Each tuple is (pattern, replacement) applied in order
_LATEX_PATTERNS: list[tuple[re.Pattern[str], str]] = [
    # Text formatting commands: \textbf{text} -> text, \emph{text} -> text
    (re.compile(r"\\text(?:tt|bf|it|rm|sf)\{([^}]*)\}"), r"\1"),
    (re.compile(r"\\emph\{([^}]*)\}"), r"\1"),
    (re.compile(r"\\(?:bf|it|tt|rm|sf)\{([^}]*)\}"), r"\1"),
    # Escaped dollar signs: \$ -> placeholder (restored later)
    (re.compile(r"\\\$"), _ESCAPED_DOLLAR),
    # Math mode: $x^2$ -> x^2 (extracts content, non-greedy)
    (re.compile(r"\$([^$]*)\$"), r"\1"),
    # Restore escaped dollar signs: placeholder -> $
    (re.compile(re.escape(_ESCAPED_DOLLAR)), "$"),
    # Accented characters: \'e -> é, \"a -> ä, \c{c} -> ç, etc.
    (re.compile(r"\\c\{c\}"), "ç"),
    (re.compile(r"\\c\{C\}"), "Ç"),
    (re.compile(r"\\'e"), "é"),
    (re.compile(r"\\'a"), "á"),
    (re.compile(r"\\'o"), "ó"),
    (re.compile(r"\\'i"), "í"),
    (re.compile(r"\\'u"), "ú"),
    (re.compile(r'\\"\{a\}'), "ä"),
    (re.compile(r'\\"\{o\}'), "ö"),
    (re.compile(r'\\"\{u\}'), "ü"),
    (re.compile(r"\\~n"), "ñ"),
    (re.compile(r"\\&"), "&"),
    # Generic command with braces: \foo{content} -> content
    (re.compile(r"\\[a-zA-Z]+\{([^}]*)\}"), r"\1"),
    # Standalone commands: \foo -> (removed)
    (re.compile(r"\\[a-zA-Z]+(?:\s|$)"), " "),
]


def clean_latex(text: str) -> str:
    """Strip common LaTeX markup so titles and abstracts read as plain text.

    Patterns are applied until the text stops changing, which unwraps nested
    constructs such as ``\\textbf{$O(n^{2})$}``. Whitespace is collapsed.
    """
    if "\\" not in text and "$" not in text:
        return " ".join(text.split())

    prev_text = None
    while prev_text != text:
        prev_text = text
        for pattern, replacement in _LATEX_PATTERNS:
            text = pattern.sub(replacement, text)

    return " ".join(text.split())


def format_published_date(published: str) -> str:
    """Render an Atom timestamp for display; unparsable values are shown as-is."""
    cleaned = published.strip()
    if not cleaned or cleaned == NO_PUBLISH_DATE:
        return NO_PUBLISH_DATE

    normalized = cleaned
    if normalized.endswith("Z"):
        normalized = normalized[:-1] + "+00:00"

    try:
        return datetime.fromisoformat(normalized).strftime(DISPLAY_DATE_FORMAT)
    except ValueError:
        return cleaned


def format_authors(authors: list[str]) -> str:
    """Join author names (and a trailing "et al." marker) for display."""
    return ", ".join(authors)


def _local_name(tag: object) -> str:
    """Return an element tag without its ``{namespace}`` prefix."""
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1]


def _descendants(node: ET.Element, name: str) -> Iterator[ET.Element]:
    """Yield descendants of node (excluding node) whose local tag name is ``name``."""
    for element in node.iter():
        if element is not node and _local_name(element.tag) == name:
            yield element


def _first_descendant(node: ET.Element, name: str) -> ET.Element | None:
    return next(_descendants(node, name), None)


def _text_content(node: ET.Element | None) -> str:
    """Concatenate all text under node, like the DOM ``textContent`` property."""
    if node is None:
        return ""
    return "".join(node.itertext())


def _extract_authors(entry: ET.Element) -> list[str]:
    author_nodes = list(_descendants(entry, "author"))
    authors: list[str] = []
    for author in author_nodes[:MAX_AUTHORS]:
        name = _text_content(_first_descendant(author, "name")).strip()
        if name:
            authors.append(name)
    if len(author_nodes) > MAX_AUTHORS:
        authors.append(ET_AL)
    return authors


def _extract_pdf_link(entry: ET.Element) -> str:
    for link in _descendants(entry, "link"):
        if link.get("type") == PDF_MIME_TYPE:
            return link.get("href") or ""
    return ""


def parse_entry(entry: ET.Element) -> PaperRecord:
    """Convert one Atom ``entry`` element into a PaperRecord.

    Every field is extracted independently; a missing element yields its
    sentinel value instead of an error.
    """
    title = _text_content(_first_descendant(entry, "title")).strip()
    summary = _text_content(_first_descendant(entry, "summary")).strip()
    published = _text_content(_first_descendant(entry, "published"))

    return PaperRecord(
        title=title or NO_TITLE,
        summary=summary or NO_ABSTRACT,
        published=published or NO_PUBLISH_DATE,
        authors=_extract_authors(entry),
        pdf_link=_extract_pdf_link(entry),
    )


def parse_feed(xml_text: str) -> list[PaperRecord]:
    """Parse an arXiv Atom feed into PaperRecords in document order.

    Raises:
        ValueError: If the document is empty or is not well-formed XML.
    """
    if not xml_text.strip():
        raise ValueError("Empty arXiv feed response")

    t0 = time.monotonic()
    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError as exc:
        raise ValueError(f"Invalid arXiv feed XML: {exc}") from exc

    entries = [root] if _local_name(root.tag) == "entry" else list(_descendants(root, "entry"))
    records = [parse_entry(entry) for entry in entries]

    logger.debug("Parsed %d feed entries in %.3fs", len(records), time.monotonic() - t0)
    return records


__all__ = [
    "DISPLAY_DATE_FORMAT",
    "clean_latex",
    "format_authors",
    "format_published_date",
    "parse_entry",
    "parse_feed",
]
