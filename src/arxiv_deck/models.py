"""Data models and constants for the arXiv Deck application."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

# Application identity (single source of truth for platformdirs config paths)
CONFIG_APP_NAME = "arxiv-deck"

# arXiv feed constants
ARXIV_API_URL = "https://export.arxiv.org/api/query"
ARXIV_API_TIMEOUT = 30
ARXIV_API_USER_AGENT = "arxiv-deck/1.0"
DEFAULT_CATEGORY = "cs.AI"
DEFAULT_MAX_RESULTS = 100
MAX_RESULTS_LIMIT = 100

# Sentinel values substituted for missing feed fields
NO_TITLE = "No title"
NO_ABSTRACT = "No abstract"
NO_PUBLISH_DATE = "No publish date"
ET_AL = "et al."
MAX_AUTHORS = 3

PDF_MIME_TYPE = "application/pdf"


@dataclass(slots=True)
class PaperRecord:
    """One paper from the feed. Two records are the same paper iff pdf_link matches."""

    title: str = NO_TITLE
    summary: str = NO_ABSTRACT
    published: str = NO_PUBLISH_DATE
    authors: list[str] = field(default_factory=list)
    pdf_link: str = ""


class LoadState(Enum):
    """Lifecycle of the paper sequence for one session."""

    LOADING = "loading"
    READY = "ready"
    EMPTY = "empty"
    ERROR = "error"


__all__ = [
    "ARXIV_API_TIMEOUT",
    "ARXIV_API_URL",
    "ARXIV_API_USER_AGENT",
    "CONFIG_APP_NAME",
    "DEFAULT_CATEGORY",
    "DEFAULT_MAX_RESULTS",
    "ET_AL",
    "MAX_AUTHORS",
    "MAX_RESULTS_LIMIT",
    "NO_ABSTRACT",
    "NO_PUBLISH_DATE",
    "NO_TITLE",
    "PDF_MIME_TYPE",
    "LoadState",
    "PaperRecord",
]
