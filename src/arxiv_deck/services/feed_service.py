"""arXiv feed fetch: one GET, parse to records, uniform shuffle."""

from __future__ import annotations

import logging
import random
import time

import httpx

from arxiv_deck.models import (
    ARXIV_API_TIMEOUT,
    ARXIV_API_URL,
    ARXIV_API_USER_AGENT,
    DEFAULT_CATEGORY,
    DEFAULT_MAX_RESULTS,
    MAX_RESULTS_LIMIT,
    PaperRecord,
)
from arxiv_deck.parsing import parse_feed

logger = logging.getLogger(__name__)

NETWORK_ERROR_MESSAGE = "Network response was not ok"


class FetchError(Exception):
    """Base class for failures that end a feed load."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NetworkError(FetchError):
    """Raised on a non-2xx response or a transport failure."""


class ParseError(FetchError):
    """Raised when the response body cannot be decoded or walked as XML."""


def coerce_max_results(value: int) -> int:
    """Clamp the requested entry count to the feed's accepted range."""
    return max(1, min(value, MAX_RESULTS_LIMIT))


def build_feed_params(
    category: str = DEFAULT_CATEGORY,
    max_results: int = DEFAULT_MAX_RESULTS,
) -> dict[str, str | int]:
    """Query parameters for the newest-first listing of one category."""
    return {
        "search_query": f"cat:{category.strip() or DEFAULT_CATEGORY}",
        "max_results": coerce_max_results(max_results),
        "sortBy": "submittedDate",
        "sortOrder": "descending",
    }


def shuffle_papers(
    papers: list[PaperRecord], rng: random.Random | None = None
) -> list[PaperRecord]:
    """Return a uniformly shuffled copy of papers (Fisher–Yates via random.shuffle)."""
    shuffled = list(papers)
    (rng or random.Random()).shuffle(shuffled)
    return shuffled


async def _get_feed(
    client: httpx.AsyncClient, params: dict[str, str | int]
) -> httpx.Response:
    return await client.get(
        ARXIV_API_URL,
        params=params,
        headers={"User-Agent": ARXIV_API_USER_AGENT},
        timeout=ARXIV_API_TIMEOUT,
    )


async def fetch_papers(
    *,
    client: httpx.AsyncClient | None = None,
    category: str = DEFAULT_CATEGORY,
    max_results: int = DEFAULT_MAX_RESULTS,
    rng: random.Random | None = None,
) -> list[PaperRecord]:
    """Fetch the feed once and return the shuffled paper sequence.

    Raises:
        NetworkError: On a non-success status or transport failure.
        ParseError: When the body is not a readable feed document.
    """
    params = build_feed_params(category, max_results)
    t0 = time.monotonic()
    try:
        if client is not None:
            response = await _get_feed(client, params)
        else:
            async with httpx.AsyncClient() as tmp_client:
                response = await _get_feed(tmp_client, params)
    except httpx.HTTPError as exc:
        logger.warning("arXiv feed request failed: %s", exc)
        raise NetworkError(str(exc) or NETWORK_ERROR_MESSAGE) from exc

    if not response.is_success:
        logger.warning("arXiv feed returned HTTP %s", response.status_code)
        raise NetworkError(NETWORK_ERROR_MESSAGE)

    try:
        papers = parse_feed(response.text)
    except Exception as exc:
        logger.warning("Failed to parse arXiv feed: %s", exc)
        raise ParseError(str(exc)) from exc

    logger.debug(
        "Fetched %d papers for %s in %.3fs",
        len(papers),
        params["search_query"],
        time.monotonic() - t0,
    )
    return shuffle_papers(papers, rng)


__all__ = [
    "NETWORK_ERROR_MESSAGE",
    "FetchError",
    "NetworkError",
    "ParseError",
    "build_feed_params",
    "coerce_max_results",
    "fetch_papers",
    "shuffle_papers",
]
