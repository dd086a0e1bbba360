"""CLI/bootstrap helpers for the arXiv Deck application."""

from __future__ import annotations

import argparse
import logging
import logging.handlers
import os
import random
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir

from arxiv_deck.action_messages import build_actionable_error
from arxiv_deck.config import KeyValueStore, load_bookmarks
from arxiv_deck.models import (
    CONFIG_APP_NAME,
    DEFAULT_CATEGORY,
    DEFAULT_MAX_RESULTS,
    MAX_RESULTS_LIMIT,
)
from arxiv_deck.parsing import format_authors
from arxiv_deck.session import DeckSession

logger = logging.getLogger(__name__)

NO_BOOKMARKS_TEXT = "No bookmarks yet."


def _configure_logging(debug: bool) -> None:
    """Configure logging. When debug=True, logs to file at DEBUG level."""
    if not debug:
        # Default: suppress all logging (TUI captures stderr)
        logging.disable(logging.CRITICAL)
        return

    log_dir = Path(user_config_dir(CONFIG_APP_NAME))
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "debug.log"

    handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    logging.root.addHandler(handler)
    logging.root.setLevel(logging.DEBUG)


def _configure_color_mode(color_mode: str) -> None:
    """Configure environment hints for terminal color behavior."""
    if color_mode == "never":
        os.environ["NO_COLOR"] = "1"
        os.environ.pop("FORCE_COLOR", None)
        return
    if color_mode == "always":
        os.environ["FORCE_COLOR"] = "1"
        os.environ.pop("NO_COLOR", None)
        return
    # auto
    os.environ.pop("FORCE_COLOR", None)


def _validate_interactive_tty() -> bool:
    """Return True when stdin/stdout are interactive terminals."""
    return bool(sys.stdin.isatty() and sys.stdout.isatty())


def _print_bookmarks(store: KeyValueStore) -> int:
    bookmarks = load_bookmarks(store)
    if not bookmarks:
        print(NO_BOOKMARKS_TEXT)
        return 0
    print(f"Bookmarked papers ({len(bookmarks)}):")
    for record in bookmarks:
        print(f"  {record.title}")
        print(f"    {format_authors(record.authors)}")
        if record.pdf_link:
            print(f"    {record.pdf_link}")
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Flip through the newest arXiv papers of a category, one card at a time"
    )
    parser.add_argument(
        "--category",
        type=str,
        default=DEFAULT_CATEGORY,
        help=f"arXiv category to browse (default: {DEFAULT_CATEGORY})",
    )
    parser.add_argument(
        "--max-results",
        type=int,
        default=DEFAULT_MAX_RESULTS,
        help=f"Number of newest papers to fetch (1-{MAX_RESULTS_LIMIT}; "
        f"default: {DEFAULT_MAX_RESULTS})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the paper shuffle (reproducible order)",
    )
    parser.add_argument(
        "--list-bookmarks",
        action="store_true",
        help="Print stored bookmarks and exit",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging to file (~/.config/arxiv-deck/debug.log)",
    )
    parser.add_argument(
        "--color",
        choices=["auto", "always", "never"],
        default="auto",
        help="Color output mode for terminal UI (default: auto)",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable terminal colors (equivalent to --color never)",
    )
    return parser


def main(
    argv: list[str] | None = None,
    *,
    store_factory: Callable[[], KeyValueStore] = KeyValueStore,
    configure_logging_fn: Callable[[bool], None] = _configure_logging,
    configure_color_mode_fn: Callable[[str], None] = _configure_color_mode,
    validate_interactive_tty_fn: Callable[[], bool] = _validate_interactive_tty,
    app_factory: Callable[..., Any] | None = None,
) -> int:
    """Main entry point. Returns exit code."""
    args = _build_parser().parse_args(argv)

    if not 1 <= args.max_results <= MAX_RESULTS_LIMIT:
        print(
            build_actionable_error(
                "start arxiv-deck",
                why=f"--max-results must be between 1 and {MAX_RESULTS_LIMIT}",
                next_step=f"pass a value such as --max-results {DEFAULT_MAX_RESULTS}",
            ),
            file=sys.stderr,
        )
        return 1
    category = args.category.strip()
    if not category:
        print(
            build_actionable_error(
                "start arxiv-deck",
                why="--category is empty",
                next_step=f"pass a category such as --category {DEFAULT_CATEGORY}",
            ),
            file=sys.stderr,
        )
        return 1

    color_mode = "never" if args.no_color else args.color
    configure_color_mode_fn(color_mode)
    configure_logging_fn(args.debug)
    logger.debug(
        "arxiv-deck starting: category=%s, max_results=%d, seed=%s",
        category,
        args.max_results,
        args.seed,
    )

    store = store_factory()

    if args.list_bookmarks:
        return _print_bookmarks(store)

    if not validate_interactive_tty_fn():
        print(
            "Error: arxiv-deck requires an interactive TTY for the full UI.",
            file=sys.stderr,
        )
        print("Next steps:", file=sys.stderr)
        print("  - Run arxiv-deck directly in a terminal session", file=sys.stderr)
        print("  - Use --list-bookmarks for non-interactive output", file=sys.stderr)
        print("  - Use --help for command documentation", file=sys.stderr)
        return 2

    if app_factory is None:
        from arxiv_deck.app import ArxivDeck as _ArxivDeck

        app_factory = _ArxivDeck

    app = app_factory(
        DeckSession(store),
        category=category,
        max_results=args.max_results,
        rng=random.Random(args.seed),
    )
    app.run()
    return 0


__all__ = [
    "NO_BOOKMARKS_TEXT",
    "_configure_color_mode",
    "_configure_logging",
    "_validate_interactive_tty",
    "main",
]
