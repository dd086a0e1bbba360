"""Durable storage: a JSON key-value store holding bookmarks and the display mode."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir

from arxiv_deck.bookmarks import bookmarks_from_json, bookmarks_to_json
from arxiv_deck.models import CONFIG_APP_NAME, PaperRecord

logger = logging.getLogger(__name__)

# ============================================================================
# Storage file
# ============================================================================
#
# storage.json is a flat JSON object of string keys to string values. Values
# are themselves JSON documents:
#
#   Key                  Value                                 Default
#   ───────────────────  ────────────────────────────────────  ─────────
#   bookmarked_papers    JSON array of bookmark objects        []
#   dark_mode            "true" / "false"                      false
#
STORAGE_FILENAME = "storage.json"
BOOKMARKS_KEY = "bookmarked_papers"
DARK_MODE_KEY = "dark_mode"


def get_storage_path() -> Path:
    """Get the path to the storage file.

    Uses platformdirs for cross-platform config directory:
    - Linux: ~/.config/arxiv-deck/storage.json
    - macOS: ~/Library/Application Support/arxiv-deck/storage.json
    - Windows: %APPDATA%/arxiv-deck/storage.json
    """
    return Path(user_config_dir(CONFIG_APP_NAME)) / STORAGE_FILENAME


def _parse_store(data: Any) -> dict[str, str]:
    """Keep only string-to-string pairs from a decoded storage document."""
    if not isinstance(data, dict):
        logger.warning("Storage file root is not an object, using empty store")
        return {}
    return {k: v for k, v in data.items() if isinstance(k, str) and isinstance(v, str)}


class KeyValueStore:
    """Persistent string key-value store backed by a single JSON file.

    Every ``set`` re-reads the file and rewrites it in full, so concurrent
    writers from other processes resolve as last-write-wins.
    """

    def __init__(self, path: Path | None = None) -> None:
        self._path = path if path is not None else get_storage_path()

    @property
    def path(self) -> Path:
        return self._path

    def _read_all(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            return _parse_store(json.loads(self._path.read_text(encoding="utf-8")))
        except json.JSONDecodeError as e:
            logger.warning("Storage file has invalid JSON, using empty store: %s", e)
        except OSError as e:
            logger.warning("Could not read storage file, using empty store: %s", e)
        return {}

    def get(self, key: str) -> str | None:
        """Return the stored string for key, or None when absent."""
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> bool:
        """Store value under key atomically. Returns True on success."""
        data = self._read_all()
        data[key] = value
        return self._write_all(data)

    def _write_all(self, data: dict[str, str]) -> bool:
        """Write the store via tempfile + os.replace() so a crash never truncates it."""
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            json_str = json.dumps(data, indent=2, ensure_ascii=False)
            fd, tmp_path = tempfile.mkstemp(
                dir=self._path.parent, suffix=".tmp", prefix=".storage-"
            )
            closed = False
            try:
                os.write(fd, json_str.encode("utf-8"))
                os.close(fd)
                closed = True
                os.replace(tmp_path, self._path)
            except BaseException:
                if not closed:
                    os.close(fd)
                try:
                    os.unlink(tmp_path)
                except OSError:
                    pass
                raise
            return True
        except OSError as e:
            logger.error("Failed to save storage file: %s", e)
            return False


def load_bookmarks(store: KeyValueStore) -> list[PaperRecord]:
    """Load the bookmark set; absent or malformed data yields an empty list."""
    return bookmarks_from_json(store.get(BOOKMARKS_KEY))


def save_bookmarks(store: KeyValueStore, bookmarks: list[PaperRecord]) -> bool:
    """Persist the full bookmark set."""
    return store.set(BOOKMARKS_KEY, bookmarks_to_json(bookmarks))


def load_dark_mode(store: KeyValueStore) -> bool:
    """Load the display-mode preference (True = dark). Defaults to light."""
    raw = store.get(DARK_MODE_KEY)
    if raw is None:
        return False
    try:
        value = json.loads(raw)
    except json.JSONDecodeError:
        logger.warning("Stored dark mode preference is not valid JSON: %r", raw)
        return False
    if not isinstance(value, bool):
        logger.warning("Stored dark mode preference is not a boolean: %r", value)
        return False
    return value


def save_dark_mode(store: KeyValueStore, dark_mode: bool) -> bool:
    """Persist the display-mode preference."""
    return store.set(DARK_MODE_KEY, json.dumps(bool(dark_mode)))


__all__ = [
    "BOOKMARKS_KEY",
    "CONFIG_APP_NAME",
    "DARK_MODE_KEY",
    "STORAGE_FILENAME",
    "KeyValueStore",
    "get_storage_path",
    "load_bookmarks",
    "load_dark_mode",
    "save_bookmarks",
    "save_dark_mode",
]
