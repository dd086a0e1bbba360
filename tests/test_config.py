"""Tests for the JSON key-value store and persisted preferences."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

from arxiv_deck.config import (
    BOOKMARKS_KEY,
    DARK_MODE_KEY,
    STORAGE_FILENAME,
    KeyValueStore,
    get_storage_path,
    load_bookmarks,
    load_dark_mode,
    save_bookmarks,
    save_dark_mode,
)


def test_storage_path_uses_platformdirs(tmp_path):
    with patch("arxiv_deck.config.user_config_dir", return_value=str(tmp_path)) as mock_dir:
        path = get_storage_path()
    mock_dir.assert_called_once_with("arxiv-deck")
    assert path == tmp_path / STORAGE_FILENAME


class TestKeyValueStore:
    def test_get_absent_key(self, store):
        assert store.get("missing") is None
        assert not store.path.exists()

    def test_set_creates_directory_and_file(self, store):
        assert store.set("k", "v") is True
        assert json.loads(store.path.read_text(encoding="utf-8")) == {"k": "v"}

    def test_set_keeps_other_keys(self, store):
        store.set("a", "1")
        store.set("b", "2")
        assert store.get("a") == "1"
        assert store.get("b") == "2"

    def test_no_temp_files_left_behind(self, store):
        store.set("a", "1")
        assert [p.name for p in store.path.parent.iterdir()] == [STORAGE_FILENAME]

    def test_corrupt_file_reads_as_empty(self, store, caplog):
        store.path.parent.mkdir(parents=True)
        store.path.write_text("{broken", encoding="utf-8")
        with caplog.at_level("WARNING", logger="arxiv_deck.config"):
            assert store.get("a") is None
        assert "invalid JSON" in caplog.text

    def test_non_object_root_reads_as_empty(self, store):
        store.path.parent.mkdir(parents=True)
        store.path.write_text("[1, 2]", encoding="utf-8")
        assert store.get("a") is None

    def test_non_string_values_ignored(self, store):
        store.path.parent.mkdir(parents=True)
        store.path.write_text(json.dumps({"a": 1, "b": "ok"}), encoding="utf-8")
        assert store.get("a") is None
        assert store.get("b") == "ok"

    def test_write_failure_returns_false(self, store):
        with patch("arxiv_deck.config.os.replace", side_effect=OSError("disk full")):
            assert store.set("a", "1") is False
        assert not store.path.exists()


class TestBookmarksPersistence:
    def test_round_trip_through_store(self, store, make_record):
        records = [make_record(2), make_record(1)]
        assert save_bookmarks(store, records) is True
        assert load_bookmarks(KeyValueStore(store.path)) == records

    def test_stored_as_json_string_value(self, store, make_record):
        save_bookmarks(store, [make_record(1)])
        raw = json.loads(store.path.read_text(encoding="utf-8"))
        assert isinstance(raw[BOOKMARKS_KEY], str)
        assert json.loads(raw[BOOKMARKS_KEY])[0]["pdfLink"] == make_record(1).pdf_link

    def test_absent_means_empty(self, store):
        assert load_bookmarks(store) == []


class TestDarkModePersistence:
    def test_default_is_light(self, store):
        assert load_dark_mode(store) is False

    def test_round_trip(self, store):
        save_dark_mode(store, True)
        assert store.get(DARK_MODE_KEY) == "true"
        assert load_dark_mode(store) is True
        save_dark_mode(store, False)
        assert load_dark_mode(store) is False

    def test_invalid_value_falls_back_to_light(self, store):
        store.set(DARK_MODE_KEY, "yes please")
        assert load_dark_mode(store) is False
        store.set(DARK_MODE_KEY, "1")
        assert load_dark_mode(store) is False


def test_store_accepts_explicit_path(tmp_path):
    path = Path(tmp_path) / "custom.json"
    store = KeyValueStore(path)
    store.set("x", "y")
    assert path.exists()
