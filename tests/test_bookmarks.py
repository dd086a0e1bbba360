"""Tests for bookmark set operations and the stored JSON shape."""

from __future__ import annotations

import json

from arxiv_deck.bookmarks import (
    bookmarks_from_json,
    bookmarks_to_json,
    is_bookmarked,
    record_from_dict,
    record_to_dict,
    toggle_bookmark,
)


def test_toggle_adds_then_removes(make_record):
    record = make_record(1)
    added = toggle_bookmark(record, [])
    assert added == [record]
    assert toggle_bookmark(record, added) == []


def test_toggle_returns_new_list(make_record):
    existing = [make_record(1)]
    result = toggle_bookmark(make_record(2), existing)
    assert result is not existing
    assert len(existing) == 1


def test_toggle_preserves_insertion_order(make_record):
    a, b, c = make_record(1), make_record(2), make_record(3)
    bookmarks: list = []
    for record in (a, b, c):
        bookmarks = toggle_bookmark(record, bookmarks)
    bookmarks = toggle_bookmark(b, bookmarks)
    assert [r.pdf_link for r in bookmarks] == [a.pdf_link, c.pdf_link]


def test_identity_is_pdf_link(make_record):
    stored = make_record(1, title="Old title")
    fresh = make_record(1, title="New title", summary="changed")
    assert is_bookmarked(fresh, [stored])
    assert toggle_bookmark(fresh, [stored]) == []


def test_record_dict_uses_camel_case_pdf_link(make_record):
    data = record_to_dict(make_record(7))
    assert set(data) == {"title", "summary", "published", "authors", "pdfLink"}
    assert data["pdfLink"].endswith("00007v1")
    assert record_from_dict(data) == make_record(7)


def test_record_from_dict_rejects_bad_shapes():
    assert record_from_dict("nope") is None
    assert record_from_dict({"title": "x"}) is None
    assert (
        record_from_dict(
            {"title": "t", "summary": "s", "published": "p", "authors": "A", "pdfLink": "l"}
        )
        is None
    )


def test_json_preserves_order_and_fields(make_record):
    records = [make_record(3, authors=["A", "B", "C", "et al."]), make_record(1)]
    assert bookmarks_from_json(bookmarks_to_json(records)) == records


def test_from_json_tolerates_missing_and_invalid():
    assert bookmarks_from_json(None) == []
    assert bookmarks_from_json("") == []
    assert bookmarks_from_json("{not json") == []
    assert bookmarks_from_json('{"a": 1}') == []


def test_from_json_drops_malformed_entries(make_record, caplog):
    good = record_to_dict(make_record(1))
    text = json.dumps([good, {"title": 3}, None])
    with caplog.at_level("WARNING", logger="arxiv_deck.bookmarks"):
        result = bookmarks_from_json(text)
    assert result == [make_record(1)]
    assert "Dropping malformed stored bookmark" in caplog.text
