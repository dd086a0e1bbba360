"""Property-based tests using Hypothesis.

Verifies invariants of navigation, bookmark sets, shuffling and feed parsing.
Each test runs 50 examples in CI, 200 in dev.

Run:
    pytest tests/test_properties.py -v
    pytest tests/test_properties.py -v --hypothesis-seed=0  # reproducible
"""

from __future__ import annotations

import random
from xml.sax.saxutils import escape

import hypothesis.strategies as st
from hypothesis import given, settings

from arxiv_deck.bookmarks import bookmarks_from_json, bookmarks_to_json, toggle_bookmark
from arxiv_deck.models import ET_AL, MAX_AUTHORS, PaperRecord
from arxiv_deck.navigation import next_index, previous_index
from arxiv_deck.parsing import clean_latex, parse_feed
from arxiv_deck.services.feed_service import shuffle_papers

# ── Hypothesis profiles ─────────────────────────────────────────────
settings.register_profile("ci", max_examples=50, deadline=None)
settings.register_profile("dev", max_examples=200, deadline=None)
settings.load_profile("ci")

# ── Custom strategies ────────────────────────────────────────────────

_xml_text = st.text(
    alphabet=st.characters(exclude_categories=("Cs", "Cc", "Cn")),
    max_size=40,
).filter(lambda s: s.strip() != ET_AL)


@st.composite
def paper_records(draw: st.DrawFn) -> PaperRecord:
    return PaperRecord(
        title=draw(st.text(max_size=30)),
        summary=draw(st.text(max_size=60)),
        published=draw(st.text(max_size=25)),
        authors=draw(st.lists(st.text(max_size=15), max_size=4)),
        pdf_link=draw(st.text(min_size=1, max_size=20)),
    )


@st.composite
def cursors(draw: st.DrawFn) -> tuple[int, int]:
    length = draw(st.integers(min_value=1, max_value=500))
    return draw(st.integers(min_value=0, max_value=length - 1)), length


# ── Navigation ───────────────────────────────────────────────────────


@given(cursors())
def test_next_then_previous_is_identity(pos: tuple[int, int]) -> None:
    cursor, length = pos
    assert previous_index(next_index(cursor, length), length) == cursor


@given(cursors())
def test_cursor_stays_in_bounds(pos: tuple[int, int]) -> None:
    cursor, length = pos
    assert 0 <= next_index(cursor, length) < length
    assert 0 <= previous_index(cursor, length) < length


@given(st.integers(min_value=1, max_value=200))
def test_length_nexts_return_to_start(length: int) -> None:
    cursor = 0
    for _ in range(length):
        cursor = next_index(cursor, length)
    assert cursor == 0


@st.composite
def lengths_and_steps(draw: st.DrawFn) -> tuple[int, int]:
    length = draw(st.one_of(st.just(1), st.integers(min_value=1, max_value=60)))
    return length, draw(st.integers(min_value=0, max_value=200))


@given(lengths_and_steps())
def test_k_nexts_from_zero_land_on_k_mod_length(case: tuple[int, int]) -> None:
    length, steps = case
    cursor = 0
    for _ in range(steps):
        cursor = next_index(cursor, length)
    assert cursor == steps % length


@given(lengths_and_steps())
def test_k_previous_from_zero_counts_back_from_end(case: tuple[int, int]) -> None:
    length, steps = case
    cursor = 0
    for _ in range(steps):
        cursor = previous_index(cursor, length)
    assert cursor == (length - (steps % length)) % length


@given(cursors())
def test_previous_then_next_is_identity(pos: tuple[int, int]) -> None:
    cursor, length = pos
    assert next_index(previous_index(cursor, length), length) == cursor


# ── Bookmarks ────────────────────────────────────────────────────────


@given(st.lists(paper_records(), max_size=6, unique_by=lambda r: r.pdf_link), paper_records())
def test_double_toggle_restores_membership(
    bookmarks: list[PaperRecord], record: PaperRecord
) -> None:
    after = toggle_bookmark(record, toggle_bookmark(record, bookmarks))
    assert {b.pdf_link for b in after} == {b.pdf_link for b in bookmarks}

    others_before = [b for b in bookmarks if b.pdf_link != record.pdf_link]
    others_after = [b for b in after if b.pdf_link != record.pdf_link]
    assert [b.pdf_link for b in others_after] == [b.pdf_link for b in others_before]
    assert others_after == others_before
    if any(b.pdf_link == record.pdf_link for b in bookmarks):
        assert after[-1] == record


@given(st.lists(paper_records(), max_size=6))
def test_bookmark_json_preserves_records(records: list[PaperRecord]) -> None:
    assert bookmarks_from_json(bookmarks_to_json(records)) == records


# ── Shuffle ──────────────────────────────────────────────────────────


@given(st.lists(paper_records(), max_size=30), st.integers())
def test_shuffle_is_a_permutation(records: list[PaperRecord], seed: int) -> None:
    shuffled = shuffle_papers(records, random.Random(seed))
    assert sorted(shuffled, key=id) == sorted(records, key=id)


# ── Parsing ──────────────────────────────────────────────────────────


@given(st.lists(st.lists(_xml_text, max_size=6), max_size=5))
def test_parse_feed_counts_entries_and_caps_authors(author_lists: list[list[str]]) -> None:
    entries = "".join(
        "<entry>"
        + "".join(f"<author><name>{escape(name)}</name></author>" for name in names)
        + "</entry>"
        for names in author_lists
    )
    records = parse_feed(f'<feed xmlns="http://www.w3.org/2005/Atom">{entries}</feed>')
    assert len(records) == len(author_lists)
    for record, names in zip(records, author_lists):
        shown = [a for a in record.authors if a != ET_AL]
        assert len(shown) <= MAX_AUTHORS
        assert (ET_AL in record.authors) == (len(names) > MAX_AUTHORS)


@given(st.text(max_size=80))
def test_clean_latex_output_is_whitespace_normalized(text: str) -> None:
    cleaned = clean_latex(text)
    assert cleaned == cleaned.strip()
    assert "  " not in cleaned
