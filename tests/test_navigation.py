"""Tests for cursor navigation and input translation."""

from __future__ import annotations

import pytest

from arxiv_deck.navigation import (
    SWIPE_THRESHOLD,
    InputEvent,
    NavAction,
    apply_action,
    detect_swipe,
    jump_to,
    next_index,
    previous_index,
    translate_input,
    wheel_event,
)


@pytest.mark.parametrize(
    ("event", "action"),
    [
        (InputEvent.SWIPE_UP, NavAction.NEXT),
        (InputEvent.KEY_DOWN, NavAction.NEXT),
        (InputEvent.WHEEL_DOWN, NavAction.NEXT),
        (InputEvent.SWIPE_DOWN, NavAction.PREVIOUS),
        (InputEvent.KEY_UP, NavAction.PREVIOUS),
        (InputEvent.WHEEL_UP, NavAction.PREVIOUS),
    ],
)
def test_translate_input(event, action):
    assert translate_input(event) is action


def test_next_wraps_to_first():
    assert next_index(0, 3) == 1
    assert next_index(2, 3) == 0


def test_previous_wraps_to_last():
    assert previous_index(1, 3) == 0
    assert previous_index(0, 3) == 2


def test_single_element_sequence_stays_put():
    assert next_index(0, 1) == 0
    assert previous_index(0, 1) == 0


@pytest.mark.parametrize("fn", [next_index, previous_index])
def test_empty_sequence_rejected(fn):
    with pytest.raises(ValueError):
        fn(0, 0)


def test_apply_action_dispatches():
    assert apply_action(NavAction.NEXT, 4, 5) == 0
    assert apply_action(NavAction.PREVIOUS, 0, 5) == 4


def test_jump_to_first_match(make_record):
    seq = [make_record(1), make_record(2), make_record(2, title="dup"), make_record(3)]
    assert jump_to(seq[1].pdf_link, seq) == 1


def test_jump_to_missing_returns_none(make_record):
    assert jump_to("https://arxiv.org/pdf/none", [make_record(1)]) is None
    assert jump_to("x", []) is None


def test_jump_to_matches_empty_links(make_record):
    seq = [make_record(1), make_record(2, pdf_link="")]
    assert jump_to("", seq) == 1


def test_wheel_event_sign():
    assert wheel_event(120) is InputEvent.WHEEL_DOWN
    assert wheel_event(-3) is InputEvent.WHEEL_UP
    assert wheel_event(0) is None


class TestDetectSwipe:
    def test_upward_drag_is_swipe_up(self):
        assert detect_swipe(20, 20 - SWIPE_THRESHOLD) is InputEvent.SWIPE_UP

    def test_downward_drag_is_swipe_down(self):
        assert detect_swipe(5, 5 + SWIPE_THRESHOLD + 4) is InputEvent.SWIPE_DOWN

    def test_short_drag_is_ignored(self):
        assert detect_swipe(10, 10 + SWIPE_THRESHOLD - 1) is None
        assert detect_swipe(10, 10) is None

    def test_custom_threshold(self):
        assert detect_swipe(10, 9, threshold=1) is InputEvent.SWIPE_UP
