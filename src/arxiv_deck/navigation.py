"""Cursor navigation over the paper sequence and input-event translation.

Swipe gestures, arrow keys and the mouse wheel are independent input sources.
Each raw event is first named as an :class:`InputEvent`, then mapped through
:func:`translate_input` onto one of two logical actions.
"""

from __future__ import annotations

from enum import Enum

from arxiv_deck.models import PaperRecord

# Minimum vertical drag distance (terminal rows) recognised as a swipe
SWIPE_THRESHOLD = 3


class InputEvent(Enum):
    """Raw navigation gestures from the three input sources."""

    SWIPE_UP = "swipe_up"
    SWIPE_DOWN = "swipe_down"
    KEY_UP = "key_up"
    KEY_DOWN = "key_down"
    WHEEL_UP = "wheel_up"
    WHEEL_DOWN = "wheel_down"


class NavAction(Enum):
    """Logical navigation actions."""

    NEXT = "next"
    PREVIOUS = "previous"


_INPUT_ACTIONS: dict[InputEvent, NavAction] = {
    InputEvent.SWIPE_UP: NavAction.NEXT,
    InputEvent.KEY_DOWN: NavAction.NEXT,
    InputEvent.WHEEL_DOWN: NavAction.NEXT,
    InputEvent.SWIPE_DOWN: NavAction.PREVIOUS,
    InputEvent.KEY_UP: NavAction.PREVIOUS,
    InputEvent.WHEEL_UP: NavAction.PREVIOUS,
}


def translate_input(event: InputEvent) -> NavAction:
    """Map a raw input event to its navigation action."""
    return _INPUT_ACTIONS[event]


def _require_length(length: int) -> None:
    if length <= 0:
        raise ValueError("Cannot navigate an empty paper sequence")


def next_index(cursor: int, length: int) -> int:
    """Advance the cursor, wrapping from the last paper to the first."""
    _require_length(length)
    return (cursor + 1) % length


def previous_index(cursor: int, length: int) -> int:
    """Move the cursor back, wrapping from the first paper to the last."""
    _require_length(length)
    return (cursor - 1 + length) % length


def apply_action(action: NavAction, cursor: int, length: int) -> int:
    """Return the cursor after applying a navigation action."""
    if action is NavAction.NEXT:
        return next_index(cursor, length)
    return previous_index(cursor, length)


def jump_to(pdf_link: str, sequence: list[PaperRecord]) -> int | None:
    """Return the index of the first record with this pdf_link, or None."""
    for index, record in enumerate(sequence):
        if record.pdf_link == pdf_link:
            return index
    return None


def wheel_event(delta_y: int) -> InputEvent | None:
    """Name a wheel movement: positive delta scrolls forward (next paper)."""
    if delta_y > 0:
        return InputEvent.WHEEL_DOWN
    if delta_y < 0:
        return InputEvent.WHEEL_UP
    return None


def detect_swipe(start_y: int, end_y: int, threshold: int = SWIPE_THRESHOLD) -> InputEvent | None:
    """Classify a vertical pointer drag as a swipe.

    Dragging upward (end above start) is a swipe up. Movements shorter than
    ``threshold`` rows are clicks, not swipes.
    """
    delta = end_y - start_y
    if delta <= -threshold:
        return InputEvent.SWIPE_UP
    if delta >= threshold:
        return InputEvent.SWIPE_DOWN
    return None


__all__ = [
    "SWIPE_THRESHOLD",
    "InputEvent",
    "NavAction",
    "apply_action",
    "detect_swipe",
    "jump_to",
    "next_index",
    "previous_index",
    "translate_input",
    "wheel_event",
]
