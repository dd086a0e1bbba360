"""Screen chrome: top bar, gesture surface, context footer."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.events import MouseDown, MouseScrollDown, MouseScrollUp, MouseUp
from textual.message import Message
from textual.widgets import Button, Label, Static

from arxiv_deck.navigation import InputEvent, detect_swipe, wheel_event
from arxiv_deck.widgets.card import escape_rich_text

DARK_MODE_LABEL = "☾ Dark"
LIGHT_MODE_LABEL = "☀ Light"
BOOKMARKS_LABEL = "≡ Bookmarks"
ATTRIBUTION = "Data: arXiv.org"


def mode_button_label(dark_mode: bool) -> str:
    """Label offering the mode the button switches to."""
    return LIGHT_MODE_LABEL if dark_mode else DARK_MODE_LABEL


class TopBar(Horizontal):
    """Display-mode toggle, bookmark-list toggle and the card position."""

    DEFAULT_CSS = """
    TopBar {
        height: auto;
        padding: 0 1;
        background: $th-panel-alt;
    }

    TopBar Button {
        margin-right: 1;
    }

    #position {
        width: 1fr;
        content-align: right middle;
        height: 3;
        color: $th-muted;
    }
    """

    def __init__(self, dark_mode: bool) -> None:
        super().__init__(id="top-bar")
        self._dark_mode = dark_mode

    def compose(self) -> ComposeResult:
        yield Button(mode_button_label(self._dark_mode), id="mode-btn")
        yield Button(BOOKMARKS_LABEL, id="bookmarks-btn")
        yield Label("", id="position")

    def set_dark_mode(self, dark_mode: bool) -> None:
        self._dark_mode = dark_mode
        self.query_one("#mode-btn", Button).label = mode_button_label(dark_mode)

    def set_position(self, text: str) -> None:
        self.query_one("#position", Label).update(text)


class SwipeSurface(Vertical):
    """Container that turns vertical drags and wheel scrolls into InputEvents.

    Mouse drags stand in for touch swipes: press, move at least
    ``SWIPE_THRESHOLD`` rows, release. A press and release in place is a
    plain click and is left to the child widgets.
    """

    class Gesture(Message):
        """A navigation gesture recognised on the surface."""

        def __init__(self, event: InputEvent) -> None:
            super().__init__()
            self.event = event

    def __init__(self, *children, id: str | None = None) -> None:
        super().__init__(*children, id=id)
        self._drag_start_y: int | None = None

    def on_mouse_down(self, event: MouseDown) -> None:
        self._drag_start_y = event.screen_y

    def on_mouse_up(self, event: MouseUp) -> None:
        start_y = self._drag_start_y
        self._drag_start_y = None
        if start_y is None:
            return
        gesture = detect_swipe(start_y, event.screen_y)
        if gesture is not None:
            self.post_message(self.Gesture(gesture))

    def _post_wheel(self, delta_y: int) -> None:
        gesture = wheel_event(delta_y)
        if gesture is not None:
            self.post_message(self.Gesture(gesture))

    def on_mouse_scroll_down(self, event: MouseScrollDown) -> None:
        event.stop()
        self._post_wheel(1)

    def on_mouse_scroll_up(self, event: MouseScrollUp) -> None:
        event.stop()
        self._post_wheel(-1)


class ContextFooter(Static):
    """Footer showing key hints and the data-source attribution."""

    DEFAULT_CSS = """
    ContextFooter {
        dock: bottom;
        height: 1;
        background: $th-background;
        color: $th-muted;
        padding: 0 1;
    }
    """

    def render_bindings(self, bindings: list[tuple[str, str]], palette: dict[str, str]) -> None:
        """Update the footer with (key, label) hints followed by the attribution."""
        accent = palette["accent"]
        muted = palette["muted"]
        parts = [
            f"[bold {accent}]{escape_rich_text(key)}[/] [{muted}]{label}[/]"
            for key, label in bindings
        ]
        parts.append(f"[italic {muted}]{ATTRIBUTION}[/]")
        self.update("  ".join(parts))


__all__ = [
    "ATTRIBUTION",
    "BOOKMARKS_LABEL",
    "DARK_MODE_LABEL",
    "LIGHT_MODE_LABEL",
    "ContextFooter",
    "SwipeSurface",
    "TopBar",
    "mode_button_label",
]
