"""Touch buttons: plain, toggle and hold-to-confirm ("severe") buttons."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable, Optional

from .colors import (
    GREEN,
    ORANGE,
    RED,
    RED_DARK,
    WHITE,
    YELLOW,
    YELLOW_DARK,
    Color,
)

ButtonCallback = Callable[["Button"], None]
ValidateCallback = Callable[["Button"], bool]

LONG_PRESS_DURATION = 1000  # ms
_TICK_MASK = 0xFFFFFFFF


@dataclass(frozen=True)
class ButtonData:
    """Static description of a button."""

    label: str
    callback: Optional[ButtonCallback]
    toggleable: bool
    severe: bool = False  # must be held for a second before triggering
    start_active: bool = False


class ButtonEvent(enum.Enum):
    """Input events a button reacts to."""

    PRESSED = enum.auto()
    PRESSING = enum.auto()
    RELEASED = enum.auto()
    PRESS_LOST = enum.auto()
    CLICKED = enum.auto()


def _default_colors(toggleable: bool, severe: bool) -> tuple[Color, Color]:
    if toggleable:
        return (RED_DARK, RED) if severe else (YELLOW_DARK, YELLOW)
    return (ORANGE, ORANGE) if severe else (GREEN, GREEN)


class Button:
    """State machine of one dashboard button and its background colour."""

    def __init__(
        self,
        data: ButtonData,
        grid_col: int,
        grid_row: int,
        color_off: Optional[Color] = None,
        color_on: Optional[Color] = None,
    ) -> None:
        self.label = data.label
        self.grid_col = grid_col
        self.grid_row = grid_row
        self.toggleable = data.toggleable
        self.severe = data.severe
        self._callback: Optional[ButtonCallback] = data.callback
        # No check set means every press is accepted.
        self._validate: Optional[ValidateCallback] = None

        default_off, default_on = _default_colors(data.toggleable, data.severe)
        self.color_off = color_off if color_off is not None else default_off
        self.color_on = color_on if color_on is not None else default_on

        self.toggled = data.start_active and data.toggleable
        self._press_start = 0
        self._long_press_handled = False
        self.background = self.color_on if self.toggled else self.color_off

    def set_callback(self, callback: Optional[ButtonCallback]) -> None:
        """Replace the action run when the button triggers."""
        self._callback = callback

    def set_validate(self, validate: Optional[ValidateCallback]) -> None:
        """Set a check that must pass before the button triggers; None accepts all."""
        self._validate = validate

    def handle_press(self) -> None:
        """Flip a toggle button's state."""
        if self.toggleable:
            self.toggled = not self.toggled
            self.update_visual()

    def update_visual(self) -> None:
        """Reset the background to the colour of the current state."""
        if self.toggleable and self.toggled:
            self.background = self.color_on
        else:
            self.background = self.color_off

    def _base_color(self) -> Color:
        if self.toggleable and self.toggled:
            return self.color_on
        return self.color_off

    def _trigger(self) -> bool:
        if self._validate is not None and not self._validate(self):
            return False
        self.handle_press()
        if self._callback is not None:
            self._callback(self)
        return True

    def handle_event(self, event: ButtonEvent, now: int) -> bool:
        """Process an input event at tick ``now`` (ms); return True if it triggered."""
        if event is ButtonEvent.PRESSED:
            self._press_start = now
            self._long_press_handled = False
            return False

        if event is ButtonEvent.PRESSING:
            if not self.severe or self._long_press_handled:
                return False
            elapsed = (now - self._press_start) & _TICK_MASK
            if elapsed >= LONG_PRESS_DURATION:
                ratio = 255
            else:
                ratio = 255 * elapsed // LONG_PRESS_DURATION
            self.background = WHITE.mix(self._base_color(), ratio)
            if elapsed < LONG_PRESS_DURATION:
                return False
            triggered = self._trigger()
            self._long_press_handled = True
            if not self.toggleable:
                self.update_visual()
            return triggered

        if event in (ButtonEvent.RELEASED, ButtonEvent.PRESS_LOST):
            self.update_visual()
            return False

        if event is ButtonEvent.CLICKED and not self.severe:
            return self._trigger()

        return False