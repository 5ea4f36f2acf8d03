"""Round status lamps that light up when their condition is active."""

from __future__ import annotations

from dataclasses import dataclass

from .colors import BLACK, Color

INDICATOR_DIAMETER = 60


@dataclass(frozen=True)
class IndicatorData:
    """Label and colours of one status lamp."""

    label: str
    dark: Color
    light: Color


class Indicator:
    """A status lamp with its current fill colour."""

    width = INDICATOR_DIAMETER * 6 // 5
    height = INDICATOR_DIAMETER
    radius = INDICATOR_DIAMETER // 2
    text_color = BLACK

    def __init__(self, data: IndicatorData) -> None:
        self.data = data
        self.is_on = False
        self.color = data.dark

    @property
    def label(self) -> str:
        return self.data.label

    def toggle(self, on: bool) -> None:
        """Light the lamp when ``on`` is true, darken it otherwise."""
        self.is_on = bool(on)
        self.color = self.data.light if on else self.data.dark