"""Ten-segment bar gauge with a caption."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .colors import (
    GREEN,
    GREEN_DARK,
    RED,
    RED_DARK,
    WHITE,
    YELLOW,
    YELLOW_DARK,
    Color,
)

BAR_COUNT = 10
BAR_WIDTH = 40
BAR_HEIGHT = 20
BAR_RADIUS = 3
BAR_GAP = 2
_MAX_LABEL = 31


@dataclass(frozen=True)
class GaugeBar:
    """The dim and lit colours of one gauge segment."""

    dark: Color
    light: Color


def _bar_palette(index: int) -> GaugeBar:
    if index < 4:
        return GaugeBar(GREEN_DARK, GREEN)
    if index < 7:
        return GaugeBar(YELLOW_DARK, YELLOW)
    return GaugeBar(RED_DARK, RED)


class Gauge:
    """A row of segments lit in proportion to a normalised value."""

    label_color = WHITE

    def __init__(self, label: Optional[str] = None) -> None:
        self.label = (label or "")[:_MAX_LABEL].upper()
        self.bars = tuple(_bar_palette(n) for n in range(BAR_COUNT))
        self.active = 0
        self.colors = [bar.dark for bar in self.bars]

    def set_value(self, norm: float) -> None:
        """Light segments for ``norm`` in 0..1; values outside are clamped."""
        norm = min(max(norm, 0.0), 1.0)
        self.active = int(norm * BAR_COUNT + 0.5)
        self.colors = [
            bar.light if n < self.active else bar.dark
            for n, bar in enumerate(self.bars)
        ]