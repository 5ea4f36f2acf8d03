"""Three-column voice level visualiser with automatic fade-out."""

from __future__ import annotations

from dataclasses import dataclass, field

from .colors import BLACK, RED, RED_DARK, Color
from .config import CENTER_WIDTH, VISUALISER_HEIGHT

COLUMN_SIZES = (19, 29, 19)
BAR_HEIGHT = 10
BAR_GAP = 4
BAR_WIDTH = (CENTER_WIDTH - 50) // 3
TIMER_PERIOD = 50  # ms, 20 updates per second
IDLE_TIMEOUT = 150  # ms without a level update before fading starts
FADE_THRESHOLD = 0.2
FADE_STEP = 0.08
FADE_FLOOR = 0.01
_TICK_MASK = 0xFFFFFFFF


@dataclass
class VisualiserColumn:
    """One column of bars, lit outward from its centre."""

    count: int
    padding: int
    colors: list[Color] = field(default_factory=list)

    @property
    def lit(self) -> int:
        return sum(1 for color in self.colors if color == RED)


def _make_column(count: int) -> VisualiserColumn:
    total = count * BAR_HEIGHT + (count - 1) * BAR_GAP
    padding = max((VISUALISER_HEIGHT - total) // 2, 0)
    return VisualiserColumn(count, padding, [RED_DARK] * count)


class VoiceVisualiser:
    """Shows a normalised voice level and fades it out when updates stop."""

    background = BLACK

    def __init__(self, now: int = 0) -> None:
        self.columns = tuple(_make_column(count) for count in COLUMN_SIZES)
        self.level = 0.0
        self.fading = False
        self.last_update = now

    def set_cols_active(self, ratio_norm: float) -> None:
        """Light the bars within ``ratio_norm`` of each column's half-height."""
        for column in self.columns:
            count = column.count
            limit = ratio_norm * ((count + 1) / 2.0)
            centre = count // 2
            column.colors = [
                RED if abs(centre - i) < limit else RED_DARK for i in range(count)
            ]

    def set_level(self, level: float, now: int) -> None:
        """Set the level (clamped to 0..1) at tick ``now`` and stop any fade."""
        self.level = min(max(level, 0.0), 1.0)
        self.fading = False
        self.last_update = now

    def start_fade(self, now: int) -> None:
        """Begin fading out, if anything is shown."""
        if self.level > 0.0:
            self.fading = True
            self.last_update = now

    def tick(self, now: int) -> None:
        """Advance the fade and redraw; called every TIMER_PERIOD ms."""
        if not self.fading:
            idle = (now - self.last_update) & _TICK_MASK
            if idle > IDLE_TIMEOUT and self.level > FADE_THRESHOLD:
                self.fading = True
        elif self.level > FADE_FLOOR:
            self.level = max(self.level - FADE_STEP, 0.0)
        else:
            self.level = 0.0
            self.fading = False
        self.set_cols_active(self.level)