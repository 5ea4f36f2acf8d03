"""Three-digit seven-segment readout, as used for the speedometer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .colors import RED, RED_DARK, WHITE, Color
from .config import SPACING

DIGIT_COUNT = 3
DIGIT_WIDTH = 80
DIGIT_HEIGHT = 160
SEGMENT_THICKNESS = 12
SEGMENT_RADIUS = 2
DIGIT_GAP = 12
CONTAINER_HEIGHT = 220
LABEL_MARGIN = SPACING
MAX_VALUE = 999

# Bit n of a mask lights segment n, in the order given by digit_segments().
DIGIT_MASKS = (
    0b0111111,  # 0
    0b0000110,  # 1
    0b1011011,  # 2
    0b1001111,  # 3
    0b1100110,  # 4
    0b1101101,  # 5
    0b1111101,  # 6
    0b0000111,  # 7
    0b1111111,  # 8
    0b1101111,  # 9
)


@dataclass(frozen=True)
class SegmentRect:
    """Position and size of one segment inside its digit cell."""

    x: int
    y: int
    width: int
    height: int


def digit_segments(
    width: int, height: int, thickness: int
) -> tuple[SegmentRect, ...]:
    """Lay out the seven segments of a digit cell.

    Order: top, top-right, bottom-right, bottom, bottom-left, top-left, middle.
    """
    half = height // 2
    span = width - 2 * thickness
    return (
        SegmentRect(thickness, 0, span, thickness),
        SegmentRect(width - thickness, thickness, thickness, half - thickness),
        SegmentRect(width - thickness, half, thickness, half - thickness),
        SegmentRect(thickness, height - thickness, span, thickness),
        SegmentRect(0, half, thickness, half - thickness),
        SegmentRect(0, thickness, thickness, half - thickness),
        SegmentRect(thickness, half - thickness // 2, span, thickness),
    )


class SevenSegmentDisplay:
    """A three-digit display showing an integer from 0 to 999."""

    label_color = WHITE
    segment_on = RED
    segment_off = RED_DARK

    def __init__(self, label_text: Optional[str] = "MPH") -> None:
        self.label = label_text if label_text is not None else ""
        self.segments = digit_segments(DIGIT_WIDTH, DIGIT_HEIGHT, SEGMENT_THICKNESS)
        self.value = 0
        self.colors: tuple[tuple[Color, ...], ...] = ()
        self.set_value(0)

    @property
    def digits(self) -> tuple[int, ...]:
        """The shown digits, most significant first."""
        return (self.value // 100, (self.value // 10) % 10, self.value % 10)

    def lit_segments(self, digit: int) -> frozenset[int]:
        """Indices of the lit segments of digit position ``digit``."""
        return frozenset(
            n for n, color in enumerate(self.colors[digit]) if color == self.segment_on
        )

    def set_value(self, value: int) -> None:
        """Show ``value``; values outside 0..999 are clamped."""
        self.value = min(max(int(value), 0), MAX_VALUE)
        self.colors = tuple(
            tuple(
                self.segment_on if DIGIT_MASKS[d] & (1 << s) else self.segment_off
                for s in range(len(self.segments))
            )
            for d in self.digits
        )