"""Colour values and the dashboard palette."""

from __future__ import annotations

from dataclasses import dataclass

_CHANNEL_MAX = 255


@dataclass(frozen=True)
class Color:
    """An 8-bit-per-channel RGB colour."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= _CHANNEL_MAX:
                raise ValueError(f"colour channel out of range: {channel}")

    @classmethod
    def from_hex(cls, value: int) -> Color:
        """Build a colour from a 0xRRGGBB integer."""
        if not 0 <= value <= 0xFFFFFF:
            raise ValueError(f"hex colour out of range: {value:#x}")
        return cls((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)

    def to_hex(self) -> int:
        """Return the colour as a 0xRRGGBB integer."""
        return (self.r << 16) | (self.g << 8) | self.b

    def mix(self, other: Color, ratio: int) -> Color:
        """Blend with ``other``; ``ratio`` (0..255) is the weight of ``self``."""
        if not 0 <= ratio <= _CHANNEL_MAX:
            raise ValueError(f"mix ratio out of range: {ratio}")

        def blend(a: int, b: int) -> int:
            return (a * ratio + b * (_CHANNEL_MAX - ratio) + 127) // _CHANNEL_MAX

        return Color(
            blend(self.r, other.r), blend(self.g, other.g), blend(self.b, other.b)
        )


WHITE = Color.from_hex(0xFFFFFF)
BLACK = Color.from_hex(0x000000)

RED = Color.from_hex(0xFF0000)
YELLOW = Color.from_hex(0xFFFF00)
ORANGE = Color.from_hex(0xFF8800)
GREEN = Color.from_hex(0x00FF00)
BLUE = Color.from_hex(0x0077FF)

# Slightly darker grey for popup backgrounds.
GRAY_LIGHT = Color.from_hex(0xBBBBBB)

# Dark variants for toggled-off states.
RED_DARK = Color.from_hex(0x990000)
YELLOW_DARK = Color.from_hex(0x999900)
ORANGE_DARK = Color.from_hex(0xCC6600)
GREEN_DARK = Color.from_hex(0x009900)
BLUE_DARK = Color.from_hex(0x0033AA)