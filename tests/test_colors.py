import pytest

from kittdash.colors import (
    BLACK,
    ORANGE,
    RED,
    RED_DARK,
    WHITE,
    Color,
)


def test_from_hex_round_trip():
    assert Color.from_hex(0xFF8800).to_hex() == 0xFF8800
    assert Color.from_hex(0x0033AA).to_hex() == 0x0033AA


def test_palette_values_match_hex():
    assert ORANGE.to_hex() == 0xFF8800
    assert RED_DARK.to_hex() == 0x990000
    assert WHITE.to_hex() == 0xFFFFFF
    assert BLACK.to_hex() == 0x000000


def test_from_hex_channels():
    color = Color.from_hex(0xFF0000)
    assert color == RED
    assert color.g == 0
    assert color.b == 0


def test_from_hex_rejects_out_of_range():
    with pytest.raises(ValueError):
        Color.from_hex(0x1000000)
    with pytest.raises(ValueError):
        Color.from_hex(-1)


def test_channel_out_of_range():
    with pytest.raises(ValueError):
        Color(256, 0, 0)


def test_mix_extremes():
    assert WHITE.mix(RED, 255) == WHITE
    assert WHITE.mix(RED, 0) == RED


def test_mix_is_monotonic():
    greens = [WHITE.mix(RED, ratio).g for ratio in range(0, 256, 15)]
    assert greens == sorted(greens)
    assert greens[0] < greens[-1]


def test_mix_rejects_bad_ratio():
    with pytest.raises(ValueError):
        WHITE.mix(RED, 256)
    with pytest.raises(ValueError):
        WHITE.mix(RED, -1)