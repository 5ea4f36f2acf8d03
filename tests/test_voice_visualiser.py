import pytest

from kittdash.colors import RED, RED_DARK
from kittdash.config import VISUALISER_HEIGHT
from kittdash.voice_visualiser import (
    BAR_GAP,
    BAR_HEIGHT,
    COLUMN_SIZES,
    FADE_STEP,
    VoiceVisualiser,
)


def lit_counts(viz):
    return tuple(column.lit for column in viz.columns)


def test_columns_start_dark():
    viz = VoiceVisualiser()
    assert tuple(c.count for c in viz.columns) == COLUMN_SIZES
    assert lit_counts(viz) == (0, 0, 0)
    assert all(color == RED_DARK for c in viz.columns for color in c.colors)


def test_column_padding_centres_bars():
    viz = VoiceVisualiser()
    for column in viz.columns:
        total = column.count * BAR_HEIGHT + (column.count - 1) * BAR_GAP
        assert column.padding >= 0
        assert total + 2 * column.padding <= VISUALISER_HEIGHT


def test_full_ratio_lights_everything():
    viz = VoiceVisualiser()
    viz.set_cols_active(1.0)
    assert lit_counts(viz) == COLUMN_SIZES


def test_zero_ratio_lights_nothing():
    viz = VoiceVisualiser()
    viz.set_cols_active(1.0)
    viz.set_cols_active(0.0)
    assert lit_counts(viz) == (0, 0, 0)


@pytest.mark.parametrize("ratio", [0.1, 0.3, 0.5, 0.8])
def test_partial_ratio_lit_bars_are_centred_and_symmetric(ratio):
    viz = VoiceVisualiser()
    viz.set_cols_active(ratio)
    for column in viz.columns:
        assert column.colors == column.colors[::-1]
        assert column.colors[column.count // 2] == RED
        assert 0 < column.lit < column.count


def test_lit_count_grows_with_ratio():
    viz = VoiceVisualiser()
    previous = -1
    for ratio in (0.0, 0.25, 0.5, 0.75, 1.0):
        viz.set_cols_active(ratio)
        total = sum(lit_counts(viz))
        assert total >= previous
        previous = total


def test_set_level_clamps():
    viz = VoiceVisualiser()
    viz.set_level(2.5, 0)
    assert viz.level == 1.0
    viz.set_level(-1.0, 0)
    assert viz.level == 0.0


def test_no_fade_before_idle_timeout():
    viz = VoiceVisualiser()
    viz.set_level(1.0, 0)
    viz.tick(100)
    assert not viz.fading
    assert viz.level == 1.0
    assert lit_counts(viz) == COLUMN_SIZES


def test_idle_starts_fade_then_decreases():
    viz = VoiceVisualiser()
    viz.set_level(1.0, 0)
    viz.tick(200)
    assert viz.fading
    assert viz.level == 1.0
    viz.tick(250)
    assert viz.level == pytest.approx(1.0 - FADE_STEP)


def test_fade_runs_to_zero_and_stops():
    viz = VoiceVisualiser()
    viz.set_level(1.0, 0)
    now = 200
    for _ in range(50):
        viz.tick(now)
        now += 50
    assert viz.level == 0.0
    assert not viz.fading
    assert lit_counts(viz) == (0, 0, 0)


def test_low_level_does_not_auto_fade():
    viz = VoiceVisualiser()
    viz.set_level(0.1, 0)
    viz.tick(1000)
    assert not viz.fading
    assert viz.level == pytest.approx(0.1)


def test_start_fade_ignored_when_silent():
    viz = VoiceVisualiser()
    viz.start_fade(10)
    assert not viz.fading


def test_start_fade_and_set_level_cancels():
    viz = VoiceVisualiser()
    viz.set_level(0.5, 0)
    viz.start_fade(10)
    assert viz.fading
    viz.set_level(0.5, 20)
    assert not viz.fading
    assert viz.last_update == 20


def test_tick_counter_wraparound():
    start = 0xFFFFFFFF - 50
    viz = VoiceVisualiser(start)
    viz.set_level(1.0, start)
    viz.tick(200)
    assert viz.fading