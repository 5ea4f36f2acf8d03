"""Dashboard layout constants and the button and indicator sets."""

from __future__ import annotations

from .button import ButtonData
from .colors import ORANGE, ORANGE_DARK, RED, RED_DARK
from .indicator import INDICATOR_DIAMETER, IndicatorData

# Layout
SPACING = 20
GRID_HEIGHT = 800
POPUP_WIDTH = 300
POPUP_HEIGHT = 220

# Button panel
BUTTON_COUNT = 8
PANEL_BUTTON_SIZE = (GRID_HEIGHT - SPACING * 6) // (BUTTON_COUNT // 2)
PANEL_GRID_WIDTH = PANEL_BUTTON_SIZE * 2 + SPACING * 3
PANEL_GRID_HEIGHT = PANEL_BUTTON_SIZE * (BUTTON_COUNT // 2) + SPACING * 6

# Visualiser
CIRCLE_DIAMETER = INDICATOR_DIAMETER
COLUMN_WIDTH = CIRCLE_DIAMETER * 6 // 5
CENTER_WIDTH = (480 - CIRCLE_DIAMETER * 2 - SPACING * 4) * 9 // 10
GRID_WIDTH = COLUMN_WIDTH * 2 + CENTER_WIDTH + SPACING * 4
BUTTON_HEIGHT = 85
VISUALISER_HEIGHT = GRID_HEIGHT - BUTTON_HEIGHT * 3 - SPACING * 5

# Actions are attached by the application through Button.set_callback.


def button_tile1() -> tuple[ButtonData, ...]:
    """The first button panel: one-shot actions."""
    return (
        ButtonData("TURBO BOOST", None, False, True),
        ButtonData("THEME", None, False),
        ButtonData("INTRO", None, False),
        ButtonData("EXPLODE", None, False),
        ButtonData("MICHELLE", None, False),
        ButtonData("SHAWN", None, False),
        ButtonData("JOSEPH", None, False),
        ButtonData("SHOE", None, False),
    )


def button_tile2() -> tuple[ButtonData, ...]:
    """The second button panel: system toggles."""
    return (
        ButtonData("MOTOR", None, True, True, True),
        ButtonData("EVADE", None, True, True),
        ButtonData("48V MODE", None, True, True, True),
        ButtonData("INVERTER", None, True, True),
        ButtonData("GPS", None, True, False, True),
        ButtonData("RADIO", None, True, False, True),
        ButtonData("USB", None, True, False, True),
        ButtonData("LIGHTING", None, True),
    )


def voice_buttons() -> tuple[ButtonData, ...]:
    """The driving-mode buttons of the voice tile."""
    return (
        ButtonData("AUTO CRUISE", None, True, True),
        ButtonData("NORMAL CRUISE", None, True, True, True),
        ButtonData("PURSUIT", None, True, True),
    )


def indicators() -> tuple[IndicatorData, ...]:
    """The status lamps beside the visualiser, left column first."""
    return (
        IndicatorData("AUD", ORANGE_DARK, ORANGE),
        IndicatorData("LTS", ORANGE_DARK, ORANGE),
        IndicatorData("B1", RED_DARK, RED),
        IndicatorData("B2", RED_DARK, RED),
        IndicatorData("GPS", ORANGE_DARK, ORANGE),
        IndicatorData("RAD", ORANGE_DARK, ORANGE),
        IndicatorData("CUR", RED_DARK, RED),
        IndicatorData("TMP", RED_DARK, RED),
    )