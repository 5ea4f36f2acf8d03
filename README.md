# kittdash

State models for a car-style dashboard: toggle and press-and-hold buttons,
indicator lamps, ten-segment bar gauges, a three-digit seven-segment speed
readout, a fading voice visualiser and modal popups. Each widget keeps its
own state and the colours it should be drawn in, so any drawing layer can
render it. Time is passed in explicitly as milliseconds, which makes the
widgets easy to drive and to test.

## Install

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Colours

`kittdash.colors.Color` is a frozen RGB colour with 8 bits per channel.

```python
from kittdash.colors import Color, RED, WHITE

red = Color.from_hex(0xFF0000)
red.to_hex()              # 0xFF0000
WHITE.mix(RED, 128)       # ratio 0..255 is the weight of WHITE
```

The module also defines the palette: `WHITE`, `BLACK`, `RED`, `YELLOW`,
`ORANGE`, `GREEN`, `BLUE`, `GRAY_LIGHT` and the dark variants `RED_DARK`,
`YELLOW_DARK`, `ORANGE_DARK`, `GREEN_DARK`, `BLUE_DARK`.

## Buttons

A `Button` is built from a `ButtonData` (label, callback, toggleable, severe,
start_active) and its grid column and row. Its colours follow from its kind
(toggle/one-shot, severe/normal) unless `color_off` and `color_on` are given.

- A normal button fires on `ButtonEvent.CLICKED`.
- A *severe* button fires only after being held for one second
  (`ButtonEvent.PRESSING` events); while held its background brightens
  towards white.
- A toggleable button flips `toggled` each time it fires.
- An optional validate function, given the button, can refuse a press.

`handle_event` returns True when the press fired. The callback is called with
the button.

```python
from kittdash.button import Button, ButtonData, ButtonEvent

fired = []
data = ButtonData("MOTOR", fired.append, toggleable=True, severe=True)
button = Button(data, 0, 0, None, None)

button.handle_event(ButtonEvent.PRESSED, 0)
button.handle_event(ButtonEvent.PRESSING, 1000)   # held for a second: fires
button.handle_event(ButtonEvent.RELEASED, 1010)
button.toggled      # True
button.background   # current fill colour
```

`set_callback` and `set_validate` replace the action and the check; passing
`None` to `set_validate` accepts every press again.

## Standard sets and layout

`kittdash.config` holds the layout constants (`SPACING`, `GRID_HEIGHT`,
`PANEL_BUTTON_SIZE`, `CENTER_WIDTH`, `VISUALISER_HEIGHT` and others) and the
standard sets: `button_tile1()`, `button_tile2()`, `voice_buttons()` and
`indicators()`. The buttons in these sets carry no callback; attach actions
with `Button.set_callback`.

## Indicators and gauges

```python
from kittdash.config import indicators
from kittdash.indicator import Indicator
from kittdash.gauge import Gauge

lamp = Indicator(indicators()[0])
lamp.toggle(True)
lamp.color          # the lit colour

gauge = Gauge("power")  # label is upper-cased, at most 31 characters
gauge.set_value(0.55)   # clamped to 0..1; lights round(norm * 10) bars
gauge.active            # 6
gauge.colors            # colour of each of the ten bars
```

## Seven-segment readout

```python
from kittdash.seven_segment import SevenSegmentDisplay, digit_segments

speed = SevenSegmentDisplay("MPH")
speed.set_value(88)         # clamped to 0..999
speed.digits                # (0, 8, 8)
speed.lit_segments(2)       # indices of the lit segments of the last digit
digit_segments(80, 160, 12) # SegmentRect geometry of one digit's segments
```

## Voice visualiser

Three columns of 19, 29 and 19 bars, lit outward from the centre in
proportion to the level.

```python
from kittdash.voice_visualiser import VoiceVisualiser

viz = VoiceVisualiser(0)
viz.set_level(0.8, 0)
viz.tick(50)       # call about every 50 ms
viz.tick(200)      # no update for over 150 ms: the level starts to fade
viz.start_fade(250)
```

## Popups

Popups work on a small widget tree of `Widget` nodes.

```python
from kittdash.popup import Widget, ScrollDir, show_error_popup, show_fullscreen_popup

screen = Widget(800, 480, None)
tile = Widget(800, 480, screen)

popup = show_error_popup(tile, "Enable 48V mode first")
screen.scroll_dir   # ScrollDir.NONE while the popup is open
popup.dismiss()     # removes the overlay; screen scrolls horizontally again

overlay = show_fullscreen_popup(screen, 800, 480)
```

## What this package does not do

It draws nothing and reads no touch input: there is no screen, window or
event loop. A drawing layer must render the colours and geometry the widgets
expose, turn input into `ButtonEvent`s, and call `VoiceVisualiser.tick`
on a timer. The dashboard's actions themselves (sounds, lighting, motor and
power switching) are not included; they are whatever callbacks you attach.