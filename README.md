# onebutton

Turn the raw level of a single push button into events: press, click,
double click, multi click, long press start / during / stop, and idle.
The input is debounced, and then a small state machine works out which
event happened.

The package never touches hardware. You give it a function that reads the
level, or you pass the level to `tick()` yourself. A clock function gives
time in milliseconds. By default this is the monotonic clock. This makes
the button easy to drive from a main loop, a simulator or a test.

## Installation

```
pip install onebutton
```

## Usage

```python
import time
from onebutton.button import OneButton

def read_pin() -> int:
    ...  # return the current pin level, 0 or 1

button = OneButton(read_pin, active_low=True,
                   clock=lambda: int(time.monotonic() * 1000))

button.attach_click(lambda: print("click"))
button.attach_double_click(lambda: print("double click"))
button.attach_multi_click(lambda: print("clicks:", button.number_clicks()))
button.attach_long_press_start(lambda: print("long press started"))
button.attach_during_long_press(lambda: print("held for", button.pressed_ms(), "ms"))
button.attach_long_press_stop(lambda: print("long press stopped"))
button.attach_idle(lambda: print("idle"))

while True:
    button.tick()
    time.sleep(0.01)
```

With `active_low=True` the button counts as pressed while `read_level()`
returns a falsy value. With `active_low=False` it counts as pressed while
the value is truthy. `setup(read_level, active_low)` sets or replaces the
input later. If a button has no input, `tick()` with no argument does
nothing.

If the level comes from somewhere else, such as an interrupt handler, a
network message or a test, give the active (pressed) level straight to the
state machine:

```python
button.tick(True)   # button is held down
button.tick(False)  # button is released
```

Callbacks can take extra arguments. They are stored when the callback is
attached and passed on each time it is called. Attaching `None` removes a
callback.

```python
button.attach_click(print, "clicked button", 3)
```

A double click is reported as soon as the second click ends if no
multi-click callback is attached. If one is attached, clicks go on being
counted until `click_ms` passes without a new press.

Timing is set with attributes, all in milliseconds. These are the defaults:

| attribute                 | default | meaning                                            |
|---------------------------|---------|----------------------------------------------------|
| `debounce_ms`             | 50      | time a level must stay stable; if negative, a press is taken at once and only the release is debounced |
| `click_ms`                | 400     | time after a release before the clicks are counted |
| `press_ms`                | 800     | time held before a long press starts               |
| `idle_ms`                 | 1000    | time in the initial state before the idle event fires (once, until the next reset) |
| `long_press_interval_ms`  | 0       | time between calls of the during-long-press event  |

`is_idle()`, `is_long_pressed()`, `state()` (a `ButtonState`),
`number_clicks()` and `debounced_value()` report where the state machine
is. `reset()` sends it back to the start.

## The tiny variant

`onebutton.tiny.OneButtonTiny` is a smaller button. It reports only click,
double click and the start of a long press. It has the attributes
`debounce_ms`, `click_ms` and `press_ms`, with the same defaults as above.

```python
from onebutton.tiny import OneButtonTiny

tiny = OneButtonTiny(read_pin, active_low=True, clock=my_clock_ms)
tiny.attach_click(on_click)
tiny.attach_double_click(on_double_click)
tiny.attach_long_press_start(on_long_press)
```

Its `state()` returns a `TinyState`. Until the input has been stable for
`debounce_ms`, `debounced_value()` is -1. When levels are passed to
`tick()` directly, this initial value counts as active.

## What it does not do

There is no pin or GPIO access, no interrupt handling and no event loop.
You have to call `tick()` often enough yourself. Callbacks run inside
`tick()`.

## Running the tests

```
pip install -e ".[test]"
pytest
```