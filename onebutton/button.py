"""Click, double-click, multi-click and long-press detection for a single button."""

from __future__ import annotations

import functools
import time
from enum import IntEnum
from typing import Any, Callable, Optional

Callback = Callable[..., Any]
LevelReader = Callable[[], Any]
Clock = Callable[[], int]


def _monotonic_ms() -> int:
    return int(time.monotonic() * 1000)


class ButtonState(IntEnum):
    """States of the button's finite state machine."""

    INIT = 0
    DOWN = 1
    UP = 2
    COUNT = 3
    PRESS = 6
    PRESSEND = 7


class OneButton:
    """Detects press patterns on one momentary button.

    ``read_level`` returns the raw input level (truthy for high). With
    ``active_low`` the button counts as pressed while that level is low.
    ``clock`` returns the current time in milliseconds.
    """

    def __init__(
        self,
        read_level: Optional[LevelReader] = None,
        active_low: bool = True,
        clock: Optional[Clock] = None,
    ) -> None:
        self._clock: Clock = clock if clock is not None else _monotonic_ms
        self._read_level: Optional[LevelReader] = None
        self._pressed_level = False

        self.debounce_ms = 50
        self.click_ms = 400
        self.press_ms = 800
        self.idle_ms = 1000
        self.long_press_interval_ms = 0

        self._callbacks: dict[str, Callable[[], Any]] = {}
        self._max_clicks = 1

        self._state = ButtonState.INIT
        self._idle_state = False
        self._debounced_level = False
        self._last_debounce_level = False
        self._last_debounce_time = 0
        self._now = 0
        self._start_time = 0
        self._n_clicks = 0
        self._last_during_long_press_time = 0

        if read_level is not None:
            self.setup(read_level, active_low)

    def setup(self, read_level: LevelReader, active_low: bool = True) -> None:
        """Set or replace the input source and its active polarity."""
        self._read_level = read_level
        self._pressed_level = not active_low

    # ----- event registration -----

    def _attach(self, event: str, func: Optional[Callback], args: tuple) -> None:
        if func is None:
            self._callbacks.pop(event, None)
        else:
            self._callbacks[event] = functools.partial(func, *args)

    def _fire(self, event: str) -> None:
        callback = self._callbacks.get(event)
        if callback is not None:
            callback()

    def attach_press(self, func: Optional[Callback], *args: Any) -> None:
        """Call ``func(*args)`` as soon as the button goes down."""
        self._attach("press", func, args)

    def attach_click(self, func: Optional[Callback], *args: Any) -> None:
        """Call ``func(*args)`` after a single click."""
        self._attach("click", func, args)

    def attach_double_click(self, func: Optional[Callback], *args: Any) -> None:
        """Call ``func(*args)`` after a double click."""
        self._attach("double_click", func, args)
        self._max_clicks = max(self._max_clicks, 2)

    def attach_multi_click(self, func: Optional[Callback], *args: Any) -> None:
        """Call ``func(*args)`` after three or more clicks."""
        self._attach("multi_click", func, args)
        self._max_clicks = max(self._max_clicks, 100)

    def attach_long_press_start(self, func: Optional[Callback], *args: Any) -> None:
        """Call ``func(*args)`` when a long press is detected."""
        self._attach("long_press_start", func, args)

    def attach_long_press_stop(self, func: Optional[Callback], *args: Any) -> None:
        """Call ``func(*args)`` when the button is released after a long press."""
        self._attach("long_press_stop", func, args)

    def attach_during_long_press(self, func: Optional[Callback], *args: Any) -> None:
        """Call ``func(*args)`` periodically while a long press is held."""
        self._attach("during_long_press", func, args)

    def attach_idle(self, func: Optional[Callback]) -> None:
        """Call ``func()`` once when the button has been idle for ``idle_ms``."""
        self._attach("idle", func, ())

    # ----- state machine -----

    def debounce(self, value: bool) -> bool:
        """Feed a raw active level and return the debounced level."""
        self._now = self._clock()
        value = bool(value)

        if value and self.debounce_ms < 0:
            self._debounced_level = value

        if self._last_debounce_level == value:
            if self._now - self._last_debounce_time >= abs(self.debounce_ms):
                self._debounced_level = value
        else:
            self._last_debounce_time = self._now
            self._last_debounce_level = value
        return self._debounced_level

    def tick(self, level: Optional[bool] = None) -> None:
        """Advance the state machine.

        With ``level`` given it is taken as the active (pressed) level;
        otherwise the configured input is read. Without an input, nothing happens.
        """
        if level is None:
            if self._read_level is None:
                return
            level = bool(self._read_level()) == self._pressed_level
        self._fsm(self.debounce(level))

    def reset(self) -> None:
        """Return the state machine to its initial state."""
        self._state = ButtonState.INIT
        self._n_clicks = 0
        self._start_time = self._clock()
        self._idle_state = False

    def _fsm(self, active: bool) -> None:
        now = self._now
        wait_time = now - self._start_time
        state = self._state

        if state is ButtonState.INIT:
            if not self._idle_state and wait_time > self.idle_ms and "idle" in self._callbacks:
                self._idle_state = True
                self._fire("idle")
            if active:
                self._state = ButtonState.DOWN
                self._start_time = now
                self._n_clicks = 0
                self._fire("press")

        elif state is ButtonState.DOWN:
            if not active:
                self._state = ButtonState.UP
                self._start_time = now
            elif wait_time > self.press_ms:
                self._fire("long_press_start")
                self._state = ButtonState.PRESS

        elif state is ButtonState.UP:
            self._n_clicks += 1
            self._state = ButtonState.COUNT

        elif state is ButtonState.COUNT:
            if active:
                self._state = ButtonState.DOWN
                self._start_time = now
            elif wait_time >= self.click_ms or self._n_clicks == self._max_clicks:
                if self._n_clicks == 1:
                    self._fire("click")
                elif self._n_clicks == 2:
                    self._fire("double_click")
                else:
                    self._fire("multi_click")
                self.reset()

        elif state is ButtonState.PRESS:
            if not active:
                self._state = ButtonState.PRESSEND
            elif now - self._last_during_long_press_time >= self.long_press_interval_ms:
                self._fire("during_long_press")
                self._last_during_long_press_time = now

        elif state is ButtonState.PRESSEND:
            self._fire("long_press_stop")
            self.reset()

        else:
            self._state = ButtonState.INIT

    # ----- queries -----

    def is_idle(self) -> bool:
        """True when no press sequence is being handled."""
        return self._state is ButtonState.INIT

    def is_long_pressed(self) -> bool:
        """True while a long press is in progress."""
        return self._state is ButtonState.PRESS

    def state(self) -> ButtonState:
        """The current state of the state machine."""
        return self._state

    def number_clicks(self) -> int:
        """Number of clicks counted in the current sequence."""
        return self._n_clicks

    def debounced_value(self) -> bool:
        """The last debounced level."""
        return self._debounced_level

    def pressed_ms(self) -> int:
        """Milliseconds since the current press started."""
        return self._clock() - self._start_time