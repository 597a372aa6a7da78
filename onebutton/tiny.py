"""Reduced button detector: click, double click and long-press start only."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Callable, Optional

from .button import Clock, LevelReader, _monotonic_ms


class TinyState(IntEnum):
    """States of the reduced button's finite state machine."""

    INIT = 0
    DOWN = 1
    UP = 2
    COUNT = 3
    PRESS = 6
    PRESSEND = 7


class OneButtonTiny:
    """Detects clicks, double clicks and the start of a long press.

    ``read_level`` returns the raw input level (truthy for high). With
    ``active_low`` the button counts as pressed while that level is low.
    ``clock`` returns the current time in milliseconds.

    Until the input has been stable for ``debounce_ms`` the debounced
    value is -1, which counts as active when levels are passed to
    :meth:`tick` directly.
    """

    def __init__(
        self,
        read_level: Optional[LevelReader] = None,
        active_low: bool = True,
        clock: Optional[Clock] = None,
    ) -> None:
        self._clock: Clock = clock if clock is not None else _monotonic_ms
        self._read_level = read_level
        self._pressed_level = 0 if active_low else 1

        self.debounce_ms = 50
        self.click_ms = 400
        self.press_ms = 800

        self._click: Optional[Callable[[], Any]] = None
        self._double_click: Optional[Callable[[], Any]] = None
        self._long_press_start: Optional[Callable[[], Any]] = None

        self._state = TinyState.INIT
        self._debounced_level = -1
        self._last_debounce_level = -1
        self._last_debounce_time = 0
        self._now = 0
        self._start_time = 0
        self._n_clicks = 0

    # ----- event registration -----

    def attach_click(self, func: Optional[Callable[[], Any]]) -> None:
        """Call ``func()`` after a single click."""
        self._click = func

    def attach_double_click(self, func: Optional[Callable[[], Any]]) -> None:
        """Call ``func()`` after a double click."""
        self._double_click = func

    def attach_long_press_start(self, func: Optional[Callable[[], Any]]) -> None:
        """Call ``func()`` when a long press is detected."""
        self._long_press_start = func

    # ----- state machine -----

    def debounce(self, value: int) -> int:
        """Feed a raw level and return the debounced level."""
        self._now = self._clock()
        value = int(value)
        if self._last_debounce_level == value:
            if self._now - self._last_debounce_time >= self.debounce_ms:
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
            raw = 1 if self._read_level() else 0
            self._fsm(self.debounce(raw) == self._pressed_level)
        else:
            self._fsm(bool(self.debounce(1 if level else 0)))

    def reset(self) -> None:
        """Return the state machine to its initial state."""
        self._state = TinyState.INIT
        self._n_clicks = 0
        self._start_time = 0

    def _fsm(self, active: bool) -> None:
        now = self._now
        wait_time = now - self._start_time
        state = self._state

        if state is TinyState.INIT:
            if active:
                self._state = TinyState.DOWN
                self._start_time = now
                self._n_clicks = 0

        elif state is TinyState.DOWN:
            if not active:
                self._state = TinyState.UP
                self._start_time = now
            elif wait_time > self.press_ms:
                if self._long_press_start is not None:
                    self._long_press_start()
                self._state = TinyState.PRESS

        elif state is TinyState.UP:
            self._n_clicks += 1
            self._state = TinyState.COUNT

        elif state is TinyState.COUNT:
            if active:
                self._state = TinyState.DOWN
                self._start_time = now
            elif wait_time >= self.click_ms or self._n_clicks == 2:
                if self._n_clicks == 1:
                    if self._click is not None:
                        self._click()
                elif self._n_clicks == 2:
                    if self._double_click is not None:
                        self._double_click()
                self.reset()

        elif state is TinyState.PRESS:
            if not active:
                self._state = TinyState.PRESSEND
                self._start_time = now

        elif state is TinyState.PRESSEND:
            self.reset()

        else:
            self._state = TinyState.INIT

    # ----- queries -----

    def is_idle(self) -> bool:
        """True when no press sequence is being handled."""
        return self._state is TinyState.INIT

    def state(self) -> TinyState:
        """The current state of the state machine."""
        return self._state

    def debounced_value(self) -> int:
        """The last debounced level, or -1 before the input first settled."""
        return self._debounced_level