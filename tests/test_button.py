import pytest

from onebutton.button import ButtonState, OneButton


class FakeClock:
    def __init__(self):
        self.now = 0

    def __call__(self):
        return self.now


STEP = 10


def hold(button, clock, level, duration):
    for _ in range(duration // STEP):
        clock.now += STEP
        button.tick(level)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def button(clock):
    return OneButton(clock=clock)


def test_single_click(button, clock):
    events = []
    button.attach_click(events.append, "click")
    button.attach_press(events.append, "press")
    hold(button, clock, True, 100)
    hold(button, clock, False, 600)
    assert events == ["press", "click"]
    assert button.is_idle()


def test_double_click(button, clock):
    events = []
    seen_clicks = []
    button.attach_click(events.append, "click")
    button.attach_double_click(lambda: seen_clicks.append(button.number_clicks()))
    hold(button, clock, True, 100)
    hold(button, clock, False, 100)
    hold(button, clock, True, 100)
    hold(button, clock, False, 600)
    assert events == []
    assert seen_clicks == [2]
    assert button.number_clicks() == 0


def test_multi_click(button, clock):
    counts = []
    button.attach_multi_click(lambda: counts.append(button.number_clicks()))
    for _ in range(3):
        hold(button, clock, True, 100)
        hold(button, clock, False, 100)
    hold(button, clock, False, 500)
    assert counts == [3]


def test_long_press_sequence(button, clock):
    events = []
    pressed = []
    button.attach_long_press_start(events.append, "start")
    button.attach_long_press_stop(lambda: pressed.append(button.pressed_ms()))
    button.attach_click(events.append, "click")
    hold(button, clock, True, 1000)
    assert events == ["start"]
    assert button.is_long_pressed()
    assert button.state() is ButtonState.PRESS
    hold(button, clock, False, 200)
    assert len(pressed) == 1
    assert pressed[0] > button.press_ms
    assert events == ["start"]
    assert button.is_idle()


def test_during_long_press_interval(clock):
    fast = OneButton(clock=clock)
    fast_calls = []
    fast.attach_during_long_press(fast_calls.append, 1)
    hold(fast, clock, True, 2000)

    clock2 = FakeClock()
    slow = OneButton(clock=clock2)
    slow.long_press_interval_ms = 200
    slow_calls = []
    slow.attach_during_long_press(slow_calls.append, 1)
    hold(slow, clock2, True, 2000)

    assert len(fast_calls) > len(slow_calls) > 0


def test_short_glitch_is_debounced(button, clock):
    events = []
    button.attach_press(events.append, "press")
    hold(button, clock, True, 30)
    hold(button, clock, False, 200)
    assert events == []
    assert button.debounced_value() is False


def test_negative_debounce_activates_immediately(button, clock):
    button.debounce_ms = -50
    clock.now = 5
    assert button.debounce(True) is True
    assert button.debounce(False) is True


def test_idle_callback_fires_once(button, clock):
    idle = []
    button.attach_idle(lambda: idle.append(clock.now))
    hold(button, clock, False, 3000)
    assert len(idle) == 1
    assert idle[0] > button.idle_ms


def test_reads_active_low_input(clock):
    level = {"value": 1}
    events = []
    button = OneButton(lambda: level["value"], active_low=True, clock=clock)
    button.attach_click(events.append, "click")
    for value, duration in ((1, 100), (0, 100), (1, 600)):
        level["value"] = value
        for _ in range(duration // STEP):
            clock.now += STEP
            button.tick()
    assert events == ["click"]


def test_reads_active_high_input(clock):
    level = {"value": 0}
    events = []
    button = OneButton(clock=clock)
    button.setup(lambda: level["value"], active_low=False)
    button.attach_press(events.append, "press")
    level["value"] = 1
    for _ in range(10):
        clock.now += STEP
        button.tick()
    assert events == ["press"]


def test_tick_without_input_does_nothing(button, clock):
    clock.now = 500
    button.tick()
    assert button.state() is ButtonState.INIT
    assert button.debounced_value() is False


def test_reset_returns_to_init(button, clock):
    hold(button, clock, True, 100)
    assert button.state() is ButtonState.DOWN
    button.reset()
    assert button.is_idle()
    assert button.number_clicks() == 0
    assert button.pressed_ms() == 0


def test_detaching_callback(button, clock):
    events = []
    button.attach_click(events.append, "click")
    button.attach_click(None)
    hold(button, clock, True, 100)
    hold(button, clock, False, 600)
    assert events == []


def test_state_values_visited_by_machine(button, clock):
    seen = set()
    for level, duration in ((True, 100), (False, 600), (True, 1000), (False, 200)):
        for _ in range(duration // STEP):
            clock.now += STEP
            button.tick(level)
            seen.add(button.state().value)
    assert sorted(seen) == [0, 1, 2, 3, 6, 7]
    assert button.state() is ButtonState.INIT