import pytest

from krok.geometry import Vec2
from krok.input import KEY_UNKNOWN, Action, EventHandler, EventType, InputState

SPACE = 32
LEFT_BUTTON = 0


class Box:
    def __init__(self, left, top, right, bottom, layer=0):
        self.bounds = (left, top, right, bottom)
        self.layer = layer
        self.active = True
        self.hovering = False
        self.history = []

    def is_inside(self, point):
        left, top, right, bottom = self.bounds
        return left <= point.x <= right and top <= point.y <= bottom

    def set_hovering(self, hovering):
        self.hovering = hovering
        self.history.append(hovering)


class Button(Box):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.clicks = []
        self.releases = []

    def on_click(self, button):
        self.clicks.append(button)

    def on_release(self, button):
        self.releases.append(button)


def test_event_type_order_matches_window_events():
    assert EventType(0) is EventType.CLOSED
    assert EventType(len(EventType) - 1) is EventType.SENSOR_CHANGED


def test_key_press_and_release():
    handler = EventHandler()
    handler.key_event(SPACE, Action.PRESS)
    assert handler.state.is_pressed(SPACE)
    assert handler.state.went_down(SPACE)
    assert not handler.state.went_up(SPACE)
    handler.key_event(SPACE, Action.RELEASE)
    assert not handler.state.is_pressed(SPACE)
    assert handler.state.went_up(SPACE)


def test_unknown_key_and_repeat_are_ignored():
    handler = EventHandler()
    handler.key_event(KEY_UNKNOWN, Action.PRESS)
    handler.key_event(SPACE, Action.REPEAT)
    assert handler.state.keys_pressed == set()
    assert handler.state.keys_down == set()


def test_update_events_clears_frame_state_but_keeps_held_keys():
    state = InputState()
    handler = EventHandler(state)
    handler.key_event(SPACE, Action.PRESS)
    handler.mouse_button_event(LEFT_BUTTON, Action.PRESS)
    handler.cursor_moved(3, 4)
    handler.update_events()
    assert state.is_pressed(SPACE)
    assert not state.went_down(SPACE)
    assert state.buttons_down == set()
    assert LEFT_BUTTON in state.buttons_pressed
    assert state.previous_mouse_position == Vec2(3.0, 4.0)
    assert state.mouse_moved is False


def test_cursor_moved_records_position():
    handler = EventHandler()
    handler.cursor_moved(7, 9)
    assert handler.state.mouse_position == Vec2(7.0, 9.0)
    assert handler.state.mouse_moved is True


def test_highest_layer_wins():
    handler = EventHandler()
    low = Box(0, 0, 10, 10, layer=1)
    high = Box(0, 0, 10, 10, layer=5)
    handler.add(high)
    handler.add(low)
    handler.cursor_moved(5, 5)
    assert handler.hovered is high
    assert high.hovering and not low.hovering


def test_equal_layers_prefer_last_added():
    handler = EventHandler()
    first = Box(0, 0, 10, 10)
    second = Box(0, 0, 10, 10)
    handler.add(first)
    handler.add(second)
    handler.cursor_moved(5, 5)
    assert handler.hovered is second


def test_hover_switches_between_objects():
    handler = EventHandler()
    left = Box(0, 0, 10, 10)
    right = Box(20, 0, 30, 10)
    handler.add(left)
    handler.add(right)
    handler.cursor_moved(5, 5)
    handler.cursor_moved(25, 5)
    assert handler.hovered is right
    assert left.history == [True, False]
    handler.cursor_moved(50, 50)
    assert handler.hovered is None
    assert right.history == [True, False]


def test_inactive_hoverable_is_skipped():
    handler = EventHandler()
    box = Box(0, 0, 10, 10)
    box.active = False
    handler.add(box)
    handler.cursor_moved(5, 5)
    assert handler.hovered is None
    assert box.history == []


def test_clicks_go_to_hovered_clickable():
    handler = EventHandler()
    button = Button(0, 0, 10, 10)
    handler.add(button)
    handler.mouse_button_event(LEFT_BUTTON, Action.PRESS)
    assert button.clicks == []
    handler.cursor_moved(5, 5)
    assert handler.clickable is button
    handler.mouse_button_event(LEFT_BUTTON, Action.PRESS)
    handler.mouse_button_event(LEFT_BUTTON, Action.RELEASE)
    assert button.clicks == [LEFT_BUTTON]
    assert button.releases == [LEFT_BUTTON]
    assert LEFT_BUTTON in handler.state.buttons_up


def test_plain_hoverable_is_not_clickable():
    handler = EventHandler()
    handler.add(Box(0, 0, 10, 10))
    handler.cursor_moved(5, 5)
    assert handler.hovered is not None
    assert handler.clickable is None


@pytest.mark.parametrize("entered", [True, False])
def test_cursor_entered(entered):
    handler = EventHandler()
    handler.cursor_entered(entered)
    assert handler.state.mouse_in_screen is entered


def test_remove_forgets_hoverable():
    handler = EventHandler()
    box = Box(0, 0, 10, 10)
    handler.add(box)
    handler.remove(box)
    handler.remove(box)
    handler.cursor_moved(5, 5)
    assert handler.hovered is None


def test_clear_all_resets_hover():
    handler = EventHandler()
    button = Button(0, 0, 10, 10)
    handler.add(button)
    handler.cursor_moved(5, 5)
    handler.clear_all()
    assert handler.hovered is None
    assert handler.clickable is None
    handler.cursor_moved(6, 6)
    assert handler.hovered is None