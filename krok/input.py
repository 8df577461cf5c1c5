"""Keyboard and mouse state, and dispatch of window events to hoverable objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional, Protocol, runtime_checkable

from krok.geometry import Vec2

KEY_UNKNOWN = -1


class EventType(IntEnum):
    """Kinds of event a window can report."""

    CLOSED = 0
    RESIZED = 1
    LOST_FOCUS = 2
    GAINED_FOCUS = 3
    TEXT_ENTERED = 4
    KEY_PRESSED = 5
    KEY_RELEASED = 6
    MOUSE_WHEEL_SCROLLED = 7
    MOUSE_BUTTON_PRESSED = 8
    MOUSE_BUTTON_RELEASED = 9
    MOUSE_MOVED = 10
    MOUSE_ENTERED = 11
    MOUSE_LEFT = 12
    JOYSTICK_BUTTON_PRESSED = 13
    JOYSTICK_BUTTON_RELEASED = 14
    JOYSTICK_MOVED = 15
    JOYSTICK_CONNECTED = 16
    JOYSTICK_DISCONNECTED = 17
    TOUCH_BEGAN = 18
    TOUCH_MOVED = 19
    TOUCH_ENDED = 20
    SENSOR_CHANGED = 21


class Action(IntEnum):
    """What happened to a key or button."""

    RELEASE = 0
    PRESS = 1
    REPEAT = 2


class Hoverable(Protocol):
    """An object the mouse can hover over; higher layers take precedence."""

    active: bool
    layer: int

    def is_inside(self, point: Vec2) -> bool: ...

    def set_hovering(self, hovering: bool) -> None: ...


@runtime_checkable
class Clickable(Protocol):
    """A hoverable that also reacts to mouse buttons while hovered."""

    def on_click(self, button: int) -> None: ...

    def on_release(self, button: int) -> None: ...


@dataclass
class InputState:
    """Keys and mouse buttons held, pressed this frame and released this frame."""

    keys_pressed: set[int] = field(default_factory=set)
    keys_down: set[int] = field(default_factory=set)
    keys_up: set[int] = field(default_factory=set)
    buttons_pressed: set[int] = field(default_factory=set)
    buttons_down: set[int] = field(default_factory=set)
    buttons_up: set[int] = field(default_factory=set)
    mouse_position: Vec2 = field(default_factory=Vec2)
    previous_mouse_position: Vec2 = field(default_factory=Vec2)
    mouse_moved: bool = False
    mouse_in_screen: bool = False

    def is_pressed(self, key: int) -> bool:
        return key in self.keys_pressed

    def went_down(self, key: int) -> bool:
        return key in self.keys_down

    def went_up(self, key: int) -> bool:
        return key in self.keys_up


class EventHandler:
    """Turns raw key, button and cursor events into input state and hover changes."""

    def __init__(self, state: Optional[InputState] = None) -> None:
        self.state = state if state is not None else InputState()
        self._hoverables: list[Hoverable] = []
        self._current_hoverable: Optional[Hoverable] = None
        self._current_clickable: Optional[Clickable] = None

    @property
    def hovered(self) -> Optional[Hoverable]:
        return self._current_hoverable

    @property
    def clickable(self) -> Optional[Clickable]:
        return self._current_clickable

    def add(self, hoverable: Hoverable) -> None:
        self._hoverables.append(hoverable)

    def remove(self, hoverable: Hoverable) -> None:
        """Forget ``hoverable``; unknown objects are ignored."""
        for position, item in enumerate(self._hoverables):
            if item is hoverable:
                del self._hoverables[position]
                return

    def key_event(self, key: int, action: Action | int) -> None:
        if key == KEY_UNKNOWN:
            return
        if action == Action.PRESS:
            self.state.keys_down.add(key)
            self.state.keys_pressed.add(key)
        elif action == Action.RELEASE:
            self.state.keys_up.add(key)
            self.state.keys_pressed.discard(key)

    def mouse_button_event(self, button: int, action: Action | int) -> None:
        if button == KEY_UNKNOWN:
            return
        if action == Action.PRESS:
            self.state.buttons_down.add(button)
            self.state.buttons_pressed.add(button)
            if self._current_clickable is not None:
                self._current_clickable.on_click(button)
        elif action == Action.RELEASE:
            self.state.buttons_up.add(button)
            self.state.buttons_pressed.discard(button)
            if self._current_clickable is not None:
                self._current_clickable.on_release(button)

    def cursor_moved(self, x: float, y: float) -> None:
        """Record the cursor position and update which hoverable is under it."""
        position = Vec2(float(x), float(y))
        self.state.mouse_position = position
        self.state.mouse_moved = True

        candidate: Optional[Hoverable] = None
        for hoverable in reversed(self._hoverables):
            if not hoverable.active or not hoverable.is_inside(position):
                continue
            if candidate is None or hoverable.layer > candidate.layer:
                candidate = hoverable

        if candidate is self._current_hoverable:
            return
        if self._current_hoverable is not None:
            self._current_hoverable.set_hovering(False)

        self._current_hoverable = candidate
        self._current_clickable = None
        if candidate is None:
            return

        candidate.set_hovering(True)
        if isinstance(candidate, Clickable):
            self._current_clickable = candidate

    def cursor_entered(self, entered: bool) -> None:
        self.state.mouse_in_screen = bool(entered)

    def update_events(self) -> None:
        """Start a new frame: forget this frame's presses, releases and movement."""
        self.state.previous_mouse_position = self.state.mouse_position
        self.state.mouse_moved = False
        self.state.keys_down.clear()
        self.state.keys_up.clear()
        self.state.buttons_down.clear()
        self.state.buttons_up.clear()

    def clear_all(self) -> None:
        self._hoverables.clear()
        self._current_hoverable = None
        self._current_clickable = None