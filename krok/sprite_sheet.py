"""Sprite sheets: grids of frames played back through named animations."""

from __future__ import annotations

import logging
from typing import Optional, Union

from krok.animation import Animation

_log = logging.getLogger(__name__)

DEFAULT_NAME = "Default"
DEFAULT_FRAME_DURATION = 1.0 / 60.0


class SpriteSheet:
    """A grid of ``columns`` by ``rows`` frames and the animations that play over them.

    ``uv_offset`` is the texture offset of the frame currently shown and
    ``uv_scale`` the size of one frame in texture units.
    """

    def __init__(
        self,
        columns: int,
        rows: int,
        default_animation: Union[bool, int, Animation, None] = False,
    ) -> None:
        if columns < 1 or rows < 1:
            raise ValueError("A sprite sheet needs at least one column and one row")
        self.columns = columns
        self.rows = rows
        self._x_value = 1.0 / columns
        self._y_value = 1.0 / rows
        self._uv_offset = (0.0, 0.0)
        self._current_index = 0
        self._animations: list[Animation] = []
        self._names: dict[str, int] = {}

        if default_animation is None:
            return
        if isinstance(default_animation, Animation):
            self.add_animation(default_animation, DEFAULT_NAME)
        elif isinstance(default_animation, bool):
            if default_animation:
                self.add_animation(
                    Animation.from_range(0, self.frame_count - 1, DEFAULT_FRAME_DURATION),
                    DEFAULT_NAME,
                )
        elif isinstance(default_animation, int):
            count = min(default_animation, self.frame_count)
            self.add_animation(
                Animation.from_range(0, count - 1, DEFAULT_FRAME_DURATION), DEFAULT_NAME
            )
        else:
            raise TypeError("default_animation must be a bool, a frame count or an Animation")

    @property
    def frame_count(self) -> int:
        return self.columns * self.rows

    @property
    def uv_offset(self) -> tuple[float, float]:
        return self._uv_offset

    @property
    def uv_scale(self) -> tuple[float, float]:
        return (self._x_value, self._y_value)

    @property
    def current_animation_index(self) -> int:
        return self._current_index

    @property
    def animations(self) -> tuple[Animation, ...]:
        return tuple(self._animations)

    def update(self, delta_time: float) -> None:
        """Advance the current animation and show the frame it lands on."""
        animation = self.current_animation()
        if animation is None:
            return
        animation.animate(delta_time)
        self.set_current_frame(animation.current_frame().frame_index)

    def set_current_frame(self, frame: int) -> None:
        """Show sheet frame ``frame``; frames outside the sheet are ignored with a warning."""
        if not 0 <= frame < self.frame_count:
            _log.warning("Frame %d does not exist, the frame was not changed", frame)
            return
        self._uv_offset = (
            self._x_value * (frame % self.columns),
            self._y_value * (frame // self.columns),
        )

    def set_current_animation(self, key: Union[int, str]) -> None:
        """Switch to the animation at an index or with a name, restarting it."""
        if isinstance(key, str):
            index = self._names.get(key)
            if index is None:
                _log.warning("Animation named %r does not exist", key)
                return
            key = index
        if key == self._current_index:
            return
        if not 0 <= key < len(self._animations):
            raise IndexError("Animation does not exist")
        self._current_index = key
        self._animations[key].reset()

    def current_animation(self) -> Optional[Animation]:
        if not self._animations:
            return None
        return self._animations[self._current_index]

    def add_animation(self, animation: Animation, name: str) -> int:
        """Store ``animation`` under ``name`` and return its index.

        An animation already stored under ``name`` is replaced in place.
        """
        if not self._is_valid(animation):
            raise ValueError("Animation uses frames that are not on this sheet")
        existing = self._names.get(name)
        if existing is not None:
            _log.warning("Animation %r already exists and will be overwritten", name)
            self._animations[existing] = animation
            return existing
        index = len(self._animations)
        self._names[name] = index
        self._animations.append(animation)
        return index

    def get_animation(self, key: Union[int, str]) -> Animation:
        if isinstance(key, str):
            if key not in self._names:
                raise KeyError(f"No animation named {key!r}")
            return self._animations[self._names[key]]
        if not 0 <= key < len(self._animations):
            raise IndexError("Index for animation is out of range")
        return self._animations[key]

    def generate_default_animations(self, duration: float) -> None:
        """Replace all animations with one per row of the sheet."""
        self._animations = [
            Animation.from_range(self.columns * row, self.columns * row + self.columns, duration)
            for row in range(self.rows)
        ]
        self._names.clear()
        self._current_index = 0

    def _is_valid(self, animation: Animation) -> bool:
        if len(animation.frames) < 2:
            return False
        return all(frame.frame_index <= self.frame_count for frame in animation.frames)