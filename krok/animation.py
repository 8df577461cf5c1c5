"""Frame-based animations driven by elapsed time."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional

_log = logging.getLogger(__name__)

MIN_DURATION = 0.001


class AnimationFrame:
    """One frame of an animation: a sprite frame index shown for a duration in seconds."""

    __slots__ = ("frame_index", "_duration")

    def __init__(self, frame_index: int, duration: float) -> None:
        self.frame_index = frame_index
        self.duration = duration

    @property
    def duration(self) -> float:
        return self._duration

    @duration.setter
    def duration(self, seconds: float) -> None:
        self._duration = MIN_DURATION if seconds < MIN_DURATION else seconds

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AnimationFrame):
            return NotImplemented
        return (self.frame_index, self.duration) == (other.frame_index, other.duration)

    def __repr__(self) -> str:
        return f"AnimationFrame(frame_index={self.frame_index}, duration={self.duration})"


class Animation:
    """A looping sequence of frames with optional per-frame and end-of-loop callbacks."""

    def __init__(
        self,
        frames: Iterable[AnimationFrame],
        on_over: Optional[Callable[[], None]] = None,
    ) -> None:
        self.frames = list(frames)
        if len(self.frames) < 2:
            raise ValueError("Not enough frames")
        self.on_over = on_over
        self.speed = 1.0
        self.paused = False
        self._current_index = 0
        self._time_on_frame = 0.0
        self._functions: dict[int, Callable[[], None]] = {}

    @classmethod
    def from_range(
        cls,
        first: int,
        last: int,
        duration: float,
        on_over: Optional[Callable[[], None]] = None,
    ) -> Animation:
        """Build an animation stepping from frame ``first`` to ``last`` inclusive."""
        if first < 0 or last < 0:
            raise ValueError("Frame indices cannot be negative")
        if first == last:
            raise ValueError("Last frame cannot be equal to the first frame")
        step = 1 if first < last else -1
        frames = [AnimationFrame(i, duration) for i in range(first, last + step, step)]
        return cls(frames, on_over)

    @property
    def current_frame_index(self) -> int:
        return self._current_index

    def current_frame(self) -> AnimationFrame:
        return self.frames[self._current_index]

    def reset(self) -> None:
        """Go back to the first frame with no elapsed time."""
        self._time_on_frame = 0.0
        self._set_frame(0)

    def add_function_on_frame(self, frame_index: int, function: Callable[[], None]) -> None:
        """Call ``function`` each time the animation enters ``frame_index``."""
        if not 0 <= frame_index < len(self.frames):
            raise IndexError("Index is out of range")
        if frame_index in self._functions:
            _log.warning("Frame %d already has a function, it will be overridden", frame_index)
        self._functions[frame_index] = function

    def animate(self, delta_time: float) -> None:
        """Advance by ``delta_time`` seconds, stepping over as many frames as it covers."""
        if self.paused:
            return
        self._time_on_frame += delta_time * self.speed
        while True:
            duration = self.frames[self._current_index].duration
            if self._time_on_frame < duration:
                return
            self._time_on_frame -= duration
            if self._current_index == len(self.frames) - 1:
                if self.on_over is not None:
                    self.on_over()
                self._set_frame(0)
            else:
                self._set_frame(self._current_index + 1)

    def _set_frame(self, frame_index: int) -> None:
        if frame_index == self._current_index:
            self._time_on_frame = 0.0
        function = self._functions.get(frame_index)
        if function is not None:
            function()
        self._current_index = frame_index