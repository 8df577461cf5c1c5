"""RGBA colours with 8-bit channels."""

from __future__ import annotations

from typing import Iterator


class Color:
    """An RGBA colour whose channels are integers clamped to 0..255."""

    MAX = 255

    __slots__ = ("r", "g", "b", "alpha")

    def __init__(self, r: int = 0, g: int = 0, b: int = 0, alpha: int = MAX) -> None:
        self.r = self._clamp(r)
        self.g = self._clamp(g)
        self.b = self._clamp(b)
        self.alpha = self._clamp(alpha)

    @classmethod
    def _clamp(cls, value: float) -> int:
        value = int(value)
        if value < 0:
            return 0
        return value if value < cls.MAX else cls.MAX

    def __iter__(self) -> Iterator[int]:
        return iter((self.r, self.g, self.b, self.alpha))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return tuple(self) == tuple(other)

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __repr__(self) -> str:
        return f"Color(r={self.r}, g={self.g}, b={self.b}, alpha={self.alpha})"

    def __mul__(self, value: float) -> Color:
        return Color(*(int(channel * value) for channel in self))

    __rmul__ = __mul__

    def __truediv__(self, value: float) -> Color:
        return Color(*(int(channel / value) for channel in self))

    def units(self) -> tuple[float, float, float, float]:
        """Return the channels scaled to the range 0.0..1.0."""
        return tuple(channel / self.MAX for channel in self)  # type: ignore[return-value]

    @classmethod
    def from_hex(cls, value: int) -> Color:
        """Build an opaque colour from a 0xRRGGBB value."""
        return cls((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)

    @classmethod
    def white(cls) -> Color:
        return cls.from_hex(0xFFFFFF)

    @classmethod
    def black(cls) -> Color:
        return cls.from_hex(0x000000)

    @classmethod
    def red(cls) -> Color:
        return cls.from_hex(0xFF0000)

    @classmethod
    def green(cls) -> Color:
        return cls.from_hex(0x00FF00)

    @classmethod
    def blue(cls) -> Color:
        return cls.from_hex(0x0000FF)

    @classmethod
    def yellow(cls) -> Color:
        return cls.from_hex(0xFFFF00)

    @classmethod
    def pink(cls) -> Color:
        return cls.from_hex(0xFFC0CB)

    @classmethod
    def gray(cls) -> Color:
        return cls.from_hex(0x808080)

    @classmethod
    def orange(cls) -> Color:
        return cls.from_hex(0xFFA500)

    @classmethod
    def maroon(cls) -> Color:
        return cls.from_hex(0x800000)