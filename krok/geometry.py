"""Two-dimensional vectors and polygon shapes built from them."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec2:
        return Vec2(self.x / scalar, self.y / scalar)

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y))

    def dot(self, other: Vec2) -> float:
        return self.x * other.x + self.y * other.y

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def normalized(self) -> Vec2:
        """Return the unit vector in this direction, or the zero vector for zero."""
        length = self.length()
        if length == 0.0:
            return Vec2()
        return self / length

    def normal(self) -> Vec2:
        """Return the unit vector perpendicular to this one, a quarter turn anticlockwise."""
        return Vec2(-self.y, self.x).normalized()

    def reflect(self, normal: Vec2, bounciness: float = 1.0) -> Vec2:
        """Reflect off a surface with unit ``normal``, keeping ``bounciness`` of the normal part."""
        return self - normal * ((1.0 + bounciness) * self.dot(normal))

    def rotated(self, radians: float, around: Optional[Vec2] = None) -> Vec2:
        """Rotate anticlockwise by ``radians`` around ``around`` (the origin by default)."""
        pivot = around if around is not None else Vec2()
        offset = self - pivot
        cos, sin = math.cos(radians), math.sin(radians)
        return pivot + Vec2(offset.x * cos - offset.y * sin, offset.x * sin + offset.y * cos)


class PolyShape:
    """An ordered list of polygon corners with chainable transformations."""

    def __init__(self, points: Iterable[Vec2] = ()) -> None:
        self._points = list(points)

    @property
    def points(self) -> list[Vec2]:
        return list(self._points)

    def __iter__(self) -> Iterator[Vec2]:
        return iter(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def __repr__(self) -> str:
        return f"PolyShape({self._points!r})"

    @classmethod
    def rectangle(cls, up_left: Vec2, down_right: Vec2) -> PolyShape:
        width = Vec2((down_right - up_left).x, 0.0)
        return cls([up_left, up_left + width, down_right, down_right - width])

    @classmethod
    def rectangle_sized(cls, up_left: Vec2, width: float, height: float) -> PolyShape:
        return cls.rectangle(up_left, up_left + Vec2(width, height))

    @classmethod
    def symmetric(cls, corners: int, diameter: float) -> PolyShape:
        """Place ``corners`` points on a circle of radius ``diameter`` around the origin."""
        step = 365.0 / corners
        start = Vec2(0.0, diameter)
        return cls(start.rotated(math.radians(step * i)) for i in range(corners))

    @classmethod
    def triangle(cls, diameter: float) -> PolyShape:
        return cls.symmetric(3, diameter)

    def rotate(self, radians: float) -> PolyShape:
        """Rotate every point around the shape's midpoint."""
        pivot = self.midpoint()
        self._points = [point.rotated(radians, pivot) for point in self._points]
        return self

    def translate(self, translation: Vec2) -> PolyShape:
        self._points = [point + translation for point in self._points]
        return self

    def invert(self) -> PolyShape:
        """Reverse the order of the points."""
        self._points.reverse()
        return self

    def midpoint(self) -> Vec2:
        if not self._points:
            raise ValueError("An empty shape has no midpoint")
        total = Vec2()
        for point in self._points:
            total = total + point
        return total / len(self._points)