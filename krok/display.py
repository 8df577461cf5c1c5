"""Anchor modes for quads and the vertex positions each one produces."""

from __future__ import annotations

from enum import IntEnum


class DisplayMode(IntEnum):
    """Which point of a unit quad sits at the object's origin."""

    TOP_LEFT = 0
    TOP_RIGHT = 1
    CENTER = 2
    BOTTOM_LEFT = 3
    BOTTOM_RIGHT = 4
    TOP_CENTER = 5
    LEFT_CENTER = 6
    RIGHT_CENTER = 7
    BOTTOM_CENTER = 8


# Vertices in triangle-strip order: top left, bottom left, top right, bottom right.
_VERTICES: dict[DisplayMode, tuple[float, ...]] = {
    DisplayMode.TOP_LEFT: (0.0, 1.0, 0.0, 0.0, 1.0, 1.0, 1.0, 0.0),
    DisplayMode.TOP_RIGHT: (-1.0, 1.0, -1.0, 0.0, 0.0, 1.0, 0.0, 0.0),
    DisplayMode.CENTER: (-0.5, 0.5, -0.5, -0.5, 0.5, 0.5, 0.5, -0.5),
    DisplayMode.BOTTOM_LEFT: (0.0, 0.0, 0.0, -1.0, 1.0, 0.0, 1.0, -1.0),
    DisplayMode.BOTTOM_RIGHT: (-1.0, 0.0, -1.0, -1.0, 0.0, 0.0, 0.0, -1.0),
    DisplayMode.TOP_CENTER: (-0.5, 1.0, -0.5, 0.0, 0.5, 1.0, 0.5, 0.0),
    DisplayMode.LEFT_CENTER: (0.0, 0.5, 0.0, -0.5, 1.0, 0.5, 1.0, -0.5),
    DisplayMode.RIGHT_CENTER: (-1.0, 0.5, -1.0, -0.5, 0.0, 0.5, 0.0, -0.5),
    DisplayMode.BOTTOM_CENTER: (-0.5, 0.0, -0.5, -1.0, 0.5, 0.0, 0.5, -1.0),
}


def vertex_data(mode: DisplayMode | int) -> tuple[float, ...]:
    """Return the eight coordinates of the unit quad for ``mode``.

    Raises ValueError for a value that is not a display mode.
    """
    return _VERTICES[DisplayMode(mode)]