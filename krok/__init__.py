"""Window-independent building blocks of a small 2D game engine."""

__version__ = "0.1.0"

__all__ = [
    "animation",
    "collision",
    "colliders",
    "color",
    "display",
    "geometry",
    "input",
    "paths",
    "physics",
    "rendering",
    "resources",
    "sprite_sheet",
]