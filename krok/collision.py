"""Swept collision tests between moving circles and line segments."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional

from krok.colliders import CircleCollider, Collider, LineCollider, RigidBody
from krok.geometry import Vec2


@dataclass
class CollisionInfo:
    """The earliest contact found by a collision test.

    ``toi`` is the time of impact as a fraction of the tested translation;
    1.0 with no colliders set means nothing was hit.
    """

    collider1: Optional[Collider] = None
    collider2: Optional[Collider] = None
    rigid_body1: Optional[RigidBody] = None
    rigid_body2: Optional[RigidBody] = None
    normal: Vec2 = field(default_factory=Vec2)
    toi: float = 1.0

    @property
    def collided(self) -> bool:
        return self.collider1 is not None


def _time_along_normal(distance: float, approach: float, radius: float) -> Optional[float]:
    """Time at which a circle at ``distance`` from a line, closing at ``approach``, touches it."""
    if approach <= 0.0:
        return None
    if distance >= -radius:
        return distance / approach
    return None


def circle_line(circle: CircleCollider, translation: Vec2, line: LineCollider) -> CollisionInfo:
    """Sweep ``circle`` by ``translation`` against a static, one-sided ``line``."""
    info = CollisionInfo()

    old_position = circle.center()
    radius = circle.radius()
    start = line.start()
    line_vector = start - line.end()
    line_normal = line_vector.normal()

    distance = line_normal.dot(old_position - start) - radius
    approach = -line_normal.dot(translation)

    toi = _time_along_normal(distance, approach, radius)
    if toi is None or toi > 1.0:
        return info

    poi = old_position + translation * toi
    along = (start - poi).dot(line_vector.normalized())
    if 0.0 < along < line_vector.length():
        info.collider1 = circle
        info.collider2 = line
        info.toi = toi
        info.normal = line_normal
    return info


def moving_circle_line(
    circle: CircleCollider,
    circle_translation: Vec2,
    line: LineCollider,
    line_translation: Vec2,
) -> CollisionInfo:
    """Sweep ``circle`` and ``line`` by their own translations against each other."""
    info = CollisionInfo()

    old_position = circle.center()
    radius = circle.radius()
    old_start = line.start()

    new_position = old_position + circle_translation
    new_start = old_start + line_translation
    new_end = line.end() + line_translation

    relative_translation = circle_translation - line_translation
    relative_position = new_position - old_start
    line_vector = new_start - new_end
    line_normal = line_vector.normal()

    distance = line_normal.dot(relative_position) - radius
    approach = -line_normal.dot(relative_translation)

    toi = _time_along_normal(distance, approach, radius)
    if toi is None or toi > 1.0:
        return info

    poi = old_position + circle_translation * toi
    along = (new_start - poi).dot(line_vector.normalized())
    if 0.0 < along < line_vector.length():
        info.collider1 = circle
        info.collider2 = line
        info.toi = toi
        info.normal = line_normal
    return info


def _first_contact(relative_position: Vec2, relative_motion: Vec2, reach: float):
    """Solve for the earliest time two circles ``reach`` apart touch.

    Returns ``0.0`` when they already overlap and are closing, the time in
    [0, 1) of a later contact, or None.
    """
    b = 2.0 * relative_position.dot(relative_motion)
    c = relative_position.length() ** 2 - reach ** 2

    if c < 0.0:
        return None if b >= 0.0 else 0.0

    a = relative_motion.length() ** 2
    if abs(a) < 0.001:
        return None

    discriminant = b * b - 4.0 * a * c
    if discriminant < 0.0:
        return None

    t = (-b - math.sqrt(discriminant)) / (2.0 * a)
    return t if 0.0 <= t < 1.0 else None


def circle_circle(circle: CircleCollider, translation: Vec2, other: CircleCollider) -> CollisionInfo:
    """Sweep ``circle`` by ``translation`` against the static circle ``other``."""
    info = CollisionInfo()

    p1 = circle.center()
    p2 = other.center()
    u = p1 - p2
    reach = circle.radius() + other.radius()

    b = 2.0 * u.dot(translation)
    c = u.length() ** 2 - reach ** 2
    if c < 0.0:
        if b >= 0.0:
            return info
        info.collider1 = circle
        info.collider2 = other
        info.toi = 0.0
        info.normal = u.normalized()
        return info

    t = _first_contact(u, translation, reach)
    if t is None:
        return info

    info.collider1 = circle
    info.collider2 = other
    info.toi = t
    info.normal = (p1 + translation * t - p2).normalized()
    return info


def moving_circle_circle(
    circle: CircleCollider,
    translation: Vec2,
    other: CircleCollider,
    other_translation: Vec2,
) -> CollisionInfo:
    """Sweep two circles by their own translations against each other."""
    info = CollisionInfo()

    p1 = circle.center() + translation
    p2 = other.center() + other_translation
    u = p1 - p2
    v = translation - other_translation
    reach = circle.radius() + other.radius()

    b = 2.0 * u.dot(v)
    c = u.length() ** 2 - reach ** 2
    if c < 0.0:
        if b >= 0.0:
            return info
        info.collider1 = circle
        info.collider2 = other
        info.toi = 0.0
        info.normal = u.normalized()
        return info

    t = _first_contact(u, v, reach)
    if t is None:
        return info

    info.collider1 = circle
    info.collider2 = other
    info.toi = t
    poi1 = p1 + translation * t
    poi2 = p2 + other_translation * t
    info.normal = (poi1 - poi2).normal()
    return info