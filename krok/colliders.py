"""Collision shapes and the components that group them on a body."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional, Union

from krok.geometry import Vec2


@dataclass
class Body:
    """The transform a collider component is attached to: a position and a scale."""

    position: Vec2 = field(default_factory=Vec2)
    scale: Vec2 = field(default_factory=lambda: Vec2(1.0, 1.0))
    name: str = ""

    def translate(self, translation: Vec2) -> None:
        self.position = self.position + translation

    def to_global(self, local: Vec2) -> Vec2:
        """Map a point local to this body into world space."""
        return Vec2(
            self.position.x + local.x * self.scale.x,
            self.position.y + local.y * self.scale.y,
        )


class Collider:
    """A shape that follows a parent body and belongs to at most one component."""

    def __init__(self) -> None:
        self.parent: Optional[Body] = None
        self._component: Optional[ColliderComponent] = None

    @property
    def component(self) -> Optional[ColliderComponent]:
        return self._component

    def attach(self, component: ColliderComponent) -> None:
        """Make this collider part of ``component``; a collider can only be attached once."""
        if self._component is not None:
            raise RuntimeError("Cannot reassign collider to a different component")
        self._component = component
        if component.body is not None:
            self.parent = component.body

    def _to_global(self, local: Vec2) -> Vec2:
        return local if self.parent is None else self.parent.to_global(local)

    def _global_scale(self) -> Vec2:
        return Vec2(1.0, 1.0) if self.parent is None else self.parent.scale


class CircleCollider(Collider):
    """A circle at an offset from its parent body."""

    def __init__(self, radius: float, offset: Vec2 = Vec2()) -> None:
        super().__init__()
        self._radius = radius
        self.local_center = offset

    def center(self) -> Vec2:
        return self._to_global(self.local_center)

    def radius(self) -> float:
        """The radius scaled by the mean of the parent's x and y scale."""
        scale = self._global_scale()
        return self._radius * (scale.x + scale.y) / 2.0


class PointCollider(CircleCollider):
    """A circle of radius zero, whatever the parent's scale."""

    def __init__(self, offset: Vec2 = Vec2()) -> None:
        super().__init__(0.0, offset)

    def radius(self) -> float:
        return 0.0


class LineCollider(Collider):
    """A line segment between two points local to its parent body."""

    def __init__(self, start: Vec2, end: Vec2) -> None:
        super().__init__()
        self.local_start = start
        self.local_end = end

    def start(self) -> Vec2:
        return self._to_global(self.local_start)

    def end(self) -> Vec2:
        return self._to_global(self.local_end)


Shape = Union[CircleCollider, LineCollider, Iterable[Vec2], None]


class ColliderComponent:
    """A static group of circle and line colliders sharing one body."""

    def __init__(self, body: Optional[Body] = None, shape: Shape = None) -> None:
        self._body = body
        self._circles: list[CircleCollider] = []
        self._lines: list[LineCollider] = []
        self.bounciness = 0.5
        self.active = True
        if isinstance(shape, Collider):
            self.add(shape)
        elif shape is not None:
            self.add_points(shape)

    @property
    def body(self) -> Optional[Body]:
        return self._body

    @body.setter
    def body(self, body: Optional[Body]) -> None:
        self._body = body
        for collider in (*self._circles, *self._lines):
            collider.parent = body

    @property
    def circles(self) -> tuple[CircleCollider, ...]:
        return tuple(self._circles)

    @property
    def lines(self) -> tuple[LineCollider, ...]:
        return tuple(self._lines)

    def add(self, collider: Optional[Collider]) -> None:
        if collider is None:
            return
        if isinstance(collider, CircleCollider):
            target: list = self._circles
        elif isinstance(collider, LineCollider):
            target = self._lines
        else:
            raise TypeError(f"Unsupported collider {collider!r}")
        collider.attach(self)
        target.append(collider)

    def add_points(self, points: Iterable[Vec2]) -> None:
        """Add a closed outline: a point at every corner and a line along every edge."""
        points = list(points)
        if not points:
            return
        self.add(PointCollider(points[0]))
        if len(points) < 2:
            return
        for previous, current in zip(points, points[1:]):
            self.add(LineCollider(previous, current))
            self.add(PointCollider(current))
        self.add(LineCollider(points[-1], points[0]))


TriggerCallback = Callable[[Collider], None]


class TriggerColliderComponent(ColliderComponent):
    """A collider component that tracks which colliders touch it from frame to frame."""

    def __init__(self, body: Optional[Body] = None, shape: Shape = None) -> None:
        super().__init__(body, shape)
        self._collided: list[Collider] = []
        self._colliding: list[Collider] = []
        self.on_trigger_enter: Optional[TriggerCallback] = None
        self.on_trigger_exit: Optional[TriggerCallback] = None

    @property
    def all_colliding(self) -> tuple[Collider, ...]:
        return tuple(self._colliding)

    def collides_with(self, other: Collider) -> None:
        """Record a contact this frame, firing the enter callback for new contacts."""
        if self.is_colliding(other):
            return
        self._colliding.append(other)
        if self.on_trigger_enter is not None and not self.was_colliding(other):
            self.on_trigger_enter(other)

    def update(self) -> None:
        """End the frame: fire exit callbacks for lost contacts and start a new frame."""
        for collider in reversed(self._collided):
            if self.on_trigger_exit is not None and not self.is_colliding(collider):
                self.on_trigger_exit(collider)
        self._collided = self._colliding
        self._colliding = []

    def is_colliding(self, other: Optional[Collider] = None) -> bool:
        """Whether ``other`` touches this frame, or with no argument whether anything does."""
        if other is None:
            return bool(self._colliding)
        return any(collider is other for collider in self._colliding)

    def was_colliding(self, other: Collider) -> bool:
        return any(collider is other for collider in self._collided)


class RigidBody(TriggerColliderComponent):
    """A trigger component that moves under velocity, acceleration and gravity."""

    def __init__(self, body: Optional[Body] = None, shape: Shape = None) -> None:
        super().__init__(body, shape)
        self.velocity = Vec2()
        self.acceleration = Vec2()
        self.weight = 1.0
        self.has_gravity = False