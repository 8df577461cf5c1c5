"""A scene that moves rigid bodies and resolves their collisions."""

from __future__ import annotations

from typing import Iterable, Optional

from krok.colliders import (
    Body,
    CircleCollider,
    Collider,
    ColliderComponent,
    LineCollider,
    RigidBody,
    TriggerColliderComponent,
)
from krok.collision import (
    CollisionInfo,
    circle_circle,
    circle_line,
    moving_circle_circle,
    moving_circle_line,
)
from krok.geometry import Vec2

MIN_TOI = 0.1


class PhysicsScene:
    """Holds static colliders, triggers and rigid bodies and steps them through time."""

    def __init__(
        self,
        gravity: Vec2 = Vec2(0.0, 9.81),
        physics_speed: float = 5.0,
        resistance: float = 0.04,
    ) -> None:
        self.gravity = gravity
        self.resistance = resistance
        self._physics_speed = 0.0
        self.set_physics_speed(physics_speed)
        self._cycle_speed = 0.0
        self._statics: list[ColliderComponent] = []
        self._triggers: list[TriggerColliderComponent] = []
        self._rigids: list[RigidBody] = []

    @property
    def physics_speed(self) -> float:
        return self._physics_speed

    @property
    def statics(self) -> tuple[ColliderComponent, ...]:
        return tuple(self._statics)

    @property
    def triggers(self) -> tuple[TriggerColliderComponent, ...]:
        return tuple(self._triggers)

    @property
    def rigid_bodies(self) -> tuple[RigidBody, ...]:
        return tuple(self._rigids)

    def _list_for(self, component: ColliderComponent) -> list:
        if isinstance(component, RigidBody):
            return self._rigids
        if isinstance(component, TriggerColliderComponent):
            return self._triggers
        if isinstance(component, ColliderComponent):
            return self._statics
        raise TypeError(f"{component!r} is not a collider component")

    def add(self, component: ColliderComponent) -> None:
        """Register a static collider, trigger or rigid body with the scene."""
        self._list_for(component).append(component)

    def remove(self, component: ColliderComponent) -> None:
        """Unregister ``component``; components not in the scene are ignored."""
        items = self._list_for(component)
        for position, item in enumerate(items):
            if item is component:
                del items[position]
                return

    def set_physics_speed(self, speed: float) -> None:
        """Set how fast simulated time runs; negative speeds become zero."""
        self._physics_speed = max(0.0, speed)

    def clear(self) -> None:
        self._statics.clear()
        self._triggers.clear()
        self._rigids.clear()

    def step(self, delta_seconds: float, paused: bool = False) -> None:
        """Advance the simulation by ``delta_seconds`` of real time."""
        self._cycle_speed = 0.0 if paused else self._physics_speed * delta_seconds
        self._calculate_velocities()
        self._check_rigids()

    def overlay_circle(
        self,
        source: Optional[Body],
        radius: float,
        offset: Vec2 = Vec2(),
    ) -> list[Collider]:
        """Return every collider in the scene touched by a circle placed on ``source``."""
        probe = CircleCollider(radius, offset)
        probe.parent = source
        found: list[Collider] = []
        for component in (*self._statics, *self._triggers, *self._rigids):
            found.extend(self._overlapping(component, probe))
        return found

    @staticmethod
    def _overlapping(component: ColliderComponent, probe: CircleCollider) -> Iterable[Collider]:
        center = probe.center()
        radius = probe.radius()
        for circle in component.circles:
            if (center - circle.center()).length() <= radius + circle.radius():
                yield circle
        for line in component.lines:
            start, end = line.start(), line.end()
            direction = end - start
            middle = (start + end) / 2.0
            squared = direction.dot(direction)
            t = (center - middle).dot(direction) / squared if squared else 0.0
            if t < 0.0:
                closest = start
            elif t > 1.0:
                closest = end
            else:
                closest = middle
            if (closest - center).length() <= radius:
                yield line

    def _calculate_velocities(self) -> None:
        for rigid in self._rigids:
            if not rigid.active:
                continue
            if rigid.has_gravity:
                rigid.acceleration = rigid.acceleration + self.gravity
            rigid.velocity = rigid.velocity + rigid.acceleration * self._cycle_speed
            drag = -rigid.velocity * self.resistance
            rigid.velocity = rigid.velocity + drag * self._cycle_speed
            if rigid.velocity.length() < self.resistance:
                rigid.velocity = Vec2()
            rigid.acceleration = Vec2()

    def _check_rigids(self) -> None:
        multiplier = 1.0
        while True:
            shortest = CollisionInfo()
            for index, rigid in enumerate(self._rigids):
                info = self._check_rigid(rigid, multiplier, index)
                if info.toi < MIN_TOI:
                    self._resolve(info)
                    continue
                if info.toi < shortest.toi:
                    shortest = info

            if shortest.toi < 1.0:
                relative = shortest.toi * multiplier
                self._apply_velocities(shortest.toi)
                self._resolve(shortest)
                multiplier -= relative
                if multiplier >= MIN_TOI:
                    continue
                return

            self._apply_velocities(multiplier)
            return

    def _apply_velocities(self, multiplier: float) -> None:
        for rigid in self._rigids:
            if not rigid.active:
                continue
            translation = rigid.velocity * self._cycle_speed * multiplier
            for trigger in self._triggers:
                if not trigger.active:
                    continue
                info = self._static_collision(rigid, translation, trigger)
                if info.toi < multiplier and info.collider1 is not None:
                    trigger.collides_with(info.collider1)
            if rigid.body is not None:
                rigid.body.translate(translation)

    def _check_rigid(self, rigid: RigidBody, multiplier: float, index: int) -> CollisionInfo:
        shortest = CollisionInfo()
        if not rigid.active:
            return shortest

        desired = rigid.velocity * self._cycle_speed * multiplier

        for static in self._statics:
            if not static.active:
                continue
            info = self._static_collision(rigid, desired, static)
            if info.toi < shortest.toi:
                info.rigid_body1 = rigid
                shortest = info

        for other in self._rigids[index + 1:]:
            if not other.active:
                continue
            other_desired = other.velocity * self._cycle_speed * multiplier
            info = self._rigid_collision(rigid, desired, other, other_desired)
            if info.toi < shortest.toi:
                info.rigid_body1 = rigid
                info.rigid_body2 = other
                shortest = info

        return shortest

    @classmethod
    def _rigid_collision(
        cls,
        first: RigidBody,
        first_translation: Vec2,
        second: RigidBody,
        second_translation: Vec2,
    ) -> CollisionInfo:
        shortest = CollisionInfo()

        def candidates():
            for circle in first.circles:
                for other in second.circles:
                    yield moving_circle_circle(circle, first_translation, other, second_translation)
            for circle in first.circles:
                for line in second.lines:
                    yield moving_circle_line(circle, first_translation, line, second_translation)
            for line in first.lines:
                for circle in second.circles:
                    yield moving_circle_line(circle, second_translation, line, first_translation)

        for info in candidates():
            if info.toi < MIN_TOI:
                cls._resolve_rigids(first, second, info.normal)
                continue
            if info.toi < shortest.toi:
                shortest = info
        return shortest

    @staticmethod
    def _static_collision(
        rigid: RigidBody, translation: Vec2, static: ColliderComponent
    ) -> CollisionInfo:
        shortest = CollisionInfo()

        def candidates():
            for circle in rigid.circles:
                for line in static.lines:
                    yield circle_line(circle, translation, line)
                for other in static.circles:
                    yield circle_circle(circle, translation, other)
            for line in rigid.lines:
                for circle in static.circles:
                    yield moving_circle_line(circle, Vec2(), line, translation)

        for info in candidates():
            if info.toi < shortest.toi:
                shortest = info
        return shortest

    @classmethod
    def _resolve(cls, info: CollisionInfo) -> None:
        rigid = info.rigid_body1
        if rigid is None or info.collider2 is None:
            return
        rigid.collides_with(info.collider2)
        if info.rigid_body2 is not None:
            cls._resolve_rigids(rigid, info.rigid_body2, info.normal)
        else:
            cls._resolve_static(rigid, info.collider2, info.normal)

    @staticmethod
    def _bounciness(first: ColliderComponent, second: Optional[ColliderComponent]) -> float:
        other = second.bounciness if second is not None else 0.0
        return max(0.0, (first.bounciness + other) / 2.0)

    @classmethod
    def _resolve_rigids(cls, first: RigidBody, second: RigidBody, normal: Vec2) -> None:
        c = cls._bounciness(first, second)
        v1, v2 = first.velocity, second.velocity
        m1, m2 = first.weight, second.weight
        u = (v1 * m1 + v2 * m2) / (m1 + m2)
        first.velocity = v1 - normal * ((1.0 + c) * (v1 - u).dot(normal))
        second.velocity = v2 - normal * ((1.0 + c) * (v2 - u).dot(normal))

    @classmethod
    def _resolve_static(cls, rigid: RigidBody, collider: Collider, normal: Vec2) -> None:
        bounciness = cls._bounciness(rigid, collider.component)
        rigid.velocity = rigid.velocity.reflect(normal, bounciness)