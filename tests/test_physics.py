import pytest

from krok.colliders import (
    Body,
    CircleCollider,
    ColliderComponent,
    LineCollider,
    RigidBody,
    TriggerColliderComponent,
)
from krok.geometry import Vec2
from krok.physics import PhysicsScene


def _still_scene():
    return PhysicsScene(gravity=Vec2(), physics_speed=1.0, resistance=0.0)


def _ball(x=0.0, y=0.0, radius=1.0):
    return RigidBody(Body(Vec2(x, y)), CircleCollider(radius))


def _floor():
    return ColliderComponent(Body(), LineCollider(Vec2(-10.0, 5.0), Vec2(10.0, 5.0)))


def test_add_sorts_components_by_kind():
    scene = PhysicsScene()
    static = ColliderComponent(Body(), CircleCollider(1.0))
    trigger = TriggerColliderComponent(Body(), CircleCollider(1.0))
    rigid = _ball()
    for component in (static, trigger, rigid):
        scene.add(component)
    assert scene.statics == (static,)
    assert scene.triggers == (trigger,)
    assert scene.rigid_bodies == (rigid,)


def test_add_rejects_non_components():
    with pytest.raises(TypeError):
        PhysicsScene().add(object())


def test_remove_and_clear():
    scene = PhysicsScene()
    rigid = _ball()
    other = _ball()
    scene.add(rigid)
    scene.remove(other)
    assert scene.rigid_bodies == (rigid,)
    scene.remove(rigid)
    assert scene.rigid_bodies == ()
    scene.add(_floor())
    scene.add(TriggerColliderComponent(Body(), CircleCollider(1.0)))
    scene.clear()
    assert scene.statics == () and scene.triggers == ()


def test_negative_speed_is_clamped():
    scene = PhysicsScene()
    scene.set_physics_speed(-3.0)
    assert scene.physics_speed == 0.0


def test_paused_step_moves_nothing():
    scene = PhysicsScene()
    rigid = _ball()
    rigid.velocity = Vec2(10.0, 0.0)
    scene.add(rigid)
    scene.step(1.0, paused=True)
    assert rigid.body.position == Vec2()
    assert rigid.velocity == Vec2(10.0, 0.0)


def test_free_motion():
    scene = _still_scene()
    rigid = _ball()
    rigid.velocity = Vec2(2.0, 0.0)
    scene.add(rigid)
    scene.step(0.5)
    assert rigid.body.position.x == pytest.approx(1.0)
    assert rigid.body.position.y == pytest.approx(0.0)


def test_gravity_accelerates_and_resets_acceleration():
    scene = PhysicsScene(gravity=Vec2(0.0, 10.0), physics_speed=1.0, resistance=0.0)
    rigid = _ball()
    rigid.has_gravity = True
    scene.add(rigid)
    scene.step(0.1)
    assert rigid.velocity.y > 0.0
    assert rigid.body.position.y > 0.0
    assert rigid.acceleration == Vec2()


def test_removed_body_is_not_moved():
    scene = _still_scene()
    rigid = _ball()
    rigid.velocity = Vec2(3.0, 0.0)
    scene.add(rigid)
    scene.remove(rigid)
    scene.step(1.0)
    assert rigid.body.position == Vec2()


def test_small_velocity_is_stopped_by_resistance():
    scene = PhysicsScene(gravity=Vec2())
    rigid = _ball()
    rigid.velocity = Vec2(0.01, 0.0)
    scene.add(rigid)
    scene.step(0.01)
    assert rigid.velocity == Vec2()
    assert rigid.body.position == Vec2()


def test_ball_bounces_off_floor():
    scene = _still_scene()
    floor = _floor()
    rigid = _ball()
    rigid.velocity = Vec2(0.0, 10.0)
    scene.add(floor)
    scene.add(rigid)
    scene.step(1.0)
    assert rigid.velocity.y < 0.0
    assert abs(rigid.velocity.y) < 10.0
    assert rigid.body.position.y + 1.0 <= 5.0 + 1e-9
    assert rigid.is_colliding(floor.lines[0])


def test_zero_bounciness_stops_ball():
    scene = _still_scene()
    floor = _floor()
    floor.bounciness = -5.0
    rigid = _ball()
    rigid.bounciness = -5.0
    rigid.velocity = Vec2(0.0, 10.0)
    scene.add(floor)
    scene.add(rigid)
    scene.step(1.0)
    assert rigid.velocity == Vec2()
    assert rigid.body.position.y + 1.0 <= 5.0 + 1e-9


def test_rigid_collisions_conserve_momentum():
    scene = _still_scene()
    left = _ball(-5.0)
    right = _ball(5.0)
    left.velocity = Vec2(10.0, 0.0)
    right.velocity = Vec2(-10.0, 0.0)
    right.weight = 2.0
    scene.add(left)
    scene.add(right)
    before = left.velocity * left.weight + right.velocity * right.weight
    for _ in range(5):
        scene.step(0.3)
    after = left.velocity * left.weight + right.velocity * right.weight
    assert after.x == pytest.approx(before.x)
    assert after.y == pytest.approx(before.y)


def test_trigger_reports_passing_body():
    scene = _still_scene()
    trigger = TriggerColliderComponent(Body(Vec2(5.0, 0.0)), CircleCollider(1.0))
    entered = []
    trigger.on_trigger_enter = entered.append
    rigid = _ball()
    rigid.velocity = Vec2(10.0, 0.0)
    scene.add(trigger)
    scene.add(rigid)
    scene.step(1.0)
    ball_circle = rigid.circles[0]
    assert trigger.is_colliding(ball_circle)
    assert entered == [ball_circle]


def test_overlay_circle_finds_near_circles_only():
    scene = PhysicsScene()
    near = ColliderComponent(Body(Vec2(3.0, 0.0)), CircleCollider(1.0))
    far = ColliderComponent(Body(Vec2(10.0, 0.0)), CircleCollider(1.0))
    scene.add(near)
    scene.add(far)
    found = scene.overlay_circle(Body(), 2.5)
    assert found == [near.circles[0]]


def test_overlay_circle_with_offset():
    scene = PhysicsScene()
    far = ColliderComponent(Body(Vec2(10.0, 0.0)), CircleCollider(1.0))
    scene.add(far)
    assert scene.overlay_circle(Body(), 1.0) == []
    assert scene.overlay_circle(Body(), 1.0, Vec2(9.0, 0.0)) == [far.circles[0]]


def test_overlay_circle_lines():
    scene = PhysicsScene()
    wall = ColliderComponent(Body(), LineCollider(Vec2(-1.0, 5.0), Vec2(1.0, 5.0)))
    scene.add(wall)
    assert scene.overlay_circle(Body(), 2.5) == []
    assert scene.overlay_circle(Body(), 6.0) == [wall.lines[0]]


def test_overlay_circle_searches_all_kinds():
    scene = PhysicsScene()
    static = ColliderComponent(Body(), CircleCollider(1.0))
    trigger = TriggerColliderComponent(Body(), CircleCollider(1.0))
    rigid = _ball()
    for component in (static, trigger, rigid):
        scene.add(component)
    found = scene.overlay_circle(Body(), 1.0)
    assert found == [static.circles[0], trigger.circles[0], rigid.circles[0]]