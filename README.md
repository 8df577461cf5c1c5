# krok

Pieces of a small 2D game engine that need no window and no GPU. Everything here is plain Python, and the package has no runtime dependencies.

## Modules

- `krok.color`: `Color` is an RGBA colour. Its channels are integers clamped to 0–255. It supports `*` and `/` by a number. `units()` returns the channels scaled to 0.0–1.0. `Color.from_hex(0xRRGGBB)` builds a colour from a hex value, and there are named colours such as `Color.white()`, `Color.red()` and `Color.maroon()`.
- `krok.animation`: `AnimationFrame` pairs a frame index with a duration in seconds. Durations below 0.001 are raised to 0.001.
  - `Animation` loops over at least two frames and has `speed` and `paused`. `animate(dt)` steps over as many frames as `dt` covers.
  - `add_function_on_frame(i, fn)` calls `fn` each time frame `i` is entered. `on_over` is called each time the animation wraps back to the start.
  - `Animation.from_range(first, last, duration)` builds the frames from `first` to `last` inclusive, counting up or down.
- `krok.resources`: `Counted` is a handle that shares a live count with the handles made from it by `share()`. `release()` drops a handle, and so does leaving a `with` block.
  - `ResourceCache` stores one shared handle per key, with `get`, `exists`, `add` and `clear`. `add` raises `ValueError` for a key that already exists.
  - `SelfRegResourceCache` reuses a slot whose resource is no longer held anywhere but the cache.
- `krok.display`: the `DisplayMode` anchors. `vertex_data(mode)` returns the eight triangle-strip coordinates of a unit quad anchored that way.
- `krok.paths`: `PathManager(root, index_name)` gives every file under `root` a stable numeric id. Each id is kept in a `<file>.resc` sidecar, and the manager writes an index file listing `#define` constants.
  - `map_paths()` assigns and loads the ids.
  - `file_path(id)` returns the path for an id.
  - `reset_paths()` empties the index and deletes the sidecars.
  - Helpers: `to_const_name`, `find_lowest_untaken`, `shader_key` and `split_shader_key`.
- `krok.rendering`: `Renderable`, `RenderLayer` and `Renderer`.
  - The renderer keeps renderables sorted into layers, lowest first.
  - `render()` draws every renderable that is `visible` and `active` onto the window you supply. A renderable starts invisible until `on_enable()` is called. After drawing, `render()` moves renderables whose layer changed.
  - The window is any object with `clear()`, `draw(renderable)` and `display()`.
- `krok.sprite_sheet`: `SpriteSheet(columns, rows, default_animation)` is a grid of frames. `uv_offset` is the cell currently shown and `uv_scale` is the size of one cell.
  - It plays named animations with `add_animation`, `set_current_animation` (by index or name) and `update(dt)`.
  - `add_animation` raises `ValueError` for an animation that uses frames not on the sheet.
- `krok.geometry`: `Vec2` is an immutable vector with `dot`, `length`, `normalized`, `normal`, `reflect` and `rotated`. `PolyShape` is a list of corners with `rectangle`, `rectangle_sized`, `symmetric`, `triangle`, and chainable `rotate`, `translate` and `invert`.
- `krok.colliders`: `Body` holds a position, scale and name.
  - `CircleCollider`, `PointCollider` and `LineCollider` follow their body.
  - `ColliderComponent(body, shape)` groups colliders. The shape is a collider or a list of points, and points become a closed outline.
  - `TriggerColliderComponent` tracks contacts from frame to frame and fires `on_trigger_enter` and `on_trigger_exit`.
  - `RigidBody` adds `velocity`, `acceleration`, `weight` and `has_gravity`.
- `krok.collision`: swept time-of-impact tests `circle_line`, `moving_circle_line`, `circle_circle` and `moving_circle_circle`. Each returns a `CollisionInfo` with `toi`, `normal`, the colliders involved and `collided`. Lines are one-sided.
- `krok.input`:
  - `InputState` records keys and mouse buttons that are held, went down or went up this frame, plus the cursor position.
  - `EventHandler` is fed raw events through `key_event`, `mouse_button_event`, `cursor_moved` and `cursor_entered`. It tracks which hoverable object is under the cursor, with the highest `layer` winning, and passes clicks to it when it has `on_click` / `on_release`.
  - `update_events()` starts a new frame.
- `krok.physics`: `PhysicsScene` holds static colliders, triggers and rigid bodies.
  - `step(dt, paused=False)` applies gravity and drag. It then moves the bodies, resolving collisions in order of impact time and firing triggers on the way.
  - `overlay_circle(body, radius)` lists the colliders touched by a circle.

## Example

```python
from krok.animation import Animation

seen = []
anim = Animation.from_range(0, 3, 0.1, on_over=lambda: seen.append("loop"))
anim.add_function_on_frame(2, lambda: seen.append("frame 2"))

anim.animate(0.25)                        # two frames advanced
print(anim.current_frame().frame_index)   # 2
print(seen)                               # ['frame 2']
```

A physics scene is stepped by hand, once per tick:

```python
from krok.colliders import Body, CircleCollider, ColliderComponent, RigidBody
from krok.geometry import PolyShape, Vec2
from krok.physics import PhysicsScene

scene = PhysicsScene()
ground = ColliderComponent(Body(), PolyShape.rectangle(Vec2(0, 100), Vec2(200, 120)))
ball = RigidBody(Body(Vec2(50, 0)), CircleCollider(5))
ball.has_gravity = True

scene.add(ground)
scene.add(ball)
for _ in range(60):
    scene.step(1 / 60)
print(ball.body.position)
```

## What it does not do

The package opens no window and draws nothing by itself. `Renderer` hands each renderable to a window object you provide.

There is no texture, shader or buffer loading. `krok.display` only supplies vertex data.

There is no game loop, scene manager or time source. You call `PhysicsScene.step`, `SpriteSheet.update` and `EventHandler.update_events` yourself, with the elapsed time.

Input events must be passed in from whatever windowing library you use.

## Installation

```
pip install .
```

## Running the tests

```
pip install .[test]
pytest
```