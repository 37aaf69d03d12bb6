# basketo

The core of a small 2D game engine, built on pygame. It is a library: you
bring the window and the main loop, and use these pieces inside it.

- `basketo.ecs` – entity-component-system. `EntityManager` hands out entity
  ids from a fixed pool of 5000 (`MAX_ENTITIES`); `ComponentManager` stores
  densely packed components per registered component class; `Signature` is a
  32-bit set of component type numbers; `SystemManager` keeps each `System`'s
  `entities` set in step with entity signatures. Misuse (adding a component
  twice, using an unregistered type, destroying an entity that is not alive,
  running out of ids) raises `EcsError`.
- `basketo.components` – plain dataclass components: `TransformComponent`,
  `VelocityComponent`, `RigidbodyComponent`, `ColliderComponent` (built with
  `ColliderComponent.box(...)` or `ColliderComponent.polygon(...)`),
  `NameComponent`, `TagComponent`, `ScriptComponent`, `AudioComponent`,
  `CameraComponent` and `SpriteComponent`, plus `Vec2D` and the `Flip` flags.
- `basketo.animation` – `AnimationFrame`, `AnimationSequence` and the playable
  `AnimationComponent` (`add_animation`, `play`, `stop`), with `rect_to_dict` /
  `rect_from_dict`.
- `basketo.physics` – `Rect` and `check_collision`.
- `basketo.systems` – `PhysicsSystem` (gravity, 980 units/s² by default),
  `MovementSystem`, `CollisionSystem`, `AnimationSystem`, `CameraSystem`
  (returns a `CameraView`), `AudioSystem` and `RenderSystem`.
- `basketo.assets` – `AssetManager`, a cache of textures, sounds, fonts and
  music by id.
- `basketo.input` – `InputManager`, mapping action names to key scancodes.
- `basketo.scene` – the abstract `Scene` and the `SceneManager` that holds the
  active one.
- `basketo.editor_geometry` – `closest_point_on_segment` and
  `closest_edge_to_point` for editing polygon colliders.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Gravity, movement and collision

```python
from basketo.ecs import ComponentManager, EntityManager, Signature, SystemManager
from basketo.components import RigidbodyComponent, TransformComponent, VelocityComponent
from basketo.systems import CollisionSystem, MovementSystem, PhysicsSystem

entities = EntityManager()
components = ComponentManager()
systems = SystemManager()

for kind in (TransformComponent, VelocityComponent, RigidbodyComponent):
    components.register_component(kind)

physics = systems.register_system(PhysicsSystem())
movement = systems.register_system(MovementSystem())
collision = systems.register_system(CollisionSystem())

def signature_of(*kinds):
    return Signature(*(components.get_component_type(kind) for kind in kinds))

systems.set_signature(PhysicsSystem, signature_of(VelocityComponent, RigidbodyComponent))
systems.set_signature(MovementSystem, signature_of(TransformComponent, VelocityComponent))
systems.set_signature(CollisionSystem, signature_of(TransformComponent, RigidbodyComponent))

player = entities.create_entity()
components.add_component(player, TransformComponent(x=100, y=0, width=32, height=32))
components.add_component(player, VelocityComponent())
components.add_component(player, RigidbodyComponent())
sig = signature_of(TransformComponent, VelocityComponent, RigidbodyComponent)
entities.set_signature(player, sig)
systems.entity_signature_changed(player, sig)

dt = 1 / 60
for _ in range(60):
    physics.update(components, dt)
    movement.update(components, dt)
    collision.update(components, dt)

print(components.get_component(player, TransformComponent).y)
```

`CollisionSystem` needs a `VelocityComponent` on every non-static body it
moves; static bodies (`RigidbodyComponent(is_static=True)`) are never moved.

## Collision checks

```python
from basketo.physics import Rect, check_collision

check_collision(Rect(0, 0, 10, 10), Rect(5, 5, 10, 10))   # True
check_collision(Rect(0, 0, 10, 10), Rect(10, 0, 10, 10))  # False: edges only touch
```

## Animation

```python
from basketo.animation import AnimationComponent, AnimationFrame, AnimationSequence
from basketo.physics import Rect

walk = AnimationSequence(
    name="walk",
    texture_id="hero",
    frames=[AnimationFrame(Rect(0, 0, 16, 16), 0.1), AnimationFrame(Rect(16, 0, 16, 16), 0.1)],
    loop=True,
)
anim = AnimationComponent()
anim.add_animation(walk)
anim.play("walk")   # True; False for an unknown name
```

`AnimationSystem.update(delta_time, entity_manager, component_manager)`
advances every playing animation of an entity that also has a
`SpriteComponent`, and writes the current frame's rectangle, the texture id and
the flip flags into that sprite. A non-looping sequence stops on its last
frame.

## Camera, rendering and audio

- `CameraSystem(component_manager, entity_manager, surface).update()` finds the
  first active `CameraComponent` and returns a `CameraView` whose `rect` is the
  world area it shows, centred on the camera entity's transform and divided by
  its zoom. Without an active camera (or if the camera entity has no
  transform) it returns the whole surface at zoom 1.
- `RenderSystem.update(surface, component_manager, camera_x, camera_y)` blits
  each sprite's texture (from the `AssetManager`) scaled to its transform,
  clipped to its source rectangle when `use_src_rect` is set, flipped and
  rotated as asked, skipping anything off screen. It returns the entities it
  drew.
- `AudioSystem.update(...)` starts each `AudioComponent` with `play_on_start`
  that is not yet playing, as a sound or a music track from the
  `AssetManager`; `volume` runs from 0 to 128.

## Assets and input

`AssetManager.instance()` gives a shared manager. `load_texture` needs
`init(renderer)` to have been called first; every `load_*` call raises
`AssetError` when the file cannot be loaded and does nothing if the id is
already loaded. Fonts are stored under `"<id>_<size>"`. `texture`, `sound`,
`font` and `music` return the asset or `None`; `cleanup()` forgets them all.

`InputManager.map_action("Jump", key)` binds an action to a scancode;
`update()` takes a snapshot of `pygame.key.get_pressed()` (or of a sequence you
pass in), and `is_action_pressed("Jump")` reads it.

## Serialisation

`Vec2D`, the components in `basketo.components` other than
`RigidbodyComponent`, and the animation classes have `to_dict()` and a
`from_dict()` class method, so `json.dumps(component.to_dict())` gives JSON.
`TransformComponent`, `VelocityComponent`, `AudioComponent` and
`ScriptComponent` fill in defaults for missing keys; the others require every
key.

## What it does not do

There is no executable, window or game loop, no editor screen, and no saving
or loading of whole scenes to files. `ScriptComponent` only records a script
path: nothing here runs scripts. `basketo.editor_geometry` provides the
geometry an editor needs, not the editor itself.