"""Systems that act on entities each frame: physics, movement, collision,
animation, camera, audio and rendering."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional

import pygame

from .animation import AnimationComponent
from .assets import AssetManager
from .components import (
    AudioComponent,
    CameraComponent,
    Flip,
    RigidbodyComponent,
    SpriteComponent,
    TransformComponent,
    VelocityComponent,
)
from .ecs import NO_ENTITY, ComponentManager, EntityManager, System
from .physics import Rect, check_collision

logger = logging.getLogger(__name__)

GRAVITY_ACCELERATION = 980.0
_MAX_VOLUME = 128


def _transform_rect(transform: TransformComponent) -> Rect:
    return Rect(int(transform.x), int(transform.y), int(transform.width), int(transform.height))


class PhysicsSystem(System):
    """Applies gravity to the velocity of non-static bodies."""

    def __init__(self, gravity: float = GRAVITY_ACCELERATION) -> None:
        super().__init__()
        self.gravity = gravity

    def update(self, component_manager: ComponentManager, delta_time: float) -> None:
        for entity in sorted(self.entities):
            velocity = component_manager.get_component(entity, VelocityComponent)
            body = component_manager.get_component(entity, RigidbodyComponent)
            if not body.is_static and body.use_gravity:
                velocity.vy += self.gravity * body.gravity_scale * delta_time


class MovementSystem(System):
    """Moves entities by their velocity."""

    def update(self, component_manager: ComponentManager, delta_time: float) -> None:
        for entity in sorted(self.entities):
            transform = component_manager.get_component(entity, TransformComponent)
            velocity = component_manager.get_component(entity, VelocityComponent)
            logger.debug(
                "Entity %d before: pos(%s,%s) vel(%s,%s)",
                entity, transform.x, transform.y, velocity.vx, velocity.vy,
            )
            transform.x += velocity.vx * delta_time
            transform.y += velocity.vy * delta_time
            logger.debug("Entity %d after: pos(%s,%s)", entity, transform.x, transform.y)


class CollisionSystem(System):
    """Pushes dynamic bodies out of whatever they overlap."""

    def update(self, component_manager: ComponentManager, delta_time: float) -> None:
        entities = sorted(self.entities)
        for entity_a in entities:
            transform_a = component_manager.get_component(entity_a, TransformComponent)
            body_a = component_manager.get_component(entity_a, RigidbodyComponent)
            if body_a.is_static:
                continue
            rect_a = _transform_rect(transform_a)
            for entity_b in entities:
                if entity_a == entity_b:
                    continue
                transform_b = component_manager.get_component(entity_b, TransformComponent)
                component_manager.get_component(entity_b, RigidbodyComponent)
                if not check_collision(rect_a, _transform_rect(transform_b)):
                    continue
                velocity_a = component_manager.get_component(entity_a, VelocityComponent)

                overlap_y = (transform_a.y + transform_a.height) - transform_b.y
                if overlap_y > 0:
                    transform_a.y -= overlap_y
                if velocity_a.vy > 0:
                    velocity_a.vy = 0.0

                overlap_right = (transform_a.x + transform_a.width) - transform_b.x
                overlap_left = (transform_b.x + transform_b.width) - transform_a.x
                if overlap_right > 0 and overlap_left > 0:
                    if overlap_right < overlap_left and velocity_a.vx > 0:
                        transform_a.x -= overlap_right
                        velocity_a.vx = 0.0
                    elif overlap_left < overlap_right and velocity_a.vx < 0:
                        transform_a.x += overlap_left
                        velocity_a.vx = 0.0


class AnimationSystem(System):
    """Advances playing animations and copies the current frame to the sprite."""

    def update(
        self,
        delta_time: float,
        entity_manager: EntityManager,
        component_manager: ComponentManager,
    ) -> None:
        for entity in entity_manager.active_entities:
            if not (
                component_manager.has_component(entity, AnimationComponent)
                and component_manager.has_component(entity, SpriteComponent)
            ):
                continue
            anim = component_manager.get_component(entity, AnimationComponent)
            sprite = component_manager.get_component(entity, SpriteComponent)

            if not anim.is_playing or anim.current_animation_name not in anim.animations:
                continue
            sequence = anim.animations[anim.current_animation_name]
            frames = sequence.frames
            if not frames:
                continue

            anim.current_frame_time += delta_time
            duration = frames[anim.current_frame_index].duration
            if anim.current_frame_time >= duration:
                anim.current_frame_time -= duration
                anim.current_frame_index += 1
                if anim.current_frame_index >= len(frames):
                    if sequence.loop:
                        anim.current_frame_index = 0
                    else:
                        anim.is_playing = False
                        anim.current_frame_index = len(frames) - 1

            if anim.is_playing:
                source = frames[anim.current_frame_index].source_rect
                sprite.src_rect = Rect(source.x, source.y, source.w, source.h)
                sprite.texture_id = sequence.texture_id
                sprite.use_src_rect = True
                flip = Flip.NONE
                if anim.flip_horizontal:
                    flip |= Flip.HORIZONTAL
                if anim.flip_vertical:
                    flip |= Flip.VERTICAL
                sprite.flip = flip


@dataclass
class CameraView:
    """The world-space rectangle a camera shows, and its zoom."""

    rect: Rect = field(default_factory=Rect)
    zoom: float = 1.0


class CameraSystem(System):
    """Finds the active camera and works out what part of the world it shows."""

    def __init__(
        self,
        component_manager: ComponentManager,
        entity_manager: EntityManager,
        surface: Any,
    ) -> None:
        super().__init__()
        self._components = component_manager
        self._entities = entity_manager
        self._surface = surface
        self._active = NO_ENTITY

    @property
    def active_camera_entity(self) -> int:
        """The entity of the active camera, or NO_ENTITY."""
        return self._active

    def _full_output(self) -> CameraView:
        width, height = self._surface.get_size()
        return CameraView(Rect(0, 0, int(width), int(height)), 1.0)

    def update(self) -> CameraView:
        """The view of the first active camera, or the whole output when none."""
        self._active = NO_ENTITY
        for entity in self._entities.active_entities:
            if self._components.has_component(entity, CameraComponent):
                if self._components.get_component(entity, CameraComponent).is_active:
                    self._active = entity
                    break

        if self._active == NO_ENTITY:
            return self._full_output()

        camera = self._components.get_component(self._active, CameraComponent)
        if not self._components.has_component(self._active, TransformComponent):
            logger.error(
                "Active camera (entity %d) lacks a TransformComponent", self._active
            )
            self._active = NO_ENTITY
            return self._full_output()

        transform = self._components.get_component(self._active, TransformComponent)
        visible_width = camera.width / camera.zoom
        visible_height = camera.height / camera.zoom
        rect = Rect(
            int(transform.x - visible_width / 2.0),
            int(transform.y - visible_height / 2.0),
            int(visible_width),
            int(visible_height),
        )
        return CameraView(rect, camera.zoom)


class AudioSystem(System):
    """Starts sounds and music that are set to play on start."""

    def __init__(self, asset_manager: Optional[AssetManager] = None) -> None:
        super().__init__()
        self._assets = asset_manager if asset_manager is not None else AssetManager.instance()

    def update(
        self,
        delta_time: float,
        entity_manager: EntityManager,
        component_manager: ComponentManager,
    ) -> None:
        for entity in entity_manager.active_entities:
            if not component_manager.has_component(entity, AudioComponent):
                continue
            audio = component_manager.get_component(entity, AudioComponent)
            if not audio.play_on_start or audio.is_playing or not audio.audio_id:
                continue
            volume = max(0, min(_MAX_VOLUME, audio.volume)) / _MAX_VOLUME
            loops = -1 if audio.loop else 0
            if audio.is_music:
                track = self._assets.music(audio.audio_id)
                if track is not None:
                    track.play(loops=loops, volume=volume)
                    audio.is_playing = True
            else:
                sound = self._assets.sound(audio.audio_id)
                if sound is not None:
                    sound.set_volume(volume)
                    sound.play(loops=loops)
                    audio.is_playing = True


class RenderSystem(System):
    """Draws sprites onto a surface, offset by the camera position."""

    def __init__(self, asset_manager: Optional[AssetManager] = None) -> None:
        super().__init__()
        self._assets = asset_manager if asset_manager is not None else AssetManager.instance()

    def update(
        self,
        surface: Any,
        component_manager: ComponentManager,
        camera_x: float,
        camera_y: float,
    ) -> List[int]:
        """Draw every visible sprite; returns the entities that were drawn."""
        screen_width, screen_height = surface.get_size()
        drawn: List[int] = []
        for entity in sorted(self.entities):
            transform = component_manager.get_component(entity, TransformComponent)
            sprite = component_manager.get_component(entity, SpriteComponent)

            dest = pygame.Rect(
                int(transform.x - camera_x),
                int(transform.y - camera_y),
                int(transform.width),
                int(transform.height),
            )
            if (
                dest.x + dest.w <= 0
                or dest.x >= screen_width
                or dest.y + dest.h <= 0
                or dest.y >= screen_height
            ):
                continue

            texture = self._assets.texture(sprite.texture_id)
            if texture is None:
                logger.error("Texture not found for ID: %s", sprite.texture_id)
                continue

            if self._draw(surface, texture, sprite, dest, transform.rotation):
                drawn.append(entity)
        return drawn

    @staticmethod
    def _draw(
        surface: Any,
        texture: Any,
        sprite: SpriteComponent,
        dest: pygame.Rect,
        rotation: float,
    ) -> bool:
        if dest.w <= 0 or dest.h <= 0:
            return False
        image = texture
        if sprite.use_src_rect:
            src = pygame.Rect(
                sprite.src_rect.x, sprite.src_rect.y, sprite.src_rect.w, sprite.src_rect.h
            ).clip(texture.get_rect())
            if src.w <= 0 or src.h <= 0:
                return False
            image = texture.subsurface(src)
        if image.get_size() != dest.size:
            image = pygame.transform.scale(image, dest.size)
        if sprite.flip:
            image = pygame.transform.flip(
                image,
                bool(sprite.flip & Flip.HORIZONTAL),
                bool(sprite.flip & Flip.VERTICAL),
            )
        if rotation:
            image = pygame.transform.rotate(image, -rotation)
            surface.blit(image, image.get_rect(center=dest.center))
        else:
            surface.blit(image, dest)
        return True