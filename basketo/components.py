"""Plain data components attached to entities, with dictionary serialization."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping

from .physics import Rect


class Flip(enum.IntFlag):
    """Sprite mirroring flags."""

    NONE = 0
    HORIZONTAL = 1
    VERTICAL = 2


@dataclass
class Vec2D:
    """A 2D vector or point."""

    x: float = 0.0
    y: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Vec2D":
        return cls(x=float(data["x"]), y=float(data["y"]))


@dataclass
class TransformComponent:
    """Position, size, rotation and drawing order of an entity."""

    x: float = 0.0
    y: float = 0.0
    width: float = 32.0
    height: float = 32.0
    rotation: float = 0.0
    z_index: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "rotation": self.rotation,
            "z_index": self.z_index,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TransformComponent":
        return cls(
            x=float(data.get("x", 0.0)),
            y=float(data.get("y", 0.0)),
            width=float(data.get("width", 32.0)),
            height=float(data.get("height", 32.0)),
            rotation=float(data.get("rotation", 0.0)),
            z_index=int(data.get("z_index", 0)),
        )


@dataclass
class VelocityComponent:
    """Linear velocity in units per second."""

    vx: float = 0.0
    vy: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {"vx": self.vx, "vy": self.vy}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "VelocityComponent":
        return cls(vx=float(data.get("vx", 0.0)), vy=float(data.get("vy", 0.0)))


@dataclass
class RigidbodyComponent:
    """Physical properties used by the physics and collision systems."""

    mass: float = 1.0
    use_gravity: bool = True
    is_static: bool = False
    gravity_scale: float = 1.0
    drag: float = 0.0
    is_kinematic: bool = False


@dataclass
class ColliderComponent:
    """A box or polygon collision shape, offset from the entity's position."""

    width: float = 0.0
    height: float = 0.0
    offset_x: float = 0.0
    offset_y: float = 0.0
    vertices: List[Vec2D] = field(default_factory=list)
    shape: str = "aabb"
    is_trigger: bool = False

    @classmethod
    def box(
        cls,
        width: float,
        height: float,
        offset_x: float = 0.0,
        offset_y: float = 0.0,
        is_trigger: bool = False,
    ) -> "ColliderComponent":
        """An axis-aligned box collider."""
        return cls(
            width=width,
            height=height,
            offset_x=offset_x,
            offset_y=offset_y,
            shape="aabb",
            is_trigger=is_trigger,
        )

    @classmethod
    def polygon(
        cls,
        vertices: List[Vec2D],
        offset_x: float = 0.0,
        offset_y: float = 0.0,
        is_trigger: bool = False,
    ) -> "ColliderComponent":
        """A polygon collider built from a copy of the given vertices."""
        return cls(
            vertices=[Vec2D(v.x, v.y) for v in vertices],
            offset_x=offset_x,
            offset_y=offset_y,
            shape="polygon",
            is_trigger=is_trigger,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "offsetX": self.offset_x,
            "offsetY": self.offset_y,
            "vertices": [v.to_dict() for v in self.vertices],
            "type": self.shape,
            "isTrigger": self.is_trigger,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ColliderComponent":
        return cls(
            width=float(data["width"]),
            height=float(data["height"]),
            offset_x=float(data["offsetX"]),
            offset_y=float(data["offsetY"]),
            vertices=[Vec2D.from_dict(v) for v in data["vertices"]],
            shape=str(data["type"]),
            is_trigger=bool(data["isTrigger"]),
        )


@dataclass
class NameComponent:
    """A human-readable entity name."""

    name: str = "Entity"

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "NameComponent":
        return cls(name=str(data["name"]))


@dataclass
class TagComponent:
    """A free-form tag for grouping entities."""

    tag: str = "default"

    def to_dict(self) -> Dict[str, Any]:
        return {"tag": self.tag}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TagComponent":
        return cls(tag=str(data["tag"]))


@dataclass
class ScriptComponent:
    """Path of the script that drives an entity."""

    script_path: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"scriptPath": self.script_path}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ScriptComponent":
        path = data.get("scriptPath")
        return cls(script_path=path if isinstance(path, str) else "")


@dataclass
class AudioComponent:
    """A sound effect or music track attached to an entity."""

    audio_id: str = ""
    is_music: bool = False
    play_on_start: bool = False
    loop: bool = False
    volume: int = 128
    is_playing: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "audioId": self.audio_id,
            "isMusic": self.is_music,
            "playOnStart": self.play_on_start,
            "loop": self.loop,
            "volume": self.volume,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AudioComponent":
        return cls(
            audio_id=str(data.get("audioId", "")),
            is_music=bool(data.get("isMusic", False)),
            play_on_start=bool(data.get("playOnStart", False)),
            loop=bool(data.get("loop", False)),
            volume=int(data.get("volume", 128)),
        )


@dataclass
class CameraComponent:
    """A camera's view size and zoom; the active one drives rendering."""

    width: float = 800.0
    height: float = 600.0
    zoom: float = 1.0
    is_active: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "zoom": self.zoom,
            "isActive": self.is_active,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CameraComponent":
        return cls(
            width=float(data["width"]),
            height=float(data["height"]),
            zoom=float(data["zoom"]),
            is_active=bool(data["isActive"]),
        )


@dataclass
class SpriteComponent:
    """A textured image drawn at the entity's transform."""

    texture_id: str = ""
    src_rect: Rect = field(default_factory=Rect)
    use_src_rect: bool = False
    layer: int = 0
    is_fixed: bool = False
    flip: Flip = Flip.NONE

    def to_dict(self) -> Dict[str, Any]:
        return {
            "textureId": self.texture_id,
            "srcRect": {
                "x": self.src_rect.x,
                "y": self.src_rect.y,
                "w": self.src_rect.w,
                "h": self.src_rect.h,
            },
            "layer": self.layer,
            "isFixed": self.is_fixed,
            "flip": int(self.flip),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SpriteComponent":
        rect = data["srcRect"]
        return cls(
            texture_id=str(data["textureId"]),
            src_rect=Rect(
                x=int(rect.get("x", 0)),
                y=int(rect.get("y", 0)),
                w=int(rect.get("w", 0)),
                h=int(rect.get("h", 0)),
            ),
            layer=int(data["layer"]),
            is_fixed=bool(data["isFixed"]),
            flip=Flip(int(data.get("flip", int(Flip.NONE)))),
        )