"""Frame-based sprite animations and the component that plays them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping

from .physics import Rect


def rect_to_dict(rect: Rect) -> Dict[str, int]:
    """Serialize a rectangle as {"x", "y", "w", "h"}."""
    return {"x": rect.x, "y": rect.y, "w": rect.w, "h": rect.h}


def rect_from_dict(data: Mapping[str, Any]) -> Rect:
    """Read a rectangle; every key is required."""
    return Rect(x=int(data["x"]), y=int(data["y"]), w=int(data["w"]), h=int(data["h"]))


@dataclass
class AnimationFrame:
    """One frame: the texture region to show and how long to show it."""

    source_rect: Rect = field(default_factory=Rect)
    duration: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {"sourceRect": rect_to_dict(self.source_rect), "duration": self.duration}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AnimationFrame":
        return cls(
            source_rect=rect_from_dict(data["sourceRect"]),
            duration=float(data["duration"]),
        )


@dataclass
class AnimationSequence:
    """A named run of frames taken from one texture."""

    name: str = ""
    texture_id: str = ""
    frames: List[AnimationFrame] = field(default_factory=list)
    loop: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "textureId": self.texture_id,
            "frames": [frame.to_dict() for frame in self.frames],
            "loop": self.loop,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AnimationSequence":
        return cls(
            name=str(data["name"]),
            texture_id=str(data["textureId"]),
            frames=[AnimationFrame.from_dict(f) for f in data["frames"]],
            loop=bool(data["loop"]),
        )


@dataclass
class AnimationComponent:
    """The animations an entity owns and the playback state of the current one."""

    animations: Dict[str, AnimationSequence] = field(default_factory=dict)
    current_animation_name: str = ""
    current_frame_index: int = 0
    current_frame_time: float = 0.0
    is_playing: bool = False
    flip_horizontal: bool = False
    flip_vertical: bool = False

    def add_animation(self, sequence: AnimationSequence) -> None:
        """Add a sequence, replacing any with the same name."""
        self.animations[sequence.name] = sequence

    def play(self, name: str, force_restart: bool = False) -> bool:
        """Start the named animation; False if it is unknown."""
        if name not in self.animations:
            return False
        if self.current_animation_name == name and self.is_playing and not force_restart:
            return True
        self.current_animation_name = name
        self.current_frame_index = 0
        self.current_frame_time = 0.0
        self.is_playing = True
        return True

    def stop(self) -> None:
        """Stop playback and rewind to the first frame."""
        self.is_playing = False
        self.current_frame_index = 0
        self.current_frame_time = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "animations": {
                name: self.animations[name].to_dict() for name in sorted(self.animations)
            },
            "currentAnimationName": self.current_animation_name,
            "currentFrameIndex": self.current_frame_index,
            "currentFrameTime": self.current_frame_time,
            "isPlaying": self.is_playing,
            "flipHorizontal": self.flip_horizontal,
            "flipVertical": self.flip_vertical,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AnimationComponent":
        return cls(
            animations={
                str(name): AnimationSequence.from_dict(seq)
                for name, seq in data["animations"].items()
            },
            current_animation_name=str(data["currentAnimationName"]),
            current_frame_index=int(data["currentFrameIndex"]),
            current_frame_time=float(data["currentFrameTime"]),
            is_playing=bool(data["isPlaying"]),
            flip_horizontal=bool(data["flipHorizontal"]),
            flip_vertical=bool(data["flipVertical"]),
        )