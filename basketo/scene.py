"""Scenes and the manager that holds the active one."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional


class Scene(ABC):
    """A screen of the game: handles input, advances state, draws itself."""

    @abstractmethod
    def handle_input(self, event: Any) -> None:
        """React to one input event."""

    @abstractmethod
    def update(self, delta_time: float) -> None:
        """Advance the scene by ``delta_time`` seconds."""

    @abstractmethod
    def render(self) -> None:
        """Draw the scene."""


class SceneManager:
    """Owns the single active scene."""

    _instance: Optional["SceneManager"] = None

    def __init__(self) -> None:
        self._active: Optional[Scene] = None

    @classmethod
    def instance(cls) -> "SceneManager":
        """The shared manager, created on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def change_scene(self, scene: Optional[Scene]) -> None:
        """Replace the active scene."""
        self._active = scene

    @property
    def active_scene(self) -> Optional[Scene]:
        """The scene currently running, or None."""
        return self._active