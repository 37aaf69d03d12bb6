"""Mapping of named actions to keyboard scancodes."""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

import pygame


class InputManager:
    """Answers whether a named action's key is held, from the last keyboard snapshot."""

    _instance: Optional["InputManager"] = None

    def __init__(self) -> None:
        self._actions: Dict[str, int] = {}
        self._state: Optional[Sequence[Any]] = None

    @classmethod
    def instance(cls) -> "InputManager":
        """The shared manager, created on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def map_action(self, action: str, key: int) -> None:
        """Bind an action name to a key, replacing any earlier binding."""
        self._actions[action] = key

    def is_action_pressed(self, action: str) -> bool:
        """Whether the action is bound and its key is down in the last snapshot."""
        key = self._actions.get(action)
        if key is None or self._state is None:
            return False
        return bool(self._state[key])

    def update(self, state: Optional[Sequence[Any]] = None) -> None:
        """Take a keyboard snapshot; read it from pygame when none is given."""
        self._state = pygame.key.get_pressed() if state is None else state