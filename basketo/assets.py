"""Loading and caching of textures, sounds, fonts and music by id."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional

import pygame

logger = logging.getLogger(__name__)

Loader = Callable[[str], Any]
FontLoader = Callable[[str, int], Any]


class AssetError(Exception):
    """Raised when an asset cannot be loaded."""


@dataclass(frozen=True)
class MusicTrack:
    """A music file that is streamed when played."""

    path: str

    def play(self, loops: int = 0, volume: Optional[float] = None) -> None:
        """Stream this track through the mixer's music channel."""
        pygame.mixer.music.load(self.path)
        if volume is not None:
            pygame.mixer.music.set_volume(volume)
        pygame.mixer.music.play(loops)


def _load_texture(path: str) -> Any:
    return pygame.image.load(path)


def _load_sound(path: str) -> Any:
    if not pygame.mixer.get_init():
        pygame.mixer.init()
    return pygame.mixer.Sound(path)


def _load_font(path: str, size: int) -> Any:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(path, size)


def _load_music(path: str) -> MusicTrack:
    if not os.path.isfile(path):
        raise FileNotFoundError(path)
    return MusicTrack(path)


class AssetManager:
    """Keeps loaded assets under string ids; loading an id twice is a no-op."""

    _instance: Optional["AssetManager"] = None

    def __init__(
        self,
        *,
        texture_loader: Loader = _load_texture,
        sound_loader: Loader = _load_sound,
        font_loader: FontLoader = _load_font,
        music_loader: Loader = _load_music,
    ) -> None:
        self._texture_loader = texture_loader
        self._sound_loader = sound_loader
        self._font_loader = font_loader
        self._music_loader = music_loader
        self.renderer: Any = None
        self._textures: Dict[str, Any] = {}
        self._sounds: Dict[str, Any] = {}
        self._fonts: Dict[str, Any] = {}
        self._musics: Dict[str, Any] = {}

    @classmethod
    def instance(cls) -> "AssetManager":
        """The shared manager, created on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def init(self, renderer: Any) -> None:
        """Attach the render target that textures are loaded for."""
        self.renderer = renderer
        if renderer is None:
            logger.error("AssetManager initialized with no renderer")

    @staticmethod
    def font_key(asset_id: str, font_size: int) -> str:
        """The id under which a font of a given size is stored."""
        return f"{asset_id}_{font_size}"

    def _load(self, kind: str, store: Dict[str, Any], key: str, path: str, load: Callable[[], Any]) -> None:
        if key in store:
            logger.info("%s with ID '%s' already loaded", kind, key)
            return
        try:
            asset = load()
        except Exception as exc:
            raise AssetError(f"failed to load {kind.lower()} '{path}': {exc}") from exc
        if asset is None:
            raise AssetError(f"failed to load {kind.lower()} '{path}'")
        store[key] = asset
        logger.info("Loaded %s '%s' from '%s'", kind.lower(), key, path)

    def load_texture(self, asset_id: str, path: str) -> None:
        """Load an image under ``asset_id``; needs a renderer."""
        if self.renderer is None:
            raise AssetError("cannot load texture, renderer is not initialized")
        self._load("Texture", self._textures, asset_id, path, lambda: self._texture_loader(path))

    def load_sound(self, asset_id: str, path: str) -> None:
        """Load a sound effect under ``asset_id``."""
        self._load("Sound", self._sounds, asset_id, path, lambda: self._sound_loader(path))

    def load_font(self, asset_id: str, path: str, font_size: int) -> None:
        """Load a font; it is stored under ``"<asset_id>_<font_size>"``."""
        key = self.font_key(asset_id, font_size)
        self._load("Font", self._fonts, key, path, lambda: self._font_loader(path, font_size))

    def load_music(self, asset_id: str, path: str) -> None:
        """Load a music track under ``asset_id``."""
        self._load("Music", self._musics, asset_id, path, lambda: self._music_loader(path))

    @staticmethod
    def _lookup(kind: str, store: Mapping[str, Any], asset_id: str) -> Any:
        asset = store.get(asset_id)
        if asset is None:
            logger.warning("%s with ID '%s' not found", kind, asset_id)
        return asset

    def texture(self, asset_id: str) -> Any:
        """The texture with this id, or None."""
        return self._lookup("Texture", self._textures, asset_id)

    def sound(self, asset_id: str) -> Any:
        """The sound with this id, or None."""
        return self._lookup("Sound", self._sounds, asset_id)

    def font(self, asset_id: str) -> Any:
        """The font stored under this key (id and size), or None."""
        return self._lookup("Font", self._fonts, asset_id)

    def music(self, asset_id: str) -> Any:
        """The music track with this id, or None."""
        return self._lookup("Music", self._musics, asset_id)

    @property
    def textures(self) -> Mapping[str, Any]:
        """Read-only view of every loaded texture."""
        return MappingProxyType(self._textures)

    @property
    def sounds(self) -> Mapping[str, Any]:
        """Read-only view of every loaded sound."""
        return MappingProxyType(self._sounds)

    def cleanup(self) -> None:
        """Release every asset and detach the renderer."""
        logger.info("Cleaning up assets")
        for store in (self._textures, self._sounds, self._fonts, self._musics):
            for asset_id in store:
                logger.info("  - released: %s", asset_id)
            store.clear()
        self.renderer = None
        logger.info("Cleanup complete")