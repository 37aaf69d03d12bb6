"""Core of a small 2D game engine on pygame: ECS, components, collision, animation,
systems, assets, input, scenes and editor geometry."""

__version__ = "0.1.0"

__all__ = [
    "animation",
    "assets",
    "components",
    "ecs",
    "editor_geometry",
    "input",
    "physics",
    "scene",
    "systems",
]