"""Axis-aligned rectangle collision."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rect:
    """An integer rectangle: top-left corner plus width and height."""

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0

    @property
    def right(self) -> int:
        return self.x + self.w

    @property
    def bottom(self) -> int:
        return self.y + self.h


def check_collision(a: Rect, b: Rect) -> bool:
    """Whether two rectangles overlap; touching edges do not count."""
    return a.x < b.right and a.right > b.x and a.y < b.bottom and a.bottom > b.y