"""Geometry helpers for editing polygon colliders in the editor view."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .components import ColliderComponent, TransformComponent, Vec2D

_EPSILON = 1e-6


@dataclass(frozen=True)
class EdgeHit:
    """The polygon edge nearest a point.

    ``start`` and ``end`` are vertex indices, ``distance`` is the distance from
    the query point, and ``x``/``y`` is the nearest point on the edge in world
    space.
    """

    start: int
    end: int
    distance: float
    x: float
    y: float


def closest_point_on_segment(
    px: float, py: float, s1x: float, s1y: float, s2x: float, s2y: float
) -> Tuple[float, float]:
    """The point of segment (s1, s2) nearest to (px, py)."""
    seg_x = s2x - s1x
    seg_y = s2y - s1y
    t = ((px - s1x) * seg_x + (py - s1y) * seg_y) / (seg_x * seg_x + seg_y * seg_y + _EPSILON)
    t = max(0.0, min(1.0, t))
    return s1x + t * seg_x, s1y + t * seg_y


def closest_edge_to_point(
    vertices: Sequence[Vec2D],
    point_x: float,
    point_y: float,
    transform: TransformComponent,
    collider: ColliderComponent,
) -> Optional[EdgeHit]:
    """The closed-polygon edge nearest a world-space point.

    Vertices are relative to the entity position plus the collider offset.
    Returns None when there are fewer than two vertices. On ties the edge
    that comes first wins.
    """
    count = len(vertices)
    if count < 2:
        return None

    base_x = transform.x + collider.offset_x
    base_y = transform.y + collider.offset_y

    best: Optional[Tuple[float, int, int, float, float]] = None
    for start, vertex in enumerate(vertices):
        end = (start + 1) % count
        other = vertices[end]
        cx, cy = closest_point_on_segment(
            point_x,
            point_y,
            base_x + vertex.x,
            base_y + vertex.y,
            base_x + other.x,
            base_y + other.y,
        )
        dx = point_x - cx
        dy = point_y - cy
        distance_sq = dx * dx + dy * dy
        if best is None or distance_sq < best[0]:
            best = (distance_sq, start, end, cx, cy)

    assert best is not None
    distance_sq, start, end, cx, cy = best
    return EdgeHit(start=start, end=end, distance=math.sqrt(distance_sq), x=cx, y=cy)