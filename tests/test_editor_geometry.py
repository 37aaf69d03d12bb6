import math

import pytest

from basketo.components import ColliderComponent, TransformComponent, Vec2D
from basketo.editor_geometry import EdgeHit, closest_edge_to_point, closest_point_on_segment


def _square():
    return [Vec2D(0, 0), Vec2D(10, 0), Vec2D(10, 10), Vec2D(0, 10)]


def test_point_on_segment_is_itself():
    cx, cy = closest_point_on_segment(4.0, 0.0, 0.0, 0.0, 10.0, 0.0)
    assert cx == pytest.approx(4.0)
    assert cy == pytest.approx(0.0)


def test_projection_onto_horizontal_segment():
    cx, cy = closest_point_on_segment(3.0, 7.0, 0.0, 2.0, 10.0, 2.0)
    assert cx == pytest.approx(3.0)
    assert cy == pytest.approx(2.0)


def test_projection_clamped_to_end():
    cx, cy = closest_point_on_segment(50.0, 50.0, 0.0, 0.0, 10.0, 0.0)
    assert (cx, cy) == pytest.approx((10.0, 0.0))


def test_projection_clamped_to_start():
    cx, cy = closest_point_on_segment(-20.0, 3.0, 1.0, 1.0, 5.0, 1.0)
    assert (cx, cy) == (1.0, 1.0)


def test_degenerate_segment_returns_its_point():
    cx, cy = closest_point_on_segment(8.0, -3.0, 2.0, 2.0, 2.0, 2.0)
    assert (cx, cy) == (2.0, 2.0)


@pytest.mark.parametrize("count", [0, 1])
def test_too_few_vertices_gives_none(count):
    vertices = _square()[:count]
    assert closest_edge_to_point(vertices, 0.0, 0.0, TransformComponent(), ColliderComponent()) is None


def test_closest_edge_uses_transform_and_offset():
    transform = TransformComponent(x=100.0, y=200.0)
    collider = ColliderComponent.polygon(_square(), offset_x=5.0, offset_y=5.0)
    hit = closest_edge_to_point(collider.vertices, 110.0, 195.0, transform, collider)
    assert isinstance(hit, EdgeHit)
    assert (hit.start, hit.end) == (0, 1)
    assert hit.x == pytest.approx(110.0)
    assert hit.y == pytest.approx(transform.y + collider.offset_y)


def test_last_edge_wraps_to_first_vertex():
    transform = TransformComponent(x=0.0, y=0.0)
    collider = ColliderComponent.polygon(_square())
    hit = closest_edge_to_point(collider.vertices, -1.0, 5.0, transform, collider)
    assert (hit.start, hit.end) == (3, 0)
    assert hit.x == pytest.approx(0.0)
    assert hit.y == pytest.approx(5.0)


def test_distance_matches_returned_point():
    transform = TransformComponent(x=3.0, y=-4.0)
    collider = ColliderComponent.polygon(_square(), offset_x=1.0, offset_y=2.0)
    px, py = 30.0, 17.0
    hit = closest_edge_to_point(collider.vertices, px, py, transform, collider)
    assert hit.distance == pytest.approx(math.hypot(px - hit.x, py - hit.y))


def test_hit_is_no_farther_than_any_vertex():
    transform = TransformComponent(x=0.0, y=0.0)
    collider = ColliderComponent.polygon([Vec2D(0, 0), Vec2D(20, 5), Vec2D(7, 18)])
    px, py = 25.0, 25.0
    hit = closest_edge_to_point(collider.vertices, px, py, transform, collider)
    for v in collider.vertices:
        assert hit.distance <= math.hypot(px - v.x, py - v.y) + 1e-6


def test_point_on_edge_has_zero_distance():
    transform = TransformComponent(x=0.0, y=0.0)
    collider = ColliderComponent.polygon(_square())
    hit = closest_edge_to_point(collider.vertices, 10.0, 4.0, transform, collider)
    assert (hit.start, hit.end) == (1, 2)
    assert hit.distance == pytest.approx(0.0, abs=1e-4)


def test_two_vertices_tie_keeps_first_edge():
    transform = TransformComponent(x=0.0, y=0.0)
    collider = ColliderComponent.polygon([Vec2D(0, 0), Vec2D(10, 0)])
    hit = closest_edge_to_point(collider.vertices, 5.0, 3.0, transform, collider)
    assert (hit.start, hit.end) == (0, 1)


def test_edge_hit_is_frozen():
    hit = EdgeHit(start=0, end=1, distance=0.0, x=0.0, y=0.0)
    with pytest.raises(AttributeError):
        hit.start = 2  # type: ignore[misc]
    assert hit.start == 0
    assert hit == EdgeHit(start=0, end=1, distance=0.0, x=0.0, y=0.0)