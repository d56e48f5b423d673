# wordlayout/core/geometry.py
"""
Geometry helpers: rotated rectangle polygons, bounding boxes, rectangle and
separating-axis (SAT) collision tests, field containment.
Rotation is in degrees, counter-clockwise positive in a y-up frame.
"""

from __future__ import annotations

import math

import numpy as np
from shapely.geometry import Polygon as ShapelyPolygon

from wordlayout.core.config import GEOMETRY_EPS
from wordlayout.core.types import PlayingField, Point, Polygon, Rectangle


def build_polygon(
    cx: float, cy: float, width: float, height: float, rotation_deg: float
) -> Polygon:
    """
    Axis-aligned rectangle centered at the origin with given width/height,
    rotated by rotation_deg around the origin, then moved to (cx, cy).
    """
    hw = width / 2.0
    hh = height / 2.0
    rad = math.radians(rotation_deg)
    cos_a = math.cos(rad)
    sin_a = math.sin(rad)
    corners = [
        (-hw, -hh),
        (hw, -hh),
        (hw, hh),
        (-hw, hh),
    ]
    rotated = [
        (cx + x * cos_a - y * sin_a, cy + x * sin_a + y * cos_a)
        for x, y in corners
    ]
    return tuple(rotated)  # type: ignore[return-value]


def move_polygon(polygon: Polygon, dx: float, dy: float) -> Polygon:
    return tuple((x + dx, y + dy) for x, y in polygon)  # type: ignore[return-value]


def bounding_box_of(polygon: Polygon) -> Rectangle:
    """Min/max over the corner coordinates."""
    xs = [x for x, _ in polygon]
    ys = [y for _, y in polygon]
    return Rectangle(left=min(xs), right=max(xs), top=min(ys), bottom=max(ys))


def rectangles_intersect(a: Rectangle, b: Rectangle, eps: float = GEOMETRY_EPS) -> bool:
    """True if the two boxes overlap with positive area; touching edges do not count."""
    return not (
        b.left >= a.right - eps
        or b.right <= a.left + eps
        or b.top >= a.bottom - eps
        or b.bottom <= a.top + eps
    )


def _normal(p1: Point, p2: Point) -> tuple[float, float] | None:
    """Unit normal of edge p1 -> p2, sign-normalized so parallel edges compare equal."""
    ex = p2[0] - p1[0]
    ey = p2[1] - p1[1]
    length = math.hypot(ex, ey)
    if length <= GEOMETRY_EPS:
        return None
    nx, ny = -ey / length, ex / length
    if nx < -GEOMETRY_EPS or (abs(nx) <= GEOMETRY_EPS and ny < 0):
        nx, ny = -nx, -ny
    return (nx, ny)


def polygon_axes(polygon: Polygon) -> list[tuple[float, float]]:
    """Edge normals of a polygon, parallel edges deduplicated (2 for a rectangle)."""
    axes: list[tuple[float, float]] = []
    n = len(polygon)
    for i in range(n):
        axis = _normal(polygon[i], polygon[(i + 1) % n])
        if axis is None:
            continue
        if any(_same_axis(axis, other) for other in axes):
            continue
        axes.append(axis)
    return axes


def _same_axis(a: tuple[float, float], b: tuple[float, float]) -> bool:
    return abs(a[0] - b[0]) <= GEOMETRY_EPS and abs(a[1] - b[1]) <= GEOMETRY_EPS


def project_polygon(polygon: Polygon, axis: tuple[float, float]) -> tuple[float, float]:
    """(min, max) of the corners projected on axis."""
    dots = np.asarray(polygon, dtype=float) @ np.asarray(axis, dtype=float)
    return (float(dots.min()), float(dots.max()))


def polygons_intersect(a: Polygon, b: Polygon, eps: float = GEOMETRY_EPS) -> bool:
    """
    Separating axis test for two convex rectangles. Returns False as soon as
    one axis separates the projections; projections that only touch separate.
    """
    axes = polygon_axes(a)
    for axis in polygon_axes(b):
        if not any(_same_axis(axis, other) for other in axes):
            axes.append(axis)
    if not axes:
        return False
    for axis in axes:
        a_min, a_max = project_polygon(a, axis)
        b_min, b_max = project_polygon(b, axis)
        if a_max - b_min <= eps or b_max - a_min <= eps:
            return False
    return True


def rectangle_inside(rectangle: Rectangle, field: PlayingField, eps: float = GEOMETRY_EPS) -> bool:
    """True if rectangle lies within the field bounds (edges may touch)."""
    return (
        rectangle.left >= field.left - eps
        and rectangle.right <= field.right + eps
        and rectangle.top >= field.top - eps
        and rectangle.bottom <= field.bottom + eps
    )


def to_shapely(polygon: Polygon) -> ShapelyPolygon:
    """Shapely polygon for a word, used for independent validation."""
    return ShapelyPolygon(polygon)


def rectangle_to_shapely(rectangle: Rectangle) -> ShapelyPolygon:
    return ShapelyPolygon([
        (rectangle.left, rectangle.top),
        (rectangle.right, rectangle.top),
        (rectangle.right, rectangle.bottom),
        (rectangle.left, rectangle.bottom),
    ])
