# wordlayout/core/intersection.py
"""
Collision resolution for one word: test the candidate against the field
bounds and every placed word, then walk the spiral until a free offset is
found or the spiral is exhausted. Field growth is not done here.
"""

from __future__ import annotations

import logging
from typing import Sequence

from wordlayout.core.config import GEOMETRY_EPS
from wordlayout.core.field import outside_field
from wordlayout.core.geometry import move_polygon, polygons_intersect, rectangles_intersect
from wordlayout.core.spirals import Offset, SpiralFunction
from wordlayout.core.types import PlacedWord, PlayingField, Polygon, Rectangle

logger = logging.getLogger(__name__)


def is_axis_aligned(rotation_deg: float) -> bool:
    """True for multiples of 90 degrees, where the bounding box is the word itself."""
    r = rotation_deg % 90.0
    return r <= GEOMETRY_EPS or 90.0 - r <= GEOMETRY_EPS


def words_collide(
    polygon: Polygon,
    rectangle: Rectangle,
    rotation_deg: float,
    other: PlacedWord,
) -> bool:
    """Bounding boxes first; SAT only when one of the words is tilted."""
    if not rectangles_intersect(rectangle, other.rectangle):
        return False
    if is_axis_aligned(rotation_deg) and is_axis_aligned(other.rotation_deg):
        return True
    return polygons_intersect(polygon, other.polygon)


def find_collision(
    polygon: Polygon,
    rectangle: Rectangle,
    rotation_deg: float,
    placed: Sequence[PlacedWord],
) -> PlacedWord | None:
    """First placed word the polygon overlaps, or None."""
    for other in placed:
        if words_collide(polygon, rectangle, rotation_deg, other):
            return other
    return None


def resolve(
    polygon: Polygon,
    rectangle: Rectangle,
    rotation_deg: float,
    placed: Sequence[PlacedWord],
    field: PlayingField,
    spiral: SpiralFunction,
) -> Offset | None:
    """
    Offset (dx, dy) that moves the word to a free slot inside the field:
    (0, 0) if the candidate already fits, else the first fitting spiral
    offset. None when the spiral is exhausted.
    """
    last_hit: PlacedWord | None = None

    def blocked(poly: Polygon, rect: Rectangle) -> bool:
        nonlocal last_hit
        if outside_field(rect, field):
            return True
        # a word that just blocked us is likely to block the next offset too
        if last_hit is not None and words_collide(poly, rect, rotation_deg, last_hit):
            return True
        hit = find_collision(poly, rect, rotation_deg, placed)
        if hit is not None:
            last_hit = hit
            return True
        return False

    if not blocked(polygon, rectangle):
        return (0.0, 0.0)

    attempt = 0
    while True:
        offset = spiral(attempt, field)
        if offset is None:
            logger.debug("Spiral exhausted after %d attempts", attempt)
            return None
        dx, dy = offset
        if not blocked(move_polygon(polygon, dx, dy), rectangle.moved(dx, dy)):
            return offset
        attempt += 1
