# wordlayout/core/field.py
"""
Playing field: initial size estimate, one-shot growth for a word that found
no room, boundary update after each accepted word, and final viewport scale.
"""

from __future__ import annotations

import logging
import math
from typing import Sequence

from wordlayout.core.config import FIELD_AREA_FACTOR
from wordlayout.core.geometry import rectangle_inside
from wordlayout.core.types import PlayingField, Rectangle

logger = logging.getLogger(__name__)


def _viewport_ratios(viewport_width: float, viewport_height: float) -> tuple[float, float]:
    """Stretch factors (>= 1) giving the field the viewport's aspect ratio."""
    if viewport_width <= 0 or viewport_height <= 0:
        return 1.0, 1.0
    ratio_x = viewport_width / viewport_height if viewport_width > viewport_height else 1.0
    ratio_y = viewport_height / viewport_width if viewport_height > viewport_width else 1.0
    return ratio_x, ratio_y


def initial_field(
    viewport_width: float,
    viewport_height: float,
    dimensions: Sequence[tuple[float, float]],
) -> PlayingField:
    """
    Field with the viewport's aspect ratio, big enough for the widest and the
    tallest word and for FIELD_AREA_FACTOR of the summed glyph-box area.
    Glyph boxes are counted as max(width, height) squared so rotation does not
    change the estimate. No words: the viewport itself.
    """
    if not dimensions:
        width = viewport_width if viewport_width > 0 else 1.0
        height = viewport_height if viewport_height > 0 else 1.0
        return PlayingField.centered(width, height)

    max_width = max(w for w, _ in dimensions)
    max_height = max(h for _, h in dimensions)
    area = sum(max(w, h) ** 2 for w, h in dimensions)
    side = max(max_width, max_height, math.sqrt(FIELD_AREA_FACTOR * area))
    if side <= 0:
        side = 1.0
    ratio_x, ratio_y = _viewport_ratios(viewport_width, viewport_height)
    return PlayingField.centered(side * ratio_x, side * ratio_y)


def extend_field(field: PlayingField, rectangle: Rectangle) -> PlayingField:
    """
    Return a larger field with room for the rectangle's footprint on every
    side, keeping the field's aspect ratio. The new field also contains the
    rectangle where it currently stands. The input field is left untouched.
    """
    width = rectangle.width
    height = rectangle.height
    aspect_x = field.aspect_x
    aspect_y = field.aspect_y
    x = width if width * aspect_x > height * aspect_y else height
    new_width = field.width + 2.0 * x * aspect_x
    new_height = field.height + 2.0 * x * aspect_y

    need_width = 2.0 * max(abs(rectangle.left), abs(rectangle.right))
    need_height = 2.0 * max(abs(rectangle.top), abs(rectangle.bottom))
    grow = 1.0
    if new_width > 0:
        grow = max(grow, need_width / new_width)
    if new_height > 0:
        grow = max(grow, need_height / new_height)
    new_width *= grow
    new_height *= grow

    grown = PlayingField.centered(new_width, new_height)
    grown.left = min(grown.left, field.left)
    grown.right = max(grown.right, field.right)
    grown.top = min(grown.top, field.top)
    grown.bottom = max(grown.bottom, field.bottom)
    logger.debug(
        "Field extended from %.2f x %.2f to %.2f x %.2f",
        field.width, field.height, grown.width, grown.height,
    )
    return grown


def update_field_boundaries(field: PlayingField, rectangle: Rectangle) -> PlayingField:
    """
    Widen field bounds to include rectangle (an accepted word); width/height
    follow the symmetric extents. Mutates and returns field.
    """
    field.left = min(field.left, rectangle.left)
    field.right = max(field.right, rectangle.right)
    field.top = min(field.top, rectangle.top)
    field.bottom = max(field.bottom, rectangle.bottom)
    field.width = max(field.width, 2.0 * max(-field.left, field.right))
    field.height = max(field.height, 2.0 * max(-field.top, field.bottom))
    return field


def outside_field(rectangle: Rectangle, field: PlayingField) -> bool:
    return not rectangle_inside(rectangle, field)


def field_scale(viewport_width: float, viewport_height: float, field: PlayingField) -> float:
    """Uniform scale mapping the whole field into the viewport."""
    scale_x = viewport_width / field.width if field.width > 0 else 1.0
    scale_y = viewport_height / field.height if field.height > 0 else 1.0
    return min(scale_x, scale_y)
