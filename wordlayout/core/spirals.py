# wordlayout/core/spirals.py
"""
Spirals used to search for a free slot after a word's initial position
collided with another word or the field bounds.

A spiral is a pure function (attempt, field) -> (dx, dy) | None, with
attempt = 0, 1, 2, ... and None meaning the search is exhausted. Step sizes
scale with the field so that SPIRAL_MAX_ATTEMPTS attempts always reach
max_radius(field); growth is stretched by the field's aspect so the search
follows the field shape.
"""

from __future__ import annotations

import math
from typing import Callable

from wordlayout.core.config import (
    ARCHIMEDEAN_ANGLE_STEP,
    SPIRAL_MAX_ATTEMPTS,
    SPIRAL_MAX_RADIUS_FACTOR,
)
from wordlayout.core.types import PlayingField

Offset = tuple[float, float]
SpiralFunction = Callable[[int, PlayingField], "Offset | None"]


def max_radius(field: PlayingField) -> float:
    """Offsets longer than this cannot bring a word back inside the field."""
    return SPIRAL_MAX_RADIUS_FACTOR * math.hypot(field.width, field.height)


def archimedean_spiral(attempt: int, field: PlayingField) -> Offset | None:
    """Radius grows with sqrt(attempt) up to max_radius at the last attempt."""
    if attempt < 0 or attempt >= SPIRAL_MAX_ATTEMPTS:
        return None
    radius = max_radius(field)
    if radius <= 0:
        return None
    n = attempt + 1
    r = radius * math.sqrt(n / SPIRAL_MAX_ATTEMPTS)
    t = n * ARCHIMEDEAN_ANGLE_STEP
    return (r * math.cos(t) * field.aspect_x, r * math.sin(t) * field.aspect_y)


def square_ring_point(attempt: int) -> tuple[int, int, int]:
    """
    (ring, gx, gy) of an outward square ring walk, origin excluded.
    Ring k holds 8k points: up the right side, left along the top, down the
    left side and right along the bottom.
    """
    i = attempt + 1
    k = (math.isqrt(i) + 1) // 2
    p = i - (2 * k - 1) ** 2
    side, off = divmod(p, 2 * k)
    if side == 0:
        return (k, k, -k + 1 + off)
    if side == 1:
        return (k, k - 1 - off, k)
    if side == 2:
        return (k, -k, k - 1 - off)
    return (k, -k + 1 + off, -k)


RING_REACH: int = square_ring_point(SPIRAL_MAX_ATTEMPTS - 1)[0]
"""Ring reached by the last allowed attempt."""


def ring_step(field: PlayingField) -> float:
    """Grid unit of the ring walk: ring RING_REACH lies at max_radius."""
    return max_radius(field) / RING_REACH


def _ring_offset(attempt: int, sx: float, sy: float) -> Offset | None:
    if attempt < 0 or attempt >= SPIRAL_MAX_ATTEMPTS or sx <= 0 or sy <= 0:
        return None
    _, gx, gy = square_ring_point(attempt)
    return (gx * sx, gy * sy)


def square_spiral(attempt: int, field: PlayingField) -> Offset | None:
    """One grid unit per step along square rings; ignores the field shape."""
    step = ring_step(field)
    return _ring_offset(attempt, step, step)


def rectangular_spiral(attempt: int, field: PlayingField) -> Offset | None:
    """Square ring walk stretched to the field's aspect ratio."""
    step = ring_step(field)
    return _ring_offset(attempt, step * field.aspect_x, step * field.aspect_y)


SPIRALS: dict[str, SpiralFunction] = {
    "archimedean": archimedean_spiral,
    "rectangular": rectangular_spiral,
    "square": square_spiral,
}


def get_spiral(name: str) -> SpiralFunction:
    try:
        return SPIRALS[name]
    except KeyError:
        raise ValueError(f"Unknown spiral {name!r}; expected one of {tuple(SPIRALS)}") from None
