# wordlayout/core/layout.py
"""
Word layout orchestration: weights to font sizes, measurement, stable
heaviest-first ordering, placement with collision avoidance and one-shot
field extension, final viewport scale.
"""

from __future__ import annotations

import logging
import math
import numbers
from typing import Any, Iterable, Mapping

import numpy as np

from wordlayout.core.error_codes import NO_ROOM, NO_ROOM_AFTER_EXTENSION
from wordlayout.core.field import (
    extend_field,
    field_scale,
    initial_field,
    update_field_boundaries,
)
from wordlayout.core.geometry import bounding_box_of, build_polygon, move_polygon
from wordlayout.core.intersection import resolve
from wordlayout.core.spirals import get_spiral
from wordlayout.core.strategies import get_placement_strategy
from wordlayout.core.text_metrics import Measurer, measure_text, memoize_measurer
from wordlayout.core.types import (
    LayoutConfig,
    LayoutResult,
    PlacedWord,
    WordPlacement,
    WordSpec,
)

logger = logging.getLogger(__name__)


def sanitize_weight(weight: Any) -> float:
    """Real, finite, non-negative weights pass through; anything else is 0."""
    if isinstance(weight, bool) or not isinstance(weight, numbers.Real):
        return 0.0
    value = float(weight)
    if not math.isfinite(value) or value < 0:
        return 0.0
    return value


def derive_font_size(
    relative_weight: float | None,
    max_font_size: float | None,
    min_font_size: float | None,
) -> float:
    """
    Font size from a relative weight on a 0-1 scale. If min_font_size is
    larger than max_font_size the result equals min_font_size.
    """
    weight = relative_weight if isinstance(relative_weight, numbers.Real) else 0.0
    max_size = max_font_size if isinstance(max_font_size, numbers.Real) else 1.0
    min_size = min_font_size if isinstance(min_font_size, numbers.Real) else 1.0
    return float(math.floor(max(min_size, weight * max_size)))


def coerce_words(words: Iterable[Any]) -> list[WordSpec]:
    """Accept WordSpec, (text, weight) pairs or mappings with text/name and weight."""
    out: list[WordSpec] = []
    for item in words:
        if isinstance(item, WordSpec):
            out.append(item)
        elif isinstance(item, Mapping):
            text = item.get("text", item.get("name"))
            if text is None:
                raise ValueError(f"Word mapping needs 'text' or 'name': {item!r}")
            out.append(WordSpec(text=str(text), weight=item.get("weight", 0)))
        elif isinstance(item, (tuple, list)) and len(item) == 2:
            out.append(WordSpec(text=str(item[0]), weight=item[1]))
        else:
            raise ValueError(f"Unsupported word entry: {item!r}")
    return out


def order_for_placement(placements: list[WordPlacement]) -> list[int]:
    """Indices by weight descending; equal weights keep input order (stable sort)."""
    return sorted(range(len(placements)), key=lambda i: -placements[i].weight)


def _measure_words(
    words: list[WordSpec],
    config: LayoutConfig,
    measure: Measurer,
) -> list[WordPlacement]:
    weights = [sanitize_weight(w.weight) for w in words]
    max_weight = max(weights) if weights else 0.0
    placements: list[WordPlacement] = []
    for index, (word, weight) in enumerate(zip(words, weights)):
        relative = weight / max_weight if max_weight > 0 else 0.0
        font_size = derive_font_size(relative, config.max_font_size, config.min_font_size)
        width, height = measure(word.text, font_size, config.style)
        placements.append(
            WordPlacement(
                index=index,
                text=word.text,
                weight=weight,
                relative_weight=relative,
                font_size=font_size,
                width=max(0.0, float(width)),
                height=max(0.0, float(height)),
            )
        )
    return placements


def run_layout(
    words: Iterable[Any],
    config: LayoutConfig | None = None,
    measure: Measurer | None = None,
) -> LayoutResult:
    """
    Lay out words without overlap. Heavier words are placed first; a word
    that finds no room is retried once in an extended field (if allowed) and
    otherwise dropped with placed=False. Returns placements in input order
    and the scale that fits the field into the viewport.
    Raises ValueError for invalid configuration or word entries.
    """
    if config is None:
        config = LayoutConfig()
    config.validate()
    if config.min_font_size > config.max_font_size:
        logger.warning(
            "min_font_size %.2f > max_font_size %.2f; every word gets min_font_size",
            config.min_font_size, config.max_font_size,
        )

    specs = coerce_words(words)
    if not specs:
        field = initial_field(config.viewport_width, config.viewport_height, [])
        return LayoutResult(placements=[], scale=1.0, field=field, order=[])

    measurer = memoize_measurer(measure or measure_text)
    placements = _measure_words(specs, config, measurer)
    order = order_for_placement(placements)

    field = initial_field(
        config.viewport_width,
        config.viewport_height,
        [(p.width, p.height) for p in placements],
    )
    spiral = get_spiral(config.spiral)
    place = get_placement_strategy(config.placement_strategy)
    rng = np.random.default_rng(config.seed)
    placed: list[PlacedWord] = []

    for index in order:
        word = placements[index]
        candidate = place(index, field, config.rotation, rng)
        word.rotation_deg = candidate.rotation_deg
        polygon = build_polygon(candidate.x, candidate.y, word.width, word.height, candidate.rotation_deg)
        rectangle = bounding_box_of(polygon)

        offset = resolve(polygon, rectangle, candidate.rotation_deg, placed, field, spiral)
        if offset is None and config.allow_field_extension:
            field = extend_field(field, rectangle)
            word.extended_field = True
            offset = resolve(polygon, rectangle, candidate.rotation_deg, placed, field, spiral)

        if offset is None:
            word.placed = False
            word.drop_reason = NO_ROOM_AFTER_EXTENSION if word.extended_field else NO_ROOM
            logger.debug("Dropped %r (%s)", word.text, word.drop_reason)
            continue

        dx, dy = offset
        word.x = candidate.x + dx
        word.y = candidate.y + dy
        word.polygon = move_polygon(polygon, dx, dy)
        word.rectangle = rectangle.moved(dx, dy)
        word.placed = True
        field = update_field_boundaries(field, word.rectangle)
        placed.append(
            PlacedWord(
                index=index,
                rectangle=word.rectangle,
                polygon=word.polygon,
                rotation_deg=word.rotation_deg,
            )
        )
        logger.debug(
            "Placed %r at (%.2f, %.2f) rot=%.1f size=%.0f",
            word.text, word.x, word.y, word.rotation_deg, word.font_size,
        )

    scale = field_scale(config.viewport_width, config.viewport_height, field)
    result = LayoutResult(placements=placements, scale=scale, field=field, order=order)
    logger.info(
        "Layout placed %d of %d words; field %.1f x %.1f, scale %.4f",
        result.placed_count, len(placements), field.width, field.height, scale,
    )
    return result
