# wordlayout/core/validate.py
"""
Validate a finished layout with shapely, independently of the SAT test used
during placement: placed words must not overlap and must lie inside the
final field bounds. Returns (ok, problems).
"""

from __future__ import annotations

from wordlayout.core.config import GEOMETRY_EPS, VALIDATION_OVERLAP_AREA
from wordlayout.core.geometry import rectangle_inside, to_shapely
from wordlayout.core.types import LayoutResult


def validate_layout(
    result: LayoutResult,
    max_overlap_area: float = VALIDATION_OVERLAP_AREA,
    tolerance: float = GEOMETRY_EPS,
) -> tuple[bool, list[str]]:
    """
    True if no two placed words overlap by more than max_overlap_area and
    every placed word's bounding rectangle is inside the field bounds.
    problems lists one line per violation.
    """
    problems: list[str] = []
    placed = result.placed_words()
    shapes = []
    for word in placed:
        if word.polygon is None or word.rectangle is None:
            problems.append(f"word {word.index} ({word.text!r}) placed without geometry")
            continue
        if not rectangle_inside(word.rectangle, result.field, eps=tolerance):
            problems.append(f"word {word.index} ({word.text!r}) outside field bounds")
        shapes.append((word, to_shapely(word.polygon)))

    for i, (a, shape_a) in enumerate(shapes):
        for b, shape_b in shapes[i + 1:]:
            if shape_a.is_empty or shape_b.is_empty:
                continue
            inter = shape_a.intersection(shape_b)
            if not inter.is_empty and inter.area > max_overlap_area:
                problems.append(
                    f"words {a.index} ({a.text!r}) and {b.index} ({b.text!r}) overlap by {inter.area:.4f}"
                )
    return (not problems, problems)
