# wordlayout/core/reporting.py
"""
JSON-ready dicts of a layout result for consumers that render the words.
Coordinates are center-relative field units; apply `scale` uniformly.
"""

from __future__ import annotations

from wordlayout.core.types import LayoutResult, PlayingField, WordPlacement

SCHEMA_VERSION = "1.0"


def field_to_dict(field: PlayingField) -> dict:
    return {
        "width": float(field.width),
        "height": float(field.height),
        "left": float(field.left),
        "right": float(field.right),
        "top": float(field.top),
        "bottom": float(field.bottom),
    }


def word_to_dict(word: WordPlacement) -> dict:
    """One word; dropped words carry no position."""
    out: dict = {
        "index": word.index,
        "text": word.text,
        "weight": float(word.weight),
        "font_size": float(word.font_size),
        "dimensions": {"width": float(word.width), "height": float(word.height)},
        "placed": word.placed,
    }
    if word.placed:
        out["x"] = float(word.x)
        out["y"] = float(word.y)
        out["rotation_deg"] = float(word.rotation_deg)
        out["polygon"] = [{"x": float(x), "y": float(y)} for x, y in (word.polygon or ())]
    else:
        out["drop_reason"] = word.drop_reason
    return out


def layout_to_dict(result: LayoutResult) -> dict:
    """Exact structure handed to renderers."""
    return {
        "schema_version": SCHEMA_VERSION,
        "scale": float(result.scale),
        "field": field_to_dict(result.field),
        "placed_count": result.placed_count,
        "dropped_count": result.dropped_count,
        "words": [word_to_dict(w) for w in result.placements],
    }
