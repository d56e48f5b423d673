# tests/test_validate.py
"""
validate_layout: shapely-based check of finished layouts.
"""

from __future__ import annotations

from wordlayout.core.geometry import bounding_box_of, build_polygon
from wordlayout.core.layout import run_layout
from wordlayout.core.types import (
    LayoutConfig,
    LayoutResult,
    PlayingField,
    TextStyle,
    WordPlacement,
)
from wordlayout.core.validate import validate_layout


def _fake_measure(text: str, font_size: float, style: TextStyle) -> tuple[float, float]:
    return (len(text) * font_size * 0.6, font_size)


def _placement(index: int, cx: float, cy: float, w: float, h: float, rot: float = 0.0) -> WordPlacement:
    poly = build_polygon(cx, cy, w, h, rot)
    return WordPlacement(
        index=index,
        text=f"w{index}",
        weight=1.0,
        relative_weight=1.0,
        font_size=10.0,
        width=w,
        height=h,
        placed=True,
        x=cx,
        y=cy,
        rotation_deg=rot,
        polygon=poly,
        rectangle=bounding_box_of(poly),
    )


def test_validate_layout_accepts_engine_output() -> None:
    words = [("one", 5), ("two", 4), ("three", 3), ("four", 2), ("five", 1)]
    result = run_layout(words, LayoutConfig(), measure=_fake_measure)
    ok, problems = validate_layout(result)
    assert ok is True
    assert problems == []


def test_validate_layout_flags_overlap() -> None:
    result = LayoutResult(
        placements=[_placement(0, 0, 0, 10, 4), _placement(1, 2, 1, 10, 4)],
        scale=1.0,
        field=PlayingField.centered(50, 50),
    )
    ok, problems = validate_layout(result)
    assert ok is False
    assert any("overlap" in p for p in problems)


def test_validate_layout_touching_words_ok() -> None:
    result = LayoutResult(
        placements=[_placement(0, 0, 0, 10, 4), _placement(1, 10, 0, 10, 4)],
        scale=1.0,
        field=PlayingField.centered(50, 50),
    )
    ok, _ = validate_layout(result)
    assert ok is True


def test_validate_layout_flags_word_outside_field() -> None:
    result = LayoutResult(
        placements=[_placement(0, 20, 0, 10, 4)],
        scale=1.0,
        field=PlayingField.centered(30, 30),
    )
    ok, problems = validate_layout(result)
    assert ok is False
    assert any("outside" in p for p in problems)


def test_validate_layout_ignores_dropped_words() -> None:
    dropped = WordPlacement(
        index=1, text="gone", weight=0.0, relative_weight=0.0,
        font_size=1.0, width=3.0, height=1.0, placed=False,
    )
    result = LayoutResult(
        placements=[_placement(0, 0, 0, 10, 4), dropped],
        scale=1.0,
        field=PlayingField.centered(30, 30),
    )
    assert validate_layout(result) == (True, [])
