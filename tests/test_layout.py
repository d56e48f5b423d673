# tests/test_layout.py
"""
End-to-end layout runs with a deterministic fake measurer: no overlaps,
containment, font size monotonicity, determinism and field extension.
"""

from __future__ import annotations

import itertools
import math

import pytest

from wordlayout.core.error_codes import NO_ROOM
from wordlayout.core.field import initial_field
from wordlayout.core.geometry import polygons_intersect, rectangle_inside
from wordlayout.core.layout import (
    coerce_words,
    derive_font_size,
    run_layout,
    sanitize_weight,
)
from wordlayout.core.types import (
    LayoutConfig,
    PlayingField,
    RotationConfig,
    TextStyle,
    WordSpec,
)
from wordlayout.core.validate import validate_layout


def _fake_measure(text: str, font_size: float, style: TextStyle) -> tuple[float, float]:
    return (len(text) * font_size * 0.6, font_size)


WORDS = [
    ("lorem", 12), ("ipsum", 9), ("dolor", 9), ("sit", 7), ("amet", 6),
    ("consectetur", 5), ("adipiscing", 5), ("elit", 4), ("sed", 4), ("do", 3),
    ("eiusmod", 3), ("tempor", 3), ("incididunt", 2), ("ut", 2), ("labore", 2),
    ("et", 1), ("dolore", 1), ("magna", 1), ("aliqua", 1), ("enim", 1),
]


def _assert_no_overlap_and_inside(result) -> None:
    placed = result.placed_words()
    for a, b in itertools.combinations(placed, 2):
        assert not polygons_intersect(a.polygon, b.polygon), (a.text, b.text)
    for w in placed:
        assert rectangle_inside(w.rectangle, result.field)
    ok, problems = validate_layout(result)
    assert ok, problems


def test_sanitize_weight() -> None:
    assert sanitize_weight(3) == 3.0
    assert sanitize_weight(2.5) == 2.5
    for bad in ("3", None, float("nan"), float("inf"), -4, True, object()):
        assert sanitize_weight(bad) == 0.0


def test_derive_font_size() -> None:
    assert derive_font_size(1.0, 25, 1) == 25
    assert derive_font_size(0.5, 25, 1) == 12
    assert derive_font_size(0.0, 25, 3) == 3
    # min wins when misconfigured
    assert derive_font_size(1.0, 5, 10) == 10
    assert derive_font_size(None, None, None) == 1


def test_coerce_words() -> None:
    words = coerce_words([WordSpec("a", 1), ("b", 2), {"name": "c", "weight": 3}, {"text": "d"}])
    assert [w.text for w in words] == ["a", "b", "c", "d"]
    assert words[3].weight == 0
    with pytest.raises(ValueError):
        coerce_words([42])


def test_single_word_placed_at_origin() -> None:
    result = run_layout([("hello", 1)], LayoutConfig(), measure=_fake_measure)
    (word,) = result.placements
    assert word.placed is True
    assert word.font_size == 25
    assert (word.x, word.y) == (0.0, 0.0)
    assert word.rotation_deg == 0.0
    assert result.scale == pytest.approx(min(600 / result.field.width, 400 / result.field.height))


def test_empty_word_list() -> None:
    config = LayoutConfig(viewport_width=300, viewport_height=200)
    result = run_layout([], config, measure=_fake_measure)
    assert result.placements == []
    assert result.scale == 1.0
    assert (result.field.width, result.field.height) == (300, 200)


@pytest.mark.parametrize("spiral", ["archimedean", "rectangular", "square"])
@pytest.mark.parametrize("strategy", ["center", "random"])
def test_layout_no_overlap_and_inside_field(spiral: str, strategy: str) -> None:
    config = LayoutConfig(
        spiral=spiral,
        placement_strategy=strategy,
        rotation=RotationConfig(from_deg=0, to_deg=90, orientations=3),
        seed=5,
    )
    result = run_layout(WORDS, config, measure=_fake_measure)
    assert result.placed_count + result.dropped_count == len(WORDS)
    assert result.placed_count >= 1
    _assert_no_overlap_and_inside(result)


def test_font_size_monotonic_in_weight() -> None:
    result = run_layout(WORDS, LayoutConfig(), measure=_fake_measure)
    for a, b in itertools.combinations(result.placements, 2):
        if a.weight > b.weight:
            assert a.font_size >= b.font_size
        elif b.weight > a.weight:
            assert b.font_size >= a.font_size


def test_processing_order_stable_by_weight() -> None:
    words = [("a", 1), ("b", 5), ("c", 5), ("d", 1), ("e", 9)]
    result = run_layout(words, LayoutConfig(), measure=_fake_measure)
    assert result.order == [4, 1, 2, 0, 3]
    # output stays in input order
    assert [p.text for p in result.placements] == ["a", "b", "c", "d", "e"]


def test_layout_deterministic_with_seed() -> None:
    config = LayoutConfig(placement_strategy="random", spiral="archimedean", seed=123)
    a = run_layout(WORDS, config, measure=_fake_measure)
    b = run_layout(WORDS, config, measure=_fake_measure)
    assert [(p.placed, p.x, p.y, p.rotation_deg) for p in a.placements] == [
        (p.placed, p.x, p.y, p.rotation_deg) for p in b.placements
    ]
    assert a.scale == b.scale


def test_rotation_alternates_by_input_index() -> None:
    words = [("alpha", 4), ("beta", 3), ("gamma", 2), ("delta", 1), ("eps", 1)]
    config = LayoutConfig(rotation=RotationConfig(from_deg=0, to_deg=90, orientations=2))
    result = run_layout(words, config, measure=_fake_measure)
    for p in result.placements:
        assert p.rotation_deg == (0.0 if p.index % 2 == 0 else 90.0)


def test_invalid_weights_get_min_font_and_are_attempted() -> None:
    words = [("good", 10), ("bad", "heavy"), ("nan", float("nan")), ("neg", -2)]
    config = LayoutConfig(min_font_size=4, max_font_size=20)
    result = run_layout(words, config, measure=_fake_measure)
    assert result.order[0] == 0
    for p in result.placements[1:]:
        assert p.weight == 0.0
        assert p.font_size == 4
        assert p.placed or p.drop_reason is not None
    _assert_no_overlap_and_inside(result)


def test_min_font_size_wins_over_max() -> None:
    config = LayoutConfig(min_font_size=10, max_font_size=5)
    result = run_layout([("a", 1), ("bb", 3)], config, measure=_fake_measure)
    assert {p.font_size for p in result.placements} == {10}


def test_all_zero_weights() -> None:
    result = run_layout([("a", 0), ("b", 0)], LayoutConfig(min_font_size=6), measure=_fake_measure)
    assert [p.font_size for p in result.placements] == [6, 6]
    assert all(p.relative_weight == 0.0 for p in result.placements)


def test_invalid_config_raises() -> None:
    with pytest.raises(ValueError):
        run_layout([("a", 1)], LayoutConfig(spiral="zigzag"), measure=_fake_measure)  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        run_layout([("a", 1)], LayoutConfig(placement_strategy="edge"), measure=_fake_measure)  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        run_layout([("a", 1)], LayoutConfig(viewport_width=0), measure=_fake_measure)


def test_two_words_field_only_fits_larger(monkeypatch: pytest.MonkeyPatch) -> None:
    # "big" at size 25 measures 45 x 25; the field holds exactly that
    monkeypatch.setattr(
        "wordlayout.core.layout.initial_field",
        lambda vw, vh, dims: PlayingField.centered(45.0, 25.0),
    )
    config = LayoutConfig(allow_field_extension=False)
    result = run_layout([("big", 10), ("small", 1)], config, measure=_fake_measure)
    big, small = result.placements
    assert big.placed and (big.x, big.y) == (0.0, 0.0)
    if small.placed:
        assert not polygons_intersect(big.polygon, small.polygon)
    else:
        assert small.drop_reason == NO_ROOM
        assert small.polygon is None
    _assert_no_overlap_and_inside(result)


def test_field_extension_places_word_too_big_for_field(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        "wordlayout.core.layout.initial_field",
        lambda vw, vh, dims: PlayingField.centered(5.0, 5.0),
    )
    result = run_layout([("hello", 1)], LayoutConfig(allow_field_extension=True), measure=_fake_measure)
    (word,) = result.placements
    assert word.placed is True
    assert word.extended_field is True
    assert result.field.width >= word.width
    _assert_no_overlap_and_inside(result)


def test_no_extension_drops_word_too_big_for_field(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        "wordlayout.core.layout.initial_field",
        lambda vw, vh, dims: PlayingField.centered(5.0, 5.0),
    )
    result = run_layout([("hello", 1)], LayoutConfig(allow_field_extension=False), measure=_fake_measure)
    (word,) = result.placements
    assert word.placed is False
    assert word.drop_reason == NO_ROOM
    assert result.dropped_count == 1


def test_field_area_not_smaller_than_initial() -> None:
    config = LayoutConfig()
    result = run_layout(WORDS, config, measure=_fake_measure)
    dims = [(p.width, p.height) for p in result.placements]
    start = initial_field(config.viewport_width, config.viewport_height, dims)
    assert result.field.area >= start.area
    assert result.field.left <= result.field.right
    assert result.field.top <= result.field.bottom


def test_measure_called_once_per_distinct_word() -> None:
    calls: list[tuple[str, float]] = []

    def counting(text: str, font_size: float, style: TextStyle) -> tuple[float, float]:
        calls.append((text, font_size))
        return _fake_measure(text, font_size, style)

    run_layout([("x", 1), ("x", 1), ("y", 2)], LayoutConfig(), measure=counting)
    assert sorted(calls) == sorted(set(calls))
    assert len(calls) == 2


def test_scale_maps_field_into_viewport() -> None:
    config = LayoutConfig(viewport_width=800, viewport_height=300)
    result = run_layout(WORDS, config, measure=_fake_measure)
    assert result.field.width * result.scale <= 800 + 1e-9
    assert result.field.height * result.scale <= 300 + 1e-9
    assert math.isclose(result.field.width * result.scale, 800) or math.isclose(
        result.field.height * result.scale, 300
    )


@pytest.mark.parametrize("spiral", ["archimedean", "rectangular", "square"])
def test_larger_fonts_place_the_same_words(spiral: str) -> None:
    # Weights are fractions of 16 and fonts grow by 8, so every size and
    # offset scales exactly and only the unit changes between the runs
    weights = [16, 12, 12, 8, 8, 6, 6, 4, 4, 4, 3, 3, 3, 2, 2, 2, 1, 1, 1, 1]
    words = [(f"w{i:02d}", w) for i, w in enumerate(weights)]
    rotation = RotationConfig(from_deg=0, to_deg=90, orientations=1)

    def config(factor: int) -> LayoutConfig:
        return LayoutConfig(
            min_font_size=factor,
            max_font_size=16 * factor,
            spiral=spiral,
            rotation=rotation,
            allow_field_extension=False,
        )

    small = run_layout(words, config(1), measure=_fake_measure)
    large = run_layout(words, config(8), measure=_fake_measure)
    assert [p.font_size * 8 for p in small.placements] == [p.font_size for p in large.placements]
    assert large.placed_count == small.placed_count
    assert [p.placed for p in large.placements] == [p.placed for p in small.placements]
    for s, b in zip(small.placed_words(), large.placed_words()):
        assert b.x == pytest.approx(8 * s.x, abs=1e-6)
        assert b.y == pytest.approx(8 * s.y, abs=1e-6)
    _assert_no_overlap_and_inside(large)
