# wordlayout/core/strategies.py
"""
Placement strategies: initial (pre-collision) position and rotation of a word.
Rotation depends only on the word's input index, so it is reproducible for
both strategies; the random strategy draws positions from a seeded generator.
"""

from __future__ import annotations

from typing import Callable

import numpy as np

from wordlayout.core.types import Candidate, PlayingField, RotationConfig

PlacementFunction = Callable[
    [int, PlayingField, RotationConfig, "np.random.Generator | None"], Candidate
]


def rotation_for_index(index: int, rotation: RotationConfig) -> float:
    """
    Cycle through rotation.orientations evenly spaced angles from from_deg to
    to_deg: index 0 -> from_deg, index n-1 -> to_deg, index n -> from_deg.
    Ranges that are not increasing (to <= from), orientations < 1 and
    index < 0 give 0.
    """
    n = rotation.orientations
    if n < 1 or index < 0 or rotation.to_deg <= rotation.from_deg:
        return 0.0
    interval = (rotation.to_deg - rotation.from_deg) / max(n - 1, 1)
    return rotation.from_deg + (index % n) * interval


def place_center(
    index: int,
    field: PlayingField,
    rotation: RotationConfig,
    rng: np.random.Generator | None = None,
) -> Candidate:
    return Candidate(x=0.0, y=0.0, rotation_deg=rotation_for_index(index, rotation))


def place_random(
    index: int,
    field: PlayingField,
    rotation: RotationConfig,
    rng: np.random.Generator | None = None,
) -> Candidate:
    """Uniform position inside the field; pass a seeded rng for reproducible layouts."""
    if rng is None:
        rng = np.random.default_rng()
    x = float(rng.uniform(-field.ratio_x, field.ratio_x))
    y = float(rng.uniform(-field.ratio_y, field.ratio_y))
    return Candidate(x=x, y=y, rotation_deg=rotation_for_index(index, rotation))


PLACEMENT_STRATEGIES: dict[str, PlacementFunction] = {
    "center": place_center,
    "random": place_random,
}


def get_placement_strategy(name: str) -> PlacementFunction:
    try:
        return PLACEMENT_STRATEGIES[name]
    except KeyError:
        raise ValueError(
            f"Unknown placement strategy {name!r}; expected one of {tuple(PLACEMENT_STRATEGIES)}"
        ) from None
