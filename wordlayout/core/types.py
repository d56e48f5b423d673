# wordlayout/core/types.py
"""
Dataclasses for word input, layout configuration, playing field and results.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

from wordlayout.core.config import (
    ALLOW_FIELD_EXTENSION,
    DEFAULT_FONT_FAMILY,
    DEFAULT_FONT_WEIGHT,
    DEFAULT_PLACEMENT_STRATEGY,
    DEFAULT_SPIRAL,
    DEFAULT_VIEWPORT_HEIGHT,
    DEFAULT_VIEWPORT_WIDTH,
    MAX_FONT_SIZE,
    MIN_FONT_SIZE,
    ROTATION_FROM_DEG,
    ROTATION_ORIENTATIONS,
    ROTATION_TO_DEG,
    SEED,
)

Point = tuple[float, float]
Polygon = tuple[Point, Point, Point, Point]
"""Four corners of a (possibly rotated) rectangle, in drawing order."""

PlacementStrategyName = Literal["center", "random"]
SpiralName = Literal["archimedean", "rectangular", "square"]

PLACEMENT_STRATEGY_NAMES: tuple[str, ...] = ("center", "random")
SPIRAL_NAMES: tuple[str, ...] = ("archimedean", "rectangular", "square")


@dataclass(frozen=True)
class WordSpec:
    """One input word. weight is raw; the engine treats invalid values as 0."""
    text: str
    weight: Any = 0


@dataclass(frozen=True)
class TextStyle:
    """Style attributes handed to the text measurer."""
    font_family: str = DEFAULT_FONT_FAMILY
    font_weight: str = DEFAULT_FONT_WEIGHT


@dataclass(frozen=True)
class RotationConfig:
    from_deg: float = ROTATION_FROM_DEG
    to_deg: float = ROTATION_TO_DEG
    orientations: int = ROTATION_ORIENTATIONS


@dataclass(frozen=True)
class LayoutConfig:
    """
    Options for a layout run. If min_font_size > max_font_size every word
    gets min_font_size.
    """
    min_font_size: float = MIN_FONT_SIZE
    max_font_size: float = MAX_FONT_SIZE
    placement_strategy: PlacementStrategyName = DEFAULT_PLACEMENT_STRATEGY  # type: ignore[assignment]
    spiral: SpiralName = DEFAULT_SPIRAL  # type: ignore[assignment]
    rotation: RotationConfig = field(default_factory=RotationConfig)
    allow_field_extension: bool = ALLOW_FIELD_EXTENSION
    viewport_width: float = DEFAULT_VIEWPORT_WIDTH
    viewport_height: float = DEFAULT_VIEWPORT_HEIGHT
    style: TextStyle = field(default_factory=TextStyle)
    seed: int | None = SEED

    def validate(self) -> None:
        """Raise ValueError for options the engine cannot run with."""
        if self.placement_strategy not in PLACEMENT_STRATEGY_NAMES:
            raise ValueError(
                f"Unknown placement strategy {self.placement_strategy!r}; "
                f"expected one of {PLACEMENT_STRATEGY_NAMES}"
            )
        if self.spiral not in SPIRAL_NAMES:
            raise ValueError(f"Unknown spiral {self.spiral!r}; expected one of {SPIRAL_NAMES}")
        if self.rotation.orientations < 1:
            raise ValueError("rotation.orientations must be at least 1")
        if self.viewport_width <= 0 or self.viewport_height <= 0:
            raise ValueError("Viewport width and height must be positive")


@dataclass
class Rectangle:
    """Axis-aligned box; top is the smaller y, bottom the larger."""
    left: float
    right: float
    top: float
    bottom: float

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    def moved(self, dx: float, dy: float) -> Rectangle:
        return Rectangle(self.left + dx, self.right + dx, self.top + dy, self.bottom + dy)


@dataclass
class PlayingField:
    """
    Region words are placed in, centered at the origin. width/height are full
    extents; left/right/top/bottom are the signed bounds words must stay in.
    """
    width: float
    height: float
    left: float
    right: float
    top: float
    bottom: float

    @classmethod
    def centered(cls, width: float, height: float) -> PlayingField:
        return cls(
            width=width,
            height=height,
            left=-width / 2.0,
            right=width / 2.0,
            top=-height / 2.0,
            bottom=height / 2.0,
        )

    @property
    def ratio_x(self) -> float:
        return self.width / 2.0

    @property
    def ratio_y(self) -> float:
        return self.height / 2.0

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def aspect_x(self) -> float:
        """Horizontal stretch (>= 1) of the field shape."""
        if self.width <= 0 or self.height <= 0:
            return 1.0
        return max(1.0, self.width / self.height)

    @property
    def aspect_y(self) -> float:
        """Vertical stretch (>= 1) of the field shape."""
        if self.width <= 0 or self.height <= 0:
            return 1.0
        return max(1.0, self.height / self.width)


@dataclass(frozen=True)
class Candidate:
    """Initial (pre-collision) position and rotation from a placement strategy."""
    x: float
    y: float
    rotation_deg: float


@dataclass
class PlacedWord:
    """Collision record of an accepted word."""
    index: int
    rectangle: Rectangle
    polygon: Polygon
    rotation_deg: float


@dataclass
class WordPlacement:
    """Layout output for one input word. x/y/polygon are meaningful only if placed."""
    index: int
    text: str
    weight: float
    relative_weight: float
    font_size: float
    width: float
    height: float
    placed: bool = False
    x: float = 0.0
    y: float = 0.0
    rotation_deg: float = 0.0
    polygon: Polygon | None = None
    rectangle: Rectangle | None = None
    extended_field: bool = False
    drop_reason: str | None = None


@dataclass
class LayoutResult:
    """Output of a layout run; placements are in input order."""
    placements: list[WordPlacement]
    scale: float
    field: PlayingField
    order: list[int] = field(default_factory=list)

    @property
    def placed_count(self) -> int:
        return sum(1 for p in self.placements if p.placed)

    @property
    def dropped_count(self) -> int:
        return sum(1 for p in self.placements if not p.placed)

    def placed_words(self) -> list[WordPlacement]:
        return [p for p in self.placements if p.placed]
