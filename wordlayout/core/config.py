# wordlayout/core/config.py
"""
Central configuration for word layout.
All tunable values live here; no magic numbers in other modules.
"""

from __future__ import annotations

import logging
import math
import os

# ----- Font sizes -----
MIN_FONT_SIZE: float = 1.0
"""Smallest font size a word can get. Wins over MAX_FONT_SIZE if larger."""

MAX_FONT_SIZE: float = 25.0
"""Font size of the heaviest word; others scale linearly by relative weight."""

# ----- Text style -----
DEFAULT_FONT_FAMILY: str = "DejaVu Sans"
DEFAULT_FONT_WEIGHT: str = "900"

# ----- Rotation -----
ROTATION_FROM_DEG: float = 0.0
ROTATION_TO_DEG: float = 90.0
ROTATION_ORIENTATIONS: int = 2
"""Number of evenly spaced angles between ROTATION_FROM_DEG and ROTATION_TO_DEG."""

# ----- Strategy selection -----
DEFAULT_PLACEMENT_STRATEGY: str = "center"
DEFAULT_SPIRAL: str = "rectangular"
ALLOW_FIELD_EXTENSION: bool = True
"""Grow the field once for a word that found no room; drop it otherwise."""

# ----- Playing field -----
FIELD_AREA_FACTOR: float = 0.85 ** 2
"""Share of the summed glyph-box area the initial field must cover (close packing)."""

DEFAULT_VIEWPORT_WIDTH: float = 600.0
DEFAULT_VIEWPORT_HEIGHT: float = 400.0

# ----- Spirals -----
ARCHIMEDEAN_ANGLE_STEP: float = math.pi * (3.0 - math.sqrt(5.0))
"""Angle increment (rad) per attempt; the golden angle spreads points evenly."""

SPIRAL_MAX_ATTEMPTS: int = 10000
"""Hard cap on spiral attempts per resolve; step sizes are chosen so the last
attempt reaches the field-sized search radius."""

SPIRAL_MAX_RADIUS_FACTOR: float = 1.0
"""Spirals search out to this times the field diagonal."""

# ----- Geometry -----
GEOMETRY_EPS: float = 1e-9
"""Tolerance for overlap and containment tests; touching edges do not collide."""

VALIDATION_OVERLAP_AREA: float = 1e-6
"""Max overlap area between two placed words accepted by validate_layout."""

# ----- Determinism -----
SEED: int | None = 42
"""Seed for the random placement strategy; None for non-deterministic."""

# ----- Debug flags -----
WORDLAYOUT_DEBUG: bool = os.environ.get("WORDLAYOUT_DEBUG", "").lower() in ("1", "true", "yes")
"""Log per-word placement details. Set env WORDLAYOUT_DEBUG=1 to enable."""

if WORDLAYOUT_DEBUG:
    logging.getLogger("wordlayout").setLevel(logging.DEBUG)
