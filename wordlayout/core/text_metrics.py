# wordlayout/core/text_metrics.py
"""
Measure text width/height using Pillow; the default measurer of the layout
engine. Any callable (text, font_size, style) -> (width, height) can replace it.
"""

from __future__ import annotations

import warnings
from typing import Callable

from wordlayout.core.types import TextStyle

Measurer = Callable[[str, float, TextStyle], tuple[float, float]]

_font_warning_emitted: set[str] = set()


def _is_bold(font_weight: str) -> bool:
    w = (font_weight or "").strip().lower()
    if w in ("bold", "bolder"):
        return True
    return w.isdigit() and int(w) >= 600


def _font_candidates(style: TextStyle) -> list[str]:
    family = style.font_family
    compact = family.replace(" ", "")
    names: list[str] = []
    if _is_bold(style.font_weight):
        names += [compact + "-Bold.ttf", family + " Bold.ttf", "DejaVuSans-Bold.ttf"]
    names += [
        family + ".ttf",
        compact + ".ttf",
        "DejaVuSans.ttf",
        "arial.ttf",
        "Arial.ttf",
    ]
    return names


def _load_font(style: TextStyle, font_size: float):
    """Load PIL ImageFont; fallback with warning if font not found."""
    global _font_warning_emitted
    from PIL import ImageFont

    size = max(1, int(round(font_size)))
    for name in _font_candidates(style):
        try:
            return ImageFont.truetype(name, size=size)
        except (OSError, IOError):
            continue
    if style.font_family not in _font_warning_emitted:
        _font_warning_emitted.add(style.font_family)
        warnings.warn(f"Font not found: {style.font_family!r}; using default.", UserWarning)
    return ImageFont.load_default()


def measure_text(text: str, font_size: float, style: TextStyle | None = None) -> tuple[float, float]:
    """
    Return (width, height) of text at font_size in layout units (1 px = 1 unit).
    Uses Pillow; fallback font with warning if the requested font is missing.
    """
    from PIL import Image, ImageDraw

    if style is None:
        style = TextStyle()
    if not text or font_size <= 0:
        return (0.0, 0.0)
    font = _load_font(style, font_size)
    img = Image.new("RGB", (1, 1))
    draw = ImageDraw.Draw(img)
    bbox = draw.textbbox((0, 0), text, font=font)
    w = float(bbox[2] - bbox[0])
    h = float(bbox[3] - bbox[1])
    # Default bitmap font ignores the requested size; rescale to it.
    size_used = getattr(font, "size", font_size)
    scale = font_size / max(1.0, float(size_used))
    return (w * scale, h * scale)


def memoize_measurer(measure: Measurer) -> Measurer:
    """
    Wrap a measurer so each (text, font_size, style) is measured once.
    Create one per layout run so results stay consistent within the run.
    """
    cache: dict[tuple[str, float, TextStyle], tuple[float, float]] = {}

    def measured(text: str, font_size: float, style: TextStyle) -> tuple[float, float]:
        key = (text, font_size, style)
        if key not in cache:
            w, h = measure(text, font_size, style)
            cache[key] = (float(w), float(h))
        return cache[key]

    return measured
