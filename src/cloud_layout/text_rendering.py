"""Text measurement backends.

Pillow provides real glyph metrics; when only a rough layout is needed the
glyph-width estimate avoids touching fonts at all.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Protocol, runtime_checkable

from PIL import ImageFont

from .geometry import Size


@runtime_checkable
class TextMeasurer(Protocol):
    """Protocol implemented by size-measurement backends."""

    name: str

    def measure(self, text: str, font_size: int) -> Size:
        """Return the pixel box ``text`` occupies at ``font_size``."""


class PillowTextMeasurer:
    """Measure text with a TrueType font, or Pillow's bundled default font."""

    name = "pillow"

    def __init__(self, font_path: Path | str | None = None) -> None:
        self.font_path = Path(font_path) if font_path is not None else None
        self._load = lru_cache(maxsize=64)(self._load_font)

    def _load_font(self, font_size: int) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
        if self.font_path is not None:
            return ImageFont.truetype(str(self.font_path), font_size)
        return ImageFont.load_default(size=font_size)

    def font(self, font_size: int) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
        if font_size <= 0:
            raise ValueError("font_size must be positive")
        return self._load(font_size)

    def measure(self, text: str, font_size: int) -> Size:
        left, top, right, bottom = self.font(font_size).getbbox(text)
        return Size(max(int(right - left), 1), max(int(bottom - top), 1))


class EstimatedTextMeasurer:
    """Approximate a text box as ``len(text) * font_size * glyph_width_factor`` by ``font_size``."""

    name = "estimate"

    def __init__(self, glyph_width_factor: float = 0.55) -> None:
        if glyph_width_factor <= 0.0:
            raise ValueError("glyph_width_factor must be positive")
        self.glyph_width_factor = glyph_width_factor

    def measure(self, text: str, font_size: int) -> Size:
        if font_size <= 0:
            raise ValueError("font_size must be positive")
        glyphs = max(len(text), 1)
        width = int(round(glyphs * font_size * self.glyph_width_factor))
        return Size(max(width, 1), font_size)


def get_text_measurer(preferred: str | None = None, *, font_path: Path | str | None = None) -> TextMeasurer:
    """Return a measurer by name; Pillow is the default."""

    normalized = (preferred or "pillow").strip().lower()
    if normalized == "pillow":
        return PillowTextMeasurer(font_path)
    if normalized == "estimate":
        return EstimatedTextMeasurer()
    raise ValueError(f"Unknown text measurer '{preferred}'")


__all__ = [
    "TextMeasurer",
    "PillowTextMeasurer",
    "EstimatedTextMeasurer",
    "get_text_measurer",
]
