"""High-level APIs turning word frequencies into a rendered tag cloud."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Mapping

import numpy as np
from PIL import Image, ImageDraw

from .config import LayoutConfig, build_layouter
from .geometry import Point, Rectangle, bounding_box
from .text_rendering import PillowTextMeasurer, TextMeasurer, get_text_measurer
from .words import font_size_for, top_words

log = logging.getLogger("cloud_layout.api")

RenderMode = Literal["words", "boxes"]


@dataclass(slots=True)
class PlacedTag:
    """A word paired with the rectangle the placer assigned to it."""

    word: str
    count: int
    font_size: int
    rectangle: Rectangle


@dataclass(slots=True)
class TagCloud:
    center: Point
    tags: list[PlacedTag] = field(default_factory=list)

    @property
    def rectangles(self) -> list[Rectangle]:
        return [tag.rectangle for tag in self.tags]

    def bounding_box(self) -> Rectangle | None:
        return bounding_box(self.rectangles)


def build_tag_cloud(
    frequencies: Mapping[str, int],
    *,
    measurer: TextMeasurer | None = None,
    config: LayoutConfig | None = None,
    limit: int | None = None,
    min_font_size: int = 12,
    max_font_size: int = 64,
) -> TagCloud:
    """Place the most frequent words first, sized by their counts.

    Parameters
    ----------
    frequencies:
        Mapping of word to occurrence count.
    measurer:
        Size-measurement backend. Defaults to Pillow's bundled font.
    config:
        Layout parameters; a fresh placer is built for every call.
    limit:
        Keep only the ``limit`` most frequent words.
    min_font_size, max_font_size:
        Font size range counts are mapped onto.
    """

    if measurer is None:
        measurer = get_text_measurer()
    config = config or LayoutConfig()
    layouter = build_layouter(config)
    ranked = [(word, count) for word, count in top_words(frequencies, limit) if count > 0]
    cloud = TagCloud(center=layouter.center)
    if not ranked:
        return cloud

    counts = [count for _, count in ranked]
    low, high = min(counts), max(counts)
    for word, count in ranked:
        font_size = font_size_for(count, low, high, min_size=min_font_size, max_size=max_font_size)
        size = measurer.measure(word, font_size)
        rectangle = layouter.place(size)
        cloud.tags.append(PlacedTag(word=word, count=count, font_size=font_size, rectangle=rectangle))

    log.info("Placed %d tags using %s measurer", len(cloud.tags), measurer.name)
    return cloud


def render_tag_cloud(
    cloud: TagCloud,
    output_path: Path | str | None = None,
    *,
    mode: RenderMode = "words",
    measurer: PillowTextMeasurer | None = None,
    padding: int = 10,
    background: tuple[int, int, int] = (0, 0, 0),
    fill: tuple[int, int, int] = (255, 255, 255),
) -> np.ndarray:
    """Rasterize ``cloud`` and return an ``(H, W, 3)`` uint8 array.

    ``mode="boxes"`` outlines each rectangle instead of drawing its word,
    which is handy when checking the layout itself. When ``output_path`` is
    given the image is also saved there.
    """

    if mode not in ("words", "boxes"):
        raise ValueError(f"Unknown render mode '{mode}'")
    if padding < 0:
        raise ValueError("padding must be non-negative")

    box = cloud.bounding_box()
    if box is None:
        width = height = 2 * padding + 1
        shift_x = shift_y = padding
    else:
        width = box.size.width + 2 * padding
        height = box.size.height + 2 * padding
        shift_x = padding - box.left
        shift_y = padding - box.top

    image = Image.new("RGB", (width, height), color=background)
    draw = ImageDraw.Draw(image)
    if mode == "words" and measurer is None:
        measurer = PillowTextMeasurer()

    for tag in cloud.tags:
        rect = tag.rectangle.shifted(shift_x, shift_y)
        if mode == "boxes":
            draw.rectangle((rect.left, rect.top, rect.right - 1, rect.bottom - 1), outline=fill)
            continue
        font = measurer.font(tag.font_size)
        left, top, _, _ = font.getbbox(tag.word)
        draw.text((rect.left - left, rect.top - top), tag.word, font=font, fill=fill)

    if output_path is not None:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        image.save(output_path)
    return np.array(image, dtype=np.uint8)


def _serialize_rectangle(rect: Rectangle) -> dict[str, int]:
    return {"x": rect.left, "y": rect.top, "w": rect.size.width, "h": rect.size.height}


def summarize_tag_cloud(cloud: TagCloud) -> dict[str, Any]:
    box = cloud.bounding_box()
    return {
        "center": {"x": cloud.center.x, "y": cloud.center.y},
        "bounding_box": _serialize_rectangle(box) if box is not None else None,
        "tags": [
            {
                "word": tag.word,
                "count": tag.count,
                "font_size": tag.font_size,
                **_serialize_rectangle(tag.rectangle),
            }
            for tag in cloud.tags
        ],
    }


def write_summary(cloud: TagCloud, path: Path | str) -> dict[str, Any]:
    """Write the JSON manifest for ``cloud`` and return it."""

    summary = summarize_tag_cloud(cloud)
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(summary, ensure_ascii=False, indent=2), encoding="utf-8")
    return summary


__all__ = [
    "PlacedTag",
    "TagCloud",
    "build_tag_cloud",
    "render_tag_cloud",
    "summarize_tag_cloud",
    "write_summary",
]
