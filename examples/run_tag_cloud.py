"""CLI helper to build a tag cloud image from a plain-text file."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from cloud_layout import (
    LayoutConfig,
    build_tag_cloud,
    count_words,
    get_text_measurer,
    load_layout_config,
    render_tag_cloud,
    write_summary,
)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("text", type=Path, help="UTF-8 text file to count words in.")
    parser.add_argument(
        "--output-root",
        type=Path,
        default=Path("output"),
        help="Directory for the PNG and JSON summary (default: output/).",
    )
    parser.add_argument(
        "--layout-config",
        type=Path,
        default=None,
        help="Optional JSON file with LayoutConfig fields (center, spiral, angle_step, ...).",
    )
    parser.add_argument("--font", type=Path, default=None, help="TrueType font used to measure and draw words.")
    parser.add_argument("--limit", type=int, default=100, help="Number of most frequent words (default: 100).")
    parser.add_argument("--min-font-size", type=int, default=12, help="Font size of the rarest word (default: 12).")
    parser.add_argument("--max-font-size", type=int, default=64, help="Font size of the top word (default: 64).")
    parser.add_argument(
        "--mode",
        choices=("words", "boxes"),
        default="words",
        help="Draw words, or only the outlines of their rectangles.",
    )
    parser.add_argument("--verbose", action="store_true", help="Log every placement.")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    config = load_layout_config(args.layout_config) if args.layout_config else LayoutConfig()
    frequencies = count_words(args.text.read_text(encoding="utf-8"))
    measurer = get_text_measurer("pillow", font_path=args.font)
    cloud = build_tag_cloud(
        frequencies,
        measurer=measurer,
        config=config,
        limit=args.limit,
        min_font_size=args.min_font_size,
        max_font_size=args.max_font_size,
    )

    stem = args.text.stem
    image_path = args.output_root / f"{stem}_cloud.png"
    render_tag_cloud(cloud, image_path, mode=args.mode, measurer=measurer)
    summary = write_summary(cloud, args.output_root / f"{stem}_cloud.json")
    summary["image_path"] = str(image_path)
    print(json.dumps({key: summary[key] for key in ("center", "bounding_box", "image_path")}, indent=2))


if __name__ == "__main__":
    main()
