"""Quick demo comparing the Archimedean and square spiral point sources."""

from __future__ import annotations

import random

from cloud_layout import ArchimedesSpiral, CircularCloudLayouter, Point, Size, SquareSpiral


def main() -> None:
    center = Point(0, 0)
    rng = random.Random(7)
    sizes = [Size(rng.randint(10, 60), rng.randint(8, 24)) for _ in range(40)]

    for name, source in (
        ("archimedes", ArchimedesSpiral(center)),
        ("square", SquareSpiral(center, step=2)),
    ):
        layouter = CircularCloudLayouter(center, source)
        rects = layouter.place_all(sizes)
        box = layouter.bounding_box()
        farthest = max(rect.center.distance_to(center) for rect in rects)
        print(f"{name}: {len(rects)} rectangles, bounding box {box.size.width}x{box.size.height}, "
              f"farthest center {farthest:.1f}")


if __name__ == "__main__":
    main()
