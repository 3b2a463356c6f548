"""Integer geometry primitives shared by the point sources and the placer."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def offset(self, dx: int, dy: int) -> Point:
        return Point(self.x + dx, self.y + dy)

    def distance_to(self, other: Point) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def is_on_same_axis_with(self, other: Point) -> bool:
        """True when both points share a row or a column."""

        return self.x == other.x or self.y == other.y


@dataclass(frozen=True)
class Size:
    """Width/height pair. Positivity is checked by the placer, not here."""

    width: int
    height: int


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned box anchored at its top-left ``origin``."""

    origin: Point
    size: Size

    @classmethod
    def centered_at(cls, center: Point, size: Size) -> Rectangle:
        return cls(Point(center.x - size.width // 2, center.y - size.height // 2), size)

    @property
    def left(self) -> int:
        return self.origin.x

    @property
    def top(self) -> int:
        return self.origin.y

    @property
    def right(self) -> int:
        return self.origin.x + self.size.width

    @property
    def bottom(self) -> int:
        return self.origin.y + self.size.height

    @property
    def center(self) -> Point:
        return Point(self.left + self.size.width // 2, self.top + self.size.height // 2)

    def shifted(self, dx: int, dy: int) -> Rectangle:
        return Rectangle(self.origin.offset(dx, dy), self.size)

    def intersects(self, other: Rectangle) -> bool:
        """Interior overlap test; rectangles that only share an edge do not intersect."""

        return (
            self.left < other.right
            and other.left < self.right
            and self.top < other.bottom
            and other.top < self.bottom
        )


def bounding_box(rectangles: list[Rectangle] | tuple[Rectangle, ...]) -> Rectangle | None:
    """Return the smallest rectangle enclosing ``rectangles`` or ``None`` if empty."""

    if not rectangles:
        return None
    left = min(rect.left for rect in rectangles)
    top = min(rect.top for rect in rectangles)
    right = max(rect.right for rect in rectangles)
    bottom = max(rect.bottom for rect in rectangles)
    return Rectangle(Point(left, top), Size(right - left, bottom - top))


__all__ = ["Point", "Size", "Rectangle", "bounding_box"]
