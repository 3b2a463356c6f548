from __future__ import annotations

import logging
from typing import Iterable, List, Tuple

from .geometry import Point, Rectangle, Size, bounding_box
from .spiral import PointGenerator

log = logging.getLogger("cloud_layout.placer")

DEFAULT_MAX_ATTEMPTS = 2_000_000


class InvalidSizeError(ValueError):
    """Raised when a rectangle with a non-positive side is submitted."""

    def __init__(self, size: Size) -> None:
        super().__init__(f"rectangle size must be positive in both dimensions, got {size}")
        self.size = size


class PointSourceExhaustedError(RuntimeError):
    """Raised when the point source stops producing usable candidates.

    This means the point source is broken (or the guard is too tight), so
    retrying the same call will not help.
    """

    def __init__(self, attempts: int, reason: str) -> None:
        super().__init__(f"no free position found after {attempts} candidates: {reason}")
        self.attempts = attempts


class CircularCloudLayouter:
    """Greedy placer packing rectangles into a roughly circular cloud.

    Candidates are taken from ``point_source`` in order; the first one
    whose rectangle does not overlap anything already placed wins and is
    then pushed toward ``center`` one unit at a time, horizontally first
    and vertically second.

    Not thread-safe: guard a whole :meth:`place` call with one lock if the
    instance is shared.
    """

    def __init__(
        self,
        center: Point,
        point_source: PointGenerator,
        *,
        max_attempts: int | None = DEFAULT_MAX_ATTEMPTS,
    ) -> None:
        if max_attempts is not None and max_attempts <= 0:
            raise ValueError("max_attempts must be positive or None")
        self.center = center
        self.point_source = point_source
        self.max_attempts = max_attempts
        self._placed: List[Rectangle] = []

    @property
    def placed(self) -> Tuple[Rectangle, ...]:
        return tuple(self._placed)

    def place(self, size: Size) -> Rectangle:
        """Place a rectangle of ``size`` and return its final position."""

        if size.width <= 0 or size.height <= 0:
            raise InvalidSizeError(size)

        rect, attempts = self._find_free_position(size)
        rect = self._shift_toward_center(rect)
        self._placed.append(rect)
        log.debug(
            "Placed %sx%s at (%s, %s) after %d candidates",
            size.width,
            size.height,
            rect.left,
            rect.top,
            attempts,
        )
        return rect

    def place_all(self, sizes: Iterable[Size]) -> List[Rectangle]:
        return [self.place(size) for size in sizes]

    def bounding_box(self) -> Rectangle | None:
        return bounding_box(self._placed)

    def _find_free_position(self, size: Size) -> Tuple[Rectangle, int]:
        attempts = 0
        while self.max_attempts is None or attempts < self.max_attempts:
            try:
                point = self.point_source.next_point()
            except StopIteration:
                point = None
            if point is None:
                log.error("Point source ran dry after %d candidates", attempts)
                raise PointSourceExhaustedError(attempts, "point source is exhausted")
            attempts += 1

            candidate = Rectangle.centered_at(point, size)
            if not self._overlaps_placed(candidate):
                return candidate, attempts

        log.error("Gave up after %d candidates for %sx%s", attempts, size.width, size.height)
        raise PointSourceExhaustedError(attempts, "max_attempts reached")

    def _shift_toward_center(self, rect: Rectangle) -> Rectangle:
        rect = self._shift_along_axis(rect, horizontal=True)
        return self._shift_along_axis(rect, horizontal=False)

    def _shift_along_axis(self, rect: Rectangle, *, horizontal: bool) -> Rectangle:
        # Stops on the last position that is free and whose center shares
        # neither the row nor the column of the placement center.
        if horizontal:
            gap = self.center.x - rect.center.x
        else:
            gap = self.center.y - rect.center.y
        if gap == 0:
            return rect
        direction = 1 if gap > 0 else -1
        dx, dy = (direction, 0) if horizontal else (0, direction)

        while True:
            moved = rect.shifted(dx, dy)
            if moved.center.is_on_same_axis_with(self.center) or self._overlaps_placed(moved):
                break
            rect = moved
        return rect

    def _overlaps_placed(self, rect: Rectangle) -> bool:
        return any(rect.intersects(other) for other in self._placed)


__all__ = [
    "CircularCloudLayouter",
    "InvalidSizeError",
    "PointSourceExhaustedError",
    "DEFAULT_MAX_ATTEMPTS",
]
