"""Candidate point sources used as the search order for placement.

Every source exposes a single operation, :meth:`PointGenerator.next_point`,
so the placer can be handed an Archimedean spiral, a square spiral, or any
other pattern without changing placement logic.
"""

from __future__ import annotations

import math
from typing import Iterable, Iterator, Protocol, runtime_checkable

from .geometry import Point


@runtime_checkable
class PointGenerator(Protocol):
    """Protocol implemented by candidate point sources."""

    def next_point(self) -> Point | None:
        """Advance by one step and return the new point.

        Unbounded sources never return ``None``. A finite source signals
        exhaustion by returning ``None`` or raising ``StopIteration``.
        """


class ArchimedesSpiral:
    """Archimedean spiral ``r = theta`` around ``center``.

    The k-th point is ``(round(cx * cos(t) * t + x0), round(cy * sin(t) * t + y0))``
    with ``t = k * angle_step``. ``round`` is Python's round-half-to-even.
    """

    def __init__(
        self,
        center: Point,
        *,
        angle_step: float = math.pi / 360,
        x_compression: float = 1.0,
        y_compression: float = 1.0,
    ) -> None:
        if angle_step <= 0.0:
            raise ValueError("angle_step must be positive")
        if x_compression <= 0.0 or y_compression <= 0.0:
            raise ValueError("compression factors must be positive")
        self.center = center
        self.angle_step = angle_step
        self.x_compression = x_compression
        self.y_compression = y_compression
        self._step = 0

    @property
    def angle(self) -> float:
        """Angle of the point the next call will produce."""

        return self._step * self.angle_step

    def next_point(self) -> Point:
        angle = self.angle
        self._step += 1
        x = round(self.x_compression * math.cos(angle) * angle + self.center.x)
        y = round(self.y_compression * math.sin(angle) * angle + self.center.y)
        return Point(x, y)


# right, down, left, up in screen coordinates
_SQUARE_DIRECTIONS = ((1, 0), (0, 1), (-1, 0), (0, -1))


class SquareSpiral:
    """Rectangular spiral walking legs of 1, 1, 2, 2, 3, 3, ... units."""

    def __init__(self, center: Point, *, step: int = 1) -> None:
        if step <= 0:
            raise ValueError("step must be positive")
        self.center = center
        self.step = step
        self._current: Point | None = None
        self._direction = 0
        self._leg_length = 1
        self._leg_progress = 0
        self._legs_done = 0

    def next_point(self) -> Point:
        if self._current is None:
            self._current = self.center
            return self._current

        dx, dy = _SQUARE_DIRECTIONS[self._direction]
        self._current = self._current.offset(dx * self.step, dy * self.step)
        self._leg_progress += 1
        if self._leg_progress == self._leg_length:
            self._leg_progress = 0
            self._direction = (self._direction + 1) % 4
            self._legs_done += 1
            if self._legs_done % 2 == 0:
                self._leg_length += 1
        return self._current


class IterablePointSource:
    """Adapt any iterable of points (finite or not) to :class:`PointGenerator`."""

    def __init__(self, points: Iterable[Point]) -> None:
        self._points: Iterator[Point] = iter(points)

    def next_point(self) -> Point | None:
        return next(self._points, None)


__all__ = ["PointGenerator", "ArchimedesSpiral", "SquareSpiral", "IterablePointSource"]
