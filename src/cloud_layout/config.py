"""Layout configuration and construction of the point source + placer pair."""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Literal, Mapping

from .geometry import Point
from .placer import DEFAULT_MAX_ATTEMPTS, CircularCloudLayouter
from .spiral import ArchimedesSpiral, PointGenerator, SquareSpiral

SpiralKind = Literal["archimedes", "square"]


@dataclass(frozen=True)
class LayoutConfig:
    """Parameters describing where and how rectangles are searched for."""

    center: tuple[int, int] = (0, 0)
    spiral: SpiralKind = "archimedes"
    angle_step: float = math.pi / 360
    x_compression: float = 1.0
    y_compression: float = 1.0
    square_step: int = 1
    max_attempts: int | None = DEFAULT_MAX_ATTEMPTS

    def __post_init__(self) -> None:
        if self.spiral not in ("archimedes", "square"):
            raise ValueError(f"Unknown spiral '{self.spiral}'")
        if self.angle_step <= 0.0:
            raise ValueError("angle_step must be positive")
        if self.x_compression <= 0.0 or self.y_compression <= 0.0:
            raise ValueError("x_compression and y_compression must be positive")
        if self.square_step <= 0:
            raise ValueError("square_step must be positive")
        if self.max_attempts is not None and self.max_attempts <= 0:
            raise ValueError("max_attempts must be positive or null")
        try:
            center_x, center_y = self.center
        except (TypeError, ValueError) as exc:
            raise ValueError("center must be an (x, y) pair") from exc
        # JSON hands us lists; keep the value hashable.
        object.__setattr__(self, "center", (int(center_x), int(center_y)))

    @property
    def center_point(self) -> Point:
        return Point(*self.center)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> LayoutConfig:
        known = {field.name for field in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown layout config keys: {', '.join(unknown)}")
        return cls(**dict(data))


def load_layout_config(path: Path | str) -> LayoutConfig:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Layout config in {path} must be a JSON object")
    return LayoutConfig.from_dict(data)


def build_point_source(config: LayoutConfig) -> PointGenerator:
    if config.spiral == "square":
        return SquareSpiral(config.center_point, step=config.square_step)
    return ArchimedesSpiral(
        config.center_point,
        angle_step=config.angle_step,
        x_compression=config.x_compression,
        y_compression=config.y_compression,
    )


def build_layouter(config: LayoutConfig | None = None) -> CircularCloudLayouter:
    """Return a fresh placer; each one owns its own point source."""

    config = config or LayoutConfig()
    return CircularCloudLayouter(
        config.center_point,
        build_point_source(config),
        max_attempts=config.max_attempts,
    )


__all__ = ["LayoutConfig", "load_layout_config", "build_point_source", "build_layouter"]
