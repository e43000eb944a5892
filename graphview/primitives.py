from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from graphview.errors import SceneError


@dataclass(frozen=True, order=True)
class WorldPoint:
    """A point in world coordinates. Orders lexicographically (x, then y)."""

    x: float
    y: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))


@dataclass(frozen=True)
class Circle:
    x: float
    y: float
    radius: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "radius", float(self.radius))


@dataclass(frozen=True)
class AxisLabel:
    """Custom text drawn at `tick` instead of the numeric tick value."""

    tick: float
    text: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "tick", float(self.tick))
        object.__setattr__(self, "text", str(self.text))


@dataclass(frozen=True)
class ScreenPoint:
    x: int
    y: int


def coerce_point(value: Any) -> WorldPoint:
    if isinstance(value, WorldPoint):
        return value
    try:
        x, y = value
        return WorldPoint(x, y)
    except (TypeError, ValueError) as exc:
        raise SceneError(f"expected a WorldPoint or an (x, y) pair, got {value!r}") from exc


def coerce_label(value: Any) -> AxisLabel:
    if isinstance(value, AxisLabel):
        return value
    try:
        tick, text = value
        return AxisLabel(tick, text)
    except (TypeError, ValueError) as exc:
        raise SceneError(f"expected an AxisLabel or a (tick, text) pair, got {value!r}") from exc


def normalize_points(points: Iterable[WorldPoint]) -> tuple[WorldPoint, ...]:
    """Sort points lexicographically and drop exact duplicates.

    Not applied unless a caller asks for it: scatter and line graph points
    keep the order they were added in by default.
    """

    return tuple(sorted(set(points)))
