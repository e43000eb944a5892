from __future__ import annotations

from dataclasses import dataclass
import math

import numpy as np

from graphview.primitives import ScreenPoint, WorldPoint
from graphview.scene import Scene


# Screen coordinates saturate here instead of overflowing for huge world values.
PIXEL_LIMIT = 2**31 - 1


def _to_pixel(value: float) -> int:
    if math.isnan(value):
        return 0
    return int(min(max(value, -PIXEL_LIMIT), PIXEL_LIMIT))


@dataclass(frozen=True)
class CoordinateMapper:
    """Affine map between world coordinates and device pixels.

    Screen y grows downward, world y grows upward. The forward direction
    truncates toward zero, so a world value maps to the pixel whose left/top
    edge precedes it (for non-negative results).
    """

    width: int
    height: int
    x_min: float
    x_max: float
    y_min: float
    y_max: float

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("surface width/height must be > 0")
        if not self.x_min < self.x_max or not self.y_min < self.y_max:
            raise ValueError(
                f"degenerate world viewport: x=[{self.x_min}, {self.x_max}] y=[{self.y_min}, {self.y_max}]"
            )

    @classmethod
    def for_scene(cls, scene: Scene, width: int, height: int) -> "CoordinateMapper":
        return cls(
            width=int(width),
            height=int(height),
            x_min=scene.x_min,
            x_max=scene.x_max,
            y_min=scene.y_min,
            y_max=scene.y_max,
        )

    def screen_x(self, x: float) -> int:
        return _to_pixel(self.width * (x - self.x_min) / (self.x_max - self.x_min))

    def screen_y(self, y: float) -> int:
        return _to_pixel(self.height * (self.y_max - y) / (self.y_max - self.y_min))

    def world_x(self, sx: float) -> float:
        return self.x_min + sx * (self.x_max - self.x_min) / self.width

    def world_y(self, sy: float) -> float:
        return self.y_max - sy * (self.y_max - self.y_min) / self.height

    def to_screen(self, point: WorldPoint) -> ScreenPoint:
        return ScreenPoint(self.screen_x(point.x), self.screen_y(point.y))

    def screen_xs(self, xs: np.ndarray) -> np.ndarray:
        with np.errstate(over="ignore", invalid="ignore"):
            scaled = self.width * (np.asarray(xs, dtype=np.float64) - self.x_min) / (self.x_max - self.x_min)
        return np.trunc(np.clip(np.nan_to_num(scaled, nan=0.0), -PIXEL_LIMIT, PIXEL_LIMIT))

    def screen_ys(self, ys: np.ndarray) -> np.ndarray:
        with np.errstate(over="ignore", invalid="ignore"):
            scaled = self.height * (self.y_max - np.asarray(ys, dtype=np.float64)) / (self.y_max - self.y_min)
        return np.trunc(np.clip(np.nan_to_num(scaled, nan=0.0), -PIXEL_LIMIT, PIXEL_LIMIT))

    def world_xs(self, sxs: np.ndarray) -> np.ndarray:
        return self.x_min + np.asarray(sxs, dtype=np.float64) * (self.x_max - self.x_min) / self.width

    def is_on_screen_x(self, sx: int) -> bool:
        return 0 <= sx < self.width

    def is_on_screen_y(self, sy: int) -> bool:
        return 0 <= sy <= self.height

    def is_near_screen_x(self, sx: float) -> bool:
        return math.fabs(sx) <= 2 * self.width

    def is_near_screen_y(self, sy: float) -> bool:
        return math.fabs(sy) <= 2 * self.height
