from __future__ import annotations

import logging
import math

from graphview.elements import RealFunction
from graphview.mapper import CoordinateMapper
from graphview.primitives import ScreenPoint


LOGGER = logging.getLogger(__name__)


def sample_function(function: RealFunction, mapper: CoordinateMapper) -> list[ScreenPoint]:
    """Evaluate `function` once per pixel column, from -1 to width inclusive.

    Samples are dropped when the result is not finite, when evaluation raises
    an arithmetic or value error (``1 / x`` at exactly 0), or when the mapped
    screen y is not near the screen.
    """

    samples: list[ScreenPoint] = []
    failed = 0
    world_xs = mapper.world_xs(range(-1, mapper.width + 1))
    for sx, x in zip(range(-1, mapper.width + 1), world_xs.tolist(), strict=True):
        try:
            y = float(function(x))
        except (ArithmeticError, ValueError):
            failed += 1
            continue
        if not math.isfinite(y):
            continue
        sy = mapper.screen_y(y)
        if mapper.is_near_screen_y(sy):
            samples.append(ScreenPoint(sx, sy))
    if failed:
        LOGGER.debug("function %r could not be evaluated at %d sample(s)", function, failed)
    return samples


def split_subpaths(samples: list[ScreenPoint]) -> list[list[ScreenPoint]]:
    """Group samples into runs whose screen x values are consecutive."""

    subpaths: list[list[ScreenPoint]] = []
    current: list[ScreenPoint] = []
    prev_x: int | None = None
    for point in samples:
        if prev_x is not None and point.x == prev_x + 1:
            current.append(point)
        else:
            if current:
                subpaths.append(current)
            current = [point]
        prev_x = point.x
    if current:
        subpaths.append(current)
    return subpaths


def function_path(function: RealFunction, mapper: CoordinateMapper) -> list[list[ScreenPoint]]:
    return split_subpaths(sample_function(function, mapper))
