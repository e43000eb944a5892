from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from graphview.colors import Color
from graphview.primitives import Circle, WorldPoint


RealFunction = Callable[[float], float]


@dataclass(frozen=True)
class ColoredFunction:
    function: RealFunction
    color: Color


@dataclass(frozen=True)
class ColoredPointSet:
    """Points with a color, used for both scatter plots and line graphs."""

    points: tuple[WorldPoint, ...]
    color: Color


@dataclass(frozen=True)
class ColoredCircle:
    circle: Circle
    color: Color
