from __future__ import annotations

from dataclasses import dataclass, field
import math
from typing import Union

from graphview.colors import Color
from graphview.primitives import ScreenPoint
from graphview.surface import DrawingSurface


@dataclass(frozen=True)
class FillCommand:
    color: Color


@dataclass(frozen=True)
class StrokeRectCommand:
    x0: int
    y0: int
    x1: int
    y1: int
    color: Color
    width: int


@dataclass(frozen=True)
class LineCommand:
    x0: int
    y0: int
    x1: int
    y1: int
    color: Color
    width: int


@dataclass(frozen=True)
class CircleCommand:
    cx: int
    cy: int
    radius: int
    color: Color
    filled: bool
    width: int = 0


@dataclass(frozen=True)
class PathCommand:
    subpaths: tuple[tuple[ScreenPoint, ...], ...]
    color: Color
    width: int

    def segments(self) -> list[tuple[ScreenPoint, ScreenPoint]]:
        out: list[tuple[ScreenPoint, ScreenPoint]] = []
        for sub in self.subpaths:
            out.extend(zip(sub, sub[1:]))
        return out


@dataclass(frozen=True)
class TextCommand:
    text: str
    x: int
    baseline_y: float
    color: Color
    size_px: float


DrawCommand = Union[FillCommand, StrokeRectCommand, LineCommand, CircleCommand, PathCommand, TextCommand]


@dataclass
class RecordingSurface(DrawingSurface):
    """Surface that keeps the draw calls it receives, in order."""

    surface_width: int
    surface_height: int
    commands: list[DrawCommand] = field(default_factory=list)

    @property
    def width(self) -> int:
        return self.surface_width

    @property
    def height(self) -> int:
        return self.surface_height

    def clear(self) -> None:
        self.commands.clear()

    def of_type(self, kind: type) -> list:
        return [c for c in self.commands if isinstance(c, kind)]

    def fill(self, color: Color) -> None:
        self.commands.append(FillCommand(color))

    def stroke_rect(self, x0: int, y0: int, x1: int, y1: int, color: Color, width: int) -> None:
        self.commands.append(StrokeRectCommand(x0, y0, x1, y1, color, width))

    def stroke_line(self, x0: int, y0: int, x1: int, y1: int, color: Color, width: int) -> None:
        self.commands.append(LineCommand(x0, y0, x1, y1, color, width))

    def fill_circle(self, cx: int, cy: int, radius: int, color: Color) -> None:
        self.commands.append(CircleCommand(cx, cy, radius, color, filled=True))

    def stroke_circle(self, cx: int, cy: int, radius: int, color: Color, width: int) -> None:
        self.commands.append(CircleCommand(cx, cy, radius, color, filled=False, width=width))

    def stroke_path(self, subpaths, color: Color, width: int) -> None:
        frozen = tuple(tuple(sub) for sub in subpaths)
        self.commands.append(PathCommand(frozen, color, width))

    def measure_text(self, text: str, size_px: float, font_family: str) -> tuple[int, int]:
        # fixed-pitch estimate so layouts are reproducible without fonts
        return (int(math.ceil(0.6 * size_px * len(text))), int(math.ceil(size_px)))

    def draw_text(self, text: str, x: int, baseline_y: float, color: Color, size_px: float, font_family: str) -> None:
        self.commands.append(TextCommand(text, x, baseline_y, color, size_px))
