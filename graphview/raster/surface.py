from __future__ import annotations

from collections.abc import Sequence
import math

import numpy as np

from graphview.colors import WHITE, Color
from graphview.primitives import ScreenPoint
from graphview.raster.canvas import draw_rect_outline, fill_canvas, new_canvas
from graphview.raster.draw_circles import fill_circle, stroke_circle
from graphview.raster.draw_lines import draw_line_segment, draw_polyline
from graphview.raster.draw_text import draw_text, text_size
from graphview.surface import DrawingSurface


class RasterSurface(DrawingSurface):
    """Software surface backed by an RGBA ``(height, width, 4)`` uint8 array."""

    def __init__(self, width: int, height: int, background: Color = WHITE) -> None:
        self._canvas = new_canvas(width, height, background)

    @property
    def width(self) -> int:
        return int(self._canvas.shape[1])

    @property
    def height(self) -> int:
        return int(self._canvas.shape[0])

    @property
    def rgba(self) -> np.ndarray:
        return self._canvas

    def fill(self, color: Color) -> None:
        fill_canvas(self._canvas, color)

    def stroke_rect(self, x0: int, y0: int, x1: int, y1: int, color: Color, width: int) -> None:
        draw_rect_outline(self._canvas, x0, y0, x1, y1, color, width)

    def stroke_line(self, x0: int, y0: int, x1: int, y1: int, color: Color, width: int) -> None:
        draw_line_segment(self._canvas, x0, y0, x1, y1, color, width)

    def fill_circle(self, cx: int, cy: int, radius: int, color: Color) -> None:
        fill_circle(self._canvas, cx, cy, radius, color)

    def stroke_circle(self, cx: int, cy: int, radius: int, color: Color, width: int) -> None:
        stroke_circle(self._canvas, cx, cy, radius, color, width)

    def stroke_path(self, subpaths: Sequence[Sequence[ScreenPoint]], color: Color, width: int) -> None:
        for sub in subpaths:
            draw_polyline(self._canvas, [p.x for p in sub], [p.y for p in sub], color, width)

    def measure_text(self, text: str, size_px: float, font_family: str) -> tuple[int, int]:
        return text_size(text, font_family=font_family, font_size_px=size_px)

    def draw_text(self, text: str, x: int, baseline_y: float, color: Color, size_px: float, font_family: str) -> None:
        draw_text(self._canvas, x, int(math.floor(baseline_y + 0.5)), text, color, font_family=font_family, font_size_px=size_px)
