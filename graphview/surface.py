from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from graphview.colors import Color
from graphview.primitives import ScreenPoint


class DrawingSurface(ABC):
    """Primitive drawing operations a host must provide to render a scene.

    Coordinates are device pixels, origin top-left, y growing downward.
    """

    @property
    @abstractmethod
    def width(self) -> int:
        raise NotImplementedError

    @property
    @abstractmethod
    def height(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def fill(self, color: Color) -> None:
        raise NotImplementedError

    @abstractmethod
    def stroke_rect(self, x0: int, y0: int, x1: int, y1: int, color: Color, width: int) -> None:
        raise NotImplementedError

    @abstractmethod
    def stroke_line(self, x0: int, y0: int, x1: int, y1: int, color: Color, width: int) -> None:
        raise NotImplementedError

    @abstractmethod
    def fill_circle(self, cx: int, cy: int, radius: int, color: Color) -> None:
        raise NotImplementedError

    @abstractmethod
    def stroke_circle(self, cx: int, cy: int, radius: int, color: Color, width: int) -> None:
        raise NotImplementedError

    @abstractmethod
    def stroke_path(self, subpaths: Sequence[Sequence[ScreenPoint]], color: Color, width: int) -> None:
        """Stroke each subpath as an open polyline; subpaths are not joined."""
        raise NotImplementedError

    @abstractmethod
    def measure_text(self, text: str, size_px: float, font_family: str) -> tuple[int, int]:
        raise NotImplementedError

    @abstractmethod
    def draw_text(
        self,
        text: str,
        x: int,
        baseline_y: float,
        color: Color,
        size_px: float,
        font_family: str,
    ) -> None:
        """Draw `text` horizontally centred on `x` with its baseline at `baseline_y`."""
        raise NotImplementedError
