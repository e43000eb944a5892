from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path

import numpy as np
from PIL import Image

from graphview.errors import SceneError
from graphview.raster import RasterSurface
from graphview.render import render
from graphview.scene import Scene
from graphview.style import DEFAULT_STYLE, RenderStyle
from graphview.surface import DrawingSurface


LOGGER = logging.getLogger(__name__)


@dataclass
class GraphView:
    """Holds the scene a host redraws on every invalidation or resize."""

    width: int
    height: int
    style: RenderStyle = DEFAULT_STYLE
    _scene: Scene | None = None
    _revision: int = 0

    def __post_init__(self) -> None:
        _check_size(self.width, self.height)

    @property
    def scene(self) -> Scene | None:
        return self._scene

    @property
    def revision(self) -> int:
        """Bumped whenever the output would change; hosts compare it to skip redraws."""
        return self._revision

    def set_scene(self, scene: Scene) -> "GraphView":
        self._scene = scene
        self._revision += 1
        return self

    def resize(self, width: int, height: int) -> "GraphView":
        _check_size(width, height)
        if (width, height) != (self.width, self.height):
            self.width = width
            self.height = height
            self._revision += 1
        return self

    def draw(self, surface: DrawingSurface) -> None:
        if self._scene is None:
            raise SceneError("no scene set; call set_scene() before drawing")
        LOGGER.debug("drawing revision %d at %dx%d", self._revision, surface.width, surface.height)
        render(self._scene, surface, self.style)

    def to_rgba(self) -> np.ndarray:
        surface = RasterSurface(self.width, self.height)
        self.draw(surface)
        return surface.rgba

    def save_png(self, path: str | Path) -> Path:
        out = Path(path)
        Image.fromarray(self.to_rgba()).save(out, format="PNG")
        return out


def _check_size(width: int, height: int) -> None:
    if width <= 0 or height <= 0:
        raise ValueError("view width/height must be > 0")
