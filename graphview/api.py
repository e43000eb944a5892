from __future__ import annotations

from pathlib import Path

import numpy as np

from graphview.scene import Scene, SceneBuilder
from graphview.style import DEFAULT_STYLE, RenderStyle, style_for_density
from graphview.view import GraphView


def graph() -> SceneBuilder:
    return SceneBuilder()


def render_to_rgba(
    scene: Scene,
    width: int,
    height: int,
    *,
    style: RenderStyle | None = None,
    dpi: int | None = None,
) -> np.ndarray:
    view = GraphView(width=width, height=height, style=_resolve_style(style, dpi))
    return view.set_scene(scene).to_rgba()


def save_png(
    scene: Scene,
    path: str | Path,
    width: int,
    height: int,
    *,
    style: RenderStyle | None = None,
    dpi: int | None = None,
) -> Path:
    view = GraphView(width=width, height=height, style=_resolve_style(style, dpi))
    return view.set_scene(scene).save_png(path)


def _resolve_style(style: RenderStyle | None, dpi: int | None) -> RenderStyle:
    if style is not None and dpi is not None:
        raise ValueError("pass either style or dpi, not both")
    if style is not None:
        return style
    if dpi is not None:
        return style_for_density(dpi)
    return DEFAULT_STYLE
