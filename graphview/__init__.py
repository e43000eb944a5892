from graphview.api import graph, render_to_rgba, save_png
from graphview.colors import Color, coerce_color
from graphview.commands import RecordingSurface
from graphview.elements import ColoredCircle, ColoredFunction, ColoredPointSet
from graphview.errors import SceneError
from graphview.mapper import CoordinateMapper
from graphview.primitives import AxisLabel, Circle, ScreenPoint, WorldPoint, normalize_points
from graphview.raster import RasterSurface
from graphview.render import format_tick, render
from graphview.scene import Scene, SceneBuilder
from graphview.style import DEFAULT_STYLE, RenderStyle, style_for_density, validate_style_overrides
from graphview.surface import DrawingSurface
from graphview.view import GraphView

__all__ = [
    "AxisLabel",
    "Circle",
    "Color",
    "ColoredCircle",
    "ColoredFunction",
    "ColoredPointSet",
    "CoordinateMapper",
    "DEFAULT_STYLE",
    "DrawingSurface",
    "GraphView",
    "RasterSurface",
    "RecordingSurface",
    "RenderStyle",
    "Scene",
    "SceneBuilder",
    "SceneError",
    "ScreenPoint",
    "WorldPoint",
    "coerce_color",
    "format_tick",
    "graph",
    "normalize_points",
    "render",
    "render_to_rgba",
    "save_png",
    "style_for_density",
    "validate_style_overrides",
]
