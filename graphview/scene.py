from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
import math
from typing import Any

from graphview.colors import BLACK, WHITE, Color, coerce_color
from graphview.elements import ColoredCircle, ColoredFunction, ColoredPointSet, RealFunction
from graphview.errors import SceneError
from graphview.primitives import AxisLabel, Circle, WorldPoint, coerce_label, coerce_point, normalize_points


DEFAULT_BOUNDS = (-10.0, 10.0, -10.0, 10.0)
DEFAULT_TICKS = (-8.0, -6.0, -4.0, -2.0, 2.0, 4.0, 6.0, 8.0)


@dataclass(frozen=True)
class Scene:
    """Everything needed to draw one graph, independent of the surface size.

    Built by `SceneBuilder.build()`; never mutated afterwards, so one scene can
    be drawn any number of times (for example after every resize).
    """

    functions: tuple[ColoredFunction, ...] = ()
    points: tuple[ColoredPointSet, ...] = ()
    line_graphs: tuple[ColoredPointSet, ...] = ()
    circles: tuple[ColoredCircle, ...] = ()
    background_color: Color = WHITE
    axes_color: Color = BLACK
    x_min: float = DEFAULT_BOUNDS[0]
    x_max: float = DEFAULT_BOUNDS[1]
    y_min: float = DEFAULT_BOUNDS[2]
    y_max: float = DEFAULT_BOUNDS[3]
    # the y axis is drawn at x == axis_x, the x axis at y == axis_y
    axis_x: float = 0.0
    axis_y: float = 0.0
    x_ticks: tuple[float, ...] = DEFAULT_TICKS
    y_ticks: tuple[float, ...] = DEFAULT_TICKS
    x_labels: tuple[AxisLabel, ...] = ()
    y_labels: tuple[AxisLabel, ...] = ()

    @property
    def width_world(self) -> float:
        return self.x_max - self.x_min

    @property
    def height_world(self) -> float:
        return self.y_max - self.y_min


@dataclass
class SceneBuilder:
    """Fluent, mutable accumulator for a `Scene`.

    Every method returns the builder. Elements added without a color take the
    default color current at the time of the `add_*` call. `build()` takes a
    snapshot and leaves the builder usable.
    """

    background_color: Color = WHITE
    axes_color: Color = BLACK
    function_color: Color = BLACK
    point_color: Color = BLACK
    circle_color: Color = BLACK
    x_min: float = DEFAULT_BOUNDS[0]
    x_max: float = DEFAULT_BOUNDS[1]
    y_min: float = DEFAULT_BOUNDS[2]
    y_max: float = DEFAULT_BOUNDS[3]
    axis_x: float = 0.0
    axis_y: float = 0.0
    x_ticks: list[float] = field(default_factory=lambda: list(DEFAULT_TICKS))
    y_ticks: list[float] = field(default_factory=lambda: list(DEFAULT_TICKS))
    x_labels: list[AxisLabel] = field(default_factory=list)
    y_labels: list[AxisLabel] = field(default_factory=list)

    _functions: list[ColoredFunction] = field(default_factory=list)
    _points: list[ColoredPointSet] = field(default_factory=list)
    _line_graphs: list[ColoredPointSet] = field(default_factory=list)
    _circles: list[ColoredCircle] = field(default_factory=list)

    def add_function(self, function: RealFunction, color: Any = None) -> "SceneBuilder":
        if not callable(function):
            raise SceneError(f"function must be callable, got {type(function)!r}")
        resolved = self.function_color if color is None else coerce_color(color)
        self._functions.append(ColoredFunction(function=function, color=resolved))
        return self

    def add_points(self, points: Iterable[Any], color: Any = None, *, normalize: bool = False) -> "SceneBuilder":
        resolved = self.point_color if color is None else coerce_color(color)
        self._points.append(ColoredPointSet(points=_coerce_points(points, normalize), color=resolved))
        return self

    def add_line_graph(self, points: Iterable[Any], color: Any = None, *, normalize: bool = False) -> "SceneBuilder":
        # line graphs share the point color default
        resolved = self.point_color if color is None else coerce_color(color)
        self._line_graphs.append(ColoredPointSet(points=_coerce_points(points, normalize), color=resolved))
        return self

    def add_circle(self, circle: Circle | tuple[float, float, float], color: Any = None) -> "SceneBuilder":
        if not isinstance(circle, Circle):
            try:
                x, y, radius = circle
            except (TypeError, ValueError) as exc:
                raise SceneError(f"expected a Circle or an (x, y, radius) triple, got {circle!r}") from exc
            circle = Circle(x, y, radius)
        resolved = self.circle_color if color is None else coerce_color(color)
        self._circles.append(ColoredCircle(circle=circle, color=resolved))
        return self

    def set_background_color(self, color: Any) -> "SceneBuilder":
        self.background_color = coerce_color(color)
        return self

    def set_axes_color(self, color: Any) -> "SceneBuilder":
        self.axes_color = coerce_color(color)
        return self

    def set_function_color(self, color: Any) -> "SceneBuilder":
        self.function_color = coerce_color(color)
        return self

    def set_point_color(self, color: Any) -> "SceneBuilder":
        self.point_color = coerce_color(color)
        return self

    def set_circle_color(self, color: Any) -> "SceneBuilder":
        self.circle_color = coerce_color(color)
        return self

    def set_world_coordinates(self, x_min: float, x_max: float, y_min: float, y_max: float) -> "SceneBuilder":
        self.x_min = float(x_min)
        self.x_max = float(x_max)
        self.y_min = float(y_min)
        self.y_max = float(y_max)
        return self

    def set_axes(self, axis_x: float, axis_y: float) -> "SceneBuilder":
        """Place the axes: `axis_x` positions the y axis, `axis_y` the x axis."""
        self.axis_x = float(axis_x)
        self.axis_y = float(axis_y)
        return self

    def set_x_ticks(self, *ticks: Any) -> "SceneBuilder":
        self.x_ticks = [float(t) for t in _flatten_varargs(ticks)]
        return self

    def set_y_ticks(self, *ticks: Any) -> "SceneBuilder":
        self.y_ticks = [float(t) for t in _flatten_varargs(ticks)]
        return self

    def set_x_labels(self, *labels: Any) -> "SceneBuilder":
        self.x_labels = [coerce_label(label) for label in _flatten_varargs(labels, scalar=AxisLabel)]
        return self

    def set_y_labels(self, *labels: Any) -> "SceneBuilder":
        self.y_labels = [coerce_label(label) for label in _flatten_varargs(labels, scalar=AxisLabel)]
        return self

    def build(self) -> Scene:
        scene = Scene(
            functions=tuple(self._functions),
            points=tuple(self._points),
            line_graphs=tuple(self._line_graphs),
            circles=tuple(self._circles),
            background_color=self.background_color,
            axes_color=self.axes_color,
            x_min=self.x_min,
            x_max=self.x_max,
            y_min=self.y_min,
            y_max=self.y_max,
            axis_x=self.axis_x,
            axis_y=self.axis_y,
            x_ticks=tuple(self.x_ticks),
            y_ticks=tuple(self.y_ticks),
            x_labels=tuple(self.x_labels),
            y_labels=tuple(self.y_labels),
        )
        validate_scene(scene)
        return scene


def validate_scene(scene: Scene) -> None:
    """Reject scenes that cannot be mapped or drawn."""

    bounds = (scene.x_min, scene.x_max, scene.y_min, scene.y_max)
    if not all(math.isfinite(v) for v in bounds):
        raise SceneError(f"world coordinates must be finite, got {bounds}")
    if scene.x_min >= scene.x_max:
        raise SceneError(f"x_min must be < x_max, got {scene.x_min} >= {scene.x_max}")
    if scene.y_min >= scene.y_max:
        raise SceneError(f"y_min must be < y_max, got {scene.y_min} >= {scene.y_max}")
    if not (math.isfinite(scene.axis_x) and math.isfinite(scene.axis_y)):
        raise SceneError(f"axes must be finite, got ({scene.axis_x}, {scene.axis_y})")

    for name, ticks in (("x_ticks", scene.x_ticks), ("y_ticks", scene.y_ticks)):
        if not all(math.isfinite(t) for t in ticks):
            raise SceneError(f"{name} must be finite")
    for name, labels in (("x_labels", scene.x_labels), ("y_labels", scene.y_labels)):
        if not all(math.isfinite(label.tick) for label in labels):
            raise SceneError(f"{name} positions must be finite")

    for kind, sets in (("points", scene.points), ("line graph", scene.line_graphs)):
        for i, point_set in enumerate(sets):
            for point in point_set.points:
                if not (math.isfinite(point.x) and math.isfinite(point.y)):
                    raise SceneError(f"{kind} set {i} contains a non-finite point: {point!r}")
    for i, line_graph in enumerate(scene.line_graphs):
        if not line_graph.points:
            raise SceneError(f"line graph {i} has no points")

    for i, colored in enumerate(scene.circles):
        c = colored.circle
        if not all(math.isfinite(v) for v in (c.x, c.y, c.radius)):
            raise SceneError(f"circle {i} has non-finite geometry: {c!r}")
        if c.radius < 0:
            raise SceneError(f"circle {i} radius must be >= 0, got {c.radius}")


def _coerce_points(points: Iterable[Any], normalize: bool) -> tuple[WorldPoint, ...]:
    if isinstance(points, (str, bytes)):
        raise SceneError("points must be an iterable of points")
    coerced = tuple(coerce_point(p) for p in points)
    if normalize:
        return normalize_points(coerced)
    return coerced


def _flatten_varargs(values: tuple[Any, ...], scalar: type | None = None) -> list[Any]:
    # set_x_ticks(1, 2, 3) and set_x_ticks([1, 2, 3]) are equivalent
    if len(values) == 1 and not isinstance(values[0], (str, bytes)):
        only = values[0]
        if scalar is not None and isinstance(only, scalar):
            return [only]
        if isinstance(only, Iterable) and not _is_pair_label(only, scalar):
            return list(only)
    return list(values)


def _is_pair_label(value: Any, scalar: type | None) -> bool:
    # set_x_labels((1, "one")) is a single label, not two
    return (
        scalar is AxisLabel
        and isinstance(value, tuple)
        and len(value) == 2
        and isinstance(value[1], str)
    )
