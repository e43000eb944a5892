from __future__ import annotations

from collections.abc import Sequence

from graphview.mapper import CoordinateMapper
from graphview.primitives import AxisLabel
from graphview.sampling import function_path
from graphview.scene import Scene, validate_scene
from graphview.style import DEFAULT_STYLE, RenderStyle
from graphview.surface import DrawingSurface


def render(scene: Scene, surface: DrawingSurface, style: RenderStyle | None = None) -> None:
    """Draw `scene` onto `surface`.

    Stages run in a fixed order and later stages paint over earlier ones:
    frame, axes, functions, points, line graphs, circles.
    """

    validate_scene(scene)
    style = style or DEFAULT_STYLE
    mapper = CoordinateMapper.for_scene(scene, surface.width, surface.height)
    draw_frame(scene, surface, style)
    draw_axes(scene, surface, mapper, style)
    draw_functions(scene, surface, mapper, style)
    draw_point_sets(scene, surface, mapper, style)
    draw_line_graphs(scene, surface, mapper, style)
    draw_circles(scene, surface, mapper, style)


def format_tick(value: float) -> str:
    if value == round(value):
        return str(int(round(value)))
    return str(value)


def draw_frame(scene: Scene, surface: DrawingSurface, style: RenderStyle) -> None:
    surface.fill(scene.background_color)
    surface.stroke_rect(0, 0, surface.width, surface.height, scene.axes_color, style.stroke_width)


def draw_axes(scene: Scene, surface: DrawingSurface, mapper: CoordinateMapper, style: RenderStyle) -> None:
    axis_sx = mapper.screen_x(scene.axis_x)
    axis_sy = mapper.screen_y(scene.axis_y)
    color = scene.axes_color
    tick = style.tick_length
    gap = style.label_offset

    if mapper.is_on_screen_y(axis_sy):
        surface.stroke_line(0, axis_sy, surface.width, axis_sy, color, style.stroke_width)
        for value, text in _axis_marks(scene.x_labels, scene.x_ticks):
            sx = mapper.screen_x(value)
            if not mapper.is_on_screen_x(sx):
                continue
            _, text_h = surface.measure_text(text, style.text_size, style.font_family)
            surface.stroke_line(sx, axis_sy - tick, sx, axis_sy + tick, color, style.stroke_width)
            surface.draw_text(text, sx, axis_sy + tick + gap + text_h, color, style.text_size, style.font_family)

    if mapper.is_on_screen_x(axis_sx):
        surface.stroke_line(axis_sx, 0, axis_sx, surface.height, color, style.stroke_width)
        for value, text in _axis_marks(scene.y_labels, scene.y_ticks):
            sy = mapper.screen_y(value)
            if not mapper.is_on_screen_y(sy):
                continue
            text_w, text_h = surface.measure_text(text, style.text_size, style.font_family)
            surface.stroke_line(axis_sx - tick, sy, axis_sx + tick, sy, color, style.stroke_width)
            surface.draw_text(
                text,
                axis_sx - tick - gap - text_w // 2,
                sy + text_h / 2,
                color,
                style.text_size,
                style.font_family,
            )


def _axis_marks(labels: Sequence[AxisLabel], ticks: Sequence[float]) -> list[tuple[float, str]]:
    # custom labels replace the numeric ticks for that axis entirely
    if labels:
        return [(label.tick, label.text) for label in labels]
    return [(t, format_tick(t)) for t in ticks]


def draw_functions(scene: Scene, surface: DrawingSurface, mapper: CoordinateMapper, style: RenderStyle) -> None:
    for colored in scene.functions:
        subpaths = function_path(colored.function, mapper)
        surface.stroke_path(subpaths, colored.color, style.stroke_width)


def draw_point_sets(scene: Scene, surface: DrawingSurface, mapper: CoordinateMapper, style: RenderStyle) -> None:
    for point_set in scene.points:
        for point in point_set.points:
            sx = mapper.screen_x(point.x)
            sy = mapper.screen_y(point.y)
            if mapper.is_near_screen_x(sx) and mapper.is_near_screen_y(sy):
                surface.fill_circle(sx, sy, style.point_radius, point_set.color)


def draw_line_graphs(scene: Scene, surface: DrawingSurface, mapper: CoordinateMapper, style: RenderStyle) -> None:
    for line_graph in scene.line_graphs:
        if not line_graph.points:
            continue
        path = [mapper.to_screen(p) for p in line_graph.points]
        surface.stroke_path([path], line_graph.color, style.stroke_width)


def draw_circles(scene: Scene, surface: DrawingSurface, mapper: CoordinateMapper, style: RenderStyle) -> None:
    for colored in scene.circles:
        circle = colored.circle
        sx = mapper.screen_x(circle.x)
        sy = mapper.screen_y(circle.y)
        radius = mapper.screen_x(circle.x + circle.radius) - sx
        surface.stroke_circle(sx, sy, radius, colored.color, style.stroke_width)
