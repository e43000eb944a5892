from __future__ import annotations

import math
import unittest

from graphview import AxisLabel, Circle, SceneBuilder, SceneError, WorldPoint, graph
from graphview.colors import BLACK, BLUE, RED, WHITE, coerce_color
from graphview.primitives import normalize_points
from graphview.scene import DEFAULT_TICKS, Scene


class SceneBuilderTests(unittest.TestCase):
    def test_defaults(self) -> None:
        scene = SceneBuilder().build()
        self.assertEqual(scene.background_color, WHITE)
        self.assertEqual(scene.axes_color, BLACK)
        self.assertEqual((scene.x_min, scene.x_max, scene.y_min, scene.y_max), (-10.0, 10.0, -10.0, 10.0))
        self.assertEqual((scene.axis_x, scene.axis_y), (0.0, 0.0))
        self.assertEqual(scene.x_ticks, (-8.0, -6.0, -4.0, -2.0, 2.0, 4.0, 6.0, 8.0))
        self.assertEqual(scene.y_ticks, DEFAULT_TICKS)
        self.assertEqual(scene.x_labels, ())
        self.assertEqual(scene.y_labels, ())
        self.assertEqual(scene.functions, ())

    def test_every_method_returns_the_builder(self) -> None:
        builder = graph()
        chained = (
            builder.add_function(math.sin)
            .add_points([(1, 2)])
            .add_line_graph([(1, 2), (3, 4)])
            .add_circle(Circle(0, 0, 1))
            .set_background_color(WHITE)
            .set_axes_color(BLACK)
            .set_function_color(RED)
            .set_point_color(RED)
            .set_circle_color(BLUE)
            .set_world_coordinates(-5, 5, -5, 5)
            .set_axes(1, 1)
            .set_x_ticks(1, 2)
            .set_y_ticks(1, 2)
            .set_x_labels(AxisLabel(1, "one"))
            .set_y_labels(AxisLabel(1, "one"))
        )
        self.assertIs(chained, builder)

    def test_omitted_color_uses_default_at_call_time(self) -> None:
        scene = (
            SceneBuilder()
            .set_function_color(RED)
            .add_function(math.sin)
            .set_function_color(BLUE)
            .add_function(math.cos)
            .add_function(math.tan, (0, 255, 0))
            .build()
        )
        self.assertEqual([f.color for f in scene.functions], [RED, BLUE, (0, 255, 0, 255)])

    def test_line_graphs_and_points_share_the_point_color(self) -> None:
        scene = SceneBuilder().set_point_color(RED).add_points([(1, 1)]).add_line_graph([(1, 1)]).build()
        self.assertEqual(scene.points[0].color, RED)
        self.assertEqual(scene.line_graphs[0].color, RED)

    def test_circle_color_default(self) -> None:
        scene = SceneBuilder().add_circle((0, 0, 1)).set_circle_color(RED).add_circle(Circle(1, 1, 1)).build()
        self.assertEqual([c.color for c in scene.circles], [BLACK, RED])
        self.assertEqual(scene.circles[0].circle, Circle(0.0, 0.0, 1.0))

    def test_build_snapshots_do_not_alias_the_builder(self) -> None:
        builder = SceneBuilder().add_function(math.sin)
        first = builder.build()
        builder.add_function(math.cos).set_x_ticks(1, 2, 3).set_world_coordinates(0, 1, 0, 1)
        second = builder.build()

        self.assertEqual(len(first.functions), 1)
        self.assertEqual(len(second.functions), 2)
        self.assertIs(second.functions[0].function, first.functions[0].function)
        self.assertIs(second.functions[1].function, math.cos)
        self.assertEqual(first.x_ticks, DEFAULT_TICKS)
        self.assertEqual((first.x_min, first.x_max), (-10.0, 10.0))
        self.assertIsInstance(first.functions, tuple)

    def test_scene_is_frozen(self) -> None:
        scene = SceneBuilder().build()
        with self.assertRaises(AttributeError):
            scene.x_min = 3.0  # type: ignore[misc]

    def test_integer_arguments_are_widened(self) -> None:
        scene = SceneBuilder().set_world_coordinates(-5, 5, 0, 10).set_axes(1, 2).set_x_ticks(1, 2).build()
        for value in (scene.x_min, scene.x_max, scene.y_min, scene.y_max, scene.axis_x, scene.axis_y, *scene.x_ticks):
            self.assertIsInstance(value, float)

    def test_ticks_accept_varargs_or_one_iterable(self) -> None:
        a = SceneBuilder().set_x_ticks(1, 2.5, 3).build()
        b = SceneBuilder().set_x_ticks([1, 2.5, 3]).build()
        c = SceneBuilder().set_y_ticks(range(1, 4)).build()
        self.assertEqual(a.x_ticks, (1.0, 2.5, 3.0))
        self.assertEqual(b.x_ticks, a.x_ticks)
        self.assertEqual(c.y_ticks, (1.0, 2.0, 3.0))
        self.assertEqual(SceneBuilder().set_x_ticks().build().x_ticks, ())

    def test_labels_accept_objects_pairs_and_lists(self) -> None:
        scene = (
            SceneBuilder()
            .set_x_labels(AxisLabel(1, "Jan"), (2, "Feb"))
            .set_y_labels([(5, "five"), (10, "ten")])
            .build()
        )
        self.assertEqual(scene.x_labels, (AxisLabel(1.0, "Jan"), AxisLabel(2.0, "Feb")))
        self.assertEqual([label.text for label in scene.y_labels], ["five", "ten"])
        single = SceneBuilder().set_x_labels((3, "three")).build()
        self.assertEqual(single.x_labels, (AxisLabel(3.0, "three"),))

    def test_setting_ticks_replaces_previous_ticks(self) -> None:
        scene = SceneBuilder().set_x_ticks(1, 2).set_x_ticks(5).build()
        self.assertEqual(scene.x_ticks, (5.0,))
        self.assertEqual(scene.y_ticks, DEFAULT_TICKS)

    def test_points_accept_tuples(self) -> None:
        scene = SceneBuilder().add_points([(1, 2), WorldPoint(3, 4)]).build()
        self.assertEqual(scene.points[0].points, (WorldPoint(1.0, 2.0), WorldPoint(3.0, 4.0)))

    def test_point_order_and_duplicates_are_kept_by_default(self) -> None:
        # Whether point sets should be sorted/deduplicated has varied between
        # versions of this library; keeping caller order is the default and
        # normalization is opt-in.
        raw = [(3, 1), (1, 2), (1, 2), (1, 1)]
        kept = SceneBuilder().add_points(raw).add_line_graph(raw).build()
        self.assertEqual([(p.x, p.y) for p in kept.points[0].points], [(3, 1), (1, 2), (1, 2), (1, 1)])
        self.assertEqual(len(kept.line_graphs[0].points), 4)

        normalized = SceneBuilder().add_points(raw, normalize=True).add_line_graph(raw, normalize=True).build()
        expected = (WorldPoint(1, 1), WorldPoint(1, 2), WorldPoint(3, 1))
        self.assertEqual(normalized.points[0].points, expected)
        self.assertEqual(normalized.line_graphs[0].points, expected)

    def test_invalid_viewport_is_rejected_at_build(self) -> None:
        with self.assertRaises(SceneError):
            SceneBuilder().set_world_coordinates(5, 5, 0, 1).build()
        with self.assertRaises(SceneError):
            SceneBuilder().set_world_coordinates(0, 1, 3, -3).build()
        with self.assertRaises(SceneError):
            SceneBuilder().set_world_coordinates(0, math.inf, 0, 1).build()

    def test_empty_line_graph_is_rejected_at_build(self) -> None:
        builder = SceneBuilder().add_line_graph([])
        with self.assertRaises(SceneError):
            builder.build()

    def test_empty_scatter_set_is_allowed(self) -> None:
        scene = SceneBuilder().add_points([]).build()
        self.assertEqual(scene.points[0].points, ())

    def test_non_finite_geometry_is_rejected(self) -> None:
        with self.assertRaises(SceneError):
            SceneBuilder().add_points([(math.nan, 1)]).build()
        with self.assertRaises(SceneError):
            SceneBuilder().add_circle(Circle(0, 0, math.inf)).build()
        with self.assertRaises(SceneError):
            SceneBuilder().set_x_ticks(math.nan).build()
        with self.assertRaises(SceneError):
            SceneBuilder().set_axes(math.inf, 0).build()

    def test_negative_radius_is_rejected(self) -> None:
        with self.assertRaises(SceneError):
            SceneBuilder().add_circle(Circle(0, 0, -1)).build()

    def test_bad_inputs_raise_scene_error(self) -> None:
        with self.assertRaises(SceneError):
            SceneBuilder().add_function(42)  # type: ignore[arg-type]
        with self.assertRaises(SceneError):
            SceneBuilder().add_points([(1, 2, 3)])
        with self.assertRaises(SceneError):
            SceneBuilder().add_circle((1, 2))  # type: ignore[arg-type]
        with self.assertRaises(SceneError):
            SceneBuilder().set_axes_color("blue")

    def test_scene_extent_properties(self) -> None:
        scene = Scene(x_min=-2.0, x_max=6.0, y_min=1.0, y_max=2.0)
        self.assertEqual(scene.width_world, 8.0)
        self.assertEqual(scene.height_world, 1.0)


class PrimitiveTests(unittest.TestCase):
    def test_world_points_order_lexicographically(self) -> None:
        pts = [WorldPoint(2, 1), WorldPoint(1, 5), WorldPoint(1, -1)]
        self.assertEqual(sorted(pts), [WorldPoint(1, -1), WorldPoint(1, 5), WorldPoint(2, 1)])
        self.assertLess(WorldPoint(1, 9), WorldPoint(2, 0))

    def test_integer_primitives_widen(self) -> None:
        self.assertEqual(WorldPoint(1, 2), WorldPoint(1.0, 2.0))
        self.assertIsInstance(Circle(1, 2, 3).radius, float)
        self.assertIsInstance(AxisLabel(1, "x").tick, float)

    def test_normalize_points_sorts_and_dedups(self) -> None:
        out = normalize_points([WorldPoint(2, 2), WorldPoint(1, 1), WorldPoint(2, 2)])
        self.assertEqual(out, (WorldPoint(1, 1), WorldPoint(2, 2)))


class ColorTests(unittest.TestCase):
    def test_hex_and_tuple_colors(self) -> None:
        self.assertEqual(coerce_color("#FF8000"), (255, 128, 0, 255))
        self.assertEqual(coerce_color("#ff800080"), (255, 128, 0, 128))
        self.assertEqual(coerce_color((1, 2, 3)), (1, 2, 3, 255))
        self.assertEqual(coerce_color([1, 2, 3, 4]), (1, 2, 3, 4))

    def test_invalid_colors(self) -> None:
        for bad in ("#12345", "red", (256, 0, 0), (0, 0), (0.5, 0, 0), 7):
            with self.assertRaises(SceneError):
                coerce_color(bad)


if __name__ == "__main__":
    unittest.main()
