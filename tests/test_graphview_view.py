from __future__ import annotations

from pathlib import Path
import tempfile
import unittest

from PIL import Image

from graphview import GraphView, RecordingSurface, SceneBuilder, SceneError, graph, render_to_rgba, save_png
from graphview.commands import CircleCommand, StrokeRectCommand
from graphview.style import style_for_density


class GraphViewTests(unittest.TestCase):
    def test_draw_requires_a_scene(self) -> None:
        view = GraphView(width=100, height=100)
        with self.assertRaises(SceneError):
            view.draw(RecordingSurface(100, 100))

    def test_invalid_size(self) -> None:
        with self.assertRaises(ValueError):
            GraphView(width=0, height=10)
        view = GraphView(width=10, height=10)
        with self.assertRaises(ValueError):
            view.resize(10, -1)

    def test_revision_tracks_scene_and_size_changes(self) -> None:
        view = GraphView(width=100, height=50)
        self.assertEqual(view.revision, 0)
        scene = SceneBuilder().build()
        view.set_scene(scene)
        self.assertIs(view.scene, scene)
        self.assertEqual(view.revision, 1)
        view.resize(100, 50)
        self.assertEqual(view.revision, 1)
        view.resize(300, 150)
        self.assertEqual(view.revision, 2)
        self.assertEqual((view.width, view.height), (300, 150))

    def test_draw_uses_the_surface_size_and_logs(self) -> None:
        view = GraphView(width=100, height=50).set_scene(graph().add_points([(5, 5)]).build())
        surface = RecordingSurface(400, 200)
        with self.assertLogs("graphview.view", level="DEBUG") as captured:
            view.draw(surface)
        self.assertIn("400x200", captured.output[0])
        self.assertEqual(surface.of_type(StrokeRectCommand)[0], StrokeRectCommand(0, 0, 400, 200, (0, 0, 0, 255), 1))
        circle = surface.of_type(CircleCommand)[0]
        self.assertEqual((circle.cx, circle.cy), (300, 50))

    def test_to_rgba_matches_view_size(self) -> None:
        view = GraphView(width=64, height=32).set_scene(SceneBuilder().build())
        self.assertEqual(view.to_rgba().shape, (32, 64, 4))
        view.resize(16, 48)
        self.assertEqual(view.to_rgba().shape, (48, 16, 4))


class ApiTests(unittest.TestCase):
    def test_save_png(self) -> None:
        scene = graph().add_function(lambda x: x * x).build()
        with tempfile.TemporaryDirectory() as tmp:
            out = save_png(scene, Path(tmp) / "parabola.png", 120, 90)
            self.assertTrue(out.exists())
            with Image.open(out) as image:
                self.assertEqual(image.size, (120, 90))
                self.assertEqual(image.mode, "RGBA")

    def test_dpi_selects_density_style(self) -> None:
        scene = graph().build()
        via_dpi = render_to_rgba(scene, 80, 60, dpi=480)
        via_style = render_to_rgba(scene, 80, 60, style=style_for_density(480))
        self.assertTrue((via_dpi == via_style).all())

    def test_style_and_dpi_are_exclusive(self) -> None:
        with self.assertRaises(ValueError):
            render_to_rgba(graph().build(), 10, 10, style=style_for_density(160), dpi=160)


if __name__ == "__main__":
    unittest.main()
