from __future__ import annotations

import argparse
import logging
import math
from pathlib import Path

from graphview import AxisLabel, Circle, Scene, graph, save_png
from graphview.colors import BLUE, DARK_GRAY, GREEN, LIGHT_GRAY, RED


WEIGHTS = [
    (1, 178), (4, 179), (7, 179), (10, 180), (13, 181), (16, 181),
    (19, 182), (22, 183), (25, 183), (28, 184), (31, 185),
]


def functions_scene() -> Scene:
    return (
        graph()
        .set_world_coordinates(-5, 5, -2, 20)
        .set_axes(0, 0)
        .set_x_ticks(-4, -2, 2, 4)
        .set_y_ticks(5, 10, 15)
        .add_function(lambda x: x * x, RED)
        .add_function(lambda x: 1 / x, BLUE)
        .add_function(math.exp)
        .build()
    )


def weights_scene() -> Scene:
    return (
        graph()
        .set_world_coordinates(-2, 33, 175, 187)
        .set_axes(0, 176)
        .set_x_labels([AxisLabel(7, "wk 1"), AxisLabel(14, "wk 2"), AxisLabel(21, "wk 3"), AxisLabel(28, "wk 4")])
        .set_y_ticks(178, 180, 182, 184, 186)
        .set_point_color(RED)
        .add_line_graph(WEIGHTS)
        .add_points(WEIGHTS)
        .build()
    )


def circles_scene() -> Scene:
    return (
        graph()
        .set_background_color(LIGHT_GRAY)
        .set_axes_color(DARK_GRAY)
        .set_circle_color(GREEN)
        .add_circle(Circle(0, 0, 5))
        .add_circle(Circle(3, 3, 2), BLUE)
        .add_points([(0, 0), (3, 3)])
        .build()
    )


SCENES = {
    "functions": functions_scene,
    "weights": weights_scene,
    "circles": circles_scene,
}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Render the graphview gallery to PNG files.")
    parser.add_argument("--out", type=Path, default=Path("gallery"))
    parser.add_argument("--width", type=int, default=640)
    parser.add_argument("--height", type=int, default=480)
    parser.add_argument("--dpi", type=int, default=240)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    args.out.mkdir(parents=True, exist_ok=True)
    for name, build in SCENES.items():
        path = save_png(build(), args.out / f"{name}.png", args.width, args.height, dpi=args.dpi)
        logging.info("wrote %s", path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
