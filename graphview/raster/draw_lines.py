from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from graphview.colors import Color
from graphview.raster.canvas import draw_pixel


def draw_polyline(dst: np.ndarray, xs: Sequence[int], ys: Sequence[int], color: Color, width: int = 1) -> None:
    if len(xs) < 2:
        return
    for i in range(len(xs) - 1):
        draw_line_segment(dst, int(xs[i]), int(ys[i]), int(xs[i + 1]), int(ys[i + 1]), color=color, width=width)


def draw_line_segment(dst: np.ndarray, x0: int, y0: int, x1: int, y1: int, color: Color, width: int = 1) -> None:
    x0, y0, x1, y1 = _clip_far_endpoints(dst, x0, y0, x1, y1)
    dx = abs(x1 - x0)
    sx = 1 if x0 < x1 else -1
    dy = -abs(y1 - y0)
    sy = 1 if y0 < y1 else -1
    err = dx + dy

    while True:
        _draw_square_brush(dst, x0, y0, color=color, width=width)
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy


def _clip_far_endpoints(dst: np.ndarray, x0: int, y0: int, x1: int, y1: int) -> tuple[int, int, int, int]:
    """Shorten a segment so both ends lie within a bounded margin of the canvas.

    Line graph points are not filtered before drawing, so an endpoint can sit
    millions of pixels away; stepping through all of them would stall.
    """

    h, w = dst.shape[0], dst.shape[1]
    lo_x, hi_x = -w, 2 * w
    lo_y, hi_y = -h, 2 * h
    if lo_x <= min(x0, x1) and max(x0, x1) <= hi_x and lo_y <= min(y0, y1) and max(y0, y1) <= hi_y:
        return x0, y0, x1, y1

    # Liang-Barsky against the margin box
    fx0, fy0 = float(x0), float(y0)
    ddx, ddy = float(x1 - x0), float(y1 - y0)
    t0, t1 = 0.0, 1.0
    for p, q in ((-ddx, fx0 - lo_x), (ddx, hi_x - fx0), (-ddy, fy0 - lo_y), (ddy, hi_y - fy0)):
        if p == 0:
            if q < 0:
                return lo_x - 1, lo_y - 1, lo_x - 1, lo_y - 1
            continue
        r = q / p
        if p < 0:
            t0 = max(t0, r)
        else:
            t1 = min(t1, r)
    if t0 > t1:
        return lo_x - 1, lo_y - 1, lo_x - 1, lo_y - 1
    return (
        int(round(fx0 + t0 * ddx)),
        int(round(fy0 + t0 * ddy)),
        int(round(fx0 + t1 * ddx)),
        int(round(fy0 + t1 * ddy)),
    )


def _draw_square_brush(dst: np.ndarray, x: int, y: int, color: Color, width: int) -> None:
    radius = max(0, width // 2)
    for yy in range(y - radius, y + radius + 1):
        for xx in range(x - radius, x + radius + 1):
            draw_pixel(dst, xx, yy, color)
