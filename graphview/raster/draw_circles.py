from __future__ import annotations

import math

import numpy as np

from graphview.colors import Color
from graphview.raster.canvas import draw_hline


def fill_circle(dst: np.ndarray, cx: int, cy: int, radius: int, color: Color) -> None:
    if radius < 0:
        return
    h = dst.shape[0]
    r2 = radius * radius
    for yy in range(max(0, cy - radius), min(h - 1, cy + radius) + 1):
        dy = yy - cy
        half = int((r2 - dy * dy) ** 0.5)
        draw_hline(dst, cx - half, cx + half, yy, color)


def stroke_circle(dst: np.ndarray, cx: int, cy: int, radius: int, color: Color, width: int = 1) -> None:
    """Stroke a ring centred on the nominal radius.

    A pixel is on the ring when its distance from the centre lies within half
    a pixel of the band ``[inner, inner + width - 1]``. Only canvas rows are
    visited, so the cost does not depend on the radius.
    """

    if radius < 0:
        return
    width = max(1, width)
    inner = max(0, radius - (width - 1) // 2)
    outer = inner + width - 1
    r_in2 = (inner - 0.5) ** 2 if inner > 0 else -1.0
    r_out2 = (outer + 0.5) ** 2
    h = dst.shape[0]
    reach = outer + 1
    for yy in range(max(0, cy - reach), min(h - 1, cy + reach) + 1):
        dy2 = float(yy - cy) ** 2
        if dy2 > r_out2:
            continue
        far = int(math.floor(math.sqrt(r_out2 - dy2)))
        near = int(math.ceil(math.sqrt(r_in2 - dy2))) if r_in2 > dy2 else 0
        if near > far:
            continue
        if near == 0:
            draw_hline(dst, cx - far, cx + far, yy, color)
        else:
            draw_hline(dst, cx - far, cx - near, yy, color)
            draw_hline(dst, cx + near, cx + far, yy, color)
