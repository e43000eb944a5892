from __future__ import annotations

import numpy as np

from graphview.colors import Color


def new_canvas(width: int, height: int, color: Color = (255, 255, 255, 255)) -> np.ndarray:
    if width <= 0 or height <= 0:
        raise ValueError("canvas width/height must be > 0")
    canvas = np.empty((height, width, 4), dtype=np.uint8)
    canvas[:, :] = np.asarray(color, dtype=np.uint8)
    return canvas


def fill_canvas(dst: np.ndarray, color: Color) -> None:
    if color[3] >= 255:
        dst[:, :] = np.asarray(color, dtype=np.uint8)
        return
    a = color[3] / 255.0
    inv = 1.0 - a
    dst[:, :, :3] = (np.asarray(color[0:3], dtype=np.float32) * a + dst[:, :, :3].astype(np.float32) * inv).astype(np.uint8)
    dst[:, :, 3] = 255


def draw_pixel(dst: np.ndarray, x: int, y: int, color: Color) -> None:
    if y < 0 or y >= dst.shape[0] or x < 0 or x >= dst.shape[1]:
        return
    a = color[3] / 255.0
    inv = 1.0 - a
    current = dst[y, x, :3].astype(np.float32)
    dst[y, x, 0:3] = (np.asarray(color[0:3], dtype=np.float32) * a + current * inv).astype(np.uint8)
    dst[y, x, 3] = 255


def draw_hline(dst: np.ndarray, x0: int, x1: int, y: int, color: Color) -> None:
    if y < 0 or y >= dst.shape[0]:
        return
    xa = max(0, min(x0, x1))
    xb = min(dst.shape[1] - 1, max(x0, x1))
    if xa > xb:
        return
    segment = dst[y, xa : xb + 1]
    a = color[3] / 255.0
    inv = 1.0 - a
    segment[:, :3] = (np.asarray(color[0:3], dtype=np.float32) * a + segment[:, :3].astype(np.float32) * inv).astype(np.uint8)
    segment[:, 3] = 255


def draw_vline(dst: np.ndarray, x: int, y0: int, y1: int, color: Color) -> None:
    if x < 0 or x >= dst.shape[1]:
        return
    ya = max(0, min(y0, y1))
    yb = min(dst.shape[0] - 1, max(y0, y1))
    if ya > yb:
        return
    segment = dst[ya : yb + 1, x]
    a = color[3] / 255.0
    inv = 1.0 - a
    segment[:, :3] = (np.asarray(color[0:3], dtype=np.float32) * a + segment[:, :3].astype(np.float32) * inv).astype(np.uint8)
    segment[:, 3] = 255


def draw_rect_outline(dst: np.ndarray, x0: int, y0: int, x1: int, y1: int, color: Color, width: int = 1) -> None:
    # edges at x1/y1 fall outside a full-canvas rect; pull them onto the last pixel
    right = min(max(x0, x1), dst.shape[1] - 1)
    bottom = min(max(y0, y1), dst.shape[0] - 1)
    left = max(0, min(x0, x1))
    top = max(0, min(y0, y1))
    for i in range(max(1, width)):
        draw_hline(dst, left, right, top + i, color)
        draw_hline(dst, left, right, bottom - i, color)
        draw_vline(dst, left + i, top, bottom, color)
        draw_vline(dst, right - i, top, bottom, color)
