from .canvas import draw_hline, draw_pixel, draw_rect_outline, draw_vline, fill_canvas, new_canvas
from .draw_circles import fill_circle, stroke_circle
from .draw_lines import draw_line_segment, draw_polyline
from .draw_text import draw_text, text_size
from .surface import RasterSurface

__all__ = [
    "RasterSurface",
    "draw_hline",
    "draw_line_segment",
    "draw_pixel",
    "draw_polyline",
    "draw_rect_outline",
    "draw_text",
    "draw_vline",
    "fill_canvas",
    "fill_circle",
    "new_canvas",
    "stroke_circle",
    "text_size",
]
