from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import Any, Mapping


DENSITY_LOW = 120
DENSITY_MEDIUM = 160
DENSITY_HIGH = 240
DENSITY_XHIGH = 320
DENSITY_XXHIGH = 480

DEFAULT_FONT_FAMILY = "DejaVu Sans"


@dataclass(frozen=True)
class RenderStyle:
    """Pixel sizes used when drawing a scene.

    These depend on the display density, not on the scene, so the host
    supplies them (see `style_for_density`).
    """

    point_radius: int = 3
    tick_length: int = 4
    label_offset: int = 3
    text_size: int = 8
    stroke_width: int = 1
    font_family: str = DEFAULT_FONT_FAMILY


# (max dpi, point radius, tick length, label offset, text size, stroke width)
_DENSITY_BUCKETS = (
    (DENSITY_LOW, 3, 3, 3, 7, 1),
    (DENSITY_MEDIUM, 3, 4, 3, 8, 1),
    (DENSITY_HIGH, 4, 7, 5, 15, 1),
    (DENSITY_XHIGH, 6, 8, 5, 20, 2),
    (DENSITY_XXHIGH, 8, 9, 7, 30, 3),
)
_DENSEST = (10, 10, 9, 35, 4)


def style_for_density(dpi: int, *, font_family: str = DEFAULT_FONT_FAMILY) -> RenderStyle:
    if dpi <= 0:
        raise ValueError("dpi must be > 0")
    values = _DENSEST
    for max_dpi, *bucket in _DENSITY_BUCKETS:
        if dpi <= max_dpi:
            values = tuple(bucket)
            break
    point_radius, tick_length, label_offset, text_size, stroke_width = values
    return RenderStyle(
        point_radius=point_radius,
        tick_length=tick_length,
        label_offset=label_offset,
        text_size=text_size,
        stroke_width=stroke_width,
        font_family=font_family,
    )


DEFAULT_STYLE = style_for_density(DENSITY_MEDIUM)


def validate_style_overrides(overrides: Mapping[str, Any] | None = None, *, base: RenderStyle = DEFAULT_STYLE) -> RenderStyle:
    """Merge `overrides` into `base`, rejecting unknown keys and bad values."""

    raw: dict[str, Any] = asdict(base)
    if overrides:
        for key, value in overrides.items():
            if key not in raw:
                raise ValueError(f"Unknown style key: {key}")
            raw[key] = value

    for key in ("point_radius", "tick_length", "text_size", "stroke_width"):
        value = raw[key]
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise ValueError(f"Style `{key}` must be a positive integer")
    label_offset = raw["label_offset"]
    if isinstance(label_offset, bool) or not isinstance(label_offset, int) or label_offset < 0:
        raise ValueError("Style `label_offset` must be a non-negative integer")
    if not isinstance(raw["font_family"], str) or not raw["font_family"].strip():
        raise ValueError("Style `font_family` must be a non-empty string")

    return replace(base, **raw)
