from __future__ import annotations

import re
from typing import Any

from graphview.errors import SceneError


Color = tuple[int, int, int, int]

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}([0-9a-fA-F]{2})?$")

TRANSPARENT: Color = (0, 0, 0, 0)
BLACK: Color = (0, 0, 0, 255)
WHITE: Color = (255, 255, 255, 255)
RED: Color = (255, 0, 0, 255)
GREEN: Color = (0, 255, 0, 255)
BLUE: Color = (0, 0, 255, 255)
YELLOW: Color = (255, 255, 0, 255)
CYAN: Color = (0, 255, 255, 255)
MAGENTA: Color = (255, 0, 255, 255)
ORANGE: Color = (255, 165, 0, 255)
GRAY: Color = (136, 136, 136, 255)
LIGHT_GRAY: Color = (204, 204, 204, 255)
DARK_GRAY: Color = (68, 68, 68, 255)


def coerce_color(value: Any) -> Color:
    """Return `value` as an RGBA tuple.

    Accepts RGB or RGBA tuples of integers in 0..255 and `#RRGGBB` /
    `#RRGGBBAA` hex strings.
    """

    if isinstance(value, str):
        if not _HEX_COLOR.match(value):
            raise SceneError(f"color must be a hex color (#RRGGBB or #RRGGBBAA), got {value!r}")
        raw = value[1:]
        channels = [int(raw[i : i + 2], 16) for i in range(0, len(raw), 2)]
        if len(channels) == 3:
            channels.append(255)
        r, g, b, a = channels
        return (r, g, b, a)

    if isinstance(value, (tuple, list)) and len(value) in (3, 4):
        channels = []
        for channel in value:
            if isinstance(channel, bool) or not isinstance(channel, int) or not 0 <= channel <= 255:
                raise SceneError(f"color channels must be integers in 0..255, got {value!r}")
            channels.append(channel)
        if len(channels) == 3:
            channels.append(255)
        r, g, b, a = channels
        return (r, g, b, a)

    raise SceneError(f"unsupported color value: {value!r}")
