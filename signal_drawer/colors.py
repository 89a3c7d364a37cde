from __future__ import annotations

import re


RGBA = tuple[int, int, int, int]

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}([0-9a-fA-F]{2})?$")

BLACK: RGBA = (0, 0, 0, 255)
WHITE: RGBA = (255, 255, 255, 255)
GRAY: RGBA = (128, 128, 128, 255)
GREEN: RGBA = (0, 128, 0, 255)
RED: RGBA = (128, 0, 0, 255)
BLUE: RGBA = (0, 0, 128, 255)
YELLOW: RGBA = (255, 255, 0, 255)


def parse_hex_color(value: str) -> RGBA:
    """Parse `#RRGGBB` or `#RRGGBBAA` into an RGBA tuple."""
    if not isinstance(value, str) or not _HEX_COLOR.match(value):
        raise ValueError(f"color must be a hex color (#RRGGBB or #RRGGBBAA), got {value!r}")
    r = int(value[1:3], 16)
    g = int(value[3:5], 16)
    b = int(value[5:7], 16)
    a = int(value[7:9], 16) if len(value) == 9 else 255
    return (r, g, b, a)


def coerce_color(color: tuple[int, int, int] | tuple[int, int, int, int] | str) -> RGBA:
    if isinstance(color, str):
        return parse_hex_color(color)
    if len(color) == 3:
        r, g, b = color
        return (int(r), int(g), int(b), 255)
    if len(color) == 4:
        r, g, b, a = color
        return (int(r), int(g), int(b), int(a))
    raise ValueError(f"color must have 3 or 4 channels, got {len(color)}")
