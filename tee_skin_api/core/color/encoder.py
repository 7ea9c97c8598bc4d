"""
TW Color Code Encoder
=====================

Packs colors into the 32-bit TW color code used by the rendering engine.
Byte layout, most to least significant: alpha, red, green, blue (AARRGGBB).
"""

import math
from typing import Union

from tee_skin_api.models.schemas import CanonicalColor

Number = Union[int, float]


def _to_byte(value: Number) -> int:
    """Clamp to 0-255 and round half up."""
    clamped = max(0.0, min(255.0, float(value)))
    return int(math.floor(clamped + 0.5))


def rgba_to_tw_code(r: Number, g: Number, b: Number, a: Number = 1.0) -> int:
    """
    Pack RGBA components into an unsigned AARRGGBB integer.

    Args:
        r: Red channel, 0-255
        g: Green channel, 0-255
        b: Blue channel, 0-255
        a: Alpha, 0-1

    Returns:
        TW color code in the range 0..0xFFFFFFFF
    """
    alpha_byte = _to_byte(a * 255)
    red_byte = _to_byte(r)
    green_byte = _to_byte(g)
    blue_byte = _to_byte(b)

    return (alpha_byte << 24) | (red_byte << 16) | (green_byte << 8) | blue_byte


def encode_color(color: CanonicalColor) -> int:
    """Pack a parsed color into its TW color code."""
    return rgba_to_tw_code(color.r, color.g, color.b, color.a)
