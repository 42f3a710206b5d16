"""Quantize 24-bit RGB onto the 6x6x6 colour cube of the 256-colour palette.

Each channel maps to a level 0-5 with truncating integer division
(c * 5 // 255), then index = 16 + 36*r + 6*g + b, always 16-231.
Lossy and many-to-one; there is no inverse.
"""

from collections.abc import Sequence

from term_fx.core.convert import parse_rgb
from term_fx.core.types import RGBColor

CUBE_BASE = 16
CUBE_LEVELS = 6


def _level(channel: int) -> int:
    return channel * (CUBE_LEVELS - 1) // 255


def rgb_to_8bit(rgb: RGBColor | str | Sequence[int]) -> int:
    """Return the 256-colour palette index for rgb."""
    colour = parse_rgb(rgb)
    return CUBE_BASE + 36 * _level(colour.r) + 6 * _level(colour.g) + _level(colour.b)
