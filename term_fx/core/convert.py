"""HSV to RGB conversion and RGB parsing.

Saturation and value arrive as integer percentages and are scaled to 0-1
for the standard six-sector HSV formula. All intermediate maths uses
Fraction so a channel that lands exactly on .5 rounds the same way on
every platform; the final scale to 0-255 goes through round_half_away().
"""

import math
import operator
from collections.abc import Sequence
from fractions import Fraction

from term_fx.core.errors import InvalidColorFormat, InvalidHue, InvalidSaturationOrValue
from term_fx.core.types import RGBColor


def round_half_away(x: Fraction | float) -> int:
    """Round to the nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    if x < 0:
        return -math.floor(-x + Fraction(1, 2))
    return math.floor(x + Fraction(1, 2))


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_hsv(h: int, s: int = 100, v: int = 100) -> None:
    """Raise InvalidHue / InvalidSaturationOrValue for out-of-range input. Hue is checked first."""
    if not _is_int(h) or h < 0 or h >= 360:
        raise InvalidHue(f'Hue must be an integer between 0 and 359, got {h!r}')
    for name, pct in (('saturation', s), ('value', v)):
        if not _is_int(pct) or pct < 0 or pct > 100:
            raise InvalidSaturationOrValue(
                f'Saturation and value must be integers between 0 and 100, got {name}={pct!r}'
            )


def hsv_to_rgb(h: int, s: int = 100, v: int = 100) -> RGBColor:
    """Convert hue (degrees), saturation and value (percent) to an RGBColor."""
    validate_hsv(h, s, v)

    sf = Fraction(s, 100)
    vf = Fraction(v, 100)

    sector = h // 60
    f = Fraction(h, 60) - sector
    p = vf * (1 - sf)
    q = vf * (1 - f * sf)
    t = vf * (1 - (1 - f) * sf)

    # Standard piecewise assignment by sector of the colour wheel
    sectors = {
        0: (vf, t, p),
        1: (q, vf, p),
        2: (p, vf, t),
        3: (p, q, vf),
        4: (t, p, vf),
        5: (vf, p, q),
    }
    r, g, b = sectors[sector]
    return RGBColor(round_half_away(r * 255), round_half_away(g * 255), round_half_away(b * 255))


def parse_rgb(value: RGBColor | str | Sequence[int]) -> RGBColor:
    """Coerce an RGBColor, "r,g,b" string or 3-sequence of ints into an RGBColor."""
    if isinstance(value, RGBColor):
        return value
    if isinstance(value, str):
        return RGBColor.parse(value)
    try:
        items = list(value)
    except TypeError:
        raise InvalidColorFormat(f'expected "R,G,B" or a 3-tuple, got {value!r}') from None
    if len(items) != 3:
        raise InvalidColorFormat(f'expected 3 channels, got {len(items)}: {value!r}')
    try:
        # operator.index accepts numpy integers but refuses floats
        r, g, b = (operator.index(c) for c in items)
    except TypeError:
        raise InvalidColorFormat(f'expected integer channels, got {value!r}') from None
    return RGBColor(r, g, b)


def format_rgb(rgb: RGBColor | str | Sequence[int]) -> str:
    """Format as "r,g,b", the shape the shell tool printed."""
    return str(parse_rgb(rgb))
