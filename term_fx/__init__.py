"""term-fx — terminal colours and text effects from RGB and HSV values.

    from term_fx import clear_fx, hsv_to_rgb, set_fx

    red = hsv_to_rgb(0)
    print(set_fx(red, bold=True) + 'This is bold red' + clear_fx())
"""

from term_fx.core.convert import format_rgb, hsv_to_rgb, parse_rgb
from term_fx.core.cube import rgb_to_8bit
from term_fx.core.encoder import clear_fx, encode_style, set_fx
from term_fx.core.env import detect_tier
from term_fx.core.errors import InvalidColor, InvalidColorFormat, InvalidHue, InvalidSaturationOrValue, TermFxError
from term_fx.core.palette import ANSI_BG, ANSI_FG, nearest_ansi
from term_fx.core.types import CapabilityTier, HSVColor, RGBColor, StyleSpec

__all__ = [
    'ANSI_BG',
    'ANSI_FG',
    'CapabilityTier',
    'HSVColor',
    'InvalidColor',
    'InvalidColorFormat',
    'InvalidHue',
    'InvalidSaturationOrValue',
    'RGBColor',
    'StyleSpec',
    'TermFxError',
    'clear_fx',
    'detect_tier',
    'encode_style',
    'format_rgb',
    'hsv_to_rgb',
    'nearest_ansi',
    'parse_rgb',
    'rgb_to_8bit',
    'set_fx',
]
