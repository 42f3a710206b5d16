"""SGR escape-sequence assembly.

encode_style() turns a StyleSpec plus a CapabilityTier into one control
sequence. Codes are joined with ';' in a fixed order:

    foreground, background, blink, bold, italic, underline, strikethrough, overline

Colour encoding by tier:

    TRUE_COLOR   38;2;R;G;B   /  48;2;R;G;B
    INDEXED_256  38;5;N       /  48;5;N        (N from the 6x6x6 cube)
    ANSI_16      30-37        /  40-47         (nearest basic colour)

Degraded tiers report the fallback once per call through a notice callable
(stderr by default). The returned sequence never depends on the notice.
"""

import sys
from collections.abc import Callable, Sequence

from term_fx.core.convert import parse_rgb
from term_fx.core.cube import rgb_to_8bit
from term_fx.core.palette import nearest_ansi_bg, nearest_ansi_fg
from term_fx.core.types import CapabilityTier, RGBColor, StyleSpec

ESC = '\x1b'
CSI = ESC + '['
RESET = CSI + '0m'

# (StyleSpec field, SGR code), in emission order
ATTRIBUTE_CODES: tuple[tuple[str, int], ...] = (
    ('blink', 5),
    ('bold', 1),
    ('italic', 3),
    ('underline', 4),
    ('strikethrough', 9),
    ('overline', 53),
)

FALLBACK_NOTICES = {
    CapabilityTier.INDEXED_256: 'fallback to 256-color palette',
    CapabilityTier.ANSI_16: 'fallback to 16-color ANSI palette',
}

Notice = Callable[[str], None]


def stderr_notice(message: str) -> None:
    print(f'term-fx: {message}', file=sys.stderr)


def _colour_codes(rgb: RGBColor, tier: CapabilityTier, background: bool) -> str:
    if tier is CapabilityTier.TRUE_COLOR:
        prefix = 48 if background else 38
        return f'{prefix};2;{rgb.r};{rgb.g};{rgb.b}'
    if tier is CapabilityTier.INDEXED_256:
        prefix = 48 if background else 38
        return f'{prefix};5;{rgb_to_8bit(rgb)}'
    if tier is CapabilityTier.ANSI_16:
        return str(nearest_ansi_bg(rgb) if background else nearest_ansi_fg(rgb))
    raise ValueError(f'Unknown capability tier: {tier!r}')


def encode_style(spec: StyleSpec, tier: CapabilityTier, notice: Notice | None = None) -> str:
    """Build the escape sequence for spec on a terminal of the given tier."""
    if not isinstance(tier, CapabilityTier):
        raise ValueError(f'Unknown capability tier: {tier!r}')

    codes: list[str] = []
    if spec.fg is not None:
        codes.append(_colour_codes(spec.fg, tier, background=False))
    if spec.bg is not None:
        codes.append(_colour_codes(spec.bg, tier, background=True))

    if codes and tier in FALLBACK_NOTICES:
        (notice or stderr_notice)(FALLBACK_NOTICES[tier])

    for field_name, code in ATTRIBUTE_CODES:
        if getattr(spec, field_name):
            codes.append(str(code))

    return f'{CSI}{";".join(codes)}m'


def _optional_rgb(value: RGBColor | str | Sequence[int] | None) -> RGBColor | None:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return parse_rgb(value)


def set_fx(
    fg: RGBColor | str | Sequence[int] | None = None,
    bg: RGBColor | str | Sequence[int] | None = None,
    blink: bool = False,
    bold: bool = False,
    italic: bool = False,
    underline: bool = False,
    strikethrough: bool = False,
    overline: bool = False,
    *,
    tier: CapabilityTier = CapabilityTier.TRUE_COLOR,
    notice: Notice | None = None,
) -> str:
    """Return the escape sequence applying the given colours and attributes.

    Colours may be RGBColor values, "r,g,b" strings or 3-tuples; None or an
    empty string means "leave unset". Raises InvalidColorFormat for anything
    that does not parse.
    """
    spec = StyleSpec(
        fg=_optional_rgb(fg),
        bg=_optional_rgb(bg),
        blink=bool(blink),
        bold=bool(bold),
        italic=bool(italic),
        underline=bool(underline),
        strikethrough=bool(strikethrough),
        overline=bool(overline),
    )
    return encode_style(spec, tier, notice=notice)


def clear_fx() -> str:
    """The fixed reset sequence, ESC[0m."""
    return RESET
