"""Print a ramp of hues as colour swatches.

Walks the hue circle in --steps equal steps, converting each hue with the
given saturation and value to R,G,B and rendering it as a background
swatch. Useful for eyeballing how a terminal handles each colour tier.

Example:
    term-fx wheel
    term-fx wheel --steps 36 --saturation 60
    term-fx wheel --tier 16 --labels
"""

from term_fx.commands._common import add_tier_argument, fallback_notice, resolve_tier, swatch
from term_fx.core.convert import hsv_to_rgb, validate_hsv
from term_fx.core.types import Command

command = Command(name='wheel', help='Print a ramp of hue swatches.')


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('-n', '--steps', type=int, default=12, help='Number of hues (default 12)')
    parser.add_argument('-s', '--saturation', type=int, default=100, help='Saturation percent (default 100)')
    parser.add_argument('-v', '--value', type=int, default=100, help='Value percent (default 100)')
    parser.add_argument('-l', '--labels', action='store_true', help='One swatch per line with hue and R,G,B')
    add_tier_argument(parser)


@command.run
def run(args) -> int:
    steps = max(1, min(args.steps, 360))
    validate_hsv(0, args.saturation, args.value)
    tier = resolve_tier(args)
    fallback_notice(tier)

    colours = [(i * 360 // steps, hsv_to_rgb(i * 360 // steps, args.saturation, args.value)) for i in range(steps)]
    if args.labels:
        for hue, rgb in colours:
            print(swatch(rgb, tier, label=f'{hue:>3}° {rgb}'))
    else:
        print(''.join(swatch(rgb, tier, width=2) for _hue, rgb in colours))
    return 0
