"""List the 8 ANSI reference colours with their foreground and background codes.

These are the targets the 16-colour fallback snaps to. Each row shows the
foreground code (30-37), background code (40-47), name, reference R,G,B,
the nearest 256-colour cube index and a swatch rendered at the current tier.

Example:
    term-fx palette
    term-fx palette --tier 16
    term-fx palette --json
"""

import json

from term_fx.commands._common import add_tier_argument, fallback_notice, resolve_tier, swatch
from term_fx.core.cube import rgb_to_8bit
from term_fx.core.palette import ANSI_BG, ANSI_FG
from term_fx.core.types import Command

command = Command(name='palette', help='List the 8 ANSI reference colours and their codes.')


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('-j', '--json', action='store_true', help='Output JSON instead of a table')
    add_tier_argument(parser)


@command.run
def run(args) -> int:
    if args.json:
        rows = [
            {
                'name': fg.name,
                'fg': fg.code,
                'bg': bg.code,
                'rgb': list(fg.rgb.as_tuple()),
                'cube': rgb_to_8bit(fg.rgb),
            }
            for fg, bg in zip(ANSI_FG, ANSI_BG)
        ]
        print(json.dumps(rows, indent=2))
        return 0

    tier = resolve_tier(args)
    fallback_notice(tier)
    print(f'{"fg":>3} {"bg":>3}  {"name":<8} {"rgb":<12} {"cube":>4}')
    for fg, bg in zip(ANSI_FG, ANSI_BG):
        row = f'{fg.code:>3} {bg.code:>3}  {fg.name:<8} {str(fg.rgb):<12} {rgb_to_8bit(fg.rgb):>4}'
        print(swatch(fg.rgb, tier, label=row))
    return 0
