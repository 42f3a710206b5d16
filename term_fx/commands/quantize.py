"""Show how one R,G,B colour degrades on each colour tier.

Prints the 24-bit sequence codes, the 256-colour cube index (levels
c*5//255 per channel, index 16 + 36r + 6g + b) and the nearest ANSI
foreground/background codes by Euclidean distance.

Example:
    term-fx quantize 135,206,235
    term-fx quantize "$(term-fx hsv 300 40)" --json
"""

import json

from term_fx.core.convert import parse_rgb
from term_fx.core.cube import rgb_to_8bit
from term_fx.core.palette import entry_for_code, nearest_ansi_bg, nearest_ansi_fg, rgb_distance
from term_fx.core.types import Command

command = Command(name='quantize', help='Show the cube index and nearest ANSI codes for a colour.')


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('rgb', metavar='R,G,B', help='Colour to quantize')
    parser.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')


@command.run
def run(args) -> int:
    rgb = parse_rgb(args.rgb)
    cube = rgb_to_8bit(rgb)
    fg = nearest_ansi_fg(rgb)
    bg = nearest_ansi_bg(rgb)
    entry = entry_for_code(fg)
    name = entry.name
    distance = round(rgb_distance(rgb, entry.rgb), 1)

    if args.json:
        obj = {
            'rgb': list(rgb.as_tuple()),
            'truecolor': {'fg': f'38;2;{rgb.r};{rgb.g};{rgb.b}', 'bg': f'48;2;{rgb.r};{rgb.g};{rgb.b}'},
            'cube': cube,
            'ansi': {'fg': fg, 'bg': bg, 'name': name, 'distance': distance},
        }
        print(json.dumps(obj, indent=2))
        return 0

    print(f'rgb:       {rgb}')
    print(f'truecolor: 38;2;{rgb.r};{rgb.g};{rgb.b} / 48;2;{rgb.r};{rgb.g};{rgb.b}')
    print(f'256-cube:  {cube}')
    print(f'ansi:      {fg} / {bg} ({name}, Δ={distance})')
    return 0
