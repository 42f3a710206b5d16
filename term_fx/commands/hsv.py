"""Convert an HSV colour to "r,g,b".

Hue is in degrees [0, 360). Saturation and value are percentages
[0, 100] and default to 100. Prints the colour as R,G,B, the format
every other command accepts for --fg / --bg.

Exit status 1 for an invalid hue, 2 for invalid saturation or value.

Example:
    term-fx hsv 0            # 255,0,0
    term-fx hsv 120          # 0,255,0
    term-fx hsv 200 50 80    # 102,170,204
    term-fx hsv 200 50 80 --json
    term-fx set --fg "$(term-fx hsv 60)" --text "yellow"
"""

import json

from term_fx.core.convert import hsv_to_rgb
from term_fx.core.types import Command

command = Command(name='hsv', help='Convert HSV (degrees, percent, percent) to R,G,B.')


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('hue', type=int, help='Hue in degrees, 0-359')
    parser.add_argument('saturation', type=int, nargs='?', default=100, help='Saturation percent (default 100)')
    parser.add_argument('value', type=int, nargs='?', default=100, help='Value percent (default 100)')
    parser.add_argument('-j', '--json', action='store_true', help='Output JSON instead of R,G,B')


@command.run
def run(args) -> int:
    rgb = hsv_to_rgb(args.hue, args.saturation, args.value)
    if args.json:
        print(json.dumps({'h': args.hue, 's': args.saturation, 'v': args.value, 'rgb': list(rgb.as_tuple())}))
    else:
        print(rgb)
    return 0
