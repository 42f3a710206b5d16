"""Print the escape sequence for a foreground/background colour and text effects.

Colours are R,G,B strings (0-255 each, e.g. from `term-fx hsv`). The
sequence is written without a trailing newline so it can be captured
into a shell variable. Applied effects stay until `term-fx clear`.

With --text the text is wrapped: sequence, text, reset, newline.

On a 256-colour terminal colours snap to the 6x6x6 cube; on a basic
terminal they snap to the nearest of the 8 ANSI colours. Either fallback
prints a notice to stderr; stdout is unaffected.

Codes are emitted in a fixed order: foreground, background, blink, bold,
italic, underline, strikethrough, overline.

Exit status 3 if a colour is not a valid R,G,B string.

Example:
    term-fx set --fg 255,0,0 --bold
    term-fx set --fg 255,255,0 --bg 0,0,238 --underline --text "warning"
    term-fx set --fg 135,206,235 --tier 256
    printf '%s' "$(term-fx set --italic)"
"""

import sys

from term_fx.commands._common import add_tier_argument, resolve_tier
from term_fx.core.encoder import clear_fx, set_fx
from term_fx.core.env import color_disabled
from term_fx.core.types import Command

command = Command(name='set', help='Print the escape sequence for colours and text effects.')

_FLAGS = ('blink', 'bold', 'italic', 'underline', 'strikethrough', 'overline')


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('-f', '--fg', default=None, metavar='R,G,B', help='Foreground colour')
    parser.add_argument('-b', '--bg', default=None, metavar='R,G,B', help='Background colour')
    for flag in _FLAGS:
        parser.add_argument(f'--{flag}', action='store_true', help=f'Enable {flag}')
    parser.add_argument('--text', default=None, help='Wrap TEXT in the sequence and a reset')
    add_tier_argument(parser)


@command.run
def run(args) -> int:
    sequence = set_fx(
        args.fg,
        args.bg,
        *(getattr(args, flag) for flag in _FLAGS),
        tier=resolve_tier(args),
    )
    if args.text is not None:
        if color_disabled():
            print(args.text)
        else:
            print(f'{sequence}{args.text}{clear_fx()}')
        return 0

    if not color_disabled():
        sys.stdout.write(sequence)
    return 0
