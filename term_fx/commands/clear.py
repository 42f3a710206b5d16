"""Print the reset sequence (ESC[0m) that clears all colours and effects.

Written without a trailing newline, like `set`.

Example:
    term-fx set --fg 255,255,0 && echo "custom style" && term-fx clear
"""

import sys

from term_fx.core.encoder import clear_fx
from term_fx.core.types import Command

command = Command(name='clear', help='Print the reset sequence ESC[0m.')


@command.run
def run(args) -> int:
    sys.stdout.write(clear_fx())
    return 0
