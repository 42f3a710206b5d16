"""term-fx — terminal colours and text effects from RGB and HSV values.

Usage: term-fx <command> [options]

Commands are auto-discovered from term_fx/commands/.
Each command module's docstring is its documentation.
Run `term-fx help <command>` for full module docs.

Colour tier (24-bit, 256-colour cube, 16-colour ANSI):
  --tier on the command line wins, then TERM_FX_TIER, then
  COLORTERM=truecolor|24bit, then `tput colors`.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, term-fx looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.

Exit status:
  0 success, 1 invalid hue or usage error, 2 invalid saturation/value,
  3 malformed R,G,B colour.
"""

import argparse
import importlib
import sys

from term_fx import registry
from term_fx.core.env import load_env
from term_fx.core.errors import InvalidColorFormat, InvalidHue, InvalidSaturationOrValue, TermFxError

EXIT_USAGE = 1
EXIT_BAD_HUE = 1
EXIT_BAD_SATURATION_OR_VALUE = 2
EXIT_BAD_COLOR = 3


def _load_command_module(name: str) -> object:
    """Load the raw module for a command (for docstring access)."""
    return importlib.import_module(f'term_fx.commands.{name}')


def _short_help(name: str, fallback: str) -> str:
    doc = (_load_command_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else fallback


def _build_parser() -> argparse.ArgumentParser:
    commands = registry.all_commands()

    epilog = (
        'Examples:\n'
        '  term-fx hsv 120\n'
        '  term-fx hsv 200 50 80 --json\n'
        '  term-fx set --fg 255,0,0 --bold --text "red and bold"\n'
        '  term-fx set --fg 135,206,235 --bg 0,0,0 --tier 256\n'
        '  term-fx clear\n'
        '  term-fx quantize 135,206,235\n'
        '  term-fx palette --tier 16\n'
        '  term-fx wheel --steps 24\n'
        '  term-fx preview logo.png --width 60\n'
        '  term-fx help set\n'
    )
    parser = argparse.ArgumentParser(
        prog='term-fx',
        description='Terminal colours and text effects from RGB and HSV values.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    # Global --env-file option before subcommand
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='command', help='Command to run')

    # Auto-register each command as a subcommand using module docstring
    for name, cmd in sorted(commands.items()):
        p = sub.add_parser(name, help=_short_help(name, cmd.help))
        cmd.configure(p)

    # `help` subcommand prints the full module docstring for a command
    help_parser = sub.add_parser('help', help='Print full docs for a command')
    help_parser.add_argument('topic', nargs='?', help='Command name')

    return parser


def _print_help(topic: str | None) -> int:
    """Print full module docstring for a command."""
    commands = registry.all_commands()

    if topic is None:
        print('Available commands:\n')
        for name, cmd in sorted(commands.items()):
            print(f'  {name:<10} {_short_help(name, cmd.help)}')
        print('\nRun: term-fx help <command> for full docs.')
        return 0

    if topic not in commands:
        print(f'Unknown command: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(commands))}', file=sys.stderr)
        return EXIT_USAGE

    doc = (_load_command_module(topic).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {topic!r})')
        return 0
    print(doc)
    return 0


def _exit_code(error: TermFxError) -> int:
    if isinstance(error, InvalidHue):
        return EXIT_BAD_HUE
    if isinstance(error, InvalidSaturationOrValue):
        return EXIT_BAD_SATURATION_OR_VALUE
    if isinstance(error, InvalidColorFormat):
        return EXIT_BAD_COLOR
    return EXIT_USAGE


def run(argv: list[str] | None = None) -> int:
    """Parse argv, run the command, return the exit status."""
    parser = _build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        # argparse exits 2 on bad arguments, which would read as a bad saturation/value
        return 0 if e.code in (0, None) else EXIT_USAGE

    # Load .env before anything else, OS env vars always win
    env_path = load_env(env_file=getattr(args, 'env_file', None))
    if env_path:
        print(f'term-fx: loaded {env_path}', file=sys.stderr)

    if not args.command:
        parser.print_help()
        return EXIT_USAGE

    if args.command == 'help':
        return _print_help(getattr(args, 'topic', None))

    cmd = registry.get(args.command)
    try:
        return cmd.execute(args)
    except TermFxError as e:
        print(f'term-fx: error: {e}', file=sys.stderr)
        return _exit_code(e)
    except ValueError as e:
        # e.g. a bad TERM_FX_TIER value
        print(f'term-fx: error: {e}', file=sys.stderr)
        return EXIT_USAGE


def main() -> None:
    sys.exit(run())


if __name__ == '__main__':
    main()
