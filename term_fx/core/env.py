"""Environment handling for term-fx: .env loading and colour tier detection.

.env load order (first wins):
  1. Existing OS environment variables, never overwritten.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Tier detection order (first wins):
  1. TERM_FX_TIER (truecolor / 24bit / 256 / 8bit / 16 / ansi).
  2. COLORTERM=truecolor or COLORTERM=24bit.
  3. `tput colors` (256 or more -> 256-colour cube, otherwise ANSI).

The encoder never calls any of this; it takes the resolved tier.
"""

import os
import subprocess
from collections.abc import Mapping
from pathlib import Path

from term_fx.core.types import CapabilityTier

TIER_VAR = 'TERM_FX_TIER'
TRUECOLOR_VALUES = ('truecolor', '24bit')


def _find_dotenv(start: Path) -> Path | None:
    """Walk up from start, return first .env found, stop at .git boundary."""
    current = start.resolve()
    while True:
        candidate = current / '.env'
        if candidate.is_file():
            return candidate
        # .git can be a dir (normal clone) or file (worktree)
        if (current / '.git').exists():
            return None
        parent = current.parent
        if parent == current:
            return None
        current = parent


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Parse a .env file into a dict. Handles KEY=value and KEY="value"."""
    result: dict[str, str] = {}
    for line in path.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if not line or line.startswith('#'):
            continue
        if '=' not in line:
            continue
        key, _, raw_value = line.partition('=')
        key = key.strip()
        if key.startswith('export '):
            key = key[len('export ') :].strip()
        value = raw_value.strip().strip('"').strip("'")
        if key:
            result[key] = value
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Load .env into os.environ for keys not already set.

    Returns the path that was loaded, or None if no .env was found/used.
    """
    if env_file:
        path = Path(env_file)
        if not path.is_file():
            return None
    else:
        path = _find_dotenv(Path.cwd())
        if path is None:
            return None

    parsed = _parse_dotenv(path)
    for key, value in parsed.items():
        if key not in os.environ:
            os.environ[key] = value

    return path


def query_color_count() -> int | None:
    """Ask terminfo how many colours the terminal has. None if unknown."""
    try:
        proc = subprocess.run(['tput', 'colors'], capture_output=True, text=True, timeout=5)
    except (FileNotFoundError, subprocess.TimeoutExpired):
        return None
    if proc.returncode != 0:
        return None
    try:
        return int(proc.stdout.strip())
    except ValueError:
        return None


def detect_tier(environ: Mapping[str, str] | None = None, color_count: int | None = None) -> CapabilityTier:
    """Resolve the terminal's colour tier from the environment.

    color_count skips the `tput colors` query when the caller already knows it.
    """
    env = os.environ if environ is None else environ

    forced = env.get(TIER_VAR, '').strip()
    if forced:
        return CapabilityTier.from_name(forced)

    if env.get('COLORTERM', '').strip().lower() in TRUECOLOR_VALUES:
        return CapabilityTier.TRUE_COLOR

    if color_count is None:
        color_count = query_color_count()
    return CapabilityTier.from_color_count(color_count)


def color_disabled(environ: Mapping[str, str] | None = None) -> bool:
    """True when NO_COLOR is set to a non-empty value."""
    env = os.environ if environ is None else environ
    return bool(env.get('NO_COLOR', ''))
