"""Helpers shared by command modules: --tier handling and swatch output."""

import argparse

from term_fx.core.encoder import FALLBACK_NOTICES, clear_fx, set_fx, stderr_notice
from term_fx.core.env import color_disabled, detect_tier
from term_fx.core.types import CapabilityTier, RGBColor


def tier_type(value: str) -> CapabilityTier:
    """argparse type for --tier. Bad names become a usage error with the list of tiers."""
    try:
        return CapabilityTier.from_name(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def add_tier_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        '-t',
        '--tier',
        type=tier_type,
        default=None,
        metavar='TIER',
        help='Colour tier: truecolor, 256 or 16 (default: detect from TERM_FX_TIER, COLORTERM, tput)',
    )


def resolve_tier(args: argparse.Namespace) -> CapabilityTier:
    tier = getattr(args, 'tier', None)
    return tier if tier is not None else detect_tier()


def swatch(rgb: RGBColor, tier: CapabilityTier, label: str = '', width: int = 4) -> str:
    """A block of background colour followed by an optional label."""
    if color_disabled():
        return f'{"#" * width} {label}'.rstrip()
    block = set_fx(bg=rgb, tier=tier, notice=silent_notice) + ' ' * width + clear_fx()
    return f'{block} {label}'.rstrip()


def fallback_notice(tier: CapabilityTier) -> None:
    """Report a degraded tier once per command rather than once per swatch."""
    if tier in FALLBACK_NOTICES:
        stderr_notice(FALLBACK_NOTICES[tier])


def silent_notice(_message: str) -> None:
    return None
