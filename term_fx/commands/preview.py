"""Render an image in the terminal with upper-half-block characters.

Each character cell shows two image pixels: the top one as the foreground
colour of '▀' and the bottom one as the background colour. The image is
resized to --width columns (keeping aspect ratio, two pixel rows per line)
and every cell is encoded for the current colour tier, so the same image
degrades to the 256-colour cube or the 8 ANSI colours on older terminals.

With NO_COLOR set, cells fall back to a greyscale character ramp.

Example:
    term-fx preview logo.png
    term-fx preview photo.jpg --width 100 --tier 256
"""

import os
import sys

import numpy as np
from PIL import Image, UnidentifiedImageError

from term_fx.commands._common import add_tier_argument, fallback_notice, resolve_tier, silent_notice
from term_fx.core.encoder import clear_fx, set_fx
from term_fx.core.env import color_disabled
from term_fx.core.types import CapabilityTier, Command

command = Command(name='preview', help='Render an image with half-block characters.')

UPPER_HALF_BLOCK = '▀'
GREY_RAMP = ' .:-=+*#%@'


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('image', help='Path to PNG/JPG/GIF image')
    parser.add_argument('-w', '--width', type=int, default=80, help='Output width in columns (default 80)')
    add_tier_argument(parser)


def _load_pixels(path: str, width: int) -> np.ndarray:
    """Resize to width columns and an even number of pixel rows. Returns an HxWx3 int array."""
    image = Image.open(path).convert('RGB')
    width = max(1, min(width, image.width))
    height = max(2, round(image.height * width / image.width))
    height += height % 2
    image = image.resize((width, height), Image.Resampling.LANCZOS)
    return np.array(image).astype(int)


def render_lines(pixels: np.ndarray, tier: CapabilityTier) -> list[str]:
    """One string per pair of pixel rows, each ending with a reset."""
    lines = []
    for y in range(0, pixels.shape[0] - 1, 2):
        cells = []
        previous = None
        for x in range(pixels.shape[1]):
            top = tuple(int(c) for c in pixels[y, x])
            bottom = tuple(int(c) for c in pixels[y + 1, x])
            sequence = set_fx(fg=top, bg=bottom, tier=tier, notice=silent_notice)
            # Neighbouring cells often share a colour pair
            if sequence != previous:
                cells.append(sequence)
                previous = sequence
            cells.append(UPPER_HALF_BLOCK)
        lines.append(''.join(cells) + clear_fx())
    return lines


def render_plain(pixels: np.ndarray) -> list[str]:
    """Greyscale ramp, one character per pair of pixel rows."""
    grey = pixels.mean(axis=2)
    pairs = (grey[0::2] + grey[1::2]) / 2
    steps = len(GREY_RAMP) - 1
    return [''.join(GREY_RAMP[int(v * steps // 255)] for v in row) for row in pairs]


@command.run
def run(args) -> int:
    if not os.path.isfile(args.image):
        print(f'term-fx: image not found: {args.image}', file=sys.stderr)
        return 1

    try:
        pixels = _load_pixels(args.image, args.width)
    except (UnidentifiedImageError, OSError) as e:
        print(f'term-fx: cannot read image: {e}', file=sys.stderr)
        return 1
    if color_disabled():
        lines = render_plain(pixels)
    else:
        tier = resolve_tier(args)
        fallback_notice(tier)
        lines = render_lines(pixels, tier)
    print('\n'.join(lines))
    return 0
