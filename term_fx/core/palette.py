"""ANSI 8-colour reference palette and nearest-colour matching.

Two tables share the same reference RGB values and differ only in their
SGR code range: ANSI_FG uses 30-37, ANSI_BG uses 40-47. Both are stored
in ascending code order, and nearest_ansi() takes the first minimum, so an
exact distance tie always resolves to the lowest code.
"""

import math
from collections.abc import Sequence

import numpy as np

from term_fx.core.convert import parse_rgb
from term_fx.core.types import AnsiPaletteEntry, RGBColor

# name -> reference RGB, in SGR order (offset 0-7)
_REFERENCE: tuple[tuple[str, tuple[int, int, int]], ...] = (
    ('black', (0, 0, 0)),
    ('red', (205, 0, 0)),
    ('green', (0, 205, 0)),
    ('yellow', (205, 205, 0)),
    ('blue', (0, 0, 238)),
    ('magenta', (205, 0, 205)),
    ('cyan', (0, 205, 205)),
    ('white', (230, 230, 230)),
)


def _build_table(base: int) -> tuple[AnsiPaletteEntry, ...]:
    return tuple(
        AnsiPaletteEntry(code=base + offset, name=name, rgb=RGBColor(*rgb))
        for offset, (name, rgb) in enumerate(_REFERENCE)
    )


ANSI_FG: tuple[AnsiPaletteEntry, ...] = _build_table(30)
ANSI_BG: tuple[AnsiPaletteEntry, ...] = _build_table(40)


def _reference_matrix(table: Sequence[AnsiPaletteEntry]) -> np.ndarray:
    # int64 so (0 - 200) never wraps the way uint8 would
    matrix = np.array([e.rgb.as_tuple() for e in table], dtype=np.int64)
    matrix.flags.writeable = False
    return matrix


_MATRICES: dict[int, np.ndarray] = {
    id(ANSI_FG): _reference_matrix(ANSI_FG),
    id(ANSI_BG): _reference_matrix(ANSI_BG),
}


def rgb_distance(a: RGBColor | str | Sequence[int], b: RGBColor | str | Sequence[int]) -> float:
    """Euclidean distance between two colours in RGB space."""
    ra, rb = parse_rgb(a), parse_rgb(b)
    return math.sqrt((ra.r - rb.r) ** 2 + (ra.g - rb.g) ** 2 + (ra.b - rb.b) ** 2)


def nearest_ansi(rgb: RGBColor | str | Sequence[int], table: Sequence[AnsiPaletteEntry] = ANSI_FG) -> int:
    """Return the SGR code of the table entry closest to rgb."""
    colour = parse_rgb(rgb)
    ordered = sorted(table, key=lambda e: e.code)
    matrix = _MATRICES.get(id(table))
    if matrix is None or list(table) != ordered:
        matrix = _reference_matrix(ordered)
    target = np.array(colour.as_tuple(), dtype=np.int64)
    distances = np.sum((matrix - target) ** 2, axis=1)
    # argmin returns the first minimum -> lowest code on ties
    return ordered[int(np.argmin(distances))].code


def nearest_ansi_fg(rgb: RGBColor | str | Sequence[int]) -> int:
    return nearest_ansi(rgb, ANSI_FG)


def nearest_ansi_bg(rgb: RGBColor | str | Sequence[int]) -> int:
    return nearest_ansi(rgb, ANSI_BG)


def entry_for_code(code: int) -> AnsiPaletteEntry | None:
    """Look up a foreground or background entry by its SGR code."""
    for entry in ANSI_FG + ANSI_BG:
        if entry.code == code:
            return entry
    return None
