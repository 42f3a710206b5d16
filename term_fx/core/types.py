"""Shared types for term-fx: RGBColor, HSVColor, AnsiPaletteEntry, StyleSpec, CapabilityTier, Command."""

from __future__ import annotations

import argparse
import enum
import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from term_fx.core.errors import InvalidColorFormat

_CHANNEL = re.compile(r'[+-]?[0-9]+')


@dataclass(frozen=True)
class RGBColor:
    """An absolute 24-bit colour. Channels are ints in [0, 255]."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            # bool is an int subclass but never a colour channel
            if isinstance(channel, bool) or not isinstance(channel, int):
                raise InvalidColorFormat(f'RGB channel must be an integer, got {channel!r}')
            if not 0 <= channel <= 255:
                raise InvalidColorFormat(f'RGB channel out of range 0-255: {channel}')

    @classmethod
    def parse(cls, text: str) -> RGBColor:
        """Parse "r,g,b". Integer channels outside 0-255 are clamped."""
        parts = [p.strip() for p in str(text).split(',')]
        if len(parts) != 3 or not all(parts):
            raise InvalidColorFormat(f'expected "R,G,B", got {text!r}')
        # int() alone would also take "1_0" and non-ASCII digits
        if not all(_CHANNEL.fullmatch(p) for p in parts):
            raise InvalidColorFormat(f'expected integer channels in "R,G,B", got {text!r}')
        values = [int(p) for p in parts]
        r, g, b = (min(255, max(0, v)) for v in values)
        return cls(r, g, b)

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def __str__(self) -> str:
        return f'{self.r},{self.g},{self.b}'


@dataclass(frozen=True)
class HSVColor:
    """Hue in degrees [0, 360), saturation and value as integer percentages."""

    h: int
    s: int = 100
    v: int = 100

    def __post_init__(self) -> None:
        from term_fx.core.convert import validate_hsv

        validate_hsv(self.h, self.s, self.v)

    def to_rgb(self) -> RGBColor:
        from term_fx.core.convert import hsv_to_rgb

        return hsv_to_rgb(self.h, self.s, self.v)


@dataclass(frozen=True)
class AnsiPaletteEntry:
    """One of the eight basic ANSI colours with its SGR code."""

    code: int
    name: str
    rgb: RGBColor


@dataclass(frozen=True)
class StyleSpec:
    """What to apply: optional colours plus six independent attributes."""

    fg: RGBColor | None = None
    bg: RGBColor | None = None
    blink: bool = False
    bold: bool = False
    italic: bool = False
    underline: bool = False
    strikethrough: bool = False
    overline: bool = False


class CapabilityTier(enum.Enum):
    """Colour depth a terminal supports. Resolved by the caller, never inside the encoder."""

    TRUE_COLOR = 'truecolor'
    INDEXED_256 = '256'
    ANSI_16 = '16'

    @classmethod
    def from_name(cls, name: str) -> CapabilityTier:
        """Resolve a tier from user text (TERM_FX_TIER, --tier)."""
        key = name.strip().lower()
        aliases = {
            'truecolor': cls.TRUE_COLOR,
            '24bit': cls.TRUE_COLOR,
            'true': cls.TRUE_COLOR,
            '256': cls.INDEXED_256,
            '8bit': cls.INDEXED_256,
            '16': cls.ANSI_16,
            'ansi': cls.ANSI_16,
        }
        if key not in aliases:
            raise ValueError(f'Unknown colour tier: {name!r}. Use one of: truecolor, 256, 16')
        return aliases[key]

    @classmethod
    def from_color_count(cls, count: int | None) -> CapabilityTier:
        """Map a terminal colour count (as reported by `tput colors`) to a tier."""
        if count is None:
            return cls.ANSI_16
        if count >= 1 << 24:
            return cls.TRUE_COLOR
        if count >= 256:
            return cls.INDEXED_256
        return cls.ANSI_16


class Command:
    """A self-registering CLI command.

    Usage in a command module:

        command = Command(name='hsv', help='Convert HSV to RGB')

        @command.arguments
        def arguments(parser):
            parser.add_argument('hue', type=int)

        @command.run
        def run(args):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._args_fn: Callable | None = None
        self._run_fn: Callable | None = None

    def arguments(self, fn: Callable) -> Callable:
        """Decorator to register the argument setup function."""
        self._args_fn = fn
        return fn

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def configure(self, parser: argparse.ArgumentParser) -> None:
        if self._args_fn is not None:
            self._args_fn(parser)

    def execute(self, args: Any) -> int:
        """Execute the command's run function. Returns the exit status."""
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        status = self._run_fn(args)
        return 0 if status is None else int(status)
