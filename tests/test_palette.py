"""Tests for term_fx.core.palette — ANSI reference tables and nearest-colour matching."""

import pytest
from term_fx.core.errors import InvalidColor, InvalidColorFormat
from term_fx.core.palette import (
    ANSI_BG,
    ANSI_FG,
    entry_for_code,
    nearest_ansi,
    nearest_ansi_bg,
    nearest_ansi_fg,
    rgb_distance,
)
from term_fx.core.types import AnsiPaletteEntry, RGBColor


class TestRgbDistance:
    def test_same_colour(self):
        assert rgb_distance((255, 255, 255), (255, 255, 255)) == 0.0

    def test_black_white(self):
        d = rgb_distance((0, 0, 0), (255, 255, 255))
        assert d > 400  # sqrt(3 * 255^2) ≈ 441.7

    def test_symmetry(self):
        a = (100, 50, 200)
        b = (120, 60, 180)
        assert rgb_distance(a, b) == rgb_distance(b, a)

    def test_accepts_strings(self):
        assert rgb_distance('0,0,0', '3,4,0') == 5.0


class TestTables:
    def test_eight_entries_each(self):
        assert len(ANSI_FG) == 8
        assert len(ANSI_BG) == 8

    def test_code_ranges(self):
        assert [e.code for e in ANSI_FG] == list(range(30, 38))
        assert [e.code for e in ANSI_BG] == list(range(40, 48))

    def test_same_reference_colours(self):
        assert [e.rgb for e in ANSI_FG] == [e.rgb for e in ANSI_BG]
        assert [e.name for e in ANSI_FG] == [e.name for e in ANSI_BG]

    def test_reference_values(self):
        by_name = {e.name: e.rgb for e in ANSI_FG}
        assert by_name['red'] == RGBColor(205, 0, 0)
        assert by_name['blue'] == RGBColor(0, 0, 238)
        assert by_name['white'] == RGBColor(230, 230, 230)

    def test_tables_are_immutable(self):
        assert isinstance(ANSI_FG, tuple)
        with pytest.raises(AttributeError):
            ANSI_FG[0].code = 99

    def test_entry_for_code(self):
        assert entry_for_code(33).name == 'yellow'
        assert entry_for_code(46).name == 'cyan'
        assert entry_for_code(99) is None


class TestNearestAnsi:
    def test_exact_black(self):
        assert nearest_ansi((0, 0, 0), ANSI_FG) == 30

    def test_bright_red(self):
        assert nearest_ansi_fg((255, 0, 0)) == 31
        assert nearest_ansi_bg((255, 0, 0)) == 41

    def test_pure_white(self):
        assert nearest_ansi_fg('255,255,255') == 37

    def test_sky_blue(self):
        # closer to white (230,230,230) than to cyan (0,205,205)
        assert nearest_ansi_fg((135, 206, 235)) == 37

    def test_idempotent_on_reference_colours(self):
        for table in (ANSI_FG, ANSI_BG):
            for entry in table:
                assert nearest_ansi(entry.rgb, table) == entry.code

    def test_tie_goes_to_lowest_code(self):
        # (0,0,119) is exactly 119 from both black and blue (0,0,238)
        assert nearest_ansi_fg((0, 0, 119)) == 30
        assert nearest_ansi_bg((0, 0, 119)) == 40

    def test_tie_break_ignores_table_order(self):
        table = (
            AnsiPaletteEntry(91, 'far', RGBColor(0, 0, 10)),
            AnsiPaletteEntry(90, 'near', RGBColor(0, 0, 0)),
        )
        assert nearest_ansi((0, 0, 5), table) == 90

    def test_malformed_input(self):
        with pytest.raises(InvalidColorFormat):
            nearest_ansi('1,2', ANSI_FG)

    def test_invalid_color_alias(self):
        with pytest.raises(InvalidColor):
            nearest_ansi_bg('red')
