"""Tests for term_fx.core.types — value types and tier resolution."""

import dataclasses

import pytest
from term_fx.core.errors import InvalidColorFormat, InvalidHue, InvalidSaturationOrValue
from term_fx.core.types import CapabilityTier, Command, HSVColor, RGBColor, StyleSpec


class TestRGBColor:
    def test_parse(self):
        assert RGBColor.parse('1,2,3') == RGBColor(1, 2, 3)

    def test_parse_whitespace(self):
        assert RGBColor.parse(' 1, 2 ,3 ') == RGBColor(1, 2, 3)

    def test_parse_clamps(self):
        assert RGBColor.parse('300,-4,12') == RGBColor(255, 0, 12)

    def test_parse_signed(self):
        assert RGBColor.parse('+5,-0,7') == RGBColor(5, 0, 7)

    @pytest.mark.parametrize('text', ['1,2', '', '1,2,3,4', 'a,b,c', '1,,3', '1.5,2,3', '1_0,0,0', '\u0661,0,0'])
    def test_parse_malformed(self, text):
        with pytest.raises(InvalidColorFormat):
            RGBColor.parse(text)

    def test_constructor_range_checked(self):
        with pytest.raises(InvalidColorFormat):
            RGBColor(256, 0, 0)
        with pytest.raises(InvalidColorFormat):
            RGBColor(0, -1, 0)

    def test_constructor_rejects_floats(self):
        with pytest.raises(InvalidColorFormat):
            RGBColor(1.0, 0, 0)

    def test_str_and_tuple(self):
        rgb = RGBColor(10, 20, 30)
        assert str(rgb) == '10,20,30'
        assert rgb.as_tuple() == (10, 20, 30)

    def test_frozen(self):
        rgb = RGBColor(1, 2, 3)
        with pytest.raises(dataclasses.FrozenInstanceError):
            rgb.r = 5


class TestHSVColor:
    def test_defaults(self):
        hsv = HSVColor(120)
        assert (hsv.s, hsv.v) == (100, 100)
        assert hsv.to_rgb() == RGBColor(0, 255, 0)

    def test_invalid_hue(self):
        with pytest.raises(InvalidHue):
            HSVColor(360)

    def test_invalid_value(self):
        with pytest.raises(InvalidSaturationOrValue):
            HSVColor(10, 50, 101)


class TestStyleSpec:
    def test_defaults(self):
        spec = StyleSpec()
        assert spec.fg is None and spec.bg is None
        assert not any((spec.blink, spec.bold, spec.italic, spec.underline, spec.strikethrough, spec.overline))


class TestCapabilityTier:
    @pytest.mark.parametrize(
        ('name', 'tier'),
        [
            ('truecolor', CapabilityTier.TRUE_COLOR),
            ('24bit', CapabilityTier.TRUE_COLOR),
            ('256', CapabilityTier.INDEXED_256),
            ('8BIT', CapabilityTier.INDEXED_256),
            ('16', CapabilityTier.ANSI_16),
            (' ansi ', CapabilityTier.ANSI_16),
        ],
    )
    def test_from_name(self, name, tier):
        assert CapabilityTier.from_name(name) is tier

    def test_from_name_unknown(self):
        with pytest.raises(ValueError):
            CapabilityTier.from_name('bogus')

    def test_from_color_count(self):
        assert CapabilityTier.from_color_count(16777216) is CapabilityTier.TRUE_COLOR
        assert CapabilityTier.from_color_count(256) is CapabilityTier.INDEXED_256
        assert CapabilityTier.from_color_count(88) is CapabilityTier.ANSI_16
        assert CapabilityTier.from_color_count(8) is CapabilityTier.ANSI_16
        assert CapabilityTier.from_color_count(None) is CapabilityTier.ANSI_16


class TestCommand:
    def test_execute_returns_status(self):
        cmd = Command(name='demo')

        @cmd.run
        def run(args):
            return 3

        assert cmd.execute(None) == 3

    def test_none_means_success(self):
        cmd = Command(name='demo')
        cmd.run(lambda args: None)
        assert cmd.execute(None) == 0

    def test_missing_run_function(self):
        with pytest.raises(RuntimeError):
            Command(name='empty').execute(None)
