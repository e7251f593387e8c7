"""Tests for ramp_palette.core.color — hex parsing and RGB transforms."""

import pytest
from ramp_palette.core.color import Color, blend, darken, lighten
from ramp_palette.core.data import PaletteData


class TestFromHex:
    def test_white(self):
        assert Color.from_hex('#ffffff') == Color(255, 255, 255)

    def test_black(self):
        assert Color.from_hex('#000000') == Color(0, 0, 0)

    def test_blue600(self):
        assert Color.from_hex('#2563eb') == Color(37, 99, 235)

    def test_uppercase(self):
        assert Color.from_hex('#FFFFFF') == Color(255, 255, 255)

    def test_short_hex(self):
        assert Color.from_hex('#fff') == Color(255, 255, 255)

    def test_no_hash(self):
        assert Color.from_hex('ff0000') == Color(255, 0, 0)

    def test_invalid_hex_raises(self):
        for bad in ('invalid', '#ff', '#ffffffff', '#gggggg'):
            with pytest.raises(ValueError):
                Color.from_hex(bad)


class TestChannelRange:
    def test_bounds_accepted(self):
        assert Color(0, 255, 128) == (0, 255, 128)

    def test_out_of_range_rejected(self):
        for channels in ((300, 0, 0), (0, -1, 0), (0, 0, 256)):
            with pytest.raises(ValueError):
                Color(*channels)

    def test_non_int_rejected(self):
        with pytest.raises(ValueError):
            Color(1.5, 0, 0)

    def test_store_never_sees_bad_color(self):
        data = PaletteData()
        with pytest.raises(ValueError):
            data.add_color(Color(300, -1, 0))
        assert len(data) == 0


class TestColor:
    def test_hex_property(self):
        assert Color(37, 99, 235).hex == '#2563eb'

    def test_str_upper(self):
        assert str(Color(255, 0, 16)) == '#FF0010'

    def test_to_tuple(self):
        assert Color(1, 2, 3).to_tuple() == (1, 2, 3)

    def test_value_equality(self):
        assert Color(1, 2, 3) == Color(1, 2, 3)
        assert Color(1, 2, 3) != Color(3, 2, 1)


class TestTransforms:
    def test_lighten_clamps(self):
        assert lighten(10)(Color(250, 5, 100)) == Color(255, 15, 110)

    def test_darken_clamps(self):
        assert darken(10)(Color(250, 5, 100)) == Color(240, 0, 90)

    def test_blend_midpoint(self):
        assert blend(0.5)(Color(0, 0, 0), Color(200, 100, 50)) == Color(100, 50, 25)

    def test_blend_endpoints(self):
        a, b = Color(10, 20, 30), Color(200, 100, 50)
        assert blend(0.0)(a, b) == a
        assert blend(1.0)(a, b) == b

    def test_blend_ratio_out_of_range(self):
        with pytest.raises(ValueError):
            blend(1.5)
