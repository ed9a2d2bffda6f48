"""Tests for color.py - Packed colors and RGB/HSB conversion."""

from __future__ import annotations

import pytest

from ili_lights.color import (
    cct_ramp,
    color_to_hex,
    hex_to_color,
    hex_to_rgb,
    hsb_to_rgb,
    lerp_color,
    pack_rgb,
    rgb_to_hex,
    rgb_to_hsb,
    unpack_rgb,
)


class TestPacking:
    """Tests for pack_rgb() / unpack_rgb()."""

    def test_pack_red(self):
        assert pack_rgb(255, 0, 0) == 0xFF0000

    def test_pack_mixed(self):
        assert pack_rgb(0x12, 0x34, 0x56) == 0x123456

    def test_unpack(self):
        assert unpack_rgb(0x123456) == (0x12, 0x34, 0x56)

    def test_unpack_ignores_alpha(self):
        """Alpha bits above the low 24 are dropped."""
        assert unpack_rgb(0xFF00FF00) == (0, 255, 0)


class TestHex:
    """Tests for the hex string helpers."""

    def test_hex_to_rgb(self):
        assert hex_to_rgb("#FF8000") == (255, 128, 0)

    def test_hex_without_hash(self):
        assert hex_to_rgb("ff8000") == (255, 128, 0)

    def test_rgb_to_hex_lowercase_padded(self):
        assert rgb_to_hex(1, 2, 255) == "#0102ff"

    def test_color_to_hex(self):
        assert color_to_hex(0xF9E9B7) == "#f9e9b7"

    def test_hex_to_color(self):
        assert hex_to_color("#96C3E2") == 0x96C3E2

    def test_invalid_hex(self):
        with pytest.raises(ValueError):
            hex_to_color("zzzzzz")

    @pytest.mark.parametrize("text", ["ff80001234", "#ff800012", "fff", "#", ""])
    def test_wrong_length_rejected(self, text):
        """Only exactly six hex digits after the optional hash are accepted."""
        with pytest.raises(ValueError):
            hex_to_rgb(text)


class TestRgbToHsb:
    """Tests for rgb_to_hsb() function."""

    def test_pure_red(self):
        assert rgb_to_hsb(255, 0, 0) == (0, 255, 255)

    def test_pure_green(self):
        """Green sits a third of the way round the hue circle (~85)."""
        h, s, b = rgb_to_hsb(0, 255, 0)
        assert abs(h - 85) <= 1
        assert (s, b) == (255, 255)

    def test_pure_blue(self):
        """Blue sits two thirds of the way round (~170)."""
        h, s, b = rgb_to_hsb(0, 0, 255)
        assert abs(h - 170) <= 1
        assert (s, b) == (255, 255)

    def test_white_is_achromatic(self):
        assert rgb_to_hsb(255, 255, 255) == (0, 0, 255)

    def test_black(self):
        """max == 0 gives zero saturation and no division error."""
        assert rgb_to_hsb(0, 0, 0) == (0, 0, 0)

    def test_magenta_wraps_hue(self):
        """Red dominant with blue > green lands in the last sixth (hue near 255)."""
        h, s, b = rgb_to_hsb(255, 0, 128)
        assert 200 < h <= 255
        assert s == 255

    def test_single_precision_truncation(self):
        """Hue 153 exactly in real arithmetic comes out as 152 in single precision."""
        assert rgb_to_hsb(0, 6, 15) == (152, 255, 15)


class TestHsbToRgb:
    """Tests for hsb_to_rgb() function."""

    def test_pure_red(self):
        assert hsb_to_rgb(0, 255, 255) == (255, 0, 0)

    def test_zero_saturation_is_gray(self):
        """Without saturation every hue collapses to the brightness level."""
        for hue in (0, 64, 127, 200, 255):
            assert hsb_to_rgb(hue, 0, 255) == (255, 255, 255)

    def test_zero_brightness_is_black(self):
        assert hsb_to_rgb(100, 255, 0) == (0, 0, 0)

    def test_top_of_hue_range(self):
        """Hue 255 maps to 359 degrees: last phase, blue just above zero."""
        assert hsb_to_rgb(255, 255, 255) == (255, 0, 4)

    def test_blue_phase(self):
        """Hue 170 maps to 239 degrees, the end of the blue-rising phase."""
        assert hsb_to_rgb(170, 255, 255) == (0, 4, 255)

    def test_hue_past_range_is_white(self):
        assert hsb_to_rgb(400, 255, 255) == (255, 255, 255)


class TestRoundTrip:
    """RGB -> HSB -> RGB truncates at each step."""

    @pytest.mark.parametrize("rgb", [(255, 0, 0), (255, 255, 255), (0, 0, 0)])
    def test_close_for_red_white_black(self, rgb):
        back = hsb_to_rgb(*rgb_to_hsb(*rgb))
        for original, restored in zip(rgb, back):
            assert abs(original - restored) <= 2

    def test_lossy_for_intermediate_hue(self):
        """Orange loses a few steps of green: hue only has 256 levels."""
        back = hsb_to_rgb(*rgb_to_hsb(255, 128, 0))
        assert back != (255, 128, 0)
        assert back == (255, 123, 0)


class TestLerpColor:
    """Tests for lerp_color() function."""

    def test_start(self):
        assert lerp_color(0xF9E9B7, 0xF9F9ED, 0.0) == 0xF9E9B7

    def test_stop(self):
        assert lerp_color(0xF9E9B7, 0xF9F9ED, 1.0) == 0xF9F9ED

    def test_midpoint_rounds_half_up(self):
        """127.5 rounds to 128 on every channel."""
        assert lerp_color(0x000000, 0xFFFFFF, 0.5) == 0x808080

    def test_amount_clamped(self):
        assert lerp_color(0x000000, 0xFFFFFF, 2.0) == 0xFFFFFF
        assert lerp_color(0x000000, 0xFFFFFF, -1.0) == 0x000000

    def test_channels_independent(self):
        assert lerp_color(0xFF0000, 0x0000FF, 0.5) == 0x800080


class TestCctRamp:
    """Tests for cct_ramp() function."""

    def test_covers_range(self):
        assert cct_ramp(255, 3) == [0, 127, 255]

    def test_no_steps(self):
        assert cct_ramp(255, 0) == []
