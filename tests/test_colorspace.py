# Copyright (c) 2026 Dualchroma
# SPDX-License-Identifier: MIT

"""Tests for color space conversions (hex ↔ sRGB ↔ LAB ↔ LCH, HSL, contrast)."""

import numpy as np
import pytest

from dualchroma.errors import InvalidColorFormat, PaletteError
from dualchroma.color.colorspace import (
    brighten,
    contrast_ratio,
    darken,
    hex_to_hsl,
    hex_to_lab,
    hex_to_lch,
    hex_to_srgb,
    hsl_to_hex,
    lab_distance,
    lab_distance_matrix,
    lab_to_hex,
    lab_to_lch,
    lch_scale,
    lch_to_lab,
    linear_to_srgb,
    parse_hex,
    relative_luminance,
    rotate_hue,
    saturate,
    srgb_to_hex,
    srgb_to_linear,
)


def _lch_hex(hue):
    """A mid-lightness color with the given LCH hue."""
    return lab_to_hex(lch_to_lab(np.array([60.0, 40.0, hue])))



class TestParseHex:

    def test_uppercases(self):
        assert parse_hex("#ffeb3b") == "#FFEB3B"

    def test_missing_hash(self):
        assert parse_hex("0d47a1") == "#0D47A1"

    def test_short_form_expands(self):
        assert parse_hex("#abc") == "#AABBCC"
        assert parse_hex("fff") == "#FFFFFF"

    def test_surrounding_whitespace(self):
        assert parse_hex("  #123456 ") == "#123456"

    @pytest.mark.parametrize("bad", ["#12345", "#1234567", "zzzzzz", "#GGGGGG", "", "#"])
    def test_malformed_rejected(self, bad):
        with pytest.raises(InvalidColorFormat):
            parse_hex(bad)

    def test_non_string_rejected(self):
        with pytest.raises(InvalidColorFormat):
            parse_hex(0xFFFFFF)

    def test_error_hierarchy(self):
        with pytest.raises(ValueError):
            parse_hex("nope")
        with pytest.raises(PaletteError):
            parse_hex("nope")


class TestSRGB:

    def test_hex_to_srgb(self):
        np.testing.assert_allclose(hex_to_srgb("#FF8000"), [1.0, 128 / 255, 0.0])

    def test_srgb_to_hex_clips(self):
        assert srgb_to_hex(np.array([1.5, -0.2, 0.5])) == "#FF0080"

    def test_linear_roundtrip(self):
        srgb = np.random.default_rng(42).random((100, 3))
        recovered = linear_to_srgb(srgb_to_linear(srgb))
        np.testing.assert_allclose(recovered, srgb, atol=1e-10)

    def test_gamma_threshold(self):
        """Values below 0.04045 use the linear segment."""
        linear = srgb_to_linear(np.array([0.03]))
        assert float(linear[0]) == pytest.approx(0.03 / 12.92, abs=1e-10)


class TestLAB:

    def test_white(self):
        np.testing.assert_allclose(hex_to_lab("#FFFFFF"), [100.0, 0.0, 0.0], atol=1e-3)

    def test_black(self):
        np.testing.assert_allclose(hex_to_lab("#000000"), [0.0, 0.0, 0.0], atol=1e-6)

    def test_red_reference(self):
        # CIE L*a*b* of sRGB red under D65
        np.testing.assert_allclose(hex_to_lab("#FF0000"), [53.24, 80.09, 67.20], atol=0.05)

    @pytest.mark.parametrize("hex_color", ["#FFEB3B", "#0D47A1", "#121212", "#8A3FFC", "#7F7F7F"])
    def test_hex_lab_hex_stable(self, hex_color):
        assert lab_to_hex(hex_to_lab(hex_color)) == hex_color
        np.testing.assert_allclose(
            hex_to_lab(lab_to_hex(hex_to_lab(hex_color))), hex_to_lab(hex_color), atol=1e-9,
        )

    def test_out_of_gamut_clipped(self):
        assert lab_to_hex(np.array([150.0, 0.0, 0.0])) == "#FFFFFF"


class TestLCH:

    def test_hue_of_positive_a_axis(self):
        lch = lab_to_lch(np.array([50.0, 20.0, 0.0]))
        np.testing.assert_allclose(lch, [50.0, 20.0, 0.0], atol=1e-10)

    def test_hue_wraps_to_positive(self):
        lch = lab_to_lch(np.array([50.0, 0.0, -10.0]))
        assert lch[2] == pytest.approx(270.0)

    def test_roundtrip(self):
        lab = np.array([[60.0, 30.0, -40.0], [20.0, -5.0, 12.0]])
        np.testing.assert_allclose(lch_to_lab(lab_to_lch(lab)), lab, atol=1e-10)

    def test_gray_has_no_chroma(self):
        assert hex_to_lch("#808080")[1] < 1e-3


class TestHSL:

    def test_red(self):
        h, s, l = hex_to_hsl("#FF0000")
        assert h == pytest.approx(0.0)
        assert s == pytest.approx(1.0)
        assert l == pytest.approx(0.5)

    def test_hsl_to_hex(self):
        assert hsl_to_hex(0.0, 1.0, 0.5) == "#FF0000"
        assert hsl_to_hex(240.0, 1.0, 0.5) == "#0000FF"

    def test_hue_wraps(self):
        assert hsl_to_hex(480.0, 1.0, 0.5) == "#00FF00"
        assert hsl_to_hex(-120.0, 1.0, 0.5) == "#0000FF"

    def test_clamps_saturation_and_lightness(self):
        assert hsl_to_hex(0.0, 2.0, -1.0) == "#000000"
        assert hsl_to_hex(0.0, -1.0, 2.0) == "#FFFFFF"


class TestContrast:

    def test_black_on_white(self):
        assert contrast_ratio("#000000", "#FFFFFF") == pytest.approx(21.0)

    def test_same_color(self):
        assert contrast_ratio("#3941C8", "#3941C8") == pytest.approx(1.0)

    def test_symmetric(self):
        assert contrast_ratio("#FFEB3B", "#121212") == contrast_ratio("#121212", "#FFEB3B")

    def test_known_value(self):
        # #767676 is the lightest gray passing 4.5 on white
        assert contrast_ratio("#767676", "#FFFFFF") == pytest.approx(4.54, abs=0.01)

    def test_range(self):
        rng = np.random.default_rng(0)
        for _ in range(50):
            a, b = (srgb_to_hex(rng.random(3)) for _ in range(2))
            assert 1.0 <= contrast_ratio(a, b) <= 21.0

    def test_luminance_bounds(self):
        assert relative_luminance("#000000") == 0.0
        assert relative_luminance("#FFFFFF") == pytest.approx(1.0)


class TestDistance:

    def test_identity(self):
        assert lab_distance("#8A3FFC", "#8A3FFC") == 0.0

    def test_symmetric(self):
        assert lab_distance("#DA1E28", "#198038") == pytest.approx(lab_distance("#198038", "#DA1E28"))

    def test_black_white(self):
        assert lab_distance("#000000", "#FFFFFF") == pytest.approx(100.0, abs=1e-3)

    def test_matrix(self):
        hexes = ["#000000", "#FFFFFF", "#FF0000"]
        dist = lab_distance_matrix(np.array([hex_to_lab(h) for h in hexes]))
        assert dist.shape == (3, 3)
        np.testing.assert_allclose(np.diag(dist), 0.0)
        np.testing.assert_allclose(dist, dist.T)
        assert dist[0, 1] == pytest.approx(lab_distance("#000000", "#FFFFFF"))


class TestAdjustments:

    def test_darken_lowers_lightness(self):
        assert hex_to_lab(darken("#2196F3"))[0] < hex_to_lab("#2196F3")[0]

    def test_brighten_from_black(self):
        assert hex_to_lab(brighten("#000000"))[0] == pytest.approx(18.0, abs=1.0)

    def test_darken_saturates_at_black(self):
        assert darken("#333333", 5) == "#000000"

    def test_saturate_adds_chroma(self):
        assert hex_to_lch(saturate("#808080", 1.2))[1] == pytest.approx(21.6, abs=1.5)
        before = hex_to_lch("#8D6E63")
        after = hex_to_lch(saturate("#8D6E63"))
        assert after[1] - before[1] == pytest.approx(18.0, abs=1.5)
        assert after[0] == pytest.approx(before[0], abs=1.0)

    def test_desaturate_floors_at_gray(self):
        assert saturate("#808080", -1.0) == "#808080"

    def test_rotate_hue(self):
        assert rotate_hue("#FF0000", 120.0) == "#00FF00"
        assert rotate_hue("#FF0000", 360.0) == "#FF0000"


class TestLCHScale:

    def test_endpoints_exact(self):
        scale = lch_scale("#e3f2fd", "#0D47A1", 12)
        assert len(scale) == 12
        assert scale[0] == "#E3F2FD"
        assert scale[-1] == "#0D47A1"

    def test_two_steps(self):
        assert lch_scale("#FFFFFF", "#000000", 2) == ["#FFFFFF", "#000000"]

    def test_rejects_fewer_than_two_steps(self):
        with pytest.raises(ValueError):
            lch_scale("#FFFFFF", "#000000", 1)

    def test_lightness_monotonic(self):
        lightness = [hex_to_lab(h)[0] for h in lch_scale("#FFFFFF", "#0D47A1", 12)]
        assert all(a > b for a, b in zip(lightness, lightness[1:]))

    def test_gray_endpoint_borrows_hue(self):
        """Blending from gray stays on the colored endpoint's hue."""
        red_hue = hex_to_lch("#FF0000")[2]
        for hex_color in lch_scale("#808080", "#FF0000", 5)[1:-1]:
            assert hex_to_lch(hex_color)[2] == pytest.approx(red_hue, abs=3.0)

    def test_shorter_hue_arc(self):
        """Hues 350 and 10 meet through 0, not through 180."""
        start = _lch_hex(350.0)
        end = _lch_hex(10.0)
        mid = lch_scale(start, end, 3)[1]
        hue = hex_to_lch(mid)[2]
        assert hue < 20.0 or hue > 340.0
