# Copyright (c) 2026 Dualchroma
# SPDX-License-Identifier: MIT

"""Tests for contrast correction against a background."""

import pytest

from dualchroma.color.colorspace import contrast_ratio, hex_to_hsl
from dualchroma.color.optimize import (
    best_extreme,
    is_light_background,
    lightness_sweep,
    optimize_for_background,
)


SAMPLES = ["#FFEB3B", "#CDDC39", "#0F62FE", "#DA1E28", "#121212", "#F5F5F5", "#808080", "#00BCD4"]
BACKGROUNDS = ["#FFFFFF", "#121212", "#F4F4F4", "#262626"]
TARGETS = [3.0, 4.5, 7.0]


class TestHelpers:

    def test_light_background(self):
        assert is_light_background("#FFFFFF")
        assert is_light_background("#F4F4F4")
        assert not is_light_background("#121212")
        assert not is_light_background("#000000")

    def test_sweep_darker(self):
        sweep = lightness_sweep(darker=True)
        assert sweep[0] == 0.5
        assert sweep[-1] == 0.0
        assert len(sweep) == 11

    def test_sweep_lighter(self):
        assert lightness_sweep(darker=False, steps=3) == [0.5, 0.55, 0.6]

    def test_best_extreme(self):
        assert best_extreme("#FFFFFF") == "#000000"
        assert best_extreme("#121212") == "#FFFFFF"


class TestOptimize:

    def test_compliant_base_returned(self):
        assert optimize_for_background("#000000", "#FFFFFF", 7.0) == "#000000"

    def test_compliant_base_normalized(self):
        assert optimize_for_background("0d47a1", "#FFFFFF", 4.5) == "#0D47A1"

    @pytest.mark.parametrize("base", SAMPLES)
    @pytest.mark.parametrize("background", BACKGROUNDS)
    @pytest.mark.parametrize("target", TARGETS)
    def test_meets_reachable_target(self, base, background, target):
        result = optimize_for_background(base, background, target)
        assert contrast_ratio(result, background) >= target

    def test_keeps_hue_when_possible(self):
        """Yellow on white becomes a darker yellow-family color, not black."""
        result = optimize_for_background("#FFEB3B", "#FFFFFF", 3.0)
        hue, _, _ = hex_to_hsl(result)
        assert result != "#000000"
        assert hue == pytest.approx(hex_to_hsl("#FFEB3B")[0], abs=2.0)

    def test_unreachable_target_gives_best_extreme(self):
        # Neither black nor white reaches 7:1 on mid gray
        result = optimize_for_background("#808080", "#777777", 7.0)
        assert result == best_extreme("#777777")
