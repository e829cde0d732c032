# Copyright (c) 2026 Dualchroma
# SPDX-License-Identifier: MIT

"""Tests for palette assembly."""

import logging

import numpy as np
import pytest

from dualchroma import generate_palette
from dualchroma.config import GeneratorConfig
from dualchroma.schema import PALETTE_SIZE, Mode, PaletteType, StrictnessLevel
from dualchroma.errors import InvalidColorFormat, NonTerminatingSearch
from dualchroma.color.colorspace import contrast_ratio, hex_to_lch, lab_distance, saturate
from dualchroma.color.compliance import target_contrast_for
from dualchroma.palette.assemble import (
    DIVERGING_OPTIONS,
    SEED_COLORS,
    coerce_palette_type,
    diverging_hexes,
    select_seeded_hexes,
)


class TestCategorical:

    def test_twelve_colors(self):
        p = generate_palette(PaletteType.CATEGORICAL, seed=0)
        assert len(p.colors) == PALETTE_SIZE
        assert [c.name for c in p.colors][:3] == ["Color 1", "Color 2", "Color 3"]
        assert not any(c.editable for c in p.colors)

    def test_defaults(self):
        p = generate_palette("categorical", seed=0)
        assert p.name == "Categorical Palette"
        assert p.light_background == "#FFFFFF"
        assert p.dark_background == "#121212"
        assert p.colors[0].token == "color.dataviz.categorical.categorical-palette.00"

    @pytest.mark.parametrize("level", list(StrictnessLevel))
    def test_both_modes_meet_target(self, level):
        p = generate_palette("categorical", strictness=level, seed=11)
        for color in p.colors:
            assert color.light.compliance.passes(level)
            assert color.dark.compliance.passes(level)

    def test_custom_backgrounds(self):
        p = generate_palette("categorical", "#f4f4f4", "#262626", "AASmall", seed=3)
        assert p.light_background == "#F4F4F4"
        for color in p.colors:
            assert contrast_ratio(color.light.hex, "#F4F4F4") >= 4.5
            assert contrast_ratio(color.dark.hex, "#262626") >= 4.5

    def test_seeded_reproducible(self):
        a = generate_palette("categorical", seed=21)
        b = generate_palette("categorical", seed=21)
        assert a.hexes(Mode.LIGHT) == b.hexes(Mode.LIGHT)
        assert a.hexes(Mode.DARK) == b.hexes(Mode.DARK)
        assert a.id != b.id

    def test_seeded_strategy(self):
        cfg = GeneratorConfig(categorical_strategy="seeded")
        p = generate_palette("categorical", strictness="AAASmall", seed=4, config=cfg)
        assert len(p.colors) == PALETTE_SIZE
        for color in p.colors:
            assert color.light.contrast_ratio >= 7.0
            assert color.dark.contrast_ratio >= 7.0

    def test_malformed_background(self):
        with pytest.raises(InvalidColorFormat):
            generate_palette("categorical", "#FFFFF")

    def test_unknown_type(self):
        with pytest.raises(ValueError):
            coerce_palette_type("qualitative")


class TestSeededSelection:

    def test_from_seed_list(self):
        hexes = select_seeded_hexes(np.random.default_rng(0), 12)
        assert len(hexes) == 12
        assert len(set(hexes)) == 12
        assert hexes[0] in SEED_COLORS

    def test_accepted_seeds_distinct(self):
        hexes = select_seeded_hexes(np.random.default_rng(1), 6)
        for i, a in enumerate(hexes):
            for b in hexes[i + 1:]:
                if a in SEED_COLORS and b in SEED_COLORS:
                    assert lab_distance(a, b) >= 40.0

    def test_synthesis_terminates_beyond_seed_list(self):
        hexes = select_seeded_hexes(np.random.default_rng(2), 40)
        assert len(hexes) == 40

    def test_relaxation_logged(self, caplog):
        cfg = GeneratorConfig(min_perceptual_distance=500.0)
        with caplog.at_level(logging.WARNING, logger="dualchroma.palette.assemble"):
            hexes = select_seeded_hexes(np.random.default_rng(3), 4, cfg)
        assert len(hexes) == 4
        assert any("Relaxed" in r.message for r in caplog.records)

    def test_strict_floor_raises(self):
        cfg = GeneratorConfig(min_perceptual_distance=500.0, allow_relaxed_floor=False)
        with pytest.raises(NonTerminatingSearch):
            select_seeded_hexes(np.random.default_rng(3), 4, cfg)


class TestSequential:

    def test_structure(self):
        p = generate_palette("sequential", seed=0)
        assert p.key_indices == (0, 11)
        assert [c.editable for c in p.colors] == [True] + [False] * 10 + [True]
        assert p.colors[0].name == "First"
        assert p.colors[11].name == "Last"
        assert p.colors[5].name == "Auto 5"

    @pytest.mark.parametrize("seed", range(8))
    def test_light_keys_distinct(self, seed):
        p = generate_palette("sequential", seed=seed)
        light = p.hexes(Mode.LIGHT)
        assert lab_distance(light[0], light[11]) >= 40.0

    @pytest.mark.parametrize("seed", range(4))
    def test_dark_keys_pass_large_text(self, seed):
        p = generate_palette("sequential", seed=seed)
        for i in p.key_indices:
            assert contrast_ratio(p.colors[i].dark.hex, p.dark_background) >= 3.0


class TestDiverging:

    def test_structure(self):
        p = generate_palette("diverging", seed=0)
        assert p.key_indices == (0, 6, 11)
        assert [i for i, c in enumerate(p.colors) if c.editable] == [0, 6, 11]
        assert p.colors[6].name == "Middle"

    def test_end_keys_boosted(self):
        index = int(np.random.default_rng(8).integers(len(DIVERGING_OPTIONS)))
        start, mid, end = DIVERGING_OPTIONS[index]
        light, dark = diverging_hexes(np.random.default_rng(8), GeneratorConfig())
        assert light[0] == saturate(start, 1.2)
        assert light[11] == saturate(end, 1.2)
        assert light[6] == mid
        assert dark[6] == "#555555"
        assert hex_to_lch(light[0])[1] > hex_to_lch(start)[1]

    def test_dark_midpoint(self):
        p = generate_palette("diverging", seed=5)
        assert p.colors[6].dark.hex == "#555555"

    @pytest.mark.parametrize("seed", range(4))
    def test_ends_distinct_from_mid(self, seed):
        light = generate_palette("diverging", seed=seed).hexes(Mode.LIGHT)
        assert lab_distance(light[0], light[6]) >= 40.0
        assert lab_distance(light[11], light[6]) >= 40.0


class TestNaming:

    def test_custom_name_and_prefix(self):
        p = generate_palette("diverging", seed=0, name="Heat Map", token_prefix="brand")
        assert p.name == "Heat Map"
        assert p.colors[6].token == "brand.diverging.heat-map.06"

    def test_reused_id(self):
        assert generate_palette("sequential", seed=0, palette_id="abc").id == "abc"

    def test_target_matches_level(self):
        assert target_contrast_for("AALarge") == 3.0
