# Copyright (c) 2026 Dualchroma
# SPDX-License-Identifier: MIT

"""Tests for design token naming."""

from dualchroma.schema import PaletteType
from dualchroma.palette.assemble import generate_palette
from dualchroma.palette.tokens import generate_token, retokenize, slugify


class TestSlugify:

    def test_lowercase_and_dashes(self):
        assert slugify("Brand  Primary Blue") == "brand-primary-blue"

    def test_trims(self):
        assert slugify("  Accent ") == "accent"


class TestGenerateToken:

    def test_format(self):
        token = generate_token("color.dataviz", "Sequential Palette", PaletteType.SEQUENTIAL, 3)
        assert token == "color.dataviz.sequential.sequential-palette.03"

    def test_retokenize(self):
        palette = generate_palette("categorical", seed=0)
        renamed = retokenize(palette, "brand")
        assert renamed.colors[11].token == "brand.categorical.categorical-palette.11"
        assert renamed.hexes("light") == palette.hexes("light")
