# Copyright (c) 2026 Dualchroma
# SPDX-License-Identifier: MIT

"""
Color core for Dualchroma.

Color space conversion, WCAG compliance, contrast correction, distinct
color sets, light/dark counterpart derivation and gradients. All functions
are pure; randomness comes in through an injected generator.
"""

from dualchroma.color.colorspace import (
    contrast_ratio,
    hex_to_lab,
    hex_to_lch,
    lab_distance,
    lab_to_hex,
    lch_scale,
    parse_hex,
)
from dualchroma.color.compliance import (
    build_color,
    build_variant,
    check_contrast,
    classify,
    target_contrast_for,
)
from dualchroma.color.distinct import generate_distinct_colors, generate_distinct_hexes
from dualchroma.color.dual_mode import DualModePair, derive_counterpart, derive_dual_mode_pair
from dualchroma.color.gradient import diverging_scale, regenerate_derived, sequential_scale
from dualchroma.color.optimize import optimize_for_background

__all__ = [
    # Color space
    "parse_hex",
    "hex_to_lab",
    "lab_to_hex",
    "hex_to_lch",
    "lab_distance",
    "contrast_ratio",
    "lch_scale",
    # Compliance
    "classify",
    "check_contrast",
    "target_contrast_for",
    "build_variant",
    "build_color",
    # Generation
    "optimize_for_background",
    "generate_distinct_hexes",
    "generate_distinct_colors",
    "DualModePair",
    "derive_counterpart",
    "derive_dual_mode_pair",
    "sequential_scale",
    "diverging_scale",
    "regenerate_derived",
]
