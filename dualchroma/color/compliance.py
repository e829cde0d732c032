# Copyright (c) 2026 Dualchroma
# SPDX-License-Identifier: MIT

"""
WCAG compliance classification.

Maps contrast ratios to the four WCAG pass/fail flags and builds the
per-mode color records that carry them.
"""

from __future__ import annotations

from dualchroma.schema import (
    Color,
    ContrastCheck,
    ModeVariant,
    StrictnessLevel,
    WCAGCompliance,
)
from dualchroma.color.colorspace import contrast_ratio, parse_hex


# AASmall and AAALarge share 4.5 in WCAG itself
_TARGETS: dict[StrictnessLevel, float] = {
    StrictnessLevel.AA_LARGE: 3.0,
    StrictnessLevel.AA_SMALL: 4.5,
    StrictnessLevel.AAA_LARGE: 4.5,
    StrictnessLevel.AAA_SMALL: 7.0,
}


def coerce_level(level: StrictnessLevel | str) -> StrictnessLevel:
    """Accept a StrictnessLevel or its string value ("AASmall")."""
    if isinstance(level, StrictnessLevel):
        return level
    return StrictnessLevel(level)


def target_contrast_for(level: StrictnessLevel | str) -> float:
    """Minimum contrast ratio required by a strictness level."""
    return _TARGETS[coerce_level(level)]


def classify_ratio(ratio: float) -> WCAGCompliance:
    """Compare a contrast ratio against every WCAG threshold."""
    return WCAGCompliance(
        AALarge=ratio >= _TARGETS[StrictnessLevel.AA_LARGE],
        AASmall=ratio >= _TARGETS[StrictnessLevel.AA_SMALL],
        AAALarge=ratio >= _TARGETS[StrictnessLevel.AAA_LARGE],
        AAASmall=ratio >= _TARGETS[StrictnessLevel.AAA_SMALL],
    )


def classify(foreground: str, background: str) -> WCAGCompliance:
    """WCAG flags for a foreground drawn on a background."""
    return classify_ratio(contrast_ratio(foreground, background))


def check_contrast(hex_color: str, background: str) -> ContrastCheck:
    """
    Contrast ratio and compliance of ``hex_color`` on ``background``.

    Raises:
        InvalidColorFormat: If either color is malformed
    """
    ratio = contrast_ratio(hex_color, background)
    return ContrastCheck(ratio=ratio, compliance=classify_ratio(ratio))


def build_variant(hex_color: str, background: str) -> ModeVariant:
    """Measure ``hex_color`` against one mode's background."""
    hex_color = parse_hex(hex_color)
    ratio = contrast_ratio(hex_color, background)
    return ModeVariant(hex=hex_color, contrast_ratio=ratio, compliance=classify_ratio(ratio))


def build_color(
    name: str,
    token: str,
    light_hex: str,
    dark_hex: str,
    light_background: str,
    dark_background: str,
    editable: bool = False,
) -> Color:
    """Build a Color with both variants measured against their backgrounds."""
    return Color(
        name=name,
        token=token,
        light=build_variant(light_hex, light_background),
        dark=build_variant(dark_hex, dark_background),
        editable=editable,
    )
