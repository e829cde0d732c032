# Copyright (c) 2026 Dualchroma
# SPDX-License-Identifier: MIT

"""
Contrast correction against a background.

Searches HSL lightness (then saturation) along the hue of the base color
until the WCAG target is met, and falls back to progressively less
hue-faithful choices when the sweep cannot reach it:

1. Lightness sweep at the base saturation (clamped to >= 0.5)
2. The same sweep at saturations 0.7, 0.8, 0.9, 1.0
3. An extreme darken/brighten of the base color
4. #333333 (light backgrounds only)
5. Black or white, whichever contrasts more

Black or white always maximizes contrast against any background, so the
result meets the target whenever the target is reachable in sRGB.
"""

from __future__ import annotations

import logging

from dualchroma.color.colorspace import (
    brighten,
    contrast_ratio,
    darken,
    hex_to_hsl,
    hex_to_lab,
    hsl_to_hex,
    parse_hex,
)

logger = logging.getLogger(__name__)

# Sweep resolution
_LIGHTNESS_STEP = 0.05
_SWEEP_STEPS = 11  # 0.5 → 0.0 or 0.5 → 1.0
_SATURATION_SWEEP = (0.7, 0.8, 0.9, 1.0)

_FALLBACK_GRAY = "#333333"


def is_light_background(background: str) -> bool:
    """True if the background's LAB lightness is above the midpoint."""
    return float(hex_to_lab(background)[0]) > 50.0


def lightness_sweep(darker: bool, steps: int = _SWEEP_STEPS) -> list[float]:
    """HSL lightness values from 0.5 toward black (darker) or white."""
    sign = -1.0 if darker else 1.0
    return [round(0.5 + sign * _LIGHTNESS_STEP * i, 4) for i in range(steps)]


def optimize_for_background(
    base: str,
    background: str,
    target: float = 4.5,
) -> str:
    """
    Adjust ``base`` until it meets ``target`` contrast on ``background``.

    Args:
        base: Color to correct
        background: Background it will be drawn on
        target: Minimum WCAG contrast ratio (default: 4.5, AA small text)

    Returns:
        Normalized hex. ``base`` itself if it already complies.

    Raises:
        InvalidColorFormat: If either color is malformed
    """
    base = parse_hex(base)
    background = parse_hex(background)

    if contrast_ratio(base, background) >= target:
        return base

    light_bg = is_light_background(background)
    hue, sat, _ = hex_to_hsl(base)
    # Grays have no saturation to keep; start from a moderate one
    sat = min(1.0, max(0.5, sat if sat > 0 else 0.6))

    sweep = lightness_sweep(darker=light_bg)

    for saturation in (sat,) + _SATURATION_SWEEP:
        for lightness in sweep:
            candidate = hsl_to_hex(hue, saturation, lightness)
            if contrast_ratio(candidate, background) >= target:
                return candidate

    logger.debug(
        "Lightness sweep could not reach %.2f for %s on %s, using fallbacks",
        target, base, background,
    )

    # Extreme version of the base color
    extreme = darken(base, 3) if light_bg else brighten(base, 3)
    if contrast_ratio(extreme, background) >= target:
        return extreme

    if light_bg and contrast_ratio(_FALLBACK_GRAY, background) >= target:
        return _FALLBACK_GRAY

    return best_extreme(background)


def best_extreme(background: str) -> str:
    """Black or white, whichever has the higher contrast on ``background``."""
    black = contrast_ratio("#000000", background)
    white = contrast_ratio("#FFFFFF", background)
    return "#000000" if black > white else "#FFFFFF"
