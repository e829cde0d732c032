# Copyright (c) 2026 Dualchroma
# SPDX-License-Identifier: MIT

"""
Light/dark counterpart derivation.

When a user sets one mode's color, the other mode's color is derived from
it. The pair is one output of one derivation, so the two variants cannot
drift apart. The counterpart must:

- keep the source hue where possible
- shift toward the target mode (darker and more saturated for dark mode,
  lighter and less saturated for light mode)
- sit at least 50 LAB units from the source (60 for gradient key colors)
- meet the active contrast target on its own background

Escalation ladder, stopping at the first step that clears the distance
floor:

1. Hue-preserving HSL shift
2. Extreme variant (saturation/lightness pinned to a narrow band)
3. Extreme variant with a ±15° hue rotation
4. Complementary hue with fixed saturation/lightness

Contrast is then corrected with the optimizer. If correction pulls the
color back under the distance floor, a bounded joint search over hue
offsets and lightness looks for a color satisfying both constraints.
Contrast always wins over distance when both cannot be met.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from dualchroma.schema import Mode
from dualchroma.color.colorspace import (
    contrast_ratio,
    hex_to_hsl,
    hsl_to_hex,
    lab_distance,
    parse_hex,
)
from dualchroma.color.optimize import (
    is_light_background,
    lightness_sweep,
    optimize_for_background,
)
from dualchroma.config import GeneratorConfig

logger = logging.getLogger(__name__)

# Yellow hues lose their identity when darkened, so key colors in this
# band get dedicated targets
YELLOW_BAND = (50.0, 70.0)

_HUE_ROTATION = 15.0

# Joint search: small hue changes first, complementary last
_JOINT_HUE_OFFSETS = (0, 15, -15, 30, -30, 60, -60, 90, -90, 120, -120, 180)
_JOINT_LIGHTNESS_STEPS = 8


@dataclass(frozen=True, slots=True)
class DualModePair:
    """Jointly derived light and dark hexes for one palette entry."""
    light: str
    dark: str

    def hex_for(self, mode: Mode) -> str:
        return self.light if mode is Mode.LIGHT else self.dark


def coerce_mode(mode: Mode | str) -> Mode:
    """Accept a Mode or its string value ("light" / "dark")."""
    if isinstance(mode, Mode):
        return mode
    return Mode(mode)


def in_yellow_band(hue: float) -> bool:
    return YELLOW_BAND[0] <= hue <= YELLOW_BAND[1]


# =============================================================================
# Ladder steps
# =============================================================================


def _shifted(hue: float, sat: float, light: float, toward_dark: bool) -> str:
    if toward_dark:
        return hsl_to_hex(hue, min(1.0, sat + 0.4), max(0.1, light - 0.4))
    return hsl_to_hex(hue, max(0.05, sat - 0.3), min(0.97, light + 0.4))


def _extreme(
    hue: float, sat: float, light: float, toward_dark: bool, hue_offset: float = 0.0,
) -> str:
    if toward_dark:
        return hsl_to_hex(hue + hue_offset, 1.0, min(0.3, max(0.05, light - 0.5)))
    return hsl_to_hex(hue + hue_offset, min(0.3, max(0.0, sat - 0.4)), 0.9)


def _complementary(hue: float, toward_dark: bool) -> str:
    if toward_dark:
        return hsl_to_hex(hue + 180.0, 1.0, 0.2)
    return hsl_to_hex(hue + 180.0, 0.2, 0.9)


def _yellow_target(hue: float, toward_dark: bool) -> str:
    if toward_dark:
        return hsl_to_hex(hue, 1.0, 0.15)
    return hsl_to_hex(hue, 0.15, 0.9)


def escalation_ladder(source: str, toward_dark: bool) -> list[tuple[str, str]]:
    """
    Counterpart candidates for ``source`` in escalation order.

    Returns:
        List of (step name, hex)
    """
    hue, sat, light = hex_to_hsl(source)
    rotation = _HUE_ROTATION if toward_dark else -_HUE_ROTATION
    return [
        ("shift", _shifted(hue, sat, light, toward_dark)),
        ("extreme", _extreme(hue, sat, light, toward_dark)),
        ("rotated", _extreme(hue, sat, light, toward_dark, hue_offset=rotation)),
        ("complementary", _complementary(hue, toward_dark)),
    ]


# =============================================================================
# Derivation
# =============================================================================


def derive_counterpart(
    source: str,
    target_mode: Mode | str,
    target_background: str,
    target_contrast: float,
    *,
    key_color: bool = False,
    config: Optional[GeneratorConfig] = None,
) -> str:
    """
    Derive the opposite-mode color for ``source``.

    Args:
        source: Hex chosen for the other mode
        target_mode: Mode the counterpart is for
        target_background: Background of ``target_mode``
        target_contrast: Minimum contrast on ``target_background``
        key_color: True for sequential/diverging key colors (stricter
            distance floor, yellow-band handling)
        config: Distance floors and search caps

    Returns:
        Counterpart hex

    Raises:
        InvalidColorFormat: If ``source`` or the background is malformed
    """
    cfg = config or GeneratorConfig()
    source = parse_hex(source)
    target_background = parse_hex(target_background)
    toward_dark = coerce_mode(target_mode) is Mode.DARK
    floor = cfg.key_color_distance if key_color else cfg.dual_mode_distance

    hue, sat, _ = hex_to_hsl(source)

    if key_color and in_yellow_band(hue):
        candidate = _yellow_target(hue, toward_dark)
        logger.debug("Yellow-band key color %s → %s", source, candidate)
    else:
        candidate = source
        for step, hex_value in escalation_ladder(source, toward_dark):
            candidate = hex_value
            if lab_distance(source, candidate) >= floor:
                logger.debug("Counterpart for %s from %s step: %s", source, step, candidate)
                break

    if contrast_ratio(candidate, target_background) < target_contrast:
        candidate = optimize_for_background(candidate, target_background, target_contrast)

    if (
        lab_distance(source, candidate) >= floor
        and contrast_ratio(candidate, target_background) >= target_contrast
    ):
        return candidate

    return _joint_search(
        source, hue, sat, target_background, target_contrast, floor,
        max_attempts=cfg.joint_search_max_attempts,
        fallback=candidate,
    )


def _joint_search(
    source: str,
    hue: float,
    sat: float,
    background: str,
    target: float,
    floor: float,
    max_attempts: int,
    fallback: str,
) -> str:
    """
    Search hue offsets and lightness for a color meeting both constraints.

    Returns the first candidate meeting contrast and distance. Otherwise the
    contrast-compliant candidate (fallback included) farthest from the
    source, or ``fallback`` when nothing complies.
    """
    sat = min(1.0, max(0.5, sat if sat > 0 else 0.6))
    sweep = lightness_sweep(
        darker=is_light_background(background),
        steps=_JOINT_LIGHTNESS_STEPS,
    )

    best: Optional[str] = None
    best_distance = -1.0
    if contrast_ratio(fallback, background) >= target:
        best, best_distance = fallback, lab_distance(source, fallback)

    attempts = 0
    for offset in _JOINT_HUE_OFFSETS:
        for lightness in sweep:
            if attempts >= max_attempts:
                break
            attempts += 1
            candidate = hsl_to_hex(hue + offset, sat, lightness)
            if contrast_ratio(candidate, background) < target:
                continue
            distance = lab_distance(source, candidate)
            if distance >= floor:
                logger.debug(
                    "Joint search for %s found %s after %d attempts",
                    source, candidate, attempts,
                )
                return candidate
            if distance > best_distance:
                best, best_distance = candidate, distance

    logger.warning(
        "No counterpart for %s reaches distance %.0f at contrast %.2f; "
        "using best available (distance %.1f)",
        source, floor, target, max(best_distance, 0.0),
    )
    return best if best is not None else fallback


def derive_dual_mode_pair(
    source: str,
    source_mode: Mode | str,
    light_background: str,
    dark_background: str,
    target_contrast: float,
    *,
    key_color: bool = False,
    config: Optional[GeneratorConfig] = None,
) -> DualModePair:
    """
    Build a light/dark pair from a color chosen for one mode.

    The source is kept as given for ``source_mode``; the other mode's color
    is derived with derive_counterpart.
    """
    source = parse_hex(source)
    source_mode = coerce_mode(source_mode)
    target_mode = source_mode.opposite
    target_background = dark_background if target_mode is Mode.DARK else light_background

    counterpart = derive_counterpart(
        source,
        target_mode,
        target_background,
        target_contrast,
        key_color=key_color,
        config=config,
    )

    if source_mode is Mode.LIGHT:
        return DualModePair(light=source, dark=counterpart)
    return DualModePair(light=counterpart, dark=source)
