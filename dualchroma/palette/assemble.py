# Copyright (c) 2026 Dualchroma
# SPDX-License-Identifier: MIT

"""
Palette assembly for the three palette families.

- Categorical: 12 mutually distinct colors, each corrected for contrast
  against both backgrounds. Built from clustering (default) or from a
  curated seed list with bounded random synthesis.
- Sequential: a curated start/end pair interpolated in LCH, ends editable.
- Diverging: a curated start/mid/end triple interpolated in two LCH halves,
  ends and middle editable.

Light and dark gradients are always built independently from their own
key colors.
"""

from __future__ import annotations

import logging
import uuid
from typing import Optional

import numpy as np

from dualchroma.schema import (
    PALETTE_SIZE,
    Color,
    Palette,
    PaletteType,
    StrictnessLevel,
    key_indices,
)
from dualchroma.color.colorspace import (
    hex_to_hsl,
    hsl_to_hex,
    lab_distance,
    parse_hex,
    rotate_hue,
    saturate,
)
from dualchroma.color.compliance import build_color, target_contrast_for
from dualchroma.color.distinct import generate_distinct_colors
from dualchroma.color.gradient import diverging_scale, sequential_scale
from dualchroma.color.optimize import optimize_for_background
from dualchroma.config import GeneratorConfig, resolve_rng
from dualchroma.errors import NonTerminatingSearch
from dualchroma.palette.tokens import DEFAULT_TOKEN_PREFIX, generate_token

logger = logging.getLogger(__name__)

DEFAULT_LIGHT_BACKGROUND = "#FFFFFF"
DEFAULT_DARK_BACKGROUND = "#121212"

DEFAULT_NAMES = {
    PaletteType.CATEGORICAL: "Categorical Palette",
    PaletteType.SEQUENTIAL: "Sequential Palette",
    PaletteType.DIVERGING: "Diverging Palette",
}

# Design-system colors (IBM Carbon, Material) used by the seeded strategy
SEED_COLORS = (
    "#0F62FE",  # IBM Blue 60
    "#DA1E28",  # IBM Red 60
    "#198038",  # IBM Green 60
    "#8A3FFC",  # IBM Purple 60
    "#FF832B",  # IBM Orange 40
    "#009D9A",  # IBM Teal 50
    "#A56EFF",  # IBM Purple 40
    "#FFAB00",  # Amber A700
    "#6200EA",  # Deep Purple A700
    "#00B8D4",  # Cyan A700
    "#64DD17",  # Light Green A700
    "#304FFE",  # Indigo A700
    "#F44336",  # Material Red 500
    "#2196F3",  # Material Blue 500
    "#4CAF50",  # Material Green 500
    "#FF9800",  # Material Orange 500
    "#9C27B0",  # Material Purple 500
    "#00BCD4",  # Material Cyan 500
    "#CDDC39",  # Material Lime 500
    "#795548",  # Material Brown 500
    "#607D8B",  # Material Blue Grey 500
    "#E91E63",  # Material Pink 500
    "#673AB7",  # Material Deep Purple 500
    "#8D6E63",  # Material Brown 400
)

# (start, end): light first, dark last
SEQUENTIAL_OPTIONS = (
    ("#E3F2FD", "#0D47A1"),  # Blue
    ("#E8F5E9", "#1B5E20"),  # Green
    ("#F3E5F5", "#4A148C"),  # Purple
    ("#FFF3E0", "#E65100"),  # Orange
)

# (start, mid, end)
DIVERGING_OPTIONS = (
    ("#8A3FFC", "#F1F1F1", "#DA1E28"),  # Purple - Red
    ("#1565C0", "#F5F5F5", "#E65100"),  # Blue - Orange
    ("#2E7D32", "#F5F5F5", "#6A1B9A"),  # Green - Purple
    ("#00838F", "#F5F5F5", "#4E342E"),  # Teal - Brown
)

# Hue rotation applied to a key color that is too close to its neighbor
_KEY_HUE_ROTATION = 45.0

# Dark-mode gradient keys must at least pass AA large text
_DARK_KEY_MIN_CONTRAST = 3.0

_DIVERGING_DARK_MID = "#555555"

# Chroma boost for diverging end keys (in units of 18 LCH chroma)
_DIVERGING_END_SATURATION = 1.2

# Seeded synthesis ranges
_SYNTH_SATURATION = (0.6, 0.9)
_SYNTH_LIGHTNESS = (0.4, 0.6)


def coerce_palette_type(palette_type: PaletteType | str) -> PaletteType:
    """Accept a PaletteType or its string value ("sequential")."""
    if isinstance(palette_type, PaletteType):
        return palette_type
    return PaletteType(palette_type)


# =============================================================================
# Public API
# =============================================================================


def generate_palette(
    palette_type: PaletteType | str,
    light_background: str = DEFAULT_LIGHT_BACKGROUND,
    dark_background: str = DEFAULT_DARK_BACKGROUND,
    strictness: StrictnessLevel | str = StrictnessLevel.AA_LARGE,
    *,
    rng: Optional[np.random.Generator] = None,
    seed: Optional[int] = None,
    config: Optional[GeneratorConfig] = None,
    token_prefix: str = DEFAULT_TOKEN_PREFIX,
    palette_id: Optional[str] = None,
    name: Optional[str] = None,
) -> Palette:
    """
    Generate a complete palette.

    Args:
        palette_type: categorical, sequential or diverging
        light_background: Light-mode background hex (default: #FFFFFF)
        dark_background: Dark-mode background hex (default: #121212)
        strictness: WCAG target for contrast correction (default: AALarge)
        rng: Random source; takes precedence over ``seed``
        seed: Seed for a new random source (None for system entropy)
        config: Thresholds, search caps and categorical strategy
        token_prefix: Prefix for color tokens (labels only)
        palette_id: Id to reuse (regeneration); a new UUID if None
        name: Palette name; the type's default name if None

    Returns:
        Palette with exactly PALETTE_SIZE colors

    Raises:
        InvalidColorFormat: If a background is malformed
        NonTerminatingSearch: Only for the seeded strategy with
            ``allow_relaxed_floor=False``
    """
    cfg = config or GeneratorConfig()
    rng = resolve_rng(rng, seed)
    palette_type = coerce_palette_type(palette_type)
    light_background = parse_hex(light_background)
    dark_background = parse_hex(dark_background)
    target = target_contrast_for(strictness)
    name = name or DEFAULT_NAMES[palette_type]

    if palette_type is PaletteType.CATEGORICAL:
        pairs = categorical_pairs(light_background, dark_background, target, rng, cfg)
        colors = tuple(
            build_color(
                name=f"Color {i + 1}",
                token=generate_token(token_prefix, name, palette_type, i),
                light_hex=light_hex,
                dark_hex=dark_hex,
                light_background=light_background,
                dark_background=dark_background,
            )
            for i, (light_hex, dark_hex) in enumerate(pairs)
        )
    elif palette_type is PaletteType.SEQUENTIAL:
        light_hexes, dark_hexes = sequential_hexes(dark_background, rng, cfg)
        colors = gradient_colors(
            palette_type, light_hexes, dark_hexes,
            light_background, dark_background, name, token_prefix,
        )
    else:
        light_hexes, dark_hexes = diverging_hexes(rng, cfg)
        colors = gradient_colors(
            palette_type, light_hexes, dark_hexes,
            light_background, dark_background, name, token_prefix,
        )

    logger.debug("Generated %s palette %r", palette_type.value, name)

    return Palette(
        id=palette_id or str(uuid.uuid4()),
        name=name,
        type=palette_type,
        colors=colors,
        light_background=light_background,
        dark_background=dark_background,
    )


# =============================================================================
# Categorical
# =============================================================================


def categorical_pairs(
    light_background: str,
    dark_background: str,
    target: float,
    rng: np.random.Generator,
    config: GeneratorConfig,
) -> list[tuple[str, str]]:
    """(light, dark) hex pairs for a categorical palette."""
    if config.categorical_strategy == "seeded":
        bases = select_seeded_hexes(rng, PALETTE_SIZE, config)
        return [
            (
                optimize_for_background(base, light_background, target),
                optimize_for_background(base, dark_background, target),
            )
            for base in bases
        ]
    return generate_distinct_colors(
        PALETTE_SIZE, light_background, dark_background, target, rng=rng, config=config,
    )


def _is_distinct(candidate: str, selected: list[str], floor: float) -> bool:
    return all(lab_distance(candidate, other) >= floor for other in selected)


def select_seeded_hexes(
    rng: np.random.Generator,
    count: int = PALETTE_SIZE,
    config: Optional[GeneratorConfig] = None,
) -> list[str]:
    """
    Pick ``count`` distinct colors from the curated seed list.

    The seeds are shuffled and accepted greedily when at least
    ``min_perceptual_distance`` from every accepted color. If the list runs
    out first, random HSL colors fill the remainder (see _synthesize).
    """
    cfg = config or GeneratorConfig()
    floor = cfg.min_perceptual_distance

    shuffled = [SEED_COLORS[i] for i in rng.permutation(len(SEED_COLORS))]
    selected = [shuffled[0]]

    for candidate in shuffled[1:]:
        if len(selected) >= count:
            break
        if _is_distinct(candidate, selected, floor):
            selected.append(candidate)

    if len(selected) < count:
        logger.debug(
            "Seed list gave %d of %d colors, synthesizing the rest",
            len(selected), count,
        )
        _synthesize(selected, count, rng, cfg)

    return selected[:count]


def _synthesize(
    selected: list[str],
    count: int,
    rng: np.random.Generator,
    config: GeneratorConfig,
) -> None:
    """
    Append random HSL colors to ``selected`` until it holds ``count``.

    Every ``synthesis_relax_every`` rejections the distance floor is
    multiplied by ``synthesis_relax_factor``. After
    ``synthesis_max_attempts`` rejections candidates are accepted as they
    come. With ``allow_relaxed_floor=False`` the floor never relaxes and
    running out of attempts raises NonTerminatingSearch.
    """
    floor = config.min_perceptual_distance
    rejections = 0

    while len(selected) < count:
        candidate = hsl_to_hex(
            rng.uniform(0.0, 360.0),
            rng.uniform(*_SYNTH_SATURATION),
            rng.uniform(*_SYNTH_LIGHTNESS),
        )

        if rejections >= config.synthesis_max_attempts or _is_distinct(candidate, selected, floor):
            selected.append(candidate)
            continue

        rejections += 1

        if not config.allow_relaxed_floor:
            if rejections >= config.synthesis_max_attempts:
                raise NonTerminatingSearch(
                    f"Could not find {count} colors {floor:.1f} LAB units apart "
                    f"in {rejections} attempts"
                )
            continue

        if rejections % config.synthesis_relax_every == 0:
            floor *= config.synthesis_relax_factor
            logger.warning(
                "Relaxed categorical distance floor to %.1f after %d rejections",
                floor, rejections,
            )


# =============================================================================
# Gradients
# =============================================================================


def _separate(anchor: str, other: str, floor: float, label: str) -> str:
    """Rotate ``other``'s hue by 45° if it sits too close to ``anchor``."""
    distance = lab_distance(anchor, other)
    if distance >= floor:
        return other
    rotated = rotate_hue(other, _KEY_HUE_ROTATION)
    logger.debug(
        "%s distance %.1f below %.0f, rotated %s → %s (distance %.1f)",
        label, distance, floor, other, rotated, lab_distance(anchor, rotated),
    )
    return rotated


def _hsl_delta(
    hex_color: str,
    sat_delta: float,
    light_delta: float,
    light_min: float,
    light_max: float,
) -> str:
    hue, sat, light = hex_to_hsl(hex_color)
    return hsl_to_hex(
        hue,
        min(1.0, sat + sat_delta),
        min(light_max, max(light_min, light + light_delta)),
    )


def sequential_hexes(
    dark_background: str,
    rng: np.random.Generator,
    config: GeneratorConfig,
) -> tuple[list[str], list[str]]:
    """Light and dark 12-step sequential gradients from a curated pair."""
    start, end = SEQUENTIAL_OPTIONS[int(rng.integers(len(SEQUENTIAL_OPTIONS)))]
    end = _separate(start, end, config.min_perceptual_distance, "Sequential start-end")

    dark_start = _hsl_delta(start, 0.2, -0.2, 0.2, 1.0)
    dark_end = _hsl_delta(end, 0.15, 0.1, 0.3, 0.9)
    dark_start = optimize_for_background(dark_start, dark_background, _DARK_KEY_MIN_CONTRAST)
    dark_end = optimize_for_background(dark_end, dark_background, _DARK_KEY_MIN_CONTRAST)

    return (
        sequential_scale(start, end, PALETTE_SIZE),
        sequential_scale(dark_start, dark_end, PALETTE_SIZE),
    )


def diverging_hexes(
    rng: np.random.Generator,
    config: GeneratorConfig,
) -> tuple[list[str], list[str]]:
    """Light and dark 12-step diverging gradients from a curated triple."""
    start, mid, end = DIVERGING_OPTIONS[int(rng.integers(len(DIVERGING_OPTIONS)))]
    floor = config.min_perceptual_distance
    start = _separate(mid, start, floor, "Diverging start-mid")
    end = _separate(mid, end, floor, "Diverging mid-end")

    dark_start = _hsl_delta(start, 0.1, 0.2, 0.4, 0.8)
    dark_end = _hsl_delta(end, 0.1, 0.2, 0.4, 0.8)

    # Ends get a chroma boost in both modes; the middle stays neutral
    start, end, dark_start, dark_end = (
        saturate(h, _DIVERGING_END_SATURATION) for h in (start, end, dark_start, dark_end)
    )

    return (
        diverging_scale(start, mid, end, PALETTE_SIZE),
        diverging_scale(dark_start, _DIVERGING_DARK_MID, dark_end, PALETTE_SIZE),
    )


def _gradient_name(index: int, keys: tuple[int, ...], size: int) -> str:
    if index not in keys:
        return f"Auto {index}"
    if index == 0:
        return "First"
    if index == size - 1:
        return "Last"
    return "Middle"


def gradient_colors(
    palette_type: PaletteType,
    light_hexes: list[str],
    dark_hexes: list[str],
    light_background: str,
    dark_background: str,
    palette_name: str,
    token_prefix: str,
) -> tuple[Color, ...]:
    """Colors for a gradient palette, with key positions marked editable."""
    size = len(light_hexes)
    keys = key_indices(palette_type, size)
    return tuple(
        build_color(
            name=_gradient_name(i, keys, size),
            token=generate_token(token_prefix, palette_name, palette_type, i),
            light_hex=light_hex,
            dark_hex=dark_hex,
            light_background=light_background,
            dark_background=dark_background,
            editable=i in keys,
        )
        for i, (light_hex, dark_hex) in enumerate(zip(light_hexes, dark_hexes))
    )
