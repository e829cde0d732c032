# Copyright (c) 2026 Dualchroma
# SPDX-License-Identifier: MIT

"""
Gradient construction for sequential and diverging palettes.

Non-key positions are always derived from the key colors by LCH
interpolation, separately for each mode. After any key edit the whole
gradient is rebuilt so derived colors never go stale.
"""

from __future__ import annotations

from dataclasses import replace

from dualchroma.schema import Mode, Palette, PaletteType
from dualchroma.color.colorspace import lch_scale
from dualchroma.color.compliance import build_variant


def sequential_scale(start: str, end: str, size: int) -> list[str]:
    """``size`` colors from ``start`` to ``end`` in LCH."""
    return lch_scale(start, end, size)


def diverging_scale(start: str, mid: str, end: str, size: int) -> list[str]:
    """
    ``size`` colors from ``start`` through ``mid`` to ``end``.

    Two LCH halves share the midpoint, which lands on index ``size // 2``.
    """
    middle = size // 2
    left = lch_scale(start, mid, middle + 1)
    right = lch_scale(mid, end, size - middle)
    # Drop the duplicated midpoint
    return left + right[1:]


def gradient_hexes(palette_type: PaletteType, keys: list[str], size: int) -> list[str]:
    """Full gradient for a palette type from its key colors in key order."""
    if palette_type is PaletteType.SEQUENTIAL:
        start, end = keys
        return sequential_scale(start, end, size)
    if palette_type is PaletteType.DIVERGING:
        start, mid, end = keys
        return diverging_scale(start, mid, end, size)
    raise ValueError(f"{palette_type.value} palettes have no gradient")


def regenerate_derived(palette: Palette) -> Palette:
    """
    Rebuild every non-key color of a gradient palette from its keys.

    Light and dark gradients are interpolated independently. Contrast and
    compliance are recomputed for each derived slot; key colors are kept
    unchanged.

    Returns:
        New Palette (the input is not modified)
    """
    keys = palette.key_indices
    size = len(palette.colors)

    scales = {
        mode: gradient_hexes(
            palette.type,
            [palette.colors[i].variant(mode).hex for i in keys],
            size,
        )
        for mode in Mode
    }

    colors = list(palette.colors)
    for i, color in enumerate(colors):
        if i in keys:
            continue
        colors[i] = replace(
            color,
            light=build_variant(scales[Mode.LIGHT][i], palette.light_background),
            dark=build_variant(scales[Mode.DARK][i], palette.dark_background),
        )

    return replace(palette, colors=tuple(colors))
