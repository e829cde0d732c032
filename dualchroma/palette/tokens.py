# Copyright (c) 2026 Dualchroma
# SPDX-License-Identifier: MIT

"""Design token labels for palette colors."""

from __future__ import annotations

import re
from dataclasses import replace

from dualchroma.schema import Palette, PaletteType

DEFAULT_TOKEN_PREFIX = "color.dataviz"

_WHITESPACE_RE = re.compile(r"\s+")


def slugify(name: str) -> str:
    """Lowercase ``name`` and replace whitespace runs with "-"."""
    return _WHITESPACE_RE.sub("-", name.strip().lower())


def generate_token(
    prefix: str,
    palette_name: str,
    palette_type: PaletteType,
    index: int,
) -> str:
    """
    Token for a palette position.

    Example:
        >>> generate_token("color.dataviz", "Sequential Palette", PaletteType.SEQUENTIAL, 3)
        'color.dataviz.sequential.sequential-palette.03'
    """
    return f"{prefix}.{palette_type.value}.{slugify(palette_name)}.{index:02d}"


def retokenize(palette: Palette, prefix: str) -> Palette:
    """Re-derive every color token of ``palette`` from its position."""
    colors = tuple(
        replace(color, token=generate_token(prefix, palette.name, palette.type, i))
        for i, color in enumerate(palette.colors)
    )
    return replace(palette, colors=colors)
