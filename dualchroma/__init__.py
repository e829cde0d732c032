# Copyright (c) 2026 Dualchroma
# SPDX-License-Identifier: MIT

"""
Dualchroma -- WCAG-compliant data visualization palettes for light and dark mode.

Generates categorical, sequential and diverging palettes of 12 colors.
Every color carries a light-mode and a dark-mode variant, each checked
against its own background.

Quick start::

    from dualchroma import PaletteWorkspace

    ws = PaletteWorkspace(seed=42)
    palette = ws.generate_palette("categorical")
    palette.hexes("dark")          # Dark-mode hexes
    ws.edit_color_hex(palette.id, 0, "#FFEB3B", "light")
"""

from __future__ import annotations

import logging

__version__ = "1.0.0"

from dualchroma.color.compliance import check_contrast
from dualchroma.config import GeneratorConfig
from dualchroma.errors import (
    IndexOutOfBounds,
    InvalidColorFormat,
    InvalidPaletteOperation,
    NonTerminatingSearch,
    PaletteError,
)
from dualchroma.palette import PaletteWorkspace, generate_palette
from dualchroma.schema import (
    Color,
    ContrastCheck,
    Mode,
    ModeVariant,
    Palette,
    PaletteType,
    StrictnessLevel,
    WCAGCompliance,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Core API
    "generate_palette",
    "check_contrast",
    "PaletteWorkspace",
    "GeneratorConfig",
    # Types
    "Palette",
    "Color",
    "ModeVariant",
    "WCAGCompliance",
    "ContrastCheck",
    "PaletteType",
    "StrictnessLevel",
    "Mode",
    # Errors
    "PaletteError",
    "InvalidColorFormat",
    "IndexOutOfBounds",
    "InvalidPaletteOperation",
    "NonTerminatingSearch",
    # Version
    "__version__",
]
