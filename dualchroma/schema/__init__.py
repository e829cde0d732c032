# Copyright (c) 2026 Dualchroma
# SPDX-License-Identifier: MIT

"""
Schema definitions for palettes.

All types in this module are immutable (frozen dataclasses).
Edits produce new values; nothing is changed in place.
"""

from dualchroma.schema.palette import (
    PALETTE_SIZE,
    Color,
    ContrastCheck,
    Mode,
    ModeVariant,
    Palette,
    PaletteType,
    StrictnessLevel,
    WCAGCompliance,
    key_indices,
)

__all__ = [
    "PALETTE_SIZE",
    # Enums
    "StrictnessLevel",
    "PaletteType",
    "Mode",
    # Color types
    "WCAGCompliance",
    "ModeVariant",
    "Color",
    "ContrastCheck",
    # Container
    "Palette",
    "key_indices",
]
