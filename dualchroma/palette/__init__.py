# Copyright (c) 2026 Dualchroma
# SPDX-License-Identifier: MIT

"""Palette assembly, token naming and the editing workspace."""

from dualchroma.palette.assemble import generate_palette
from dualchroma.palette.tokens import generate_token, slugify
from dualchroma.palette.workspace import PaletteWorkspace

__all__ = ["generate_palette", "generate_token", "slugify", "PaletteWorkspace"]
