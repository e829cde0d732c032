# Copyright (c) 2026 Dualchroma
# SPDX-License-Identifier: MIT

"""
Error types raised by the palette engine.

Every error derives from PaletteError and from the builtin exception that
best matches its meaning, so callers can catch either.
"""


class PaletteError(Exception):
    """Base class for all dualchroma errors."""


class InvalidColorFormat(PaletteError, ValueError):
    """A color string is not a valid #RGB / #RRGGBB hex code."""


class IndexOutOfBounds(PaletteError, IndexError):
    """An edit referenced a palette id or color index that does not exist."""


class InvalidPaletteOperation(PaletteError, ValueError):
    """The operation is not allowed for this palette type or position."""


class NonTerminatingSearch(PaletteError, RuntimeError):
    """A bounded search ran out of attempts and was not allowed to relax."""
