# Copyright (c) 2026 Dualchroma
# SPDX-License-Identifier: MIT

"""
Palette schema: colors with paired light/dark variants.

Design principles:
- Immutable: All types are frozen dataclasses
- Paired: Every Color carries a light and a dark variant, each measured
  against its own background
- Fixed size: A Palette always holds exactly PALETTE_SIZE colors

Edits never mutate a value in place. They build a new Palette that replaces
the old one.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum


# =============================================================================
# Constants
# =============================================================================

PALETTE_SIZE = 12

_HEX_RE = re.compile(r"#[0-9A-F]{6}")


# =============================================================================
# Enums
# =============================================================================


class StrictnessLevel(Enum):
    """WCAG target selected for contrast checks."""

    AA_LARGE = "AALarge"
    AA_SMALL = "AASmall"
    AAA_LARGE = "AAALarge"
    AAA_SMALL = "AAASmall"


class PaletteType(Enum):
    """Palette families with different positional semantics."""

    CATEGORICAL = "categorical"
    SEQUENTIAL = "sequential"
    DIVERGING = "diverging"

    @property
    def is_gradient(self) -> bool:
        """True for palettes derived from editable key colors."""
        return self is not PaletteType.CATEGORICAL


class Mode(Enum):
    """Display mode a variant is designed for."""

    LIGHT = "light"
    DARK = "dark"

    @property
    def opposite(self) -> Mode:
        return Mode.DARK if self is Mode.LIGHT else Mode.LIGHT


def key_indices(palette_type: PaletteType, size: int = PALETTE_SIZE) -> tuple[int, ...]:
    """
    Positions of the editable key colors for a palette type.

    Sequential palettes are anchored at both ends, diverging palettes at both
    ends and the middle. Categorical palettes have no keys.
    """
    if palette_type is PaletteType.SEQUENTIAL:
        return (0, size - 1)
    if palette_type is PaletteType.DIVERGING:
        return (0, size // 2, size - 1)
    return ()


# =============================================================================
# Color Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class WCAGCompliance:
    """
    Pass/fail flags for the four WCAG contrast targets.

    Attributes:
        AALarge: ratio >= 3.0
        AASmall: ratio >= 4.5
        AAALarge: ratio >= 4.5
        AAASmall: ratio >= 7.0
    """
    AALarge: bool
    AASmall: bool
    AAALarge: bool
    AAASmall: bool

    def passes(self, level: StrictnessLevel) -> bool:
        """True if the flag for ``level`` is set."""
        return getattr(self, level.value)

    def to_dict(self) -> dict:
        return {
            "AALarge": self.AALarge,
            "AASmall": self.AASmall,
            "AAALarge": self.AAALarge,
            "AAASmall": self.AAASmall,
        }

    @classmethod
    def from_dict(cls, data: dict) -> WCAGCompliance:
        return cls(
            AALarge=data["AALarge"],
            AASmall=data["AASmall"],
            AAALarge=data["AAALarge"],
            AAASmall=data["AAASmall"],
        )


@dataclass(frozen=True, slots=True)
class ModeVariant:
    """
    One mode's rendition of a color.

    Attributes:
        hex: Normalized hex string like "#3941C8"
        contrast_ratio: WCAG contrast against this mode's background (1-21)
        compliance: WCAG flags derived from contrast_ratio
    """
    hex: str
    contrast_ratio: float
    compliance: WCAGCompliance

    def __post_init__(self) -> None:
        """Validate hex format and contrast range."""
        if not isinstance(self.hex, str) or not _HEX_RE.fullmatch(self.hex):
            raise ValueError(f"Hex must be normalized #RRGGBB, got {self.hex!r}")
        if not 1.0 <= self.contrast_ratio <= 21.0:
            raise ValueError(f"Contrast ratio must be 1-21, got {self.contrast_ratio}")

    def to_dict(self) -> dict:
        return {
            "hex": self.hex,
            "contrastRatio": self.contrast_ratio,
            "wcagCompliance": self.compliance.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> ModeVariant:
        return cls(
            hex=data["hex"],
            contrast_ratio=data["contrastRatio"],
            compliance=WCAGCompliance.from_dict(data["wcagCompliance"]),
        )


@dataclass(frozen=True, slots=True)
class Color:
    """
    A palette entry with coordinated light and dark variants.

    The variants need not share a hue. When one is derived from the other
    they keep a minimum perceptual separation, and each is checked against
    its own background.

    Attributes:
        name: Display name ("Color 1", "First", "Auto 3", ...)
        token: Design token label
        light: Variant for the light-mode background
        dark: Variant for the dark-mode background
        editable: True for gradient key colors
    """
    name: str
    token: str
    light: ModeVariant
    dark: ModeVariant
    editable: bool = False

    def variant(self, mode: Mode | str) -> ModeVariant:
        """Return the variant for ``mode`` ("light" / "dark" also accepted)."""
        return self.light if Mode(mode) is Mode.LIGHT else self.dark

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "token": self.token,
            "editable": self.editable,
            "light": self.light.to_dict(),
            "dark": self.dark.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> Color:
        return cls(
            name=data["name"],
            token=data["token"],
            light=ModeVariant.from_dict(data["light"]),
            dark=ModeVariant.from_dict(data["dark"]),
            editable=data.get("editable", False),
        )


@dataclass(frozen=True, slots=True)
class ContrastCheck:
    """Result of a one-off contrast check."""
    ratio: float
    compliance: WCAGCompliance

    def to_dict(self) -> dict:
        return {"ratio": self.ratio, "compliance": self.compliance.to_dict()}


# =============================================================================
# Palette
# =============================================================================


@dataclass(frozen=True, slots=True)
class Palette:
    """
    An ordered set of PALETTE_SIZE colors for one pair of backgrounds.

    Order matters: categorical order is display order, and gradient
    positions carry meaning (keys at key_indices, derived colors between).

    Attributes:
        id: Stable identifier, kept across regeneration
        name: Display name, kept across regeneration
        type: Palette family
        colors: Exactly PALETTE_SIZE colors
        light_background: Light-mode background hex
        dark_background: Dark-mode background hex
    """
    id: str
    name: str
    type: PaletteType
    colors: tuple[Color, ...]
    light_background: str
    dark_background: str

    def __post_init__(self) -> None:
        """Validate size and backgrounds."""
        if len(self.colors) != PALETTE_SIZE:
            raise ValueError(
                f"Palette must hold exactly {PALETTE_SIZE} colors, got {len(self.colors)}"
            )
        for bg in (self.light_background, self.dark_background):
            if not isinstance(bg, str) or not _HEX_RE.fullmatch(bg):
                raise ValueError(f"Background must be normalized #RRGGBB, got {bg!r}")

    @property
    def key_indices(self) -> tuple[int, ...]:
        """Editable positions for this palette's type."""
        return key_indices(self.type, len(self.colors))

    def background(self, mode: Mode | str) -> str:
        """Background hex for ``mode``."""
        return self.light_background if Mode(mode) is Mode.LIGHT else self.dark_background

    def hexes(self, mode: Mode | str) -> tuple[str, ...]:
        """All variant hexes for ``mode`` in palette order."""
        return tuple(c.variant(mode).hex for c in self.colors)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type.value,
            "colors": [c.to_dict() for c in self.colors],
            "lightModeBackground": self.light_background,
            "darkModeBackground": self.dark_background,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Palette:
        return cls(
            id=data["id"],
            name=data["name"],
            type=PaletteType(data["type"]),
            colors=tuple(Color.from_dict(c) for c in data["colors"]),
            light_background=data["lightModeBackground"],
            dark_background=data["darkModeBackground"],
        )
