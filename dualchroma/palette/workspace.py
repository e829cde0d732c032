# Copyright (c) 2026 Dualchroma
# SPDX-License-Identifier: MIT

"""
Palette workspace: the single writer over palette state.

Every mutating call runs under one lock, computes the complete new Palette
(including cascades such as dual-mode derivation and gradient rebuilds)
and only then swaps it into the store. Rejected calls raise before the swap,
so state is never partially updated. Palettes are immutable, so readers
always see a consistent value.

Every mutating call returns the updated Palette; notifying a UI is left to
the caller.
"""

from __future__ import annotations

import logging
import operator
import threading
from dataclasses import replace
from typing import Optional

import numpy as np

from dualchroma.schema import (
    ContrastCheck,
    Mode,
    Palette,
    PaletteType,
    StrictnessLevel,
)
from dualchroma.color.colorspace import parse_hex
from dualchroma.color.compliance import (
    build_variant,
    check_contrast,
    coerce_level,
    target_contrast_for,
)
from dualchroma.color.dual_mode import coerce_mode, derive_dual_mode_pair
from dualchroma.color.gradient import regenerate_derived
from dualchroma.config import GeneratorConfig, resolve_rng
from dualchroma.errors import IndexOutOfBounds, InvalidPaletteOperation
from dualchroma.palette.assemble import (
    DEFAULT_DARK_BACKGROUND,
    DEFAULT_LIGHT_BACKGROUND,
    coerce_palette_type,
    generate_palette,
)
from dualchroma.palette.tokens import DEFAULT_TOKEN_PREFIX, retokenize, slugify

logger = logging.getLogger(__name__)


class PaletteWorkspace:
    """
    Holds palettes and applies edits one at a time.

    Args:
        light_background: Default light-mode background
        dark_background: Default dark-mode background
        strictness: Active WCAG target
        token_prefix: Prefix for generated tokens
        seed: Seed for the workspace random source (None for system entropy)
        rng: Random source to use instead of a seeded one
        config: Generator thresholds and search caps

    Example:
        >>> ws = PaletteWorkspace(seed=7)
        >>> p = ws.generate_palette("sequential")
        >>> p = ws.edit_color_hex(p.id, 0, "#FFEB3B", "light")
        >>> p.colors[0].light.hex
        '#FFEB3B'
    """

    def __init__(
        self,
        light_background: str = DEFAULT_LIGHT_BACKGROUND,
        dark_background: str = DEFAULT_DARK_BACKGROUND,
        strictness: StrictnessLevel | str = StrictnessLevel.AA_LARGE,
        token_prefix: str = DEFAULT_TOKEN_PREFIX,
        *,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
        config: Optional[GeneratorConfig] = None,
    ) -> None:
        self._light_background = parse_hex(light_background)
        self._dark_background = parse_hex(dark_background)
        self._strictness = coerce_level(strictness)
        self._token_prefix = token_prefix
        self._rng = resolve_rng(rng, seed)
        self._config = config or GeneratorConfig()
        self._palettes: dict[str, Palette] = {}
        self._lock = threading.RLock()

    # -------------------------------------------------------------------------
    # Settings and reads
    # -------------------------------------------------------------------------

    @property
    def light_background(self) -> str:
        return self._light_background

    @property
    def dark_background(self) -> str:
        return self._dark_background

    @property
    def strictness(self) -> StrictnessLevel:
        return self._strictness

    @property
    def token_prefix(self) -> str:
        return self._token_prefix

    @property
    def palettes(self) -> tuple[Palette, ...]:
        """Snapshot of all palettes in creation order."""
        with self._lock:
            return tuple(self._palettes.values())

    def get_palette(self, palette_id: str) -> Palette:
        """
        Raises:
            IndexOutOfBounds: If no palette has ``palette_id``
        """
        with self._lock:
            return self._require(palette_id)

    def check_contrast(self, hex_color: str, background: str) -> ContrastCheck:
        """Contrast ratio and WCAG flags of ``hex_color`` on ``background``."""
        return check_contrast(hex_color, background)

    # -------------------------------------------------------------------------
    # Generation
    # -------------------------------------------------------------------------

    def generate_palette(
        self,
        palette_type: PaletteType | str,
        light_background: Optional[str] = None,
        dark_background: Optional[str] = None,
        strictness: Optional[StrictnessLevel | str] = None,
    ) -> Palette:
        """Generate a new palette and add it to the workspace."""
        with self._lock:
            palette = self._build(palette_type, light_background, dark_background, strictness)
            self._palettes[palette.id] = palette
            return palette

    def generate_all(self) -> tuple[Palette, ...]:
        """Generate one palette of each type with the current settings."""
        with self._lock:
            return tuple(self.generate_palette(t) for t in PaletteType)

    def regenerate_palette(
        self,
        palette_id: str,
        palette_type: Optional[PaletteType | str] = None,
        light_background: Optional[str] = None,
        dark_background: Optional[str] = None,
        strictness: Optional[StrictnessLevel | str] = None,
    ) -> Palette:
        """
        Replace a palette with freshly generated colors.

        The id and name are kept. Type and backgrounds default to the
        palette's own; strictness defaults to the workspace setting.
        """
        with self._lock:
            old = self._require(palette_id)
            palette = self._build(
                palette_type or old.type,
                light_background or old.light_background,
                dark_background or old.dark_background,
                strictness,
                palette_id=old.id,
                name=old.name,
            )
            self._palettes[palette_id] = palette
            return palette

    def remove_palette(self, palette_id: str) -> Palette:
        """Remove and return a palette."""
        with self._lock:
            self._require(palette_id)
            return self._palettes.pop(palette_id)

    def set_backgrounds(self, light_background: str, dark_background: str) -> tuple[Palette, ...]:
        """Change both backgrounds and regenerate every palette for them."""
        light_background = parse_hex(light_background)
        dark_background = parse_hex(dark_background)
        with self._lock:
            rebuilt = self._regenerate_all(light_background, dark_background, self._strictness)
            self._light_background = light_background
            self._dark_background = dark_background
            self._palettes.update(rebuilt)
            return tuple(self._palettes.values())

    def set_strictness(self, strictness: StrictnessLevel | str) -> tuple[Palette, ...]:
        """Change the WCAG target and regenerate every palette."""
        strictness = coerce_level(strictness)
        with self._lock:
            rebuilt = self._regenerate_all(None, None, strictness)
            self._strictness = strictness
            self._palettes.update(rebuilt)
            return tuple(self._palettes.values())

    def set_token_prefix(self, prefix: str) -> tuple[Palette, ...]:
        """Change the token prefix and re-derive every token."""
        with self._lock:
            self._token_prefix = prefix
            for palette_id, palette in list(self._palettes.items()):
                self._palettes[palette_id] = retokenize(palette, prefix)
            return tuple(self._palettes.values())

    # -------------------------------------------------------------------------
    # Edits
    # -------------------------------------------------------------------------

    def edit_color_hex(
        self,
        palette_id: str,
        color_index: int,
        hex_color: str,
        mode: Mode | str = Mode.LIGHT,
    ) -> Palette:
        """
        Set one mode's hex and derive the other mode's counterpart.

        Categorical colors get a counterpart at least ``dual_mode_distance``
        away. Gradient palettes accept edits at key positions only; the
        counterpart uses ``key_color_distance`` and every derived position
        is rebuilt from the new keys.

        Raises:
            InvalidColorFormat: If ``hex_color`` is malformed
            IndexOutOfBounds: If the palette or index does not exist
            InvalidPaletteOperation: If the position is a derived gradient color
        """
        hex_color = parse_hex(hex_color)
        mode = coerce_mode(mode)

        with self._lock:
            palette = self._require(palette_id)
            color_index = self._check_index(palette, color_index)

            is_gradient = palette.type.is_gradient
            if is_gradient and color_index not in palette.key_indices:
                raise InvalidPaletteOperation(
                    f"Position {color_index} of a {palette.type.value} palette is derived; "
                    f"editable positions are {palette.key_indices}"
                )

            pair = derive_dual_mode_pair(
                hex_color,
                mode,
                palette.light_background,
                palette.dark_background,
                target_contrast_for(self._strictness),
                key_color=is_gradient,
                config=self._config,
            )

            color = palette.colors[color_index]
            colors = list(palette.colors)
            colors[color_index] = replace(
                color,
                light=build_variant(pair.light, palette.light_background),
                dark=build_variant(pair.dark, palette.dark_background),
            )
            updated = replace(palette, colors=tuple(colors))

            if is_gradient:
                updated = regenerate_derived(updated)

            logger.debug(
                "Edited %s[%d] (%s): light=%s dark=%s",
                palette.type.value, color_index, mode.value, pair.light, pair.dark,
            )
            self._palettes[palette_id] = updated
            return updated

    def edit_color_name(self, palette_id: str, color_index: int, name: str) -> Palette:
        """Rename a color; its token becomes the name's slug."""
        with self._lock:
            palette = self._require(palette_id)
            color_index = self._check_index(palette, color_index)

            colors = list(palette.colors)
            colors[color_index] = replace(colors[color_index], name=name, token=slugify(name))
            updated = replace(palette, colors=tuple(colors))
            self._palettes[palette_id] = updated
            return updated

    def edit_palette_name(self, palette_id: str, name: str) -> Palette:
        """Rename a palette. Tokens are not changed."""
        with self._lock:
            updated = replace(self._require(palette_id), name=name)
            self._palettes[palette_id] = updated
            return updated

    def reorder_color(self, palette_id: str, from_index: int, to_index: int) -> Palette:
        """
        Move a categorical color from one position to another.

        Raises:
            IndexOutOfBounds: If the palette or either index does not exist
            InvalidPaletteOperation: If the palette is not categorical
        """
        with self._lock:
            palette = self._require(palette_id)
            from_index = self._check_index(palette, from_index)
            to_index = self._check_index(palette, to_index)
            if palette.type is not PaletteType.CATEGORICAL:
                raise InvalidPaletteOperation(
                    f"Only categorical palettes can be reordered, got {palette.type.value}"
                )

            colors = list(palette.colors)
            moved = colors.pop(from_index)
            colors.insert(to_index, moved)
            updated = replace(palette, colors=tuple(colors))
            self._palettes[palette_id] = updated
            return updated

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _require(self, palette_id: str) -> Palette:
        try:
            return self._palettes[palette_id]
        except KeyError:
            raise IndexOutOfBounds(f"No palette with id {palette_id!r}") from None

    @staticmethod
    def _check_index(palette: Palette, index: int) -> int:
        """Return ``index`` as a plain int if it addresses a color of ``palette``."""
        size = len(palette.colors)
        if isinstance(index, bool):
            raise IndexOutOfBounds(f"Color index must be an integer, got {index!r}")
        try:
            position = operator.index(index)
        except TypeError:
            raise IndexOutOfBounds(f"Color index must be an integer, got {index!r}") from None
        if not 0 <= position < size:
            raise IndexOutOfBounds(f"Color index {position} out of range for {size} colors")
        return position

    def _build(
        self,
        palette_type: PaletteType | str,
        light_background: Optional[str],
        dark_background: Optional[str],
        strictness: Optional[StrictnessLevel | str],
        palette_id: Optional[str] = None,
        name: Optional[str] = None,
    ) -> Palette:
        return generate_palette(
            coerce_palette_type(palette_type),
            light_background or self._light_background,
            dark_background or self._dark_background,
            strictness if strictness is not None else self._strictness,
            rng=self._rng,
            config=self._config,
            token_prefix=self._token_prefix,
            palette_id=palette_id,
            name=name,
        )

    def _regenerate_all(
        self,
        light_background: Optional[str],
        dark_background: Optional[str],
        strictness: StrictnessLevel,
    ) -> dict[str, Palette]:
        """Rebuild every palette without storing anything; callers commit the result."""
        return {
            palette_id: self._build(
                old.type,
                light_background or old.light_background,
                dark_background or old.dark_background,
                strictness,
                palette_id=old.id,
                name=old.name,
            )
            for palette_id, old in self._palettes.items()
        }
