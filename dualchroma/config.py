# Copyright (c) 2026 Dualchroma
# SPDX-License-Identifier: MIT

"""
Generator configuration and random source handling.

All thresholds are CIE L*a*b* Euclidean distances (0-100 lightness scale).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np


CATEGORICAL_STRATEGIES = ("clustered", "seeded")


@dataclass(frozen=True)
class GeneratorConfig:
    """Tunable thresholds and search caps for palette generation."""

    # Minimum LAB distance for two colors to count as distinct
    min_perceptual_distance: float = 40.0

    # Light/dark pairs are compared side by side, so they need more room
    dual_mode_distance: float = 50.0

    # Sequential/diverging key colors anchor whole gradients
    key_color_distance: float = 60.0

    # Candidate pool size per output color for clustering
    candidates_per_color: int = 20

    # K-means stopping rules
    kmeans_max_iter: int = 50
    kmeans_tolerance: float = 0.1  # LAB units

    # Dual-mode joint search cap (hue offsets x lightness steps)
    joint_search_max_attempts: int = 100

    # Seeded categorical fallback synthesis
    synthesis_max_attempts: int = 300
    synthesis_relax_every: int = 100
    synthesis_relax_factor: float = 0.5
    allow_relaxed_floor: bool = True

    # "clustered" (k-means over golden-angle candidates) or "seeded"
    categorical_strategy: str = "clustered"

    def __post_init__(self) -> None:
        """Validate thresholds and caps."""
        for name in ("min_perceptual_distance", "dual_mode_distance", "key_color_distance"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0, got {getattr(self, name)}")
        for name in (
            "candidates_per_color",
            "kmeans_max_iter",
            "joint_search_max_attempts",
            "synthesis_max_attempts",
            "synthesis_relax_every",
        ):
            if getattr(self, name) < 1:
                raise ValueError(f"{name} must be >= 1, got {getattr(self, name)}")
        if not 0.0 < self.synthesis_relax_factor < 1.0:
            raise ValueError(
                f"synthesis_relax_factor must be in (0, 1), got {self.synthesis_relax_factor}"
            )
        if self.categorical_strategy not in CATEGORICAL_STRATEGIES:
            raise ValueError(
                f"categorical_strategy must be one of {CATEGORICAL_STRATEGIES}, "
                f"got {self.categorical_strategy!r}"
            )


def resolve_rng(
    rng: Optional[np.random.Generator] = None,
    seed: Optional[int] = None,
) -> np.random.Generator:
    """
    Return the injected generator, or a new one seeded with ``seed``.

    With both arguments None the generator draws from system entropy.
    """
    if rng is not None:
        return rng
    return np.random.default_rng(seed)
