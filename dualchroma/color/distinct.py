# Copyright (c) 2026 Dualchroma
# SPDX-License-Identifier: MIT

"""
Distinct color set generation using k-means clustering in LAB.

Pipeline:
1. Candidate pool: golden-angle hue stepping with randomized saturation
   and lightness, so hues are spread evenly without a fixed grid
2. K-means over the pool in L*a*b*: centers land in well-separated
   regions of the perceptual space
3. Greedy max-min ordering: adjacent colors in the palette are as far
   apart as possible
4. Per-mode contrast correction against each background
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from dualchroma.color.colorspace import (
    hsl_to_hex,
    hex_to_lab,
    lab_distance_matrix,
    lab_to_hex,
)
from dualchroma.color.optimize import optimize_for_background
from dualchroma.config import GeneratorConfig, resolve_rng

logger = logging.getLogger(__name__)

GOLDEN_ANGLE = 137.508

_SATURATION_RANGE = (0.75, 0.90)
_LIGHTNESS_RANGE = (0.45, 0.60)

# Weights for the max-min ordering score
_LAST_PLACED_WEIGHT = 0.7
_REMAINING_WEIGHT = 0.3


def golden_angle_candidates(
    n_candidates: int,
    rng: np.random.Generator,
) -> tuple[NDArray[np.float64], list[str]]:
    """
    Build a candidate pool with golden-angle hue stepping.

    Candidate i has hue ``i * 137.508 mod 360``, saturation drawn from
    [0.75, 0.90] and lightness from [0.45, 0.60].

    Args:
        n_candidates: Pool size
        rng: Random source for saturation/lightness

    Returns:
        (lab, hexes) where lab has shape (n_candidates, 3)
    """
    hues = (np.arange(n_candidates) * GOLDEN_ANGLE) % 360.0
    sats = rng.uniform(*_SATURATION_RANGE, size=n_candidates)
    lights = rng.uniform(*_LIGHTNESS_RANGE, size=n_candidates)

    hexes = [hsl_to_hex(h, s, l) for h, s, l in zip(hues, sats, lights)]
    lab = np.array([hex_to_lab(h) for h in hexes], dtype=np.float64)
    return lab, hexes


def kmeans_lab(
    data: NDArray[np.float64],
    k: int,
    rng: np.random.Generator,
    max_iter: int = 50,
    tolerance: float = 0.1,
) -> NDArray[np.float64]:
    """
    Vectorized k-means over LAB points.

    Centers start at k distinct points chosen at random. Each iteration
    assigns points to their nearest center and moves each center to its
    cluster mean; a cluster that loses all its points keeps its previous
    center. Stops once no center moves more than ``tolerance`` or after
    ``max_iter`` iterations. A local optimum is accepted as is.

    Args:
        data: Array of shape (N, 3)
        k: Number of clusters, at most N
        rng: Random source for initialization
        max_iter: Maximum iterations
        tolerance: Convergence threshold in LAB units

    Returns:
        (k, 3) array of cluster centers
    """
    data = np.asarray(data, dtype=np.float64)
    n = len(data)
    if k < 1 or k > n:
        raise ValueError(f"k must be in [1, {n}], got {k}")

    # Random non-repeating initialization
    centers = data[rng.choice(n, size=k, replace=False)].copy()

    for iteration in range(max_iter):
        # (N, k) squared distances via broadcasting
        dists = np.sum(
            (data[:, np.newaxis, :] - centers[np.newaxis, :, :]) ** 2,
            axis=2
        )
        labels = np.argmin(dists, axis=1)

        new_centers = centers.copy()
        for j in range(k):
            mask = labels == j
            if np.any(mask):
                new_centers[j] = data[mask].mean(axis=0)

        shift = np.sqrt(np.sum((new_centers - centers) ** 2, axis=1)).max()
        centers = new_centers

        if shift <= tolerance:
            logger.debug("k-means converged after %d iterations", iteration + 1)
            break

    return centers


def order_max_min(hexes: list[str]) -> list[str]:
    """
    Reorder colors so neighbors are far apart.

    Starts with the first color, then repeatedly places the unplaced
    candidate maximizing::

        0.7 * d(candidate, last placed) + 0.3 * min d(candidate, other unplaced)

    The second term is 0 when no other candidate remains.
    """
    if len(hexes) < 3:
        return list(hexes)

    dist = lab_distance_matrix(np.array([hex_to_lab(h) for h in hexes]))

    order = [0]
    unplaced = list(range(1, len(hexes)))

    while unplaced:
        last = order[-1]
        best_idx = unplaced[0]
        best_score = -np.inf
        for cand in unplaced:
            others = [o for o in unplaced if o != cand]
            spread = dist[cand, others].min() if others else 0.0
            score = _LAST_PLACED_WEIGHT * dist[cand, last] + _REMAINING_WEIGHT * spread
            if score > best_score:
                best_score = score
                best_idx = cand
        order.append(best_idx)
        unplaced.remove(best_idx)

    return [hexes[i] for i in order]


def generate_distinct_hexes(
    count: int,
    rng: Optional[np.random.Generator] = None,
    config: Optional[GeneratorConfig] = None,
) -> list[str]:
    """
    Generate ``count`` mutually distant base colors.

    Args:
        count: Number of colors
        rng: Random source (a fresh system-seeded one if None)
        config: Pool size and k-means settings

    Returns:
        ``count`` hex strings in max-min order
    """
    cfg = config or GeneratorConfig()
    rng = resolve_rng(rng)

    lab, _ = golden_angle_candidates(count * cfg.candidates_per_color, rng)
    centers = kmeans_lab(
        lab,
        k=count,
        rng=rng,
        max_iter=cfg.kmeans_max_iter,
        tolerance=cfg.kmeans_tolerance,
    )
    return order_max_min([lab_to_hex(c) for c in centers])


def generate_distinct_colors(
    count: int,
    light_background: str,
    dark_background: str,
    target_contrast: float,
    rng: Optional[np.random.Generator] = None,
    config: Optional[GeneratorConfig] = None,
) -> list[tuple[str, str]]:
    """
    Generate ``count`` distinct colors, each corrected for both modes.

    Returns:
        List of (light_hex, dark_hex) pairs in max-min order
    """
    bases = generate_distinct_hexes(count, rng=rng, config=config)
    return [
        (
            optimize_for_background(base, light_background, target_contrast),
            optimize_for_background(base, dark_background, target_contrast),
        )
        for base in bases
    ]
