# Copyright (c) 2026 Dualchroma
# SPDX-License-Identifier: MIT

"""
Color space conversions and perceptual measures.

Conversion chain: hex → sRGB → Linear RGB → XYZ (D65) → CIE L*a*b* → LCH

HSL is used as the editing space (hue rotation, lightness sweeps), LAB for
perceptual distance and LCH for gradient interpolation.

References:
- WCAG 2.x relative luminance and contrast ratio:
  https://www.w3.org/TR/WCAG21/#dfn-contrast-ratio
- CIE L*a*b*: CIE 15:2004, D65 reference white
"""

from __future__ import annotations

import colorsys
import re

import numpy as np
from numpy.typing import NDArray

from dualchroma.errors import InvalidColorFormat


# =============================================================================
# Hex parsing
# =============================================================================

_HEX_RE = re.compile(r"#?([0-9a-fA-F]{6}|[0-9a-fA-F]{3})")


def parse_hex(hex_color: str) -> str:
    """
    Validate and normalize a hex color.

    Accepts "#RRGGBB", "RRGGBB", "#RGB" and "RGB" in any letter case.

    Returns:
        Uppercase "#RRGGBB"

    Raises:
        InvalidColorFormat: If the input is not a hex color string
    """
    if not isinstance(hex_color, str):
        raise InvalidColorFormat(f"Expected hex string, got {type(hex_color).__name__}")
    m = _HEX_RE.fullmatch(hex_color.strip())
    if not m:
        raise InvalidColorFormat(f"Malformed hex color: {hex_color!r}")
    digits = m.group(1)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return f"#{digits.upper()}"


def hex_to_srgb(hex_color: str) -> NDArray[np.float64]:
    """Convert a hex color to sRGB values in [0, 1], shape (3,)."""
    digits = parse_hex(hex_color)[1:]
    return np.array(
        [int(digits[i:i + 2], 16) for i in (0, 2, 4)],
        dtype=np.float64,
    ) / 255.0


def srgb_to_hex(srgb: NDArray[np.float64]) -> str:
    """Convert sRGB [0, 1] to hex. Out-of-gamut values are clipped."""
    srgb = np.clip(np.asarray(srgb, dtype=np.float64), 0.0, 1.0)
    r, g, b = (srgb * 255).round().astype(int)
    return f"#{r:02X}{g:02X}{b:02X}"


# =============================================================================
# sRGB ↔ Linear RGB
# =============================================================================


def srgb_to_linear(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB values [0,1] to linear RGB.

    sRGB uses a piecewise gamma curve:
    - For values <= 0.04045: linear/12.92
    - For values > 0.04045: ((value + 0.055) / 1.055) ^ 2.4
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    return np.where(
        srgb <= 0.04045,
        srgb / 12.92,
        np.power((srgb + 0.055) / 1.055, 2.4)
    )


def linear_to_srgb(linear: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert linear RGB to sRGB values [0,1]. Inverse of srgb_to_linear."""
    linear = np.asarray(linear, dtype=np.float64)
    # Clip negative values to avoid NaN in power function
    linear_safe = np.maximum(linear, 0.0)
    srgb = np.where(
        linear_safe <= 0.0031308,
        linear_safe * 12.92,
        1.055 * np.power(linear_safe, 1.0 / 2.4) - 0.055
    )
    return np.clip(srgb, 0.0, 1.0)


# =============================================================================
# Linear RGB ↔ XYZ ↔ LAB
# =============================================================================

# sRGB primaries, D65
_RGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
], dtype=np.float64)

_XYZ_TO_RGB = np.linalg.inv(_RGB_TO_XYZ)

_WHITE_D65 = np.array([0.95047, 1.00000, 1.08883], dtype=np.float64)

_DELTA = 6.0 / 29.0

# Below this chroma a LAB color has no meaningful hue
ACHROMATIC_CHROMA = 1e-3

# WCAG luminance weights (Rec. 709)
_LUMINANCE_WEIGHTS = np.array([0.2126, 0.7152, 0.0722], dtype=np.float64)


def linear_rgb_to_xyz(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert linear RGB, shape (..., 3), to XYZ with Y in [0, 1]."""
    rgb = np.asarray(rgb, dtype=np.float64)
    return np.einsum('...j,ij->...i', rgb, _RGB_TO_XYZ)


def xyz_to_linear_rgb(xyz: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert XYZ, shape (..., 3), to linear RGB (may be out of gamut)."""
    xyz = np.asarray(xyz, dtype=np.float64)
    return np.einsum('...j,ij->...i', xyz, _XYZ_TO_RGB)


def xyz_to_lab(xyz: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert XYZ to CIE L*a*b* (D65).

    Args:
        xyz: Array of shape (..., 3), Y normalized to [0, 1]

    Returns:
        Array of shape (..., 3) with L in [0, 100]
    """
    t = np.asarray(xyz, dtype=np.float64) / _WHITE_D65
    f = np.where(t > _DELTA ** 3, np.cbrt(t), t / (3 * _DELTA ** 2) + 4.0 / 29.0)

    L = 116.0 * f[..., 1] - 16.0
    a = 500.0 * (f[..., 0] - f[..., 1])
    b = 200.0 * (f[..., 1] - f[..., 2])

    return np.stack([L, a, b], axis=-1)


def lab_to_xyz(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert CIE L*a*b* (D65) to XYZ. Inverse of xyz_to_lab."""
    lab = np.asarray(lab, dtype=np.float64)

    fy = (lab[..., 0] + 16.0) / 116.0
    fx = fy + lab[..., 1] / 500.0
    fz = fy - lab[..., 2] / 200.0

    f = np.stack([fx, fy, fz], axis=-1)
    t = np.where(f > _DELTA, f ** 3, 3 * _DELTA ** 2 * (f - 4.0 / 29.0))

    return t * _WHITE_D65


def srgb_to_lab(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """Full chain: sRGB [0,1] → Linear RGB → XYZ → LAB."""
    return xyz_to_lab(linear_rgb_to_xyz(srgb_to_linear(srgb)))


def lab_to_srgb(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """Full chain: LAB → XYZ → Linear RGB → sRGB [0,1], clipped to gamut."""
    return linear_to_srgb(xyz_to_linear_rgb(lab_to_xyz(lab)))


def hex_to_lab(hex_color: str) -> NDArray[np.float64]:
    """Convert a hex color to LAB, shape (3,)."""
    return srgb_to_lab(hex_to_srgb(hex_color))


def lab_to_hex(lab: NDArray[np.float64]) -> str:
    """Convert a LAB triple to hex, clipping to the sRGB gamut."""
    return srgb_to_hex(lab_to_srgb(lab))


# =============================================================================
# LAB ↔ LCH
# =============================================================================


def lab_to_lch(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert LAB to LCH (cylindrical coordinates).

    Returns:
        Array of shape (..., 3) with (L, C, H), H in degrees [0, 360)
    """
    lab = np.asarray(lab, dtype=np.float64)

    L = lab[..., 0]
    a = lab[..., 1]
    b = lab[..., 2]

    C = np.sqrt(a**2 + b**2)
    H = np.degrees(np.arctan2(b, a)) % 360.0

    return np.stack([L, C, H], axis=-1)


def lch_to_lab(lch: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert LCH (H in degrees) to LAB."""
    lch = np.asarray(lch, dtype=np.float64)

    L = lch[..., 0]
    C = lch[..., 1]
    H_rad = np.radians(lch[..., 2])

    return np.stack([L, C * np.cos(H_rad), C * np.sin(H_rad)], axis=-1)


def hex_to_lch(hex_color: str) -> NDArray[np.float64]:
    """Convert a hex color to LCH, shape (3,)."""
    return lab_to_lch(hex_to_lab(hex_color))


def lch_to_hex(lch: NDArray[np.float64]) -> str:
    """Convert an LCH triple to hex, clipping to the sRGB gamut."""
    return lab_to_hex(lch_to_lab(lch))


# =============================================================================
# HSL
# =============================================================================


def hex_to_hsl(hex_color: str) -> tuple[float, float, float]:
    """
    Convert a hex color to HSL.

    Returns:
        (hue in degrees [0, 360), saturation [0, 1], lightness [0, 1]).
        Achromatic colors report hue 0.
    """
    r, g, b = hex_to_srgb(hex_color)
    h, l, s = colorsys.rgb_to_hls(float(r), float(g), float(b))
    return (h * 360.0) % 360.0, s, l


def hsl_to_hex(hue: float, saturation: float, lightness: float) -> str:
    """
    Convert HSL to hex.

    Hue wraps modulo 360; saturation and lightness are clamped to [0, 1].
    """
    h = (hue % 360.0) / 360.0
    s = min(1.0, max(0.0, saturation))
    l = min(1.0, max(0.0, lightness))
    r, g, b = colorsys.hls_to_rgb(h, l, s)
    return srgb_to_hex(np.array([r, g, b], dtype=np.float64))


# =============================================================================
# Luminance & Contrast
# =============================================================================


def relative_luminance(hex_color: str) -> float:
    """WCAG relative luminance in [0, 1]."""
    linear = srgb_to_linear(hex_to_srgb(hex_color))
    return float(np.clip(np.dot(_LUMINANCE_WEIGHTS, linear), 0.0, 1.0))


def contrast_ratio(color_a: str, color_b: str) -> float:
    """
    WCAG contrast ratio between two colors.

    Symmetric in its arguments, always in [1, 21].
    """
    la = relative_luminance(color_a)
    lb = relative_luminance(color_b)
    ratio = (max(la, lb) + 0.05) / (min(la, lb) + 0.05)
    return float(min(21.0, max(1.0, ratio)))


# =============================================================================
# Perceptual distance
# =============================================================================


def lab_distance(color_a: str, color_b: str) -> float:
    """
    Perceptual distance between two hex colors.

    Euclidean distance in CIE L*a*b*. Reference thresholds:
    - ~2.3: just noticeable difference
    - 40: distinct enough for categorical data
    - 50+: clearly different (light/dark mode pairs)
    """
    delta = hex_to_lab(color_a) - hex_to_lab(color_b)
    return float(np.sqrt(np.sum(delta ** 2)))


def lab_distance_matrix(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """Pairwise LAB distances for an (N, 3) array, shape (N, N)."""
    lab = np.asarray(lab, dtype=np.float64)
    diff = lab[:, np.newaxis, :] - lab[np.newaxis, :, :]
    return np.sqrt(np.sum(diff ** 2, axis=2))


# =============================================================================
# Adjustments
# =============================================================================

# LAB lightness shift per unit of darken/brighten
_LIGHTNESS_STEP = 18.0

# LCH chroma shift per unit of saturate
_CHROMA_STEP = 18.0


def darken(hex_color: str, amount: float = 1.0) -> str:
    """Lower LAB lightness by 18 units per ``amount``."""
    lab = hex_to_lab(hex_color)
    lab[0] -= _LIGHTNESS_STEP * amount
    return lab_to_hex(lab)


def brighten(hex_color: str, amount: float = 1.0) -> str:
    """Raise LAB lightness by 18 units per ``amount``."""
    return darken(hex_color, -amount)


def saturate(hex_color: str, amount: float = 1.0) -> str:
    """Raise LCH chroma by 18 units per ``amount``, clipping to the sRGB gamut."""
    lch = hex_to_lch(hex_color)
    lch[1] = max(0.0, lch[1] + _CHROMA_STEP * amount)
    return lch_to_hex(lch)


def rotate_hue(hex_color: str, degrees: float) -> str:
    """Rotate the HSL hue, keeping saturation and lightness."""
    h, s, l = hex_to_hsl(hex_color)
    return hsl_to_hex(h + degrees, s, l)


# =============================================================================
# LCH interpolation
# =============================================================================


def lch_scale(start: str, end: str, steps: int) -> list[str]:
    """
    Interpolate ``steps`` colors from ``start`` to ``end`` in LCH.

    Lightness and chroma move linearly; hue follows the shorter arc. An
    achromatic endpoint takes the hue of the other endpoint so grays blend
    without a hue swing. The endpoints are returned exactly as given
    (normalized).

    Args:
        start: First hex color
        end: Last hex color
        steps: Number of colors, at least 2

    Returns:
        List of ``steps`` hex strings
    """
    if steps < 2:
        raise ValueError(f"steps must be >= 2, got {steps}")

    start = parse_hex(start)
    end = parse_hex(end)

    L0, C0, H0 = hex_to_lch(start)
    L1, C1, H1 = hex_to_lch(end)

    gray0 = C0 < ACHROMATIC_CHROMA
    gray1 = C1 < ACHROMATIC_CHROMA
    if gray0 and gray1:
        H0 = H1 = 0.0
    elif gray0:
        H0 = H1
    elif gray1:
        H1 = H0

    dH = ((H1 - H0 + 180.0) % 360.0) - 180.0

    t = np.linspace(0.0, 1.0, steps)
    lch = np.stack([
        L0 + t * (L1 - L0),
        C0 + t * (C1 - C0),
        (H0 + t * dH) % 360.0,
    ], axis=-1)

    srgb = lab_to_srgb(lch_to_lab(lch))
    colors = [srgb_to_hex(row) for row in srgb]
    colors[0] = start
    colors[-1] = end
    return colors
