"""
Linear RGB → XYZ (D65) → CIELAB.

XYZ values are on the 0..100 scale, matching the D65 reference white
below. The scalar functions operate on NamedTuples; the ``np_`` twins
operate on arrays whose last axis holds the three channels.
"""
import math
import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import XYZ, Lab
from .transfer import hex_to_linear_rgb

# sRGB primaries, D65 white point
SRGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
])

D65_WHITE = XYZ(95.047, 100.000, 108.883)

LAB_EPSILON = 216 / 24389  # ~0.008856
LAB_KAPPA = 24389 / 27     # ~903.3


def linear_rgb_to_xyz(linear: tuple[float, float, float]) -> XYZ:
    r, g, b = linear
    m = SRGB_TO_XYZ
    return XYZ(
        (m[0, 0] * r + m[0, 1] * g + m[0, 2] * b) * 100,
        (m[1, 0] * r + m[1, 1] * g + m[1, 2] * b) * 100,
        (m[2, 0] * r + m[2, 1] * g + m[2, 2] * b) * 100,
    )


def _lab_f(t: float) -> float:
    if t > LAB_EPSILON:
        return math.cbrt(t)
    return (LAB_KAPPA * t + 16) / 116


def xyz_to_lab(xyz: tuple[float, float, float], white: XYZ = D65_WHITE) -> Lab:
    X, Y, Z = xyz
    fx = _lab_f(X / white.X)
    fy = _lab_f(Y / white.Y)
    fz = _lab_f(Z / white.Z)
    return Lab(
        116 * fy - 16,
        500 * (fx - fy),
        200 * (fy - fz),
    )


def hex_to_lab(hex_color: str) -> Lab:
    """Convenience: hex → linear RGB → XYZ → Lab."""
    return xyz_to_lab(linear_rgb_to_xyz(hex_to_linear_rgb(hex_color)))


def np_linear_rgb_to_xyz(linear: NDArray) -> NDArray:
    """Vectorized: linear RGB ``(..., 3)`` → XYZ ``(..., 3)`` on the 0..100 scale."""
    linear = np.asarray(linear, dtype=float)
    return linear @ SRGB_TO_XYZ.T * 100


def np_xyz_to_lab(xyz: NDArray, white: XYZ = D65_WHITE) -> NDArray:
    """Vectorized: XYZ ``(..., 3)`` → Lab ``(..., 3)``."""
    xyz = np.asarray(xyz, dtype=float)
    t = xyz / np.asarray(white, dtype=float)
    f = np.where(t > LAB_EPSILON, np.cbrt(t), (LAB_KAPPA * t + 16) / 116)
    fx, fy, fz = f[..., 0], f[..., 1], f[..., 2]
    return np.stack([116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz)], axis=-1)


def delta_e76(lab1: tuple[float, float, float], lab2: tuple[float, float, float]) -> float:
    """CIE76 color difference: Euclidean distance in Lab."""
    return math.dist(lab1, lab2)
