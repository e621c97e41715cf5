import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import LinearRGB
from .hex_rgb import hex_to_rgb, rgb_to_hex

# sRGB piecewise transfer function constants
SRGB_DECODE_THRESHOLD = 0.04045
SRGB_ENCODE_THRESHOLD = 0.0031308
SRGB_GAMMA = 2.4


def srgb_to_linear(c: float) -> float:
    """Convert nonlinear sRGB (0..1) to linear-light RGB."""
    if c <= SRGB_DECODE_THRESHOLD:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** SRGB_GAMMA

def linear_to_srgb(c: float) -> float:
    """Convert linear-light RGB (0..1) to nonlinear sRGB."""
    if c <= SRGB_ENCODE_THRESHOLD:
        return 12.92 * c
    return 1.055 * (c ** (1 / SRGB_GAMMA)) - 0.055

def np_srgb_to_linear(c: NDArray) -> NDArray:
    """Vectorized: Convert nonlinear sRGB (0..1) to linear-light RGB."""
    c = np.asarray(c, dtype=float)
    result = np.where(
        c <= SRGB_DECODE_THRESHOLD,
        c / 12.92,
        ((np.maximum(c, SRGB_DECODE_THRESHOLD) + 0.055) / 1.055) ** SRGB_GAMMA
    )
    return result

def np_linear_to_srgb(c: NDArray) -> NDArray:
    """Vectorized: Convert linear-light RGB (0..1) to nonlinear sRGB."""
    c = np.asarray(c, dtype=float)
    result = np.where(
        c <= SRGB_ENCODE_THRESHOLD,
        12.92 * c,
        1.055 * (np.maximum(c, SRGB_ENCODE_THRESHOLD) ** (1 / SRGB_GAMMA)) - 0.055
    )
    return result


def hex_to_linear_rgb(hex_color: str) -> LinearRGB:
    """Decode a hex color to linear RGB, channels in 0..1."""
    r, g, b = hex_to_rgb(hex_color)
    return LinearRGB(
        srgb_to_linear(r / 255),
        srgb_to_linear(g / 255),
        srgb_to_linear(b / 255),
    )

def linear_rgb_to_hex(linear: tuple[float, float, float]) -> str:
    """Encode linear RGB (0..1) back to an 8-bit hex color."""
    return rgb_to_hex(tuple(round(255 * linear_to_srgb(c)) for c in linear))
