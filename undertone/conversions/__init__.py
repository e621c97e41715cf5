"""
Undertone Color Conversions
===========================

Scalar and vectorized (numpy) conversions between the color spaces the
undertone pipeline walks through.

Conversion Functions
-------------------

Hex ↔ RGB:
    sanitize_hex(hex)
        Validate and normalize to bare lowercase digits
    hex_to_rgb(hex) / rgb_to_hex(rgb)
        8-bit channel parsing and formatting (3-digit shorthand accepted)

sRGB ↔ Linear:
    srgb_to_linear(c) / linear_to_srgb(c)
        Piecewise sRGB transfer function, per channel in 0..1
    np_srgb_to_linear(c) / np_linear_to_srgb(c)
        Vectorized versions
    hex_to_linear_rgb(hex) / linear_rgb_to_hex(lin)

Linear → XYZ → Lab:
    linear_rgb_to_xyz(lin), xyz_to_lab(xyz), hex_to_lab(hex)
    np_linear_rgb_to_xyz(arr), np_xyz_to_lab(arr)
    delta_e76(lab1, lab2)

High-Level API
-------------
    convert(color, from_space, to_space)
    np_convert(array, from_space, to_space)

Examples
--------
>>> from undertone.conversions import hex_to_lab, convert
>>> hex_to_lab("#ffffff")
Lab(L=100.0, a=..., b=...)
>>> convert("#ff8040", "hex", "linear")
LinearRGB(r=1.0, g=0.2158..., b=0.0512...)
"""

from .hex_rgb import sanitize_hex, hex_to_rgb, rgb_to_hex, normalize_hex
from .transfer import (
    srgb_to_linear,
    linear_to_srgb,
    np_srgb_to_linear,
    np_linear_to_srgb,
    hex_to_linear_rgb,
    linear_rgb_to_hex,
)
from .lab import (
    D65_WHITE,
    linear_rgb_to_xyz,
    xyz_to_lab,
    hex_to_lab,
    np_linear_rgb_to_xyz,
    np_xyz_to_lab,
    delta_e76,
)
from .wrapper import convert, np_convert

__all__ = [
    # Hex ↔ RGB
    'sanitize_hex',
    'hex_to_rgb',
    'rgb_to_hex',
    'normalize_hex',

    # sRGB ↔ Linear
    'srgb_to_linear',
    'linear_to_srgb',
    'np_srgb_to_linear',
    'np_linear_to_srgb',
    'hex_to_linear_rgb',
    'linear_rgb_to_hex',

    # Linear → XYZ → Lab
    'D65_WHITE',
    'linear_rgb_to_xyz',
    'xyz_to_lab',
    'hex_to_lab',
    'np_linear_rgb_to_xyz',
    'np_xyz_to_lab',
    'delta_e76',

    # High-level API
    'convert',
    'np_convert',
]
