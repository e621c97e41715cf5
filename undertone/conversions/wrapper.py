import numpy as np
from typing import Callable, Any

from ..types.color_types import RGB, LinearRGB, ColorSpace, element_to_array, is_array_space
from .hex_rgb import hex_to_rgb, rgb_to_hex
from .transfer import srgb_to_linear, linear_to_srgb, np_srgb_to_linear, np_linear_to_srgb
from .lab import linear_rgb_to_xyz, xyz_to_lab, np_linear_rgb_to_xyz, np_xyz_to_lab

# Forward chain. Only the hex <-> rgb <-> linear links can be walked backwards.
SPACE_ORDER: tuple[str, ...] = ("hex", "rgb", "linear", "xyz", "lab")


def _rgb_to_linear(rgb: tuple) -> LinearRGB:
    return LinearRGB(*(srgb_to_linear(c / 255) for c in rgb))

def _linear_to_rgb(linear: tuple) -> RGB:
    return RGB(*(round(255 * linear_to_srgb(c)) for c in linear))


CONVERT_STEPS: dict[tuple[str, str], Callable[[Any], Any]] = {
    ("hex", "rgb"): hex_to_rgb,
    ("rgb", "hex"): rgb_to_hex,
    ("rgb", "linear"): _rgb_to_linear,
    ("linear", "rgb"): _linear_to_rgb,
    ("linear", "xyz"): linear_rgb_to_xyz,
    ("xyz", "lab"): xyz_to_lab,
}

CONVERT_NUMPY_STEPS: dict[tuple[str, str], Callable[[np.ndarray], np.ndarray]] = {
    ("rgb", "linear"): lambda rgb: np_srgb_to_linear(rgb / 255),
    ("linear", "rgb"): lambda lin: np.round(255 * np_linear_to_srgb(lin)),
    ("linear", "xyz"): np_linear_rgb_to_xyz,
    ("xyz", "lab"): np_xyz_to_lab,
}


def _path(from_space: str, to_space: str, steps: dict) -> list[tuple[str, str]]:
    if from_space not in SPACE_ORDER or to_space not in SPACE_ORDER:
        raise ValueError(f"Unknown space: {from_space!r} -> {to_space!r}")
    i, j = SPACE_ORDER.index(from_space), SPACE_ORDER.index(to_space)
    stride = 1 if j > i else -1
    path = [(SPACE_ORDER[k], SPACE_ORDER[k + stride]) for k in range(i, j, stride)]
    for key in path:
        if key not in steps:
            raise ValueError(f"Unsupported conversion: {from_space} -> {to_space}")
    return path


def convert(color: Any, from_space: ColorSpace, to_space: ColorSpace) -> Any:
    """
    Convert a single color along ``hex → rgb → linear → xyz → lab``.

    ``xyz`` and ``lab`` are terminal: they cannot be converted back.
    """
    fs, ts = from_space.lower(), to_space.lower()
    if fs == ts:
        return color  # No conversion needed
    for key in _path(fs, ts, CONVERT_STEPS):
        color = CONVERT_STEPS[key](color)
    return color


def np_convert(color: np.ndarray, from_space: ColorSpace, to_space: ColorSpace) -> np.ndarray:
    """Vectorized ``convert`` for arrays of shape ``(..., 3)``; hex is not supported."""
    fs, ts = from_space.lower(), to_space.lower()
    if not (is_array_space(fs) and is_array_space(ts)):
        raise ValueError(f"np_convert works on array spaces only, got {fs!r} -> {ts!r}")
    color = element_to_array(color)
    if color.shape[-1] != 3:
        raise ValueError(f"expected last dimension to be 3, got shape {color.shape}")
    if fs == ts:
        return color
    for key in _path(fs, ts, CONVERT_NUMPY_STEPS):
        color = CONVERT_NUMPY_STEPS[key](color)
    return color
