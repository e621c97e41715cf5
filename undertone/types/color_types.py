from __future__ import annotations
from typing import Literal, NamedTuple, Union
import numpy as np
from numpy import ndarray

Scalar = int | float
ColorSpace = Literal["hex", "rgb", "linear", "xyz", "lab"]
ARRAY_SPACES = {"rgb", "linear", "xyz", "lab"}


class RGB(NamedTuple):
    """8-bit sRGB channels, each in ``[0, 255]``."""
    r: int
    g: int
    b: int


class LinearRGB(NamedTuple):
    """Gamma-decoded sRGB channels, each in ``[0, 1]``."""
    r: float
    g: float
    b: float


class XYZ(NamedTuple):
    X: float
    Y: float
    Z: float


class Lab(NamedTuple):
    L: float
    a: float
    b: float


class Gains(NamedTuple):
    """Per-channel multipliers applied in linear light."""
    r: float
    g: float
    b: float

    @classmethod
    def identity(cls) -> Gains:
        return cls(1.0, 1.0, 1.0)


class ChannelMeans(NamedTuple):
    mean_r: float
    mean_g: float
    mean_b: float


ColorElement = Union[RGB, LinearRGB, XYZ, Lab, str]


def element_to_array(element: Union[ColorElement, tuple, ndarray]) -> np.ndarray:
    """
    Convert a channel triple to a float numpy array.

    Args:
        element: NamedTuple, plain tuple, or already an ndarray

    Returns:
        numpy array representation
    """
    if isinstance(element, ndarray):
        return element.astype(float, copy=False)
    if isinstance(element, str):
        raise TypeError("hex strings have no array form; convert to 'rgb' first")
    return np.array(element, dtype=float)


def is_array_space(color_space: ColorSpace) -> bool:
    """
    Check if the given color space can be held in a ``(..., 3)`` array.

    Args:
        color_space: Color space string
    Returns:
        True for numeric triple spaces, False for hex
    """
    return color_space.lower() in ARRAY_SPACES
