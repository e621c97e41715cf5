from .color_types import (
    RGB,
    LinearRGB,
    XYZ,
    Lab,
    Gains,
    ChannelMeans,
    ColorSpace,
    ColorElement,
    element_to_array,
    is_array_space,
)
from .classification import Undertone, SkinTone

__all__ = [
    "RGB",
    "LinearRGB",
    "XYZ",
    "Lab",
    "Gains",
    "ChannelMeans",
    "ColorSpace",
    "ColorElement",
    "element_to_array",
    "is_array_space",
    "Undertone",
    "SkinTone",
]
