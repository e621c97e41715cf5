"""
Undertone - Skin Undertone Detection with White-Balance Calibration
===================================================================

Classifies skin undertone (warm / neutral / cool) and skin tone
(very light → deep) from sampled sRGB hex colors of skin, hair and eyes.

Pipeline
--------
1. hex → 8-bit RGB
2. sRGB → linear light
3. gray-world gain estimation across the samples
4. gains applied in linear light, then linear RGB → XYZ (D65) → CIELAB
5. weighted b* → undertone, skin L* → skin tone

Quick Start
-----------
>>> from undertone import detect_undertone_with_calibration
>>> result = detect_undertone_with_calibration("#e6c9b3", "#5a3d2b", "#2f241f")
>>> result.skin_tone, result.undertone
>>> result.to_dict()["calibrated"]["skinHex"]

Modules
-------
- conversions: hex, sRGB transfer, XYZ and Lab conversions
- calibration: gray-world gains and warm illuminant heuristic
- classify: skin tone bands and undertone thresholds
- config: detection options
- detect: end-to-end detection
"""

from .types import (
    RGB,
    LinearRGB,
    XYZ,
    Lab,
    Gains,
    ChannelMeans,
    Undertone,
    SkinTone,
)
from .errors import UndertoneError, InvalidFormatError, MissingRequiredInputError
from .conversions import (
    hex_to_rgb,
    rgb_to_hex,
    srgb_to_linear,
    linear_to_srgb,
    hex_to_lab,
    convert,
    np_convert,
)
from .calibration import (
    GrayWorldEstimate,
    estimate_gray_world_gains,
    is_warm_illuminant,
    apply_gains,
)
from .classify import classify_skin_tone, classify_undertone, weighted_b_score
from .config import DetectionOptions, UndertoneThresholds, SampleWeights, DEFAULT_OPTIONS
from .detect import (
    DetectionResult,
    CalibratedSamples,
    SampleLabs,
    detect_undertone_with_calibration,
    detect_undertone,
)

__version__ = "1.0.0"

__all__ = [
    # types
    "RGB",
    "LinearRGB",
    "XYZ",
    "Lab",
    "Gains",
    "ChannelMeans",
    "Undertone",
    "SkinTone",
    # errors
    "UndertoneError",
    "InvalidFormatError",
    "MissingRequiredInputError",
    # conversions
    "hex_to_rgb",
    "rgb_to_hex",
    "srgb_to_linear",
    "linear_to_srgb",
    "hex_to_lab",
    "convert",
    "np_convert",
    # calibration
    "GrayWorldEstimate",
    "estimate_gray_world_gains",
    "is_warm_illuminant",
    "apply_gains",
    # classification
    "classify_skin_tone",
    "classify_undertone",
    "weighted_b_score",
    # configuration
    "DetectionOptions",
    "UndertoneThresholds",
    "SampleWeights",
    "DEFAULT_OPTIONS",
    # detection
    "DetectionResult",
    "CalibratedSamples",
    "SampleLabs",
    "detect_undertone_with_calibration",
    "detect_undertone",
]
