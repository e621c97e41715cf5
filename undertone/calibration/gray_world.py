from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence
import numpy as np
from boundednumbers import clamp

from ..errors import MissingRequiredInputError
from ..types.color_types import Gains, ChannelMeans, LinearRGB
from ..conversions.transfer import hex_to_linear_rgb, linear_rgb_to_hex

# Channel means at or below this are treated as black
NEAR_ZERO = 1e-9
DEFAULT_WARM_THRESHOLD = 1.03


@dataclass(frozen=True)
class GrayWorldEstimate:
    gains: Gains
    means: ChannelMeans
    target: float


def estimate_gray_world_gains(samples: Sequence[str]) -> GrayWorldEstimate:
    """
    Estimate white-balance gains assuming the samples average to neutral gray.

    Every sample is decoded to linear RGB and the channels are averaged
    across samples. The target level is the mean of the three channel
    means; each gain scales its channel mean onto that target.

    Args:
        samples: hex colors (skin, and optionally hair and eyes)

    Returns:
        GrayWorldEstimate with ``gains``, ``means`` and ``target``

    Raises:
        MissingRequiredInputError: if ``samples`` is empty
        InvalidFormatError: if any sample is not a valid hex color
    """
    if not samples:
        raise MissingRequiredInputError("gray-world estimation needs at least one sample")

    linear = np.array([hex_to_linear_rgb(hex_color) for hex_color in samples], dtype=float)
    means = ChannelMeans(*(float(m) for m in linear.mean(axis=0)))

    target = sum(means) / 3 or NEAR_ZERO
    gains = Gains(*(target / m if m > NEAR_ZERO else 1.0 for m in means))
    return GrayWorldEstimate(gains=gains, means=means, target=target)


def is_warm_illuminant(means: ChannelMeans, threshold: float = DEFAULT_WARM_THRESHOLD) -> bool:
    """Tungsten-like cast: R > G·threshold and G > B·threshold."""
    return means.mean_r > means.mean_g * threshold and means.mean_g > means.mean_b * threshold


def apply_gains(hex_color: str, gains: tuple[float, float, float]) -> str:
    """Multiply each linear channel by its gain, clamp to [0, 1], re-encode as hex."""
    linear = hex_to_linear_rgb(hex_color)
    balanced = LinearRGB(*(clamp(c * g, 0.0, 1.0) for c, g in zip(linear, gains)))
    return linear_rgb_to_hex(balanced)
