"""Gray-world white balance for small sets of sampled colors."""

from .gray_world import (
    GrayWorldEstimate,
    estimate_gray_world_gains,
    is_warm_illuminant,
    apply_gains,
    DEFAULT_WARM_THRESHOLD,
)

__all__ = [
    "GrayWorldEstimate",
    "estimate_gray_world_gains",
    "is_warm_illuminant",
    "apply_gains",
    "DEFAULT_WARM_THRESHOLD",
]
