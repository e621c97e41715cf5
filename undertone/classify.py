from __future__ import annotations
import warnings
from typing import Optional, Sequence, Tuple

from .types.classification import Undertone, SkinTone, skin_tone_lower_bounds
from .types.color_types import Lab
from .config import UndertoneThresholds


def classify_skin_tone(L: float) -> SkinTone:
    """Band a lightness value; each band includes its lower bound."""
    for tone, lower in skin_tone_lower_bounds:
        if L >= lower:
            return tone
    return SkinTone.DEEP


def classify_undertone(score: float, thresholds: UndertoneThresholds = UndertoneThresholds()) -> Undertone:
    if score >= thresholds.warm:
        return Undertone.WARM
    if score <= thresholds.cool:
        return Undertone.COOL
    return Undertone.NEUTRAL


def weighted_b_score(weighted_labs: Sequence[Tuple[Optional[Lab], float]]) -> float:
    """
    Weighted mean of b* over the samples that are present.

    Args:
        weighted_labs: ``(lab, weight)`` pairs; pairs whose lab is ``None``
            are skipped and their weight is not counted.

    Returns:
        Sum of ``weight * b`` divided by the sum of the weights used, or
        by 1 when those weights sum to zero.
    """
    total_weight = 0.0
    weighted_b = 0.0
    for lab, weight in weighted_labs:
        if lab is None:
            continue
        weighted_b += weight * lab.b
        total_weight += weight
    if total_weight == 0:
        warnings.warn(
            "Sample weights of the supplied colors sum to zero; undertone score defaults to 0",
            RuntimeWarning,
            stacklevel=2,
        )
        return weighted_b
    return weighted_b / total_weight
