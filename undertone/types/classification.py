# No dependencies
from __future__ import annotations
from enum import Enum


class Undertone(str, Enum):
    COOL = "cool"
    NEUTRAL = "neutral"
    WARM = "warm"

    @property
    def rank(self) -> int:
        """Ordering along the b* axis: cool < neutral < warm."""
        return undertone_rank[self]


class SkinTone(str, Enum):
    VERY_LIGHT = "very light"
    LIGHT = "light"
    MEDIUM = "medium"
    TAN = "tan"
    DEEP = "deep"


undertone_rank = {
    Undertone.COOL: 0,
    Undertone.NEUTRAL: 1,
    Undertone.WARM: 2,
}

# Lower L* bound of each band, checked from lightest to deepest
skin_tone_lower_bounds = (
    (SkinTone.VERY_LIGHT, 80.0),
    (SkinTone.LIGHT, 65.0),
    (SkinTone.MEDIUM, 50.0),
    (SkinTone.TAN, 35.0),
)
