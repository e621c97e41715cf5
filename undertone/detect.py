"""
Skin undertone detection with gray-world calibration.

The three sampled colors (skin, and optionally hair and eyes) are used
to estimate a color cast, white-balanced in linear light, converted to
CIELAB, and classified:

- undertone (warm / neutral / cool) from a weighted b* score
- skin tone (very light → deep) from the calibrated skin L*

The result carries every intermediate value so a caller can audit why a
classification was produced.

>>> result = detect_undertone_with_calibration("#e6c9b3", "#5a3d2b", "#2f241f")
>>> result.skin_tone
<SkinTone.VERY_LIGHT: 'very light'>
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union

from .calibration import estimate_gray_world_gains, is_warm_illuminant, apply_gains
from .classify import classify_skin_tone, classify_undertone, weighted_b_score
from .config import DetectionOptions
from .conversions import hex_to_lab, normalize_hex
from .errors import MissingRequiredInputError
from .types import Gains, ChannelMeans, Lab, Undertone, SkinTone


@dataclass(frozen=True)
class CalibratedSamples:
    skin_hex: str
    hair_hex: Optional[str] = None
    eye_hex: Optional[str] = None


@dataclass(frozen=True)
class SampleLabs:
    skin: Lab
    hair: Optional[Lab] = None
    eye: Optional[Lab] = None


def _lab_dict(lab: Optional[Lab]) -> Optional[dict[str, float]]:
    return None if lab is None else {"L": lab.L, "a": lab.a, "b": lab.b}


@dataclass(frozen=True)
class DetectionResult:
    calibrated: CalibratedSamples
    gains: Gains
    is_warm_illuminant: bool
    means: ChannelMeans
    target: float
    undertone: Undertone
    score: float
    skin_tone: SkinTone
    labs: SampleLabs
    settings: DetectionOptions = field(default_factory=DetectionOptions)

    @classmethod
    def manual(
        cls,
        undertone: Union[Undertone, str],
        skin_tone: Union[SkinTone, str],
        skin_hex: str,
        hair_hex: Optional[str] = None,
        eye_hex: Optional[str] = None,
    ) -> DetectionResult:
        """
        A hand-entered classification shaped like a computed one.

        Colors are taken as given (identity gains, no calibration); the
        score is the skin b* and the means are those of the raw samples.
        """
        if not skin_hex:
            raise MissingRequiredInputError("skin_hex is required")
        samples = CalibratedSamples(
            skin_hex=normalize_hex(skin_hex),
            hair_hex=normalize_hex(hair_hex) if hair_hex else None,
            eye_hex=normalize_hex(eye_hex) if eye_hex else None,
        )
        present = [h for h in (samples.skin_hex, samples.hair_hex, samples.eye_hex) if h]
        estimate = estimate_gray_world_gains(present)
        labs = SampleLabs(
            skin=hex_to_lab(samples.skin_hex),
            hair=hex_to_lab(samples.hair_hex) if samples.hair_hex else None,
            eye=hex_to_lab(samples.eye_hex) if samples.eye_hex else None,
        )
        return cls(
            calibrated=samples,
            gains=Gains.identity(),
            is_warm_illuminant=is_warm_illuminant(estimate.means),
            means=estimate.means,
            target=estimate.target,
            undertone=Undertone(undertone),
            score=labs.skin.b,
            skin_tone=SkinTone(skin_tone),
            labs=labs,
            settings=DetectionOptions(auto_calibrate=False),
        )

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready form using the camelCase keys the web client stores."""
        return {
            "calibrated": {
                "skinHex": self.calibrated.skin_hex,
                "hairHex": self.calibrated.hair_hex,
                "eyeHex": self.calibrated.eye_hex,
            },
            "gains": {"r": self.gains.r, "g": self.gains.g, "b": self.gains.b},
            "isWarmIlluminant": self.is_warm_illuminant,
            "means": {
                "meanR": self.means.mean_r,
                "meanG": self.means.mean_g,
                "meanB": self.means.mean_b,
            },
            "target": self.target,
            "undertone": self.undertone.value,
            "score": self.score,
            "skinTone": self.skin_tone.value,
            "labs": {
                "skin": _lab_dict(self.labs.skin),
                "hair": _lab_dict(self.labs.hair),
                "eye": _lab_dict(self.labs.eye),
            },
            "settings": self.settings.to_dict(),
        }


def detect_undertone_with_calibration(
    skin_hex: str,
    hair_hex: Optional[str] = None,
    eye_hex: Optional[str] = None,
    options: Optional[Union[DetectionOptions, Mapping[str, Any]]] = None,
) -> DetectionResult:
    """
    Classify undertone and skin tone from sampled hex colors.

    Args:
        skin_hex: skin sample, required
        hair_hex: hair sample, optional (``None`` or ``""`` means absent)
        eye_hex: eye sample, optional
        options: ``DetectionOptions`` or a mapping of option keys
            (camelCase or snake_case); defaults apply when omitted

    Returns:
        DetectionResult with calibrated colors, gains, diagnostics and
        the undertone/skin tone classification

    Raises:
        MissingRequiredInputError: if ``skin_hex`` is empty or missing
        InvalidFormatError: if any supplied color is not valid hex
    """
    if not skin_hex:
        raise MissingRequiredInputError("skin_hex is required")
    settings = DetectionOptions.coerce(options)

    # Validate everything before any numeric work
    skin = normalize_hex(skin_hex)
    hair = normalize_hex(hair_hex) if hair_hex else None
    eye = normalize_hex(eye_hex) if eye_hex else None

    samples = [h for h in (skin, hair, eye) if h is not None]
    estimate = estimate_gray_world_gains(samples)
    warm = is_warm_illuminant(estimate.means, settings.warm_detect_threshold)

    applied_gains = estimate.gains if settings.auto_calibrate else Gains.identity()

    calibrated = CalibratedSamples(
        skin_hex=apply_gains(skin, applied_gains),
        hair_hex=apply_gains(hair, applied_gains) if hair else None,
        eye_hex=apply_gains(eye, applied_gains) if eye else None,
    )

    labs = SampleLabs(
        skin=hex_to_lab(calibrated.skin_hex),
        hair=hex_to_lab(calibrated.hair_hex) if calibrated.hair_hex else None,
        eye=hex_to_lab(calibrated.eye_hex) if calibrated.eye_hex else None,
    )

    # Higher b* leans yellow/warm, lower or negative leans blue/cool
    weights = settings.weights
    score = weighted_b_score([
        (labs.skin, weights.skin),
        (labs.hair, weights.hair),
        (labs.eye, weights.eye),
    ])

    return DetectionResult(
        calibrated=calibrated,
        gains=applied_gains,
        is_warm_illuminant=warm,
        means=estimate.means,
        target=estimate.target,
        undertone=classify_undertone(score, settings.undertone_thresholds),
        score=score,
        skin_tone=classify_skin_tone(labs.skin.L),
        labs=labs,
        settings=settings,
    )


# Alias kept for callers of the older name
detect_undertone = detect_undertone_with_calibration
