"""
Detection settings.

All settings live in immutable dataclasses passed by value into
``detect_undertone_with_calibration``; there is no global state.
``DetectionOptions.from_mapping`` accepts the camelCase keys sent by the
web client as well as snake_case.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Collection, Mapping, Optional, Union

from .calibration.gray_world import DEFAULT_WARM_THRESHOLD
from .utils import value_or_default, lookup_any


def _reject_unknown(mapping: Mapping[str, Any], known: Collection[str], what: str) -> None:
    unknown = set(mapping) - set(known)
    if unknown:
        raise ValueError(f"Unknown {what}: {sorted(unknown)}")


@dataclass(frozen=True)
class UndertoneThresholds:
    """
    b* cut-offs: ``score >= warm`` is warm, ``score <= cool`` is cool.

    Any pair is accepted; warm is checked first, so overlapping
    thresholds resolve to warm.
    """
    warm: float = 6.0
    cool: float = 0.5

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> UndertoneThresholds:
        _reject_unknown(mapping, ("warm", "cool"), "undertone thresholds")
        defaults = cls()
        return cls(
            warm=float(value_or_default(mapping.get("warm"), defaults.warm)),
            cool=float(value_or_default(mapping.get("cool"), defaults.cool)),
        )


@dataclass(frozen=True)
class SampleWeights:
    """Relative influence of each sample on the combined b* score."""
    skin: float = 0.8
    hair: float = 0.12
    eye: float = 0.08

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> SampleWeights:
        _reject_unknown(mapping, ("skin", "hair", "eye"), "sample weights")
        # A weights mapping replaces the defaults wholesale; missing keys weigh 0.
        return cls(
            skin=float(mapping.get("skin") or 0.0),
            hair=float(mapping.get("hair") or 0.0),
            eye=float(mapping.get("eye") or 0.0),
        )


OPTION_KEYS = {
    "auto_calibrate": ("autoCalibrate", "auto_calibrate"),
    "warm_detect_threshold": ("warmDetectThreshold", "warm_detect_threshold"),
    "undertone_thresholds": ("undertoneThresholds", "undertone_thresholds"),
    "weights": ("weights",),
}
_KNOWN_KEYS = {key for aliases in OPTION_KEYS.values() for key in aliases}


@dataclass(frozen=True)
class DetectionOptions:
    auto_calibrate: bool = True
    warm_detect_threshold: float = DEFAULT_WARM_THRESHOLD
    undertone_thresholds: UndertoneThresholds = field(default_factory=UndertoneThresholds)
    weights: SampleWeights = field(default_factory=SampleWeights)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> DetectionOptions:
        """
        Build options from a plain dict, filling gaps with defaults.

        Keys may be camelCase (``autoCalibrate``) or snake_case
        (``auto_calibrate``). ``None`` values count as missing, except for
        ``autoCalibrate``: a key that is present is read for its truth
        value, so ``None`` turns calibration off and only an absent key
        defaults to ``True``.

        Raises:
            ValueError: on keys that are not detection options, or unknown
                keys inside ``undertoneThresholds`` / ``weights``
        """
        _reject_unknown(mapping, _KNOWN_KEYS, "detection options")

        defaults = cls()
        values = {name: lookup_any(mapping, *aliases) for name, aliases in OPTION_KEYS.items()}

        auto_calibrate = defaults.auto_calibrate
        for key in OPTION_KEYS["auto_calibrate"]:
            if key in mapping:
                auto_calibrate = bool(mapping[key])
                break

        thresholds = values["undertone_thresholds"]
        if isinstance(thresholds, Mapping):
            thresholds = UndertoneThresholds.from_mapping(thresholds)
        weights = values["weights"]
        if isinstance(weights, Mapping):
            weights = SampleWeights.from_mapping(weights)

        return cls(
            auto_calibrate=auto_calibrate,
            warm_detect_threshold=float(
                value_or_default(values["warm_detect_threshold"], defaults.warm_detect_threshold)
            ),
            undertone_thresholds=value_or_default(thresholds, defaults.undertone_thresholds),
            weights=value_or_default(weights, defaults.weights),
        )

    @classmethod
    def coerce(cls, options: Optional[Union[DetectionOptions, Mapping[str, Any]]]) -> DetectionOptions:
        if options is None:
            return DEFAULT_OPTIONS
        if isinstance(options, DetectionOptions):
            return options
        if isinstance(options, Mapping):
            return cls.from_mapping(options)
        raise TypeError(f"options must be DetectionOptions or a mapping, got {type(options).__name__}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "weights": {"skin": self.weights.skin, "hair": self.weights.hair, "eye": self.weights.eye},
            "undertoneThresholds": {
                "warm": self.undertone_thresholds.warm,
                "cool": self.undertone_thresholds.cool,
            },
            "warmDetectThreshold": self.warm_detect_threshold,
            "autoCalibrate": self.auto_calibrate,
        }


DEFAULT_OPTIONS = DetectionOptions()
