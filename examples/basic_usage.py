"""Basic undertone usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from pprint import pprint

from undertone import (
    DetectionOptions,
    UndertoneThresholds,
    detect_undertone_with_calibration,
)


def demonstrate_full_sample_set() -> None:
    # Typical warm-ish skin with hair and eye samples.
    result = detect_undertone_with_calibration("#e6c9b3", "#5a3d2b", "#2f241f")
    print("Example 1 (skin, hair, eye):")
    pprint(result.to_dict())


def demonstrate_skin_only() -> None:
    # Only skin provided, so the cast is estimated from a single color.
    result = detect_undertone_with_calibration("#f7efe6")
    print("Example 2 (only skin):")
    pprint(result.to_dict())


def demonstrate_no_calibration() -> None:
    # Useful when the inputs are already white-balanced.
    result = detect_undertone_with_calibration(
        "#e6c9b3", "#5a3d2b", "#2f241f", {"autoCalibrate": False}
    )
    print("Example 3 (no calibration):")
    pprint(result.to_dict())


def demonstrate_tuned_thresholds() -> None:
    # Stricter warm threshold.
    options = DetectionOptions(undertone_thresholds=UndertoneThresholds(warm=7.5, cool=0.0))
    result = detect_undertone_with_calibration("#e6c9b3", "#5a3d2b", "#2f241f", options)
    print("Example 4 (tuned thresholds):")
    pprint(result.to_dict())


if __name__ == "__main__":
    print("--- Example runs ---")
    demonstrate_full_sample_set()
    demonstrate_skin_only()
    demonstrate_no_calibration()
    demonstrate_tuned_thresholds()
