from undertone.config import DetectionOptions, UndertoneThresholds, SampleWeights, DEFAULT_OPTIONS
from undertone.classify import classify_undertone
from undertone.detect import detect_undertone_with_calibration
from undertone.types import Undertone
import pytest


def test_defaults():
    assert DEFAULT_OPTIONS.auto_calibrate is True
    assert DEFAULT_OPTIONS.warm_detect_threshold == 1.03
    assert DEFAULT_OPTIONS.undertone_thresholds == UndertoneThresholds(warm=6.0, cool=0.5)
    assert DEFAULT_OPTIONS.weights == SampleWeights(skin=0.8, hair=0.12, eye=0.08)

def test_from_mapping_camel_and_snake_agree():
    camel = DetectionOptions.from_mapping({
        "autoCalibrate": False,
        "warmDetectThreshold": 1.1,
        "undertoneThresholds": {"warm": 7.5, "cool": 0.0},
        "weights": {"skin": 1.0, "hair": 0.5, "eye": 0.25},
    })
    snake = DetectionOptions.from_mapping({
        "auto_calibrate": False,
        "warm_detect_threshold": 1.1,
        "undertone_thresholds": {"warm": 7.5, "cool": 0.0},
        "weights": {"skin": 1.0, "hair": 0.5, "eye": 0.25},
    })
    assert camel == snake
    assert camel.auto_calibrate is False
    assert camel.undertone_thresholds.warm == 7.5

def test_from_mapping_fills_defaults():
    options = DetectionOptions.from_mapping({"warmDetectThreshold": None})
    assert options == DEFAULT_OPTIONS

def test_partial_thresholds_keep_other_default():
    options = DetectionOptions.from_mapping({"undertoneThresholds": {"warm": 8.0}})
    assert options.undertone_thresholds == UndertoneThresholds(warm=8.0, cool=0.5)

def test_partial_weights_replace_defaults():
    options = DetectionOptions.from_mapping({"weights": {"skin": 1.0}})
    assert options.weights == SampleWeights(skin=1.0, hair=0.0, eye=0.0)

def test_unknown_key_rejected():
    with pytest.raises(ValueError, match="Unknown detection options"):
        DetectionOptions.from_mapping({"autocalibrate": False})

def test_overlapping_thresholds_accepted():
    thresholds = UndertoneThresholds.from_mapping({"warm": 0.0})
    assert thresholds == UndertoneThresholds(warm=0.0, cool=0.5)
    # 0.3 is both >= warm and <= cool; warm is checked first
    assert classify_undertone(0.3, thresholds) == Undertone.WARM

def test_negative_weights_accepted():
    assert SampleWeights(hair=-0.1).hair == -0.1

def test_one_key_threshold_override_detects():
    result = detect_undertone_with_calibration(
        "#e6c9b3", options={"autoCalibrate": False, "undertoneThresholds": {"warm": 0.0}}
    )
    assert result.settings.undertone_thresholds == UndertoneThresholds(warm=0.0, cool=0.5)
    assert result.score > 0.5
    assert result.undertone == Undertone.WARM

def test_unknown_weight_key_rejected():
    with pytest.raises(ValueError, match="Unknown sample weights"):
        DetectionOptions.from_mapping({"weights": {"skin": 1, "hiar": 1}})

def test_unknown_threshold_key_rejected():
    with pytest.raises(ValueError, match="Unknown undertone thresholds"):
        DetectionOptions.from_mapping({"undertoneThresholds": {"warn": 5.0}})

def test_auto_calibrate_none_disables_calibration():
    assert DetectionOptions.from_mapping({"autoCalibrate": None}).auto_calibrate is False
    assert DetectionOptions.from_mapping({"auto_calibrate": 0}).auto_calibrate is False
    assert DetectionOptions.from_mapping({}).auto_calibrate is True
    result = detect_undertone_with_calibration("#e6c9b3", options={"autoCalibrate": None})
    assert result.calibrated.skin_hex == "#e6c9b3"

def test_coerce():
    assert DetectionOptions.coerce(None) is DEFAULT_OPTIONS
    options = DetectionOptions(auto_calibrate=False)
    assert DetectionOptions.coerce(options) is options
    assert DetectionOptions.coerce({"autoCalibrate": False}) == options
    with pytest.raises(TypeError):
        DetectionOptions.coerce(["autoCalibrate"])

def test_to_dict_uses_client_keys():
    assert DEFAULT_OPTIONS.to_dict() == {
        "weights": {"skin": 0.8, "hair": 0.12, "eye": 0.08},
        "undertoneThresholds": {"warm": 6.0, "cool": 0.5},
        "warmDetectThreshold": 1.03,
        "autoCalibrate": True,
    }

def test_options_are_immutable():
    with pytest.raises(AttributeError):
        DEFAULT_OPTIONS.auto_calibrate = False
