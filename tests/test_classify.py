from undertone.classify import classify_skin_tone, classify_undertone, weighted_b_score
from undertone.config import UndertoneThresholds
from undertone.types import Lab, SkinTone, Undertone
import pytest

band_order = [SkinTone.DEEP, SkinTone.TAN, SkinTone.MEDIUM, SkinTone.LIGHT, SkinTone.VERY_LIGHT]


def test_band_boundaries_are_inclusive_below():
    assert classify_skin_tone(100) == SkinTone.VERY_LIGHT
    assert classify_skin_tone(80) == SkinTone.VERY_LIGHT
    assert classify_skin_tone(79.999) == SkinTone.LIGHT
    assert classify_skin_tone(65) == SkinTone.LIGHT
    assert classify_skin_tone(64.999) == SkinTone.MEDIUM
    assert classify_skin_tone(50) == SkinTone.MEDIUM
    assert classify_skin_tone(49.999) == SkinTone.TAN
    assert classify_skin_tone(35) == SkinTone.TAN
    assert classify_skin_tone(34.999) == SkinTone.DEEP
    assert classify_skin_tone(0) == SkinTone.DEEP

def test_band_coverage_is_monotonic():
    bands = [classify_skin_tone(L) for L in range(0, 101)]
    assert set(bands) == set(SkinTone)
    ranks = [band_order.index(b) for b in bands]
    assert ranks == sorted(ranks)

def test_skin_tone_values():
    assert classify_skin_tone(90).value == "very light"
    assert classify_skin_tone(10) == "deep"

def test_undertone_thresholds_default():
    assert classify_undertone(6.0) == Undertone.WARM
    assert classify_undertone(20.0) == Undertone.WARM
    assert classify_undertone(5.99) == Undertone.NEUTRAL
    assert classify_undertone(0.51) == Undertone.NEUTRAL
    assert classify_undertone(0.5) == Undertone.COOL
    assert classify_undertone(-3.0) == Undertone.COOL

def test_undertone_custom_thresholds():
    thresholds = UndertoneThresholds(warm=7.5, cool=0.0)
    assert classify_undertone(7.0, thresholds) == Undertone.NEUTRAL
    assert classify_undertone(0.25, thresholds) == Undertone.NEUTRAL
    assert classify_undertone(0.0, thresholds) == Undertone.COOL

def test_equal_thresholds_prefer_warm():
    thresholds = UndertoneThresholds(warm=3.0, cool=3.0)
    assert classify_undertone(3.0, thresholds) == Undertone.WARM

def test_undertone_rank_order():
    assert Undertone.COOL.rank < Undertone.NEUTRAL.rank < Undertone.WARM.rank

def test_weighted_score_skips_missing_samples():
    skin = Lab(70.0, 10.0, 12.0)
    hair = Lab(30.0, 5.0, 2.0)
    assert weighted_b_score([(skin, 0.8), (None, 0.12), (None, 0.08)]) == pytest.approx(12.0)
    assert weighted_b_score([(skin, 0.8), (hair, 0.12), (None, 0.08)]) == pytest.approx(
        (0.8 * 12.0 + 0.12 * 2.0) / 0.92
    )

def test_weighted_score_zero_weights_warn():
    with pytest.warns(RuntimeWarning, match="sum to zero"):
        assert weighted_b_score([(Lab(70.0, 0.0, 12.0), 0.0)]) == 0.0

def test_weighted_score_monotonic_in_skin_b():
    hair = Lab(30.0, 5.0, 9.0)
    eye = Lab(20.0, 1.0, -1.0)
    scores = [
        weighted_b_score([(Lab(70.0, 8.0, b), 0.8), (hair, 0.12), (eye, 0.08)])
        for b in range(-10, 30)
    ]
    assert all(b > a for a, b in zip(scores, scores[1:]))
    ranks = [classify_undertone(s).rank for s in scores]
    assert ranks == sorted(ranks)
