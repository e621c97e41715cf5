from undertone.types import Gains, SkinTone, Undertone, element_to_array, is_array_space, RGB
import numpy as np
import pytest


def test_identity_gains():
    assert Gains.identity() == (1.0, 1.0, 1.0)

def test_enums_compare_to_strings():
    assert Undertone.WARM == "warm"
    assert SkinTone("very light") is SkinTone.VERY_LIGHT

def test_element_to_array():
    arr = element_to_array(RGB(1, 2, 3))
    assert arr.dtype == float
    assert np.array_equal(arr, [1.0, 2.0, 3.0])
    with pytest.raises(TypeError):
        element_to_array("#010203")

def test_array_spaces():
    assert is_array_space("LAB")
    assert not is_array_space("hex")
