import numpy as np
import pytest

from chromalerp.colors import ColorRGBI8, RGB, rgb_from_sequence


def test_rgb_components():
    color = RGB((12, 16, 24))
    assert (color.r, color.g, color.b) == (12, 16, 24)
    assert color.value == (12, 16, 24)
    assert tuple(color) == (12, 16, 24)
    assert color[1] == 16

def test_rgb_is_immutable():
    color = RGB((1, 2, 3))
    with pytest.raises(AttributeError):
        color._value = (4, 5, 6)
    with pytest.raises(AttributeError):
        color.r = 4

def test_rgb_equality_and_hash():
    assert RGB((1, 2, 3)) == RGB((1, 2, 3))
    assert RGB((1, 2, 3)) != RGB((3, 2, 1))
    assert RGB((1, 2, 3)) == (1, 2, 3)
    assert len({RGB((1, 2, 3)), RGB((1, 2, 3))}) == 1
    assert hash(RGB((1, 2, 3))) == hash((1, 2, 3))
    assert (1, 2, 3) in {RGB((1, 2, 3))}
    assert RGB((1, 2, 3)) in {(1, 2, 3): "x"}

def test_rgb_repr():
    assert repr(RGB((12, -16, 24))) == "RGB { r: 12, g: -16, b: 24 }"

def test_rgb_accepts_numpy_input():
    color = ColorRGBI8(np.array([1, -2, 3], dtype=np.int8))
    assert color == RGB((1, -2, 3))
    assert color.to_array().dtype == np.int8

def test_rgb_rejects_bad_length():
    with pytest.raises(ValueError):
        RGB((1, 2))
    with pytest.raises(ValueError):
        RGB((1, 2, 3, 4))

def test_rgb_rejects_out_of_range():
    with pytest.raises(ValueError):
        RGB((128, 0, 0))
    with pytest.raises(ValueError):
        RGB((0, -129, 0))

def test_rgb_rejects_non_integers():
    with pytest.raises(TypeError):
        RGB((1.5, 2, 3))

def test_from_sequence_truncates_toward_zero():
    assert rgb_from_sequence([25.8, 33.8, 52.2]) == RGB((25, 33, 52))
    assert rgb_from_sequence([-1.5, -0.9, 0.9]) == RGB((-1, 0, 0))

def test_from_sequence_wraps_instead_of_clamping():
    with pytest.warns(RuntimeWarning):
        color = rgb_from_sequence([200, 128, -129])
    assert color == RGB((-56, -128, 127))

def test_from_sequence_requires_three_values():
    with pytest.raises(ValueError):
        rgb_from_sequence([1, 2])
    with pytest.raises(ValueError):
        rgb_from_sequence([])
