import numpy as np
import pytest

from chromalerp import (
    NUM_SAMPLES,
    RGB,
    KnotIndexError,
    calculate_gradient,
    get_channels,
    gradient_from_triples,
    gradient_step,
)


def test_gradient_size(anchors):
    assert NUM_SAMPLES == 100
    assert len(calculate_gradient(anchors)) == 100
    assert len(calculate_gradient(anchors[:2])) == 100

def test_gradient_step():
    assert gradient_step(3) == np.float32(0.02)
    assert gradient_step(1) == 0.0
    assert isinstance(gradient_step(3), np.float32)

def test_gradient_default_anchors(anchors):
    colors = calculate_gradient(anchors)
    assert colors[0] == RGB((12, 16, 24))
    assert colors[25] == RGB((13, 17, 24))
    assert colors[50] == RGB((15, 19, 24))
    assert colors[75] == RGB((28, 16, 34))
    assert colors[99] == RGB((41, 14, 43))

def test_gradient_last_sample_stops_short(anchors):
    last = calculate_gradient(anchors)[-1]
    assert last != anchors[-1]
    assert all(abs(a - b) <= 1 for a, b in zip(last, anchors[-1]))

def test_gradient_single_anchor(single_anchor):
    colors = calculate_gradient(single_anchor)
    assert len(colors) == 100
    assert all(c == RGB((5, 5, 5)) for c in colors)

def test_gradient_empty_anchors():
    with pytest.raises(KnotIndexError):
        calculate_gradient([])

def test_gradient_truncates_toward_zero():
    colors = calculate_gradient([RGB((0, 0, 0)), RGB((-10, -10, -10))])
    # x = 0.15 gives -1.5 on every channel
    assert colors[15] == RGB((-1, -1, -1))
    assert colors[99] == RGB((-9, -9, -9))

def test_gradient_channels_are_independent():
    colors = calculate_gradient([RGB((0, 100, -100)), RGB((100, 0, 100))])
    channels = get_channels(colors)
    assert np.all(np.diff(channels.red.astype(int)) >= 0)
    assert np.all(np.diff(channels.green.astype(int)) <= 0)
    assert np.all(np.diff(channels.blue.astype(int)) >= 0)

def test_gradient_custom_num(anchors):
    colors = calculate_gradient(anchors, num=4)
    assert colors == [RGB((12, 16, 24)), RGB((13, 17, 24)), RGB((15, 19, 24)), RGB((28, 16, 34))]

def test_gradient_rejects_non_positive_num(anchors):
    with pytest.raises(ValueError):
        calculate_gradient(anchors, num=0)

def test_gradient_from_triples(anchors):
    assert gradient_from_triples() == calculate_gradient(anchors)
    assert gradient_from_triples([(1, 2, 3)]) == [RGB((1, 2, 3))] * 100
