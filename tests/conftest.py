import pytest

from chromalerp import RGB, DEFAULT_ANCHORS, rgb_from_sequence


@pytest.fixture
def known_x():
    return [12, 23, 30, 49, 53, 54, 41, 32, 29]


@pytest.fixture
def anchors():
    return [rgb_from_sequence(c) for c in DEFAULT_ANCHORS]


@pytest.fixture
def single_anchor():
    return [RGB((5, 5, 5))]
