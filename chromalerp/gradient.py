"""
Gradient Generation Module
==========================

Builds a fixed-size gradient from an ordered sequence of anchor colors.
Each channel is interpolated on its own with ``find_y`` and the results
are narrowed back into signed 8-bit colors.

>>> from chromalerp import calculate_gradient, DEFAULT_ANCHORS, rgb_from_sequence
>>> colors = calculate_gradient([rgb_from_sequence(c) for c in DEFAULT_ANCHORS])
>>> len(colors)
100
>>> colors[0]
RGB { r: 12, g: 16, b: 24 }
"""
from __future__ import annotations
from typing import List, Sequence, Tuple

import numpy as np

from .channels import get_channels
from .colors.rgb import ColorRGBI8, rgb_from_sequence
from .interpolation import find_y
from .types.color_types import FLOAT_DTYPE, ColorTriple

NUM_SAMPLES = 100

DEFAULT_ANCHORS: Tuple[ColorTriple, ...] = (
    (12, 16, 24),
    (15, 19, 24),
    (42, 14, 44),
)


def gradient_step(num_anchors: int, num: int = NUM_SAMPLES) -> np.float32:
    """
    Distance in anchor-index space between two consecutive samples.

    ``(num_anchors - 1) / num``, so sample ``num - 1`` stops just short of
    the last anchor.
    """
    return FLOAT_DTYPE(FLOAT_DTYPE(num_anchors) - FLOAT_DTYPE(1.0)) / FLOAT_DTYPE(num)


def calculate_gradient(
    original_colors: Sequence[ColorRGBI8],
    num: int = NUM_SAMPLES,
) -> List[ColorRGBI8]:
    """
    Interpolate ``num`` colors across the anchors.

    Args:
        original_colors: Anchor colors in gradient order
        num: Number of output samples

    Returns:
        ``num`` colors. The first equals the first anchor; the last lies
        just before the last anchor.

    Raises:
        ValueError: if ``num`` is not positive
        KnotIndexError: if ``original_colors`` is empty
    """
    if num < 1:
        raise ValueError(f"num must be a positive integer, got {num}")

    step = gradient_step(len(original_colors), num)
    channels = get_channels(original_colors)
    colors: List[ColorRGBI8] = []

    for i in range(num):
        x = FLOAT_DTYPE(i) * step
        color = [find_y(x, channel) for channel in channels]
        colors.append(rgb_from_sequence(color))

    return colors


def gradient_from_triples(
    anchors: Sequence[Sequence[int]] = DEFAULT_ANCHORS,
    num: int = NUM_SAMPLES,
) -> List[ColorRGBI8]:
    """Convenience wrapper taking raw ``(r, g, b)`` triples instead of colors."""
    return calculate_gradient([rgb_from_sequence(a) for a in anchors], num=num)


__all__ = [
    'NUM_SAMPLES',
    'DEFAULT_ANCHORS',
    'gradient_step',
    'calculate_gradient',
    'gradient_from_triples',
]
