"""
Chromalerp - Piecewise-Linear RGB Gradients
===========================================

Interpolates a fixed number of colors between an ordered sequence of
signed 8-bit RGB anchors, one channel at a time.

Quick Start
-----------
>>> from chromalerp import RGB, calculate_gradient
>>> colors = calculate_gradient([RGB((12, 16, 24)), RGB((42, 14, 44))])
>>> colors[0], len(colors)
(RGB { r: 12, g: 16, b: 24 }, 100)

Modules
-------
- colors: immutable int8 RGB colors
- channels: splitting colors into per-channel sequences
- interpolation: piecewise-linear evaluation of one channel
- gradient: the sampling driver and its defaults
"""

from .colors import ColorBase, ColorRGBI8, RGB, rgb_from_sequence
from .channels import Channels, get_channels
from .interpolation import (
    KnotIndexError,
    Point,
    closest_whole_numbers,
    find_slope,
    find_y,
)
from .gradient import (
    NUM_SAMPLES,
    DEFAULT_ANCHORS,
    gradient_step,
    calculate_gradient,
    gradient_from_triples,
)

__version__ = "0.1.0"

__all__ = [
    # Colors
    "ColorBase", "ColorRGBI8", "RGB", "rgb_from_sequence",

    # Channels
    "Channels", "get_channels",

    # Interpolation
    "KnotIndexError", "Point",
    "closest_whole_numbers", "find_slope", "find_y",

    # Gradients
    "NUM_SAMPLES", "DEFAULT_ANCHORS",
    "gradient_step", "calculate_gradient", "gradient_from_triples",

    # Version
    "__version__",
]
