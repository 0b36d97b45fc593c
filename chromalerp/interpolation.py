"""
Piecewise-linear evaluation of a single channel.

A channel's known values are treated as y-values sampled at the integer
positions ``0 .. N-1`` (the knots). ``find_y`` returns the value of the
polyline through those knots at any real position inside that range.

All arithmetic is done in float32.
"""
from __future__ import annotations
from typing import NamedTuple, Tuple

import numpy as np

from .types.color_types import FLOAT_DTYPE, ChannelValues, Scalar
from .utils.num_utils import is_whole


class KnotIndexError(IndexError):
    """Raised when a query position falls outside the knot range."""

    def __init__(self, x: Scalar, num_knots: int) -> None:
        self.x = x
        self.num_knots = num_knots
        if num_knots == 0:
            message = f"cannot evaluate x={x}: no known values"
        else:
            message = f"x={x} is outside the knot range [0, {num_knots - 1}]"
        super().__init__(message)


class Point(NamedTuple):
    x: Scalar
    y: Scalar


def find_slope(first: Point, second: Point) -> np.float32:
    """
    Slope of the line through two points.

    Raises:
        ZeroDivisionError: if both points share the same x
    """
    run = FLOAT_DTYPE(second.x) - FLOAT_DTYPE(first.x)
    if run == 0:
        raise ZeroDivisionError(f"slope is undefined for points sharing x={first.x}")
    return (FLOAT_DTYPE(second.y) - FLOAT_DTYPE(first.y)) / run


def closest_whole_numbers(x: Scalar) -> Tuple[np.float32, np.float32]:
    """Return ``(floor(x), ceil(x))``. Both equal ``x`` when it is whole."""
    x = FLOAT_DTYPE(x)
    return np.floor(x), np.ceil(x)


def find_y(x: Scalar, known_x: ChannelValues) -> np.float32:
    """
    Interpolate a channel at position ``x``.

    Whole positions return the known value directly. Anything else is
    placed on the segment between its floor and ceil knots.

    The whole-position test is exact: an ``x`` carrying float noise (such as
    ``0.99999994``) is interpolated between its neighbours rather than
    snapped. Skipping that test for a whole ``x`` would make
    ``closest_whole_numbers`` return equal knots and ``find_slope`` raise.

    Args:
        x: Query position, must satisfy ``0 <= x <= len(known_x) - 1``
        known_x: The channel's known values

    Returns:
        Interpolated value as float32

    Raises:
        KnotIndexError: if ``x`` is outside the knot range (also for NaN and
            for an empty ``known_x``). Positions are never clamped.
    """
    known = np.asarray(known_x)
    x = FLOAT_DTYPE(x)
    num_knots = len(known)

    if not 0 <= x <= num_knots - 1:
        raise KnotIndexError(float(x), num_knots)

    if is_whole(x):
        return FLOAT_DTYPE(known[int(x)])

    left_x, right_x = closest_whole_numbers(x)

    left_y = FLOAT_DTYPE(known[int(left_x)])
    right_y = FLOAT_DTYPE(known[int(right_x)])

    slope = find_slope(Point(left_x, left_y), Point(right_x, right_y))
    # extend the left knot along the segment by the distance x sits past it
    return left_y + slope * (x - left_x)
