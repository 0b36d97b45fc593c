import warnings

import numpy as np

from ..types.color_types import CHANNEL_DTYPE, FLOAT_DTYPE, Scalar

INT8_MIN = int(np.iinfo(CHANNEL_DTYPE).min)
INT8_MAX = int(np.iinfo(CHANNEL_DTYPE).max)


def fractional_part(value: Scalar) -> np.float32:
    """Return ``value - trunc(value)`` in float32, keeping the sign of ``value``."""
    v = FLOAT_DTYPE(value)
    return v - np.trunc(v)


def is_whole(value: Scalar) -> bool:
    """Exact test for a zero fractional part. No tolerance is applied."""
    return bool(fractional_part(value) == 0.0)


def to_int8(values) -> np.ndarray:
    """
    Narrow numbers to signed 8-bit integers.

    Values are truncated toward zero, then wrapped two's-complement style
    (200 -> -56). Nothing is clamped. A RuntimeWarning is emitted when a
    value had to wrap.

    Args:
        values: Scalar, sequence or ndarray of numbers

    Returns:
        ndarray with dtype int8 and the same shape as ``values``
    """
    truncated = np.trunc(np.asarray(values, dtype=np.float64)).astype(np.int64)
    if truncated.size and (truncated.min() < INT8_MIN or truncated.max() > INT8_MAX):
        warnings.warn(
            f"Values outside [{INT8_MIN}, {INT8_MAX}] wrap around when narrowed to int8: "
            f"{truncated.tolist()}",
            RuntimeWarning,
            stacklevel=2,
        )
    return truncated.astype(CHANNEL_DTYPE)
