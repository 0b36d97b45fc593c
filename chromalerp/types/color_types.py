from __future__ import annotations
from typing import Sequence, Tuple, Union
import numpy as np
from numpy import ndarray

Scalar = Union[int, float]
ColorTriple = Tuple[int, int, int]
ColorLike = Union[ColorTriple, Sequence[Scalar], ndarray]
ChannelValues = Union[Sequence[int], ndarray]
CHANNEL_NAMES = ("red", "green", "blue")

# Storage type of a single color component
CHANNEL_DTYPE = np.int8
# Arithmetic type used when evaluating channel values
FLOAT_DTYPE = np.float32
