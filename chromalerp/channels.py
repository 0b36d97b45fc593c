"""
Channel splitting.

Turns an ordered sequence of colors into three index-aligned int8
sequences, one per channel.
"""
from __future__ import annotations
from typing import Iterable, Iterator, List

import numpy as np
from numpy import ndarray as NDArray

from .colors.rgb import ColorRGBI8
from .types.color_types import CHANNEL_DTYPE, CHANNEL_NAMES, ChannelValues


def _frozen_channel(values: ChannelValues) -> NDArray:
    arr = np.array(values, dtype=CHANNEL_DTYPE).reshape(-1)
    arr.flags.writeable = False
    return arr


class Channels:
    """
    Per-channel view of a color sequence.

    ``red[i]``, ``green[i]`` and ``blue[i]`` all come from the i-th color.
    """
    __slots__ = ('red', 'green', 'blue', '_is_frozen')

    def __setattr__(self, name, value):
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"Channels is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, red: ChannelValues, green: ChannelValues, blue: ChannelValues) -> None:
        red, green, blue = _frozen_channel(red), _frozen_channel(green), _frozen_channel(blue)
        if not len(red) == len(green) == len(blue):
            raise ValueError(
                f"Channel lengths differ: red={len(red)}, green={len(green)}, blue={len(blue)}"
            )
        self.red = red
        self.green = green
        self.blue = blue
        super().__setattr__('_is_frozen', True)

    def __len__(self) -> int:
        return len(self.red)

    def __iter__(self) -> Iterator[NDArray]:
        return iter((self.red, self.green, self.blue))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Channels):
            return NotImplemented
        return all(np.array_equal(a, b) for a, b in zip(self, other))

    __hash__ = None  # type: ignore[assignment]

    def to_colors(self) -> List[ColorRGBI8]:
        """Zip the channels back into colors, index by index."""
        return [
            ColorRGBI8((int(r), int(g), int(b)))
            for r, g, b in zip(self.red, self.green, self.blue)
        ]

    def __repr__(self) -> str:
        fields = ", ".join(
            f"{name}={getattr(self, name).tolist()}" for name in CHANNEL_NAMES
        )
        return f"Channels({fields})"


def get_channels(colors: Iterable[ColorRGBI8]) -> Channels:
    """
    Split colors into their red, green and blue sequences.

    Args:
        colors: Ordered colors. May be empty.

    Returns:
        Channels whose sequences have the length of ``colors`` and keep its order.
    """
    red: List[int] = []
    green: List[int] = []
    blue: List[int] = []

    for color in colors:
        red.append(color.r)
        green.append(color.g)
        blue.append(color.b)

    return Channels(red, green, blue)
