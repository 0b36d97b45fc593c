from .color_types import (
    Scalar,
    ColorTriple,
    ColorLike,
    ChannelValues,
    CHANNEL_NAMES,
    CHANNEL_DTYPE,
    FLOAT_DTYPE,
)

__all__ = [
    'Scalar',
    'ColorTriple',
    'ColorLike',
    'ChannelValues',
    'CHANNEL_NAMES',
    'CHANNEL_DTYPE',
    'FLOAT_DTYPE',
]
