from typing import ClassVar, Sequence, Tuple

from ..types.color_types import Scalar
from ..utils.num_utils import to_int8
from .color_base import ColorBase


class ColorRGBI8(ColorBase):
    """Signed 8-bit RGB color. Each component lies in [-128, 127]."""
    __slots__ = ()

    num_channels: ClassVar[int] = 3
    channel_names: ClassVar[Tuple[str, ...]] = ("r", "g", "b")

    @property
    def r(self) -> int:
        return self._value[0]

    @property
    def g(self) -> int:
        return self._value[1]

    @property
    def b(self) -> int:
        return self._value[2]

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}: {v}" for name, v in zip(self.channel_names, self._value))
        return f"RGB {{ {fields} }}"


RGB = ColorRGBI8


def rgb_from_sequence(values: Sequence[Scalar]) -> ColorRGBI8:
    """
    Build a color from any 3-element numeric sequence.

    Each element is narrowed to int8: truncated toward zero, then wrapped
    (no clamping), so ``(25.8, 300, -1.9)`` becomes ``(25, 44, -1)``.

    Raises:
        ValueError: if ``values`` does not hold exactly 3 elements
    """
    if len(values) != ColorRGBI8.num_channels:
        raise ValueError(f"expected 3 values to build an RGB color, got {len(values)}")
    return ColorRGBI8(tuple(int(v) for v in to_int8(values)))
