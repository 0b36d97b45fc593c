from __future__ import annotations
from typing import ClassVar, Iterator, Tuple, cast
from numpy import ndarray
import numpy as np

from ..types.color_types import CHANNEL_DTYPE, ColorLike
from ..utils.num_utils import INT8_MAX, INT8_MIN


class ColorBase:
    __slots__ = ('_value', '_is_frozen')  # prevents adding new attributes → immutability

    num_channels: ClassVar[int] = 1
    channel_names: ClassVar[Tuple[str, ...]] = ()
    minima: ClassVar[int] = INT8_MIN
    maxima: ClassVar[int] = INT8_MAX

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: ColorLike) -> None:
        if isinstance(value, ColorBase):
            value = value.value

        if isinstance(value, ndarray):
            if value.shape != (self.num_channels,):
                raise ValueError(
                    f"{self.__class__.__name__} expects shape ({self.num_channels},), got {value.shape}"
                )
            value = tuple(value.tolist())

        if len(value) != self.num_channels:
            raise ValueError(
                f"{self.__class__.__name__} expects {self.num_channels} components, got {len(value)}"
            )

        components = []
        for v in value:
            if isinstance(v, (bool, np.bool_)) or not isinstance(v, (int, np.integer)):
                raise TypeError(
                    f"{self.__class__.__name__} components must be integers, got {type(v).__name__}"
                )
            if not self.minima <= v <= self.maxima:
                raise ValueError(
                    f"{self.__class__.__name__} components must lie in [{self.minima}, {self.maxima}], got {v}"
                )
            components.append(int(v))

        # safe assignment; __setattr__ still allows it during init
        self._value = tuple(components)

        # freeze instance, no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Tuple[int, ...]:
        return cast(Tuple[int, ...], self._value)

    def to_array(self) -> ndarray:
        """Return the components as an int8 array."""
        return np.array(self._value, dtype=CHANNEL_DTYPE)

    def __iter__(self) -> Iterator[int]:
        return iter(self._value)

    def __len__(self) -> int:
        return self.num_channels

    def __getitem__(self, index: int) -> int:
        return self._value[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ColorBase):
            return type(self) is type(other) and self._value == other._value
        if isinstance(other, tuple):
            return self._value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._value!r})"
