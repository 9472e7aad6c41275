from __future__ import annotations
from typing import Any, ClassVar, Iterator, Tuple
from collections.abc import Sequence
from boundednumbers import clamp
from ..types.color_types import ChannelVector


class ColorBase:
    __slots__ = ('_value', '_is_frozen')  # prevents adding new attributes → immutability

    num_channels: ClassVar[int] = 1
    mode:       ClassVar[str]
    maxima:     ClassVar[Tuple[int, ...]]
    null_value: ClassVar[Tuple[int, ...]]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: ColorBase | ChannelVector) -> None:
        if len(self.maxima) != self.num_channels:
            raise ValueError(f"{self.mode} expects {self.num_channels}-shaped maxima")

        # ---- Handle ColorBase input ----
        if isinstance(value, ColorBase):
            if value.mode != self.mode:
                raise TypeError(f"Cannot build {self.mode} color from {value.mode} color")
            value = value.value

        if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
            # numpy rows are not Sequences; go through tuple()
            try:
                value = tuple(value)  # type: ignore[arg-type]
            except TypeError:
                raise TypeError(
                    f"{self.mode} expects a {self.num_channels}-channel sequence, got {type(value).__name__}"
                ) from None
            if any(isinstance(v, str) for v in value):
                raise TypeError(f"{self.mode} channels must be numbers")

        if len(value) != self.num_channels:
            raise ValueError(f"{self.mode} expects {self.num_channels}-channel value, got {len(value)}")

        # type enforcement: int() truncates toward zero like a narrowing cast
        try:
            channels = tuple(int(v) for v in value)
        except (TypeError, ValueError):
            raise TypeError(f"{self.mode} channels must be numbers, got {value!r}") from None

        # clamp value
        channels = tuple(
            int(clamp(v, 0, m)) for v, m in zip(channels, self.maxima)
        )

        # safe assignment; __setattr__ still allows it during init
        self._value = channels

        # freeze instance — no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Tuple[int, ...]:
        return self._value

    def __iter__(self) -> Iterator[int]:
        return iter(self._value)

    def __len__(self) -> int:
        return self.num_channels

    def __getitem__(self, index: int) -> int:
        return self._value[index]

    # Structural equality: two colors are equal iff every channel matches
    def __eq__(self, other: Any) -> bool:
        if isinstance(other, ColorBase):
            return self.mode == other.mode and self._value == other._value
        if isinstance(other, tuple):
            return self._value == other
        return NotImplemented

    def __ne__(self, other: Any) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._value!r})"

    def __reduce__(self):
        return (self.__class__, (self._value,))


