from __future__ import annotations
from string import hexdigits
from typing import ClassVar, Tuple
from ..types.color_types import ColorLike, RGBTuple
from .color_base import ColorBase


class ColorRGB(ColorBase):
    """
    An 8-bit-per-channel RGB color.

    Accepts a 3-sequence of numbers, another ColorRGB, or a hex string
    (``"#ff8000"``, ``"ff8000"`` or the short form ``"#f80"``). Channels are
    truncated to int and clamped to [0, 255].
    """
    __slots__ = ()

    num_channels: ClassVar[int] = 3
    mode: ClassVar[str] = "rgb"
    maxima: ClassVar[Tuple[int, int, int]] = (255, 255, 255)
    null_value: ClassVar[Tuple[int, int, int]] = (0, 0, 0)

    def __init__(self, value: ColorLike) -> None:
        if isinstance(value, str):
            value = parse_hex(value)
        super().__init__(value)

    @classmethod
    def from_hex(cls, hex_color: str) -> "ColorRGB":
        return cls(parse_hex(hex_color))

    @property
    def red(self) -> int:
        return self._value[0]

    @property
    def green(self) -> int:
        return self._value[1]

    @property
    def blue(self) -> int:
        return self._value[2]

    @property
    def hex(self) -> str:
        return "#{:02x}{:02x}{:02x}".format(*self._value)


def parse_hex(hex_color: str) -> RGBTuple:
    """
    Parse ``#rrggbb`` / ``rrggbb`` / ``#rgb`` into an (r, g, b) tuple.

    Raises:
        ValueError: if the string is not a valid hex color
    """
    digits = hex_color.strip().lstrip('#')
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    if len(digits) != 6 or any(ch not in hexdigits for ch in digits):
        raise ValueError(f"Invalid hex color: {hex_color!r}")
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def to_rgb(color: ColorLike) -> ColorRGB:
    """Return color as a ColorRGB, reusing the instance when it already is one."""
    if isinstance(color, ColorRGB):
        return color
    return ColorRGB(color)


RGB = ColorRGB

