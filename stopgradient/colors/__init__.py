"""
stopgradient Color Classes
==========================

Immutable 8-bit RGB colors and the linear blend used between gradient stops.

Features
--------
- Immutable color instances (frozen after initialization)
- Structural (channel-wise) equality and hashing
- Value truncation and clamping to [0, 255]
- Hex string parsing and formatting

Usage
-----
>>> from stopgradient.colors import RGB, interpolate
>>>
>>> orange = RGB((255, 128, 0))
>>> orange.hex
'#ff8000'
>>> RGB("#ff8000") == orange
True
>>> interpolate(RGB((0, 0, 0)), RGB((255, 255, 255)), 0.5).value
(127, 127, 127)
"""

from .color_base import ColorBase
from .rgb import ColorRGB, RGB, parse_hex, to_rgb
from .interpolation import interpolate, np_interpolate

__all__ = [
    "ColorBase",
    "ColorRGB",
    "RGB",
    "parse_hex",
    "to_rgb",
    "interpolate",
    "np_interpolate",
]
