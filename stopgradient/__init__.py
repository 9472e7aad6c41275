"""
stopgradient - Value to Color Mapping
=====================================

Maps a bounded numeric value onto a color drawn from a piecewise-linear
gradient defined by an ordered list of color stops. Intended for heatmaps,
color scales and UI indicators.

Key Features
------------
- Evenly spaced color stops over an integer range [min, max]
- Optional outlier colors for values below min / above max
- Constant-time lookup with exact bin edges for integer values
- Vectorized lookup over numpy arrays
- Immutable, hashable 8-bit RGB colors with hex helpers

Quick Start
-----------
>>> from stopgradient import Gradient, RGB
>>>
>>> grad = Gradient(0, 100, [RGB((0, 0, 0)), RGB((255, 255, 255))],
...                 max_outlier_color=RGB((255, 0, 0)))
>>> grad.get_rgb(50)
ColorRGB((127, 127, 127))
>>> grad.get_rgb(101)
ColorRGB((255, 0, 0))

Modules
-------
- colors: ColorRGB and linear blending
- gradients: Gradient, EqualWidthPartition and a built-in heat scale
- errors: InvalidConfiguration, NotInitialized
"""

from .colors.color_base import ColorBase
from .colors.rgb import ColorRGB, RGB, parse_hex
from .colors.interpolation import interpolate, np_interpolate
from .errors import GradientError, InvalidConfiguration, NotInitialized
from .gradients import (
    EqualWidthPartition,
    Gradient,
    UINT16_MIN,
    UINT16_MAX,
    heat_gradient,
    example_heatmap,
)

__version__ = "1.0.0"

__all__ = [
    # colors
    "ColorBase",
    "ColorRGB",
    "RGB",
    "parse_hex",
    "interpolate",
    "np_interpolate",
    # errors
    "GradientError",
    "InvalidConfiguration",
    "NotInitialized",
    # gradients
    "EqualWidthPartition",
    "Gradient",
    "UINT16_MIN",
    "UINT16_MAX",
    "heat_gradient",
    "example_heatmap",
]
