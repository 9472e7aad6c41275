from __future__ import annotations

import numpy as np

from ..colors.rgb import ColorRGB
from ..types.color_types import ColorLike
from .gradient import Gradient

HEAT_STOPS = (
    ColorRGB((255, 255, 255)),  # white is the "closest"
    ColorRGB((255, 0, 0)),      # red
    ColorRGB((255, 255, 0)),    # yellow
    ColorRGB((0, 255, 0)),      # green
    ColorRGB((0, 0, 255)),      # blue
    ColorRGB((75, 25, 150)),    # purple is the "farthest"
)


def heat_gradient(
    min: int = 0x000F,
    max: int = 0xFFF0,
    outlier_color: ColorLike = ColorRGB.null_value,
) -> Gradient:
    """Six-stop white → purple distance scale with one outlier color on both sides."""
    return Gradient(min, max, HEAT_STOPS, outlier_color, outlier_color)


def example_heatmap(output_path=None, width=512, height=256):
    """Render a radial distance field through heat_gradient()."""
    from PIL import Image

    grad = heat_gradient()
    ys, xs = np.mgrid[0:height, 0:width]
    cx, cy = width / 2, height / 2
    distance = np.hypot(xs - cx, ys - cy) / np.hypot(cx, cy)
    # Stretch past the range so the outlier color shows in the corners
    values = grad.min + distance * (grad.max - grad.min) * 1.1

    img = Image.fromarray(grad.get_rgb_array(values))
    if output_path:
        img.save(output_path)
    img.show()
