from __future__ import annotations
from typing import Sequence, Tuple, Union, TYPE_CHECKING
import numpy as np
from numpy import ndarray

if TYPE_CHECKING:
    from ..colors.rgb import ColorRGB

Scalar = int | float
RGBTuple = Tuple[int, int, int]
ChannelVector = Sequence[Scalar]
ColorLike = Union["ColorRGB", ChannelVector, str]
ValueArray = Union[ndarray, Sequence[Scalar]]


def colors_to_array(colors: Sequence["ColorRGB"]) -> np.ndarray:
    """
    Stack a sequence of colors into a float64 array of shape (N, 3).

    Args:
        colors: Colors to stack

    Returns:
        numpy array with one row per color
    """
    return np.array([color.value for color in colors], dtype=np.float64)
