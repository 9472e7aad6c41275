from .color_types import (
    Scalar,
    RGBTuple,
    ChannelVector,
    ColorLike,
    ValueArray,
    colors_to_array,
)

__all__ = [
    "Scalar",
    "RGBTuple",
    "ChannelVector",
    "ColorLike",
    "ValueArray",
    "colors_to_array",
]
