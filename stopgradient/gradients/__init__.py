from .partition import EqualWidthPartition, as_scalar
from .gradient import Gradient, UINT16_MIN, UINT16_MAX
from .examples import HEAT_STOPS, heat_gradient, example_heatmap

__all__ = [
    "EqualWidthPartition",
    "as_scalar",
    "Gradient",
    "UINT16_MIN",
    "UINT16_MAX",
    "HEAT_STOPS",
    "heat_gradient",
    "example_heatmap",
]
