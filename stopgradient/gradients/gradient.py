from __future__ import annotations

import math
import warnings
from numbers import Integral
from typing import Iterable, List, Optional, Tuple

import numpy as np
from boundednumbers import clamp

from ..colors.interpolation import interpolate, np_interpolate
from ..colors.rgb import ColorRGB, to_rgb
from ..errors import InvalidConfiguration, NotInitialized
from ..types.color_types import ColorLike, Scalar, ValueArray, colors_to_array
from ..utils.default import map_optional, value_or_default
from .partition import EqualWidthPartition, as_scalar

UINT16_MIN = 0
UINT16_MAX = 0xFFFF


class Gradient:
    """
    Maps a bounded numeric value to a color on a piecewise-linear gradient.

    The gradient is defined by a value range [min, max] and an ordered list of
    color stops, which are spread evenly across the range. A query finds the
    two stops around the value and blends them linearly in RGB.

    Values below ``min`` resolve to ``min_outlier_color`` (or the first stop
    when none is configured); values above ``max`` resolve to
    ``max_outlier_color`` (or the last stop).

    Example
    -------
    >>> grad = Gradient(0, 100, [(0, 0, 0), (255, 255, 255)])
    >>> grad.get_rgb(50).value
    (127, 127, 127)
    >>> grad.get_rgb(150).value
    (255, 255, 255)

    A default-constructed gradient must be initialized before it is queried.
    Queries never mutate the gradient; re-initializing replaces everything.
    """

    __slots__ = (
        "_min",
        "_max",
        "_stops",
        "_min_outlier_color",
        "_max_outlier_color",
        "_partition",
    )

    def __init__(
        self,
        min: Optional[int] = None,
        max: Optional[int] = None,
        stops: Optional[Iterable[ColorLike]] = None,
        min_outlier_color: Optional[ColorLike] = None,
        max_outlier_color: Optional[ColorLike] = None,
    ) -> None:
        self._partition: Optional[EqualWidthPartition] = None
        self._min: Optional[int] = None
        self._max: Optional[int] = None
        self._stops: Tuple[ColorRGB, ...] = ()
        self._min_outlier_color: Optional[ColorRGB] = None
        self._max_outlier_color: Optional[ColorRGB] = None

        if min is None and max is None and stops is None:
            if min_outlier_color is not None or max_outlier_color is not None:
                raise InvalidConfiguration("Outlier colors require min, max and stops")
            return
        self.initialize(min, max, stops, min_outlier_color, max_outlier_color)

    def initialize(
        self,
        min: Optional[int],
        max: Optional[int],
        stops: Optional[Iterable[ColorLike]],
        min_outlier_color: Optional[ColorLike] = None,
        max_outlier_color: Optional[ColorLike] = None,
    ) -> "Gradient":
        """
        Define the value range, the stops, and optional outlier colors.

        Args:
            min: Smallest in-range value, an integer in [0, 65535]
            max: Largest in-range value, an integer in [0, 65535], greater than min
            stops: At least two colors, spread evenly from min to max. The
                sequence is copied.
            min_outlier_color: Color for values below min. Defaults to the first stop.
            max_outlier_color: Color for values above max. Defaults to the last stop.

        Returns:
            self, to allow chaining.

        Raises:
            InvalidConfiguration: if the range or the stops are unusable. The
                gradient keeps its previous configuration in that case.
        """
        lower = _validate_bound("min", min)
        upper = _validate_bound("max", max)
        if lower >= upper:
            raise InvalidConfiguration(f"min ({lower}) must be less than max ({upper})")

        if stops is None:
            raise InvalidConfiguration("A gradient needs at least 2 stops, got none")
        colors = tuple(_validate_color("stop", stop) for stop in stops)
        if len(colors) < 2:
            raise InvalidConfiguration(f"A gradient needs at least 2 stops, got {len(colors)}")

        low_outlier = map_optional(min_outlier_color, lambda c: _validate_color("min_outlier_color", c))
        high_outlier = map_optional(max_outlier_color, lambda c: _validate_color("max_outlier_color", c))

        num_bins = len(colors) - 1
        # span + 1 integers reach at most span + 1 bins
        if upper - lower < num_bins - 1:
            warnings.warn(
                f"Range [{lower}, {upper}] is narrower than the {num_bins} bins defined by "
                f"{len(colors)} stops; some bins cannot be reached by integer values",
                UserWarning,
                stacklevel=2,
            )

        # Everything validated; commit in one go.
        self._min = lower
        self._max = upper
        self._stops = colors
        self._min_outlier_color = low_outlier
        self._max_outlier_color = high_outlier
        self._partition = EqualWidthPartition(lower, upper, num_bins)
        return self

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def is_initialized(self) -> bool:
        return self._partition is not None

    @property
    def min(self) -> Optional[int]:
        return self._min

    @property
    def max(self) -> Optional[int]:
        return self._max

    @property
    def stops(self) -> Tuple[ColorRGB, ...]:
        return self._stops

    @property
    def min_outlier_color(self) -> Optional[ColorRGB]:
        return self._min_outlier_color

    @property
    def max_outlier_color(self) -> Optional[ColorRGB]:
        return self._max_outlier_color

    @property
    def num_bins(self) -> int:
        return len(self._stops) - 1 if self._stops else 0

    def _require_partition(self) -> EqualWidthPartition:
        if self._partition is None:
            raise NotInitialized()
        return self._partition

    # ------------------ QUERIES ------------------
    def get_rgb(self, value: Scalar) -> ColorRGB:
        """
        Retrieve the color for value.

        Raises:
            NotInitialized: if the gradient has not been initialized
            TypeError: if value is not a real number
            ValueError: if value is NaN
        """
        partition = self._require_partition()
        value = as_scalar(value)
        if isinstance(value, float) and math.isnan(value):
            raise ValueError("Gradient values must not be NaN")

        # Handle outliers
        if value < partition.lower:
            return value_or_default(self._min_outlier_color, self._stops[0])
        if value > partition.upper:
            return value_or_default(self._max_outlier_color, self._stops[-1])

        index, normalized = partition.locate(value)
        return interpolate(self._stops[index], self._stops[index + 1], normalized)

    __call__ = get_rgb

    def locate(self, value: Scalar) -> Tuple[int, float]:
        """
        Return the bin index of value and its normalized position in that bin.

        Raises:
            NotInitialized: if the gradient has not been initialized
            ValueError: if value is an outlier
        """
        partition = self._require_partition()
        return partition.locate(as_scalar(value))

    def get_rgb_array(self, values: ValueArray) -> np.ndarray:
        """
        Vectorized :meth:`get_rgb`.

        Args:
            values: Array-like of numbers, any shape

        Returns:
            uint8 array of shape ``values.shape + (3,)``; each entry equals
            ``get_rgb`` of the matching value.

        Raises:
            NotInitialized: if the gradient has not been initialized
            TypeError: if any value is not a real number
            ValueError: if any value is NaN
        """
        partition = self._require_partition()
        v = np.asarray(values)
        if v.dtype == object:
            v = _object_values(v, partition.lower, partition.upper)
        if v.dtype.kind not in "biuf":
            raise TypeError(f"Gradient values must be real numbers, got dtype {v.dtype}")
        if v.dtype.kind == "f" and np.isnan(v).any():
            raise ValueError("Gradient values must not be NaN")

        stops = colors_to_array(self._stops)
        index, normalized = partition.np_locate(v)
        result = np_interpolate(stops[index], stops[index + 1], normalized)

        low = value_or_default(self._min_outlier_color, self._stops[0])
        high = value_or_default(self._max_outlier_color, self._stops[-1])
        result[v < partition.lower] = low.value
        result[v > partition.upper] = high.value
        return result

    def sample(self, steps: int) -> List[ColorRGB]:
        """
        Evenly spaced colors from min to max (both included), e.g. for a legend.

        Args:
            steps: Number of colors, at least 2
        """
        partition = self._require_partition()
        if steps < 2:
            raise ValueError("steps must be >= 2")
        positions = np.linspace(partition.lower, partition.upper, steps)
        return [self.get_rgb(float(p)) for p in positions]

    def __repr__(self) -> str:
        if not self.is_initialized:
            return "Gradient(<uninitialized>)"
        return (
            f"Gradient(min={self._min}, max={self._max}, stops={list(self._stops)!r}, "
            f"min_outlier_color={self._min_outlier_color!r}, "
            f"max_outlier_color={self._max_outlier_color!r})"
        )


def _validate_bound(name: str, bound: object) -> int:
    if isinstance(bound, bool) or not isinstance(bound, Integral):
        raise InvalidConfiguration(f"{name} must be an integer, got {bound!r}")
    bound = int(bound)
    if not UINT16_MIN <= bound <= UINT16_MAX:
        raise InvalidConfiguration(f"{name} must be within [{UINT16_MIN}, {UINT16_MAX}], got {bound}")
    return bound


def _validate_color(name: str, color: ColorLike) -> ColorRGB:
    try:
        return to_rgb(color)
    except (TypeError, ValueError) as e:
        raise InvalidConfiguration(f"Invalid {name} {color!r}: {e}") from e


def _object_values(values: np.ndarray, lower: int, upper: int) -> np.ndarray:
    """
    Convert an object array of Python numbers to float64.

    numpy falls back to dtype=object for ints too large for int64. Such ints
    are pulled in to one past the range first; they stay on the same side of
    it but no longer overflow float64.

    Raises:
        TypeError: if an element is not a real number
    """
    def convert(item) -> float:
        item = as_scalar(item)
        if isinstance(item, int):
            item = clamp(item, lower - 1, upper + 1)
        return float(item)

    flat = np.fromiter((convert(item) for item in values.flat), dtype=np.float64, count=values.size)
    return flat.reshape(values.shape)
