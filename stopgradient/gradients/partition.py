from __future__ import annotations

import math
from numbers import Integral, Real
from typing import Tuple

import numpy as np
from boundednumbers import clamp

from ..types.color_types import Scalar, ValueArray


def as_scalar(value: Real) -> Scalar:
    """
    Coerce a query value to a plain int or float.

    Integral values (including numpy integers) become int so bin lookup can use
    exact integer arithmetic; other reals become float64.

    Raises:
        TypeError: if value is not a real number
    """
    if isinstance(value, Integral):
        return int(value)
    if isinstance(value, Real):
        return float(value)
    raise TypeError(f"Gradient values must be real numbers, got {type(value).__name__}")


class EqualWidthPartition:
    """
    Partitions the closed interval [lower, upper] into num_bins equal-width bins.

    Bins are:
        [lower, lower + w)
        [lower + w, lower + 2w)
        ...
        [upper - w, upper]

    where w = (upper - lower) / num_bins. The upper edge belongs to the last bin.
    Positions are computed as ``(value - lower) * num_bins / (upper - lower)``
    rather than dividing by a precomputed bin width, so integer values on a
    bin edge always land exactly on it.
    """

    __slots__ = ("lower", "upper", "num_bins", "_span")

    def __init__(self, lower: Scalar, upper: Scalar, num_bins: int) -> None:
        if not lower < upper:
            raise ValueError("Lower bound must be strictly less than upper bound.")
        if num_bins < 1:
            raise ValueError("Number of bins must be at least 1.")

        self.lower = lower
        self.upper = upper
        self.num_bins = num_bins
        self._span = upper - lower

    def __len__(self) -> int:
        return self.num_bins

    def __repr__(self) -> str:
        return f"EqualWidthPartition({self.lower!r}, {self.upper!r}, {self.num_bins!r})"

    @property
    def bin_width(self) -> float:
        return self._span / self.num_bins

    def locate(self, value: Scalar) -> Tuple[int, float]:
        """
        Find the bin containing value and the normalized position inside it.

        Args:
            value: A number in [lower, upper]

        Returns:
            (bin index, normalized value in [0, 1])
        """
        if not self.lower <= value <= self.upper:
            raise ValueError(f"Value {value!r} is outside [{self.lower}, {self.upper}].")

        last = self.num_bins - 1
        if value >= self.upper:
            return last, 1.0

        scaled = (value - self.lower) * self.num_bins
        if isinstance(scaled, int) and isinstance(self._span, int):
            index = scaled // self._span
        else:
            index = math.floor(scaled / self._span)
        index = int(clamp(index, 0, last))

        normalized = (scaled - index * self._span) / self._span
        return index, float(clamp(normalized, 0.0, 1.0))

    def np_locate(self, values: ValueArray) -> Tuple[np.ndarray, np.ndarray]:
        """
        Vectorized :meth:`locate`.

        Values outside [lower, upper] are clamped to the nearest edge, so
        callers resolve outliers before trusting the result for them.

        Returns:
            (intp array of bin indices, float64 array of normalized values),
            both with the shape of values
        """
        v = np.clip(np.asarray(values, dtype=np.float64), self.lower, self.upper)
        span = float(self._span)

        scaled = (v - self.lower) * self.num_bins
        index = np.clip(np.floor(scaled / span).astype(np.intp), 0, self.num_bins - 1)
        normalized = np.clip((scaled - index * span) / span, 0.0, 1.0)
        normalized = np.where(v >= self.upper, 1.0, normalized)
        return index, normalized
