from __future__ import annotations

import numpy as np
from numpy import ndarray

from .rgb import ColorRGB


def interpolate(c1: ColorRGB, c2: ColorRGB, normalized_value: float) -> ColorRGB:
    """
    Blend two colors linearly in RGB.

    Args:
        c1: Color at normalized value 0.0
        c2: Color at normalized value 1.0
        normalized_value: Position between c1 and c2. Values at or below 0.0
            return c1 as-is, values at or above 1.0 return c2 as-is.

    Returns:
        The blended color. Each channel is truncated toward zero, not rounded;
        a channel equal in both colors is kept exactly.
    """
    if normalized_value <= 0.0:
        return c1
    if normalized_value >= 1.0:
        return c2

    inverse = 1.0 - normalized_value
    return ColorRGB(tuple(
        a if a == b else int(inverse * a + normalized_value * b)
        for a, b in zip(c1.value, c2.value)
    ))


def np_interpolate(starts: ndarray, ends: ndarray, normalized_values: ndarray) -> ndarray:
    """
    Vectorized version of :func:`interpolate`.

    Args:
        starts: Float array of shape (..., 3) with the colors at 0.0
        ends: Float array of shape (..., 3) with the colors at 1.0
        normalized_values: Array of shape (...) with blend positions

    Returns:
        uint8 array of shape (..., 3). Uses the same expression order as the
        scalar path, so both produce identical channels.
    """
    t = np.asarray(normalized_values, dtype=np.float64)[..., None]
    blended = (1.0 - t) * starts + t * ends
    # float -> int truncates toward zero; blended channels are never negative
    result = np.trunc(blended)
    result = np.where(starts == ends, starts, result)
    result = np.where(t <= 0.0, starts, result)
    result = np.where(t >= 1.0, ends, result)
    return result.astype(np.uint8)
