"""Concentration truncation helpers."""

from __future__ import annotations

from typing import Union

import numpy as np

from AQI.constants.shared_const import TRUNCATION_GUARD_DIGITS, TRUNCATION_GUARD_ULPS

ArrayLike = Union[float, np.ndarray]


def truncate(val: ArrayLike, digits: int) -> ArrayLike:
    """
    Truncate a concentration toward zero to ``digits`` decimal places.

    EPA requires concentrations to be truncated, not rounded, before they are
    classified (12.34 -> 12.3, never 12.4). Scaled values within a few ulps of
    the input's own precision of an integer are snapped to it first, so that
    binary representation error cannot drop a digit: ``0.57 * 100`` is
    56.99999999999999 in double precision and ``np.float32(9.4)`` is
    9.39999961... in single precision.

    Args:
        val: Concentration, scalar or numpy array of any float dtype
        digits: Number of decimal places to keep (0 for integer truncation)

    Returns:
        Truncated value, a float for scalar input and a float64 array otherwise
    """
    if digits < 0:
        raise ValueError(f"digits must be >= 0, got {digits}")
    arr = np.asarray(val)
    if not np.issubdtype(arr.dtype, np.floating):
        arr = arr.astype(float)
    eps = np.finfo(arr.dtype).eps

    scale = 10.0**digits
    scaled = arr.astype(float) * scale
    nearest = np.round(scaled)
    tolerance = np.maximum(
        np.abs(scaled) * eps * TRUNCATION_GUARD_ULPS, 10.0**-TRUNCATION_GUARD_DIGITS
    )
    scaled = np.where(np.abs(scaled - nearest) <= tolerance, nearest, scaled)

    result = np.trunc(scaled) / scale
    if np.ndim(result) == 0:
        return float(result)
    return result
