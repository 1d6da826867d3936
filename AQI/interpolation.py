"""EPA piecewise-linear interpolation of a concentration into an AQI."""

from __future__ import annotations

import logging

import numpy as np

from AQI.breakpoints import (
    AQI_TABLE,
    BreakpointTable,
    MalformedTableError,
    high_index,
    high_index_array,
    low_index,
    low_index_array,
)

logger = logging.getLogger(__name__)


def round_half_away(val):
    """Round to the nearest integer, ties away from zero (C ``round``)."""
    return np.sign(val) * np.floor(np.abs(val) + 0.5)


def interpolate(
    val: float,
    low_idx: int,
    high_idx: int,
    table: BreakpointTable,
    aqi_table: BreakpointTable = AQI_TABLE,
) -> int:
    """
    Apply the EPA linear formula between two independently chosen brackets.

    Args:
        val: Truncated concentration
        low_idx: Bracket supplying the low concentration and low AQI
        high_idx: Bracket supplying the high concentration and high AQI
        table: Pollutant breakpoint table
        aqi_table: AQI category table aligned with ``table``

    Returns:
        AQI rounded half away from zero. Values beyond the table are
        extrapolated, not clamped.
    """
    conc_lo = table[low_idx].lo
    conc_hi = table[high_idx].hi
    aqi_lo = aqi_table[low_idx].lo
    aqi_hi = aqi_table[high_idx].hi
    if conc_hi == conc_lo:
        raise MalformedTableError(
            f"{table.name}: zero-width bracket between indices {low_idx} and {high_idx}"
        )

    aqi = (aqi_hi - aqi_lo) / (conc_hi - conc_lo) * (val - conc_lo) + aqi_lo
    return int(round_half_away(aqi))


def calculate_aqi(val: float, table: BreakpointTable) -> int:
    """Calculate the AQI for a truncated concentration and breakpoint table."""
    low_idx = low_index(val, table)
    high_idx = high_index(val, table)

    if val < table[0].lo:
        logger.debug("%s: %s below lowest breakpoint, clamping", table.name, val)
        val = table[0].lo
    elif val > table[-1].hi:
        logger.debug("%s: %s above highest breakpoint, extrapolating", table.name, val)

    return interpolate(val, low_idx, high_idx, table)


def calculate_aqi_array(vals: np.ndarray, table: BreakpointTable) -> np.ndarray:
    """
    Vectorised :func:`calculate_aqi`.

    NaN concentrations produce NaN; everything else matches the scalar path
    element by element. Returns a float array.
    """
    vals = np.asarray(vals, dtype=float)
    low_idx = low_index_array(vals, table)
    high_idx = high_index_array(vals, table)

    lows, highs = table.lows, table.highs
    conc_lo = lows[low_idx]
    conc_hi = highs[high_idx]
    aqi_lo = AQI_TABLE.lows[low_idx]
    aqi_hi = AQI_TABLE.highs[high_idx]

    vals = np.maximum(vals, lows[0])
    aqi = (aqi_hi - aqi_lo) / (conc_hi - conc_lo) * (vals - conc_lo) + aqi_lo
    return round_half_away(aqi)
