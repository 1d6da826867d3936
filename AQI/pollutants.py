"""Per-pollutant AQI adapters.

Each :class:`Pollutant` couples a breakpoint table with the truncation
precision and unit EPA prescribes for it. ``aqi_for`` runs the
truncate -> locate -> interpolate chain for one reading; ``aqi_for_array``
does the same over a numpy array.

Ozone is special: EPA defines both an 8-hour and a 1-hour table, and the
8-hour table is not defined above 0.200 ppm, so higher 8-hour values are
evaluated on the 1-hour table instead.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Union

import numpy as np

from AQI.breakpoints import BreakpointTable
from AQI.constants.aqi_const import (
    CO_BREAKS,
    NO2_BREAKS,
    O3_1H_BREAKS,
    O3_8H_BREAKS,
    PM10_BREAKS,
    PM25_BREAKS,
    SO2_BREAKS,
)
from AQI.constants.shared_const import OZONE_8H_MAX
from AQI.interpolation import calculate_aqi, calculate_aqi_array
from AQI.truncation import truncate


class Pollutant(Enum):
    PM25 = ("pm2_5", BreakpointTable.from_pairs("PM2.5", PM25_BREAKS), 1, "µg/m³")
    PM10 = ("pm10", BreakpointTable.from_pairs("PM10", PM10_BREAKS), 0, "µg/m³")
    O3_8H = ("o3_8h", BreakpointTable.from_pairs("O3 8h", O3_8H_BREAKS), 3, "ppm")
    O3_1H = ("o3_1h", BreakpointTable.from_pairs("O3 1h", O3_1H_BREAKS), 3, "ppm")
    CO = ("co", BreakpointTable.from_pairs("CO", CO_BREAKS), 1, "ppm")
    SO2 = ("so2", BreakpointTable.from_pairs("SO2", SO2_BREAKS), 0, "ppb")
    NO2 = ("no2", BreakpointTable.from_pairs("NO2", NO2_BREAKS), 0, "ppb")

    def __init__(self, key: str, table: BreakpointTable, digits: int, unit: str):
        self.key = key
        self.table = table
        self.digits = digits
        self.unit = unit

    @classmethod
    def from_key(cls, key: str) -> "Pollutant":
        for pollutant in cls:
            if pollutant.key == key:
                return pollutant
        raise ValueError(f"Unknown pollutant: {key!r}")

    def truncate(self, raw):
        return truncate(raw, self.digits)


PollutantLike = Union[Pollutant, str]


def _resolve(pollutant: PollutantLike) -> Pollutant:
    if isinstance(pollutant, Pollutant):
        return pollutant
    return Pollutant.from_key(pollutant)


def aqi_for(pollutant: PollutantLike, raw: float) -> int:
    """
    Get the AQI sub-index for a single concentration.

    Args:
        pollutant: ``Pollutant`` member or its key (``"pm2_5"``, ``"o3_8h"``, ...)
        raw: Concentration in the pollutant's unit

    Returns:
        AQI, possibly above 500 for concentrations beyond the table
    """
    pollutant = _resolve(pollutant)
    if not math.isfinite(raw):
        raise ValueError(f"{pollutant.key}: concentration must be finite, got {raw}")

    val = pollutant.truncate(raw)
    if pollutant is Pollutant.O3_8H and val > OZONE_8H_MAX:
        return calculate_aqi(val, Pollutant.O3_1H.table)
    return calculate_aqi(val, pollutant.table)


def aqi_for_array(pollutant: PollutantLike, raw) -> np.ndarray:
    """Vectorised :func:`aqi_for`; NaN concentrations yield NaN."""
    pollutant = _resolve(pollutant)
    vals = pollutant.truncate(np.asarray(raw))
    if pollutant is Pollutant.O3_8H:
        return np.where(
            vals > OZONE_8H_MAX,
            calculate_aqi_array(vals, Pollutant.O3_1H.table),
            calculate_aqi_array(vals, Pollutant.O3_8H.table),
        )
    return calculate_aqi_array(vals, pollutant.table)


def ozone_8h_index(raw_8h: float) -> int:
    """Get the 8h ozone AQI -- this is the generally required one."""
    return aqi_for(Pollutant.O3_8H, raw_8h)


def ozone_1h_index(raw_1h: float) -> int:
    # EPA only defines the 1h index from 0.125 ppm; lower values are still
    # evaluated on the 8h-derived rows of the 1h table.
    return aqi_for(Pollutant.O3_1H, raw_1h)


def ozone_index(raw_8h: float, raw_1h: float) -> int:
    """Ozone AQI: the larger of the 8-hour and 1-hour sub-indices."""
    return max(ozone_8h_index(raw_8h), ozone_1h_index(raw_1h))
