"""Combine per-pollutant sub-indices into the reported AQI."""

from __future__ import annotations

import logging
import math
from typing import Dict, Optional

import numpy as np

from AQI.constants.aqi_const import AQI_BREAKS, AQI_CATEGORIES
from AQI.constants.clip_const import CLIP_AQI
from AQI.pollutants import (
    Pollutant,
    aqi_for,
    aqi_for_array,
    ozone_index,
)

logger = logging.getLogger(__name__)


def sub_indices(
    pm25: float = 0,
    pm10: float = 0,
    o3_1h: float = 0,
    o3_8h: float = 0,
    co: float = 0,
    so2: float = 0,
    no2: float = 0,
) -> Dict[str, int]:
    """Sub-index per pollutant, with both ozone windows merged under ``o3``."""
    return {
        Pollutant.PM25.key: aqi_for(Pollutant.PM25, pm25),
        Pollutant.PM10.key: aqi_for(Pollutant.PM10, pm10),
        "o3": ozone_index(o3_8h, o3_1h),
        Pollutant.CO.key: aqi_for(Pollutant.CO, co),
        Pollutant.SO2.key: aqi_for(Pollutant.SO2, so2),
        Pollutant.NO2.key: aqi_for(Pollutant.NO2, no2),
    }


def aqi_total(
    pm25: float = 0,
    pm10: float = 0,
    o3_1h: float = 0,
    o3_8h: float = 0,
    co: float = 0,
    so2: float = 0,
    no2: float = 0,
) -> int:
    """
    Get the overall AQI given all pollutants. Enter 0 for unused sensors.

    Args:
        pm25: PM2.5 concentration in µg/m³
        pm10: PM10 concentration in µg/m³
        o3_1h: O3 concentration in ppm over 1 hour
        o3_8h: O3 concentration in ppm over 8 hours
        co: CO concentration in ppm
        so2: SO2 concentration in ppb
        no2: NO2 concentration in ppb

    Returns:
        The largest sub-index
    """
    return max(sub_indices(pm25, pm10, o3_1h, o3_8h, co, so2, no2).values())


def dominant_pollutant(
    pm25: float = 0,
    pm10: float = 0,
    o3_1h: float = 0,
    o3_8h: float = 0,
    co: float = 0,
    so2: float = 0,
    no2: float = 0,
) -> str:
    """Key of the pollutant driving the total; the first one wins ties."""
    indices = sub_indices(pm25, pm10, o3_1h, o3_8h, co, so2, no2)
    return max(indices, key=indices.get)


def aqi_total_array(pm25=0, pm10=0, o3_1h=0, o3_8h=0, co=0, so2=0, no2=0):
    """
    Vectorised :func:`aqi_total` over broadcastable arrays.

    A NaN reading is skipped in favour of the other pollutants; the result is
    NaN only where every pollutant is NaN.
    """
    ozone = np.fmax(
        aqi_for_array(Pollutant.O3_8H, o3_8h), aqi_for_array(Pollutant.O3_1H, o3_1h)
    )
    stacked = np.broadcast_arrays(
        aqi_for_array(Pollutant.PM25, pm25),
        aqi_for_array(Pollutant.PM10, pm10),
        ozone,
        aqi_for_array(Pollutant.CO, co),
        aqi_for_array(Pollutant.SO2, so2),
        aqi_for_array(Pollutant.NO2, no2),
    )
    return np.fmax.reduce(np.stack(stacked), axis=0)


def aqi_category(aqi: float) -> str:
    """EPA category name for an AQI value."""
    if not math.isfinite(aqi):
        raise ValueError(f"AQI must be finite, got {aqi}")
    if aqi < 0:
        raise ValueError(f"AQI must be non-negative, got {aqi}")
    for (_, hi), name in zip(AQI_BREAKS, AQI_CATEGORIES):
        if aqi <= hi:
            return name
    return AQI_CATEGORIES[-1]


def display_aqi(aqi: float, clip: Optional[Dict[str, float]] = None) -> float:
    """Clamp an AQI to the displayable range. Presentation only."""
    if clip is None:
        clip = CLIP_AQI
    clamped = min(max(aqi, clip["min"]), clip["max"])
    if clamped != aqi:
        logger.debug("AQI %s clamped to %s for display", aqi, clamped)
    return clamped
