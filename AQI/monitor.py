"""Periodic AQI sampling loop of the reference deployment.

The device samples its sensors once per second. Each tick, the smoothed
concentrations are turned into an AQI, clamped to the displayable range,
and averaged over a sliding window before being published.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from AQI.aggregate import aqi_total, display_aqi
from AQI.smoothing import SlidingWindowAverage
from AQI.utils.logging_config import setup_logging
from AQI.utils.settings import MonitorSettings

logger = logging.getLogger(__name__)


@dataclass
class MonitorReading:
    aqi: int
    displayed: float
    published: Optional[float]


class AQIMonitor:
    def __init__(self, settings: Optional[MonitorSettings] = None):
        self.settings = settings or MonitorSettings()
        self.filter = SlidingWindowAverage(
            window_size=self.settings.window_size,
            send_every=self.settings.send_every,
            send_first_at=self.settings.send_first_at,
        )
        self.last_published: Optional[float] = None

    @classmethod
    def from_env(cls) -> "AQIMonitor":
        """Build a monitor from ``AQI_*`` variables and configure logging."""
        settings = MonitorSettings.from_env()
        setup_logging(settings.log_level)
        return cls(settings)

    def sample(
        self,
        pm25: float = 0,
        pm10: float = 0,
        o3_1h: float = 0,
        o3_8h: float = 0,
        co: float = 0,
        so2: float = 0,
        no2: float = 0,
    ) -> MonitorReading:
        """Process one sampling tick. ``published`` is set when the window emits."""
        aqi = aqi_total(pm25, pm10, o3_1h, o3_8h, co, so2, no2)
        logger.info("Computed AQI: %d from %.2f PM2.5 and %.2f PM10", aqi, pm25, pm10)

        displayed = display_aqi(aqi, self.settings.display_clip)
        published = self.filter.update(displayed)
        if published is not None:
            self.last_published = published
        return MonitorReading(aqi=aqi, displayed=displayed, published=published)
