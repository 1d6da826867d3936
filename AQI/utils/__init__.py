"""Utility subpackage for the AQI engine."""

from .logging_config import setup_logging
from .settings import MonitorSettings

__all__ = [
    "setup_logging",
    "MonitorSettings",
]
