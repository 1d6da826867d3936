"""Runtime settings for the sampling monitor, read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from AQI.constants.clip_const import CLIP_AQI
from AQI.constants.shared_const import SMOOTHING_CONST


def _env_number(environ: Mapping[str, str], name: str, default, cast):
    raw = environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw)
    except ValueError as exc:
        raise ValueError(f"Invalid value for {name}: {raw!r}") from exc


@dataclass(frozen=True)
class MonitorSettings:
    log_level: str = "INFO"
    window_size: int = SMOOTHING_CONST["window_size"]
    send_every: int = SMOOTHING_CONST["send_every"]
    send_first_at: int = SMOOTHING_CONST["send_first_at"]
    display_min: float = CLIP_AQI["min"]
    display_max: float = CLIP_AQI["max"]

    def __post_init__(self) -> None:
        if self.display_min > self.display_max:
            raise ValueError(
                f"display_min ({self.display_min}) exceeds display_max ({self.display_max})"
            )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "MonitorSettings":
        """Build settings from ``AQI_*`` environment variables."""
        if environ is None:
            environ = os.environ
        return cls(
            log_level=environ.get("AQI_LOG_LEVEL", cls.log_level).upper(),
            window_size=_env_number(environ, "AQI_WINDOW_SIZE", cls.window_size, int),
            send_every=_env_number(environ, "AQI_SEND_EVERY", cls.send_every, int),
            send_first_at=_env_number(
                environ, "AQI_SEND_FIRST_AT", cls.send_first_at, int
            ),
            display_min=_env_number(environ, "AQI_DISPLAY_MIN", cls.display_min, float),
            display_max=_env_number(environ, "AQI_DISPLAY_MAX", cls.display_max, float),
        )

    @property
    def display_clip(self):
        return {"min": self.display_min, "max": self.display_max}
