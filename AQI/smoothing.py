"""Sliding-window moving average for periodic sensor samples."""

from __future__ import annotations

import logging
import math
from collections import deque
from typing import Optional

import numpy as np

from AQI.constants.shared_const import SMOOTHING_CONST

logger = logging.getLogger(__name__)


class SlidingWindowAverage:
    """Average the last ``window_size`` readings.

    Emits on the ``send_first_at``-th reading and then once every
    ``send_every`` readings; ``update`` returns ``None`` in between. NaN
    readings occupy a window slot and count towards the schedule but are left
    out of the average; a window holding only NaN emits NaN.
    """

    def __init__(
        self,
        window_size: int = SMOOTHING_CONST["window_size"],
        send_every: int = SMOOTHING_CONST["send_every"],
        send_first_at: int = SMOOTHING_CONST["send_first_at"],
    ):
        if window_size < 1:
            raise ValueError(f"window_size must be >= 1, got {window_size}")
        if send_every < 1:
            raise ValueError(f"send_every must be >= 1, got {send_every}")
        if not 1 <= send_first_at <= send_every:
            raise ValueError(
                f"send_first_at must be between 1 and send_every ({send_every}), "
                f"got {send_first_at}"
            )
        self.window_size = window_size
        self.send_every = send_every
        self.send_first_at = send_first_at
        self._window = deque(maxlen=window_size)
        self._send_at = send_every - send_first_at

    def __len__(self) -> int:
        return len(self._window)

    def update(self, value: float) -> Optional[float]:
        self._window.append(value)
        self._send_at += 1
        if self._send_at < self.send_every:
            return None

        self._send_at = 0
        window = np.asarray(self._window, dtype=float)
        valid = window[~np.isnan(window)]
        if valid.size == 0:
            logger.debug("No valid samples in window")
            return math.nan
        return float(valid.mean())

    def reset(self) -> None:
        self._window.clear()
        self._send_at = self.send_every - self.send_first_at
