"""
Self-imposed rate limiting between summarization calls.

The pipeline pauses for a fixed interval after each base, section and
chapter call. This is not driven by any server signal. The sleep function is
injectable so tests run without wall-clock delay.
"""

import time
from typing import Callable

from scholarnotes.config import CALL_INTERVAL_SECONDS, get_setting


class FixedIntervalThrottle:
    """
    Sleeps `interval_seconds` every time pause() is called.

    Attributes:
        interval_seconds: Pause length; 0 disables throttling.
        pause_count: Number of pauses taken so far.
    """

    def __init__(self, interval_seconds: float = CALL_INTERVAL_SECONDS,
                 sleep: Callable[[float], None] = time.sleep):
        if interval_seconds < 0:
            raise ValueError(f"interval_seconds must be >= 0, got {interval_seconds}")
        self.interval_seconds = interval_seconds
        self._sleep = sleep
        self.pause_count = 0

    def pause(self) -> None:
        self.pause_count += 1
        if self.interval_seconds > 0:
            self._sleep(self.interval_seconds)

    @classmethod
    def from_config(cls) -> "FixedIntervalThrottle":
        """Interval from user settings, falling back to CALL_INTERVAL_SECONDS."""
        return cls(float(get_setting('call_interval_seconds', CALL_INTERVAL_SECONDS)))
