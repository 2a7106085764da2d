# src/tasklist/core/clock.py

from __future__ import annotations

import datetime as dt
import logging
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)


class SystemClock:
    """Wall clock that reports today's date in a fixed timezone (UTC by default)."""

    def __init__(self, tz_name: str = "UTC") -> None:
        try:
            self._tz: dt.tzinfo = ZoneInfo(tz_name)
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning("Unknown timezone %r, falling back to UTC.", tz_name)
            self._tz = dt.timezone.utc

    @property
    def tz(self) -> dt.tzinfo:
        return self._tz

    def now(self) -> dt.datetime:
        return dt.datetime.now(self._tz)

    def today(self) -> dt.date:
        return self.now().date()
