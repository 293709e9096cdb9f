"""
Resolution of instants into local wall-clock minutes for arbitrary timezones.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol

import pendulum
from pendulum import DateTime

from .clock_math import MINUTES_PER_HOUR, format_time, normalize_minute


class OffsetResolverProtocol(Protocol):
    """The single external capability the core depends on."""

    def offset_minutes(self, timezone_id: str, instant: DateTime) -> int:
        """Return the UTC offset of ``timezone_id`` at ``instant``, in minutes."""


def to_utc(instant: datetime) -> DateTime:
    """Coerce any datetime into a pendulum instant in UTC (naive means UTC)."""
    return pendulum.instance(instant).in_timezone("UTC")


class LocalTimeResolver:
    """
    Pure conversions of (instant, timezone) pairs into local times and labels.

    The resolver holds no state besides the offset oracle, so one instance can
    be shared by the timeline display and the overlap sweep.
    """

    def __init__(self, offset_resolver: OffsetResolverProtocol):
        self._offset_resolver = offset_resolver

    def offset_minutes(self, timezone_id: str, instant: datetime) -> int:
        return self._offset_resolver.offset_minutes(timezone_id, to_utc(instant))

    def local_minute_of_day(self, instant: datetime, timezone_id: str) -> int:
        """Return the local minute-of-day in ``[0, 1440)`` for ``instant``."""
        utc = to_utc(instant)
        utc_minute = utc.hour * MINUTES_PER_HOUR + utc.minute
        return normalize_minute(utc_minute + self.offset_minutes(timezone_id, utc))

    @staticmethod
    def format_time(minute_of_day: int) -> str:
        return format_time(minute_of_day)

    def local_time(self, instant: datetime, timezone_id: str) -> str:
        """Local wall-clock time as ``HH:MM``."""
        return format_time(self.local_minute_of_day(instant, timezone_id))

    def utc_offset_label(self, timezone_id: str, instant: datetime) -> str:
        """
        Format the UTC offset as ``UTC+H`` or ``UTC+H:MM``.

        Minutes are only shown when they are non-zero, e.g. ``UTC+5:30``,
        ``UTC-7`` or ``UTC+0``.
        """
        offset = self.offset_minutes(timezone_id, instant)
        sign = "+" if offset >= 0 else "-"
        hours, minutes = divmod(abs(offset), MINUTES_PER_HOUR)
        if minutes == 0:
            return f"UTC{sign}{hours}"
        return f"UTC{sign}{hours}:{minutes:02d}"
