"""
UTC offset oracles backing the LocalTimeResolver.
"""

from __future__ import annotations

import logging
from typing import Dict, Mapping

import pendulum
from pendulum import DateTime
from pendulum.tz.exceptions import InvalidTimezone
from pendulum.tz.timezone import Timezone

logger = logging.getLogger(__name__)


class PendulumOffsetResolver:
    """
    Resolves offsets from the IANA tz database shipped with pendulum.

    Unknown identifiers are not an error: they fall back to
    ``default_timezone`` (the viewer's own zone) and a warning is logged
    once per identifier.
    """

    def __init__(self, default_timezone: str = "UTC"):
        """
        Initialize the resolver.
        
        Args:
            default_timezone: IANA identifier used for unknown timezones
        """
        self.default_timezone = pendulum.timezone(default_timezone)
        self._warned: set[str] = set()

    def timezone_for(self, timezone_id: str) -> Timezone:
        """Look up a timezone, falling back to the default one."""
        try:
            return pendulum.timezone(timezone_id)
        except (InvalidTimezone, ValueError) as exc:
            if timezone_id not in self._warned:
                self._warned.add(timezone_id)
                logger.warning(
                    "Unknown timezone %r (%s), falling back to %s",
                    timezone_id, exc, self.default_timezone.name
                )
            return self.default_timezone

    def offset_minutes(self, timezone_id: str, instant: DateTime) -> int:
        local = instant.in_timezone(self.timezone_for(timezone_id))
        return int(local.utcoffset().total_seconds()) // 60


class StaticOffsetResolver:
    """
    Resolver with fixed offsets per identifier, independent of the instant.
    
    Useful for tests and for offline use without a tz database. Identifiers
    that are not mapped resolve to ``default_offset``.
    """

    def __init__(self, offsets: Mapping[str, int], default_offset: int = 0):
        """
        Initialize the resolver.
        
        Args:
            offsets: Mapping of timezone identifier -> offset in minutes
            default_offset: Offset used for unmapped identifiers
        """
        self.offsets: Dict[str, int] = dict(offsets)
        self.default_offset = default_offset

    def offset_minutes(self, timezone_id: str, instant: DateTime) -> int:
        return self.offsets.get(timezone_id, self.default_offset)
