"""
Domain models for working-hours windows and overlap slots.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from pendulum import DateTime

from .clock_math import (
    HOURS_PER_DAY,
    MINUTES_PER_DAY,
    MINUTES_PER_HOUR,
    format_duration,
    format_time,
    normalize_minute,
    positive_modulo,
)
from .local_time import LocalTimeResolver, to_utc


@dataclass(frozen=True)
class MinuteRange:
    """
    Half-open range of minutes ``[lower, upper)``.
    
    Invariant: lower must be before upper.
    """
    lower: int
    upper: int

    def __post_init__(self):
        if self.lower >= self.upper:
            raise ValueError(f"Lower bound {self.lower} must be below upper bound {self.upper}")

    def length(self) -> int:
        return self.upper - self.lower

    def contains(self, minute: int) -> bool:
        return self.lower <= minute < self.upper

    def shifted(self, delta: int) -> "MinuteRange":
        """Return the same range moved by ``delta`` minutes."""
        return MinuteRange(lower=self.lower + delta, upper=self.upper + delta)

    def distance_from(self, minute: int) -> int:
        """
        Distance from ``minute`` to the nearest edge of the range.

        Zero inside the range and on the upper bound itself.
        """
        if minute < self.lower:
            return self.lower - minute
        if minute >= self.upper:
            return minute - self.upper
        return 0

    def __str__(self) -> str:
        return f"{format_time(self.lower)} - {format_time(self.upper)}"


@dataclass(frozen=True)
class WorkingHours:
    """
    A person's daily working window, possibly wrapping past midnight.

    ``start_hour == end_hour`` means the window spans the whole day;
    ``end_hour < start_hour`` describes an overnight shift.
    """
    start_hour: int = 9
    end_hour: int = 17

    @property
    def start_minute(self) -> int:
        return positive_modulo(self.start_hour, HOURS_PER_DAY) * MINUTES_PER_HOUR

    @property
    def end_minute(self) -> int:
        return positive_modulo(self.end_hour, HOURS_PER_DAY) * MINUTES_PER_HOUR

    def ranges(self) -> List[MinuteRange]:
        """
        Derive the window as disjoint half-open ranges inside ``[0, 1440)``.

        Example:
        09-17 -> [540-1020]
        22-06 -> [1320-1440, 0-360]
        """
        start = self.start_minute
        end = self.end_minute

        if start == end:
            return [MinuteRange(0, MINUTES_PER_DAY)]
        if start < end:
            return [MinuteRange(start, end)]
        return [MinuteRange(start, MINUTES_PER_DAY), MinuteRange(0, end)]

    def contains(self, minute_of_day: int) -> bool:
        """Check if a (possibly unnormalized) minute falls inside the window."""
        minute = normalize_minute(minute_of_day)
        return any(r.contains(minute) for r in self.ranges())

    def distance_to_range(self, minute_of_day: int) -> int:
        """
        Circular distance in minutes from a point to the window.

        Both the minute and the minute one day later are probed against
        every range and every range shifted one day forward, so the nearest
        edge is found even when it is only reached by wrapping past midnight.
        """
        minute = normalize_minute(minute_of_day)
        if self.contains(minute):
            return 0

        ranges = self.ranges()
        candidates = ranges + [r.shifted(MINUTES_PER_DAY) for r in ranges]
        probes = (minute, minute + MINUTES_PER_DAY)

        best_distance = MINUTES_PER_DAY
        for probe in probes:
            for candidate in candidates:
                best_distance = min(best_distance, candidate.distance_from(probe))

        # Not contained, so the closing edge itself is still one minute out
        return max(best_distance, 1)

    def __str__(self) -> str:
        return f"{format_time(self.start_minute)} - {format_time(self.end_minute)}"


@dataclass(frozen=True)
class Person:
    """
    A person as seen by the core: read-only input, never retained.
    """
    display_name: str
    timezone: str
    working_hours: WorkingHours = WorkingHours()
    team: Optional[str] = None


@dataclass(frozen=True)
class OverlapSlot:
    """
    A window of the UTC day during which everybody is at work.

    Half-open ``[start_minute_utc, end_minute_utc)`` and never wrapping.
    """
    start_minute_utc: int
    end_minute_utc: int

    def __post_init__(self):
        if not 0 <= self.start_minute_utc < self.end_minute_utc <= MINUTES_PER_DAY:
            raise ValueError(
                f"Invalid slot {self.start_minute_utc}-{self.end_minute_utc}: "
                f"expected 0 <= start < end <= {MINUTES_PER_DAY}"
            )

    def duration_minutes(self) -> int:
        return self.end_minute_utc - self.start_minute_utc

    def duration_label(self) -> str:
        return format_duration(self.duration_minutes())

    def boundary_instants(self, day_start: DateTime) -> Tuple[DateTime, DateTime]:
        """UTC instants of the slot edges for the day starting at ``day_start``."""
        start = day_start.add(minutes=self.start_minute_utc)
        end = day_start.add(minutes=self.end_minute_utc)
        return start, end

    def display_range(
        self,
        resolver: LocalTimeResolver,
        timezone: str,
        day_start: DateTime
    ) -> str:
        """
        Format the slot in a viewer's timezone.
        Format: HH:MM – HH:MM
        """
        start, end = self.boundary_instants(day_start)
        return f"{resolver.local_time(start, timezone)} – {resolver.local_time(end, timezone)}"

    def local_times(
        self,
        people: Sequence[Person],
        resolver: LocalTimeResolver,
        day_start: DateTime
    ) -> List[Tuple[str, str, str]]:
        """
        Re-resolve both slot edges for every person.

        Returns:
            List of (display name, local start, local end) tuples
        """
        start, end = self.boundary_instants(day_start)
        return [
            (
                person.display_name,
                resolver.local_time(start, person.timezone),
                resolver.local_time(end, person.timezone),
            )
            for person in people
        ]

    def __str__(self) -> str:
        return (
            f"{format_time(self.start_minute_utc)} - {format_time(self.end_minute_utc)} UTC "
            f"({self.duration_label()})"
        )


def utc_day_start(reference: DateTime) -> DateTime:
    """Start of the UTC calendar day containing ``reference``."""
    return to_utc(reference).start_of("day")
