"""
Application services for the team clock view.

The service ties the local-time resolver, the working-hours window and the
overlap scheduler together into the values a presentation layer renders: a
snapshot row per person and a summary of the shared meeting windows. It holds
no state between calls, so recomputing on every refresh is expected.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Sequence, Tuple

from pendulum import DateTime

from ..domain.local_time import LocalTimeResolver
from ..domain.models import MinuteRange, OverlapSlot, Person, utc_day_start
from ..domain.overlap_scheduler import OverlapScheduler
from ..domain.status import Status, classify


@dataclass(frozen=True)
class PersonSnapshot:
    """Everything shown on one person's timeline row."""
    person: Person
    local_minute: int
    local_time: str
    offset_label: str
    distance_minutes: int
    status: Status
    window: List[MinuteRange] = field(default_factory=list)

    @property
    def is_working(self) -> bool:
        return self.status is Status.IN_WINDOW


@dataclass(frozen=True)
class SlotView:
    """An overlap slot with its presentation strings resolved."""
    slot: OverlapSlot
    display_range: str
    local_times: List[Tuple[str, str, str]]

    @property
    def duration_label(self) -> str:
        return self.slot.duration_label()

    def format_local_times(self) -> str:
        """Format: Name: HH:MM–HH:MM · Name: HH:MM–HH:MM"""
        return " · ".join(
            f"{name}: {start}–{end}" for name, start, end in self.local_times
        )


@dataclass(frozen=True)
class MeetingSummary:
    """Overlap slots of one UTC day."""
    day_start: DateTime
    viewer_timezone: str
    slots: List[SlotView]

    @property
    def has_overlap(self) -> bool:
        return bool(self.slots)


class TeamClockService:
    """
    Orchestrates per-person status and multi-person meeting windows.
    """

    def __init__(
        self,
        resolver: LocalTimeResolver,
        scheduler: Optional[OverlapScheduler] = None,
    ) -> None:
        self._resolver = resolver
        self._scheduler = scheduler or OverlapScheduler(resolver)

    def snapshot(self, person: Person, instant: datetime) -> PersonSnapshot:
        """Resolve one person's local time and working status at ``instant``."""
        local_minute = self._resolver.local_minute_of_day(instant, person.timezone)
        distance = person.working_hours.distance_to_range(local_minute)

        return PersonSnapshot(
            person=person,
            local_minute=local_minute,
            local_time=self._resolver.format_time(local_minute),
            offset_label=self._resolver.utc_offset_label(person.timezone, instant),
            distance_minutes=distance,
            status=classify(distance),
            window=person.working_hours.ranges(),
        )

    def snapshots(self, people: Sequence[Person], instant: datetime) -> List[PersonSnapshot]:
        """Snapshots in the order the people were supplied."""
        return [self.snapshot(person, instant) for person in people]

    def meeting_summary(
        self,
        people: Sequence[Person],
        day_reference: datetime,
        viewer_timezone: str,
    ) -> MeetingSummary:
        """Compute the overlap slots and resolve their display strings."""
        day_start = utc_day_start(day_reference)
        slots = self._scheduler.compute_overlap_slots(people, day_reference)

        views = [
            SlotView(
                slot=slot,
                display_range=slot.display_range(self._resolver, viewer_timezone, day_start),
                local_times=slot.local_times(people, self._resolver, day_start),
            )
            for slot in slots
        ]

        return MeetingSummary(day_start=day_start, viewer_timezone=viewer_timezone, slots=views)

    @staticmethod
    def filter_by_team(people: Sequence[Person], team: Optional[str]) -> List[Person]:
        """
        Restrict people to one team; ``None`` keeps everybody.

        Team names compare case-insensitively.
        """
        if team is None:
            return list(people)
        key = team.lower()
        return [person for person in people if person.team and person.team.lower() == key]
