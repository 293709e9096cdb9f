"""
Tests for the TeamClockService orchestration layer.
"""

import pendulum

from zoneclock.domain.models import MinuteRange, OverlapSlot, Person, WorkingHours
from zoneclock.domain.status import Status
from zoneclock.services.team_clock import TeamClockService

REFERENCE = pendulum.datetime(2024, 11, 25, 15, 0, tz="UTC")

JORDAN = Person("Jordan", "America/New_York", WorkingHours(9, 17), team="Product")
ALEX = Person("Alex", "Europe/London", WorkingHours(9, 17), team="Engineering")
PRIYA = Person("Priya", "Asia/Kolkata", WorkingHours(10, 19), team="Support")


def test_snapshot_in_window(resolver):
    """A person inside their hours is reported as working."""
    service = TeamClockService(resolver=resolver)

    snapshot = service.snapshot(JORDAN, REFERENCE)

    assert snapshot.local_time == "10:00"
    assert snapshot.local_minute == 600
    assert snapshot.offset_label == "UTC-5"
    assert snapshot.distance_minutes == 0
    assert snapshot.status is Status.IN_WINDOW
    assert snapshot.is_working
    assert snapshot.window == [MinuteRange(540, 1020)]


def test_snapshot_near_and_far(resolver):
    service = TeamClockService(resolver=resolver)

    # 15:00 UTC is 20:30 in India, 90 minutes after the 19:00 close
    near = service.snapshot(PRIYA, REFERENCE)
    # 21:30 UTC is 03:00 in India
    far = service.snapshot(PRIYA, REFERENCE.add(hours=6, minutes=30))

    assert near.local_time == "20:30"
    assert near.offset_label == "UTC+5:30"
    assert near.distance_minutes == 90
    assert near.status is Status.NEAR
    assert far.status is Status.FAR
    assert not far.is_working


def test_snapshots_keep_input_order(resolver):
    service = TeamClockService(resolver=resolver)

    names = [s.person.display_name for s in service.snapshots([PRIYA, JORDAN, ALEX], REFERENCE)]

    assert names == ["Priya", "Jordan", "Alex"]


def test_meeting_summary_resolves_local_times(resolver):
    """Slot edges are re-resolved for the viewer and for every person."""
    service = TeamClockService(resolver=resolver)

    summary = service.meeting_summary([JORDAN, ALEX], REFERENCE, "Europe/Berlin")

    assert summary.has_overlap
    assert summary.day_start == pendulum.datetime(2024, 11, 25, tz="UTC")
    assert len(summary.slots) == 1

    view = summary.slots[0]
    assert view.slot == OverlapSlot(840, 1020)
    assert view.display_range == "15:00 – 18:00"
    assert view.duration_label == "3h"
    assert view.local_times == [("Jordan", "09:00", "12:00"), ("Alex", "14:00", "17:00")]
    assert view.format_local_times() == "Jordan: 09:00–12:00 · Alex: 14:00–17:00"


def test_meeting_summary_without_people(resolver):
    service = TeamClockService(resolver=resolver)

    summary = service.meeting_summary([], REFERENCE, "UTC")

    assert not summary.has_overlap
    assert summary.slots == []


def test_filter_by_team():
    people = [JORDAN, ALEX, PRIYA]

    assert TeamClockService.filter_by_team(people, None) == people
    assert TeamClockService.filter_by_team(people, "engineering") == [ALEX]
    assert TeamClockService.filter_by_team(people, "Design") == []
