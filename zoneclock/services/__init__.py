"""
Service layer helpers that orchestrate adapters and domain logic.
"""

from .team_clock import MeetingSummary, PersonSnapshot, SlotView, TeamClockService

__all__ = ["MeetingSummary", "PersonSnapshot", "SlotView", "TeamClockService"]
