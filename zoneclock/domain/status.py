"""
Working-hours status classification used for colour coding.
"""

from enum import Enum

NEAR_THRESHOLD_MINUTES = 120


class Status(str, Enum):
    """How close a person currently is to their working window."""
    IN_WINDOW = "in-window"
    NEAR = "near"
    FAR = "far"

    @property
    def color(self) -> str:
        return _STATUS_COLORS[self]

    @property
    def label(self) -> str:
        return _STATUS_LABELS[self]


_STATUS_COLORS = {
    Status.IN_WINDOW: "green",
    Status.NEAR: "yellow",
    Status.FAR: "red",
}

_STATUS_LABELS = {
    Status.IN_WINDOW: "Working",
    Status.NEAR: "Near working hours",
    Status.FAR: "Off",
}


def classify(distance_minutes: int) -> Status:
    """Map a distance-to-window value onto a status."""
    if distance_minutes == 0:
        return Status.IN_WINDOW
    if 0 < distance_minutes <= NEAR_THRESHOLD_MINUTES:
        return Status.NEAR
    return Status.FAR
