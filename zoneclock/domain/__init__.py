"""
Domain layer - Pure timezone and interval logic without external dependencies.
"""

from .clock_math import MINUTES_PER_DAY, format_duration, format_time, positive_modulo
from .exceptions import InvalidModulusError, SchedulerConfigurationError, ZoneClockError
from .local_time import LocalTimeResolver, OffsetResolverProtocol
from .models import MinuteRange, OverlapSlot, Person, WorkingHours, utc_day_start
from .overlap_scheduler import SAMPLE_STEP_MINUTES, OverlapScheduler
from .status import NEAR_THRESHOLD_MINUTES, Status, classify

__all__ = [
    "MINUTES_PER_DAY",
    "format_duration",
    "format_time",
    "positive_modulo",
    "InvalidModulusError",
    "SchedulerConfigurationError",
    "ZoneClockError",
    "LocalTimeResolver",
    "OffsetResolverProtocol",
    "MinuteRange",
    "OverlapSlot",
    "Person",
    "WorkingHours",
    "utc_day_start",
    "SAMPLE_STEP_MINUTES",
    "OverlapScheduler",
    "NEAR_THRESHOLD_MINUTES",
    "Status",
    "classify",
]
