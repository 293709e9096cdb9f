"""
Core logic for finding the windows of a UTC day in which everybody works.

Pure domain logic: the only collaborator is the offset oracle behind the
``LocalTimeResolver``.
"""

import logging
from datetime import datetime
from typing import List, Optional, Sequence

from pendulum import DateTime

from .clock_math import MINUTES_PER_DAY
from .exceptions import SchedulerConfigurationError
from .local_time import LocalTimeResolver
from .models import OverlapSlot, Person, utc_day_start

logger = logging.getLogger(__name__)

SAMPLE_STEP_MINUTES = 15


class OverlapScheduler:
    """
    Calculates full-overlap meeting slots for a group of people.
    
    Algorithm:
    1. Anchor at the start of the UTC day containing the reference instant
    2. Sample the day every ``step_minutes`` minutes
    3. A sample is all-working when every person's local minute is inside
       their working window
    4. Collapse consecutive all-working samples into slots
    """

    def __init__(self, resolver: LocalTimeResolver, step_minutes: int = SAMPLE_STEP_MINUTES):
        if step_minutes <= 0 or MINUTES_PER_DAY % step_minutes:
            raise SchedulerConfigurationError(
                f"Sampling step must be a positive divisor of {MINUTES_PER_DAY}, got {step_minutes}"
            )
        self.resolver = resolver
        self.step_minutes = step_minutes

    def compute_overlap_slots(
        self,
        people: Sequence[Person],
        day_reference: datetime
    ) -> List[OverlapSlot]:
        """
        Find all slots of the UTC day in which every person is working.
        
        Args:
            people: People to intersect, in any order
            day_reference: Any instant inside the UTC day to sweep
            
        Returns:
            Ordered, non-overlapping list of OverlapSlot objects
        """
        if not people:
            return []

        day_start = utc_day_start(day_reference)
        slots: List[OverlapSlot] = []
        run_start: Optional[int] = None

        for utc_minute in range(0, MINUTES_PER_DAY, self.step_minutes):
            sample = day_start.add(minutes=utc_minute)

            if self._all_working(people, sample):
                if run_start is None:
                    run_start = utc_minute
            elif run_start is not None:
                slots.append(OverlapSlot(start_minute_utc=run_start, end_minute_utc=utc_minute))
                run_start = None

        # Run still open after the last sample
        if run_start is not None:
            slots.append(OverlapSlot(start_minute_utc=run_start, end_minute_utc=MINUTES_PER_DAY))

        logger.debug(
            "Swept %s for %d people at %d-minute steps: %d slot(s)",
            day_start.to_date_string(), len(people), self.step_minutes, len(slots)
        )
        return slots

    def _all_working(self, people: Sequence[Person], sample: DateTime) -> bool:
        return all(
            person.working_hours.contains(
                self.resolver.local_minute_of_day(sample, person.timezone)
            )
            for person in people
        )
