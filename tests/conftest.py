"""
Shared fixtures.
"""

import pytest

from zoneclock.adapters.offset_resolver import PendulumOffsetResolver
from zoneclock.domain.local_time import LocalTimeResolver
from zoneclock.domain.overlap_scheduler import OverlapScheduler


@pytest.fixture
def resolver() -> LocalTimeResolver:
    """Resolver backed by the real tz database."""
    return LocalTimeResolver(PendulumOffsetResolver(default_timezone="UTC"))


@pytest.fixture
def scheduler(resolver) -> OverlapScheduler:
    return OverlapScheduler(resolver)
