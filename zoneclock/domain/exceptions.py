"""
Domain-specific exception hierarchy for the zoneclock application.
"""


class ZoneClockError(Exception):
    """Base class for all application-level errors."""


class InvalidModulusError(ZoneClockError, ValueError):
    """Raised when circular arithmetic is asked for a non-positive modulus."""


class SchedulerConfigurationError(ZoneClockError, ValueError):
    """Raised when the overlap sweep is configured with an unusable step."""
