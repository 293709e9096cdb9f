"""
Circular minute arithmetic over the 24-hour day.

Local-time conversion and offset arithmetic routinely produce negative or
over-1440 intermediate values, so every minute-of-day that leaves this module
has been reduced through ``positive_modulo`` first.
"""

from .exceptions import InvalidModulusError

MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24
MINUTES_PER_DAY = HOURS_PER_DAY * MINUTES_PER_HOUR


def positive_modulo(value: int, modulus: int) -> int:
    """
    Reduce ``value`` into ``[0, modulus)``.

    Unlike a truncating remainder this is the mathematical modulo, so
    ``positive_modulo(-1, 1440) == 1439``.

    Raises:
        InvalidModulusError: If modulus is zero or negative
    """
    if modulus <= 0:
        raise InvalidModulusError(f"Modulus must be positive, got {modulus}")
    return value % modulus


def normalize_minute(minute_of_day: int) -> int:
    """Fold any integer minute onto the circular day."""
    return positive_modulo(minute_of_day, MINUTES_PER_DAY)


def format_time(minute_of_day: int) -> str:
    """Render a minute-of-day as zero-padded ``HH:MM``."""
    minute = normalize_minute(minute_of_day)
    return f"{minute // MINUTES_PER_HOUR:02d}:{minute % MINUTES_PER_HOUR:02d}"


def format_duration(minutes: int) -> str:
    """
    Format a duration as ``"Xh Ym"``, dropping the zero component.

    Example: 480 -> "8h", 45 -> "45m", 135 -> "2h 15m"
    """
    hours, rest = divmod(minutes, MINUTES_PER_HOUR)
    if hours and rest:
        return f"{hours}h {rest}m"
    if hours:
        return f"{hours}h"
    return f"{rest}m"
