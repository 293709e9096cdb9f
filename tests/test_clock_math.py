"""
Tests for circular minute arithmetic and formatting.
"""

import pytest

from zoneclock.domain.clock_math import (
    MINUTES_PER_DAY,
    format_duration,
    format_time,
    positive_modulo,
)
from zoneclock.domain.exceptions import InvalidModulusError, ZoneClockError


class TestPositiveModulo:
    """Tests for positive_modulo."""

    @pytest.mark.parametrize("value", [-3000, -1441, -1440, -1, 0, 1, 719, 1439, 1440, 2881])
    def test_result_in_range_and_congruent(self, value):
        """Result lies in [0, m) and differs from the input by a multiple of m."""
        result = positive_modulo(value, MINUTES_PER_DAY)

        assert 0 <= result < MINUTES_PER_DAY
        assert (value - result) % MINUTES_PER_DAY == 0

    def test_negative_values_wrap_forward(self):
        """Negative input is a true modulo, not a truncating remainder."""
        assert positive_modulo(-1, 1440) == 1439
        assert positive_modulo(-60, 24) == 12

    @pytest.mark.parametrize("modulus", [0, -1, -1440])
    def test_non_positive_modulus_raises(self, modulus):
        """A non-positive modulus is a precondition failure."""
        with pytest.raises(InvalidModulusError, match="Modulus must be positive"):
            positive_modulo(10, modulus)

    def test_invalid_modulus_is_value_error(self):
        """Callers catching ValueError or the domain base class both see it."""
        assert issubclass(InvalidModulusError, ValueError)
        assert issubclass(InvalidModulusError, ZoneClockError)


class TestFormatTime:
    """Tests for format_time."""

    def test_zero_padding(self):
        assert format_time(0) == "00:00"
        assert format_time(65) == "01:05"
        assert format_time(1439) == "23:59"

    def test_unnormalized_input(self):
        """Whole days added or removed do not change the rendered time."""
        for days in (-2, -1, 1, 3):
            assert format_time(570 + days * MINUTES_PER_DAY) == "09:30"

    def test_midnight_end_of_day(self):
        assert format_time(MINUTES_PER_DAY) == "00:00"


class TestFormatDuration:
    """Tests for format_duration."""

    def test_whole_hours(self):
        assert format_duration(480) == "8h"

    def test_minutes_only(self):
        assert format_duration(45) == "45m"

    def test_hours_and_minutes(self):
        assert format_duration(150) == "2h 30m"

    def test_zero(self):
        assert format_duration(0) == "0m"
