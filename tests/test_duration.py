"""Tests for gofr_env.duration"""

from datetime import timedelta

import pytest

from gofr_env.duration import Duration, DurationUnit, duration_from


class TestDurationFrom:
    """Tests for duration_from()"""

    @pytest.mark.parametrize("unit", list(DurationUnit))
    def test_every_unit(self, unit):
        assert duration_from(2, unit) == timedelta(**{unit.value: 2})

    def test_unit_symbol(self):
        assert duration_from(30, "seconds") == timedelta(seconds=30)

    def test_fractional_value(self):
        assert duration_from(0.5, "hours") == timedelta(minutes=30)

    def test_unknown_unit(self):
        with pytest.raises(ValueError, match="Unknown duration unit"):
            duration_from(1, "fortnights")

    def test_overflow(self):
        with pytest.raises(OverflowError):
            duration_from(10**12, "days")

    def test_duration_is_timedelta(self):
        assert Duration is timedelta
