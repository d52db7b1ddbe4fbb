"""
Unit tests for duration, clock, and distance formatting.
"""

import pytest

from lightspeed.formatting import (
    FormattedDuration,
    format_duration,
    format_traveler_clock,
    format_observer_clock,
    format_distance,
    format_rate,
)
from lightspeed.errors import DomainError
from lightspeed import constants as const


class TestFormatDurationYears:
    """Durations of a year or more."""

    def test_one_year(self):
        """Exactly one year renders with two decimals and only years set."""
        result = format_duration(1.0)
        assert "1.00 years" in result.formatted
        assert result.years == 1.0
        assert result.months is None
        assert result.days is None
        assert result.hours is None

    def test_fractional_years(self):
        result = format_duration(4.7111)
        assert result.formatted == "4.71 years"
        assert result.total_years == 4.7111

    def test_large_duration(self):
        result = format_duration(46500000000.0)
        assert result.formatted == "46500000000.00 years"

    def test_str_is_formatted(self):
        assert str(format_duration(2.0)) == "2.00 years"


class TestFormatDurationMonths:
    """Durations between one month and one year."""

    def test_half_year(self):
        """0.5 yr = 182.625 days = 5 months (152.2 d) + 30 days + 15 hours."""
        result = format_duration(0.5)
        total_days = 0.5 * const.DAYS_PER_YEAR
        assert result.months == int(total_days // const.DAYS_PER_MONTH) == 5
        assert result.days == int(total_days % const.DAYS_PER_MONTH) == 30
        assert result.hours == 15
        assert result.years is None
        assert result.formatted == "5 months, 30 days, 15 hours"

    def test_single_month_is_singular(self):
        """One month and a few days: 'month' without 's'."""
        years = 32.0 / const.DAYS_PER_YEAR  # 1 month + 1.56 days
        result = format_duration(years)
        assert result.months == 1
        assert result.formatted.startswith("1 month,")
        assert result.days == 1
        assert "1 day" in result.formatted
        assert "1 days" not in result.formatted

    def test_zero_components_are_omitted_from_string(self):
        """A zero day count stays in the components but not in the string."""
        years = (3 * const.DAYS_PER_MONTH + 0.5) / const.DAYS_PER_YEAR
        result = format_duration(years)
        assert result.months == 3
        assert result.days == 0
        assert result.hours == 19
        assert result.formatted == "3 months, 19 hours"


class TestFormatDurationDays:
    """Durations between one day and one month."""

    def test_days_and_hours(self):
        years = 2.6 / const.DAYS_PER_YEAR
        result = format_duration(years)
        assert result.days == 2
        assert result.hours == 14
        assert result.months is None
        assert result.formatted == "2 days, 14 hours"

    def test_one_day(self):
        years = 1.3 / const.DAYS_PER_YEAR
        result = format_duration(years)
        assert result.days == 1
        assert result.hours == 7
        assert result.formatted == "1 day, 7 hours"


class TestFormatDurationHours:
    """Durations under a day."""

    def test_zero(self):
        """Zero renders as hours-only with value 0."""
        result = format_duration(0)
        assert result.hours == 0
        assert result.formatted == "0 hours"
        assert result.years is None
        assert result.months is None
        assert result.days is None

    def test_rounded_to_one_decimal(self):
        years = 5.26 / (const.DAYS_PER_YEAR * const.HOURS_PER_DAY)
        result = format_duration(years)
        assert result.hours == pytest.approx(5.3)
        assert result.formatted == "5.3 hours"

    def test_one_hour_is_singular(self):
        years = 1.0 / (const.DAYS_PER_YEAR * const.HOURS_PER_DAY)
        result = format_duration(years)
        assert result.formatted == "1 hour"

    def test_minutes_render_as_fraction_of_hour(self):
        """A few minutes still render in hours."""
        years = (4.0 / 60.0) / (const.DAYS_PER_YEAR * const.HOURS_PER_DAY)
        result = format_duration(years)
        assert result.formatted == "0.1 hours"


class TestFormatDurationErrors:
    """Invalid durations."""

    @pytest.mark.parametrize("years", [-0.1, -5.0, float('nan'), float('inf')])
    def test_invalid_input_raises(self, years):
        with pytest.raises(DomainError):
            format_duration(years)

    def test_result_is_immutable(self):
        result = format_duration(2.0)
        with pytest.raises(AttributeError):
            result.years = 3.0
        assert isinstance(result, FormattedDuration)


class TestClockFormatting:
    """Tests for the live clock renderings."""

    def test_traveler_under_a_minute(self):
        assert format_traveler_clock(0) == "0.0s"
        assert format_traveler_clock(12.34) == "12.3s"

    def test_traveler_minutes(self):
        assert format_traveler_clock(125) == "02:05"

    def test_traveler_hours(self):
        assert format_traveler_clock(3 * 3600 + 4 * 60 + 5) == "03:04:05"

    def test_observer_under_a_second(self):
        assert format_observer_clock(0.5) == "0.50s"

    def test_observer_short(self):
        """Under a day: minutes and seconds always shown."""
        assert format_observer_clock(65) == "1m 5s"
        assert format_observer_clock(3661) == "1h 1m 1s"

    def test_observer_long(self):
        """Beyond a day seconds are dropped."""
        seconds = (const.SECONDS_PER_YEAR + 2 * const.SECONDS_PER_MONTH
                   + 3 * const.SECONDS_PER_DAY + 4 * 3600 + 5 * 60 + 6)
        assert format_observer_clock(seconds) == "1y 2mo 3d 4h 5m"

    def test_negative_seconds_raise(self):
        with pytest.raises(DomainError):
            format_traveler_clock(-1.0)
        with pytest.raises(DomainError):
            format_observer_clock(-1.0)


class TestDistanceFormatting:
    """Tests for distance and rate formatting."""

    def test_light_years(self):
        assert format_distance(4.24) == "4.24 ly"

    def test_kilometres(self):
        km = 1000.0
        text = format_distance(km / const.LIGHT_YEAR_IN_KM)
        assert text.startswith("1000.00 km")
        assert "621.37 mi" in text

    def test_metres(self):
        text = format_distance(0.5 / const.LIGHT_YEAR_IN_KM)
        assert text.startswith("500 m")
        assert "(1640 ft)" in text

    def test_rate(self):
        assert format_rate(2.294157) == "2.29:1"
        assert format_rate(1) == "1.00:1"
