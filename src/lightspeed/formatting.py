"""
Human-readable rendering of journey durations, clock readings and distances.

format_duration() breaks a duration in years down to the largest useful
calendar units:
- >= 1 year: fractional years ("4.24 years")
- >= 1 month: months, remaining days, remaining hours
- >= 1 day: days and hours
- otherwise: hours to one decimal place

Months are the average Julian month of 30.44 days.
"""

import math
from dataclasses import dataclass
from typing import Optional

from lightspeed import constants as const
from lightspeed.errors import DomainError


@dataclass(frozen=True)
class FormattedDuration:
    """
    A duration broken into calendar components.

    Only the components relevant to the magnitude are set; the others are None.
    """

    total_years: float
    formatted: str
    years: Optional[float] = None
    months: Optional[int] = None
    days: Optional[int] = None
    hours: Optional[float] = None

    def __str__(self):
        return self.formatted


def _format_number(value) -> str:
    """Render 3 as "3", 2.5 as "2.5" and 3.0 as "3"."""
    if isinstance(value, int):
        return str(value)
    return f"{value:g}"


def _pluralize(value, unit: str) -> str:
    suffix = "" if value == 1 else "s"
    return f"{_format_number(value)} {unit}{suffix}"


def format_duration(years) -> FormattedDuration:
    """
    Format a duration given in years.

    Args:
        years: Duration in years, >= 0

    Returns:
        FormattedDuration with the populated components and a canonical string

    Raises:
        DomainError: If years is negative or not finite

    Examples:
        format_duration(4.24).formatted  -> "4.24 years"
        format_duration(0.5).formatted   -> "5 months, 30 days, 15 hours"
        format_duration(0).formatted     -> "0 hours"
    """
    total_years = float(years)
    if not (0.0 <= total_years < math.inf):
        raise DomainError(f"Duration must be a finite value >= 0, got {years}")

    if total_years >= 1:
        return FormattedDuration(
            total_years=total_years,
            formatted=f"{total_years:.2f} years",
            years=total_years,
        )

    total_days = total_years * const.DAYS_PER_YEAR

    if total_days >= const.DAYS_PER_MONTH:
        months = int(total_days // const.DAYS_PER_MONTH)
        days = int(total_days % const.DAYS_PER_MONTH)
        hours = int((total_days % 1) * const.HOURS_PER_DAY)

        parts = [_pluralize(months, "month")]
        if days > 0:
            parts.append(_pluralize(days, "day"))
        if hours > 0:
            parts.append(_pluralize(hours, "hour"))

        return FormattedDuration(
            total_years=total_years,
            formatted=", ".join(parts),
            months=months,
            days=days,
            hours=hours,
        )

    if total_days >= 1:
        days = int(total_days)
        hours = int((total_days % 1) * const.HOURS_PER_DAY)

        parts = [_pluralize(days, "day")]
        if hours > 0:
            parts.append(_pluralize(hours, "hour"))

        return FormattedDuration(
            total_years=total_years,
            formatted=", ".join(parts),
            days=days,
            hours=hours,
        )

    # Round half up to one decimal place
    hours = math.floor(total_days * const.HOURS_PER_DAY * 10 + 0.5) / 10
    return FormattedDuration(
        total_years=total_years,
        formatted=_pluralize(hours, "hour"),
        hours=hours,
    )


def _check_seconds(seconds) -> float:
    s = float(seconds)
    if not (0.0 <= s < math.inf):
        raise DomainError(f"Elapsed seconds must be a finite value >= 0, got {seconds}")
    return s


def format_traveler_clock(seconds) -> str:
    """
    Render the on-board clock.

    Under a minute: seconds with one decimal ("12.3s").
    Otherwise MM:SS, or HH:MM:SS once an hour has passed.
    """
    s = _check_seconds(seconds)
    if s < const.SECONDS_PER_MINUTE:
        return f"{s:.1f}s"

    hours = int(s // const.SECONDS_PER_HOUR)
    minutes = int((s % const.SECONDS_PER_HOUR) // const.SECONDS_PER_MINUTE)
    secs = int(s % const.SECONDS_PER_MINUTE)

    if hours > 0:
        return f"{hours:02d}:{minutes:02d}:{secs:02d}"
    return f"{minutes:02d}:{secs:02d}"


def format_observer_clock(seconds) -> str:
    """
    Render the stationary observer's clock, e.g. "1y 2mo 3d 4h 5m".

    Years, months, days and hours appear only when non-zero. Minutes always
    appear; seconds only while less than a day has elapsed.
    """
    total = _check_seconds(seconds)
    if total < 1:
        return f"{total:.2f}s"

    remaining = total

    years = int(remaining // const.SECONDS_PER_YEAR)
    remaining %= const.SECONDS_PER_YEAR

    months = int(remaining // const.SECONDS_PER_MONTH)
    remaining %= const.SECONDS_PER_MONTH

    days = int(remaining // const.SECONDS_PER_DAY)
    remaining %= const.SECONDS_PER_DAY

    hours = int(remaining // const.SECONDS_PER_HOUR)
    remaining %= const.SECONDS_PER_HOUR

    minutes = int(remaining // const.SECONDS_PER_MINUTE)
    secs = int(remaining % const.SECONDS_PER_MINUTE)

    parts = []
    if years > 0:
        parts.append(f"{years}y")
    if months > 0:
        parts.append(f"{months}mo")
    if days > 0:
        parts.append(f"{days}d")
    if hours > 0:
        parts.append(f"{hours}h")
    parts.append(f"{minutes}m")
    if total < const.SECONDS_PER_DAY:
        parts.append(f"{secs}s")

    return " ".join(parts)


def format_distance(light_years) -> str:
    """
    Render a distance with units suited to its size.

    >= 1 ly in light-years, otherwise kilometres (and miles), and below
    1 km metres (and feet).
    """
    distance_ly = float(light_years)
    if distance_ly >= 1:
        return f"{distance_ly:.2f} ly"

    distance_km = distance_ly * const.LIGHT_YEAR_IN_KM
    if distance_km >= 1:
        distance_miles = distance_km * const.KM_TO_MILES
        return f"{distance_km:.2f} km ({distance_miles:.2f} mi)"

    distance_m = distance_km * 1000.0
    distance_ft = distance_m * const.METERS_TO_FEET
    return f"{distance_m:.0f} m ({distance_ft:.0f} ft)"


def format_rate(ratio) -> str:
    """Render a clock ratio as "2.29:1"."""
    return f"{float(ratio):.2f}:1"
