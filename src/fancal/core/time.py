from __future__ import annotations

from .types import CalendarDefinition, PointInTime
from ..engines.months import days_before_year, days_in_month


def display_year(cal: CalendarDefinition, p: PointInTime) -> int:
    return p.year + cal.year_zero


def day_of_year(cal: CalendarDefinition, p: PointInTime) -> int:
    """0-indexed day of the year: lengths of the preceding months plus day_of_month."""
    y = display_year(cal, p)
    return p.day_of_month + sum(days_in_month(cal, i, y) for i in range(min(p.month, len(cal.months))))


def components_to_days(cal: CalendarDefinition, year: int, month: int, day_of_month: int) -> int:
    """Absolute day count since day 0 of internal year 0 (month and day 0-indexed)."""
    doy = day_of_year(cal, PointInTime(year, month, day_of_month))
    return days_before_year(cal, year) + doy


def point_days(cal: CalendarDefinition, p: PointInTime) -> int:
    return components_to_days(cal, p.year, p.month, p.day_of_month)


def days_to_components(cal: CalendarDefinition, days: int) -> PointInTime:
    """Inverse of components_to_days (time of day is zero)."""
    if not cal.months or sum(m.days for m in cal.months) <= 0:
        return PointInTime(0, 0, days)

    y = days // cal.nominal_days_per_year
    while days_before_year(cal, y) > days:
        y -= 1
    while days_before_year(cal, y + 1) <= days:
        y += 1

    rem = days - days_before_year(cal, y)
    dy = y + cal.year_zero
    for m in range(len(cal.months)):
        n = days_in_month(cal, m, dy)
        if rem < n:
            return PointInTime(y, m, rem)
        rem -= n
    # unreachable while months have positive lengths
    return PointInTime(y, len(cal.months) - 1, rem)


def point_from_date(cal: CalendarDefinition, year: int, month: int, day: int, hour: int = 0, minute: int = 0, second: int = 0) -> PointInTime:
    """Display year, 0-indexed month, 1-indexed day -> PointInTime."""
    return PointInTime(year - cal.year_zero, month, day - 1, hour, minute, second)


def hours_of_day(cal: CalendarDefinition, p: PointInTime) -> float:
    """Decimal hours since the start of the day."""
    minutes = p.minute + p.second / cal.seconds_per_minute
    return p.hour + minutes / cal.minutes_per_hour
