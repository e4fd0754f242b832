"""
fancal.engines.months
---------------------
Month and year lengths. All `year` arguments are display years
(internal year + year_zero), which is what leap rules are written against.
"""

from __future__ import annotations

from ..core.types import CalendarDefinition
from .leap import count_leap_years, is_leap_year


def definition_is_leap_year(cal: CalendarDefinition, year: int) -> bool:
    return is_leap_year(cal.leap_year, year, cal.year_zero_exists)


def days_in_month(cal: CalendarDefinition, month_index: int, year: int) -> int:
    if not (0 <= month_index < len(cal.months)):
        return 0
    month = cal.months[month_index]
    if month.leap_days is not None and definition_is_leap_year(cal, year):
        return month.leap_days
    return month.days


def days_in_year(cal: CalendarDefinition, year: int) -> int:
    leap = definition_is_leap_year(cal, year)
    return sum(m.leap_days if (leap and m.leap_days is not None) else m.days for m in cal.months)


def common_year_days(cal: CalendarDefinition) -> int:
    return sum(m.days for m in cal.months)


def leap_extra_days(cal: CalendarDefinition) -> int:
    """Difference between a leap year and a common year."""
    return sum(m.leap_days - m.days for m in cal.months if m.leap_days is not None)


def days_before_year(cal: CalendarDefinition, year: int) -> int:
    """
    Days from the start of internal year 0 to the start of internal `year`
    (negative for years before 0).
    """
    base = common_year_days(cal)
    extra = leap_extra_days(cal)
    y0 = cal.year_zero
    if year >= 0:
        leaps = count_leap_years(cal.leap_year, y0, y0 + year, cal.year_zero_exists)
        return year * base + extra * leaps
    leaps = count_leap_years(cal.leap_year, y0 + year, y0, cal.year_zero_exists)
    return year * base - extra * leaps
