"""
fancal.engines.seasons
----------------------
Season lookup. Seasons are tested in definition order and the first match
wins; when nothing matches the first season is returned, so a calendar with
seasons always reports one.

Both shapes accept wraparound ranges (start > end), e.g. a winter running
from day 354 to day 77, or from month 11 to month 2.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..core.types import CalendarDefinition, PointInTime, Season
from ..core.time import day_of_year, display_year
from .months import days_in_month

_LOG = logging.getLogger(__name__)


def in_day_range(day: int, start: int, end: int) -> bool:
    if start <= end:
        return start <= day <= end
    return day >= start or day <= end


def in_month_range(month: int, day: int, month_start: int, month_end: int, start_day: int, end_day: int) -> bool:
    """month and day are 1-indexed."""
    if month == month_start and day >= start_day:
        return True
    if month == month_end and day <= end_day:
        return True
    if month_start <= month_end:
        return month_start < month < month_end
    return month > month_start or month < month_end


def season_matches(cal: CalendarDefinition, season: Season, doy: int, month: int, day_of_month: int, year: int) -> bool:
    """month/day_of_month are 0-indexed, year is the display year."""
    if season.is_month_range:
        start_day = season.day_start if season.day_start is not None else 1
        if season.day_end is not None:
            end_day = season.day_end
        else:
            end_day = days_in_month(cal, season.month_end - 1, year) or 30
        return in_month_range(month + 1, day_of_month + 1, season.month_start, season.month_end, start_day, end_day)
    if season.is_day_range:
        return in_day_range(doy, season.day_start, season.day_end)
    return False


def season_for_day(cal: CalendarDefinition, doy: int, month: int, day_of_month: int, year: int) -> Optional[Season]:
    if not cal.seasons:
        return None
    for s in cal.seasons:
        if season_matches(cal, s, doy, month, day_of_month, year):
            return s
    _LOG.debug("No season matches day %d of %s; falling back to %r", doy, cal.name, cal.seasons[0].name)
    return cal.seasons[0]


def current_season(cal: CalendarDefinition, p: PointInTime) -> Optional[Season]:
    return season_for_day(cal, day_of_year(cal, p), p.month, p.day_of_month, display_year(cal, p))
