"""
fancal.engines.daylight
-----------------------
Sunrise and sunset in calendar hours.

Static mode splits the day 50/50 around midday. Dynamic mode eases the
daylight length between the solstice extremes with a half cosine:

    progress   in [0, 1]   0 at winter solstice, 1 at summer solstice
    eased      = (1 - cos(pi * progress)) / 2
    daylight   = shortest + (longest - shortest) * eased

Sunrise and sunset are always symmetric about hours_per_day / 2.
"""

from __future__ import annotations

import math

from ..core.types import CalendarDefinition, DaylightTimes, PointInTime
from ..core.time import day_of_year, hours_of_day

STATIC_DAYLIGHT_FRACTION = 0.5


def solstice_progress(doy: int, winter: int, summer: int, days_per_year: int) -> float:
    """Position in the annual cycle: 0 at the winter solstice, 1 at the summer solstice."""
    since_winter = (doy - winter + days_per_year) % days_per_year
    between = (summer - winter + days_per_year) % days_per_year
    if between == 0:
        return 0.0
    if since_winter <= between:
        return since_winter / between
    return 1 - (since_winter - between) / (days_per_year - between)


def daylight_hours(cal: CalendarDefinition, p: PointInTime) -> float:
    dl = cal.daylight
    if not dl.enabled:
        return cal.hours_per_day * STATIC_DAYLIGHT_FRACTION

    dpy = cal.nominal_days_per_year
    progress = solstice_progress(day_of_year(cal, p), dl.winter_solstice, dl.summer_solstice, dpy)
    eased = (1 - math.cos(progress * math.pi)) / 2
    return dl.shortest_day + (dl.longest_day - dl.shortest_day) * eased


def daylight_times(cal: CalendarDefinition, p: PointInTime) -> DaylightTimes:
    hours = daylight_hours(cal, p)
    midday = cal.hours_per_day / 2
    sunrise = midday - hours / 2
    sunset = midday + hours / 2
    return DaylightTimes(
        sunrise=sunrise,
        sunset=sunset,
        solar_midday=(sunrise + sunset) / 2,
        # may exceed hours_per_day: the midnight falls on the next day
        solar_midnight=sunset + (cal.hours_per_day - hours) / 2,
        daylight_hours=hours,
    )


def _clamp01(x: float) -> float:
    return min(1.0, max(0.0, x))


def progress_day(cal: CalendarDefinition, p: PointInTime) -> float:
    """0 at sunrise, 1 at sunset."""
    t = daylight_times(cal, p)
    if t.daylight_hours <= 0:
        return 0.0
    return _clamp01((hours_of_day(cal, p) - t.sunrise) / t.daylight_hours)


def progress_night(cal: CalendarDefinition, p: PointInTime) -> float:
    """0 at sunset, 1 at the following sunrise."""
    t = daylight_times(cal, p)
    night = cal.hours_per_day - t.daylight_hours
    if night <= 0:
        return 0.0
    hour = hours_of_day(cal, p)
    if hour < t.sunset:
        hour += cal.hours_per_day
    return _clamp01((hour - t.sunset) / night)
