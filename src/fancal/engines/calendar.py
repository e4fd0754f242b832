"""
fancal.engines.calendar
-----------------------
The Orchestrator. Binds one CalendarDefinition to the individual resolvers
(leap years, month lengths, moons, seasons, eras, cycles, daylight) and
exposes them as methods. Holds no state beyond the immutable definition.
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict, List, Optional

from fancal.core.types import (
    CalendarDefinition,
    CalendarId,
    CycleValues,
    DayFacts,
    DaylightTimes,
    EraMatch,
    Festival,
    MoonPhaseResult,
    PointInTime,
    RuleDescription,
    Season,
)
from fancal.core import time as _time
from fancal.engines import cycles, daylight, eras, festivals, leap, months, moons, seasons


class CalendarEngine:
    """
    Answers calendar queries for a single definition. Every `year` argument
    is a display year; every `point` is a PointInTime in internal years.
    """
    def __init__(self, id: CalendarId, definition: CalendarDefinition):
        self.id = id
        self.definition = definition

    # ---------------------------------------------------------
    # Years and months
    # ---------------------------------------------------------

    def is_leap_year(self, year: int) -> bool:
        return months.definition_is_leap_year(self.definition, year)

    def days_in_month(self, month_index: int, year: int) -> int:
        return months.days_in_month(self.definition, month_index, year)

    def days_in_year(self, year: int) -> int:
        return months.days_in_year(self.definition, year)

    def leap_rule(self) -> RuleDescription:
        return leap.describe_rule(self.definition.leap_year)

    def display_year(self, point: PointInTime) -> int:
        return _time.display_year(self.definition, point)

    def day_of_year(self, point: PointInTime) -> int:
        return _time.day_of_year(self.definition, point)

    def to_days(self, point: PointInTime) -> int:
        return _time.point_days(self.definition, point)

    def from_days(self, days: int) -> PointInTime:
        return _time.days_to_components(self.definition, days)

    def point(self, year: int, month: int, day: int, hour: int = 0, minute: int = 0, second: int = 0) -> PointInTime:
        """Display year, 0-indexed month, 1-indexed day."""
        return _time.point_from_date(self.definition, year, month, day, hour, minute, second)

    # ---------------------------------------------------------
    # Sky and seasons
    # ---------------------------------------------------------

    def moon_phase(self, moon_index: int, point: PointInTime) -> Optional[MoonPhaseResult]:
        return moons.moon_phase(self.definition, moon_index, point)

    def moon_phases(self, point: PointInTime) -> List[MoonPhaseResult]:
        return moons.all_moon_phases(self.definition, point)

    def season(self, point: PointInTime) -> Optional[Season]:
        return seasons.current_season(self.definition, point)

    def daylight(self, point: PointInTime) -> DaylightTimes:
        return daylight.daylight_times(self.definition, point)

    def progress_day(self, point: PointInTime) -> float:
        return daylight.progress_day(self.definition, point)

    def progress_night(self, point: PointInTime) -> float:
        return daylight.progress_night(self.definition, point)

    # ---------------------------------------------------------
    # Eras, cycles, festivals
    # ---------------------------------------------------------

    def era(self, point: PointInTime) -> Optional[EraMatch]:
        return eras.current_era(self.definition, point)

    def format_year(self, year: int) -> str:
        return eras.format_year_with_era(self.definition, year)

    def cycle_values(self, point: PointInTime) -> CycleValues:
        return cycles.cycle_values(self.definition, point)

    def festival(self, point: PointInTime) -> Optional[Festival]:
        return festivals.find_festival_day(self.definition, point)

    # ---------------------------------------------------------
    # High-Level API Methods (Required by CLI / api.py)
    # ---------------------------------------------------------

    def info(self) -> Dict[str, Any]:
        d = self.definition
        return {
            "id": self.id.__dict__,
            "months": len(d.months),
            "days_per_year": d.nominal_days_per_year,
            "leap_rule": self.leap_rule().key,
            "moons": [m.name for m in d.moons],
            "seasons": [s.name for s in d.seasons],
            "eras": [e.name for e in d.eras],
            "cycles": [c.name for c in d.cycles],
            "daylight": d.daylight.enabled,
            "meta": dict(d.meta),
        }

    def day_info(self, point: PointInTime) -> DayFacts:
        year = self.display_year(point)
        return DayFacts(
            calendar=self.id.name,
            point=point,
            display_year=year,
            day_of_year=self.day_of_year(point),
            is_leap_year=self.is_leap_year(year),
            days_in_month=self.days_in_month(point.month, year),
            days_in_year=self.days_in_year(year),
            season=self.season(point),
            era=self.era(point),
            moons=tuple(self.moon_phases(point)),
            cycles=self.cycle_values(point),
            daylight=self.daylight(point),
        )

    def explain(self, point: PointInTime) -> Dict[str, Any]:
        out = asdict(self.day_info(point))
        out["absolute_day"] = self.to_days(point)
        out["formatted_year"] = self.format_year(out["display_year"])
        out["leap_rule"] = asdict(self.leap_rule())
        return out
