"""
fancal.engines.loader
---------------------
Builds a CalendarDefinition from a JSON-compatible dict using the camelCase
keys calendar files are written in:

    {
      "name": "...",
      "months": {"values": [{"name", "abbreviation", "ordinal", "days", "leapDays"}]},
      "leapYearConfig": {"rule", "interval", "start", "pattern"},
      "years": {"yearZero": 0, "leapYear": {"leapInterval", "leapStart"}},
      "days": {"hoursPerDay", "minutesPerHour", "secondsPerMinute", "daysPerYear"},
      "moons": [{"name", "cycleLength", "cycleDayAdjust", "referenceDate", "phases"}],
      "seasons": {"values": [{"name", "dayStart", "dayEnd", "monthStart", "monthEnd"}]},
      "eras": [...], "cycles": [...], "cycleFormat": "...",
      "daylight": {...}, "festivals": [...], "yearZeroExists": true
    }

`months.values` / `seasons.values` may also be given as plain lists, and any
list section may be null. The dict is validated by the pydantic models below;
the frozen dataclasses are only built from a validated model, so a loaded
definition always satisfies the numeric invariants the resolvers rely on.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from ..core.errors import DefinitionError
from ..core.types import (
    BasedOn,
    CalendarDefinition,
    Cycle,
    CycleEntry,
    Daylight,
    Era,
    Festival,
    LeapYearConfig,
    Month,
    Moon,
    MoonPhase,
    ReferenceDate,
    Season,
)
from .leap import convert_legacy_config

_LOG = logging.getLogger(__name__)


def _none_to_list(v: Any) -> Any:
    return [] if v is None else v


def _unwrap_values(v: Any) -> Any:
    if isinstance(v, Mapping):
        return v.get("values") or []
    return _none_to_list(v)


# ============================================================
# INPUT MODELS (camelCase on the wire)
# ============================================================

class _Model(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class MonthIn(_Model):
    name: str
    days: int = Field(ge=1)
    abbreviation: Optional[str] = None
    ordinal: Optional[int] = None
    leap_days: Optional[int] = Field(default=None, ge=1)


class LeapYearConfigIn(_Model):
    rule: str = "none"
    interval: Optional[int] = None
    start: Optional[int] = 0
    pattern: Optional[str] = None


class LegacyLeapIn(_Model):
    leap_interval: Optional[int] = None
    leap_start: Optional[int] = 0


class YearsIn(_Model):
    year_zero: int = 0
    leap_year: Optional[LegacyLeapIn] = None


class DaysIn(_Model):
    hours_per_day: int = Field(default=24, ge=1)
    minutes_per_hour: int = Field(default=60, ge=1)
    seconds_per_minute: int = Field(default=60, ge=1)
    days_per_year: Optional[int] = Field(default=None, ge=1)


class ReferenceDateIn(_Model):
    year: int = 1
    month: int = 0
    day: int = 1


class MoonPhaseIn(_Model):
    name: str
    start: float = 0.0
    end: float = 0.0
    rising_name: Optional[str] = None
    fading_name: Optional[str] = None
    icon: Optional[str] = None


class MoonIn(_Model):
    name: str
    cycle_length: float = Field(gt=0, allow_inf_nan=False)
    cycle_day_adjust: Optional[float] = 0
    reference_date: Optional[ReferenceDateIn] = None
    phases: List[MoonPhaseIn] = Field(default_factory=list)

    @field_validator("phases", mode="before")
    @classmethod
    def phases_default(cls, v: Any) -> Any:
        return _none_to_list(v)


class SeasonIn(_Model):
    name: str
    day_start: Optional[int] = None
    day_end: Optional[int] = None
    month_start: Optional[int] = None
    month_end: Optional[int] = None


class EraIn(_Model):
    name: str
    start_year: int
    abbreviation: Optional[str] = None
    end_year: Optional[int] = None
    format: Optional[Literal["prefix", "suffix"]] = None
    template: Optional[str] = None


class CycleEntryIn(_Model):
    name: str


class CycleIn(_Model):
    name: str
    entries: List[CycleEntryIn] = Field(default_factory=list)
    length: int = Field(default=12, ge=1)
    offset: Optional[int] = 0
    based_on: BasedOn = "month"

    @field_validator("entries", mode="before")
    @classmethod
    def entries_default(cls, v: Any) -> Any:
        return _none_to_list(v)


class DaylightIn(_Model):
    enabled: bool = False
    shortest_day: float = 8.0
    longest_day: float = 16.0
    winter_solstice: int = 355
    summer_solstice: int = 172


class FestivalIn(_Model):
    name: str
    month: int = Field(ge=1)
    day: int = Field(ge=1)


class CalendarIn(_Model):
    name: Optional[str] = None
    months: List[MonthIn] = Field(default_factory=list)
    leap_year_config: Optional[LeapYearConfigIn] = None
    years: Optional[YearsIn] = None
    days: Optional[DaysIn] = None
    moons: List[MoonIn] = Field(default_factory=list)
    seasons: List[SeasonIn] = Field(default_factory=list)
    eras: List[EraIn] = Field(default_factory=list)
    cycles: List[CycleIn] = Field(default_factory=list)
    cycle_format: Optional[str] = None
    daylight: Optional[DaylightIn] = None
    festivals: List[FestivalIn] = Field(default_factory=list)
    year_zero_exists: bool = True
    metadata: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("months", "seasons", mode="before")
    @classmethod
    def unwrap_values(cls, v: Any) -> Any:
        return _unwrap_values(v)

    @field_validator("moons", "eras", "cycles", "festivals", mode="before")
    @classmethod
    def lists_default(cls, v: Any) -> Any:
        return _none_to_list(v)

    @field_validator("metadata", mode="before")
    @classmethod
    def metadata_default(cls, v: Any) -> Any:
        return {} if v is None else v


# ============================================================
# MODEL -> DEFINITION
# ============================================================

def _leap(m: CalendarIn) -> LeapYearConfig:
    cfg = m.leap_year_config
    if cfg is not None and cfg.rule and cfg.rule != "none":
        return LeapYearConfig(rule=cfg.rule, interval=cfg.interval, start=cfg.start or 0, pattern=cfg.pattern)
    legacy = m.years.leap_year if m.years is not None else None
    if legacy is None:
        return LeapYearConfig()
    return convert_legacy_config(legacy.model_dump(by_alias=True)) or LeapYearConfig()


def _moon(m: MoonIn) -> Moon:
    ref = m.reference_date or ReferenceDateIn()
    return Moon(
        name=m.name,
        cycle_length=m.cycle_length,
        phases=tuple(
            MoonPhase(
                name=p.name,
                start=p.start,
                end=p.end,
                rising_name=p.rising_name or None,
                fading_name=p.fading_name or None,
                icon=p.icon or None,
            )
            for p in m.phases
        ),
        cycle_day_adjust=m.cycle_day_adjust or 0,
        reference_date=ReferenceDate(year=ref.year, month=ref.month, day=ref.day),
    )


def _daylight(d: Optional[DaylightIn]) -> Daylight:
    if d is None:
        return Daylight()
    return Daylight(
        enabled=d.enabled,
        shortest_day=d.shortest_day,
        longest_day=d.longest_day,
        winter_solstice=d.winter_solstice,
        summer_solstice=d.summer_solstice,
    )


def _build(m: CalendarIn) -> CalendarDefinition:
    days = m.days or DaysIn()
    years = m.years or YearsIn()
    if not m.months:
        _LOG.debug("Calendar %r has no months", m.name)

    return CalendarDefinition(
        name=m.name or m.metadata.get("id") or "custom",
        months=tuple(
            Month(
                name=mo.name,
                days=mo.days,
                abbreviation=mo.abbreviation,
                ordinal=mo.ordinal if mo.ordinal is not None else i + 1,
                leap_days=mo.leap_days,
            )
            for i, mo in enumerate(m.months)
        ),
        leap_year=_leap(m),
        moons=tuple(_moon(mo) for mo in m.moons),
        seasons=tuple(
            Season(s.name, day_start=s.day_start, day_end=s.day_end, month_start=s.month_start, month_end=s.month_end)
            for s in m.seasons
        ),
        eras=tuple(
            Era(
                name=e.name,
                abbreviation=e.abbreviation or "",
                start_year=e.start_year,
                end_year=e.end_year,
                format=e.format or "suffix",
                template=e.template or None,
            )
            for e in m.eras
        ),
        cycles=tuple(
            Cycle(
                name=c.name,
                entries=tuple(CycleEntry(e.name) for e in c.entries),
                length=c.length,
                offset=c.offset or 0,
                based_on=c.based_on,
            )
            for c in m.cycles
        ),
        cycle_format=m.cycle_format or "",
        daylight=_daylight(m.daylight),
        festivals=tuple(Festival(f.name, f.month, f.day) for f in m.festivals),
        year_zero=years.year_zero,
        year_zero_exists=m.year_zero_exists,
        hours_per_day=days.hours_per_day,
        minutes_per_hour=days.minutes_per_hour,
        seconds_per_minute=days.seconds_per_minute,
        days_per_year=days.days_per_year,
        meta=dict(m.metadata),
    )


def definition_from_dict(data: Mapping[str, Any]) -> CalendarDefinition:
    if not isinstance(data, Mapping):
        raise DefinitionError("Calendar definition must be a mapping")
    try:
        model = CalendarIn.model_validate(dict(data))
    except ValidationError as e:
        raise DefinitionError(f"Invalid calendar definition: {e}") from e
    return _build(model)


def load_definition(path: Union[str, Path]) -> CalendarDefinition:
    """Read a calendar definition from a JSON file."""
    p = Path(path)
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise DefinitionError(f"{p}: invalid JSON ({e})") from e
    return definition_from_dict(data)
