from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Literal, Optional, Tuple

LeapRule = Literal["none", "simple", "gregorian", "custom"]
BasedOn = Literal["year", "eraYear", "month", "monthDay", "day", "yearDay"]
SubPhase = Literal["rising", "peak", "fading"]

CYCLE_BASES: Tuple[str, ...] = ("year", "eraYear", "month", "monthDay", "day", "yearDay")

@dataclass(frozen=True)
class CalendarId:
    family: Literal["builtin", "custom", "imported"]
    name: str
    version: str

# ============================================================
# Definition
# ============================================================

@dataclass(frozen=True)
class Month:
    name: str
    days: int
    abbreviation: Optional[str] = None
    ordinal: Optional[int] = None
    leap_days: Optional[int] = None

    def __post_init__(self) -> None:
        if self.days < 1:
            raise ValueError(f"Month '{self.name}' must have at least one day")

@dataclass(frozen=True)
class LeapYearConfig:
    rule: str = "none"
    interval: Optional[int] = None
    start: int = 0
    pattern: Optional[str] = None

@dataclass(frozen=True)
class ReferenceDate:
    """Moon epoch. month is 0-indexed, day is 1-indexed."""
    year: int = 1
    month: int = 0
    day: int = 1

@dataclass(frozen=True)
class MoonPhase:
    name: str
    start: float = 0.0
    end: float = 0.0
    rising_name: Optional[str] = None
    fading_name: Optional[str] = None
    icon: Optional[str] = None

@dataclass(frozen=True)
class Moon:
    name: str
    cycle_length: float
    phases: Tuple[MoonPhase, ...] = ()
    cycle_day_adjust: float = 0
    reference_date: ReferenceDate = ReferenceDate()

@dataclass(frozen=True)
class Season:
    """
    Either a day-of-year range (0-indexed day_start/day_end) or a month range
    (1-indexed month_start/month_end, with day_start/day_end as 1-indexed
    day-of-month bounds inside the boundary months).
    """
    name: str
    day_start: Optional[int] = None
    day_end: Optional[int] = None
    month_start: Optional[int] = None
    month_end: Optional[int] = None

    @property
    def is_month_range(self) -> bool:
        return self.month_start is not None and self.month_end is not None

    @property
    def is_day_range(self) -> bool:
        return (not self.is_month_range) and self.day_start is not None and self.day_end is not None

@dataclass(frozen=True)
class Era:
    name: str
    abbreviation: str
    start_year: int
    end_year: Optional[int] = None
    format: str = "suffix"  # "prefix" | "suffix"
    template: Optional[str] = None

@dataclass(frozen=True)
class CycleEntry:
    name: str

@dataclass(frozen=True)
class Cycle:
    name: str
    entries: Tuple[CycleEntry, ...] = ()
    length: int = 12
    offset: int = 0
    based_on: str = "month"

    def __post_init__(self) -> None:
        if self.based_on not in CYCLE_BASES:
            raise ValueError(f"Cycle '{self.name}': based_on must be one of {CYCLE_BASES}")

@dataclass(frozen=True)
class Daylight:
    enabled: bool = False
    shortest_day: float = 8.0
    longest_day: float = 16.0
    winter_solstice: int = 355
    summer_solstice: int = 172

@dataclass(frozen=True)
class Festival:
    name: str
    month: int  # 1-indexed
    day: int    # 1-indexed

@dataclass(frozen=True)
class CalendarDefinition:
    """Pure data payload describing a whole calendar."""
    name: str
    months: Tuple[Month, ...]
    leap_year: LeapYearConfig = LeapYearConfig()
    moons: Tuple[Moon, ...] = ()
    seasons: Tuple[Season, ...] = ()
    eras: Tuple[Era, ...] = ()
    cycles: Tuple[Cycle, ...] = ()
    cycle_format: str = ""
    daylight: Daylight = Daylight()
    festivals: Tuple[Festival, ...] = ()
    year_zero: int = 0
    year_zero_exists: bool = True
    hours_per_day: int = 24
    minutes_per_hour: int = 60
    seconds_per_minute: int = 60
    days_per_year: Optional[int] = None
    meta: Dict[str, Any] = field(default_factory=dict, compare=False, hash=False)

    @property
    def nominal_days_per_year(self) -> int:
        """Configured year length, else the sum of regular month lengths (365 without months)."""
        if self.days_per_year is not None:
            return self.days_per_year
        if not self.months:
            return 365
        return sum(m.days for m in self.months)

@dataclass(frozen=True)
class CalendarSpec:
    """Top-level wrapper: identity plus the definition payload."""
    id: CalendarId
    payload: CalendarDefinition

    @staticmethod
    def like(name: str) -> "CalendarSpec":
        from ..engines.specs import ALL_SPECS
        if name not in ALL_SPECS:
            raise KeyError(f"Unknown base spec '{name}'. Available: {sorted(ALL_SPECS)}")
        return ALL_SPECS[name]

    def tweak(self, **kwargs) -> "CalendarSpec":
        return replace(self, payload=replace(self.payload, **kwargs))

# ============================================================
# Time
# ============================================================

@dataclass(frozen=True)
class PointInTime:
    """Internal year (display year minus year_zero), 0-indexed month and day_of_month."""
    year: int
    month: int = 0
    day_of_month: int = 0
    hour: int = 0
    minute: int = 0
    second: int = 0

# ============================================================
# Results
# ============================================================

@dataclass(frozen=True)
class MoonPhaseResult:
    moon: str
    name: str
    sub_phase: SubPhase
    sub_phase_name: str
    icon: str
    position: float
    day_in_cycle: int
    phase_index: int
    day_within_phase: int
    phase_duration: float

@dataclass(frozen=True)
class EraMatch:
    name: str
    abbreviation: str
    format: str
    template: Optional[str]
    year_in_era: int

@dataclass(frozen=True)
class CycleValue:
    cycle_name: str
    entry_name: str
    index: int

@dataclass(frozen=True)
class CycleValues:
    text: str = ""
    values: Tuple[CycleValue, ...] = ()

@dataclass(frozen=True)
class DaylightTimes:
    sunrise: float
    sunset: float
    solar_midday: float
    solar_midnight: float
    daylight_hours: float

@dataclass(frozen=True)
class PatternValidation:
    valid: bool
    error: Optional[str] = None

@dataclass(frozen=True)
class RuleDescription:
    """Un-localized leap rule summary; a presentation layer maps key+params to text."""
    key: LeapRule
    params: Dict[str, Any] = field(default_factory=dict)

@dataclass(frozen=True)
class DayFacts:
    calendar: str
    point: PointInTime
    display_year: int
    day_of_year: int
    is_leap_year: bool
    days_in_month: int
    days_in_year: int
    season: Optional[Season]
    era: Optional[EraMatch]
    moons: Tuple[MoonPhaseResult, ...]
    cycles: CycleValues
    daylight: DaylightTimes
    attributes: Optional[Dict[str, Any]] = None
