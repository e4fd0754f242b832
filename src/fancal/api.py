from __future__ import annotations

from dataclasses import replace
from typing import Any, Dict, List, Optional, Sequence, Union

from .core.engine import CalendarRegistry
from .core.types import (
    CalendarDefinition,
    CalendarSpec,
    CycleValues,
    DayFacts,
    DaylightTimes,
    EraMatch,
    MoonPhaseResult,
    PatternValidation,
    PointInTime,
    Season,
)
from .attributes.registry import compute_attributes
from .engines.calendar import CalendarEngine
from .engines.factory import engine_for, make_engine as _make_engine
from .engines.leap import validate_pattern as _validate_pattern

_registry: Optional[CalendarRegistry] = None

def set_registry(reg: CalendarRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> CalendarRegistry:
    if _registry is None:
        raise RuntimeError("Calendar registry not initialized")
    return _registry

def list_calendars() -> List[str]:
    return _reg().list()

def calendar_info(calendar: str) -> Dict[str, Any]:
    return _reg().get(calendar).info()

def get_calendar(name: str, **tweaks: Any) -> CalendarEngine:
    """
    Engine for a built-in spec or a registered calendar, optionally with
    definition fields replaced (e.g. get_calendar("gregorian", year_zero=1)).
    """
    from .engines.specs import ALL_SPECS
    if name in ALL_SPECS:
        spec = ALL_SPECS[name]
    else:
        eng = _reg().get(name)
        if not tweaks:
            return eng
        spec = CalendarSpec(eng.id, eng.definition)
    if tweaks:
        spec = spec.tweak(**tweaks)
    return _make_engine(spec)

def make_engine(spec: CalendarSpec) -> CalendarEngine:
    return _make_engine(spec)

def register_calendar(
    name: str,
    calendar: Union[CalendarEngine, CalendarDefinition],
    *,
    overwrite: bool = False,
) -> None:
    engine = engine_for(calendar) if isinstance(calendar, CalendarDefinition) else calendar
    _reg().register(name, engine, overwrite=overwrite)

# ============================================================
# Day-level API
# ============================================================

def day_info(
    point: PointInTime,
    *,
    calendar: str = "gregorian",
    attributes: Sequence[str] = (),
) -> DayFacts:
    eng = _reg().get(calendar)
    info = eng.day_info(point)
    if attributes:
        attrs = compute_attributes(eng.definition, info, attributes)
        info = replace(info, attributes=attrs)
    return info

def explain(point: PointInTime, *, calendar: str = "gregorian") -> Dict[str, Any]:
    return _reg().get(calendar).explain(point)

def is_leap_year(year: int, *, calendar: str = "gregorian") -> bool:
    return _reg().get(calendar).is_leap_year(year)

def days_in_month(month_index: int, year: int, *, calendar: str = "gregorian") -> int:
    return _reg().get(calendar).days_in_month(month_index, year)

def days_in_year(year: int, *, calendar: str = "gregorian") -> int:
    return _reg().get(calendar).days_in_year(year)

def moon_phase(point: PointInTime, moon_index: int = 0, *, calendar: str = "gregorian") -> Optional[MoonPhaseResult]:
    return _reg().get(calendar).moon_phase(moon_index, point)

def moon_phases(point: PointInTime, *, calendar: str = "gregorian") -> List[MoonPhaseResult]:
    return _reg().get(calendar).moon_phases(point)

def season(point: PointInTime, *, calendar: str = "gregorian") -> Optional[Season]:
    return _reg().get(calendar).season(point)

def era(point: PointInTime, *, calendar: str = "gregorian") -> Optional[EraMatch]:
    return _reg().get(calendar).era(point)

def format_year(year: int, *, calendar: str = "gregorian") -> str:
    return _reg().get(calendar).format_year(year)

def cycle_values(point: PointInTime, *, calendar: str = "gregorian") -> CycleValues:
    return _reg().get(calendar).cycle_values(point)

def daylight(point: PointInTime, *, calendar: str = "gregorian") -> DaylightTimes:
    return _reg().get(calendar).daylight(point)

def validate_pattern(pattern: str) -> PatternValidation:
    return _validate_pattern(pattern)
