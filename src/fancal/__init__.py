"""fancal public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    day_info,
    explain,
    list_calendars,
    calendar_info,
    get_calendar,
    make_engine,
    register_calendar,
    is_leap_year,
    days_in_month,
    days_in_year,
    moon_phase,
    moon_phases,
    season,
    era,
    format_year,
    cycle_values,
    daylight,
    validate_pattern,
)
from .core.types import CalendarDefinition, PointInTime
from .engines.loader import definition_from_dict, load_definition

__all__ = [
    "day_info",
    "explain",
    "list_calendars",
    "calendar_info",
    "get_calendar",
    "make_engine",
    "register_calendar",
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "moon_phase",
    "moon_phases",
    "season",
    "era",
    "format_year",
    "cycle_values",
    "daylight",
    "validate_pattern",
    "CalendarDefinition",
    "PointInTime",
    "definition_from_dict",
    "load_definition",
]
