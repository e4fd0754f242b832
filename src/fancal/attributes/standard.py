from __future__ import annotations
from typing import Any, Dict

from ..core.time import hours_of_day
from ..engines.daylight import progress_day, progress_night
from ..engines.festivals import find_festival_day
from .registry import register_attribute

def festival(cal, facts) -> Dict[str, Any]:
    f = find_festival_day(cal, facts.point)
    return {"festival": f.name if f is not None else None}

def date_parts(cal, facts) -> Dict[str, Any]:
    # Unlocalized strftime-like tokens; names are passed through as stored.
    p = facts.point
    month = cal.months[p.month] if 0 <= p.month < len(cal.months) else None
    ordinal = month.ordinal if (month is not None and month.ordinal is not None) else p.month + 1
    y = facts.display_year
    return {"date_parts": {
        "y": y,
        "yyyy": str(y).zfill(4),
        "B": month.name if month is not None else "",
        "b": (month.abbreviation or month.name) if month is not None else "",
        "m": ordinal,
        "mm": str(ordinal).zfill(2),
        "d": p.day_of_month + 1,
        "dd": str(p.day_of_month + 1).zfill(2),
        "j": str(facts.day_of_year + 1).zfill(3),
        "H": str(p.hour).zfill(2),
        "M": str(p.minute).zfill(2),
        "S": str(p.second).zfill(2),
    }}

def progress(cal, facts) -> Dict[str, Any]:
    return {
        "hours_of_day": hours_of_day(cal, facts.point),
        "progress_day": progress_day(cal, facts.point),
        "progress_night": progress_night(cal, facts.point),
    }

register_attribute("festival", festival)
register_attribute("date_parts", date_parts)
register_attribute("progress", progress)
