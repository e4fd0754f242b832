from __future__ import annotations
from typing import Optional

from ..core.types import CalendarDefinition, Festival, PointInTime


def find_festival_day(cal: CalendarDefinition, p: PointInTime) -> Optional[Festival]:
    """Festival falling on this day (festival month/day are 1-indexed)."""
    for f in cal.festivals:
        if f.month == p.month + 1 and f.day == p.day_of_month + 1:
            return f
    return None


def is_festival_day(cal: CalendarDefinition, p: PointInTime) -> bool:
    return find_festival_day(cal, p) is not None
