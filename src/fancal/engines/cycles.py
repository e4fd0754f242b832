"""
fancal.engines.cycles
---------------------
Named repeating cycles (zodiacs, elemental weeks, ...). Each cycle advances
one entry every `length` units of its `based_on` component; the entries of
all cycles are rendered into the calendar's shared `cycle_format`, where
{{1}}, {{2}}, ... refer to cycles in definition order and {{n}} is a line break.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Dict, List

from ..core.types import CalendarDefinition, Cycle, CycleValue, CycleValues, PointInTime
from ..core.time import day_of_year, display_year, point_days
from .eras import resolve_era

_LOG = logging.getLogger(__name__)

LINE_BREAK = "\n"

_PLACEHOLDER_RE = re.compile(r"\{\{(\w+)\}\}")


def cycle_epoch_values(cal: CalendarDefinition, p: PointInTime) -> Dict[str, int]:
    year = display_year(cal, p)
    era = resolve_era(cal.eras, year)
    return {
        "year": year,
        "eraYear": era.year_in_era if era is not None else year,
        "month": p.month,
        "monthDay": p.day_of_month,
        "day": point_days(cal, p),
        "yearDay": day_of_year(cal, p),
    }


def cycle_index(cycle: Cycle, epoch_value: int) -> int:
    n = len(cycle.entries)
    if n == 0:
        return 0
    length = cycle.length if cycle.length >= 1 else 1

    num = epoch_value // length
    if num < 0:
        num += math.ceil(abs(epoch_value) / n) * n
    # floor modulo: always in [0, n)
    return (num + (cycle.offset or 0) // length) % n


def render_cycle_format(template: str, names: Dict[int, str]) -> str:
    def sub(m: "re.Match[str]") -> str:
        key = m.group(1)
        if key == "n":
            return LINE_BREAK
        if key.isdigit() and int(key) in names:
            return names[int(key)]
        return m.group(0)
    return _PLACEHOLDER_RE.sub(sub, template or "")


def cycle_values(cal: CalendarDefinition, p: PointInTime) -> CycleValues:
    if not cal.cycles:
        return CycleValues()

    epoch = cycle_epoch_values(cal, p)
    values: List[CycleValue] = []
    names: Dict[int, str] = {}

    for i, cycle in enumerate(cal.cycles, start=1):
        if not cycle.entries:
            _LOG.debug("Cycle %r has no entries; placeholder {{%d}} renders empty", cycle.name, i)
            names[i] = ""
            continue
        idx = cycle_index(cycle, epoch.get(cycle.based_on, 0))
        entry = cycle.entries[idx]
        values.append(CycleValue(cycle_name=cycle.name, entry_name=entry.name, index=idx))
        names[i] = entry.name

    return CycleValues(text=render_cycle_format(cal.cycle_format, names), values=tuple(values))
