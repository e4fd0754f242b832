from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Protocol

from .errors import UnknownCalendarError
from .types import DayFacts, PointInTime

class CalendarEngine(Protocol):
    def info(self) -> Dict[str, Any]: ...
    def is_leap_year(self, year: int) -> bool: ...
    def days_in_month(self, month_index: int, year: int) -> int: ...
    def day_info(self, point: PointInTime) -> DayFacts: ...
    def explain(self, point: PointInTime) -> Dict[str, Any]: ...

@dataclass
class CalendarRegistry:
    _engines: Dict[str, CalendarEngine]

    def get(self, name: str) -> CalendarEngine:
        if name not in self._engines:
            raise UnknownCalendarError(f"Unknown calendar '{name}'. Available: {sorted(self._engines)}")
        return self._engines[name]

    def find(self, name: str) -> Optional[CalendarEngine]:
        return self._engines.get(name)

    def list(self) -> List[str]:
        return sorted(self._engines.keys())

    def register(self, name: str, engine: CalendarEngine, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._engines):
            raise KeyError(f"Calendar '{name}' already exists. Use overwrite=True to replace.")
        self._engines[name] = engine
