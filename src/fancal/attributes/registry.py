from __future__ import annotations
from typing import Any, Callable, Dict, Sequence

from ..core.types import CalendarDefinition, DayFacts

AttrFunc = Callable[[CalendarDefinition, DayFacts], Dict[str, Any]]
_REGISTRY: Dict[str, AttrFunc] = {}

def register_attribute(name: str, fn: AttrFunc) -> None:
    _REGISTRY[name] = fn

def available_attributes() -> list:
    return sorted(_REGISTRY)

def compute_attributes(cal: CalendarDefinition, facts: DayFacts, names: Sequence[str]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for name in names:
        if name not in _REGISTRY:
            raise KeyError(f"Unknown attribute '{name}'. Available: {sorted(_REGISTRY)}")
        out.update(_REGISTRY[name](cal, facts))
    return out
