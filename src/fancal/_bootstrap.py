from __future__ import annotations
from fancal.core.engine import CalendarRegistry
from fancal.engines.specs import ALL_SPECS
from fancal.engines.factory import make_engine

def build_registry() -> CalendarRegistry:
    engines = {}
    for name, spec in ALL_SPECS.items():
        engines[name] = make_engine(spec)
    return CalendarRegistry(engines)
