"""
fancal.engines.factory
----------------------
Transforms pure data specifications into live CalendarEngine objects.
"""

from __future__ import annotations
from fancal.core.types import CalendarDefinition, CalendarId, CalendarSpec
from fancal.engines.calendar import CalendarEngine


def build_calendar_engine(spec: CalendarSpec) -> CalendarEngine:
    """Transforms a pure data CalendarSpec into a live CalendarEngine."""
    if not isinstance(spec.payload, CalendarDefinition):
        raise TypeError(f"Unknown payload type: {type(spec.payload)}")
    return CalendarEngine(id=spec.id, definition=spec.payload)


def make_engine(spec: CalendarSpec) -> CalendarEngine:
    """The universal entry point."""
    return build_calendar_engine(spec)


def engine_for(definition: CalendarDefinition, *, family: str = "custom", version: str = "1") -> CalendarEngine:
    """Wrap a bare definition (e.g. one loaded from JSON)."""
    return make_engine(CalendarSpec(CalendarId(family, definition.name, version), definition))
