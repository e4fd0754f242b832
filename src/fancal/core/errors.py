class FancalError(Exception):
    """Base error."""

class DefinitionError(FancalError, ValueError):
    """Raised when a calendar definition dict cannot be turned into a CalendarDefinition."""

class UnknownCalendarError(FancalError, KeyError):
    """Raised when a calendar name is not in the registry."""
