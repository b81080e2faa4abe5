"""Exception hierarchy for the event catalog."""


class EventCatalogError(Exception):
    """Base exception for all event catalog errors."""


# --- Construction ---
class MissingOperationContextError(EventCatalogError, ValueError):
    """An event that needs an operation context was given None."""


class InvalidOperationContextError(EventCatalogError, ValueError):
    """The operation context lacks an operation code or correlation id."""


# --- Catalog ---
class UnknownEventCodeError(EventCatalogError, KeyError):
    """No event type is registered under the given code."""


class EventCodeConflictError(EventCatalogError):
    """A code is already bound to a different event type."""


class InvalidEventTypeError(EventCatalogError, TypeError):
    """The class is not a concrete event type (no EVENT_CODE)."""
