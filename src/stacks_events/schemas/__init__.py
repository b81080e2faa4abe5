"""Contract-first models for the menu sample events.

Every event carries an integer event code, the operation code and the
correlation id of the operation that raised it, plus its domain ids.
"""

from .event_codes import EventCode, describe_codes
from .context import OperationContext, SupportsOperationContext, resolve_context
from .events import (
    ApplicationEvent,
    BaseApplicationEvent,
    CategoryCreatedEvent,
    CategoryDeletedEvent,
    CategoryUpdatedEvent,
    CloudEvent,
    MenuCreatedEvent,
    MenuDeletedEvent,
    MenuItemCreatedEvent,
    MenuItemDeletedEvent,
    MenuItemUpdatedEvent,
    MenuUpdatedEvent,
    NotifyEvent,
)
from .catalog import EVENT_TYPES, event_type_for_code, parse_event, register_event_type

__all__ = [
    "EventCode",
    "describe_codes",
    "OperationContext",
    "SupportsOperationContext",
    "resolve_context",
    "ApplicationEvent",
    "CloudEvent",
    "BaseApplicationEvent",
    "MenuCreatedEvent",
    "MenuUpdatedEvent",
    "MenuDeletedEvent",
    "CategoryCreatedEvent",
    "CategoryUpdatedEvent",
    "CategoryDeletedEvent",
    "MenuItemCreatedEvent",
    "MenuItemUpdatedEvent",
    "MenuItemDeletedEvent",
    "NotifyEvent",
    "EVENT_TYPES",
    "event_type_for_code",
    "parse_event",
    "register_event_type",
]
