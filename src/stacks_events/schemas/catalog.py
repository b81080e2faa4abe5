"""Event code -> event type registry.

Consumers that only see the integer ``event_code`` use this to find the
model to rebuild a payload with. Bindings are append-only.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Type

from stacks_events.errors import EventCodeConflictError, InvalidEventTypeError, UnknownEventCodeError
from stacks_events.schemas.event_codes import EventCode
from stacks_events.schemas.events import (
    BaseApplicationEvent,
    CategoryCreatedEvent,
    CategoryDeletedEvent,
    CategoryUpdatedEvent,
    MenuCreatedEvent,
    MenuDeletedEvent,
    MenuItemCreatedEvent,
    MenuItemDeletedEvent,
    MenuItemUpdatedEvent,
    MenuUpdatedEvent,
    NotifyEvent,
)
from stacks_events.utils.logger_util import get_logger

logger = get_logger(__name__)

EVENT_TYPES: Dict[int, Type[BaseApplicationEvent]] = {}


def register_event_type(cls: Type[BaseApplicationEvent]) -> Type[BaseApplicationEvent]:
    event_code = getattr(cls, "EVENT_CODE", None)
    if not isinstance(event_code, EventCode):
        raise InvalidEventTypeError(
            f"{getattr(cls, '__name__', cls)} does not declare an EventCode EVENT_CODE; "
            "only concrete event types can be registered"
        )
    code = int(event_code)
    existing = EVENT_TYPES.get(code)
    if existing is cls:
        return cls
    if existing is not None:
        raise EventCodeConflictError(
            f"event code {code} is already bound to {existing.__name__}, refusing {cls.__name__}"
        )
    EVENT_TYPES[code] = cls
    logger.debug("registered %s under event code %s", cls.__name__, code)
    return cls


for _cls in (
    MenuCreatedEvent,
    MenuUpdatedEvent,
    MenuDeletedEvent,
    CategoryCreatedEvent,
    CategoryUpdatedEvent,
    CategoryDeletedEvent,
    MenuItemCreatedEvent,
    MenuItemUpdatedEvent,
    MenuItemDeletedEvent,
    NotifyEvent,
):
    register_event_type(_cls)


def event_type_for_code(code: int) -> Type[BaseApplicationEvent]:
    try:
        return EVENT_TYPES[int(code)]
    except (KeyError, TypeError, ValueError) as exc:
        raise UnknownEventCodeError(f"no event type registered for code {code!r}") from exc


def parse_event(payload: Mapping[str, Any]) -> BaseApplicationEvent:
    """Rebuild an event from a ``model_dump()``-shaped mapping.

    The ``event_code`` key picks the model; the remaining keys are validated
    by that model, so bad field values surface as pydantic ValidationError.
    """
    if "event_code" not in payload:
        raise UnknownEventCodeError("payload has no event_code")
    cls = event_type_for_code(payload["event_code"])
    return cls.model_validate(dict(payload))
