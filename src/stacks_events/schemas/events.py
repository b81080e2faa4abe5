from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any, ClassVar, Dict, Optional, Protocol, Sequence, Tuple, runtime_checkable
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, computed_field

from stacks_events.schemas.context import OperationCode, resolve_context
from stacks_events.schemas.event_codes import EventCode
from stacks_events.utils.logger_util import get_logger

logger = get_logger(__name__)


@runtime_checkable
class ApplicationEvent(Protocol):
    """Anything a publisher can route without knowing the concrete type."""

    event_code: int
    operation_code: int
    correlation_id: UUID


@runtime_checkable
class CloudEvent(Protocol):
    """Envelope metadata (id, time, subject) for cloud-event serializers."""

    id: str
    time: Optional[datetime]
    subject: Optional[str]


def _uuid() -> str:
    return str(uuid.uuid4())


def _now() -> datetime:
    return datetime.now(timezone.utc)


class BaseApplicationEvent(BaseModel):
    """Base for the menu sample events.

    Variants are built either from an operation context plus their domain
    ids in ``ID_FIELDS`` order::

        MenuCreatedEvent(context, menu_id)

    or fully by keyword (``operation_code=..., correlation_id=..., menu_id=...``).
    ``operation_code`` and ``correlation_id`` cannot be reassigned; the
    domain ids can. Ids are not checked for emptiness: a nil UUID is a valid
    value here.
    """

    model_config = ConfigDict(validate_assignment=True)

    EVENT_CODE: ClassVar[EventCode]
    ID_FIELDS: ClassVar[Tuple[str, ...]] = ()

    operation_code: OperationCode = Field(frozen=True)
    correlation_id: UUID = Field(frozen=True)

    def __init__(self, *args: Any, **data: Any) -> None:
        if args:
            context, *domain_ids = args
            data.update(type(self)._bind_context(context, domain_ids, data))
        super().__init__(**data)

    @classmethod
    def _bind_context(cls, context: Any, domain_ids: Sequence[Any], data: Dict[str, Any]) -> Dict[str, Any]:
        if len(domain_ids) > len(cls.ID_FIELDS):
            raise TypeError(
                f"{cls.__name__} takes a context and at most {len(cls.ID_FIELDS)} domain id(s), "
                f"got {len(domain_ids)}"
            )
        bound = dict(zip(cls.ID_FIELDS, domain_ids))
        clash = (set(bound) | {"operation_code", "correlation_id"}) & set(data)
        if clash:
            raise TypeError(f"{cls.__name__} got multiple values for {', '.join(sorted(clash))}")
        # ids not given positionally may come by keyword
        missing = [name for name in cls.ID_FIELDS if name not in bound and name not in data]
        if missing:
            raise TypeError(f"{cls.__name__} missing domain id(s): {', '.join(missing)}")
        operation_code, correlation_id = resolve_context(context)
        bound["operation_code"] = operation_code
        bound["correlation_id"] = correlation_id
        return bound

    @classmethod
    def from_context(cls, context: Any, *domain_ids: Any):
        return cls(context, *domain_ids)

    @computed_field
    @property
    def event_code(self) -> int:
        return int(self.EVENT_CODE)


# ===========================================================================
# Menus
# ===========================================================================

class MenuCreatedEvent(BaseApplicationEvent):
    EVENT_CODE: ClassVar[EventCode] = EventCode.MENU_CREATED
    ID_FIELDS: ClassVar[Tuple[str, ...]] = ("menu_id",)

    menu_id: UUID


class MenuUpdatedEvent(BaseApplicationEvent):
    EVENT_CODE: ClassVar[EventCode] = EventCode.MENU_UPDATED
    ID_FIELDS: ClassVar[Tuple[str, ...]] = ("menu_id",)

    menu_id: UUID


class MenuDeletedEvent(BaseApplicationEvent):
    EVENT_CODE: ClassVar[EventCode] = EventCode.MENU_DELETED
    ID_FIELDS: ClassVar[Tuple[str, ...]] = ("menu_id",)

    menu_id: UUID


# ===========================================================================
# Categories
# ===========================================================================

class CategoryCreatedEvent(BaseApplicationEvent):
    EVENT_CODE: ClassVar[EventCode] = EventCode.CATEGORY_CREATED
    ID_FIELDS: ClassVar[Tuple[str, ...]] = ("menu_id", "category_id")

    menu_id: UUID
    category_id: UUID


class CategoryUpdatedEvent(BaseApplicationEvent):
    EVENT_CODE: ClassVar[EventCode] = EventCode.CATEGORY_UPDATED
    ID_FIELDS: ClassVar[Tuple[str, ...]] = ("menu_id", "category_id")

    menu_id: UUID
    category_id: UUID


class CategoryDeletedEvent(BaseApplicationEvent):
    EVENT_CODE: ClassVar[EventCode] = EventCode.CATEGORY_DELETED
    ID_FIELDS: ClassVar[Tuple[str, ...]] = ("menu_id", "category_id")

    menu_id: UUID
    category_id: UUID


# ===========================================================================
# Menu items
# ===========================================================================

class MenuItemCreatedEvent(BaseApplicationEvent):
    EVENT_CODE: ClassVar[EventCode] = EventCode.MENU_ITEM_CREATED
    ID_FIELDS: ClassVar[Tuple[str, ...]] = ("menu_id", "category_id", "menu_item_id")

    menu_id: UUID
    category_id: UUID
    menu_item_id: UUID


class MenuItemUpdatedEvent(BaseApplicationEvent):
    EVENT_CODE: ClassVar[EventCode] = EventCode.MENU_ITEM_UPDATED
    ID_FIELDS: ClassVar[Tuple[str, ...]] = ("menu_id", "category_id", "menu_item_id")

    menu_id: UUID
    category_id: UUID
    menu_item_id: UUID


class MenuItemDeletedEvent(BaseApplicationEvent):
    EVENT_CODE: ClassVar[EventCode] = EventCode.MENU_ITEM_DELETED
    ID_FIELDS: ClassVar[Tuple[str, ...]] = ("menu_id", "category_id", "menu_item_id")

    menu_id: UUID
    category_id: UUID
    menu_item_id: UUID


# ===========================================================================
# Generic
# ===========================================================================

class NotifyEvent(BaseApplicationEvent):
    """Standalone notification that also carries cloud-event metadata.

    Built from explicit arguments rather than a context. ``id`` and ``time``
    are stamped once per instance; ``subject`` stays writable.
    """

    EVENT_CODE: ClassVar[EventCode] = EventCode.NOTIFY

    id: str = Field(default_factory=_uuid, frozen=True)
    time: Optional[datetime] = Field(default_factory=_now, frozen=True)
    subject: Optional[str] = None

    def __init__(
        self,
        correlation_id: UUID | str,
        operation_code: int,
        subject: Optional[str] = None,
        **data: Any,
    ) -> None:
        super().__init__(correlation_id=correlation_id, operation_code=operation_code, subject=subject, **data)

    @classmethod
    def from_context(cls, context: Any, subject: Optional[str] = None) -> "NotifyEvent":
        operation_code, correlation_id = resolve_context(context)
        return cls(correlation_id, operation_code, subject=subject)
