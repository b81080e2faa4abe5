from __future__ import annotations

import uuid
from typing import Any, Optional, Protocol, Tuple, runtime_checkable
from uuid import UUID

from pydantic import BaseModel, ConfigDict, StrictInt, ValidationError

from stacks_events.errors import InvalidOperationContextError, MissingOperationContextError
from stacks_events.utils.logger_util import get_logger

logger = get_logger(__name__)

# copied verbatim: no float truncation, no bool or str coercion
OperationCode = StrictInt


@runtime_checkable
class SupportsOperationContext(Protocol):
    """Ambient data for the in-flight operation that produces an event."""

    operation_code: int
    correlation_id: UUID


class OperationContext(BaseModel):
    model_config = ConfigDict(frozen=True, from_attributes=True)

    operation_code: OperationCode
    correlation_id: UUID

    @classmethod
    def new(cls, operation_code: int, correlation_id: UUID | str | None = None) -> "OperationContext":
        if correlation_id is None:
            correlation_id = uuid.uuid4()
        return cls(operation_code=operation_code, correlation_id=correlation_id)


def resolve_context(context: Optional[Any]) -> Tuple[int, UUID]:
    """Read (operation_code, correlation_id) from a context exactly once.

    Any object exposing both attributes is accepted; values go through the
    same validation as ``OperationContext``. Raises
    MissingOperationContextError for None so that an event is never built
    with a zeroed correlation id.
    """
    if context is None:
        raise MissingOperationContextError("an operation context is required to construct this event")
    try:
        resolved = OperationContext.model_validate(context, from_attributes=True)
    except ValidationError as exc:
        logger.debug("rejected context of type %s: %s", type(context).__name__, exc)
        raise InvalidOperationContextError(
            f"{type(context).__name__} is not a valid operation context: {exc.error_count()} error(s)"
        ) from exc
    return resolved.operation_code, resolved.correlation_id
