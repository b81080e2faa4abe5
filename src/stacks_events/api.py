from __future__ import annotations

from typing import Optional
from uuid import UUID

from fastapi import Depends, FastAPI, Header, HTTPException, Response
from pydantic import BaseModel

from stacks_events.bus import EventBus
from stacks_events.config import load_settings
from stacks_events.schemas.context import OperationContext
from stacks_events.schemas.event_codes import describe_codes
from stacks_events.schemas.events import NotifyEvent
from stacks_events.utils.logger_util import get_logger

logger = get_logger(__name__)

settings = load_settings()
app = FastAPI(title="stacks-messaging-events", version="0.1.0")
# in-process publisher standing in for the messaging infrastructure
bus = EventBus(default_maxsize=settings.bus_maxsize)


class NotifyRequest(BaseModel):
    subject: Optional[str] = None


def get_operation_context(
    x_correlation_id: Optional[str] = Header(None),
    x_operation_code: Optional[str] = Header(None),
) -> OperationContext:
    """Build the operation context for this request from its headers."""
    operation_code = settings.default_operation_code
    if x_operation_code is not None:
        try:
            operation_code = int(x_operation_code)
        except ValueError:
            raise HTTPException(status_code=400, detail="X-Operation-Code must be an integer")
    correlation_id = None
    if x_correlation_id is not None:
        try:
            correlation_id = UUID(x_correlation_id)
        except ValueError:
            raise HTTPException(status_code=400, detail="X-Correlation-Id must be a UUID")
    return OperationContext.new(operation_code, correlation_id)


@app.get("/events/codes")
def event_codes():
    return describe_codes()


@app.post("/events/notify")
async def notify(
    body: NotifyRequest,
    response: Response,
    context: OperationContext = Depends(get_operation_context),
):
    event = NotifyEvent.from_context(context, subject=body.subject)
    ok = await bus.publish(event, block=False)
    response.headers["X-Correlation-Id"] = str(event.correlation_id)
    logger.info("notify %s published=%s correlation_id=%s", event.id, ok, event.correlation_id)
    return {"published": ok, "event": event.model_dump(mode="json")}
