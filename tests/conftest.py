import os
import uuid
from typing import Callable

import pytest
from fastapi.testclient import TestClient

# keep test runs from writing log files unless explicitly overridden
os.environ.setdefault("STACKS_EVENTS_LOG_DIR", "")
os.environ.setdefault("STACKS_EVENTS_LOG_LEVEL", "DEBUG")

import stacks_events.api as api_mod
from stacks_events.bus import EventBus
from stacks_events.schemas.context import OperationContext

CORRELATION_ID = uuid.UUID("11111111-1111-1111-1111-111111111111")
MENU_ID = uuid.UUID("22222222-2222-2222-2222-222222222222")


@pytest.fixture
def make_context() -> Callable[..., OperationContext]:
    """
    Return a helper to construct an operation context.
    Usage: ctx = make_context(operation_code=42)
    """
    def _make(operation_code: int = 42, correlation_id=CORRELATION_ID) -> OperationContext:
        return OperationContext.new(operation_code, correlation_id)
    return _make


@pytest.fixture
def context(make_context) -> OperationContext:
    return make_context()


@pytest.fixture
def bus() -> EventBus:
    return EventBus(default_maxsize=10)


@pytest.fixture
def app():
    """FastAPI app instance."""
    return api_mod.app


@pytest.fixture
def client(app) -> TestClient:
    """TestClient for the FastAPI app."""
    return TestClient(app)


@pytest.fixture(autouse=True)
def fresh_api_bus(monkeypatch):
    """Give every test its own bus behind the API so channel state does not leak."""
    monkeypatch.setattr(api_mod, "bus", EventBus(default_maxsize=10))
    yield


@pytest.fixture
def correlation_id() -> uuid.UUID:
    """Correlation id carried by the default ``context`` fixture."""
    return CORRELATION_ID


@pytest.fixture
def menu_id() -> uuid.UUID:
    return MENU_ID
