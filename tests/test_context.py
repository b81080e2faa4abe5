import uuid
from types import SimpleNamespace

import pytest
from pydantic import ValidationError

from stacks_events.errors import InvalidOperationContextError, MissingOperationContextError
from stacks_events.schemas.context import OperationContext, SupportsOperationContext, resolve_context


def test_new_generates_correlation_id():
    a = OperationContext.new(1)
    b = OperationContext.new(1)
    assert isinstance(a.correlation_id, uuid.UUID)
    assert a.correlation_id != b.correlation_id
    assert isinstance(a, SupportsOperationContext)


def test_new_keeps_given_correlation_id():
    cid = "11111111-1111-1111-1111-111111111111"
    ctx = OperationContext.new(9, cid)
    assert ctx.correlation_id == uuid.UUID(cid)
    assert ctx.operation_code == 9


def test_context_is_frozen():
    ctx = OperationContext.new(1)
    with pytest.raises(ValidationError):
        ctx.operation_code = 2


def test_resolve_accepts_any_object_with_the_fields():
    cid = uuid.uuid4()
    # duck-typed contexts work, and string correlation ids are parsed
    ns = SimpleNamespace(operation_code=12, correlation_id=str(cid))
    assert resolve_context(ns) == (12, cid)


def test_resolve_none():
    with pytest.raises(MissingOperationContextError):
        resolve_context(None)


@pytest.mark.parametrize(
    "ctx",
    [
        SimpleNamespace(operation_code=1),
        SimpleNamespace(correlation_id=uuid.uuid4()),
        SimpleNamespace(operation_code=1, correlation_id="not-a-uuid"),
        SimpleNamespace(operation_code="x", correlation_id=uuid.uuid4()),
        SimpleNamespace(operation_code=None, correlation_id=uuid.uuid4()),
        SimpleNamespace(operation_code=3.9, correlation_id=uuid.uuid4()),
        SimpleNamespace(operation_code=True, correlation_id=uuid.uuid4()),
        SimpleNamespace(operation_code="12", correlation_id=uuid.uuid4()),
    ],
)
def test_resolve_rejects_bad_contexts(ctx):
    with pytest.raises(InvalidOperationContextError):
        resolve_context(ctx)


def test_errors_are_value_errors():
    # callers that only know ValueError still catch construction failures
    with pytest.raises(ValueError):
        resolve_context(None)


def test_resolve_returns_context_values_unchanged():
    ctx = OperationContext.new(7)
    code, cid = resolve_context(ctx)
    assert type(code) is int and code == 7
    assert cid == ctx.correlation_id


def test_new_rejects_non_int_codes():
    with pytest.raises(ValidationError):
        OperationContext.new(2.5)
