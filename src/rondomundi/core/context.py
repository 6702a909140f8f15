"""Request context via contextvars: the per-request correlation id."""

from __future__ import annotations

import uuid
from contextvars import ContextVar

_correlation_id: ContextVar[str | None] = ContextVar("correlation_id", default=None)


def new_correlation_id() -> str:
    return uuid.uuid4().hex[:12]


def set_correlation_id(value: str) -> None:
    """Bind *value* as the correlation id of the current context."""
    _correlation_id.set(value)


def get_correlation_id() -> str | None:
    return _correlation_id.get()
