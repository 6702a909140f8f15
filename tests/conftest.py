"""Shared pytest fixtures and test configuration."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator

import pytest
from fastapi.testclient import TestClient

# Ensure src is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from rondomundi.core.config import Settings  # noqa: E402
from rondomundi.services.registry import InMemoryLotteryRegistry  # noqa: E402

FIXED_NOW = "2026-03-01T17:00:00+00:00"


def sequential_ids(prefix: str = "lot") -> Callable[[], str]:
    """Return an id factory yielding ``lot-1``, ``lot-2``, ..."""
    counter = iter(range(1, sys.maxsize))
    return lambda: f"{prefix}-{next(counter)}"


class ScriptedDraw:
    """Deterministic stand-in for the CSPRNG: returns queued ticket numbers."""

    def __init__(self, *values: int) -> None:
        self._values = list(values)
        self.totals: list[int] = []

    def __call__(self, total: int) -> int:
        self.totals.append(total)
        return self._values.pop(0)


@pytest.fixture
def registry() -> InMemoryLotteryRegistry:
    """Registry with predictable ids and timestamps and the real CSPRNG."""
    return InMemoryLotteryRegistry(id_factory=sequential_ids(), clock=lambda: FIXED_NOW)


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, app_env="testing")


@pytest.fixture
def app(settings: Settings, registry: InMemoryLotteryRegistry):  # type: ignore[no-untyped-def]
    """Create a FastAPI test app backed by the ``registry`` fixture."""
    from rondomundi.main import create_app

    return create_app(settings=settings, registry=registry)


@pytest.fixture
def client(app) -> Iterator[TestClient]:  # type: ignore[no-untyped-def]
    with TestClient(app) as test_client:
        yield test_client
