"""Dependency injection for FastAPI routes."""

from __future__ import annotations

from fastapi import Request

from rondomundi.services.registry import LotteryRegistry


def get_registry(request: Request) -> LotteryRegistry:
    """Dependency that provides the registry attached to the running app."""
    registry: LotteryRegistry = request.app.state.registry
    return registry
