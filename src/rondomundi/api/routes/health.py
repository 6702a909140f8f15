"""Health check routes."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Request

from rondomundi.api.schemas.common import HealthResponse
from rondomundi.core.constants import HEALTH_MESSAGE

router = APIRouter()


@router.get("/", response_model=HealthResponse)
@router.get("/health", response_model=HealthResponse)
def health_check(request: Request) -> dict[str, Any]:
    """Application health check endpoint."""
    settings = getattr(request.app.state, "settings", None)
    return {
        "status": "ok",
        "message": HEALTH_MESSAGE,
        "environment": settings.app_env if settings else "unknown",
    }


@router.get("/health/live")
def liveness_probe() -> dict[str, Any]:
    """Liveness probe: the process is up and serving requests."""
    return {"status": "alive"}
