"""Shared response schemas."""

from __future__ import annotations

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Error body produced by ``HTTPException``."""

    detail: str


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    message: str
    environment: str
