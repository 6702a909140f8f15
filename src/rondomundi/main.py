"""FastAPI application factory."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from rondomundi import __version__
from rondomundi.api.middleware import setup_middleware
from rondomundi.core.config import Settings
from rondomundi.core.logging import setup_logging
from rondomundi.services.registry import InMemoryLotteryRegistry, LotteryRegistry

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    registry: LotteryRegistry | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    A fresh in-memory registry is created unless one is supplied; all
    lottery state lives in it for the lifetime of the app.
    """
    if settings is None:
        settings = Settings()
    if registry is None:
        registry = InMemoryLotteryRegistry(
            max_tickets_per_purchase=settings.max_tickets_per_purchase
        )

    if not settings.is_testing:
        setup_logging(level=settings.log_level, log_format=settings.log_format)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Starting Rondo Mundi backend on %s:%d (env=%s)",
            settings.app_host,
            settings.app_port,
            settings.app_env,
        )
        yield
        logger.info("Shutting down Rondo Mundi backend")

    application = FastAPI(
        title="Rondo Mundi API",
        description="Ticket lottery backend",
        version=__version__,
        lifespan=lifespan,
    )

    application.state.settings = settings
    application.state.registry = registry

    setup_middleware(application)
    _register_routes(application)

    return application


def _register_routes(app: FastAPI) -> None:
    from rondomundi.api.routes.health import router as health_router
    from rondomundi.api.routes.lotteries import router as lotteries_router

    app.include_router(health_router, tags=["health"])
    app.include_router(lotteries_router)


def run() -> None:
    """Serve the API with uvicorn using host and port from settings."""
    import uvicorn

    settings = Settings()
    uvicorn.run(create_app(settings), host=settings.app_host, port=settings.app_port)
