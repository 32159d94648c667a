"""
FastAPI application factory.

Builds the container once per app, wires middleware, exception handlers
and routers, and disposes the database engine on shutdown.

Usage:
    uvicorn src.main:create_app --factory
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.core.config import Settings, get_settings
from src.core.container import Container, build_container
from src.presentation.api.middleware import TraceMiddleware
from src.presentation.routers import api_router, system_router
from src.presentation.routers.api.errors import register_exception_handlers


def create_app(
    settings: Settings | None = None,
    *,
    container: Container | None = None,
) -> FastAPI:
    """Create the FastAPI application.

    Args:
        settings: Settings to use; loaded from the environment when omitted.
        container: Prebuilt container (tests inject one with overrides).

    Returns:
        Configured FastAPI application.
    """
    if container is None:
        container = build_container(settings or get_settings())
    settings = container.settings

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        container.logger.info(
            "application_started", environment=settings.environment.value
        )
        yield
        await container.database.close()
        container.logger.info("application_stopped")

    app = FastAPI(
        title="LeadNex Auth API",
        description="Authentication and session lifecycle for the LeadNex platform",
        version="0.1.0",
        docs_url=None if settings.is_production else "/docs",
        redoc_url=None if settings.is_production else "/redoc",
        lifespan=lifespan,
    )
    app.state.container = container

    # Request correlation
    app.add_middleware(TraceMiddleware)

    # RFC 7807 error responses
    register_exception_handlers(app)

    app.include_router(system_router)
    app.include_router(api_router, prefix=settings.api_prefix)

    return app
