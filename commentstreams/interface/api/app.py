"""FastAPI application."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from commentstreams.interface.api.errors import register_error_handlers
from commentstreams.interface.api.routes import (
    comments,
    health,
    pages,
    permissions,
    tokens,
)
from commentstreams.util.di.container import create_container, setup_di
from commentstreams.util.observability import (
    instrument_fastapi,
    instrument_httpx,
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    yield
    # Waits for in-flight reply notifications
    await app.state.dishka_container.close()


def create_app() -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    """
    # Outbound reply notifications go through httpx
    instrument_httpx()

    app_instance = FastAPI(
        title="Comment Streams API",
        description="Threaded discussions attached to wiki pages",
        version="0.1.0",
        lifespan=lifespan,
    )

    instrument_fastapi(app_instance)

    # Settings are loaded from environment automatically
    container = create_container()
    setup_di(app_instance, container)

    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(tokens.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(pages.router)
    app_instance.include_router(permissions.router)

    return app_instance
