"""FastAPI application."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Optional

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from materia.config import Settings
from materia.interface.api.error import ErrorHandlerMiddleware
from materia.interface.api.openapi import install_openapi
from materia.interface.api.routes import (
    characteristics,
    files,
    health,
    logs,
    materials,
    roles,
    tags,
    users,
)
from materia.util.di.container import create_container, setup_di
from materia.util.observability import instrument_fastapi


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Close the container on shutdown.

    Closing the root container disposes the engine and waits for pending
    history snapshots.
    """
    yield
    await app.state.dishka_container.close()


def create_app(container: Optional[AsyncContainer] = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use, a production one is built if omitted
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Materia API",
        description="Back-office API for managing materials, their tags and custom characteristics",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    # Setup dependency injection
    setup_di(app_instance, container or create_container())

    # Wraps the DI middleware: the request scope is closed,
    # and its transaction rolled back, before an error becomes a response
    app_instance.add_middleware(ErrorHandlerMiddleware)

    # Outermost, so error responses carry CORS headers too
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
        max_age=600,
    )

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(characteristics.router)
    app_instance.include_router(tags.router)
    app_instance.include_router(materials.router)
    app_instance.include_router(roles.router)
    app_instance.include_router(logs.router)
    app_instance.include_router(users.router)
    app_instance.include_router(files.router)

    # Request bodies are documented by hand, see materia.interface.api.openapi
    install_openapi(app_instance)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
