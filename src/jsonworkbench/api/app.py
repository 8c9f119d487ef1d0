"""FastAPI application factory for JSON Workbench."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from jsonworkbench import __version__
from jsonworkbench.api.deps import init_document_store, reset_document_store
from jsonworkbench.api.middleware import RequestBodyLimitMiddleware, RequestTimingMiddleware
from jsonworkbench.api.responses import WorkbenchJSONResponse
from jsonworkbench.api.routers import document, samples, validation, workspace
from jsonworkbench.api.schemas import HealthResponse
from jsonworkbench.service.document_store import DocumentStore
from jsonworkbench.settings import Settings

logger = logging.getLogger("jsonworkbench.api")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Open the DocumentStore alongside the application."""
    settings: Settings = app.state.settings
    init_document_store(
        DocumentStore.from_settings(settings), default_policy=settings.default_policy()
    )
    try:
        yield
    finally:
        reset_document_store()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    if settings is None:
        settings = Settings()

    app = FastAPI(
        title="JSON Workbench",
        description="Validates and formats JSON under a configurable strictness policy.",
        version=__version__,
        lifespan=lifespan,
        default_response_class=WorkbenchJSONResponse,
    )
    app.state.settings = settings

    # Middleware
    app.add_middleware(RequestBodyLimitMiddleware, max_bytes=settings.max_body_bytes)
    app.add_middleware(RequestTimingMiddleware)

    app.include_router(validation.router, tags=["validation"])
    app.include_router(samples.router, prefix="/samples", tags=["samples"])
    app.include_router(document.router, prefix="/document", tags=["document"])
    app.include_router(workspace.router, prefix="/workspace", tags=["workspace"])

    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health() -> HealthResponse:
        return HealthResponse(status="ok", version=__version__)

    return app


def main() -> None:
    """Run the REST API server using settings from environment / .env file."""
    settings = Settings()

    logging.basicConfig(level=settings.log_level.upper())
    logger.info(
        "JSON Workbench API Server v%s starting (host=%s, port=%d)",
        __version__, settings.api_server_host, settings.api_server_port,
    )

    uvicorn.run(
        "jsonworkbench.api.app:create_app",
        factory=True,
        host=settings.api_server_host,
        port=settings.api_server_port,
        log_level=settings.log_level.lower(),
    )
