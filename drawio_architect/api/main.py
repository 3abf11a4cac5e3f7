"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, drawio_architect.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from drawio_architect import __version__
from drawio_architect.api.deps import get_service_cache
from drawio_architect.api.errors import register_exception_handlers
from drawio_architect.observability.logger import configure_logging
from drawio_architect.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)

from .routers import diagrams_router, health_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Validates configuration and builds the shared orchestrator at startup.
    A missing Gemini credential raises ConfigurationError here, so the
    server refuses to start instead of failing per request.
    """
    cache = get_service_cache()
    configure_logging(cache.settings.log_level)

    logger.info("Pre-warming service cache...")
    _ = cache.orchestrator
    _ = cache.diagram_service
    logger.info("Service cache pre-warmed")

    yield

    cache.clear()
    logger.info("Service cache cleared")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    app = FastAPI(
        title="Draw.io Architect API",
        description="Turns documents and descriptions into Draw.io diagrams with Gemini",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    register_exception_handlers(app)

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(diagrams_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "drawio_architect.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
