"""FastAPI application for ReSlides.

This module initializes the FastAPI app with CORS middleware and routes.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.routes import export_router, script_router
from src.config.settings import get_settings
from src.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup/shutdown events."""
    settings = get_settings()
    setup_logging(settings.logging.level, settings.logging.format)
    logger.info(f"Starting ReSlides API (environment: {settings.environment})")
    yield
    logger.info("Shutting down ReSlides API")


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="ReSlides API",
        description="Turn plain-text slide scripts into HTML presentations, chart pages and PPTX files",
        version=VERSION,
        lifespan=lifespan,
    )

    if settings.api.cors_enabled and settings.api.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.api.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.include_router(script_router)
    app.include_router(export_router)

    @app.get("/api/health")
    async def health():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "environment": settings.environment,
            "version": VERSION,
        }

    return app


app = create_app()
