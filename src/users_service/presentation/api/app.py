"""FastAPI application factory.

Creates and configures the FastAPI application with the users router,
exception handlers and the storage backend lifecycle.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import FastAPI

from users_config.settings import Settings, get_settings
from users_identity.infrastructure.persistence.sqlalchemy import create_schema
from users_service.presentation.api.dependencies import get_engine
from users_service.presentation.api.exception_handlers import (
    setup_exception_handlers,
)
from users_service.presentation.api.routers import users_router


@lru_cache(maxsize=1)
def _configure_logging() -> None:
    """Configure application logging.

    - Console output with timestamps and module names
    - Configurable log level for our modules (from settings)
    - WARNING level for noisy third-party libraries
    """
    settings = get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("users_identity").setLevel(log_level)
    logging.getLogger("users_service").setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    settings: Settings = app.state.settings
    logger.info(
        "Starting %s v%s (storage: %s)...",
        settings.app_name,
        API_VERSION,
        settings.storage_backend,
    )

    if settings.storage_backend != "postgres":
        yield
        logger.info("Shutting down %s...", settings.app_name)
        return

    engine = get_engine()
    logger.info("Initializing database schema...")
    try:
        await create_schema(engine)
    except OSError:
        logger.critical("Could not connect to the database.")
        raise SystemExit(1) from None
    logger.info("Database schema initialized successfully")

    yield

    # Shutdown - dispose the shared engine and its connection pool
    logger.info("Shutting down %s...", settings.app_name)
    await engine.dispose()
    logger.info("Database connections closed")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.

    Returns
    -------
    Configured FastAPI application instance.
    """
    # Configure logging on first app creation (not on module import)
    _configure_logging()

    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="User registration, login and lookup.",
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
    )

    app.state.settings = settings
    setup_exception_handlers(app)

    app.include_router(users_router, tags=["Users"])

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict:
        """Health check endpoint."""
        return {
            "status": "healthy",
            "version": API_VERSION,
        }

    return app


# Application instance for uvicorn
app = create_app()
