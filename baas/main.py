# baas/main.py
from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError

from baas.api.router import api_router
from baas.core.config import Settings, get_settings
from baas.core.errors import StartupError, register_exception_handlers
from baas.core.logger import setup_logging
from baas.core.middleware import install_middleware
from baas.db.session import Database


# ==============================================================================
# 1. Startup helpers
# ==============================================================================
def open_database(settings: Settings) -> Database:
    """Connect to the admin database and create the tables; StartupError on failure."""
    if not settings.DATABASE_URL:
        logger.critical("DATABASE_URL environment variable is required")
        raise StartupError("DATABASE_URL environment variable is required")

    try:
        database = Database(settings.DATABASE_URL, echo=settings.SQL_ECHO)
        database.create_tables()
    except SQLAlchemyError as e:
        logger.critical("Failed to connect to or migrate the database: {}", e)
        raise StartupError(f"Failed to connect to or migrate the database: {e}") from e

    logger.info("Database connected and migrated successfully")
    return database


# ==============================================================================
# 2. Application factory
# ==============================================================================
def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # [Startup]
        log_file = setup_logging(settings)
        logger.info("{} starting (mode: {}, log: {})", settings.SERVICE_NAME, settings.APP_MODE, log_file)
        app.state.db = open_database(settings)
        logger.info(
            "Project APIs available at http://localhost:{}{}/projects",
            settings.PORT,
            settings.API_PREFIX,
        )

        yield

        # [Shutdown]
        app.state.db.dispose()
        logger.info("{} shutting down", settings.SERVICE_NAME)

    app = FastAPI(
        title=settings.SERVICE_NAME,
        version=settings.SERVICE_VERSION,
        docs_url=None if settings.is_release else "/docs",
        redoc_url=None if settings.is_release else "/redoc",
        openapi_url=None if settings.is_release else f"{settings.API_PREFIX}/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings

    install_middleware(app)
    register_exception_handlers(app)
    app.include_router(api_router, prefix=settings.API_PREFIX)

    return app


app = create_app()
