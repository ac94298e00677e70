"""FastAPI application configuration module."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Internal imports
from ..config.environment import IS_PRODUCTION_ENVIRONMENT
from ..config.cors import CORS_CONFIG
from ..utils.logging_config import setup_logging
from ..db import Database
from .. import __version__
from .routes import (
    colleges,
    events,
    students,
    registrations,
    reports,
    health
)

# Set up logging
setup_logging()
logger = logging.getLogger(__name__)


def create_application(database: Optional[Database] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    When no ``database`` is given, one is opened from the environment at
    startup and disposed at shutdown. A database passed in stays owned by
    the caller.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Open the database on startup and close it on shutdown."""
        owned = database is None
        try:
            app.state.database = Database() if owned else database
            app.state.database.ensure_tables_exist()
            logger.info("Database initialized successfully")
        except Exception as e:
            logger.error(f"Startup failed: {e}")
            raise
        yield
        if owned:
            app.state.database.dispose()
        logger.info("Application shut down")

    app = FastAPI(
        title="Campus Events API",
        description="API for managing campus events, registrations, attendance and feedback",
        version=__version__,
        docs_url=None if IS_PRODUCTION_ENVIRONMENT else '/api/docs',
        redoc_url=None if IS_PRODUCTION_ENVIRONMENT else '/api/redoc',
        lifespan=lifespan
    )

    # Configure CORS
    app.add_middleware(CORSMiddleware, **CORS_CONFIG)

    # Include health check router without prefix
    app.include_router(health.router)

    # Include routers with prefix
    app.include_router(colleges.router, prefix="/api")
    app.include_router(events.router, prefix="/api")
    app.include_router(students.router, prefix="/api")
    app.include_router(registrations.router, prefix="/api")
    app.include_router(reports.router, prefix="/api")

    return app


# Create the application instance
app = create_application()
