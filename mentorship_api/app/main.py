"""
Main entrypoint for the Mentorship API.

This module assembles the FastAPI application, sets up logging,
registers the JSON error handlers and includes the API router.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn mentorship_api.app.main:app --reload

The database connection is opened and migrated when the application
starts and closed when it shuts down.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from .api.router import router as api_router
from .core.config import settings
from .core.db import close_connection, init_db, open_connection
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    open_connection()
    try:
        init_db()
        yield
    finally:
        close_connection()


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that everything below can log.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    register_exception_handlers(app)
    app.include_router(api_router, prefix="/api")
    return app


app = create_app()
