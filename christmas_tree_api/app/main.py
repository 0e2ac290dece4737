"""
Main entrypoint for the Christmas Tree message API.

This module assembles the FastAPI application: it sets up logging,
installs the CORS policy, registers the storage error handler and
includes the API router under ``/api``.  The app is instantiated at
import time so it can be served directly, e.g.::

    uvicorn christmas_tree_api.app.main:app --reload
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from .core.config import settings
from .core.db import init_db
from .core.logging_config import setup_logging
from .core.security import install_cors
from .api.router import router as api_router
from .repositories.message_repository import StorageError


logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that everything below can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    install_cors(app)

    app.include_router(api_router, prefix="/api")

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
        logger.error("Storage error on %s %s: %s", request.method, request.url.path, exc, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Storage error"},
        )

    @app.on_event("startup")
    async def startup_event() -> None:
        # Creates the database file if needed and brings the schema up to date.
        init_db()

    return app


app = create_app()
