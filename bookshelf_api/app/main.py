"""
Main entrypoint for the Bookshelf API.

This module assembles the FastAPI application, sets up logging,
error handlers and the book routes.  The ``create_app`` function
builds and configures the app, which is then instantiated at module
import time as ``app``.  Run it with uvicorn, e.g.::

    uvicorn bookshelf_api.app.main:app --port 8081

or through ``run.py`` at the project root.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.responses import IndentedJSONResponse
from .api.router import router
from .core import db
from .core.config import settings
from .core.logging_config import log_requests, setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the shared database connection for the lifetime of the app."""
    try:
        db.connect()
        if settings.create_schema:
            db.init_schema()
    except Exception:
        logger.exception("Database connection failed")
        db.close()
        raise
    try:
        yield
    finally:
        db.close()


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that the lifespan and handlers below can log.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
        default_response_class=IndentedJSONResponse,
    )

    app.middleware("http")(log_requests)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        """Render HTTP errors as ``{"message": ...}``."""
        return IndentedJSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        """Reject a body that does not bind to the schema with an empty 400."""
        logger.warning("Invalid request body on %s: %s", request.url.path, exc.errors())
        return Response(status_code=status.HTTP_400_BAD_REQUEST)

    app.include_router(router)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
