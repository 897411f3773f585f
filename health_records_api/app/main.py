"""
Main entrypoint for the Health Records API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``, so it can be served directly::

    uvicorn health_records_api.app.main:app --reload

Read-only operations are exposed as ``GET`` routes and mutating
operations as ``POST``/``PUT``/``DELETE``; the service contract behind
both is the same.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .core.config import settings
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router
from .core.db import get_database_path, init_db
from .services.validation import describe_schema_errors


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Logging is configured first, then the versioned routers are
    mounted under ``/api/v1``.  Request bodies that fail schema
    validation are answered with 400, the same status as service-level
    validation errors.  The database schema is created on
    startup, before the first request is served.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.include_router(v1_router, prefix="/api/v1")

    # Schema failures of request bodies are validation errors too.
    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        message = describe_schema_errors(exc.errors())
        logging.getLogger(__name__).warning("Rejected %s %s: %s", request.method, request.url.path, message)
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": message})

    @app.on_event("startup")
    async def startup_event() -> None:
        init_db()
        logging.getLogger(__name__).info("Ordered store ready at %s", get_database_path())

    return app


app = create_app()
