"""FastAPI gateway that embeds the SMS client."""

from __future__ import annotations

import json
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from sms_client import init_transport, shutdown_transport
from sms_client.logging_config import configure_logging

from .config import get_settings
from .routes import api_router

logger = logging.getLogger("server")


# Register global exception handlers for consistent error responses across the API
def register_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers for 422, HTTP, and 500 errors."""

    @app.exception_handler(RequestValidationError)
    async def _validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.debug("validation error", extra={"errors": exc.errors(), "path": str(request.url)})
        return JSONResponse(
            {"ok": False, "error": "Invalid request", "detail": exc.errors()},
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        )

    @app.exception_handler(HTTPException)
    async def _http_exception_handler(request: Request, exc: HTTPException):
        logger.debug(
            "http error",
            extra={"detail": exc.detail, "status": exc.status_code, "path": str(request.url)},
        )
        detail = exc.detail
        if not isinstance(detail, str):
            detail = json.dumps(detail)
        return JSONResponse({"ok": False, "error": detail}, status_code=exc.status_code)

    @app.exception_handler(Exception)
    async def _unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error", extra={"path": str(request.url)})
        return JSONResponse(
            {"ok": False, "error": "Internal server error"},
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )


_settings = get_settings()

# Configure logging early
configure_logging(_settings.log_level)


@asynccontextmanager
async def lifespan(_: FastAPI):
    """Own the shared HTTP transport for the lifetime of the process."""
    logger.info("Starting SMS gateway", extra={"version": _settings.app_version})
    init_transport()
    if not get_settings().has_twilio_credentials:
        logger.warning("TWILIO_ACCOUNT_SID/TWILIO_AUTH_TOKEN not set; /messages will return 503")
    logger.info("SMS gateway started successfully")
    try:
        yield
    finally:
        logger.info("Shutting down SMS gateway")
        shutdown_transport()
        logger.info("SMS gateway shutdown complete")


# Create FastAPI app
app = FastAPI(
    lifespan=lifespan,
    title=_settings.app_name,
    version=_settings.app_version,
    docs_url=_settings.resolved_docs_url,
    redoc_url=None,
)

# Register exception handlers
register_exception_handlers(app)

# Include aggregated router
app.include_router(api_router)


__all__ = ["app"]
