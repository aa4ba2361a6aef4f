"""
Exception Handlers for the FastAPI Application.

Domain errors raised by services are translated to their HTTP status with a
``{"detail": ...}`` body. Anything else is caught by the global handler,
which logs the full context and returns a 500 with an error ID that clients
can quote when reporting issues.
"""

import traceback

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from unthink.core.errors import ExternalServiceError, UnthinkError
from unthink.core.logging_config import get_logger
from unthink.core.monitoring import log_error

logger = get_logger(__name__)


async def domain_exception_handler(request: Request, exc: UnthinkError) -> JSONResponse:
    """
    Map a domain error to its HTTP status.

    Args:
        request: The HTTP request that caused the exception
        exc: The domain error raised by a service

    Returns:
        JSONResponse with the error message as ``detail``
    """
    if isinstance(exc, ExternalServiceError):
        logger.warning(
            f"External service failure in {request.method} {request.url.path}: {exc.message}",
            extra={"status_code": exc.status_code, "details": exc.details},
        )
        log_error("ExternalServiceError", exc.message, {"path": request.url.path, "status_code": exc.status_code})
    else:
        logger.debug(f"{type(exc).__name__} in {request.method} {request.url.path}: {exc.message}")

    return JSONResponse(status_code=exc.http_status, content={"detail": exc.message})


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Global exception handler to log detailed error information.

    This handler is called for any unhandled exception in the application.

    Args:
        request: The HTTP request that caused the exception
        exc: The exception that was raised

    Returns:
        JSONResponse with error details and error ID
    """
    # Generate unique error ID for tracking
    error_id = id(exc)

    logger.error(
        f"Unhandled exception [{error_id}] in {request.method} {request.url.path}: {str(exc)}",
        exc_info=True,
        extra={
            "error_id": error_id,
            "method": request.method,
            "path": request.url.path,
            "query_params": dict(request.query_params),
            "client": request.client.host if request.client else "unknown",
            "error_type": type(exc).__name__,
            "traceback": traceback.format_exc(),
        },
    )
    log_error(type(exc).__name__, str(exc), {"error_id": error_id, "path": request.url.path})

    return JSONResponse(
        status_code=500,
        content={
            "detail": "Internal server error",
            "error_id": error_id,
            "error_type": type(exc).__name__,
        },
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI application.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(UnthinkError, domain_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)
    logger.debug("Exception handlers registered successfully")
