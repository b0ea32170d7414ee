"""
Global Exception Handlers for the FastAPI Application.

Dashboard query failures already carry a fixed, user-facing message and have
been logged where they happened; they are turned into a plain 500 response.
Anything else is unexpected and is logged here with the request context and
an error ID that clients can quote when reporting the problem.
"""

import traceback

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from acme_dashboard.core.errors import DashboardDataError
from acme_dashboard.core.logging_config import get_logger

logger = get_logger(__name__)


async def dashboard_data_exception_handler(request: Request, exc: DashboardDataError) -> JSONResponse:
    """
    Convert a failed dashboard query into a 500 response with its fixed message.

    Args:
        request: The HTTP request whose query failed
        exc: The dashboard error raised by the query function

    Returns:
        JSONResponse with the failure message
    """
    logger.warning(f"Dashboard query failed in {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(status_code=500, content={"detail": exc.message})


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Global exception handler to log detailed error information.

    Args:
        request: The HTTP request that caused the exception
        exc: The exception that was raised

    Returns:
        JSONResponse with error details and error ID
    """
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
    app.add_exception_handler(DashboardDataError, dashboard_data_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)
    logger.debug("Exception handlers registered successfully")
