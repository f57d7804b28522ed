"""Error Handlers — global exception handlers for the server.

Invariants:
    - ToolkitError → plain-text body with the error's public message and HTTP status
    - Exception (catch-all) → plain-text 500, never leaks internal details
    - Every handled error is logged with its code and the request path

Design Decisions:
    - Two-layer handler: domain (ToolkitError), catch-all (Exception)
    - Plain text over a JSON envelope: error bodies match the server's text/plain error path
"""

import logging

from fastapi import FastAPI, Request, status

from toolkit_server.api.responses import text_response
from toolkit_server.core.errors import ErrorSeverity, ToolkitError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_BODY = "Internal Server Error"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_toolkit_error_handler(app)
    _register_generic_error_handler(app)


def _register_toolkit_error_handler(app: FastAPI) -> None:
    """Register server domain/infrastructure error handler."""

    @app.exception_handler(ToolkitError)
    async def toolkit_error_handler(request: Request, exc: ToolkitError):
        level = logging.WARNING if exc.severity == ErrorSeverity.WARNING else logging.ERROR
        logger.log(
            level,
            f"{exc.code}: {exc.message}",
            extra={
                **exc.log_extra(),
                "method": request.method,
                "path": request.url.path,
                "status_code": exc.http_status,
            },
        )
        return text_response(exc.public_message, status_code=exc.http_status)


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"method": request.method, "path": request.url.path},
        )
        return text_response(
            INTERNAL_ERROR_BODY,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
