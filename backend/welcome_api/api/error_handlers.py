"""Error Handlers — fallback handler for unhandled exceptions.

Invariants:
    - Any exception escaping a route → 500 {error, message}
    - The fault and its traceback are logged at ERROR level
    - HTTPException (e.g. 404 for unknown routes) keeps the framework default

Design Decisions:
    - Registered for Exception only: Starlette routes HTTPException to its own
      handler first, so framework 404/405 bodies are untouched
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from welcome_api.schemas.status import ErrorResponse

logger = logging.getLogger(__name__)

GENERIC_ERROR = "Something went wrong!"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_generic_error_handler(app)


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — logs the fault and returns its message."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=exc,
            extra={
                "path": request.url.path,
                "method": request.method,
                "error_type": type(exc).__name__,
            },
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=build_error_response(exc),
        )


def build_error_response(exc: Exception) -> dict:
    """Build the 500 body for an unhandled exception."""
    return ErrorResponse(error=GENERIC_ERROR, message=str(exc)).model_dump()
