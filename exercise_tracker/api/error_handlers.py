"""Error Handlers — map exceptions raised by routes to JSON error bodies.

Invariants:
    - ExerciseTrackerError → its own status code and to_response() envelope
    - Anything else → 500 with a fixed message; the exception only reaches the logs
    - Every error body carries a top-level "message"

Design Decisions:
    - No RequestValidationError handler: routes take raw strings and read_payload dicts,
      so FastAPI request validation has nothing to reject
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from exercise_tracker.core.errors import (
    ErrorCategory, ErrorSeverity, ExerciseTrackerError,
)

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_BODY = {
    "message": "An unexpected error occurred",
    "error": {
        "code": "INTERNAL_ERROR",
        "category": ErrorCategory.INTERNAL.value,
        "severity": ErrorSeverity.CRITICAL.value,
    },
}


async def handle_tracker_error(
    request: Request, exc: ExerciseTrackerError,
) -> JSONResponse:
    # 4xx are client-side outcomes (missing user, bad JSON), not service faults
    level = logging.ERROR if exc.http_status >= 500 else logging.INFO
    logger.log(
        level,
        f"{type(exc).__name__} on {request.method} {request.url.path}: {exc.message}",
        extra={"error_code": exc.code, "path": request.url.path},
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc}",
        exc_info=True,
        extra={"path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=UNEXPECTED_ERROR_BODY,
    )


def register_error_handlers(app: FastAPI) -> None:
    """Attach the domain and catch-all handlers to the app."""
    app.add_exception_handler(ExerciseTrackerError, handle_tracker_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
