"""
FastAPI exception handlers for structured error responses.

Domain errors are turned into view state by the presentation controller, so
only failures that escape a route end up here.
"""

from datetime import datetime, timezone

import structlog
from fastapi import Request, status
from fastapi.responses import JSONResponse

from review_sentiment.exceptions import ReviewDemoError

logger = structlog.get_logger(__name__)


async def demo_error_handler(request: Request, exc: ReviewDemoError) -> JSONResponse:
    """
    Handle a domain error raised outside the controller.
    
    Maps to 502 Bad Gateway (corpus host or inference API misbehaved).
    """
    logger.warning(
        "Unhandled demo error",
        error_type=type(exc).__name__,
        details=exc.details,
    )
    
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={
            "error": type(exc).__name__,
            "message": exc.user_message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
    )


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle unexpected errors.
    
    Maps to 500 Internal Server Error.
    """
    logger.exception("Unexpected error", error_type=type(exc).__name__)
    
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "internal_error",
            "message": "An unexpected error occurred",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
    )


# Exception handler mapping for FastAPI app.add_exception_handler()
EXCEPTION_HANDLERS = {
    ReviewDemoError: demo_error_handler,
    Exception: generic_error_handler,
}
