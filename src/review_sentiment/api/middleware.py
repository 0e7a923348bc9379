"""FastAPI middleware for request tracing and logging."""

import time
import uuid
from typing import Callable

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = structlog.get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

# Polled by the page and by scrapers; completion is logged at debug only
POLLING_PATHS = frozenset({"/health", "/metrics", "/api/state"})

ANALYZE_PREFIX = "/api/analyze/"


def request_context(request: Request) -> dict[str, str]:
    """
    Structlog context for one request.

    Reuses an incoming X-Request-ID so a page action can be followed across
    proxies; otherwise a UUID4 is generated. Analysis requests also carry the
    analysis kind taken from the path.
    """
    context = {
        "request_id": request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4()),
        "method": request.method,
        "path": request.url.path,
    }
    if request.url.path.startswith(ANALYZE_PREFIX):
        context["analysis"] = request.url.path[len(ANALYZE_PREFIX):]
    return context


class RequestTracingMiddleware(BaseHTTPMiddleware):
    """Bind request context to structlog and echo the request id.

    Request bodies are never logged (they may carry the bearer token).
    """

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Response]
    ) -> Response:
        context = request_context(request)
        structlog.contextvars.bind_contextvars(**context)

        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error(
                "Request failed",
                exc_info=exc,
                duration_ms=_elapsed_ms(start_time),
            )
            raise
        else:
            log = logger.debug if request.url.path in POLLING_PATHS else logger.info
            log(
                "Request completed",
                status_code=response.status_code,
                duration_ms=_elapsed_ms(start_time),
            )
            response.headers[REQUEST_ID_HEADER] = context["request_id"]
            return response
        finally:
            structlog.contextvars.clear_contextvars()


def _elapsed_ms(start_time: float) -> float:
    return round((time.perf_counter() - start_time) * 1000, 2)
