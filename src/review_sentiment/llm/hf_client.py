"""
Hugging Face Inference API client.

Communicates with hosted models using httpx AsyncClient. Supports:
- Optional bearer-token authentication (unauthenticated access is rate-limited)
- Mapping of HTTP status codes onto the demo's error taxonomy
- Promotion of an explicit ``error`` field in a 2xx body to ApiError

There is no retry loop: a cold model (503) or a rate limit (429)
is reported to the user, who repeats the action manually.
"""

import json
import time
from typing import Any, Optional
from urllib.parse import urlparse

import httpx
import structlog

from review_sentiment.exceptions import (
    ApiError,
    FetchError,
    InvalidTokenError,
    ModelLoadingError,
    ParseError,
    PaymentRequiredError,
    RateLimitError,
)
from review_sentiment.monitoring.metrics import inference_latency_seconds, inference_requests_total


logger = structlog.get_logger(__name__)

STATUS_ERRORS = {
    401: (InvalidTokenError, "invalid_token"),
    402: (PaymentRequiredError, "payment_required"),
    429: (RateLimitError, "rate_limited"),
    503: (ModelLoadingError, "model_loading"),
}


def model_name_from_url(model_url: str) -> str:
    """'https://host/models/org/name' -> 'org/name' (metric label)."""
    path = urlparse(model_url).path
    marker = "/models/"
    if marker in path:
        return path.split(marker, 1)[1].strip("/")
    return path.strip("/") or model_url


def build_headers(token: Optional[str]) -> dict[str, str]:
    """Request headers; Authorization only for a non-blank token."""
    headers = {"Content-Type": "application/json"}
    if token and token.strip():
        headers["Authorization"] = f"Bearer {token.strip()}"
    return headers


class HuggingFaceInferenceClient:
    """
    Async client for hosted inference endpoints.

    One persistent AsyncClient is created lazily and reused for every request;
    call ``close()`` on shutdown.
    """

    def __init__(
        self,
        timeout: float = 60.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize inference client.

        Args:
            timeout: Transport timeout in seconds
            transport: Custom httpx transport (tests pass httpx.MockTransport)
        """
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

        logger.info("Inference client initialized", timeout=timeout)

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the async HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                transport=self._transport,
                follow_redirects=True,
            )
            logger.debug("Created new httpx AsyncClient")
        return self._client

    async def infer(self, model_url: str, inputs: str, token: Optional[str] = None) -> Any:
        """
        POST ``{"inputs": inputs}`` to a hosted model and return the decoded body.

        Args:
            model_url: Full model endpoint URL
            inputs: Raw review text or rendered prompt
            token: Optional bearer token (never logged)

        Returns:
            Decoded JSON body (shape depends on the model)

        Raises:
            InvalidTokenError: 401
            PaymentRequiredError: 402
            RateLimitError: 429
            ModelLoadingError: 503
            ApiError: Any other non-2xx status, or ``error`` field in the body
            FetchError: Endpoint unreachable or timed out
            ParseError: Body is not valid JSON
        """
        model = model_name_from_url(model_url)
        start_time = time.perf_counter()

        logger.info(
            "Sending inference request",
            model=model,
            inputs_length=len(inputs),
            authenticated="Authorization" in build_headers(token),
        )

        try:
            client = await self._get_client()
            response = await client.post(
                model_url,
                json={"inputs": inputs},
                headers=build_headers(token),
            )
        except httpx.TimeoutException as e:
            self._record(model, "network_error", start_time)
            raise FetchError(
                f"Inference request timed out after {self.timeout}s",
                details={"model": model, "error_type": type(e).__name__},
            ) from e
        except httpx.RequestError as e:
            self._record(model, "network_error", start_time)
            raise FetchError(
                f"Could not reach the inference API: {e}",
                details={"model": model, "error_type": type(e).__name__},
            ) from e

        if not response.is_success:
            raise self._status_error(model, response, start_time)

        try:
            data = response.json()
        except ValueError as e:
            # JSONDecodeError, or UnicodeDecodeError for a body that is not UTF-8
            self._record(model, "parse_error", start_time)
            if isinstance(e, json.JSONDecodeError):
                reason = e.msg
                parse_error = f"{e.msg} at line {e.lineno} col {e.colno}"
            else:
                reason = parse_error = str(e)
            raise ParseError(
                f"Failed to parse API response as JSON: {reason}",
                details={"model": model, "parse_error": parse_error},
            ) from e

        if isinstance(data, dict) and data.get("error"):
            self._record(model, "api_error", start_time)
            raise ApiError(
                str(data["error"]),
                status=response.status_code,
                status_text=response.reason_phrase,
                details={"model": model},
            )

        latency_ms = self._record(model, "success", start_time)
        logger.info("Inference request successful", model=model, latency_ms=latency_ms)
        return data

    def _status_error(self, model: str, response: httpx.Response, start_time: float) -> ApiError:
        """Map a non-2xx response onto the error taxonomy."""
        status_code = response.status_code
        details: dict[str, Any] = {"model": model}
        body = _safe_json(response)
        if isinstance(body, dict):
            if "error" in body:
                details["error"] = body["error"]
            if "estimated_time" in body:
                details["estimated_time"] = body["estimated_time"]

        logger.warning(
            "Inference API returned error status",
            model=model,
            status_code=status_code,
            error=details.get("error"),
        )

        if status_code in STATUS_ERRORS:
            error_class, outcome = STATUS_ERRORS[status_code]
            self._record(model, outcome, start_time)
            return error_class(details=details)

        self._record(model, "api_error", start_time)
        error = ApiError.from_status(status_code, response.reason_phrase)
        error.details.update(details)
        return error

    @staticmethod
    def _record(model: str, outcome: str, start_time: float) -> int:
        elapsed = time.perf_counter() - start_time
        inference_requests_total.labels(model=model, outcome=outcome).inc()
        inference_latency_seconds.labels(
            model=model, success=str(outcome == "success").lower()
        ).observe(elapsed)
        return int(elapsed * 1000)

    async def close(self):
        """Close the HTTP client connection."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            logger.debug("Closed inference client connection")

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(timeout={self.timeout}s)"


def _safe_json(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None
