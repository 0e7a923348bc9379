"""
Error taxonomy for the review sentiment demo.

Every stage (corpus fetch, TSV parse, inference call, response interpretation)
raises a subclass of ReviewDemoError. The presentation controller catches them
at the top of each user action and turns ``user_message`` into the single line
shown in the error region.
"""

from typing import Any


class ReviewDemoError(Exception):
    """
    Base exception for all demo errors.

    All domain exceptions inherit from this to allow catching any
    expected failure with a single except clause.
    """
    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    @property
    def user_message(self) -> str:
        """Text shown to the user in the error region."""
        return self.message


class FetchError(ReviewDemoError):
    """
    Raised when the corpus file or the inference API cannot be reached,
    or the corpus fetch returns a non-2xx status.
    """
    pass


class ParseError(ReviewDemoError):
    """
    Raised for malformed delimited text or a malformed JSON response body.

    ``details["parse_error"]`` holds the first parser error message.
    """
    pass


class EmptyCorpusError(ReviewDemoError):
    """Raised when the corpus holds no usable review rows."""
    pass


class MalformedResponseError(ReviewDemoError):
    """
    Raised when the response JSON is well-formed but not in the shape the
    interpreter expects (e.g. missing the nested label/score array).
    """
    pass


class ApiError(ReviewDemoError):
    """
    Raised for any non-success status from the inference endpoint, or for an
    explicit ``error`` field in an otherwise successful JSON body.
    """
    def __init__(
        self,
        message: str,
        status: int | None = None,
        status_text: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, details)
        self.status = status
        self.status_text = status_text

    @classmethod
    def from_status(cls, status: int, status_text: str) -> "ApiError":
        """Build the catch-all error for an unmapped HTTP status."""
        return cls(
            f"API request failed: {status} {status_text}".rstrip(),
            status=status,
            status_text=status_text,
        )


class InvalidTokenError(ApiError):
    """HTTP 401: the supplied bearer token was rejected."""
    def __init__(self, details: dict[str, Any] | None = None):
        super().__init__("Invalid API token", status=401, status_text="Unauthorized", details=details)


class PaymentRequiredError(ApiError):
    """HTTP 402: the account behind the token has no remaining credits."""
    def __init__(self, details: dict[str, Any] | None = None):
        super().__init__(
            "Payment required - please check your API token",
            status=402,
            status_text="Payment Required",
            details=details,
        )


class RateLimitError(ApiError):
    """
    HTTP 429: too many requests.

    Unauthenticated access is heavily rate-limited; the user may retry later
    or supply a token. No automatic retry is performed.
    """
    def __init__(self, details: dict[str, Any] | None = None):
        super().__init__(
            "Rate limit exceeded. Please try again later or use an API token",
            status=429,
            status_text="Too Many Requests",
            details=details,
        )


class ModelLoadingError(ApiError):
    """
    HTTP 503: the hosted model is cold-starting.

    ``details["estimated_time"]`` carries the server's estimate when present.
    """
    def __init__(self, details: dict[str, Any] | None = None):
        super().__init__(
            "Model is loading, please try again in a few seconds",
            status=503,
            status_text="Service Unavailable",
            details=details,
        )
