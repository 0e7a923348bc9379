"""Unit tests for request tracing context."""

from starlette.requests import Request

from review_sentiment.api.middleware import request_context


def make_request(path: str, method: str = "POST", headers: dict[str, str] | None = None) -> Request:
    return Request(
        {
            "type": "http",
            "scheme": "http",
            "server": ("testserver", 80),
            "method": method,
            "path": path,
            "query_string": b"",
            "headers": [
                (name.lower().encode(), value.encode()) for name, value in (headers or {}).items()
            ],
        }
    )


class TestRequestContext:
    
    def test_reuses_incoming_request_id(self):
        context = request_context(make_request("/api/review/random", headers={"X-Request-ID": "abc-123"}))
        
        assert context["request_id"] == "abc-123"
        assert context["method"] == "POST"
        assert context["path"] == "/api/review/random"
    
    def test_generates_request_id(self):
        first = request_context(make_request("/health", method="GET"))
        second = request_context(make_request("/health", method="GET"))
        
        assert first["request_id"]
        assert first["request_id"] != second["request_id"]
    
    def test_analysis_kind_from_path(self):
        context = request_context(make_request("/api/analyze/nouns"))
        
        assert context["analysis"] == "nouns"
    
    def test_no_analysis_kind_elsewhere(self):
        assert "analysis" not in request_context(make_request("/api/state", method="GET"))
