"""Shared test fixtures and configuration for all tests.

This conftest.py provides common fixtures used across unit and integration tests.
"""

import json
from pathlib import Path
from typing import Any, Callable

import httpx
import pytest

from review_sentiment.config import Settings


CLASSIFICATION_URL = "https://inference.test/models/siebert/sentiment-roberta-large-english"
GENERATION_URL = "https://inference.test/models/tiiuae/falcon-7b-instruct"


@pytest.fixture
def fixtures_dir() -> Path:
    """Path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def small_corpus_path(fixtures_dir: Path) -> Path:
    """Three data rows, one with blank text."""
    return fixtures_dir / "reviews_small.tsv"


@pytest.fixture
def test_settings(small_corpus_path: Path) -> Settings:
    """Test settings with safe defaults for local testing.
    
    Override specific settings in individual tests as needed:
        def test_something(test_settings):
            test_settings.CORPUS_SOURCE = "/tmp/other.tsv"
    """
    return Settings(
        APP_NAME="Review Sentiment Demo (Test)",
        APP_VERSION="0.1.0",
        DEBUG=True,
        LOG_LEVEL="DEBUG",
        ENVIRONMENT="development",
        CORPUS_SOURCE=str(small_corpus_path),
        CLASSIFICATION_MODEL_URL=CLASSIFICATION_URL,
        GENERATION_MODEL_URL=GENERATION_URL,
        INFERENCE_TIMEOUT=5.0,
        PROMETHEUS_ENABLED=False,  # Disable metrics in tests unless explicitly needed
    )


@pytest.fixture
def write_tsv(tmp_path: Path) -> Callable[[str], Path]:
    """Factory fixture writing raw TSV text to a temp file.
    
    Usage:
        def test_something(write_tsv):
            path = write_tsv("text\\nhello\\n")
    """
    def _write(content: str, name: str = "reviews.tsv") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path
    
    return _write


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""
    
    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: list[httpx.Request] = []
        
        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)
        
        super().__init__(_record)
    
    def last_json(self) -> Any:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def recording_transport() -> Callable[..., RecordingTransport]:
    """Factory fixture building a RecordingTransport.
    
    Usage:
        transport = recording_transport(json_body=[[{"label": "POSITIVE", "score": 0.9}]])
        transport = recording_transport(handler=lambda request: httpx.Response(429))
    """
    def _create(
        json_body: Any = None,
        status_code: int = 200,
        handler: Callable[[httpx.Request], httpx.Response] | None = None,
    ) -> RecordingTransport:
        if handler is None:
            def handler(request: httpx.Request) -> httpx.Response:
                return httpx.Response(status_code, json=json_body)
        return RecordingTransport(handler)
    
    return _create
