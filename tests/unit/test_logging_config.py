"""Unit tests for logging processors."""

import structlog

from review_sentiment.logging_config import (
    REDACTED,
    add_app_context,
    build_processors,
    redact_credentials,
)


class TestRedactCredentials:
    """The bearer token never reaches a renderer."""
    
    def test_masks_token_and_authorization(self):
        event = {"event": "Sending", "token": "hf_secret", "Authorization": "Bearer hf_secret"}
        
        result = redact_credentials(None, "info", event)
        
        assert result["token"] == REDACTED
        assert result["Authorization"] == REDACTED
        assert result["event"] == "Sending"
    
    def test_leaves_missing_token_alone(self):
        result = redact_credentials(None, "info", {"event": "Sending", "token": None})
        
        assert result["token"] is None
    
    def test_other_keys_untouched(self):
        event = {"event": "Inference request successful", "model": "org/name", "latency_ms": 12}
        
        assert redact_credentials(None, "info", dict(event)) == event


def test_app_context_is_added():
    assert add_app_context(None, "info", {"event": "x"})["app"] == "review-sentiment-demo"


class TestBuildProcessors:
    
    def test_production_renders_json(self):
        shared, renderer = build_processors("Production")
        
        assert isinstance(renderer, structlog.processors.JSONRenderer)
        assert structlog.processors.format_exc_info in shared
    
    def test_development_renders_console(self):
        shared, renderer = build_processors("development")
        
        assert isinstance(renderer, structlog.dev.ConsoleRenderer)
        assert redact_credentials in shared
    
    def test_redaction_runs_after_context_merge(self):
        shared, _ = build_processors("development")
        
        assert shared.index(redact_credentials) > shared.index(structlog.contextvars.merge_contextvars)
