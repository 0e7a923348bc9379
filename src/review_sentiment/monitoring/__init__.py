"""Monitoring and metrics instrumentation for the review sentiment demo."""

from review_sentiment.monitoring.metrics import (
    corpus_reviews_loaded,
    inference_latency_seconds,
    inference_requests_total,
    interpreted_results_total,
)

__all__ = [
    "inference_requests_total",
    "inference_latency_seconds",
    "interpreted_results_total",
    "corpus_reviews_loaded",
]
