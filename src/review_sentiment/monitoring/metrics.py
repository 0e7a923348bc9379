"""Custom Prometheus metrics for the review sentiment demo.

These metrics are exposed at /metrics endpoint when PROMETHEUS_ENABLED.
Useful alert signals:
- inference_requests_total{outcome="rate_limited"} (token missing or exhausted)
- inference_requests_total{outcome="model_loading"} (cold hosted model)
"""

from prometheus_client import Counter, Gauge, Histogram

# === Inference Metrics ===

inference_requests_total = Counter(
    "inference_requests_total",
    "Total hosted inference requests by model and outcome",
    ["model", "outcome"],
)
"""
Inference request counter.

Labels:
- model: Model path on the hosting service (e.g., siebert/sentiment-roberta-large-english)
- outcome: success, invalid_token, payment_required, rate_limited, model_loading,
  api_error, network_error, parse_error
"""

inference_latency_seconds = Histogram(
    "inference_latency_seconds",
    "Hosted inference round-trip latency in seconds",
    ["model", "success"],
    buckets=[0.25, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0, 60.0],
)

# === Interpretation Metrics ===

interpreted_results_total = Counter(
    "interpreted_results_total",
    "Interpreted results by analysis kind and display category",
    ["kind", "category"],
)
"""
Labels:
- kind: classification, sentiment, nouns
- category: POSITIVE, NEGATIVE, NEUTRAL, HIGH, MEDIUM, LOW, or UNRESOLVED
"""

# === Corpus Metrics ===

corpus_reviews_loaded = Gauge(
    "corpus_reviews_loaded",
    "Number of usable reviews in the loaded corpus",
)
