"""Prometheus metrics for monitoring recommendation mix, confidence and input quality"""

from typing import List
from prometheus_client import Counter, Histogram

# Decision metrics
decision_counter = Counter(
    "purchase_decision_total",
    "Total purchase decisions made",
    ["recommendation", "category"],  # buy | wait | skip
)

confidence_histogram = Histogram(
    "purchase_decision_confidence",
    "Confidence of purchase recommendations",
    ["recommendation"],
    buckets=[10, 20, 30, 40, 50, 60, 70, 80, 90, 100],
)

# Input quality
validation_failure_counter = Counter(
    "purchase_validation_failures_total",
    "Purchase requests rejected by input validation",
    ["field"],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_decision(recommendation: str, category: str, confidence: int) -> None:
    """Record decision metrics for monitoring recommendation mix and confidence"""
    decision_counter.labels(recommendation=recommendation, category=category).inc()
    confidence_histogram.labels(recommendation=recommendation).observe(confidence)


def record_validation_failure(fields: List[str]) -> None:
    """Count each rejected field once per request"""
    for field in sorted(set(fields)):
        validation_failure_counter.labels(field=field).inc()
