"""
Prometheus metrics.

Fallback responses go out with status 200, so ``sage_errors_total`` is
where malformed requests and pipeline failures show up.
"""

from __future__ import annotations

from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

REQUEST_COUNT = Counter(
    "sage_requests_total",
    "Total HTTP requests",
    ["endpoint", "method", "status"],
)

REQUEST_DURATION = Histogram(
    "sage_request_duration_ms",
    "Request latency in milliseconds",
    ["endpoint"],
    buckets=(1, 2.5, 5, 10, 25, 50, 100, 250, 500, 1000),
)

ERROR_COUNT = Counter(
    "sage_errors_total",
    "Requests answered with the fallback response",
    ["error_type"],  # invalid_request, internal_error
)

INTENT_COUNT = Counter(
    "sage_intent_total",
    "Chat queries by detected intent",
    ["intent"],
)


def record_request(endpoint: str, method: str, status: int) -> None:
    """Increment the request counter."""
    REQUEST_COUNT.labels(endpoint=endpoint, method=method, status=str(status)).inc()


def observe_duration(endpoint: str, duration_ms: float) -> None:
    """Record request duration."""
    REQUEST_DURATION.labels(endpoint=endpoint).observe(duration_ms)


def record_error(error_type: str) -> None:
    """Count a request that was answered with the fallback body."""
    ERROR_COUNT.labels(error_type=error_type).inc()


def record_intent(intent: str) -> None:
    INTENT_COUNT.labels(intent=intent).inc()


def metrics_response() -> tuple[bytes, str]:
    """Return (body, content_type) for the /metrics endpoint."""
    return generate_latest(), CONTENT_TYPE_LATEST
