"""Prometheus metrics for checkout volume, rejections and request latency"""

from prometheus_client import Counter, Histogram

# Checkout metrics
checkout_counter = Counter(
    "tool_rental_checkout_total",
    "Completed tool checkouts",
    ["tool_code"],
)

checkout_rejected_counter = Counter(
    "tool_rental_checkout_rejected_total",
    "Checkouts rejected by validation",
    ["reason"],  # invalid_argument | date_parse
)

charge_days_histogram = Histogram(
    "tool_rental_charge_days",
    "Chargeable days per checkout",
    buckets=[0, 1, 2, 3, 5, 7, 14, 30, 90],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_checkout(tool_code: str, charge_days: int) -> None:
    """Record a completed checkout"""
    checkout_counter.labels(tool_code=tool_code).inc()
    charge_days_histogram.observe(charge_days)


def record_rejection(reason: str) -> None:
    checkout_rejected_counter.labels(reason=reason).inc()
