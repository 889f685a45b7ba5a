"""Prometheus metrics for monitoring receipt volume, awarded points, and lookups"""

from prometheus_client import Counter, Histogram

# Scoring metrics
receipts_processed_counter = Counter(
    "receipts_processed_total",
    "Total receipts scored and stored",
)

points_awarded_histogram = Histogram(
    "receipt_points_awarded",
    "Points awarded per receipt",
    buckets=[0, 10, 25, 50, 75, 100, 150, 250, 500, 1000],
)

# Lookup metrics
lookup_counter = Counter(
    "receipt_lookups_total",
    "Points lookups by identifier",
    ["outcome"],  # found | missing
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_receipt_processed(points: int) -> None:
    """Record a scored receipt and its points"""
    receipts_processed_counter.inc()
    points_awarded_histogram.observe(points)


def record_lookup(found: bool) -> None:
    """Record the outcome of a points lookup"""
    lookup_counter.labels(outcome="found" if found else "missing").inc()
