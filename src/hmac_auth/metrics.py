"""Метрики Prometheus (локальный registry)."""

from prometheus_client import CollectorRegistry, Counter, Histogram

registry = CollectorRegistry()

requests_total = Counter(
    "requests_total",
    "Total number of requests",
    ["endpoint", "status"],
    registry=registry,
)

request_latency_seconds = Histogram(
    "request_latency_seconds",
    "Request latency in seconds",
    ["endpoint"],
    registry=registry,
)

hmac_verifications_total = Counter(
    "hmac_verifications_total",
    "Total HMAC verifications",
    ["result"],
    registry=registry,
)
