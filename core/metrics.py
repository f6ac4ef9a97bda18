"""
Prometheus metrics for the activation verification service.

Custom metrics for business logic and performance monitoring.
"""

from prometheus_client import Counter, Histogram

# HTTP metrics
http_requests_total = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status_code"],
)

http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.5, 1.0, 2.0, 5.0, 10.0],
)

# Verification metrics
activation_verifications_total = Counter(
    "activation_verifications_total",
    "Total activation verifications by result",
    ["result", "code"],
)

# License registry metrics
license_registry_request_duration_seconds = Histogram(
    "license_registry_request_duration_seconds",
    "License registry request duration in seconds",
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0],
)

license_registry_errors_total = Counter(
    "license_registry_errors_total",
    "Total license registry errors",
    ["error_type"],
)
