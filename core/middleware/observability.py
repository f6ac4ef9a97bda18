"""
Observability middleware.

This middleware adds structured request logging, HTTP metrics
and correlation headers.
"""

import logging
import re
import time
import uuid
from typing import Callable

from django.http import HttpRequest, HttpResponse
from opentelemetry import trace
from opentelemetry.trace import format_span_id, format_trace_id

from core.metrics import http_request_duration_seconds, http_requests_total

logger = logging.getLogger(__name__)

_NUMERIC_SEGMENT = re.compile(r"/\d+")


class ObservabilityMiddleware:
    """
    Middleware for request observability.

    This middleware:
    1. Generates correlation IDs for request tracing
    2. Logs request/response information
    3. Records request count and duration metrics
    4. Adds correlation ID to response headers
    """

    def __init__(self, get_response: Callable):
        """Initialize middleware."""
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        """
        Process request and add observability.

        Args:
            request: HTTP request

        Returns:
            HTTP response with observability headers
        """
        correlation_id = request.headers.get("X-Correlation-ID") or str(uuid.uuid4())
        request.correlation_id = correlation_id  # type: ignore

        log_extra = {
            "correlation_id": correlation_id,
            "method": request.method,
            "path": request.path,
            "remote_addr": request.META.get("REMOTE_ADDR"),
        }
        span_context = trace.get_current_span().get_span_context()
        if span_context.is_valid:
            log_extra["trace_id"] = format_trace_id(span_context.trace_id)
            log_extra["span_id"] = format_span_id(span_context.span_id)
            request.trace_id = log_extra["trace_id"]  # type: ignore

        endpoint = _NUMERIC_SEGMENT.sub("/{id}", request.path)
        start_time = time.time()
        logger.info("Request started", extra=log_extra)

        try:
            response = self.get_response(request)
        except Exception as e:
            duration = time.time() - start_time
            self._record(request.method, endpoint, 500, duration)
            logger.error(
                "Request failed",
                extra={
                    **log_extra,
                    "error": str(e),
                    "error_type": type(e).__name__,
                    "duration_ms": round(duration * 1000, 2),
                },
                exc_info=True,
            )
            raise

        duration = time.time() - start_time
        self._record(request.method, endpoint, response.status_code, duration)

        log_extra.update(
            {
                "status_code": response.status_code,
                "duration_ms": round(duration * 1000, 2),
            }
        )
        if response.status_code >= 500:
            logger.error("Request completed with server error", extra=log_extra)
        elif response.status_code >= 400:
            logger.warning("Request completed with client error", extra=log_extra)
        else:
            logger.info("Request completed successfully", extra=log_extra)

        response["X-Correlation-ID"] = correlation_id
        response["X-Request-Duration"] = f"{duration:.3f}"
        if "trace_id" in log_extra:
            response["X-Trace-ID"] = log_extra["trace_id"]
        return response

    def _record(self, method: str, endpoint: str, status_code: int, duration: float) -> None:
        """Record HTTP metrics."""
        http_requests_total.labels(
            method=method, endpoint=endpoint, status_code=status_code
        ).inc()
        http_request_duration_seconds.labels(method=method, endpoint=endpoint).observe(duration)
