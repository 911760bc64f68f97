"""Prometheus metric definitions for the checkout service."""

from prometheus_client import Counter, Histogram, generate_latest
from starlette.responses import Response


orders_created_total = Counter("orders_created_total", "Gateway orders created", ["service"])
order_failures_total = Counter("order_failures_total", "Gateway order creation failures", ["service"])
gateway_latency_seconds = Histogram(
    "gateway_latency_seconds",
    "Outbound gateway order call latency seconds",
    ["service"],
)
callback_verifications_total = Counter(
    "callback_verifications_total",
    "Payment callbacks by verification outcome",
    ["service", "outcome"],
)
http_requests_total = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["service", "route", "method", "status_code"],
)
http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration seconds",
    ["service", "route", "method"],
)


def metrics_response() -> Response:
    """Expose all registered Prometheus metrics in text format."""

    return Response(content=generate_latest(), media_type="text/plain")
