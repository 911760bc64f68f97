"""HTTP surface for order creation and payment callbacks.

`create_app` wires explicit settings and a gateway into a FastAPI app so tests
can substitute a fake gateway without touching the environment.
"""

from time import perf_counter
from uuid import uuid4

from fastapi import Depends, FastAPI, Request
from starlette.requests import ClientDisconnect
from starlette.responses import Response

from paybridge.common.config import Settings
from paybridge.common.errors import BodyReadError, register_error_handlers
from paybridge.common.logging import trace_id_ctx
from paybridge.common.metrics import (
    callback_verifications_total,
    http_request_duration_seconds,
    http_requests_total,
    metrics_response,
)
from paybridge.common.tracing import instrument_app
from paybridge.services.checkout.gateway import OrderGateway
from paybridge.services.checkout.schemas import CallbackResponse, ErrorResponse, OrderResponse
from paybridge.services.checkout.service import CheckoutService

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": (
        "Content-Type, Content-Length, Accept-Encoding, X-CSRF-Token, Authorization"
    ),
}


def get_service(request: Request) -> CheckoutService:
    return request.app.state.service


def create_app(settings: Settings, gateway: OrderGateway) -> FastAPI:
    """Build the checkout app around one settings instance and gateway."""

    app = FastAPI(title="PayBridge Checkout")
    app.state.settings = settings
    app.state.service = CheckoutService(settings, gateway)
    register_error_handlers(app, headers=CORS_HEADERS)
    instrument_app(app)

    @app.middleware("http")
    async def metrics_middleware(request: Request, call_next):
        """Record request count and latency, and bind a trace id."""

        trace_id_ctx.set(request.headers.get("x-correlation-id") or str(uuid4()))
        start = perf_counter()
        route = request.url.path
        method = request.method
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            route_obj = request.scope.get("route")
            if route_obj is not None and getattr(route_obj, "path", None):
                route = route_obj.path
            return response
        finally:
            elapsed = max(0.0, perf_counter() - start)
            http_request_duration_seconds.labels(
                service=settings.service_name,
                route=route,
                method=method,
            ).observe(elapsed)
            http_requests_total.labels(
                service=settings.service_name,
                route=route,
                method=method,
                status_code=str(status_code),
            ).inc()

    # Registered last so it wraps everything, including preflight requests.
    @app.middleware("http")
    async def cors_middleware(request: Request, call_next):
        """Permissive CORS; OPTIONS requests end here with a bare 200."""

        if request.method == "OPTIONS":
            return Response(status_code=200, headers=CORS_HEADERS)
        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response

    @app.post(
        "/create-order",
        response_model=OrderResponse,
        responses={500: {"model": ErrorResponse}},
    )
    def create_order(service: CheckoutService = Depends(get_service)):
        """Create the configured gateway order and hand its id to the browser."""

        return service.create_order()

    @app.post(
        "/payment-callback",
        response_model=CallbackResponse,
        responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    )
    async def payment_callback(request: Request, service: CheckoutService = Depends(get_service)):
        """Verify the form-encoded callback the gateway or browser posts back."""

        try:
            body = await request.body()
        except ClientDisconnect as exc:
            callback_verifications_total.labels(
                service=settings.service_name, outcome="read_error"
            ).inc()
            raise BodyReadError() from exc
        return CallbackResponse(payment_data=service.verify_callback(body))

    @app.get("/metrics")
    def metrics():
        """Prometheus scrape endpoint."""

        return metrics_response()

    @app.get("/health")
    def health():
        """Container health probe endpoint."""

        return {"ok": True}

    return app
