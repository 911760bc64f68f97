"""Checkout logic: gateway order creation and payment callback verification."""

import re
from urllib.parse import parse_qsl

from paybridge.common.config import Settings
from paybridge.common.errors import (
    CallbackParseError,
    GatewayError,
    MissingFieldError,
    SignatureMismatchError,
)
from paybridge.common.logging import logger, order_id_ctx, payment_id_ctx
from paybridge.common.metrics import (
    callback_verifications_total,
    gateway_latency_seconds,
    order_failures_total,
    orders_created_total,
)
from paybridge.common.signature import verify_signature
from paybridge.services.checkout.gateway import OrderGateway
from paybridge.services.checkout.schemas import CallbackPayload, OrderResponse

# Checked in this order; the first missing one is reported.
REQUIRED_CALLBACK_FIELDS = (
    ("razorpay_payment_id", "payment_id"),
    ("razorpay_order_id", "order_id"),
    ("razorpay_signature", "signature"),
)

_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def parse_callback_form(body: bytes) -> dict[str, str]:
    """Parse a urlencoded body; repeated keys keep their first value.

    Bytes that are not valid UTF-8 are kept as lone surrogates so they can be
    signed as received. Raises `CallbackParseError` on malformed percent
    escapes or `;` separators.
    """

    text = body.decode("utf-8", "surrogateescape")
    if ";" in text or _BAD_ESCAPE.search(text):
        raise CallbackParseError()

    fields: dict[str, str] = {}
    for key, value in parse_qsl(text, keep_blank_values=True, errors="surrogateescape"):
        fields.setdefault(key, value)
    return fields


def _printable(value: str) -> str:
    """Replace undecodable bytes with U+FFFD for logs and JSON output."""

    return value.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


class CheckoutService:
    """Stateless request handling on top of immutable settings and a gateway."""

    def __init__(self, settings: Settings, gateway: OrderGateway) -> None:
        self.settings = settings
        self.gateway = gateway

    def create_order(self) -> OrderResponse:
        """Create the configured order once; gateway failures propagate."""

        service = self.settings.service_name
        with gateway_latency_seconds.labels(service=service).time():
            try:
                order = self.gateway.create_order(
                    amount=self.settings.order_amount,
                    currency=self.settings.order_currency,
                    receipt=self.settings.order_receipt,
                    payment_capture=self.settings.order_payment_capture,
                )
            except GatewayError:
                order_failures_total.labels(service=service).inc()
                raise

        orders_created_total.labels(service=service).inc()
        order_id_ctx.set(str(order.get("id") or ""))
        logger.info("order_created amount=%s currency=%s", order.get("amount"), self.settings.order_currency)
        return OrderResponse(
            id=order.get("id"),
            amount=order.get("amount"),
            key=self.settings.razorpay_key_id,
        )

    def verify_callback(self, body: bytes) -> CallbackPayload:
        """Parse and authenticate one gateway callback body."""

        try:
            fields = parse_callback_form(body)
        except CallbackParseError:
            self._count("parse_error")
            raise

        for form_key, label in REQUIRED_CALLBACK_FIELDS:
            if not fields.get(form_key):
                self._count("missing_field")
                raise MissingFieldError(label)

        order_id = fields["razorpay_order_id"]
        payment_id = fields["razorpay_payment_id"]
        signature = fields["razorpay_signature"]
        order_id_ctx.set(_printable(order_id))
        payment_id_ctx.set(_printable(payment_id))
        logger.info("callback_received signature=<redacted>")

        secret = self.settings.razorpay_key_secret.get_secret_value()
        if not verify_signature(order_id, payment_id, signature, secret):
            self._count("mismatch")
            raise SignatureMismatchError()

        self._count("verified")
        logger.info("callback_verified")
        return CallbackPayload(
            razorpay_payment_id=_printable(payment_id),
            razorpay_order_id=_printable(order_id),
            razorpay_signature=_printable(signature),
        )

    def _count(self, outcome: str) -> None:
        callback_verifications_total.labels(service=self.settings.service_name, outcome=outcome).inc()
