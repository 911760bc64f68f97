"""Outbound order creation against the payment gateway."""

from typing import Any, Protocol

import razorpay

from paybridge.common.errors import GatewayError


class OrderGateway(Protocol):
    """Anything that can create a gateway order and return its payload."""

    def create_order(
        self, amount: int, currency: str, receipt: str, payment_capture: bool
    ) -> dict[str, Any]: ...


class RazorpayOrderGateway:
    """Thin adapter over the official Razorpay client."""

    def __init__(self, key_id: str, key_secret: str, timeout_seconds: float) -> None:
        self.client = razorpay.Client(auth=(key_id, key_secret))
        self.timeout_seconds = timeout_seconds

    def create_order(
        self, amount: int, currency: str, receipt: str, payment_capture: bool
    ) -> dict[str, Any]:
        """Create one order; any client or transport failure becomes `GatewayError`."""

        data = {
            "amount": amount,
            "currency": currency,
            "receipt": receipt,
            "payment_capture": 1 if payment_capture else 0,
        }
        try:
            # Extra kwargs are forwarded to `requests`, which bounds the call.
            return self.client.order.create(data=data, timeout=self.timeout_seconds)
        except Exception as exc:
            raise GatewayError(str(exc)) from exc
