"""Razorpay adapter tests with the client's order resource stubbed out."""

import pytest
from razorpay.errors import BadRequestError

from paybridge.common.errors import GatewayError
from paybridge.services.checkout.gateway import RazorpayOrderGateway


class StubOrders:
    def __init__(self, result=None, exc: Exception | None = None) -> None:
        self.result = result
        self.exc = exc
        self.calls: list[tuple[dict, dict]] = []

    def create(self, data=None, **kwargs):
        self.calls.append((data, kwargs))
        if self.exc is not None:
            raise self.exc
        return self.result


def make_gateway(orders: StubOrders) -> RazorpayOrderGateway:
    gateway = RazorpayOrderGateway("rzp_test_key", "s3cr3t", timeout_seconds=2.5)
    gateway.client.order = orders
    return gateway


def test_create_order_sends_payload_with_timeout():
    orders = StubOrders(result={"id": "order_1", "amount": 5000})
    gateway = make_gateway(orders)

    order = gateway.create_order(amount=5000, currency="INR", receipt="receipt#1", payment_capture=True)

    assert order == {"id": "order_1", "amount": 5000}
    data, kwargs = orders.calls[0]
    assert data == {"amount": 5000, "currency": "INR", "receipt": "receipt#1", "payment_capture": 1}
    assert kwargs == {"timeout": 2.5}


def test_capture_flag_false_is_sent_as_zero():
    orders = StubOrders(result={"id": "order_1", "amount": 100})
    make_gateway(orders).create_order(amount=100, currency="INR", receipt="r", payment_capture=False)
    assert orders.calls[0][0]["payment_capture"] == 0


def test_client_error_becomes_gateway_error_with_same_message():
    orders = StubOrders(exc=BadRequestError("Authentication failed"))
    with pytest.raises(GatewayError) as info:
        make_gateway(orders).create_order(amount=1, currency="INR", receipt="r", payment_capture=True)
    assert info.value.message == "Authentication failed"
    assert info.value.status_code == 500


def test_single_attempt_on_failure():
    orders = StubOrders(exc=ConnectionError("connection refused"))
    with pytest.raises(GatewayError):
        make_gateway(orders).create_order(amount=1, currency="INR", receipt="r", payment_capture=True)
    assert len(orders.calls) == 1
