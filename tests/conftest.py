"""Shared fixtures: explicit settings and an in-memory gateway."""

import pytest
from fastapi.testclient import TestClient

from paybridge.common.config import Settings
from paybridge.common.errors import GatewayError
from paybridge.services.checkout.app import create_app

KEY_ID = "rzp_test_key"
KEY_SECRET = "s3cr3t"


class FakeGateway:
    """Records order calls and returns a canned order (or raises)."""

    def __init__(self, order: dict | None = None, error: str | None = None) -> None:
        self.order = order if order is not None else {"id": "order_abc", "amount": 5000, "currency": "INR"}
        self.error = error
        self.calls: list[dict] = []

    def create_order(self, amount: int, currency: str, receipt: str, payment_capture: bool) -> dict:
        self.calls.append(
            {
                "amount": amount,
                "currency": currency,
                "receipt": receipt,
                "payment_capture": payment_capture,
            }
        )
        if self.error is not None:
            raise GatewayError(self.error)
        return self.order


@pytest.fixture
def settings() -> Settings:
    return Settings(razorpay_key_id=KEY_ID, razorpay_key_secret=KEY_SECRET, _env_file=None)


@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def client(settings, gateway):
    """Test client over an app wired with the fake gateway."""

    return TestClient(create_app(settings, gateway))


@pytest.fixture
def make_client(settings):
    """Build a client around a fresh fake gateway; returns (client, gateway)."""

    def _make(order: dict | None = None, error: str | None = None, **overrides):
        gateway = FakeGateway(order=order, error=error)
        app_settings = settings.model_copy(update=overrides) if overrides else settings
        return TestClient(create_app(app_settings, gateway)), gateway

    return _make
