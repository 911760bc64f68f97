"""API request/response schemas for checkout endpoints."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class OrderResponse(BaseModel):
    """Returned by `POST /create-order` for the browser checkout widget."""

    # Passed through from the gateway order as-is.
    id: Any
    amount: Any
    key: str


class CallbackPayload(BaseModel):
    """Form fields posted by the gateway after a payment attempt."""

    razorpay_payment_id: str
    razorpay_order_id: str
    razorpay_signature: str


class CallbackResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    payment_data: CallbackPayload = Field(alias="paymentData")


class ErrorResponse(BaseModel):
    error: str
