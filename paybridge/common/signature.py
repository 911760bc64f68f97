"""Razorpay payment callback signatures.

The gateway signs `"{order_id}|{payment_id}"` with the merchant key secret
using HMAC-SHA256 and sends the lowercase hex digest as `razorpay_signature`.

Strings may carry undecodable form bytes as lone surrogates (see
`parse_callback_form`); they are signed as the original raw bytes.
"""

import hashlib
import hmac


def _raw(value: str) -> bytes:
    return value.encode("utf-8", "surrogateescape")


def generate_signature(order_id: str, payment_id: str, secret: str) -> str:
    """Return the hex HMAC-SHA256 signature the gateway would send."""

    message = f"{order_id}|{payment_id}"
    return hmac.new(_raw(secret), _raw(message), hashlib.sha256).hexdigest()


def verify_signature(order_id: str, payment_id: str, signature: str, secret: str) -> bool:
    """Constant-time check of a callback signature against the shared secret."""

    expected = generate_signature(order_id, payment_id, secret)
    return hmac.compare_digest(expected.encode("ascii"), _raw(signature))
