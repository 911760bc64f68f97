"""Compute a payment callback signature and optionally post it.

Useful for exercising `/payment-callback` locally without a real checkout.
"""

import argparse
import os
import uuid

import httpx

from paybridge.common.signature import generate_signature


def build_form(order_id: str, payment_id: str, secret: str) -> dict[str, str]:
    """Return the three form fields the gateway would post."""

    return {
        "razorpay_payment_id": payment_id,
        "razorpay_order_id": order_id,
        "razorpay_signature": generate_signature(order_id, payment_id, secret),
    }


def main() -> None:
    """Parse CLI args, print the signed form, post it when asked."""

    parser = argparse.ArgumentParser(description="Sign a payment callback for local testing.")
    parser.add_argument("--order-id", required=True)
    parser.add_argument("--payment-id", default=None, help="Defaults to a random pay_ id")
    parser.add_argument("--secret", default=os.getenv("RAZORPAY_KEY_SECRET"))
    parser.add_argument("--post", dest="url", default=None, help="e.g. http://localhost:8080/payment-callback")
    args = parser.parse_args()

    if not args.secret:
        raise SystemExit("Provide --secret or set RAZORPAY_KEY_SECRET")

    payment_id = args.payment_id or f"pay_{uuid.uuid4().hex[:14]}"
    form = build_form(args.order_id, payment_id, args.secret)
    for key, value in form.items():
        print(f"{key}={value}")

    if args.url:
        resp = httpx.post(args.url, data=form, timeout=10.0)
        print(f"status={resp.status_code} body={resp.text}")


if __name__ == "__main__":
    main()
