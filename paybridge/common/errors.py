"""Client-facing error types rendered as `{"error": message}` bodies."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from paybridge.common.logging import logger


class CheckoutError(Exception):
    """Base error carrying the HTTP status it maps to."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class GatewayError(CheckoutError):
    """Upstream order call failed; the message is passed through verbatim."""


class BodyReadError(CheckoutError):
    def __init__(self) -> None:
        super().__init__("Unable to read request body")


class CallbackParseError(CheckoutError):
    def __init__(self) -> None:
        super().__init__("Failed to parse query parameters")


class MissingFieldError(CheckoutError):
    status_code = 400

    def __init__(self, field: str) -> None:
        super().__init__(f"Missing {field} parameter")
        self.field = field


class SignatureMismatchError(CheckoutError):
    status_code = 400

    def __init__(self) -> None:
        super().__init__("failed to verify")


async def checkout_error_handler(_: Request, exc: CheckoutError) -> JSONResponse:
    if isinstance(exc, GatewayError):
        logger.error("gateway_error: %s", exc.message)
    else:
        logger.warning("request_rejected status=%s error=%s", exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def register_error_handlers(app: FastAPI, headers: dict[str, str] | None = None) -> None:
    """Render every `CheckoutError` with its own status code.

    Anything else becomes a 500 `{"error": ...}`. That handler runs outside all
    HTTP middleware, so `headers` are attached to it directly.
    """

    app.add_exception_handler(CheckoutError, checkout_error_handler)

    async def unhandled_error_handler(_: Request, exc: Exception) -> JSONResponse:
        logger.exception("unhandled_error: %s", exc)
        return JSONResponse(status_code=500, content={"error": "internal server error"}, headers=headers)

    app.add_exception_handler(Exception, unhandled_error_handler)
