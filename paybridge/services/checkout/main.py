"""Process entrypoint: `uvicorn paybridge.services.checkout.main:app`."""

import uvicorn

from paybridge.common.config import load_settings
from paybridge.common.logging import configure_logging
from paybridge.common.startup import log_startup_config
from paybridge.common.tracing import setup_tracing
from paybridge.services.checkout.app import create_app
from paybridge.services.checkout.gateway import RazorpayOrderGateway

settings = load_settings()
configure_logging(settings.service_name, settings.log_level)
setup_tracing(settings.service_name, settings.otel_exporter_otlp_endpoint)
log_startup_config(settings)
gateway = RazorpayOrderGateway(
    settings.razorpay_key_id,
    settings.razorpay_key_secret.get_secret_value(),
    settings.gateway_timeout_seconds,
)
app = create_app(settings, gateway)


if __name__ == "__main__":
    uvicorn.run(app, host=settings.host, port=settings.port)
