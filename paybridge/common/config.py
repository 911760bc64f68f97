"""Environment-driven settings for the checkout service.

The process loads this once at startup and passes the instance explicitly to
the app factory (see `.env.example`).
"""

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Immutable, typed view of runtime configuration from environment variables."""

    razorpay_key_id: str
    razorpay_key_secret: SecretStr
    service_name: str = "paybridge-checkout"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8080
    gateway_timeout_seconds: float = 10.0
    # Single-SKU order payload; amount is in the smallest currency unit.
    order_amount: int = 5000
    order_currency: str = "INR"
    order_receipt: str = "receipt#1"
    order_payment_capture: bool = True
    otel_exporter_otlp_endpoint: str = ""
    model_config = SettingsConfigDict(env_file=".env", extra="ignore", frozen=True)


def load_settings() -> Settings:
    """Read settings from the environment and `.env`; raises when keys are missing."""

    return Settings()
