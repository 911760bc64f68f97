"""Startup-time config logging from the loaded settings."""

from paybridge.common.config import Settings
from paybridge.common.logging import logger


def startup_config(settings: Settings) -> dict:
    """Effective configuration with secrets masked by their `SecretStr` fields."""

    return settings.model_dump(mode="json")


def log_startup_config(settings: Settings) -> None:
    """Log the effective configuration once for quick troubleshooting."""

    logger.info("startup_config=%s", startup_config(settings))
