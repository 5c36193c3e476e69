"""Configuration management for HTTP error decoration."""

import logging
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class BoomSettings(BaseSettings):
    """Settings shared by the error factory, API integration and CLI."""

    model_config = SettingsConfigDict(
        env_prefix="HTTPBOOM_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    internal_error_message: str = Field(
        default="An internal server error occurred",
        description="Payload message shown instead of the real 500 error message",
    )

    unknown_error_label: str = Field(
        default="Unknown",
        description="Reason phrase used for status codes missing from the table",
    )

    log_level: str = Field(
        default="INFO",
        description="Default log level for the CLI",
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept log level names in any case."""
        return v.strip().upper()

    def validate_config(self) -> None:
        """Validate configuration at startup. Raises ValueError if invalid."""
        errors = []

        if not self.internal_error_message.strip():
            errors.append("INTERNAL_ERROR_MESSAGE cannot be empty")

        if not self.unknown_error_label.strip():
            errors.append("UNKNOWN_ERROR_LABEL cannot be empty")

        if self.log_level not in LOG_LEVELS:
            errors.append(
                f"LOG_LEVEL must be one of {', '.join(sorted(LOG_LEVELS))}"
            )

        if errors:
            raise ValueError(
                "Configuration validation failed:\n"
                + "\n".join(f"  - {e}" for e in errors)
            )


_config_instance: Optional[BoomSettings] = None


def get_config() -> BoomSettings:
    """Get or create global configuration instance."""
    global _config_instance
    if _config_instance is None:
        _config_instance = BoomSettings()
        _config_instance.validate_config()
        logger.debug("Configuration validated successfully")
    return _config_instance


def reload_config() -> BoomSettings:
    """Reload configuration (useful for testing)."""
    global _config_instance
    _config_instance = BoomSettings()
    return _config_instance
