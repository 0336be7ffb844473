"""Configuration management for the sales service."""

import logging
from typing import Optional

from limits import parse_many
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class SalesConfig(BaseSettings):
    """Configuration for the sales service."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_host: str = Field(
        default="0.0.0.0",
        description="API host address",
    )

    api_port: int = Field(
        default=8000,
        ge=1,
        le=65535,
        description="API port",
    )

    log_level: str = Field(
        default="INFO",
        description="Root logging level for the server entry points",
    )

    allowed_origins: str = Field(
        default="http://localhost:5173",
        description="Comma-separated list of allowed CORS origins",
    )

    rate_limit_enabled: bool = Field(
        default=True,
        description="Apply per-client rate limiting to API routes",
    )

    rate_limit: str = Field(
        default="100/minute",
        description="Per-client rate limit in slowapi notation (e.g. '100/minute')",
    )

    repository_lock: bool = Field(
        default=True,
        description="Guard the in-memory repository with a coarse lock",
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Uppercase the level name; unknown names are reported by validate_config."""
        return v.strip().upper()

    def get_allowed_origins(self) -> list[str]:
        """Parse allowed origins from comma-separated string."""
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]

    def validate_config(self) -> None:
        """Validate configuration at startup. Raises ValueError if invalid."""
        errors = []

        if self.log_level not in _LOG_LEVELS:
            errors.append(
                f"LOG_LEVEL must be one of {', '.join(sorted(_LOG_LEVELS))}"
            )

        if not _is_valid_rate_limit(self.rate_limit):
            errors.append(
                f"RATE_LIMIT has invalid format: '{self.rate_limit}' "
                "(expected e.g. '100/minute')"
            )

        if errors:
            raise ValueError(
                "Configuration validation failed:\n"
                + "\n".join(f"  - {e}" for e in errors)
            )


def _is_valid_rate_limit(value: str) -> bool:
    try:
        parse_many(value)
    except ValueError:
        return False
    return True


_config_instance: Optional[SalesConfig] = None


def get_config() -> SalesConfig:
    """Get or create global configuration instance."""
    global _config_instance
    if _config_instance is None:
        _config_instance = SalesConfig()
        _config_instance.validate_config()
        logger.info("Configuration validated successfully")
    return _config_instance


def get_config_unvalidated() -> SalesConfig:
    """Get or create global configuration instance without validation."""
    global _config_instance
    if _config_instance is None:
        _config_instance = SalesConfig()
    return _config_instance


def reload_config() -> SalesConfig:
    """Reload configuration (useful for testing)."""
    global _config_instance
    _config_instance = SalesConfig()
    return _config_instance
