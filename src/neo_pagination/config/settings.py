"""
Settings for neo-pagination.

Values come from environment variables prefixed with ``NEO_PAGINATION_`` or
from a local ``.env`` file, e.g. ``NEO_PAGINATION_DEFAULT_PER_PAGE=50``.
"""
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import ENV_PREFIX, PaginationDefaults


class PaginationSettings(BaseSettings):
    """Environment-driven defaults for page requests and logging."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Page request defaults
    default_page: int = Field(default=PaginationDefaults.PAGE, ge=1)
    default_per_page: int = Field(default=PaginationDefaults.PER_PAGE, ge=1)
    max_per_page: Optional[int] = Field(default=None, ge=1)

    # Logging
    log_level: str = Field(default="WARNING")
    log_format: str = Field(default="simple")
    log_to_console: bool = Field(default=False)

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unsupported log level: {value}")
        return level

    @field_validator("log_format")
    @classmethod
    def normalize_log_format(cls, value: str) -> str:
        log_format = value.lower()
        if log_format not in {"simple", "detailed", "json"}:
            raise ValueError(f"Unsupported log format: {value}")
        return log_format


@lru_cache()
def get_settings() -> PaginationSettings:
    """Get cached settings instance."""
    return PaginationSettings()
