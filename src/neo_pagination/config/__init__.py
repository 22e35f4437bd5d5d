"""Configuration module for neo-pagination."""

from .constants import (
    PaginationDefaults,
    ENV_PREFIX,
    LOGGER_NAMESPACE,
)

from .settings import (
    PaginationSettings,
    get_settings,
)

from .logging_config import (
    setup_logging,
    get_logger,
    LogFormat,
    LoggingConfig,
)

__all__ = [
    "PaginationDefaults",
    "ENV_PREFIX",
    "LOGGER_NAMESPACE",
    "PaginationSettings",
    "get_settings",
    "setup_logging",
    "get_logger",
    "LogFormat",
    "LoggingConfig",
]
