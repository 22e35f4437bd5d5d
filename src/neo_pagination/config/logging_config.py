"""Centralized logging configuration for neo-pagination.

Only the ``neo_pagination`` logger namespace is configured. The root logger
and the loggers of the host application are left alone, so applications
keep full control of where pagination logs end up.
"""

import logging
import logging.config
from enum import Enum
from typing import Any, Dict, Optional

from .constants import LOGGER_NAMESPACE
from .settings import PaginationSettings, get_settings


class LogFormat(str, Enum):
    """Log format options."""
    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"


FORMAT_STRINGS = {
    LogFormat.SIMPLE: "%(asctime)s - %(levelname)s - %(message)s",
    LogFormat.DETAILED: "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
    LogFormat.JSON: '{"time":"%(asctime)s","level":"%(levelname)s","module":"%(name)s","message":"%(message)s"}',
}


class LoggingConfig:
    """Logging configuration manager for the package namespace."""

    @classmethod
    def build(cls, settings: PaginationSettings) -> Dict[str, Any]:
        """Build a dictConfig mapping from settings."""
        logger_config: Dict[str, Any] = {
            "level": settings.log_level,
            "propagate": True,
        }

        logging_config: Dict[str, Any] = {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": FORMAT_STRINGS[LogFormat(settings.log_format)],
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {},
            "loggers": {LOGGER_NAMESPACE: logger_config},
        }

        if settings.log_to_console:
            logging_config["handlers"]["console"] = {
                "class": "logging.StreamHandler",
                "level": settings.log_level,
                "formatter": "default",
                "stream": "ext://sys.stdout",
            }
            logger_config["handlers"] = ["console"]
            logger_config["propagate"] = False

        return logging_config

    @classmethod
    def configure(cls, settings: Optional[PaginationSettings] = None) -> None:
        """Configure package logging from settings (environment by default)."""
        settings = settings or get_settings()
        logging.config.dictConfig(cls.build(settings))

        logger = logging.getLogger(__name__)
        logger.debug(
            f"Logging configured: level={settings.log_level}, format={settings.log_format}"
        )

    @classmethod
    def set_level(cls, level: str) -> None:
        """Set log level for the package namespace."""
        logging.getLogger(LOGGER_NAMESPACE).setLevel(getattr(logging, level.upper()))


def setup_logging(settings: Optional[PaginationSettings] = None) -> None:
    """Setup logging configuration from settings.

    Runs once on package import; call again to apply different settings.
    """
    LoggingConfig.configure(settings)


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module name (usually ``__name__``)."""
    return logging.getLogger(name)
