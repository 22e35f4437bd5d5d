"""Tests for settings and logging configuration."""

import logging

import pytest
from pydantic import ValidationError

from neo_pagination.config import (
    LOGGER_NAMESPACE,
    LoggingConfig,
    PaginationSettings,
    get_settings,
    setup_logging,
)


@pytest.fixture
def restore_logging():
    """Reapply default logging after a test changes it."""
    yield
    setup_logging(PaginationSettings(log_level="WARNING", log_to_console=False))


class TestPaginationSettings:
    """Test cases for PaginationSettings."""

    def test_defaults(self, monkeypatch):
        for name in ("DEFAULT_PAGE", "DEFAULT_PER_PAGE", "MAX_PER_PAGE", "LOG_LEVEL"):
            monkeypatch.delenv(f"NEO_PAGINATION_{name}", raising=False)

        settings = PaginationSettings(_env_file=None)

        assert settings.default_page == 1
        assert settings.default_per_page == 100
        assert settings.max_per_page is None
        assert settings.log_level == "WARNING"

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("NEO_PAGINATION_DEFAULT_PER_PAGE", "25")
        monkeypatch.setenv("NEO_PAGINATION_MAX_PER_PAGE", "500")
        monkeypatch.setenv("NEO_PAGINATION_LOG_LEVEL", "debug")

        settings = get_settings()

        assert settings.default_per_page == 25
        assert settings.max_per_page == 500
        assert settings.log_level == "DEBUG"

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    @pytest.mark.parametrize("field,value", [
        ("default_page", 0),
        ("default_per_page", 0),
        ("max_per_page", 0),
        ("log_level", "LOUD"),
        ("log_format", "xml"),
    ])
    def test_rejects_invalid_values(self, field, value):
        with pytest.raises(ValidationError):
            PaginationSettings(**{field: value})


class TestLoggingConfig:
    """Test cases for logging configuration."""

    def test_build_without_console(self):
        config = LoggingConfig.build(PaginationSettings(log_level="INFO", log_to_console=False))

        assert config["handlers"] == {}
        assert config["loggers"][LOGGER_NAMESPACE] == {"level": "INFO", "propagate": True}
        assert "root" not in config

    def test_build_with_console(self):
        config = LoggingConfig.build(
            PaginationSettings(log_level="DEBUG", log_format="json", log_to_console=True)
        )

        logger_config = config["loggers"][LOGGER_NAMESPACE]
        assert logger_config["handlers"] == ["console"]
        assert logger_config["propagate"] is False
        assert config["handlers"]["console"]["level"] == "DEBUG"
        assert config["formatters"]["default"]["format"].startswith('{"time"')

    def test_setup_logging_applies_level(self, restore_logging):
        setup_logging(PaginationSettings(log_level="DEBUG"))

        assert logging.getLogger(LOGGER_NAMESPACE).level == logging.DEBUG

    def test_set_level(self, restore_logging):
        LoggingConfig.set_level("error")

        assert logging.getLogger(LOGGER_NAMESPACE).level == logging.ERROR
