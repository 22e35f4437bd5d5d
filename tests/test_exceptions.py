"""Tests for the neo-pagination exception hierarchy."""

import neo_pagination
from neo_pagination.core.exceptions import (
    AsyncSourceError,
    ConfigurationError,
    DuplicateKeyError,
    InvalidPageError,
    InvalidPageSizeError,
    MissingKeySelectorError,
    NeoPaginationError,
    PaginationError,
    PaginationValidationError,
    UnorderedSourceError,
    create_error_response,
)


def test_hierarchy():
    """Test every error derives from the library base error."""
    assert issubclass(InvalidPageError, PaginationValidationError)
    assert issubclass(InvalidPageSizeError, PaginationValidationError)
    assert issubclass(DuplicateKeyError, PaginationError)
    assert issubclass(MissingKeySelectorError, ConfigurationError)
    assert issubclass(UnorderedSourceError, ConfigurationError)
    assert issubclass(AsyncSourceError, ConfigurationError)
    for error in (PaginationValidationError, PaginationError, ConfigurationError):
        assert issubclass(error, NeoPaginationError)


def test_error_code_defaults_to_class_name():
    error = InvalidPageError(0)

    assert error.error_code == "InvalidPageError"
    assert error.details == {"field": "page", "value": 0, "requirement": "Must be >= 1"}
    assert "got 0" in str(error)


def test_create_error_response():
    response = create_error_response(DuplicateKeyError("tenant-1"))

    assert response == {
        "error": {
            "code": "DuplicateKeyError",
            "message": "Duplicate key in page window: 'tenant-1'",
            "details": {"key": "'tenant-1'"},
            "type": "DuplicateKeyError",
        }
    }


def test_package_exports():
    """Test the top-level package exposes the public API."""
    assert neo_pagination.__version__ == "1.0.0"
    for name in neo_pagination.__all__:
        assert hasattr(neo_pagination, name)
