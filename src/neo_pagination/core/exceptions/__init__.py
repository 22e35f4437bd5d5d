"""Exceptions module for neo-pagination.

This module provides the complete exception hierarchy for neo-pagination,
split into caller configuration errors, request validation errors and
errors raised while materializing a page.
"""

from .base import (
    NeoPaginationError,
    create_error_response,
)

from .domain import (
    # Configuration Errors
    ConfigurationError,
    MissingKeySelectorError,
    UnexpectedKeySelectorError,
    UnorderedSourceError,
    AsyncSourceError,

    # Validation Errors
    PaginationValidationError,
    InvalidPageError,
    InvalidPageSizeError,

    # Materialization Errors
    PaginationError,
    DuplicateKeyError,
    InvalidSourceCountError,
)

__all__ = [
    "NeoPaginationError",
    "create_error_response",

    "ConfigurationError",
    "MissingKeySelectorError",
    "UnexpectedKeySelectorError",
    "UnorderedSourceError",
    "AsyncSourceError",

    "PaginationValidationError",
    "InvalidPageError",
    "InvalidPageSizeError",

    "PaginationError",
    "DuplicateKeyError",
    "InvalidSourceCountError",
]
