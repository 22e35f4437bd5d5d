"""Domain-specific exceptions for neo-pagination.

Every error here aborts construction of a page. Failures raised by a window
source itself are never wrapped and do not appear in this module.
"""

from typing import Any, Hashable, Optional

from .base import NeoPaginationError


# Configuration Errors
class ConfigurationError(NeoPaginationError):
    """Raised when pagination is wired up incorrectly by the caller."""
    pass


class MissingKeySelectorError(ConfigurationError):
    """Raised when a keyed container variant is requested without a key selector."""
    pass


class UnexpectedKeySelectorError(ConfigurationError):
    """Raised when a key selector is passed to a variant that does not use keys."""
    pass


class UnorderedSourceError(ConfigurationError):
    """Raised when a query source is built without any ordering."""
    pass


class AsyncSourceError(ConfigurationError):
    """Raised when an asynchronous source is passed to the synchronous builder."""
    pass


# Validation Errors
class PaginationValidationError(NeoPaginationError):
    """Base class for invalid page requests."""

    def __init__(self, message: str, field: str, value: Any):
        super().__init__(
            message,
            details={"field": field, "value": value, "requirement": "Must be >= 1"}
        )
        self.field = field
        self.value = value


class InvalidPageError(PaginationValidationError):
    """Raised when the requested page is below 1."""

    def __init__(self, page: Any):
        super().__init__(f"Page must be an integer >= 1, got {page!r}", "page", page)


class InvalidPageSizeError(PaginationValidationError):
    """Raised when the page size is below 1 or above the configured maximum."""

    def __init__(self, per_page: Any, max_per_page: Optional[int] = None):
        if max_per_page is None:
            message = f"Per page must be an integer >= 1, got {per_page!r}"
        else:
            message = f"Per page must be between 1 and {max_per_page}, got {per_page!r}"
        super().__init__(message, "per_page", per_page)
        if max_per_page is not None:
            self.details["requirement"] = f"Must be between 1 and {max_per_page}"
        self.max_per_page = max_per_page


# Materialization Errors
class PaginationError(NeoPaginationError):
    """Base class for errors raised while building a page."""
    pass


class DuplicateKeyError(PaginationError):
    """Raised when two elements of one window map to the same dictionary key."""

    def __init__(self, key: Hashable):
        super().__init__(
            f"Duplicate key in page window: {key!r}",
            details={"key": repr(key)}
        )
        self.key = key


class InvalidSourceCountError(PaginationError):
    """Raised when a window source reports a negative total."""

    def __init__(self, total: Any):
        super().__init__(
            f"Window source reported an invalid total: {total!r}",
            details={"total": total}
        )
        self.total = total
