"""Base exceptions for neo-pagination.

This module defines the base exception hierarchy for the neo-pagination library.
All exceptions inherit from NeoPaginationError and carry an error code and
structured details so callers can turn them into API error payloads.
"""

from typing import Any, Dict, Optional


class NeoPaginationError(Exception):
    """Base exception for all neo-pagination errors.

    All exceptions in the neo-pagination library inherit from this base class
    and include structured error information for better debugging and API responses.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


def create_error_response(exception: NeoPaginationError) -> Dict[str, Any]:
    """Create standardized error response from exception.

    Args:
        exception: The neo-pagination exception

    Returns:
        Error response dictionary
    """
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": exception.__class__.__name__,
        }
    }
