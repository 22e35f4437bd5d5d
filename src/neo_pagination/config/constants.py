"""Constants for neo-pagination.

Defaults that apply when neither the caller nor the environment provides a value.
"""

from typing import Final


class PaginationDefaults:
    """Default page request values."""

    PAGE: Final[int] = 1
    PER_PAGE: Final[int] = 100


# Prefix for every environment variable read by PaginationSettings
ENV_PREFIX: Final[str] = "NEO_PAGINATION_"

# Logger namespace owned by this package
LOGGER_NAMESPACE: Final[str] = "neo_pagination"
