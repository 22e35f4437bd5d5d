"""Pagination entities for requests, metadata and paged results."""

from .requests import (
    PageRequest,
    SortField,
    SortOrder,
    validate_page,
    validate_per_page,
)

from .metadata import (
    PageMetadata,
    calculate_page_metadata,
)

from .variants import PageVariant

from .responses import (
    PagedResult,
    Lookup,
    PageList,
)

__all__ = [
    # Requests
    "PageRequest",
    "SortField",
    "SortOrder",
    "validate_page",
    "validate_per_page",

    # Metadata
    "PageMetadata",
    "calculate_page_metadata",

    # Results
    "PageVariant",
    "PagedResult",
    "Lookup",
    "PageList",
]
