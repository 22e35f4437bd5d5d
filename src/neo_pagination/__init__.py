"""Neo-Pagination - offset pagination for ordered, countable sources.

Computes page metadata (skip offset, page count) and materializes one window
of a source into a tuple, list, set, dict or lookup, wrapped in an immutable
paged result for the NeoMultiTenant ecosystem.
"""

# Initialize logging configuration on import
from .config.logging_config import setup_logging
setup_logging()

from .__version__ import __version__

from .config import (
    PaginationSettings,
    get_settings,
)

from .core.exceptions import (
    NeoPaginationError,
    ConfigurationError,
    PaginationValidationError,
    PaginationError,
    InvalidPageError,
    InvalidPageSizeError,
    DuplicateKeyError,
    InvalidSourceCountError,
    MissingKeySelectorError,
    UnexpectedKeySelectorError,
    UnorderedSourceError,
    AsyncSourceError,
    create_error_response,
)

from .features.pagination import (
    PageRequest,
    SortField,
    SortOrder,
    PageMetadata,
    calculate_page_metadata,
    PageVariant,
    PagedResult,
    Lookup,
    PageList,
    WindowSource,
    AsyncWindowSource,
    Paged,
    materialize,
    build_page,
    build_page_async,
    to_paged_array,
    to_paged_list,
    to_paged_set,
    to_paged_dict,
    to_paged_lookup,
    PaginatedSourceMixin,
    SequenceWindowSource,
    CallableWindowSource,
    QueryWindowSource,
)

__all__ = [
    "__version__",

    # Configuration
    "PaginationSettings",
    "get_settings",
    "setup_logging",

    # Exceptions
    "NeoPaginationError",
    "ConfigurationError",
    "PaginationValidationError",
    "PaginationError",
    "InvalidPageError",
    "InvalidPageSizeError",
    "DuplicateKeyError",
    "InvalidSourceCountError",
    "MissingKeySelectorError",
    "UnexpectedKeySelectorError",
    "UnorderedSourceError",
    "AsyncSourceError",
    "create_error_response",

    # Pagination
    "PageRequest",
    "SortField",
    "SortOrder",
    "PageMetadata",
    "calculate_page_metadata",
    "PageVariant",
    "PagedResult",
    "Lookup",
    "PageList",
    "WindowSource",
    "AsyncWindowSource",
    "Paged",
    "materialize",
    "build_page",
    "build_page_async",
    "to_paged_array",
    "to_paged_list",
    "to_paged_set",
    "to_paged_dict",
    "to_paged_lookup",
    "PaginatedSourceMixin",
    "SequenceWindowSource",
    "CallableWindowSource",
    "QueryWindowSource",
]
