"""Offset pagination over ordered, countable sources.

This module provides:
- A page metadata calculator (skip offset and page count)
- Window source protocols, sync and async
- Materialization into tuple, list, set, dict and lookup containers
- A page builder with one convenience constructor per container
- A source mixin and ready-made in-memory and SQL sources
"""

# Core entities
from .entities import (
    PageRequest,
    SortField,
    SortOrder,
    PageMetadata,
    calculate_page_metadata,
    PageVariant,
    PagedResult,
    Lookup,
    PageList,
)

# Protocols
from .protocols import (
    WindowSource,
    AsyncWindowSource,
    Paged,
)

# Strategies
from .strategies import (
    KeySelector,
    materialize,
)

# Services
from .services import (
    build_page,
    build_page_async,
    to_paged_array,
    to_paged_list,
    to_paged_set,
    to_paged_dict,
    to_paged_lookup,
)

# Mixins
from .mixins import PaginatedSourceMixin

# Adapters
from .adapters import (
    SequenceWindowSource,
    CallableWindowSource,
    QueryWindowSource,
)

__all__ = [
    # Entities
    "PageRequest",
    "SortField",
    "SortOrder",
    "PageMetadata",
    "calculate_page_metadata",
    "PageVariant",
    "PagedResult",
    "Lookup",
    "PageList",

    # Protocols
    "WindowSource",
    "AsyncWindowSource",
    "Paged",

    # Strategies
    "KeySelector",
    "materialize",

    # Services
    "build_page",
    "build_page_async",
    "to_paged_array",
    "to_paged_list",
    "to_paged_set",
    "to_paged_dict",
    "to_paged_lookup",

    # Mixins
    "PaginatedSourceMixin",

    # Adapters
    "SequenceWindowSource",
    "CallableWindowSource",
    "QueryWindowSource",
]
