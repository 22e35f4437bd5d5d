"""Page building services."""

from .builder import (
    build_page,
    build_page_async,
    to_paged_array,
    to_paged_list,
    to_paged_set,
    to_paged_dict,
    to_paged_lookup,
)

__all__ = [
    "build_page",
    "build_page_async",
    "to_paged_array",
    "to_paged_list",
    "to_paged_set",
    "to_paged_dict",
    "to_paged_lookup",
]
