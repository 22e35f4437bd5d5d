"""Materialization strategies, one per container variant."""

from .materializers import (
    KeySelector,
    to_array,
    to_list,
    to_set,
    to_dict,
    to_lookup,
    materialize,
    check_key_selector,
)

__all__ = [
    "KeySelector",
    "to_array",
    "to_list",
    "to_set",
    "to_dict",
    "to_lookup",
    "materialize",
    "check_key_selector",
]
