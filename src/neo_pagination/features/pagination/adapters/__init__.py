"""Concrete window sources."""

from .memory import (
    SequenceWindowSource,
    CallableWindowSource,
)

from .query import (
    QueryExecutor,
    QueryWindowSource,
)

__all__ = [
    "SequenceWindowSource",
    "CallableWindowSource",
    "QueryExecutor",
    "QueryWindowSource",
]
