"""Pagination mixins for window sources."""

from .source import PaginatedSourceMixin

__all__ = [
    "PaginatedSourceMixin",
]
