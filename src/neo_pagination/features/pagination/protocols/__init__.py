"""Pagination protocols for window sources and paged views."""

from .source import (
    WindowSource,
    AsyncWindowSource,
    Paged,
)

__all__ = [
    "WindowSource",
    "AsyncWindowSource",
    "Paged",
]
