"""Pagination request entities and enums."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from ....config.settings import PaginationSettings, get_settings
from ....config.constants import PaginationDefaults
from ....core.exceptions import InvalidPageError, InvalidPageSizeError


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 1


def validate_page(page: Any) -> None:
    """Raise InvalidPageError unless page is an integer >= 1."""
    if not _is_positive_int(page):
        raise InvalidPageError(page)


def validate_per_page(per_page: Any, max_per_page: Optional[int] = None) -> None:
    """Raise InvalidPageSizeError unless per_page is an integer within bounds."""
    if not _is_positive_int(per_page):
        raise InvalidPageSizeError(per_page, max_per_page)
    if max_per_page is not None and per_page > max_per_page:
        raise InvalidPageSizeError(per_page, max_per_page)


class SortOrder(str, Enum):
    """Sort order enumeration."""
    ASC = "asc"
    DESC = "desc"

    def to_sql(self) -> str:
        """Convert to SQL ORDER BY clause."""
        return "ASC" if self == SortOrder.ASC else "DESC"


@dataclass(frozen=True)
class SortField:
    """Sort field specification with validation."""

    field: str
    order: SortOrder = SortOrder.ASC
    nulls_last: bool = True

    def to_sql(self) -> str:
        """Convert to SQL ORDER BY clause fragment."""
        nulls_clause = "NULLS LAST" if self.nulls_last else "NULLS FIRST"
        return f"{self.field} {self.order.to_sql()} {nulls_clause}"

    def __post_init__(self):
        """Validate field name for SQL injection prevention."""
        if not self.field or not self.field.replace("_", "").replace(".", "").isalnum():
            raise ValueError(f"Invalid field name: {self.field}")


@dataclass(frozen=True)
class PageRequest:
    """Offset-based page request (traditional page/per_page).

    Validated on construction, so an invalid request never reaches a source.
    """

    page: int = PaginationDefaults.PAGE
    per_page: int = PaginationDefaults.PER_PAGE

    def __post_init__(self):
        """Validate pagination parameters."""
        validate_page(self.page)
        validate_per_page(self.per_page)

    @property
    def offset(self) -> int:
        """Calculate offset from page and per_page."""
        return (self.page - 1) * self.per_page

    @property
    def limit(self) -> int:
        """Get limit (alias for per_page)."""
        return self.per_page

    @classmethod
    def resolve(
        cls,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
        settings: Optional[PaginationSettings] = None
    ) -> "PageRequest":
        """Build a request, filling missing values from settings.

        Args:
            page: Requested page, or None for the configured default
            per_page: Requested page size, or None for the configured default
            settings: Settings to use instead of the environment ones

        Returns:
            Validated page request

        Raises:
            InvalidPageError: If the page is below 1
            InvalidPageSizeError: If the page size is below 1 or above max_per_page
        """
        settings = settings or get_settings()
        page = settings.default_page if page is None else page
        per_page = settings.default_per_page if per_page is None else per_page

        validate_per_page(per_page, settings.max_per_page)
        return cls(page=page, per_page=per_page)
