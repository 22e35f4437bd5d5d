"""Page metadata and the calculator that derives it."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ....core.exceptions import InvalidSourceCountError
from .requests import validate_page, validate_per_page


@dataclass(frozen=True)
class PageMetadata:
    """Pagination metadata for one page of an ordered source.

    ``skip`` may exceed ``total`` when a page past the end is requested;
    such a page simply has an empty window.
    """

    page: int
    per_page: int
    total: int
    page_count: int
    skip: int

    @classmethod
    def compute(cls, total: int, page: int, per_page: int) -> "PageMetadata":
        """Derive metadata from the source total and the requested page."""
        validate_page(page)
        validate_per_page(per_page)
        if isinstance(total, bool) or not isinstance(total, int) or total < 0:
            raise InvalidSourceCountError(total)

        return cls(
            page=page,
            per_page=per_page,
            total=total,
            # Ceiling division on integers; never truncate before rounding up
            page_count=(total + per_page - 1) // per_page,
            skip=(page - 1) * per_page,
        )

    @property
    def has_next(self) -> bool:
        """Check if there's a next page."""
        return self.page < self.page_count

    @property
    def has_prev(self) -> bool:
        """Check if there's a previous page."""
        return self.page > 1

    @property
    def next_page(self) -> Optional[int]:
        """Get next page number."""
        return self.page + 1 if self.has_next else None

    @property
    def prev_page(self) -> Optional[int]:
        """Get previous page number."""
        return self.page - 1 if self.has_prev else None

    @property
    def is_out_of_range(self) -> bool:
        """Check if the page lies past the last page."""
        return self.page > max(self.page_count, 1)

    @property
    def expected_window_size(self) -> int:
        """Number of elements the window should hold if the total is still accurate."""
        return max(0, min(self.per_page, self.total - self.skip))

    def to_dict(self) -> Dict[str, Any]:
        """Get comprehensive page information."""
        return {
            "current_page": self.page,
            "per_page": self.per_page,
            "total_items": self.total,
            "total_pages": self.page_count,
            "has_next": self.has_next,
            "has_prev": self.has_prev,
            "next_page": self.next_page,
            "prev_page": self.prev_page,
            "offset": self.skip,
        }


def calculate_page_metadata(total: int, page: int, per_page: int) -> PageMetadata:
    """Calculate pagination metadata.

    Args:
        total: Number of elements in the source
        page: Requested page (1-based)
        per_page: Maximum number of elements per page

    Returns:
        Page metadata with skip offset and page count

    Raises:
        InvalidPageError: If page is below 1
        InvalidPageSizeError: If per_page is below 1
        InvalidSourceCountError: If total is negative
    """
    return PageMetadata.compute(total, page, per_page)
