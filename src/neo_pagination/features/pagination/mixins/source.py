"""Source mixin exposing the page constructors as methods.

Any class that implements ``count`` and ``fetch_window`` can mix this in and
be paged fluently, e.g. ``source.to_paged_list(page=2, per_page=20)``.
"""

from typing import Generic, Optional, TypeVar

from ..entities import PagedResult
from ..services import builder
from ..strategies import KeySelector

T = TypeVar('T')


class PaginatedSourceMixin(Generic[T]):
    """Mixin adding ``to_paged_*`` constructors to a window source.

    Requires implementing class to have:
    - count(): Total number of elements
    - fetch_window(skip, take): Ordered window of elements
    """

    def to_paged_array(self, page: Optional[int] = None, per_page: Optional[int] = None) -> PagedResult:
        """Page this source into a tuple."""
        return builder.to_paged_array(self, page, per_page)

    def to_paged_list(self, page: Optional[int] = None, per_page: Optional[int] = None) -> PagedResult:
        """Page this source into a list."""
        return builder.to_paged_list(self, page, per_page)

    def to_paged_set(self, page: Optional[int] = None, per_page: Optional[int] = None) -> PagedResult:
        """Page this source into a set; equal elements collapse."""
        return builder.to_paged_set(self, page, per_page)

    def to_paged_dict(
        self,
        key_selector: KeySelector,
        page: Optional[int] = None,
        per_page: Optional[int] = None
    ) -> PagedResult:
        """Page this source into a read-only dict keyed by ``key_selector``."""
        return builder.to_paged_dict(self, key_selector, page, per_page)

    def to_paged_lookup(
        self,
        key_selector: KeySelector,
        page: Optional[int] = None,
        per_page: Optional[int] = None
    ) -> PagedResult:
        """Page this source into groups keyed by ``key_selector``."""
        return builder.to_paged_lookup(self, key_selector, page, per_page)
