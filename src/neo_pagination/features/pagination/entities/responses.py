"""Paged result entities."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Dict, Generic, Hashable, Iterable, Iterator, List, Tuple, TypeVar

from .metadata import PageMetadata
from .variants import PageVariant

T = TypeVar('T')
K = TypeVar('K', bound=Hashable)
C = TypeVar('C')


class PageList(Sequence, Generic[T]):
    """Read-only list view over the elements of one page.

    Supports indexing, slicing (returning plain lists), ``len`` and
    iteration, and compares equal to any list or tuple holding the same
    elements in the same order.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[T] = ()):
        self._items: List[T] = list(items)

    def __getitem__(self, index):
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PageList):
            return self._items == other._items
        if isinstance(other, (list, tuple)):
            return self._items == list(other)
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"PageList({self._items!r})"


class Lookup(Mapping, Generic[K, T]):
    """Read-only grouping of page elements by key.

    Keys keep the order in which they first appear in the window and each
    group keeps window order. Indexing a key that has no elements returns an
    empty tuple; ``in`` only reports keys that actually have elements.
    """

    __slots__ = ("_groups",)

    def __init__(self, groups: Dict[K, Tuple[T, ...]]):
        self._groups = dict(groups)

    def __getitem__(self, key: K) -> Tuple[T, ...]:
        return self._groups.get(key, ())

    def __contains__(self, key: object) -> bool:
        return key in self._groups

    def __iter__(self) -> Iterator[K]:
        return iter(self._groups)

    def __len__(self) -> int:
        return len(self._groups)

    def __repr__(self) -> str:
        return f"Lookup({self._groups!r})"


@dataclass(frozen=True, eq=False)
class PagedResult(Generic[T, C]):
    """One page of an ordered source, materialized into a read-only container.

    The container is built once from a single window fetch and ``results``
    always hands back that same object. Only pagination metadata and the
    materialized container are exposed; the source is never reachable
    from a page. Pages compare and hash by identity.
    """

    metadata: PageMetadata
    results: C
    variant: PageVariant = PageVariant.LIST

    @property
    def page(self) -> int:
        """Current page on the results."""
        return self.metadata.page

    @property
    def page_count(self) -> int:
        """Number of result pages."""
        return self.metadata.page_count

    @property
    def per_page(self) -> int:
        """Number of records to read on each page."""
        return self.metadata.per_page

    @property
    def total(self) -> int:
        """Number of records available to read."""
        return self.metadata.total

    @property
    def count(self) -> int:
        """Get number of entries in the materialized container."""
        return len(self.results)

    @property
    def has_items(self) -> bool:
        """Check if the page has any entries."""
        return self.count > 0

    @property
    def page_info(self) -> Dict[str, Any]:
        """Get comprehensive page information."""
        info = self.metadata.to_dict()
        info["items_on_page"] = self.count
        return info
