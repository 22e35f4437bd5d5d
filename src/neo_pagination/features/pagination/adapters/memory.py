"""In-process window sources."""

from typing import Callable, Generic, Iterable, List, Sequence, TypeVar

from ..mixins import PaginatedSourceMixin

T = TypeVar('T')


class SequenceWindowSource(PaginatedSourceMixin[T], Generic[T]):
    """Window source over an in-memory sequence.

    The sequence order is the source order. The sequence is referenced, not
    copied, so later changes to it are visible to later pages.
    """

    def __init__(self, items: Sequence[T]):
        self._items = items

    def count(self) -> int:
        return len(self._items)

    def fetch_window(self, skip: int, take: int) -> List[T]:
        return list(self._items[skip:skip + take])


class CallableWindowSource(PaginatedSourceMixin[T], Generic[T]):
    """Window source backed by a pair of callables.

    Useful for adapting existing repository functions, e.g. a count query
    and a ``LIMIT/OFFSET`` query, without writing a class.
    """

    def __init__(
        self,
        count: Callable[[], int],
        fetch_window: Callable[[int, int], Iterable[T]]
    ):
        self._count = count
        self._fetch_window = fetch_window

    def count(self) -> int:
        return self._count()

    def fetch_window(self, skip: int, take: int) -> Iterable[T]:
        return self._fetch_window(skip, take)
