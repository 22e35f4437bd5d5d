"""Window source protocols consumed by the page builder."""

from typing import Iterable, Protocol, TypeVar, runtime_checkable

T = TypeVar('T', covariant=True)


@runtime_checkable
class WindowSource(Protocol[T]):
    """Protocol for ordered, countable data sources.

    Implementations must return windows in a stable order: two calls with
    disjoint ranges and no intervening mutation yield the same relative
    order as one full scan.
    """

    def count(self) -> int:
        """Count all elements of the source.

        Returns:
            Total number of elements, independent of any window
        """
        ...

    def fetch_window(self, skip: int, take: int) -> Iterable[T]:
        """Fetch an ordered window of the source.

        Args:
            skip: Number of leading elements to skip
            take: Maximum number of elements to return

        Returns:
            At most ``take`` elements starting at ``skip``; fewer (possibly
            none) when the window runs past the end of the source
        """
        ...


@runtime_checkable
class AsyncWindowSource(Protocol[T]):
    """Protocol for ordered, countable sources that perform I/O asynchronously.

    Runtime checks only look at method names, so an async source also passes
    ``isinstance(source, WindowSource)``. Page it with ``build_page_async``;
    ``build_page`` rejects it with AsyncSourceError.
    """

    async def count(self) -> int:
        """Count all elements of the source."""
        ...

    async def fetch_window(self, skip: int, take: int) -> Iterable[T]:
        """Fetch at most ``take`` elements starting at ``skip``, in stable order."""
        ...


@runtime_checkable
class Paged(Protocol):
    """General set of properties needed to render a pager without looking at the data."""

    @property
    def page(self) -> int:
        """Current page on the results."""
        ...

    @property
    def page_count(self) -> int:
        """Number of result pages."""
        ...

    @property
    def per_page(self) -> int:
        """Number of records to read on each page."""
        ...

    @property
    def total(self) -> int:
        """Number of records available to read."""
        ...
