"""Page builder and convenience constructors.

``build_page`` is the single entry point: it validates the request, asks the
source for its total, computes metadata, fetches exactly one window and folds
it into the chosen container. The ``to_paged_*`` functions are thin wrappers
that fix the variant up front.

The count and the window are two separate calls into the source and are not
transactional. A source that changes in between can produce a window that
disagrees with the reported total; this is logged, not corrected.
"""

import inspect
import logging
from itertools import islice
from typing import Iterable, List, Optional, TypeVar

from ....config.settings import PaginationSettings
from ....core.exceptions import AsyncSourceError
from ..entities import PageMetadata, PageRequest, PagedResult, PageVariant
from ..protocols import AsyncWindowSource, WindowSource
from ..strategies import KeySelector, check_key_selector, materialize

logger = logging.getLogger(__name__)

T = TypeVar('T')


def _prepare(
    variant: PageVariant,
    key_selector: Optional[KeySelector],
    page: Optional[int],
    per_page: Optional[int],
    settings: Optional[PaginationSettings]
) -> PageRequest:
    """Validate everything that can be checked before touching the source."""
    check_key_selector(variant, key_selector)
    return PageRequest.resolve(page, per_page, settings)


def _read_window(window: Iterable[T], metadata: PageMetadata) -> List[T]:
    """Copy a fetched window, dropping anything past the page size."""
    items = list(islice(window, metadata.per_page + 1))
    if len(items) > metadata.per_page:
        logger.warning(
            f"Window source returned more than {metadata.per_page} elements "
            f"for skip={metadata.skip}; extra elements dropped"
        )
        items = items[:metadata.per_page]

    expected = metadata.expected_window_size
    if len(items) != expected:
        logger.warning(
            f"Window size {len(items)} does not match expected {expected} "
            f"(total={metadata.total}, skip={metadata.skip}); "
            f"source may have changed between count and fetch"
        )
    return items


def _assemble(
    window: Iterable[T],
    metadata: PageMetadata,
    variant: PageVariant,
    key_selector: Optional[KeySelector]
) -> PagedResult:
    items = _read_window(window, metadata)
    results = materialize(items, variant, key_selector)
    logger.debug(
        f"Built {variant.value} page {metadata.page}/{metadata.page_count} "
        f"with {len(items)} of {metadata.total} elements"
    )
    return PagedResult(metadata=metadata, results=results, variant=variant)


def build_page(
    source: WindowSource[T],
    key_selector: Optional[KeySelector] = None,
    page: Optional[int] = None,
    per_page: Optional[int] = None,
    variant: PageVariant = PageVariant.LIST,
    settings: Optional[PaginationSettings] = None
) -> PagedResult:
    """Build one page of an ordered source.

    Args:
        source: Ordered, countable window source
        key_selector: Key extraction function, required for keyed variants only
        page: Requested page (1-based); defaults to settings.default_page
        per_page: Page size; defaults to settings.default_per_page
        variant: Container shape for the results
        settings: Settings to use instead of the environment ones

    Returns:
        Paged result with metadata and materialized container

    Raises:
        InvalidPageError: If page is below 1
        InvalidPageSizeError: If per_page is below 1 or above max_per_page
        MissingKeySelectorError: If a keyed variant has no key selector
        UnexpectedKeySelectorError: If a non-keyed variant gets a key selector
        DuplicateKeyError: If the dict variant sees a repeated key
        AsyncSourceError: If the source returns awaitables
    """
    variant = PageVariant(variant)
    request = _prepare(variant, key_selector, page, per_page, settings)

    total = source.count()
    if inspect.isawaitable(total):
        if inspect.iscoroutine(total):
            total.close()
        raise AsyncSourceError(
            f"{type(source).__name__}.count() is asynchronous; use build_page_async",
            details={"source": type(source).__name__}
        )

    metadata = PageMetadata.compute(total, request.page, request.per_page)
    window = source.fetch_window(metadata.skip, metadata.per_page)
    return _assemble(window, metadata, variant, key_selector)


async def build_page_async(
    source: AsyncWindowSource[T],
    key_selector: Optional[KeySelector] = None,
    page: Optional[int] = None,
    per_page: Optional[int] = None,
    variant: PageVariant = PageVariant.LIST,
    settings: Optional[PaginationSettings] = None
) -> PagedResult:
    """Build one page of an asynchronous source.

    Same contract as :func:`build_page`; the only await points are the
    source's ``count`` and ``fetch_window`` calls.
    """
    variant = PageVariant(variant)
    request = _prepare(variant, key_selector, page, per_page, settings)

    metadata = PageMetadata.compute(await source.count(), request.page, request.per_page)
    window = await source.fetch_window(metadata.skip, metadata.per_page)
    return _assemble(window, metadata, variant, key_selector)


def to_paged_array(
    source: WindowSource[T],
    page: Optional[int] = None,
    per_page: Optional[int] = None
) -> PagedResult:
    """Create a page whose results are stored in a tuple."""
    return build_page(source, page=page, per_page=per_page, variant=PageVariant.ARRAY)


def to_paged_list(
    source: WindowSource[T],
    page: Optional[int] = None,
    per_page: Optional[int] = None
) -> PagedResult:
    """Create a page whose results are stored in a list."""
    return build_page(source, page=page, per_page=per_page, variant=PageVariant.LIST)


def to_paged_set(
    source: WindowSource[T],
    page: Optional[int] = None,
    per_page: Optional[int] = None
) -> PagedResult:
    """Create a page whose results are stored in a set.

    Equal elements collapse into one entry, so a page can hold fewer
    entries than its window.
    """
    return build_page(source, page=page, per_page=per_page, variant=PageVariant.SET)


def to_paged_dict(
    source: WindowSource[T],
    key_selector: KeySelector,
    page: Optional[int] = None,
    per_page: Optional[int] = None
) -> PagedResult:
    """Create a page whose results are stored in a read-only dict keyed by ``key_selector``."""
    return build_page(source, key_selector, page, per_page, PageVariant.DICT)


def to_paged_lookup(
    source: WindowSource[T],
    key_selector: KeySelector,
    page: Optional[int] = None,
    per_page: Optional[int] = None
) -> PagedResult:
    """Create a page whose results are grouped by ``key_selector``."""
    return build_page(source, key_selector, page, per_page, PageVariant.LOOKUP)
