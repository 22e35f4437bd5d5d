"""Materialization strategies that fold a page window into a container.

Each strategy is a pure function of the ordered window (and, for keyed
variants, a key selector). Window fetching and metadata belong to the builder.
"""

from types import MappingProxyType
from typing import Any, Callable, Dict, Hashable, List, Mapping, Optional, Sequence, Tuple, TypeVar

from ....core.exceptions import (
    DuplicateKeyError,
    MissingKeySelectorError,
    UnexpectedKeySelectorError,
)
from ..entities.responses import Lookup, PageList
from ..entities.variants import PageVariant

T = TypeVar('T')
K = TypeVar('K', bound=Hashable)

KeySelector = Callable[[T], K]


def to_array(window: Sequence[T]) -> Tuple[T, ...]:
    """Copy the window into an immutable sequence."""
    return tuple(window)


def to_list(window: Sequence[T]) -> PageList:
    """Copy the window into a read-only list view."""
    return PageList(window)


def to_set(window: Sequence[T]) -> frozenset:
    """Collapse the window into a set.

    Elements that compare equal end up as a single entry, so the set can be
    smaller than the window.
    """
    return frozenset(window)


def to_dict(window: Sequence[T], key_selector: KeySelector) -> Mapping[K, T]:
    """Map each element of the window by its key.

    Raises:
        DuplicateKeyError: If two elements produce the same key
    """
    entries: Dict[K, T] = {}
    for item in window:
        key = key_selector(item)
        if key in entries:
            raise DuplicateKeyError(key)
        entries[key] = item
    return MappingProxyType(entries)


def to_lookup(window: Sequence[T], key_selector: KeySelector) -> Lookup:
    """Group the window by key, keeping window order inside every group."""
    groups: Dict[K, List[T]] = {}
    for item in window:
        groups.setdefault(key_selector(item), []).append(item)
    return Lookup({key: tuple(items) for key, items in groups.items()})


_PLAIN_FOLDS: Dict[PageVariant, Callable[[Sequence[Any]], Any]] = {
    PageVariant.ARRAY: to_array,
    PageVariant.LIST: to_list,
    PageVariant.SET: to_set,
}

_KEYED_FOLDS: Dict[PageVariant, Callable[[Sequence[Any], KeySelector], Any]] = {
    PageVariant.DICT: to_dict,
    PageVariant.LOOKUP: to_lookup,
}


def check_key_selector(variant: PageVariant, key_selector: Optional[KeySelector]) -> None:
    """Ensure the key selector matches the variant before any source access."""
    variant = PageVariant(variant)
    if variant.is_keyed and key_selector is None:
        raise MissingKeySelectorError(
            f"The '{variant.value}' variant requires a key selector",
            details={"variant": variant.value}
        )
    if not variant.is_keyed and key_selector is not None:
        raise UnexpectedKeySelectorError(
            f"The '{variant.value}' variant does not take a key selector",
            details={"variant": variant.value}
        )


def materialize(
    window: Sequence[T],
    variant: PageVariant = PageVariant.LIST,
    key_selector: Optional[KeySelector] = None
) -> Any:
    """Fold a window into the container shape of the given variant.

    Args:
        window: Ordered elements of one page
        variant: Target container shape
        key_selector: Key extraction function for keyed variants

    Returns:
        The materialized container
    """
    variant = PageVariant(variant)
    check_key_selector(variant, key_selector)

    if variant.is_keyed:
        return _KEYED_FOLDS[variant](window, key_selector)
    return _PLAIN_FOLDS[variant](window)
