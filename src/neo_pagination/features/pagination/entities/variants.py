"""Container shapes a page window can be materialized into."""

from enum import Enum


class PageVariant(str, Enum):
    """Closed set of container variants for paged results."""
    ARRAY = "array"
    LIST = "list"
    SET = "set"
    DICT = "dict"
    LOOKUP = "lookup"

    @property
    def is_keyed(self) -> bool:
        """Check if the variant needs a key selector."""
        return self in (PageVariant.DICT, PageVariant.LOOKUP)
