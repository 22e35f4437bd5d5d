"""SQL query window source.

Adapts a pair of SQL queries to the asynchronous window source protocol.
The database object only needs ``fetch_one(query, params)`` and
``fetch_all(query, params)`` coroutines, as exposed by the platform's
database repositories over asyncpg.
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Protocol, Sequence

from ....core.exceptions import UnorderedSourceError
from ..entities import SortField

logger = logging.getLogger(__name__)


class QueryExecutor(Protocol):
    """Minimal async database interface used by QueryWindowSource."""

    async def fetch_one(self, query: str, params: List[Any]) -> Optional[Dict[str, Any]]:
        ...

    async def fetch_all(self, query: str, params: List[Any]) -> List[Dict[str, Any]]:
        ...


class QueryWindowSource:
    """Asynchronous window source over a base query and a count query.

    Both queries may use a ``{schema}`` placeholder and share the same
    positional parameters (``$1``, ``$2``, ...). The window query appends the
    ORDER BY clause and ``LIMIT``/``OFFSET`` parameters after them.
    """

    def __init__(
        self,
        db: QueryExecutor,
        base_query: str,
        count_query: str,
        sort_fields: Sequence[SortField],
        params: Optional[Sequence[Any]] = None,
        schema: Optional[str] = None,
        row_mapper: Optional[Callable[[Any], Any]] = None
    ):
        if not sort_fields:
            raise UnorderedSourceError(
                "QueryWindowSource requires at least one sort field",
                details={"base_query": base_query}
            )
        self._db = db
        self._base_query = base_query
        self._count_query = count_query
        self._sort_fields = tuple(sort_fields)
        self._params = list(params or [])
        self._schema = schema
        self._row_mapper = row_mapper

    def _format(self, query: str) -> str:
        if self._schema is None:
            return query
        return query.format(schema=self._schema)

    def get_order_by_sql(self) -> str:
        """Get SQL ORDER BY clause."""
        clauses = [sort_field.to_sql() for sort_field in self._sort_fields]
        return f"ORDER BY {', '.join(clauses)}"

    def build_window_query(self, skip: int, take: int) -> tuple[str, List[Any]]:
        """Build the paginated query and its parameters.

        Returns:
            Tuple of (query, parameters)
        """
        limit_param = len(self._params) + 1
        query = (
            f"{self._format(self._base_query)} {self.get_order_by_sql()} "
            f"LIMIT ${limit_param} OFFSET ${limit_param + 1}"
        )
        return query, self._params + [take, skip]

    async def count(self) -> int:
        row = await self._db.fetch_one(self._format(self._count_query), list(self._params))
        return row["count"] if row else 0

    async def fetch_window(self, skip: int, take: int) -> List[Any]:
        query, params = self.build_window_query(skip, take)
        logger.debug(f"Fetching window skip={skip} take={take}")
        rows = await self._db.fetch_all(query, params)
        if self._row_mapper is None:
            return list(rows)
        return [self._row_mapper(row) for row in rows]
