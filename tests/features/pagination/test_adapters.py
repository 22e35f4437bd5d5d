"""Tests for concrete window sources and the source mixin."""

import pytest

from neo_pagination.core.exceptions import UnorderedSourceError
from neo_pagination.features.pagination import (
    AsyncWindowSource,
    CallableWindowSource,
    PageVariant,
    PaginatedSourceMixin,
    SequenceWindowSource,
    SortField,
    SortOrder,
    QueryWindowSource,
    WindowSource,
    build_page_async,
)


class TestSequenceWindowSource:
    """Test cases for the in-memory source."""

    def test_implements_protocol(self, sequence_source):
        assert isinstance(sequence_source, WindowSource)

    def test_count_and_window(self, sequence_source, sample_items):
        assert sequence_source.count() == 23
        assert sequence_source.fetch_window(20, 5) == sample_items[20:]
        assert sequence_source.fetch_window(40, 5) == []

    def test_fluent_constructors(self, sequence_source, sample_items):
        assert sequence_source.to_paged_list(page=2, per_page=10).results == sample_items[10:20]
        assert sequence_source.to_paged_array(per_page=3).results == tuple(sample_items[:3])
        assert sequence_source.to_paged_set(per_page=3).results == frozenset(sample_items[:3])

    def test_fluent_keyed_constructors(self):
        source = SequenceWindowSource(["apple", "avocado", "banana", "cherry"])

        by_word = source.to_paged_dict(lambda word: word, per_page=2)
        by_letter = source.to_paged_lookup(lambda word: word[0], page=1, per_page=3)

        assert list(by_word.results) == ["apple", "avocado"]
        assert by_letter.results["a"] == ("apple", "avocado")
        assert by_letter.results["b"] == ("banana",)
        assert by_letter.page_count == 2


class TestCallableWindowSource:
    """Test cases for the callable-backed source."""

    def test_delegates_to_callables(self):
        rows = list(range(50))
        calls = []

        def fetch(skip, take):
            calls.append((skip, take))
            return rows[skip:skip + take]

        source = CallableWindowSource(count=lambda: len(rows), fetch_window=fetch)
        result = source.to_paged_list(page=3, per_page=20)

        assert calls == [(40, 20)]
        assert result.results == rows[40:]
        assert result.page_count == 3


class TestPaginatedSourceMixin:
    """Test cases for mixing the constructors into a custom source."""

    def test_custom_source(self):
        class EvenNumbers(PaginatedSourceMixin[int]):
            def count(self):
                return 10

            def fetch_window(self, skip, take):
                return [value * 2 for value in range(skip, min(skip + take, 10))]

        result = EvenNumbers().to_paged_list(page=2, per_page=4)

        assert result.results == [8, 10, 12, 14]
        assert result.variant == PageVariant.LIST


class TestQueryWindowSource:
    """Test cases for the SQL query source."""

    def _source(self, mock_database, **kwargs):
        return QueryWindowSource(
            mock_database,
            base_query="SELECT id, name FROM {schema}.users WHERE tenant_id = $1",
            count_query="SELECT COUNT(*) AS count FROM {schema}.users WHERE tenant_id = $1",
            sort_fields=[SortField("created_at", SortOrder.DESC), SortField("id")],
            params=["tenant-1"],
            schema="tenant_acme",
            **kwargs
        )

    def test_requires_ordering(self, mock_database):
        with pytest.raises(UnorderedSourceError):
            QueryWindowSource(mock_database, "SELECT * FROM users", "SELECT COUNT(*) FROM users", [])

    def test_implements_protocol(self, mock_database):
        assert isinstance(self._source(mock_database), AsyncWindowSource)

    def test_build_window_query(self, mock_database):
        query, params = self._source(mock_database).build_window_query(skip=40, take=20)

        assert query == (
            "SELECT id, name FROM tenant_acme.users WHERE tenant_id = $1 "
            "ORDER BY created_at DESC NULLS LAST, id ASC NULLS LAST "
            "LIMIT $2 OFFSET $3"
        )
        assert params == ["tenant-1", 20, 40]

    @pytest.mark.asyncio
    async def test_count(self, mock_database):
        mock_database.fetch_one.return_value = {"count": 42}

        assert await self._source(mock_database).count() == 42
        mock_database.fetch_one.assert_awaited_once_with(
            "SELECT COUNT(*) AS count FROM tenant_acme.users WHERE tenant_id = $1",
            ["tenant-1"]
        )

    @pytest.mark.asyncio
    async def test_count_without_row(self, mock_database):
        mock_database.fetch_one.return_value = None

        assert await self._source(mock_database).count() == 0

    @pytest.mark.asyncio
    async def test_paged_through_builder(self, mock_database):
        rows = [{"id": index, "name": f"user-{index}"} for index in range(10, 20)]
        mock_database.fetch_one.return_value = {"count": 42}
        mock_database.fetch_all.return_value = rows

        source = self._source(mock_database, row_mapper=lambda row: row["name"])
        result = await build_page_async(source, page=2, per_page=10)

        args, _ = mock_database.fetch_all.call_args
        assert args[1] == ["tenant-1", 10, 10]
        assert result.results == [f"user-{index}" for index in range(10, 20)]
        assert result.page_count == 5
