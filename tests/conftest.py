"""Pytest configuration and fixtures for neo-pagination tests."""

from collections import namedtuple
from unittest.mock import AsyncMock, Mock

import pytest

from neo_pagination.config import PaginationSettings, get_settings
from neo_pagination.features.pagination import SequenceWindowSource


Record = namedtuple("Record", ["key", "value"])


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test read settings fresh from the environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def default_settings():
    """Settings with the documented defaults, independent of the environment."""
    return PaginationSettings(default_page=1, default_per_page=100, max_per_page=None)


@pytest.fixture
def sample_items():
    """Ordered source data with 23 distinct elements."""
    return [f"item-{index:02d}" for index in range(23)]


@pytest.fixture
def sequence_source(sample_items):
    """In-memory window source over sample_items."""
    return SequenceWindowSource(sample_items)


@pytest.fixture
def mock_source():
    """Mock window source; configure count/fetch_window per test."""
    source = Mock()
    source.count = Mock(return_value=0)
    source.fetch_window = Mock(return_value=[])
    return source


@pytest.fixture
def mock_async_source():
    """Mock asynchronous window source."""
    source = Mock()
    source.count = AsyncMock(return_value=0)
    source.fetch_window = AsyncMock(return_value=[])
    return source


@pytest.fixture
def mock_database():
    """Mock database exposing fetch_one/fetch_all coroutines."""
    mock_db = AsyncMock()
    mock_db.fetch_one = AsyncMock()
    mock_db.fetch_all = AsyncMock()
    return mock_db


@pytest.fixture
def grouped_records():
    """Window with a repeated key, in source order."""
    return [Record(1, "a"), Record(1, "b"), Record(2, "c")]
