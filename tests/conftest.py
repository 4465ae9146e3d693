"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Generator
from typing import Any
from unittest.mock import MagicMock

import pytest
import strawberry

from bookshelf.store import AuthorRecord, BookRecord, RecordStore, reset_store


@pytest.fixture
def record_store() -> RecordStore:
    """A small store with a gap in the book ids."""
    return RecordStore(
        authors=[
            AuthorRecord(id=1, name="J.K. Rowling"),
            AuthorRecord(id=2, name="Tolkien"),
        ],
        books=[
            BookRecord(id=1, name="Chamber of Secrets", author_id=1),
            BookRecord(id=4, name="Fellowship", author_id=2),
        ],
    )


@pytest.fixture
def mock_info(record_store: RecordStore) -> Any:
    """Create a mock GraphQL info object carrying the record store."""
    info = MagicMock(spec=strawberry.Info)
    info.context = {"request": MagicMock(), "store": record_store}
    return info


@pytest.fixture(autouse=True)
def reset_shared_store() -> Generator[None, None, None]:
    """Start and finish every test without a shared store."""
    reset_store()
    yield
    reset_store()


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")  # type: ignore[reportUnknownMemberType]
    config.addinivalue_line("markers", "unit: mark test as unit test")  # type: ignore[reportUnknownMemberType]
