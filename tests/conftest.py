"""Shared test fixtures."""

from datetime import UTC, datetime

import pytest
from sqlalchemy import create_engine

from key_locked_storage import InMemoryStorage, SQLStorage


class FakeClock:
    """Clock that only moves when told to."""

    def __init__(self, now: datetime | None = None) -> None:
        self.current = now or datetime(2026, 1, 1, 12, 0, tzinfo=UTC)

    def now(self) -> datetime:
        return self.current


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def engine():
    # In-memory SQLite: every connection from this engine sees the same database
    engine = create_engine("sqlite://")
    yield engine
    engine.dispose()


@pytest.fixture
def memory_storage():
    return InMemoryStorage()


@pytest.fixture
def sql_storage(engine, clock):
    return SQLStorage(engine, clock=clock)


@pytest.fixture(params=["memory", "sql"])
def storage(request):
    """Every backend, so contract tests run against each of them."""
    return request.getfixturevalue(f"{request.param}_storage")
