from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from src.parking_system.parking_system.database.memory_kv_store import InMemoryKeyValueStore
from src.parking_system.parking_system.main import create_app


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 10, 17, 8, 30, 0, tzinfo=timezone.utc)


class SteppingClock:
    """Returns ``start``, then ``start + step``, ... on every call."""

    def __init__(self, start: datetime, step: timedelta = timedelta(minutes=1)):
        self._next = start
        self._step = step

    def __call__(self) -> datetime:
        now = self._next
        self._next = now + self._step
        return now


@pytest.fixture
def clock(fixed_now) -> SteppingClock:
    return SteppingClock(fixed_now)


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def app(store):
    return create_app("config.testing", store=store)


@pytest.fixture
def client(app):
    return app.test_client()
