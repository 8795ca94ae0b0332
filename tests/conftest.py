"""Shared pytest fixtures for groupql unit and integration tests."""
from __future__ import annotations

import uuid
from datetime import datetime, timedelta, timezone

import pytest

from groupql.compile.builder import QueryBuilder
from tests.fixtures import SELECTED_FIELDS, UNIT_TABLE


@pytest.fixture
def builder() -> QueryBuilder:
    """A fresh builder selecting every field from the test table."""
    return QueryBuilder.create().select(SELECTED_FIELDS).from_(UNIT_TABLE)


@pytest.fixture
def from_time() -> datetime:
    return datetime(2025, 3, 14, 15, 9, 26, 535897, tzinfo=timezone.utc)


@pytest.fixture
def to_time(from_time: datetime) -> datetime:
    return from_time + timedelta(days=1)


@pytest.fixture
def guids() -> list[str]:
    return [str(uuid.uuid4()), str(uuid.uuid4())]
