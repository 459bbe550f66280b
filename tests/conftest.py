"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests: an in-memory SQLite
database seeded with the test schema, a record source over users, and
request/registry builders.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from serverside_grid.adapters.sqlalchemy_source import SqlAlchemyRecordSource
from serverside_grid.domain.record_collection import RecordCollection
from serverside_grid.registry.filter_registry import CustomFilterRegistry
from serverside_grid.stages.column_resolver import ColumnResolver

from tests.fixtures.models import Base, User, seed

USER_COLUMNS = ["id", "name", "email", "status", "company.name"]
USER_SEARCHABLE = ["users.name", "users.email"]


@pytest.fixture
def engine() -> Iterator[Engine]:
    """In-memory SQLite engine with schema and seed data."""
    engine = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)
    with Session(engine) as session:
        seed(session)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine: Engine) -> Iterator[Session]:
    """Open session on the seeded database."""
    with Session(engine) as session:
        yield session


@pytest.fixture
def source(session: Session) -> SqlAlchemyRecordSource:
    """Record source listing users."""
    return SqlAlchemyRecordSource(session, User)


@pytest.fixture
def base_records() -> RecordCollection:
    """Unfiltered collection over users."""
    return RecordCollection.all(User)


@pytest.fixture
def resolver() -> ColumnResolver:
    """Resolver for the standard user grid columns."""
    return ColumnResolver(USER_COLUMNS)


@pytest.fixture
def empty_registry() -> CustomFilterRegistry:
    """Frozen registry with no overrides."""
    return CustomFilterRegistry().freeze()


@pytest.fixture
def sample_config_path() -> Path:
    """Path to sample configuration file."""
    return Path(__file__).parent / "fixtures" / "sample_config.yaml"
