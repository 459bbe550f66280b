"""
SQLAlchemy Record Source.

Connects the grid pipeline to a SQLAlchemy session and one declarative
model. The pipeline only composes statements; this adapter is the single
place they are executed.

Design Notes:
    - Entity metadata comes from the mapper (``sqlalchemy.inspect``)
    - Column expressions are table columns, so they render qualified
      (``users.status``, ``companies.name``)
    - Session lifecycle belongs to the caller
"""

from __future__ import annotations

import logging
from typing import Any, List, Type

from sqlalchemy import Table, inspect
from sqlalchemy.orm import Session
from sqlalchemy.sql.elements import ColumnElement

from serverside_grid.domain.record_collection import RecordCollection
from serverside_grid.resilience.errors import ColumnLookupError

logger = logging.getLogger(__name__)


class EntityMetadata:
    """Relationship and column lookups for a mapped entity."""

    def __init__(self, model: Type[Any]) -> None:
        self.model = model
        self._mapper = inspect(model)

    @property
    def table(self) -> Table:
        return self._mapper.local_table

    @property
    def table_name(self) -> str:
        return self.table.name

    def relationship_names(self) -> List[str]:
        """Names of all relationships declared on the entity."""
        return [rel.key for rel in self._mapper.relationships]

    def is_association(self, name: str) -> bool:
        return name in self._mapper.relationships

    def related_table(self, relationship: str) -> Table:
        """Table of the entity on the far side of ``relationship``."""
        if not self.is_association(relationship):
            raise ColumnLookupError(
                f"{self.model.__name__} has no relationship {relationship!r}"
            )
        return self._mapper.relationships[relationship].mapper.local_table

    def related_column(self, relationship: str, attribute: str) -> ColumnElement:
        """Column ``attribute`` of the related table, e.g. ``companies.name``."""
        table = self.related_table(relationship)
        if attribute not in table.c:
            raise ColumnLookupError(
                f"Table {table.name!r} has no column {attribute!r}"
            )
        return table.c[attribute]

    def column(self, name: str) -> ColumnElement:
        """Column ``name`` of the entity's own table."""
        if name not in self.table.c:
            raise ColumnLookupError(
                f"Table {self.table_name!r} has no column {name!r}"
            )
        return self.table.c[name]


class SqlAlchemyRecordSource:
    """
    Record source backed by a SQLAlchemy session.

    Usage:
        with Session(engine) as session:
            source = SqlAlchemyRecordSource(session, User)
            grid = GridQuery(source, request, columns=["id", "name"])
    """

    def __init__(self, session: Session, model: Type[Any]) -> None:
        """
        Initialize record source.

        Args:
            session: Open SQLAlchemy session
            model: Declarative model the grid lists
        """
        self.session = session
        self.model = model
        self.metadata = EntityMetadata(model)

    def base(self) -> RecordCollection:
        """Fresh, unfiltered collection over the entity."""
        return RecordCollection.all(self.model)

    def fetch(self, records: RecordCollection) -> List[Any]:
        """Execute the collection and return entity instances."""
        return list(self.session.scalars(records.statement))

    def count(self, records: RecordCollection) -> int:
        """Count distinct rows matched by the collection."""
        return self.session.scalar(records.count_statement()) or 0

    def full_count(self) -> int:
        """Count every row of the entity."""
        return self.session.scalar(self.base().full_count_statement()) or 0
