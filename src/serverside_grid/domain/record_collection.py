"""
Record Collection - Immutable Composable Query.

Wraps a SQLAlchemy ``Select`` over one mapped entity. Every method returns
a new collection; the statement itself is never executed here.

Design Notes:
    - Value semantics: stages can never mutate the collection they receive
    - Joined relationships are tracked so a relationship is joined once
      even when both a filter and a sort use it
    - Entity scopes are classmethods returning a SQL criterion
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, FrozenSet, Iterable, Optional, Type

from sqlalchemy import bindparam, func, inspect, or_, select
from sqlalchemy.orm import QueryableAttribute
from sqlalchemy.sql import Select
from sqlalchemy.sql.elements import ColumnElement

SEARCH_PARAM = "search"


@dataclass(frozen=True)
class RecordCollection:
    """Lazily evaluated query over a mapped entity."""

    model: Type[Any]
    statement: Select
    joined: FrozenSet[str] = field(default_factory=frozenset)

    @classmethod
    def all(cls, model: Type[Any]) -> "RecordCollection":
        """Unfiltered collection over every row of ``model``."""
        return cls(model=model, statement=select(model))

    def where(self, criterion: ColumnElement) -> "RecordCollection":
        return replace(self, statement=self.statement.where(criterion))

    def where_equals(self, column: ColumnElement, value: Any) -> "RecordCollection":
        return self.where(column == value)

    def where_like_any(
        self,
        columns: Iterable[ColumnElement],
        term: str,
        case_insensitive: bool = False,
    ) -> "RecordCollection":
        """
        OR together a wildcard-wrapped match of ``term`` on every column.

        The term is bound once and shared by every LIKE clause.
        """
        pattern = bindparam(SEARCH_PARAM, f"%{term}%")
        if case_insensitive:
            clauses = [column.ilike(pattern) for column in columns]
        else:
            clauses = [column.like(pattern) for column in columns]
        if not clauses:
            return self
        return self.where(or_(*clauses))

    def join(self, relationship: str) -> "RecordCollection":
        """Inner join a declared relationship of the entity (once)."""
        if relationship in self.joined:
            return self
        target = getattr(self.model, relationship)
        return replace(
            self,
            statement=self.statement.join(target),
            joined=self.joined | {relationship},
        )

    def order_by(self, column: ColumnElement, descending: bool = False) -> "RecordCollection":
        clause = column.desc() if descending else column.asc()
        return replace(self, statement=self.statement.order_by(clause))

    def offset_limit(self, offset: int, limit: int) -> "RecordCollection":
        return replace(self, statement=self.statement.offset(offset).limit(limit))

    def has_scope(self, name: str) -> bool:
        """True if the entity exposes a callable scope named ``name``."""
        attr = getattr(self.model, name, None)
        return callable(attr) and not isinstance(attr, QueryableAttribute)

    def apply_scope(self, name: str, value: Optional[Any]) -> "RecordCollection":
        """Narrow by the criterion returned from ``model.<name>(value)``."""
        criterion = getattr(self.model, name)(value)
        return self.where(criterion)

    def count_statement(self) -> Select:
        """
        Count rows with duplicate elimination.

        Joins can multiply rows, so distinct primary keys are counted.
        """
        primary_key = inspect(self.model).primary_key
        distinct_keys = (
            self.statement.with_only_columns(*primary_key)
            .order_by(None)
            .distinct()
            .subquery()
        )
        return select(func.count()).select_from(distinct_keys)

    def full_count_statement(self) -> Select:
        """Count of every row of the entity, ignoring all narrowing."""
        return select(func.count()).select_from(inspect(self.model).local_table)
