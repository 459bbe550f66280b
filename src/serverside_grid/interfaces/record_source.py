"""
Record Source Protocol.

Defines the data access abstraction the grid depends on: a base
collection, entity metadata, and execution of rows and counts.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Protocol

if TYPE_CHECKING:
    from sqlalchemy import Table
    from sqlalchemy.sql.elements import ColumnElement

    from serverside_grid.domain.record_collection import RecordCollection


class EntityMetadataProtocol(Protocol):
    """Relationship and column lookups for the listed entity."""

    @property
    def table_name(self) -> str:
        ...

    def is_association(self, name: str) -> bool:
        ...

    def related_table(self, relationship: str) -> "Table":
        ...

    def related_column(self, relationship: str, attribute: str) -> "ColumnElement":
        ...

    def column(self, name: str) -> "ColumnElement":
        ...


class RecordSourceProtocol(Protocol):
    """Protocol for record sources."""

    @property
    def metadata(self) -> EntityMetadataProtocol:
        ...

    def base(self) -> "RecordCollection":
        ...

    def fetch(self, records: "RecordCollection") -> List[Any]:
        ...

    def count(self, records: "RecordCollection") -> int:
        ...

    def full_count(self) -> int:
        ...
