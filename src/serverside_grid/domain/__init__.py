"""
Domain Layer - Request/Response Models and the Record Collection.

Entities:
    - ViewRequest: Requested window, search, sort directives and filters
    - SortDirective, HeaderFilter, MenuFilter: Parts of a ViewRequest
    - GridResponse: Rows plus total and matching counts

Record Collection:
    - RecordCollection: Immutable wrapper around a SQLAlchemy Select

Design Principles:
    - Immutable (frozen models, frozen dataclass)
    - Lenient numeric coercion at the edge, strict lookups in the core
"""

from serverside_grid.domain.entities import (
    GridResponse,
    HeaderFilter,
    MenuFilter,
    SortDirective,
    ViewRequest,
    leading_int,
    to_int,
)
from serverside_grid.domain.record_collection import RecordCollection

__all__ = [
    "GridResponse",
    "HeaderFilter",
    "MenuFilter",
    "SortDirective",
    "ViewRequest",
    "leading_int",
    "to_int",
    "RecordCollection",
]
