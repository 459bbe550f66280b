"""
Adapters Package - Infrastructure Implementations.

Concrete implementations of the protocols in the interfaces package.

Sources:
    - SqlAlchemyRecordSource: Executes collections on a SQLAlchemy session
    - EntityMetadata: Relationship/column lookups from the mapper

Requests:
    - parse_legacy_params: Legacy grid parameters -> ViewRequest

Presenters:
    - IdentityPresenter: Rows unchanged
    - ColumnPresenter: Rows as value lists following the column spec

Metrics:
    - InMemoryMetricsCollector: Simple in-memory summaries
"""

from serverside_grid.adapters.legacy_params import parse_legacy_params
from serverside_grid.adapters.metrics_collector import InMemoryMetricsCollector
from serverside_grid.adapters.presenters import ColumnPresenter, IdentityPresenter
from serverside_grid.adapters.sqlalchemy_source import (
    EntityMetadata,
    SqlAlchemyRecordSource,
)

__all__ = [
    "parse_legacy_params",
    "InMemoryMetricsCollector",
    "ColumnPresenter",
    "IdentityPresenter",
    "EntityMetadata",
    "SqlAlchemyRecordSource",
]
