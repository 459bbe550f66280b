"""
Serverside Grid - Query Pipeline for Server-Driven Table Grids.

Translates paginated grid requests (page offset, page size, sort columns,
per-column filters, free-text search) into composed SQLAlchemy queries and
turns the results back into a row/count response, so a tabular UI never
has to receive the whole dataset.

Architecture:
    - Ports & Adapters (SQLAlchemy session behind a record source)
    - Immutable record collections passed through ordered stages
    - Frozen custom filter registry injected per grid
    - Configuration-driven behavior via YAML

Main Components:
    - domain: Request/response models and the record collection
    - stages: Column resolver, filter, search, sort, pagination, count
    - registry: Custom filter registry
    - pipeline: GridQuery orchestrator
    - adapters: SQLAlchemy record source, legacy params, metrics
    - config: Configuration models and loaders

Example:
    >>> from serverside_grid import GridQuery, parse_legacy_params
    >>> grid = GridQuery(source, parse_legacy_params(request.args),
    ...                  columns=["id", "name"], searchable_columns=["users.name"])
    >>> payload = grid.as_json()

"""

import logging

from serverside_grid.adapters.legacy_params import parse_legacy_params
from serverside_grid.adapters.sqlalchemy_source import SqlAlchemyRecordSource
from serverside_grid.pipeline.grid_query import GridQuery
from serverside_grid.registry.filter_registry import CustomFilterRegistry

__version__ = "0.1.0"


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for Serverside Grid.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import serverside_grid
        >>> serverside_grid.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("serverside_grid").setLevel(level)


__all__ = [
    "configure_logging",
    "parse_legacy_params",
    "SqlAlchemyRecordSource",
    "GridQuery",
    "CustomFilterRegistry",
]
