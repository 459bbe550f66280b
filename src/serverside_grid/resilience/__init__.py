"""
Resilience Package - Errors and the Count Failure Boundary.

This package defines the pipeline's exception hierarchy and the guard
that lets total counts degrade to zero instead of failing a request.

Design Principles:
    - Fail fast for lookup and configuration errors
    - Degrade only at the count boundary
    - No retries (all operations are single-attempt)
"""

from serverside_grid.resilience.count_guard import CountGuard, CountOutcome
from serverside_grid.resilience.errors import (
    ColumnLookupError,
    GridConfigurationError,
    GridError,
    RegistryFrozenError,
)

__all__ = [
    "CountGuard",
    "CountOutcome",
    "ColumnLookupError",
    "GridConfigurationError",
    "GridError",
    "RegistryFrozenError",
]
