"""
Grid Exceptions.

All errors raised by the query pipeline derive from GridError so callers
can tell pipeline failures apart from storage-engine errors.
"""

from __future__ import annotations

from typing import Any, Optional


class GridError(Exception):
    """Base class for grid pipeline errors."""


class ColumnLookupError(GridError, LookupError):
    """Raised when an ordinal column index or column spec cannot be resolved."""

    def __init__(self, message: str, ordinal: Optional[Any] = None) -> None:
        super().__init__(message)
        self.ordinal = ordinal
        self.message = message


class GridConfigurationError(GridError):
    """Raised when the grid or its custom filters are misconfigured."""


class RegistryFrozenError(GridConfigurationError):
    """Raised when a frozen custom filter registry is modified."""
