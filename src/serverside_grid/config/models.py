"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator


class PaginationConfig(BaseModel):
    """Page window settings."""

    default_page_size: int = Field(default=10, ge=1)


class SearchConfig(BaseModel):
    """Free-text search settings."""

    case_insensitive: bool = False


class CountConfig(BaseModel):
    """Matching-count settings."""

    # Re-raise misconfigured custom filters instead of reporting 0
    strict: bool = False


class CustomFilterConfig(BaseModel):
    """One custom filter override."""

    column: str = Field(..., min_length=1)
    handler: str = Field(..., min_length=1)
    value: Optional[str] = Field(
        default=None, description="Literal value; omit for a value-aware filter"
    )


class GridDefinition(BaseModel):
    """Columns and searchable expressions of one grid."""

    columns: List[str] = Field(default_factory=list)
    searchable_columns: List[str] = Field(default_factory=list)

    @field_validator("columns", "searchable_columns", mode="before")
    @classmethod
    def _normalize(cls, value):
        if value is None:
            return []
        return [str(column) for column in value]


class GridConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    pagination: PaginationConfig = Field(default_factory=PaginationConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    count: CountConfig = Field(default_factory=CountConfig)
    grids: Dict[str, GridDefinition] = Field(default_factory=dict)
    custom_filters: List[CustomFilterConfig] = Field(default_factory=list)

    def grid(self, name: str) -> GridDefinition:
        """
        Get a grid definition by name.

        Raises:
            KeyError: If no grid with that name is configured
        """
        if name not in self.grids:
            raise KeyError(f"Grid not configured: {name}")
        return self.grids[name]
