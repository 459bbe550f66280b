"""
Configuration Package - Models and Loaders.

Configuration Structure:
    - GridConfig: Root configuration object
    - PaginationConfig: Default page size
    - SearchConfig: LIKE vs. ILIKE search
    - CountConfig: Strict vs. fail-soft matching counts
    - GridDefinition: Columns and searchable expressions per grid
    - CustomFilterConfig: Custom filter overrides for the registry

Design Principles:
    - Type-safe via Pydantic
    - Validation on load (fail fast)
    - Support for profiles merged over the base file
"""

from serverside_grid.config.loader import ConfigLoader, load_config
from serverside_grid.config.models import (
    CountConfig,
    CustomFilterConfig,
    GridConfig,
    GridDefinition,
    PaginationConfig,
    SearchConfig,
)

__all__ = [
    "ConfigLoader",
    "load_config",
    "CountConfig",
    "CustomFilterConfig",
    "GridConfig",
    "GridDefinition",
    "PaginationConfig",
    "SearchConfig",
]
