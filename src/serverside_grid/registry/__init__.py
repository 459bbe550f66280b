"""
Registry Module - Custom Filter Overrides.

Components:
    - CustomFilterRegistry: Frozen-after-build registry of overrides
    - ValueAwareFilter / FixedValueFilter: Tagged registry entries
    - build_registry: Build a frozen registry from configuration
"""

from serverside_grid.registry.filter_registry import (
    CustomFilter,
    CustomFilterRegistry,
    CustomFilterRegistryProtocol,
    FixedValueFilter,
    ValueAwareFilter,
    build_registry,
)

__all__ = [
    "CustomFilter",
    "CustomFilterRegistry",
    "CustomFilterRegistryProtocol",
    "FixedValueFilter",
    "ValueAwareFilter",
    "build_registry",
]
