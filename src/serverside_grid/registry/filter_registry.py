"""
Custom Filter Registry - Column Filter Overrides.

This module provides the registry of custom filters that replace the
default equality filtering for a column, or for one literal value of a
column. The registry is built once at configuration time, frozen, and then
injected into every grid.

Usage:
    registry = CustomFilterRegistry()
    registry.register_value_filter("category", "by_category")
    registry.register_fixed_filter("category.name", "food", "food_only")
    registry.freeze()

    entry = registry.lookup("category", "books")   # -> ValueAwareFilter
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from threading import RLock
from typing import Dict, Iterable, List, Optional, Protocol, Tuple, Union

from serverside_grid.config.models import CustomFilterConfig
from serverside_grid.resilience.errors import RegistryFrozenError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValueAwareFilter:
    """Override for every value of a column; the handler gets the live value."""

    column: str
    handler: str

    @property
    def passes_value(self) -> bool:
        return True


@dataclass(frozen=True)
class FixedValueFilter:
    """Override for one literal value of a column; the handler gets no value."""

    column: str
    literal: str
    handler: str

    @property
    def passes_value(self) -> bool:
        return False


CustomFilter = Union[ValueAwareFilter, FixedValueFilter]


class CustomFilterRegistryProtocol(Protocol):
    """Read side of the registry, as used by the filter stage."""

    def lookup(self, column: str, value: Optional[str]) -> Optional[CustomFilter]:
        ...


class CustomFilterRegistry:
    """
    Registry of custom filter overrides keyed by column.

    Supports:
        - Value-aware filters keyed by column
        - Fixed-value filters keyed by (column, literal)
        - Legacy "column" / "column literal" string keys
        - Freezing after configuration (later writes raise)
    """

    def __init__(self) -> None:
        self._value_aware: Dict[str, ValueAwareFilter] = {}
        self._fixed: Dict[Tuple[str, str], FixedValueFilter] = {}
        self._frozen = False
        self._lock = RLock()

    def register(self, key: str, handler: str) -> CustomFilter:
        """
        Register a filter using a legacy string key.

        ``"column"`` registers a value-aware filter; ``"column literal"``
        (column and value divided by the first space) registers a
        fixed-value filter.

        Args:
            key: Column, or column and literal separated by a space
            handler: Name of the handler method or entity scope

        Returns:
            The registered entry
        """
        column, _, literal = key.partition(" ")
        if literal:
            return self.register_fixed_filter(column, literal, handler)
        return self.register_value_filter(column, handler)

    def register_value_filter(self, column: str, handler: str) -> ValueAwareFilter:
        """Register a value-aware filter; replaces any previous one for ``column``."""
        entry = ValueAwareFilter(column=column, handler=handler)
        with self._lock:
            self._check_writable()
            if column in self._value_aware:
                logger.debug(f"Replacing custom filter for {column!r}")
            self._value_aware[column] = entry
        logger.info(f"Registered custom filter: {column} -> {handler}")
        return entry

    def register_fixed_filter(
        self, column: str, literal: str, handler: str
    ) -> FixedValueFilter:
        """Register a fixed-value filter; replaces any previous one for the pair."""
        entry = FixedValueFilter(column=column, literal=literal, handler=handler)
        with self._lock:
            self._check_writable()
            self._fixed[(column, literal)] = entry
        logger.info(f"Registered custom filter: {column} {literal} -> {handler}")
        return entry

    def freeze(self) -> "CustomFilterRegistry":
        """End configuration. Returns self for chaining."""
        with self._lock:
            self._frozen = True
        logger.debug(f"Custom filter registry frozen with {len(self)} entries")
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def lookup(self, column: str, value: Optional[str]) -> Optional[CustomFilter]:
        """
        Find the override for filtering ``column`` by ``value``.

        The value-aware entry for the column always wins over a fixed-value
        entry for the same column.

        Args:
            column: Column spec or menu attribute being filtered
            value: Filter value from the request

        Returns:
            Matching entry or None
        """
        entry = self._value_aware.get(column)
        if entry is not None:
            return entry
        literal = "" if value is None else str(value)
        return self._fixed.get((column, literal))

    def entries(self) -> List[CustomFilter]:
        """All registered entries, value-aware first."""
        with self._lock:
            return [*self._value_aware.values(), *self._fixed.values()]

    def __len__(self) -> int:
        return len(self._value_aware) + len(self._fixed)

    def _check_writable(self) -> None:
        if self._frozen:
            raise RegistryFrozenError(
                "Custom filter registry is frozen; register filters at startup"
            )


def build_registry(filters: Iterable[CustomFilterConfig]) -> CustomFilterRegistry:
    """
    Build and freeze a registry from configuration entries.

    Args:
        filters: Custom filter configs (``GridConfig.custom_filters``)

    Returns:
        Frozen CustomFilterRegistry
    """
    registry = CustomFilterRegistry()
    for item in filters:
        if item.value is None:
            registry.register_value_filter(item.column, item.handler)
        else:
            registry.register_fixed_filter(item.column, item.value, item.handler)
    return registry.freeze()
