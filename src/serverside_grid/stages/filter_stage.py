"""
Filter Stage Implementation.

Narrows the collection by per-column equality filters:
    - Header filters (addressed by ordinal column index)
    - Menu filters (addressed by "entity.attr", from controls outside the grid)

Each filter is applied by the first matching tier:
    1. Custom filter from the registry
    2. Association filter (join, then compare the related column)
    3. Direct filter on the entity's own column
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Optional

from serverside_grid.domain.entities import ViewRequest
from serverside_grid.domain.record_collection import RecordCollection
from serverside_grid.interfaces.record_source import EntityMetadataProtocol
from serverside_grid.registry.filter_registry import (
    CustomFilter,
    CustomFilterRegistryProtocol,
)
from serverside_grid.resilience.errors import GridConfigurationError
from serverside_grid.stages.column_resolver import ColumnResolver, split_association

logger = logging.getLogger(__name__)


class FilterStage:
    """Apply header and menu filters to a collection."""

    def __init__(
        self,
        metadata: EntityMetadataProtocol,
        resolver: ColumnResolver,
        registry: Optional[CustomFilterRegistryProtocol] = None,
        component: Optional[Any] = None,
        reserved_handlers: Iterable[str] = (),
    ) -> None:
        """
        Initialize filter stage.

        Args:
            metadata: Entity metadata of the listed model
            resolver: Column resolver for header filters
            registry: Custom filter registry (none means no overrides)
            component: Object searched first for custom filter handler
                       methods, usually the GridQuery
            reserved_handlers: Component attribute names never dispatched
                               to as handlers (the component's own API)
        """
        self.metadata = metadata
        self.resolver = resolver
        self.registry = registry
        self.component = component
        self.reserved_handlers = frozenset(reserved_handlers)

    @property
    def name(self) -> str:
        return "filter"

    def apply(self, records: RecordCollection, request: ViewRequest) -> RecordCollection:
        """
        Apply every filter of the request, in order, ANDed together.

        Raises:
            ColumnLookupError: If a filter addresses an unknown column
            GridConfigurationError: If a custom filter handler can't be found
        """
        for header in request.header_filters:
            column = self.resolver.resolve(header.column)
            spec = self.resolver.resolve(header.column, split=False)
            records = self._filter_column(records, column, spec, header.value)

        for menu in request.menu_filters:
            records = self._filter_column(records, menu.column, menu.attribute, menu.value)

        return records

    def _filter_column(
        self,
        records: RecordCollection,
        column: str,
        spec: str,
        value: Optional[str],
    ) -> RecordCollection:
        custom = self.registry.lookup(spec, value) if self.registry else None
        if custom is not None:
            filtered = self._apply_custom(custom, records, spec, value)
            if filtered is not None:
                return filtered
            logger.debug(f"Custom filter {custom.handler} declined {spec}, using default")

        if self.metadata.is_association(column):
            relationship, attribute = split_association(spec)
            target = self.metadata.related_column(relationship, attribute)
            logger.debug(f"Association filter {target} = {value!r}")
            return records.join(relationship).where_equals(target, value)

        target = self.metadata.column(column)
        logger.debug(f"Direct filter {target} = {value!r}")
        return records.where_equals(target, value)

    def _apply_custom(
        self,
        custom: CustomFilter,
        records: RecordCollection,
        column: str,
        value: Optional[str],
    ) -> Optional[RecordCollection]:
        """
        Dispatch a custom filter.

        Component methods get ``(records, column, value)``; entity scopes
        get only ``value``. Fixed-value filters always receive None.
        Only methods defined on the component's class are dispatched to;
        private names and reserved names are skipped.
        """
        passed = value if custom.passes_value else None

        method = self._component_method(custom.handler)
        if method is not None:
            logger.debug(f"Custom filter {custom.handler}({column!r}, {passed!r})")
            return method(records, column, passed)

        if records.has_scope(custom.handler):
            logger.debug(f"Custom scope {custom.handler}({passed!r})")
            return records.apply_scope(custom.handler, passed)

        logger.error(f"Custom filter handler {custom.handler!r} not found for {column!r}")
        raise GridConfigurationError(
            f"Custom filter handler {custom.handler!r} for {column!r} is neither a "
            f"grid method nor a scope of {records.model.__name__}"
        )

    def _component_method(self, handler: str) -> Optional[Callable[..., Any]]:
        if self.component is None or handler.startswith("_"):
            return None
        if handler in self.reserved_handlers:
            logger.debug(f"Handler name {handler!r} is reserved by the grid, skipping")
            return None
        if not callable(getattr(type(self.component), handler, None)):
            return None
        return getattr(self.component, handler)
