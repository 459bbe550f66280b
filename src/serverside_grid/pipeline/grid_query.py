"""
Grid Query - Main Orchestrator.

A GridQuery serves one view request against one record source. It wires
the stages together and builds the response envelope:

    rows:    base -> filter -> search -> sort -> paginate -> fetch
    matches: base -> filter -> search -> distinct count (guarded)
    total:   full entity count

Subclasses may define custom filter handlers as methods with the
signature ``(records, column, value) -> RecordCollection``. Names of
GridQuery's own public attributes (``records``, ``total_count``, ...) are
reserved and never dispatched to.
"""

from __future__ import annotations

import logging
import time
from typing import Any, List, Optional, Sequence

from serverside_grid.adapters.presenters import IdentityPresenter
from serverside_grid.config.models import GridConfig
from serverside_grid.domain.entities import GridResponse, ViewRequest
from serverside_grid.domain.record_collection import RecordCollection
from serverside_grid.interfaces.metrics_collector import MetricsCollectorProtocol
from serverside_grid.interfaces.record_source import RecordSourceProtocol
from serverside_grid.interfaces.record_stage import RecordStage
from serverside_grid.interfaces.row_presenter import RowPresenter
from serverside_grid.registry.filter_registry import (
    CustomFilterRegistryProtocol,
    build_registry,
)
from serverside_grid.resilience.count_guard import CountGuard, CountOutcome
from serverside_grid.stages.column_resolver import ColumnResolver
from serverside_grid.stages.count_stage import CountStage
from serverside_grid.stages.filter_stage import FilterStage
from serverside_grid.stages.pagination_stage import PaginationStage
from serverside_grid.stages.search_stage import SearchStage
from serverside_grid.stages.sort_stage import SortStage

logger = logging.getLogger(__name__)


class GridQuery:
    """Request-scoped query builder for one grid."""

    def __init__(
        self,
        source: RecordSourceProtocol,
        request: ViewRequest,
        columns: Sequence[str],
        searchable_columns: Sequence[str] = (),
        registry: Optional[CustomFilterRegistryProtocol] = None,
        config: Optional[GridConfig] = None,
        presenter: Optional[RowPresenter] = None,
        metrics_collector: Optional[MetricsCollectorProtocol] = None,
    ) -> None:
        """
        Initialize grid query with all dependencies.

        Args:
            source: Record source for the listed entity
            request: The view request being served
            columns: Column specs in client order
            searchable_columns: Qualified expressions for free-text search
            registry: Frozen custom filter registry (optional)
            config: Grid configuration (defaults when omitted)
            presenter: Row presenter (rows returned unchanged when omitted)
            metrics_collector: For timings and degraded counts (optional)
        """
        self.source = source
        self.request = request
        self.config = config or GridConfig()
        self.presenter: RowPresenter = presenter or IdentityPresenter()
        self.metrics_collector = metrics_collector

        if registry is not None and not getattr(registry, "frozen", True):
            logger.warning("GridQuery built with an unfrozen custom filter registry")

        self.resolver = ColumnResolver(columns)
        self.filter_stage = FilterStage(
            source.metadata,
            self.resolver,
            registry=registry,
            component=self,
            reserved_handlers=RESERVED_HANDLER_NAMES,
        )
        self.search_stage = SearchStage(
            searchable_columns, case_insensitive=self.config.search.case_insensitive
        )
        self.sort_stage = SortStage(source.metadata, self.resolver)
        self.pagination_stage = PaginationStage(self.config.pagination.default_page_size)
        self.count_stage = CountStage(
            [self.filter_stage, self.search_stage],
            CountGuard(strict=self.config.count.strict),
        )

    @classmethod
    def from_config(
        cls,
        source: RecordSourceProtocol,
        request: ViewRequest,
        config: GridConfig,
        grid_name: str,
        **kwargs: Any,
    ) -> "GridQuery":
        """
        Build a GridQuery for a grid defined in configuration.

        Without an explicit ``registry`` the custom filters of ``config``
        are used.
        """
        definition = config.grid(grid_name)
        if kwargs.get("registry") is None:
            kwargs["registry"] = build_registry(config.custom_filters)
        return cls(
            source,
            request,
            columns=definition.columns,
            searchable_columns=definition.searchable_columns,
            config=config,
            **kwargs,
        )

    @property
    def row_stages(self) -> List[RecordStage]:
        return [self.filter_stage, self.search_stage, self.sort_stage, self.pagination_stage]

    def records(self, paginate: bool = True) -> RecordCollection:
        """Composed (unexecuted) collection for the requested rows."""
        stages = self.row_stages if paginate else self.row_stages[:-1]
        records = self.source.base()
        for stage in stages:
            records = stage.apply(records, self.request)
            logger.debug(f"Applied {stage.name} stage")
        return records

    def fetch_records(self) -> List[Any]:
        """
        Fetch the requested page of rows.

        Raises:
            ColumnLookupError: If the request addresses an unknown column
            GridConfigurationError: If a custom filter is misconfigured
        """
        start = time.perf_counter()
        rows = self.source.fetch(self.records())
        self._record_timing("rows_fetch_seconds", time.perf_counter() - start)
        return rows

    def fetch_records_without_pagination(self) -> List[Any]:
        """Fetch every matching row in requested order (e.g. for exports)."""
        return self.source.fetch(self.records(paginate=False))

    def count_outcome(self) -> CountOutcome:
        """Matching count with its success/failure status."""
        start = time.perf_counter()
        outcome = self.count_stage.count(self.source, self.request)
        self._record_timing("count_seconds", time.perf_counter() - start)
        if not outcome.ok and self.metrics_collector:
            self.metrics_collector.record_count("count_degraded_total", 1)
        return outcome

    def filtered_count(self) -> int:
        """Number of rows matching filters and search; 0 if counting fails."""
        return self.count_outcome().value

    def total_count(self) -> int:
        """Number of rows of the entity, ignoring the request."""
        return self.source.full_count()

    def build_response(self) -> GridResponse:
        """Build the response envelope for the request."""
        rows = [self.presenter.present(row) for row in self.fetch_records()]
        response = GridResponse(
            echo=self.request.echo,
            rows=rows,
            total_records=self.total_count(),
            total_display_records=self.filtered_count(),
            zero_records_message=self.presenter.zero_records_message(),
        )
        logger.info(
            f"Grid response: {len(rows)} rows, {response.total_display_records}"
            f"/{response.total_records} matching"
        )
        return response

    def as_json(self) -> dict:
        """Response envelope as a dict with the legacy field names."""
        return self.build_response().to_legacy_dict()

    def _record_timing(self, name: str, duration: float) -> None:
        if self.metrics_collector:
            self.metrics_collector.record_timing(name, duration)


# Public GridQuery API; never dispatched to as custom filter handlers
RESERVED_HANDLER_NAMES = frozenset(
    name for name in dir(GridQuery) if not name.startswith("_")
)
