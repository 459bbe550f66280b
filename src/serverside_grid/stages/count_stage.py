"""
Count Stage Implementation.

Computes the number of rows matching the request's filters and search,
independent of sorting and pagination, on a fresh base collection. Runs
behind a CountGuard so a broken count degrades to 0.
"""

from __future__ import annotations

import logging
from typing import Sequence

from serverside_grid.domain.entities import ViewRequest
from serverside_grid.interfaces.record_source import RecordSourceProtocol
from serverside_grid.interfaces.record_stage import RecordStage
from serverside_grid.resilience.count_guard import CountGuard, CountOutcome

logger = logging.getLogger(__name__)


class CountStage:
    """Guarded distinct count of matching rows."""

    def __init__(
        self,
        stages: Sequence[RecordStage],
        guard: CountGuard,
    ) -> None:
        """
        Initialize count stage.

        Args:
            stages: Narrowing stages to replay (filter and search only)
            guard: Failure boundary for the computation
        """
        self.stages = list(stages)
        self.guard = guard

    @property
    def name(self) -> str:
        return "count"

    def count(self, source: RecordSourceProtocol, request: ViewRequest) -> CountOutcome:
        """
        Count distinct rows matching ``request``.

        Returns:
            CountOutcome; on any failure its value is 0
        """

        def compute() -> int:
            records = source.base()
            for stage in self.stages:
                records = stage.apply(records, request)
            return source.count(records)

        outcome = self.guard.run(compute, operation_name="matching count")
        logger.debug(f"Matching count: {outcome.value} (ok={outcome.ok})")
        return outcome
