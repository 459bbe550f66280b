"""
Count Guard - Fail-Soft Boundary for Record Counts.

A broken total must never block row display, so the count path runs
behind this guard and reports an explicit outcome instead of raising.

Design Notes:
    - Only the count boundary degrades; the rows path propagates errors
    - Configuration errors can optionally be re-raised (strict mode)
    - Failures are logged, never silently dropped
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Tuple, Type

from serverside_grid.resilience.errors import GridConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CountOutcome:
    """Result of a guarded count computation."""

    value: int = 0
    error: Optional[Exception] = None

    @classmethod
    def success(cls, value: int) -> "CountOutcome":
        return cls(value=value)

    @classmethod
    def failure(cls, error: Exception) -> "CountOutcome":
        return cls(value=0, error=error)

    @property
    def ok(self) -> bool:
        """True when the count was computed without error."""
        return self.error is None


class CountGuard:
    """
    Runs count computations and converts failures into CountOutcome.

    Features:
        - Any exception degrades to a zero count
        - Strict mode re-raises configuration errors
    """

    def __init__(self, strict: bool = False) -> None:
        """
        Initialize count guard.

        Args:
            strict: Re-raise GridConfigurationError instead of degrading
        """
        self.strict = strict
        self._fatal: Tuple[Type[Exception], ...] = (
            (GridConfigurationError,) if strict else ()
        )

    def run(self, func: Callable[[], int], operation_name: str = "count") -> CountOutcome:
        """
        Execute a count function.

        Args:
            func: Function returning the count
            operation_name: Name for logging

        Returns:
            CountOutcome with the count, or a zero-valued failure
        """
        try:
            return CountOutcome.success(int(func()))
        except Exception as e:
            if self._fatal and isinstance(e, self._fatal):
                logger.error(f"{operation_name} failed with configuration error: {e}")
                raise
            logger.warning(f"{operation_name} failed, reporting 0: {e}")
            return CountOutcome.failure(e)
