"""
Metrics Collector Protocol.

The grid records stage timings and degraded counts through this
interface. Collectors must not raise from record calls.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Protocol


class MetricsCollectorProtocol(Protocol):
    """Abstract interface for metrics collection."""

    def record_timing(
        self,
        name: str,
        duration_seconds: float,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        ...

    def record_count(
        self,
        name: str,
        value: int,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        ...

    def get_metrics(self) -> Dict[str, Any]:
        ...
