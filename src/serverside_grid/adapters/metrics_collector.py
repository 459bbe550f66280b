"""
In-Memory Metrics Collector.

Keeps a running summary (count, total, last value) per metric name.
"""

from __future__ import annotations

from threading import Lock
from typing import Any, Dict, Optional


class InMemoryMetricsCollector:
    """Simple in-memory metrics collector."""

    def __init__(self) -> None:
        self._summaries: Dict[str, Dict[str, Any]] = {}
        self._lock = Lock()

    def record_timing(
        self,
        name: str,
        duration_seconds: float,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        """Record a timing metric."""
        self._record(name, "timing", duration_seconds, tags)

    def record_count(
        self,
        name: str,
        value: int,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        """Record a count metric."""
        self._record(name, "count", value, tags)

    def get_metrics(self) -> Dict[str, Any]:
        """Snapshot of all summaries."""
        with self._lock:
            return {name: dict(summary) for name, summary in self._summaries.items()}

    def clear(self) -> None:
        with self._lock:
            self._summaries.clear()

    def _record(
        self,
        name: str,
        metric_type: str,
        value: float,
        tags: Optional[Dict[str, str]],
    ) -> None:
        with self._lock:
            summary = self._summaries.setdefault(
                name, {"type": metric_type, "count": 0, "total": 0, "last": None}
            )
            summary["count"] += 1
            summary["total"] += value
            summary["last"] = value
            summary["tags"] = dict(tags or {})
