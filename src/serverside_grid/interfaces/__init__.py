"""
Interfaces Layer - Abstract Protocols for Dependencies.

Protocols:
    - RecordStage: Common interface of pipeline stages
    - RecordSourceProtocol / EntityMetadataProtocol: Data access
    - RowPresenter: Outbound row rendering
    - MetricsCollectorProtocol: Timing and count metrics

Design Principles:
    - Use typing.Protocol (not ABC) for Pythonic interfaces
    - Small, focused interfaces
"""

from serverside_grid.interfaces.metrics_collector import MetricsCollectorProtocol
from serverside_grid.interfaces.record_source import (
    EntityMetadataProtocol,
    RecordSourceProtocol,
)
from serverside_grid.interfaces.record_stage import RecordStage
from serverside_grid.interfaces.row_presenter import RowPresenter

__all__ = [
    "MetricsCollectorProtocol",
    "EntityMetadataProtocol",
    "RecordSourceProtocol",
    "RecordStage",
    "RowPresenter",
]
