"""
Record Stage Protocol.

Defines the interface shared by the pipeline stages. Each stage takes a
record collection and the view request and returns a new, narrower or
reordered collection.

Design Notes:
    - Uses typing.Protocol for structural subtyping
    - Stages are stateless per request (all state in the collection)
    - Configuration injected via constructor
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from serverside_grid.domain.entities import ViewRequest
    from serverside_grid.domain.record_collection import RecordCollection


@runtime_checkable
class RecordStage(Protocol):
    """Abstract interface for pipeline stages."""

    @property
    def name(self) -> str:
        """Unique name of this stage."""
        ...

    def apply(
        self,
        records: "RecordCollection",
        request: "ViewRequest",
    ) -> "RecordCollection":
        """
        Apply the stage to a collection.

        Args:
            records: Collection produced by the previous stage
            request: The view request being served

        Returns:
            New collection; ``records`` is left untouched
        """
        ...
