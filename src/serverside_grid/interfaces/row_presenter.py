"""
Row Presenter Protocol.

The presenter turns fetched entities into the outbound row shape and may
supply a custom message for an empty result.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol


class RowPresenter(Protocol):
    """Abstract interface for row presentation."""

    def present(self, row: Any) -> Any:
        """Render one fetched entity as an outbound row."""
        ...

    def zero_records_message(self) -> Optional[str]:
        """Message shown when nothing matches, or None for the client default."""
        ...
