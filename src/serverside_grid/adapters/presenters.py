"""
Row Presenters.

Simple RowPresenter implementations. Applications with richer rendering
(links, formatted dates) supply their own.
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence


class IdentityPresenter:
    """Returns fetched entities unchanged."""

    def present(self, row: Any) -> Any:
        return row

    def zero_records_message(self) -> Optional[str]:
        return None


class ColumnPresenter:
    """Renders each entity as a list of values, one per column spec."""

    def __init__(
        self,
        columns: Sequence[str],
        zero_records_message: Optional[str] = None,
    ) -> None:
        """
        Args:
            columns: Column specs in client order ("attr" or "association.attr")
            zero_records_message: Custom message for empty results
        """
        self.columns = [str(column) for column in columns]
        self._zero_records_message = zero_records_message

    def present(self, row: Any) -> List[Any]:
        return [self._value(row, column) for column in self.columns]

    def zero_records_message(self) -> Optional[str]:
        return self._zero_records_message

    @staticmethod
    def _value(row: Any, spec: str) -> Any:
        value = row
        for part in spec.split("."):
            if value is None:
                return None
            value = getattr(value, part)
        return value
