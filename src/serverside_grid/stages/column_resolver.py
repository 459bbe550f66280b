"""
Column Resolver.

Maps the ordinal column index sent by the client onto the server-side
column spec. A spec is either ``"attr"`` (a column of the listed entity)
or ``"association.attr"`` (a column of a related entity).
"""

from __future__ import annotations

from typing import Any, List, Sequence, Tuple

from serverside_grid.domain.entities import leading_int
from serverside_grid.resilience.errors import ColumnLookupError


def split_association(spec: str) -> Tuple[str, str]:
    """
    Split ``"association.attr"`` into its two parts.

    Raises:
        ColumnLookupError: If the spec has no attribute part
    """
    relationship, _, attribute = spec.partition(".")
    if not relationship or not attribute:
        raise ColumnLookupError(f"Malformed association column spec: {spec!r}")
    return relationship, attribute


class ColumnResolver:
    """Resolve ordinal column indices against a column spec."""

    def __init__(self, columns: Sequence[Any]) -> None:
        """
        Initialize with the grid's columns, in client order.

        Args:
            columns: Column specs; non-string entries are stringified
        """
        self.columns: List[str] = [str(column) for column in columns]

    def resolve(self, ordinal: Any, split: bool = True) -> str:
        """
        Look up the column at ``ordinal``.

        Args:
            ordinal: Column index as sent by the client; strings are read
                     up to their first non-digit ("1abc" -> 1)
            split: Return only the leading token of an association spec
                   (the relationship name); when False return the full spec

        Returns:
            Column name, relationship name, or full column spec

        Raises:
            ColumnLookupError: If the index is not a valid position
        """
        spec = self.columns[self._index(ordinal)]
        if split:
            return spec.split(".")[0]
        return spec

    def _index(self, ordinal: Any) -> int:
        index = leading_int(ordinal)
        if index is None:
            raise ColumnLookupError(f"Invalid column index: {ordinal!r}", ordinal)
        if not 0 <= index < len(self.columns):
            raise ColumnLookupError(
                f"Column index {index} out of range (0..{len(self.columns) - 1})",
                ordinal,
            )
        return index

    def __len__(self) -> int:
        return len(self.columns)
