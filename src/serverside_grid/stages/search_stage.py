"""
Search Stage Implementation.

Free-text search across the grid's searchable columns: one OR clause of
wildcard LIKE matches, ANDed onto whatever the filters already narrowed.
"""

from __future__ import annotations

import logging
from typing import Iterable, List

from sqlalchemy import literal_column

from serverside_grid.domain.entities import ViewRequest
from serverside_grid.domain.record_collection import RecordCollection

logger = logging.getLogger(__name__)


class SearchStage:
    """Apply the request's search term to a collection."""

    def __init__(
        self,
        searchable_columns: Iterable[str],
        case_insensitive: bool = False,
    ) -> None:
        """
        Initialize search stage.

        Args:
            searchable_columns: Qualified SQL column expressions
                                (e.g. "users.name"), trusted configuration
            case_insensitive: Use ILIKE instead of LIKE
        """
        self.searchable_columns: List[str] = [str(c) for c in searchable_columns]
        self.case_insensitive = case_insensitive

    @property
    def name(self) -> str:
        return "search"

    def apply(self, records: RecordCollection, request: ViewRequest) -> RecordCollection:
        if not request.has_search:
            return records
        if not self.searchable_columns:
            logger.debug("Search term given but grid has no searchable columns")
            return records

        expressions = [literal_column(column) for column in self.searchable_columns]
        return records.where_like_any(expressions, request.search, self.case_insensitive)
