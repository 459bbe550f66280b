"""
Pagination Stage Implementation.

Turns display start/length into a page window. The offset is snapped to a
page boundary: start 15 with page size 10 shows page 2 (rows 10-19).
"""

from __future__ import annotations

from serverside_grid.domain.entities import ViewRequest
from serverside_grid.domain.record_collection import RecordCollection

DEFAULT_PAGE_SIZE = 10


class PaginationStage:
    """Apply offset/limit for the requested page."""

    def __init__(self, default_page_size: int = DEFAULT_PAGE_SIZE) -> None:
        self.default_page_size = default_page_size

    @property
    def name(self) -> str:
        return "pagination"

    def per_page(self, request: ViewRequest) -> int:
        """Requested page size, or the default when not positive."""
        if request.display_length > 0:
            return request.display_length
        return self.default_page_size

    def page(self, request: ViewRequest) -> int:
        """1-indexed page containing the display start."""
        return max(request.display_start, 0) // self.per_page(request) + 1

    def apply(self, records: RecordCollection, request: ViewRequest) -> RecordCollection:
        per_page = self.per_page(request)
        return records.offset_limit((self.page(request) - 1) * per_page, per_page)
