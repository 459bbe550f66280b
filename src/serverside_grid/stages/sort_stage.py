"""
Sort Stage Implementation.

Applies the request's sort directives as one compound ORDER BY. The first
directive is the primary sort key. Association columns are joined and
ordered by the related table's column.
"""

from __future__ import annotations

from serverside_grid.domain.entities import ViewRequest
from serverside_grid.domain.record_collection import RecordCollection
from serverside_grid.interfaces.record_source import EntityMetadataProtocol
from serverside_grid.stages.column_resolver import ColumnResolver, split_association


class SortStage:
    """Order a collection by the requested columns."""

    def __init__(self, metadata: EntityMetadataProtocol, resolver: ColumnResolver) -> None:
        self.metadata = metadata
        self.resolver = resolver

    @property
    def name(self) -> str:
        return "sort"

    def apply(self, records: RecordCollection, request: ViewRequest) -> RecordCollection:
        for directive in request.sort_directives:
            column = self.resolver.resolve(directive.column)
            if self.metadata.is_association(column):
                relationship, attribute = split_association(
                    self.resolver.resolve(directive.column, split=False)
                )
                target = self.metadata.related_column(relationship, attribute)
                records = records.join(relationship)
            else:
                target = self.metadata.column(column)
            records = records.order_by(target, descending=directive.descending)
        return records
