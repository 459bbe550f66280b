"""
Stages Package - Query Pipeline Stages.

Each stage implements the RecordStage protocol (except the resolver,
which the others use, and the count stage, which executes).

Stages:
    - ColumnResolver: Ordinal index -> column spec
    - FilterStage: Header and menu filters (custom, association, direct)
    - SearchStage: Free-text OR search over searchable columns
    - SortStage: Compound ORDER BY in request order
    - PaginationStage: Offset/limit window
    - CountStage: Guarded distinct count of matching rows

Design Principles:
    - Every stage returns a new collection
    - Rows: filter -> search -> sort -> paginate
    - Totals: filter -> search -> count
"""

from serverside_grid.stages.column_resolver import ColumnResolver, split_association
from serverside_grid.stages.count_stage import CountStage
from serverside_grid.stages.filter_stage import FilterStage
from serverside_grid.stages.pagination_stage import DEFAULT_PAGE_SIZE, PaginationStage
from serverside_grid.stages.search_stage import SearchStage
from serverside_grid.stages.sort_stage import SortStage

__all__ = [
    "ColumnResolver",
    "split_association",
    "CountStage",
    "FilterStage",
    "DEFAULT_PAGE_SIZE",
    "PaginationStage",
    "SearchStage",
    "SortStage",
]
