"""
Legacy Grid Parameters Adapter.

Parses the flat, index-suffixed request parameters sent by legacy grid
clients (sEcho, iDisplayStart, iSortCol_0, ...) into a ViewRequest.

Parameters read:
    sEcho, iDisplayStart, iDisplayLength, sSearch
    iSortingCols     + iSortCol_<i>, sSortDir_<i>
    iFilteringCols   + iFilterCol_<i>, sFilterCol_<i>
    iFilteringMenus  + iFilterMenu_<i>, sFilterMenu_<i>

Counts are coerced like the rest of the numeric fields and capped at the
number of parameters in the request, since every entry needs at least one
of its own. A missing per-index value is passed through as None and fails
later, at column resolution.
"""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional

from serverside_grid.domain.entities import (
    HeaderFilter,
    MenuFilter,
    SortDirective,
    ViewRequest,
    to_int,
)

logger = logging.getLogger(__name__)


def parse_legacy_params(params: Mapping[str, Any]) -> ViewRequest:
    """
    Build a ViewRequest from legacy grid parameters.

    Args:
        params: Request parameters (e.g. a query-string mapping)

    Returns:
        Immutable ViewRequest
    """
    sort_directives: List[SortDirective] = [
        SortDirective(
            column=params.get(f"iSortCol_{i}"),
            direction=_text(params.get(f"sSortDir_{i}")),
        )
        for i in range(_entry_count(params, "iSortingCols"))
    ]

    header_filters: List[HeaderFilter] = [
        HeaderFilter(
            column=params.get(f"iFilterCol_{i}"),
            value=_text(params.get(f"sFilterCol_{i}")),
        )
        for i in range(_entry_count(params, "iFilteringCols"))
    ]

    menu_filters: List[MenuFilter] = []
    for i in range(_entry_count(params, "iFilteringMenus")):
        attribute = params.get(f"iFilterMenu_{i}")
        if not attribute:
            logger.warning(f"Menu filter {i} has no attribute, skipping")
            continue
        menu_filters.append(
            MenuFilter(
                attribute=str(attribute),
                value=_text(params.get(f"sFilterMenu_{i}")),
            )
        )

    search = params.get("sSearch")
    return ViewRequest(
        echo=params.get("sEcho"),
        display_start=params.get("iDisplayStart"),
        display_length=params.get("iDisplayLength"),
        search=str(search) if search else None,
        sort_directives=sort_directives,
        header_filters=header_filters,
        menu_filters=menu_filters,
    )


def _text(value: Any) -> Optional[str]:
    return None if value is None else str(value)


def _entry_count(params: Mapping[str, Any], key: str) -> int:
    """Declared number of indexed entries, capped by the parameters sent."""
    return min(max(to_int(params.get(key)), 0), len(params))
