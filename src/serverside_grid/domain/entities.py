"""
Core Domain Entities.

This module defines the request and response models the grid pipeline
operates on. Requests are immutable per call; numeric fields are coerced
the lenient way grid clients expect (garbage becomes 0, never an error).
"""

from __future__ import annotations

import re
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field, field_validator

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

# Digit runs longer than this are treated as garbage, not converted
_MAX_DIGITS = 18

# Ordinal column index as it arrives from the client
Ordinal = Union[int, str]


def leading_int(value: Any) -> Optional[int]:
    """
    Leading integer of a request value, or None when it has none.

    Values too large or not finite (NaN, infinity, over-long digit
    strings) count as having none.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        if isinstance(value, float):
            return int(value)
        match = _LEADING_INT.match(str(value))
        if not match or len(match.group(1).lstrip("+-")) > _MAX_DIGITS:
            return None
        return int(match.group(1))
    except (ValueError, OverflowError):
        return None


def to_int(value: Any) -> int:
    """
    Coerce a request value to int, using its leading integer if any.

    Examples:
        >>> to_int("25"), to_int(" 7px"), to_int("abc"), to_int(None)
        (25, 7, 0, 0)
    """
    parsed = leading_int(value)
    return 0 if parsed is None else parsed


class SortDirective(BaseModel):
    """A single requested sort key."""

    column: Optional[Ordinal] = Field(default=None, description="Ordinal column index")
    direction: Optional[str] = Field(default=None, description="'desc' or anything else")

    model_config = {"frozen": True}

    @property
    def descending(self) -> bool:
        return self.direction == "desc"


class HeaderFilter(BaseModel):
    """Filter value supplied alongside a grid column header."""

    column: Optional[Ordinal] = Field(default=None, description="Ordinal column index")
    value: Optional[str] = None

    model_config = {"frozen": True}


class MenuFilter(BaseModel):
    """Filter supplied by a control outside the grid, addressed by attribute."""

    attribute: str = Field(..., description="'entity.attr' or plain 'attr'")
    value: Optional[str] = None

    model_config = {"frozen": True}

    @property
    def column(self) -> str:
        """Leading token of the attribute (relationship or column name)."""
        return self.attribute.split(".")[0]


class ViewRequest(BaseModel):
    """Requested view of a grid: window, search, sort and filters."""

    echo: int = Field(default=0, description="Token echoed back to the client")
    display_start: int = Field(default=0, description="Offset of first row")
    display_length: int = Field(default=0, description="Requested page size")
    search: Optional[str] = Field(default=None, description="Free-text search term")
    sort_directives: List[SortDirective] = Field(default_factory=list)
    header_filters: List[HeaderFilter] = Field(default_factory=list)
    menu_filters: List[MenuFilter] = Field(default_factory=list)

    model_config = {"frozen": True}

    @field_validator("echo", "display_start", "display_length", mode="before")
    @classmethod
    def _coerce_int(cls, value: Any) -> int:
        return to_int(value)

    @property
    def has_search(self) -> bool:
        return bool(self.search and self.search.strip())


class GridResponse(BaseModel):
    """Response envelope for one grid request."""

    echo: int = Field(default=0, alias="sEcho")
    rows: List[Any] = Field(default_factory=list, alias="aaData")
    total_records: int = Field(default=0, alias="iTotalRecords")
    total_display_records: int = Field(default=0, alias="iTotalDisplayRecords")
    zero_records_message: Optional[str] = Field(default=None, exclude=True)

    model_config = {"populate_by_name": True}

    def to_legacy_dict(self) -> Dict[str, Any]:
        """Serialize with the legacy grid field names."""
        payload = self.model_dump(by_alias=True)
        if self.zero_records_message is not None:
            payload["oLanguage"] = {"sZeroRecords": self.zero_records_message}
        return payload
