"""
Unit Tests for the legacy parameter adapter and request coercion.

Test Aspects Covered:
    ✅ Business Logic: Index-suffixed parameters parsed in order
    ✅ Edge Cases: Missing and non-numeric values coerced, not rejected
"""

from __future__ import annotations

import pytest

from serverside_grid.adapters.legacy_params import parse_legacy_params
from serverside_grid.domain.entities import ViewRequest, to_int


class TestToInt:
    """Lenient integer coercion."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("25", 25),
            (" 7px", 7),
            ("-3", -3),
            ("abc", 0),
            ("", 0),
            (None, 0),
            (12, 12),
            (3.9, 3),
            (True, 0),
            (float("nan"), 0),
            (float("-inf"), 0),
            ("9" * 5000, 0),
        ],
    )
    def test_to_int(self, value, expected: int) -> None:
        assert to_int(value) == expected

    def test_view_request_coerces_numeric_fields(self) -> None:
        request = ViewRequest(echo="3", display_start="x", display_length=None)

        assert (request.echo, request.display_start, request.display_length) == (3, 0, 0)


class TestParseLegacyParams:
    """Test cases for parse_legacy_params."""

    def test_parses_full_request(self) -> None:
        """
        SCENARIO: Request with search, two sorts, one header and one menu filter
        EXPECTED: All parts mapped onto the ViewRequest in index order
        """
        params = {
            "sEcho": "4",
            "iDisplayStart": "20",
            "iDisplayLength": "10",
            "sSearch": "acme",
            "iSortingCols": "2",
            "iSortCol_0": "1",
            "sSortDir_0": "desc",
            "iSortCol_1": "0",
            "sSortDir_1": "asc",
            "iFilteringCols": "1",
            "iFilterCol_0": "3",
            "sFilterCol_0": "active",
            "iFilteringMenus": "1",
            "iFilterMenu_0": "company.name",
            "sFilterMenu_0": "Globex",
        }

        request = parse_legacy_params(params)

        assert request.echo == 4
        assert request.display_start == 20
        assert request.display_length == 10
        assert request.search == "acme"
        assert [(d.column, d.descending) for d in request.sort_directives] == [
            ("1", True),
            ("0", False),
        ]
        assert [(f.column, f.value) for f in request.header_filters] == [("3", "active")]
        assert [(m.attribute, m.column, m.value) for m in request.menu_filters] == [
            ("company.name", "company", "Globex")
        ]

    def test_empty_params(self) -> None:
        request = parse_legacy_params({})

        assert request == ViewRequest()
        assert request.has_search is False

    def test_garbage_counts_become_zero(self) -> None:
        request = parse_legacy_params(
            {"iSortingCols": "lots", "iFilteringCols": "-2", "iDisplayLength": "ten"}
        )

        assert request.sort_directives == []
        assert request.header_filters == []
        assert request.display_length == 0

    def test_missing_sort_column_is_kept_for_resolution(self) -> None:
        request = parse_legacy_params({"iSortingCols": "1"})

        assert request.sort_directives[0].column is None

    def test_menu_filter_without_attribute_is_skipped(self) -> None:
        request = parse_legacy_params(
            {"iFilteringMenus": "2", "iFilterMenu_1": "status", "sFilterMenu_1": "active"}
        )

        assert [m.attribute for m in request.menu_filters] == ["status"]

    def test_accepts_integer_values(self) -> None:
        request = parse_legacy_params(
            {
                "iSortingCols": 1,
                "iSortCol_0": 2,
                "sSortDir_0": "desc",
                "iDisplayLength": 5,
                "iFilteringCols": 1,
                "iFilterCol_0": 0,
                "sFilterCol_0": 7,
            }
        )

        assert request.sort_directives[0].column == 2
        assert request.display_length == 5
        assert request.header_filters[0].value == "7"

    def test_unconvertible_numbers_become_zero(self) -> None:
        """
        SCENARIO: Display window sent as NaN and as an over-long digit string
        EXPECTED: Both coerced to 0, no validation error
        """
        request = parse_legacy_params(
            {"iDisplayLength": float("nan"), "iDisplayStart": "9" * 5000}
        )

        assert request.display_length == 0
        assert request.display_start == 0

    def test_entry_counts_capped_by_parameters_sent(self) -> None:
        """
        SCENARIO: Counts far larger than the entries actually sent
        EXPECTED: No more entries built than there are parameters
        """
        params = {
            "iFilteringCols": "200000",
            "iSortingCols": "999999",
            "iSortCol_0": "1",
            "iFilteringMenus": "50000",
        }

        request = parse_legacy_params(params)

        assert len(request.header_filters) <= len(params)
        assert len(request.sort_directives) <= len(params)
        assert len(request.menu_filters) == 0
        assert request.sort_directives[0].column == "1"
