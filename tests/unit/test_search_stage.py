"""
Unit Tests for SearchStage.

Test Aspects Covered:
    ✅ Business Logic: Single OR clause, single bound term
    ✅ Edge Cases: Empty term, no searchable columns, case-insensitive mode
"""

from __future__ import annotations

from serverside_grid.adapters.sqlalchemy_source import SqlAlchemyRecordSource
from serverside_grid.domain.entities import ViewRequest
from serverside_grid.domain.record_collection import RecordCollection
from serverside_grid.stages.search_stage import SearchStage

SEARCHABLE = ["users.name", "users.email"]


class TestSearchStage:
    """Test cases for SearchStage."""

    def test_builds_one_or_clause_with_one_parameter(
        self, base_records: RecordCollection
    ) -> None:
        """
        SCENARIO: Search term "acme" over name and email
        EXPECTED: name LIKE :search OR email LIKE :search, bound to %acme%
        """
        stage = SearchStage(SEARCHABLE)

        records = stage.apply(base_records, ViewRequest(search="acme"))

        compiled = records.statement.compile()
        sql = str(compiled)
        assert "users.name LIKE :search OR users.email LIKE :search" in sql
        assert compiled.params["search"] == "%acme%"

    def test_matches_rows_in_either_column(
        self, base_records: RecordCollection, source: SqlAlchemyRecordSource
    ) -> None:
        stage = SearchStage(SEARCHABLE)

        records = stage.apply(base_records, ViewRequest(search="acme"))

        assert {row.id for row in source.fetch(records)} == {3, 7, 12}

    def test_empty_term_passes_through(self, base_records: RecordCollection) -> None:
        stage = SearchStage(SEARCHABLE)

        assert stage.apply(base_records, ViewRequest(search="")) is base_records
        assert stage.apply(base_records, ViewRequest()) is base_records

    def test_blank_term_passes_through(self, base_records: RecordCollection) -> None:
        """
        SCENARIO: Search term made only of whitespace
        EXPECTED: Treated like no search at all
        """
        stage = SearchStage(SEARCHABLE)
        request = ViewRequest(search="   \t")

        assert request.has_search is False
        assert stage.apply(base_records, request) is base_records

    def test_no_searchable_columns_passes_through(
        self, base_records: RecordCollection
    ) -> None:
        stage = SearchStage([])

        assert stage.apply(base_records, ViewRequest(search="acme")) is base_records

    def test_case_insensitive_uses_lower(self, base_records: RecordCollection) -> None:
        stage = SearchStage(SEARCHABLE, case_insensitive=True)

        records = stage.apply(base_records, ViewRequest(search="ACME"))

        assert "lower(users.name) LIKE lower(:search)" in str(records.statement.compile())

    def test_search_narrows_filtered_collection(
        self, base_records: RecordCollection, source: SqlAlchemyRecordSource
    ) -> None:
        """
        SCENARIO: Collection already narrowed to active users
        EXPECTED: Search is ANDed on top (only user03 and user07 remain)
        """
        stage = SearchStage(SEARCHABLE)
        active = base_records.apply_scope("active_only", None)

        records = stage.apply(active, ViewRequest(search="acme"))

        assert {row.id for row in source.fetch(records)} == {3, 7}
