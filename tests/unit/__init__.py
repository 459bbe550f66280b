"""
Unit Tests - Testing Individual Components in Isolation.

Stages are applied to collections and either compiled to SQL or run
against the seeded SQLite database.

Test Files:
    - test_column_resolver.py: Ordinal index resolution
    - test_filter_stage.py: Custom, association and direct filters
    - test_search_stage.py / test_sort_stage.py / test_pagination_stage.py
    - test_count_stage.py / test_count_guard.py: Fail-soft counting
    - test_filter_registry.py: Custom filter registration and lookup
    - test_config_loader.py: Configuration loading/validation
"""
