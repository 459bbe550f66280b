"""
Test Suite for serverside_grid.

Test organization:
    - unit/: Stage, registry and config tests against an in-memory database
    - integration/: GridQuery from legacy parameters to response envelope
    - fixtures/: Test schema, seed data and sample configuration

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest tests/integration/               # Integration tests only
"""
