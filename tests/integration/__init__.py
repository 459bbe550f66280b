"""
Integration Tests - End-to-End Grid Requests.

These tests drive GridQuery from legacy request parameters through the
SQLAlchemy record source to the response envelope.

Test Files:
    - test_grid_query.py: Full request workflow
"""
