"""
Test Fixtures - Shared Test Data and Configurations.

This package contains reusable test fixtures:
    - models.py: Company/User schema with seed data and scopes
    - sample_config.yaml: Sample grid configuration

Usage:
    Import fixtures in test files via pytest fixtures or direct import.
"""
