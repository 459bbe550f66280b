"""
Pipeline Package - Orchestration.

Components:
    - GridQuery: Request-scoped orchestrator for rows, counts and the
      response envelope

Design Principles:
    - All dependencies injected via constructor
    - Rows and counts share the filter and search stages
"""

from serverside_grid.pipeline.grid_query import GridQuery

__all__ = ["GridQuery"]
