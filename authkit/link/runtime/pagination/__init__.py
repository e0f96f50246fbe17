"""Pagination layer that turns a paged API into one complete result.

Architecture:
    - definitions.py: PaginationOptions, PagePlan, PaginationResult
    - planners.py: splits pages 2..N into bounded concurrent batches
    - executors.py: fetches, retries and merges pages
    - telemetry.py: structured logging

Usage:
    executor = PageExecutor(PaginationOptions(limit=100))
    result = await executor.execute(fetch_page)
"""

from __future__ import annotations

from .definitions import FetchPage, PagePlan, PaginationOptions, PaginationResult
from .executors import PageExecutor
from .planners import PagePlanner

__all__ = [
    "FetchPage",
    "PagePlan",
    "PagePlanner",
    "PageExecutor",
    "PaginationOptions",
    "PaginationResult",
]
