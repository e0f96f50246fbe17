"""Pagination options, plans and results.

This module defines the data structures used to describe a full
pagination run: the tunable options, the plan for each page request
and the aggregated outcome.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

from ...models import ConnectionsPage

FetchPage = Callable[[int, int], Awaitable[ConnectionsPage]]
"""Async page fetch capability: ``(page, limit) -> ConnectionsPage``."""


class PaginationOptions(BaseModel):
    """Tunables for one pagination run.

    Attributes:
        limit: Page size requested from upstream
        max_concurrent_requests: Upper bound on page requests in flight at once
        max_retries: Attempts per page (first attempt included)
        retry_base_delay: Seconds to wait after the first failed attempt; doubles
            after every further failure
    """

    limit: int = Field(default=100, gt=0)
    max_concurrent_requests: int = Field(default=3, gt=0, alias="maxConcurrentRequests")
    max_retries: int = Field(default=3, gt=0, alias="maxRetries")
    retry_base_delay: float = Field(default=1.0, ge=0, alias="retryBaseDelay")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


@dataclass(frozen=True)
class PagePlan:
    """Plan for a single page request.

    Attributes:
        page: 1-based page number
        limit: Page size for this request
        batch_index: Zero-based index of the batch this page belongs to
    """

    page: int
    limit: int
    batch_index: int = 0


@dataclass
class PaginationResult:
    """Result of a pagination run.

    Attributes:
        data: Merged page (or page 1 unchanged when it was the only page)
        pages_fetched: Number of pages successfully fetched
        batches: Number of concurrent batches issued after page 1
        retries: Number of retry attempts scheduled across all pages
    """

    data: ConnectionsPage
    pages_fetched: int
    batches: int = 0
    retries: int = 0
