"""Page execution logic for fetching and merging every page.

This module provides the PageExecutor class that fetches page 1, plans the
remaining pages, fetches them in bounded concurrent batches with per-page
retry, and merges the rows into a single page-shaped result.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from time import perf_counter
from typing import Any

from ...models import ConnectionsPage
from ...utils.retry import retry_async
from .definitions import FetchPage, PagePlan, PaginationOptions, PaginationResult
from .planners import PagePlanner
from .telemetry import (
    log_batch_error,
    log_page_fetched,
    log_pagination_complete,
    log_retry_scheduled,
)


class PageExecutor:
    """Drives a page fetch capability until every page has been retrieved.

    Batches run strictly one after another; the pages inside a batch are
    fetched concurrently. Any page that still fails after ``max_retries``
    attempts aborts the run: its unfinished siblings are cancelled and the
    error propagates. Rows are always merged in page-number order.
    """

    def __init__(
        self,
        options: PaginationOptions | None = None,
        *,
        planner: PagePlanner | None = None,
        endpoint_id: str = "unknown",
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ) -> None:
        """Initialize page executor.

        Args:
            options: Pagination options (defaults: limit 100, 3 concurrent, 3 attempts)
            planner: Optional planner; built from ``options`` when omitted
            endpoint_id: Endpoint identifier for telemetry
            sleep: Awaitable sleep used for retry backoff
        """
        self._options = options or PaginationOptions()
        self._planner = planner or PagePlanner(self._options)
        self._endpoint_id = endpoint_id
        self._sleep = sleep
        self._retries = 0

    @property
    def options(self) -> PaginationOptions:
        return self._options

    async def execute(self, fetch_page: FetchPage) -> PaginationResult:
        """Fetch and merge every page.

        Args:
            fetch_page: Async callable ``(page, limit) -> ConnectionsPage``

        Returns:
            PaginationResult whose ``data`` holds every row

        Raises:
            Exception: Whatever the failing page fetch raised on its last attempt
        """
        started = perf_counter()
        self._retries = 0

        first = await fetch_page(1, self._options.limit)
        log_page_fetched(
            endpoint_id=self._endpoint_id,
            page=1,
            rows=len(first.rows),
            latency_ms=(perf_counter() - started) * 1000.0,
        )

        # Single page: hand it back untouched
        if first.pages <= 1:
            result = PaginationResult(data=first, pages_fetched=1)
            log_pagination_complete(
                endpoint_id=self._endpoint_id,
                result=result,
                total_latency_ms=(perf_counter() - started) * 1000.0,
            )
            return result

        batches = self._planner.plan(pages=first.pages, endpoint_id=self._endpoint_id)
        responses: list[ConnectionsPage] = [first]
        for batch in batches:
            responses.extend(await self._run_batch(batch, fetch_page))

        result = PaginationResult(
            data=self._merge(responses),
            pages_fetched=len(responses),
            batches=len(batches),
            retries=self._retries,
        )
        log_pagination_complete(
            endpoint_id=self._endpoint_id,
            result=result,
            total_latency_ms=(perf_counter() - started) * 1000.0,
        )
        return result

    async def _run_batch(
        self, batch: list[PagePlan], fetch_page: FetchPage
    ) -> list[ConnectionsPage]:
        tasks = [asyncio.create_task(self._fetch_with_retry(plan, fetch_page)) for plan in batch]
        try:
            # gather keeps argument order, so results are in page order
            return list(await asyncio.gather(*tasks))
        except Exception as e:
            for task in tasks:
                if not task.done():
                    task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            log_batch_error(
                endpoint_id=self._endpoint_id,
                start_page=batch[0].page,
                pages=[plan.page for plan in batch],
                error=e,
            )
            raise

    async def _fetch_with_retry(self, plan: PagePlan, fetch_page: FetchPage) -> ConnectionsPage:
        started = perf_counter()

        def on_retry(attempt: int, error: BaseException, delay: float) -> None:
            self._retries += 1
            log_retry_scheduled(
                endpoint_id=self._endpoint_id,
                page=plan.page,
                attempt=attempt,
                delay=delay,
                error=error,
            )

        page = await retry_async(
            lambda: fetch_page(plan.page, plan.limit),
            max_attempts=self._options.max_retries,
            base_delay=self._options.retry_base_delay,
            on_retry=on_retry,
            sleep=self._sleep,
        )
        log_page_fetched(
            endpoint_id=self._endpoint_id,
            page=plan.page,
            rows=len(page.rows),
            latency_ms=(perf_counter() - started) * 1000.0,
        )
        return page

    @staticmethod
    def _merge(responses: list[ConnectionsPage]) -> ConnectionsPage:
        """Merge pages (already in page order) into one page-shaped result."""
        first = responses[0]
        last = responses[-1]
        rows: list[Any] = []
        for response in responses:
            rows.extend(response.rows)
        return ConnectionsPage(
            rows=rows,
            page=1,
            pages=1,
            total=first.total,
            request_id=last.request_id,
            is_whitelist=False,
        )
