"""Structured logging for pagination runs.

Every event is logged with its name as the message and its fields in
``extra`` so structured log handlers can pick them up.
"""

from __future__ import annotations

import logging

from .definitions import PaginationResult

logger = logging.getLogger(__name__)


def log_page_plan(
    *,
    endpoint_id: str,
    total_pages: int,
    total_batches: int,
    batch_size: int,
) -> None:
    """Log the batch plan for the pages after page 1."""
    logger.info(
        "pagination_plan_created",
        extra={
            "endpoint_id": endpoint_id,
            "total_pages": total_pages,
            "total_batches": total_batches,
            "batch_size": batch_size,
        },
    )


def log_page_fetched(
    *,
    endpoint_id: str,
    page: int,
    rows: int,
    latency_ms: float | None = None,
) -> None:
    """Log a successfully fetched page.

    Args:
        endpoint_id: Endpoint identifier
        page: 1-based page number
        rows: Number of rows the page carried
        latency_ms: Latency in milliseconds, retries and backoff included (optional)
    """
    logger.debug(
        "pagination_page_fetched",
        extra={
            "endpoint_id": endpoint_id,
            "page": page,
            "rows": rows,
            "latency_ms": latency_ms,
        },
    )


def log_retry_scheduled(
    *,
    endpoint_id: str,
    page: int,
    attempt: int,
    delay: float,
    error: BaseException,
) -> None:
    """Log a failed page attempt that will be retried after ``delay`` seconds."""
    logger.warning(
        "pagination_retry_scheduled",
        extra={
            "endpoint_id": endpoint_id,
            "page": page,
            "attempt": attempt,
            "delay_s": delay,
            "error_type": type(error).__name__,
            "error_message": str(error),
        },
    )


def log_batch_error(
    *,
    endpoint_id: str,
    start_page: int,
    pages: list[int],
    error: BaseException,
) -> None:
    """Log a batch that failed after exhausting retries.

    Args:
        endpoint_id: Endpoint identifier
        start_page: First page number of the failed batch
        pages: Every page number in the failed batch
        error: The error that aborted the batch
    """
    logger.error(
        "pagination_batch_error",
        extra={
            "endpoint_id": endpoint_id,
            "start_page": start_page,
            "pages": pages,
            "error_type": type(error).__name__,
            "error_message": str(error),
        },
    )


def log_pagination_complete(
    *,
    endpoint_id: str,
    result: PaginationResult,
    total_latency_ms: float | None = None,
) -> None:
    """Log completion of a pagination run."""
    logger.info(
        "pagination_complete",
        extra={
            "endpoint_id": endpoint_id,
            "pages_fetched": result.pages_fetched,
            "batches": result.batches,
            "retries": result.retries,
            "total_rows": len(result.data.rows),
            "total": result.data.total,
            "total_latency_ms": total_latency_ms,
        },
    )
