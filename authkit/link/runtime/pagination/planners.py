"""Page planning: splits the pages after page 1 into concurrent batches."""

from __future__ import annotations

from .definitions import PagePlan, PaginationOptions
from .telemetry import log_page_plan


class PagePlanner:
    """Plans batches of page requests.

    Pages ``2..pages`` are split, in ascending order, into consecutive
    batches of at most ``max_concurrent_requests`` pages each.
    """

    def __init__(self, options: PaginationOptions | None = None) -> None:
        self._options = options or PaginationOptions()

    def plan(self, *, pages: int, endpoint_id: str = "unknown") -> list[list[PagePlan]]:
        """Plan the batches that follow page 1.

        Args:
            pages: Total page count reported by page 1
            endpoint_id: Endpoint identifier for telemetry

        Returns:
            Batches of page plans; empty when ``pages <= 1``
        """
        size = self._options.max_concurrent_requests
        remaining = list(range(2, pages + 1))

        batches = [
            [
                PagePlan(page=page, limit=self._options.limit, batch_index=index)
                for page in remaining[start : start + size]
            ]
            for index, start in enumerate(range(0, len(remaining), size))
        ]

        if batches:
            log_page_plan(
                endpoint_id=endpoint_id,
                total_pages=pages,
                total_batches=len(batches),
                batch_size=size,
            )
        return batches
