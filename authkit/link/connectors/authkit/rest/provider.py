"""Authkit REST connector.

This connector talks to the authkit service directly: it fetches single
connection pages, drives the pagination executor across every page, and
looks up the caller's whitelist flag.

Architecture:
    Endpoint specs and adapters are looked up in the endpoint registry and
    executed through RestRunner. Headers given to the connector are sent
    with every request.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Mapping
from typing import Any

from authkit.link.connectors.authkit.config import DEFAULT_PAGINATION, DEFAULT_TIMEOUT
from authkit.link.models import ConnectionsPage, UserFlags
from authkit.link.runtime.pagination import PageExecutor, PaginationOptions, PaginationResult
from authkit.link.runtime.rest import RestRunner, RESTTransport

from .endpoints import get_endpoint_adapter, get_endpoint_spec

logger = logging.getLogger(__name__)


class AuthkitRESTConnector:
    """Authkit REST connector.

    Can be used as an async context manager; the underlying HTTP session is
    closed on exit.
    """

    def __init__(
        self,
        base_url: str,
        *,
        headers: Mapping[str, str] | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: RESTTransport | None = None,
    ) -> None:
        """Initialize authkit REST connector.

        Args:
            base_url: Service base URL, e.g. ``https://api.example.com``
            headers: Headers sent with every request (authentication included)
            timeout: Total per-request timeout in seconds
            transport: Optional pre-built transport (tests, shared sessions)
        """
        self._headers = dict(headers or {})
        self._transport = transport or RESTTransport(base_url=base_url, timeout=timeout)
        self._runner = RestRunner(self._transport)

    async def fetch(self, endpoint_id: str, params: dict[str, Any]) -> Any:
        """Fetch data from an authkit REST endpoint.

        Args:
            endpoint_id: Endpoint identifier ("connections" or "user_flags")
            params: Request parameters

        Returns:
            Parsed response from the endpoint adapter

        Raises:
            ValueError: If endpoint_id is not found in registry
        """
        spec = get_endpoint_spec(endpoint_id)
        if spec is None:
            raise ValueError(f"Unknown REST endpoint: {endpoint_id}")

        adapter_cls = get_endpoint_adapter(endpoint_id)
        if adapter_cls is None:
            raise ValueError(f"No adapter found for endpoint: {endpoint_id}")

        params = {**params, "headers": self._headers}
        return await self._runner.run(spec=spec, adapter=adapter_cls(), params=params)

    async def fetch_page(
        self, page: int, limit: int, payload: Mapping[str, Any] | None = None
    ) -> ConnectionsPage:
        """Fetch one connections page. No retry is applied here.

        Raises:
            ValueError: If page < 1 or limit <= 0
            UpstreamStatusError: On a non-2xx response
            TransportError: When no response was received
            ValidationError: When the body is not a connections page
        """
        result: ConnectionsPage = await self.fetch(
            "connections", {"page": page, "limit": limit, "payload": payload}
        )
        return result

    async def paginate(
        self,
        payload: Mapping[str, Any] | None = None,
        options: PaginationOptions | None = None,
        *,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ) -> PaginationResult:
        """Fetch every connections page and merge them.

        Args:
            payload: JSON body sent with every page request
            options: Pagination options (defaults to DEFAULT_PAGINATION)
            sleep: Awaitable sleep used for retry backoff

        Returns:
            PaginationResult with the merged page and run statistics
        """
        executor = PageExecutor(
            options or DEFAULT_PAGINATION, endpoint_id="connections", sleep=sleep
        )

        async def fetch_page(page: int, limit: int) -> ConnectionsPage:
            return await self.fetch_page(page, limit, payload)

        return await executor.execute(fetch_page)

    async def fetch_all_connections(
        self,
        payload: Mapping[str, Any] | None = None,
        options: PaginationOptions | None = None,
    ) -> ConnectionsPage:
        """Fetch every connections page and return the merged page."""
        result = await self.paginate(payload, options)
        return result.data

    async def fetch_user_flags(self) -> UserFlags:
        """Fetch the caller's feature flags. Errors propagate."""
        result: UserFlags = await self.fetch("user_flags", {})
        return result

    async def fetch_whitelist_status(self) -> bool:
        """Return the caller's whitelist flag, or False if it cannot be read.

        Never raises for upstream, transport or parsing failures.
        """
        try:
            flags = await self.fetch_user_flags()
        except Exception as e:
            logger.warning(
                "user_flags_unavailable",
                extra={"error_type": type(e).__name__, "error_message": str(e)},
            )
            return False
        if flags.authkit_whitelist is None:
            logger.warning("user_flags_whitelist_missing")
            return False
        return flags.authkit_whitelist

    async def close(self) -> None:
        await self._transport.close()

    async def __aenter__(self) -> AuthkitRESTConnector:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
