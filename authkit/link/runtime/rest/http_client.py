"""HTTP client helper."""

from __future__ import annotations

import asyncio
import json
from typing import Any

import aiohttp

from ...core.exceptions import TransportError, UpstreamStatusError, ValidationError


class HTTPClient:
    """Async HTTP client wrapper.

    Every call makes exactly one request. Non-2xx responses raise
    ``UpstreamStatusError`` with the decoded body attached; requests that never
    produce a response raise ``TransportError``.
    """

    def __init__(self, base_url: str | None = None, timeout: float = 30.0) -> None:
        self.base_url = base_url.rstrip("/") if base_url else base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    def _resolve(self, url: str) -> str:
        # If base_url is set and url is relative, combine them
        if self.base_url and not url.startswith("http"):
            return f"{self.base_url}{url}"
        return url

    async def get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """GET request."""
        url = self._resolve(url)
        try:
            async with self.session.get(url, params=params, headers=headers) as response:
                return await self._handle_response("GET", url, response)
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise TransportError(f"GET {url} failed: {exc!r}") from exc

    async def post(
        self,
        url: str,
        json: Any = None,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """POST request with a JSON body."""
        url = self._resolve(url)
        try:
            async with self.session.post(
                url, json=json, params=params, headers=headers
            ) as response:
                return await self._handle_response("POST", url, response)
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise TransportError(f"POST {url} failed: {exc!r}") from exc

    async def _handle_response(
        self, method: str, url: str, response: aiohttp.ClientResponse
    ) -> Any:
        if not 200 <= response.status < 300:
            body = await self._read_error_body(response)
            raise UpstreamStatusError(
                f"{method} {url} -> {response.status}",
                status_code=response.status,
                body=body,
            )
        try:
            return await response.json(content_type=None)
        except ValueError as exc:
            raise ValidationError(f"{method} {url} returned a non-JSON body") from exc

    @staticmethod
    async def _read_error_body(response: aiohttp.ClientResponse) -> Any:
        """Decode an error body: JSON if possible, else text, None if empty."""
        try:
            text = await response.text()
        except (aiohttp.ClientError, UnicodeDecodeError):
            return None
        if not text:
            return None
        try:
            return json.loads(text)
        except ValueError:
            return text

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
