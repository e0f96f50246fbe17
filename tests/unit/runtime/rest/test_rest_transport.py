"""Precise unit tests for RESTTransport.

Tests focus on HTTPClient delegation.
"""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from authkit.link.runtime.rest import RESTTransport


class TestRESTTransport:
    """Test RESTTransport wrapper."""

    def test_init(self):
        transport = RESTTransport(base_url="https://api.example.com", timeout=5.0)
        assert transport.base_url == "https://api.example.com"
        assert transport._http.timeout.total == 5.0

    @pytest.mark.asyncio
    async def test_get_delegates_to_http_client(self):
        transport = RESTTransport(base_url="https://api.example.com")
        transport._http.get = AsyncMock(return_value={"data": "test"})

        result = await transport.get("/test", params={"key": "value"})

        assert result == {"data": "test"}
        transport._http.get.assert_called_once_with("/test", params={"key": "value"}, headers=None)

    @pytest.mark.asyncio
    async def test_post_delegates_to_http_client(self):
        transport = RESTTransport(base_url="https://api.example.com")
        transport._http.post = AsyncMock(return_value={"data": "created"})

        result = await transport.post("/test", json_body={"key": "value"}, params={"page": 1})

        assert result == {"data": "created"}
        transport._http.post.assert_called_once_with(
            "/test", json={"key": "value"}, params={"page": 1}, headers=None
        )

    @pytest.mark.asyncio
    async def test_close_delegates_to_http_client(self):
        transport = RESTTransport(base_url="https://api.example.com")
        transport._http.close = AsyncMock()

        await transport.close()

        transport._http.close.assert_called_once()
