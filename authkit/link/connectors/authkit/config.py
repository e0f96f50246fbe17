"""Shared authkit connector constants.

Paths are relative to the caller-supplied base URL; the base URL itself is
never hard-coded.
"""

from __future__ import annotations

from authkit.link.runtime.pagination import PaginationOptions

CONNECTIONS_PATH = "/v1/authkit"
USER_FLAGS_PATH = "/v1/users/flags"

# Total per-request timeout in seconds, enforced by the HTTP client
DEFAULT_TIMEOUT = 30.0

DEFAULT_PAGINATION = PaginationOptions(limit=100, max_concurrent_requests=3, max_retries=3)
