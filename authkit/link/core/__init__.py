"""Core primitives shared across the library."""

from .exceptions import (
    LinkError,
    ProviderError,
    TransportError,
    UpstreamStatusError,
    ValidationError,
)

__all__ = [
    "LinkError",
    "ProviderError",
    "TransportError",
    "UpstreamStatusError",
    "ValidationError",
]
