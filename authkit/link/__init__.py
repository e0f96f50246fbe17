"""Authkit Link - paginated connections aggregation for event link tokens."""

from .api import EventLinkAPI, create_event_link_token
from .connectors import AuthkitRESTConnector
from .core import (
    LinkError,
    ProviderError,
    TransportError,
    UpstreamStatusError,
    ValidationError,
)
from .models import (
    ConnectionsPage,
    LinkTokenFailure,
    LinkTokenPassThrough,
    LinkTokenResult,
    LinkTokenSuccess,
    UserFlags,
)
from .runtime.pagination import PageExecutor, PagePlanner, PaginationOptions, PaginationResult
from .utils import retry_async

__all__ = [
    # API
    "EventLinkAPI",
    "create_event_link_token",
    # Connectors
    "AuthkitRESTConnector",
    # Models
    "ConnectionsPage",
    "LinkTokenFailure",
    "LinkTokenPassThrough",
    "LinkTokenResult",
    "LinkTokenSuccess",
    "UserFlags",
    # Pagination
    "PageExecutor",
    "PagePlanner",
    "PaginationOptions",
    "PaginationResult",
    "retry_async",
    # Exceptions
    "LinkError",
    "ProviderError",
    "TransportError",
    "UpstreamStatusError",
    "ValidationError",
]
