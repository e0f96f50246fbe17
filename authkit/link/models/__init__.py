"""Data models for connection pages, user flags and aggregation outcomes.

Pydantic v2 models are immutable (frozen=True) and accept both the upstream
camelCase names and their snake_case Python names.
"""

from .connections import ConnectionsPage
from .flags import UserFlags
from .link_token import (
    LinkTokenFailure,
    LinkTokenPassThrough,
    LinkTokenResult,
    LinkTokenSuccess,
)

__all__ = [
    "ConnectionsPage",
    "LinkTokenFailure",
    "LinkTokenPassThrough",
    "LinkTokenResult",
    "LinkTokenSuccess",
    "UserFlags",
]
