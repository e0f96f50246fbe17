"""Authkit REST endpoint registry."""

from __future__ import annotations

from authkit.link.runtime.rest import ResponseAdapter, RestEndpointSpec

from . import connections, user_flags

_ENDPOINTS: dict[str, tuple[RestEndpointSpec, type[ResponseAdapter]]] = {
    connections.SPEC.id: (connections.SPEC, connections.Adapter),
    user_flags.SPEC.id: (user_flags.SPEC, user_flags.Adapter),
}


def get_endpoint_spec(endpoint_id: str) -> RestEndpointSpec | None:
    entry = _ENDPOINTS.get(endpoint_id)
    return entry[0] if entry else None


def get_endpoint_adapter(endpoint_id: str) -> type[ResponseAdapter] | None:
    entry = _ENDPOINTS.get(endpoint_id)
    return entry[1] if entry else None


__all__ = ["get_endpoint_adapter", "get_endpoint_spec"]
