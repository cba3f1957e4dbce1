"""Shared plumbing for the Management API resource clients."""

from __future__ import annotations

from urllib.parse import quote

from auth0_sdk.core.connection import AsyncHttpConnection, HttpConnection


def path_segment(value: str, name: str) -> str:
    """Validate and percent-encode an identifier used inside a URL path."""
    if not value or not value.strip():
        raise ValueError(f"{name} must be provided")
    return quote(value, safe="")


class ResourceClient:
    """Base for synchronous resource clients."""

    def __init__(self, connection: HttpConnection) -> None:
        self.connection = connection


class AsyncResourceClient:
    """Base for async resource clients."""

    def __init__(self, connection: AsyncHttpConnection) -> None:
        self.connection = connection
