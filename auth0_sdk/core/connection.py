"""Async and sync HTTP connections shared by the API clients.

A connection owns one ``httpx`` client, adds the bearer token and the
``Auth0-Client`` telemetry header to every request, records the rate-limit
metadata of the latest response and maps error responses onto the
:mod:`auth0_sdk.core.exceptions` hierarchy.
"""

from __future__ import annotations

import base64
import json
import logging
import platform
import time
from typing import Any, Mapping

import httpx

from auth0_sdk._version import __version__
from auth0_sdk.config import settings
from auth0_sdk.core.exceptions import (
    ApiError,
    BadRequestError,
    ConflictError,
    NotFoundError,
    RateLimitError,
    UnauthorizedError,
)
from auth0_sdk.core.models import RateLimitInfo
from auth0_sdk.core.request_context import request_scope

logger = logging.getLogger(__name__)

TELEMETRY_HEADER = "Auth0-Client"

# Maps HTTP status codes to exception classes.
_STATUS_MAP: dict[int, type[ApiError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: UnauthorizedError,
    404: NotFoundError,
    409: ConflictError,
    422: BadRequestError,
    429: RateLimitError,
}


def header_map(headers: httpx.Headers) -> dict[str, list[str]]:
    """Group response headers by Title-Case name, keeping repeated values."""
    grouped: dict[str, list[str]] = {}
    for key, value in headers.multi_items():
        grouped.setdefault(key.title(), []).append(value)
    return grouped


def telemetry_header_value() -> str:
    payload = {
        "name": "auth0-sdk",
        "version": __version__,
        "env": {"python": platform.python_version()},
    }
    raw = json.dumps(payload, separators=(",", ":")).encode()
    return base64.urlsafe_b64encode(raw).decode().rstrip("=")


def _clean_params(params: Mapping[str, Any] | None) -> dict[str, Any] | None:
    if params is None:
        return None
    cleaned: dict[str, Any] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        cleaned[key] = value
    return cleaned


def _decode_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def _build_exception(
    response: httpx.Response,
    rate_limit_info: RateLimitInfo | None,
) -> ApiError:
    """Construct the appropriate exception for an error *response*.

    Management API errors look like ``{"statusCode", "error", "message",
    "errorCode"}``; Authentication API errors look like ``{"error",
    "error_description"}``.
    """
    body = _decode_body(response)
    error = error_code = None
    detail = response.reason_phrase or "Unknown error"
    if isinstance(body, dict):
        error = body.get("error")
        error_code = body.get("errorCode")
        detail = (
            body.get("message")
            or body.get("error_description")
            or body.get("description")
            or error
            or detail
        )
    elif isinstance(body, str) and body:
        detail = body

    exc_cls = _STATUS_MAP.get(response.status_code, ApiError)
    kwargs: dict[str, Any] = {"error": error, "error_code": error_code, "body": body}
    if exc_cls is RateLimitError:
        return RateLimitError(response.status_code, str(detail), rate_limit_info, **kwargs)
    return exc_cls(response.status_code, str(detail), **kwargs)


def _log_call(method: str, path: str, response: httpx.Response, start: float) -> None:
    elapsed_ms = round((time.perf_counter() - start) * 1000, 2)
    logger.debug(
        "%s %s %d %.2fms",
        method,
        path,
        response.status_code,
        elapsed_ms,
        extra={
            "http_method": method,
            "path": path,
            "status_code": response.status_code,
            "elapsed_ms": elapsed_ms,
        },
    )


def _raise_for_status(
    response: httpx.Response, rate_limit_info: RateLimitInfo | None
) -> None:
    if response.status_code < 400:
        return
    exc = _build_exception(response, rate_limit_info)
    if isinstance(exc, RateLimitError):
        remaining = rate_limit_info.remaining if rate_limit_info else None
        logger.warning(
            "Rate limited on %s %s (remaining=%s)",
            response.request.method,
            response.request.url.path,
            remaining,
            extra={
                "http_method": response.request.method,
                "path": response.request.url.path,
                "status_code": response.status_code,
                "rate_limit_remaining": remaining,
            },
        )
    raise exc


def _client_kwargs(
    base_url: str,
    token: str | None,
    timeout: float | None,
    headers: Mapping[str, str] | None,
    transport: Any,
) -> dict[str, Any]:
    default_headers: dict[str, str] = {TELEMETRY_HEADER: telemetry_header_value()}
    if token:
        default_headers["Authorization"] = f"Bearer {token}"
    if headers:
        default_headers.update(headers)
    kwargs: dict[str, Any] = {
        "base_url": base_url,
        "headers": default_headers,
        "timeout": settings.timeout if timeout is None else timeout,
    }
    if transport is not None:
        kwargs["transport"] = transport
    return kwargs


# ---------------------------------------------------------------------------
# Async connection
# ---------------------------------------------------------------------------


class AsyncHttpConnection:
    """Async connection (backed by ``httpx.AsyncClient``)."""

    def __init__(
        self,
        base_url: str,
        *,
        token: str | None = None,
        timeout: float | None = None,
        headers: Mapping[str, str] | None = None,
        _transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            **_client_kwargs(base_url, token, timeout, headers, _transport)
        )
        self.last_rate_limit: RateLimitInfo | None = None

    # -- context manager -----------------------------------------------------

    async def __aenter__(self) -> AsyncHttpConnection:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()

    async def close(self) -> None:
        await self._client.aclose()

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    @property
    def base_url(self) -> str:
        return str(self._client.base_url)

    # -- internal ------------------------------------------------------------

    def _handle_response(self, response: httpx.Response) -> None:
        self.last_rate_limit = RateLimitInfo.from_headers(header_map(response.headers))
        _raise_for_status(response, self.last_rate_limit)

    async def _send(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        with request_scope():
            start = time.perf_counter()
            response = await self._client.request(method, path, **kwargs)
            _log_call(method, path, response, start)
            self._handle_response(response)
            return response

    # -- public methods ------------------------------------------------------

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        json: Any = None,
        data: Mapping[str, Any] | None = None,
        files: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """Send a request and return the decoded JSON body (``None`` if empty)."""
        response = await self._send(
            method,
            path,
            params=_clean_params(params),
            json=json,
            data=data,
            files=files,
            headers=headers,
        )
        return _decode_body(response)

    async def request_text(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> str:
        """Send a request and return the undecoded response text."""
        response = await self._send(
            method, path, params=_clean_params(params), headers=headers
        )
        return response.text


# ---------------------------------------------------------------------------
# Sync connection
# ---------------------------------------------------------------------------


class HttpConnection:
    """Synchronous connection (backed by ``httpx.Client``)."""

    def __init__(
        self,
        base_url: str,
        *,
        token: str | None = None,
        timeout: float | None = None,
        headers: Mapping[str, str] | None = None,
        _transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(
            **_client_kwargs(base_url, token, timeout, headers, _transport)
        )
        self.last_rate_limit: RateLimitInfo | None = None

    # -- context manager -----------------------------------------------------

    def __enter__(self) -> HttpConnection:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    @property
    def base_url(self) -> str:
        return str(self._client.base_url)

    # -- internal ------------------------------------------------------------

    def _handle_response(self, response: httpx.Response) -> None:
        self.last_rate_limit = RateLimitInfo.from_headers(header_map(response.headers))
        _raise_for_status(response, self.last_rate_limit)

    def _send(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        with request_scope():
            start = time.perf_counter()
            response = self._client.request(method, path, **kwargs)
            _log_call(method, path, response, start)
            self._handle_response(response)
            return response

    # -- public methods ------------------------------------------------------

    def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        json: Any = None,
        data: Mapping[str, Any] | None = None,
        files: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """Send a request and return the decoded JSON body (``None`` if empty)."""
        response = self._send(
            method,
            path,
            params=_clean_params(params),
            json=json,
            data=data,
            files=files,
            headers=headers,
        )
        return _decode_body(response)

    def request_text(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> str:
        """Send a request and return the undecoded response text."""
        response = self._send(
            method, path, params=_clean_params(params), headers=headers
        )
        return response.text
