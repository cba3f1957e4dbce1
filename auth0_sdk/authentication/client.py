"""Clients for the Authentication API."""

from __future__ import annotations

import ipaddress
from typing import Any

import httpx

from auth0_sdk.config import settings
from auth0_sdk.core.connection import AsyncHttpConnection, HttpConnection
from auth0_sdk.core.models import RateLimitInfo
from auth0_sdk.authentication.models import (
    PasswordlessEmailRequest,
    PasswordlessEmailResponse,
    PasswordlessSmsRequest,
    PasswordlessSmsResponse,
)
from auth0_sdk.authentication.tokens import DEFAULT_LEEWAY_SECONDS, decode_id_token

FORWARDED_FOR_HEADER = "auth0-forwarded-for"


def authentication_base_url(domain: str | None) -> str:
    domain = (domain or settings.domain).strip().rstrip("/")
    if not domain:
        raise ValueError("domain must be provided (or set AUTH0_DOMAIN)")
    if not domain.startswith(("http://", "https://")):
        domain = f"https://{domain}"
    return domain


def build_forwarded_for_headers(forwarded_for_ip: str | None) -> dict[str, str] | None:
    """Return the ``auth0-forwarded-for`` header for an end-user IP address.

    Confidential clients calling the Authentication API from a backend use
    this header so brute-force protection applies to the end user rather
    than to the server.  ``None`` or an empty string yields ``None``.

    Raises:
        ValueError: *forwarded_for_ip* is not an IPv4 or IPv6 literal.
    """
    if not forwarded_for_ip:
        return None
    try:
        ipaddress.ip_address(forwarded_for_ip)
    except ValueError:
        raise ValueError(
            f"forwarded_for_ip must be a valid IPv4 or IPv6 address, "
            f"got {forwarded_for_ip!r}"
        ) from None
    return {FORWARDED_FOR_HEADER: forwarded_for_ip}


def _decode_with_defaults(
    connection: HttpConnection | AsyncHttpConnection,
    id_token: str,
    client_id: str | None,
    client_secret: str | None,
    leeway: int,
) -> dict[str, Any]:
    return decode_id_token(
        id_token,
        client_secret=client_secret or settings.client_secret,
        client_id=client_id or settings.client_id,
        issuer=connection.base_url.rstrip("/") + "/",
        leeway=leeway,
    )


# ---------------------------------------------------------------------------
# Async client
# ---------------------------------------------------------------------------


class AsyncAuthenticationApiClient:
    """Async Authentication API client."""

    build_forwarded_for_headers = staticmethod(build_forwarded_for_headers)

    def __init__(
        self,
        domain: str | None = None,
        *,
        timeout: float | None = None,
        connection: AsyncHttpConnection | None = None,
        _transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if connection is None:
            connection = AsyncHttpConnection(
                authentication_base_url(domain),
                timeout=timeout,
                _transport=_transport,
            )
            self._owns_connection = True
        else:
            self._owns_connection = False
        self.connection = connection

    async def __aenter__(self) -> AsyncAuthenticationApiClient:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()

    async def close(self) -> None:
        if self._owns_connection:
            await self.connection.close()

    @property
    def last_rate_limit(self) -> RateLimitInfo | None:
        return self.connection.last_rate_limit

    def decode_id_token(
        self,
        id_token: str,
        *,
        client_id: str | None = None,
        client_secret: str | None = None,
        leeway: int = DEFAULT_LEEWAY_SECONDS,
    ) -> dict[str, Any]:
        """Validate an HS256 ID token issued by this tenant and return its claims.

        *client_id* and *client_secret* default to ``AUTH0_CLIENT_ID`` and
        ``AUTH0_CLIENT_SECRET``.  Raises :class:`IdTokenValidationError` when
        the token does not verify.
        """
        return _decode_with_defaults(
            self.connection, id_token, client_id, client_secret, leeway
        )

    async def start_passwordless_email_flow(
        self,
        request: PasswordlessEmailRequest,
        *,
        forwarded_for: str | None = None,
    ) -> PasswordlessEmailResponse:
        body = await self.connection.request(
            "POST",
            "/passwordless/start",
            json=request.to_payload(),
            headers=build_forwarded_for_headers(forwarded_for),
        )
        return PasswordlessEmailResponse.model_validate(body)

    async def start_passwordless_sms_flow(
        self,
        request: PasswordlessSmsRequest,
        *,
        forwarded_for: str | None = None,
    ) -> PasswordlessSmsResponse:
        body = await self.connection.request(
            "POST",
            "/passwordless/start",
            json=request.to_payload(),
            headers=build_forwarded_for_headers(forwarded_for),
        )
        return PasswordlessSmsResponse.model_validate(body)


# ---------------------------------------------------------------------------
# Sync client
# ---------------------------------------------------------------------------


class AuthenticationApiClient:
    """Synchronous Authentication API client.

    A client closes the connection it created; a connection passed in by the
    caller is left open.
    """

    build_forwarded_for_headers = staticmethod(build_forwarded_for_headers)

    def __init__(
        self,
        domain: str | None = None,
        *,
        timeout: float | None = None,
        connection: HttpConnection | None = None,
        _transport: httpx.BaseTransport | None = None,
    ) -> None:
        if connection is None:
            connection = HttpConnection(
                authentication_base_url(domain),
                timeout=timeout,
                _transport=_transport,
            )
            self._owns_connection = True
        else:
            self._owns_connection = False
        self.connection = connection

    def __enter__(self) -> AuthenticationApiClient:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_connection:
            self.connection.close()

    @property
    def last_rate_limit(self) -> RateLimitInfo | None:
        return self.connection.last_rate_limit

    def decode_id_token(
        self,
        id_token: str,
        *,
        client_id: str | None = None,
        client_secret: str | None = None,
        leeway: int = DEFAULT_LEEWAY_SECONDS,
    ) -> dict[str, Any]:
        """Validate an HS256 ID token issued by this tenant and return its claims.

        *client_id* and *client_secret* default to ``AUTH0_CLIENT_ID`` and
        ``AUTH0_CLIENT_SECRET``.  Raises :class:`IdTokenValidationError` when
        the token does not verify.
        """
        return _decode_with_defaults(
            self.connection, id_token, client_id, client_secret, leeway
        )

    def start_passwordless_email_flow(
        self,
        request: PasswordlessEmailRequest,
        *,
        forwarded_for: str | None = None,
    ) -> PasswordlessEmailResponse:
        body = self.connection.request(
            "POST",
            "/passwordless/start",
            json=request.to_payload(),
            headers=build_forwarded_for_headers(forwarded_for),
        )
        return PasswordlessEmailResponse.model_validate(body)

    def start_passwordless_sms_flow(
        self,
        request: PasswordlessSmsRequest,
        *,
        forwarded_for: str | None = None,
    ) -> PasswordlessSmsResponse:
        body = self.connection.request(
            "POST",
            "/passwordless/start",
            json=request.to_payload(),
            headers=build_forwarded_for_headers(forwarded_for),
        )
        return PasswordlessSmsResponse.model_validate(body)
