"""Entry points for the Management API v2."""

from __future__ import annotations

import httpx

from auth0_sdk.config import settings
from auth0_sdk.core.connection import AsyncHttpConnection, HttpConnection
from auth0_sdk.core.models import RateLimitInfo
from auth0_sdk.management.client_grants import AsyncClientGrantsClient, ClientGrantsClient
from auth0_sdk.management.jobs import AsyncJobsClient, JobsClient
from auth0_sdk.management.keys import AsyncKeysClient, KeysClient
from auth0_sdk.management.organizations import (
    AsyncOrganizationsClient,
    OrganizationsClient,
)
from auth0_sdk.management.resource_servers import (
    AsyncResourceServersClient,
    ResourceServersClient,
)


def management_base_url(domain: str | None) -> str:
    """Return ``https://{domain}/api/v2`` for a tenant domain or URL."""
    domain = (domain or settings.domain).strip().rstrip("/")
    if not domain:
        raise ValueError("domain must be provided (or set AUTH0_DOMAIN)")
    if not domain.startswith(("http://", "https://")):
        domain = f"https://{domain}"
    return f"{domain}/api/v2"


def _resolve_token(token: str | None) -> str:
    token = token or settings.management_token
    if not token:
        raise ValueError("token must be provided (or set AUTH0_MANAGEMENT_TOKEN)")
    return token


# ---------------------------------------------------------------------------
# Async client
# ---------------------------------------------------------------------------


class AsyncManagementApiClient:
    """Async Management API client.

    Pass an existing :class:`AsyncHttpConnection` to share it between
    clients; a connection passed in is never closed by this client.
    """

    def __init__(
        self,
        domain: str | None = None,
        token: str | None = None,
        *,
        timeout: float | None = None,
        connection: AsyncHttpConnection | None = None,
        _transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if connection is None:
            connection = AsyncHttpConnection(
                management_base_url(domain),
                token=_resolve_token(token),
                timeout=timeout,
                _transport=_transport,
            )
            self._owns_connection = True
        else:
            self._owns_connection = False
        self.connection = connection

        self.jobs = AsyncJobsClient(connection)
        self.organizations = AsyncOrganizationsClient(connection)
        self.client_grants = AsyncClientGrantsClient(connection)
        self.resource_servers = AsyncResourceServersClient(connection)
        self.keys = AsyncKeysClient(connection)

    async def __aenter__(self) -> AsyncManagementApiClient:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()

    async def close(self) -> None:
        if self._owns_connection:
            await self.connection.close()

    @property
    def last_rate_limit(self) -> RateLimitInfo | None:
        """Rate-limit and quota information from the most recent response."""
        return self.connection.last_rate_limit


# ---------------------------------------------------------------------------
# Sync client
# ---------------------------------------------------------------------------


class ManagementApiClient:
    """Synchronous Management API client.

    Usage::

        with ManagementApiClient("tenant.auth0.com", token) as api:
            job = api.jobs.get("job_abc")
            errors = api.jobs.get_error_details(job.id)
            quota = api.last_rate_limit.client_quota_limit
    """

    def __init__(
        self,
        domain: str | None = None,
        token: str | None = None,
        *,
        timeout: float | None = None,
        connection: HttpConnection | None = None,
        _transport: httpx.BaseTransport | None = None,
    ) -> None:
        if connection is None:
            connection = HttpConnection(
                management_base_url(domain),
                token=_resolve_token(token),
                timeout=timeout,
                _transport=_transport,
            )
            self._owns_connection = True
        else:
            self._owns_connection = False
        self.connection = connection

        self.jobs = JobsClient(connection)
        self.organizations = OrganizationsClient(connection)
        self.client_grants = ClientGrantsClient(connection)
        self.resource_servers = ResourceServersClient(connection)
        self.keys = KeysClient(connection)

    def __enter__(self) -> ManagementApiClient:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_connection:
            self.connection.close()

    @property
    def last_rate_limit(self) -> RateLimitInfo | None:
        """Rate-limit and quota information from the most recent response."""
        return self.connection.last_rate_limit
