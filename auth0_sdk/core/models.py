"""Lightweight models attached to every API response."""

from __future__ import annotations

from dataclasses import dataclass

from auth0_sdk.core.quota import (
    ClientQuotaLimit,
    HeaderMap,
    OrganizationQuotaLimit,
    extract_header_value,
    get_client_quota_limit,
    get_organization_quota_limit,
)

RATE_LIMIT_LIMIT_HEADER = "X-Ratelimit-Limit"
RATE_LIMIT_REMAINING_HEADER = "X-Ratelimit-Remaining"
RATE_LIMIT_RESET_HEADER = "X-Ratelimit-Reset"


def _int_header(headers: HeaderMap, name: str) -> int | None:
    raw = extract_header_value(headers, name)
    if raw is None:
        return None
    try:
        return int(raw.strip())
    except ValueError:
        return None


@dataclass(frozen=True)
class RateLimitInfo:
    """Rate-limit and quota metadata parsed from response headers.

    ``reset`` is the epoch second at which the global limit resets.  The quota
    fields are populated from the ``Auth0-*-Quota-Limit`` headers when the
    tenant has client or organization quotas configured.
    """

    limit: int | None = None
    remaining: int | None = None
    reset: int | None = None
    client_quota_limit: ClientQuotaLimit | None = None
    organization_quota_limit: OrganizationQuotaLimit | None = None

    @classmethod
    def from_headers(cls, headers: HeaderMap | None) -> RateLimitInfo | None:
        """Build from a Title-Case header map, returning *None* if nothing is present."""
        if not headers:
            return None
        info = cls(
            limit=_int_header(headers, RATE_LIMIT_LIMIT_HEADER),
            remaining=_int_header(headers, RATE_LIMIT_REMAINING_HEADER),
            reset=_int_header(headers, RATE_LIMIT_RESET_HEADER),
            client_quota_limit=get_client_quota_limit(headers),
            organization_quota_limit=get_organization_quota_limit(headers),
        )
        if info == cls():
            return None
        return info
