"""Parser for the ``Auth0-*-Quota-Limit`` response headers.

The Management API reports per-client and per-organization quota usage in a
semi-structured header value::

    b=per_hour;q=10;r=9;t=924,b=per_day;q=100;r=99;t=924

Each comma-separated segment describes one bucket: ``b`` is the bucket name,
``q`` the quota, ``r`` the calls remaining and ``t`` the seconds until the
window resets.  Unknown keys are ignored so the service can add fields
without breaking older clients.

Quota information is best-effort telemetry: nothing in this module raises.
A malformed segment is logged at DEBUG and dropped.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping, Sequence

logger = logging.getLogger(__name__)

CLIENT_QUOTA_LIMIT_HEADER = "Auth0-Client-Quota-Limit"
ORGANIZATION_QUOTA_LIMIT_HEADER = "Auth0-Organization-Quota-Limit"

PER_HOUR_BUCKET = "per_hour"
PER_DAY_BUCKET = "per_day"

_INT32_MAX = 2**31 - 1

_REQUIRED_KEYS = ("b", "q", "r", "t")

HeaderMap = Mapping[str, Sequence[str]]


@dataclass(frozen=True)
class QuotaLimit:
    """Usage of one rate-limit bucket."""

    quota: int
    remaining: int
    reset_after: int


@dataclass(frozen=True)
class ClientQuotaLimit:
    """Quota buckets reported for the calling client."""

    per_hour: QuotaLimit | None = None
    per_day: QuotaLimit | None = None


@dataclass(frozen=True)
class OrganizationQuotaLimit:
    """Quota buckets reported for the organization of the call."""

    per_hour: QuotaLimit | None = None
    per_day: QuotaLimit | None = None


def _parse_int32(raw: str) -> int | None:
    # ASCII digits only: int() would also accept "+5", " 5" and "1_000".
    if not raw.isascii() or not raw.isdigit():
        return None
    value = int(raw)
    if value > _INT32_MAX:
        return None
    return value


def parse_bucket_segment(segment: str) -> tuple[QuotaLimit, str] | None:
    """Parse one ``b=<bucket>;q=<quota>;r=<remaining>;t=<reset>`` segment.

    Returns the parsed :class:`QuotaLimit` together with the bucket name, or
    ``None`` when the segment is malformed: a part without ``=``, an empty key
    or value, a repeated key, a missing required key, or a numeric field
    that is not a non-negative 32-bit integer.
    """
    if not segment:
        return None

    fields: dict[str, str] = {}
    for part in segment.split(";"):
        key, sep, value = part.partition("=")
        if not sep or not key or not value:
            return None
        if key in fields:
            return None
        fields[key] = value

    if any(key not in fields for key in _REQUIRED_KEYS):
        return None

    quota = _parse_int32(fields["q"])
    remaining = _parse_int32(fields["r"])
    reset_after = _parse_int32(fields["t"])
    if quota is None or remaining is None or reset_after is None:
        return None

    return QuotaLimit(quota=quota, remaining=remaining, reset_after=reset_after), fields["b"]


def parse_quota_limit(
    header_value: str | None,
) -> tuple[QuotaLimit | None, str | None]:
    """Parse a single-bucket header value.

    Returns ``(quota_limit, bucket)``; both are ``None`` for an absent, empty
    or malformed value.
    """
    if not header_value:
        return None, None
    parsed = parse_bucket_segment(header_value)
    if parsed is None:
        return None, None
    return parsed


def _parse_buckets(
    header_value: str,
) -> tuple[QuotaLimit | None, QuotaLimit | None]:
    per_hour: QuotaLimit | None = None
    per_day: QuotaLimit | None = None
    for segment in header_value.split(","):
        parsed = parse_bucket_segment(segment)
        if parsed is None:
            logger.debug("Ignoring malformed quota segment %r", segment)
            continue
        quota_limit, bucket = parsed
        if bucket == PER_HOUR_BUCKET:
            per_hour = quota_limit
        else:
            # Any bucket other than per_hour lands in the daily slot; the
            # service only emits per_hour and per_day today.
            per_day = quota_limit
    return per_hour, per_day


def parse_client_limit(header_value: str | None) -> ClientQuotaLimit | None:
    """Parse the full ``Auth0-Client-Quota-Limit`` header value."""
    if not header_value:
        return None
    per_hour, per_day = _parse_buckets(header_value)
    return ClientQuotaLimit(per_hour=per_hour, per_day=per_day)


def parse_organization_limit(
    header_value: str | None,
) -> OrganizationQuotaLimit | None:
    """Parse the full ``Auth0-Organization-Quota-Limit`` header value."""
    if not header_value:
        return None
    per_hour, per_day = _parse_buckets(header_value)
    return OrganizationQuotaLimit(per_hour=per_hour, per_day=per_day)


def extract_header_value(headers: HeaderMap | None, name: str) -> str | None:
    """Return the first value of header *name* (case-sensitive), or ``None``."""
    if headers is None:
        return None
    values = headers.get(name)
    if not values:
        return None
    if isinstance(values, str):
        return values
    return next(iter(values), None)


def get_client_quota_limit(headers: HeaderMap | None) -> ClientQuotaLimit | None:
    """Extract and parse the client quota header from a response header map."""
    return parse_client_limit(extract_header_value(headers, CLIENT_QUOTA_LIMIT_HEADER))


def get_organization_quota_limit(
    headers: HeaderMap | None,
) -> OrganizationQuotaLimit | None:
    """Extract and parse the organization quota header from a response header map."""
    return parse_organization_limit(
        extract_header_value(headers, ORGANIZATION_QUOTA_LIMIT_HEADER)
    )
