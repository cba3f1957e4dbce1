"""Auth0 Python SDK: typed clients for the Authentication and Management APIs."""

from __future__ import annotations

from auth0_sdk._version import __version__
from auth0_sdk.authentication import AsyncAuthenticationApiClient, AuthenticationApiClient
from auth0_sdk.core.exceptions import (
    ApiError,
    Auth0Error,
    BadRequestError,
    ConflictError,
    IdTokenValidationError,
    JobErrorDetailsDecodeError,
    NotFoundError,
    RateLimitError,
    UnauthorizedError,
)
from auth0_sdk.core.models import RateLimitInfo
from auth0_sdk.core.quota import (
    ClientQuotaLimit,
    OrganizationQuotaLimit,
    QuotaLimit,
    get_client_quota_limit,
    get_organization_quota_limit,
)
from auth0_sdk.management import (
    AsyncManagementApiClient,
    ImportErrorList,
    JobFailure,
    ManagementApiClient,
    resolve_job_error_details,
)

__all__ = [
    "__version__",
    "AsyncAuthenticationApiClient",
    "AuthenticationApiClient",
    "AsyncManagementApiClient",
    "ManagementApiClient",
    "Auth0Error",
    "ApiError",
    "BadRequestError",
    "UnauthorizedError",
    "NotFoundError",
    "ConflictError",
    "RateLimitError",
    "JobErrorDetailsDecodeError",
    "IdTokenValidationError",
    "RateLimitInfo",
    "QuotaLimit",
    "ClientQuotaLimit",
    "OrganizationQuotaLimit",
    "get_client_quota_limit",
    "get_organization_quota_limit",
    "ImportErrorList",
    "JobFailure",
    "resolve_job_error_details",
]
