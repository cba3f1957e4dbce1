"""Management API v2 clients, models and job error decoding."""

from __future__ import annotations

from auth0_sdk.management.client import AsyncManagementApiClient, ManagementApiClient
from auth0_sdk.management.job_errors import (
    ImportErrorList,
    JobErrorDetails,
    JobFailure,
    resolve_job_error_details,
)
from auth0_sdk.management.models import (
    ClientGrant,
    ClientGrantCreateRequest,
    ClientGrantUpdateRequest,
    EmailVerificationIdentity,
    EncryptionKey,
    Job,
    JobImportError,
    JobImportErrorDetails,
    JobSummary,
    Organization,
    OrganizationAddMembersRequest,
    OrganizationBranding,
    OrganizationDeleteMembersRequest,
    OrganizationUpdateRequest,
    ResourceServer,
    ResourceServerUpdateRequest,
    SubjectTypeAuthorization,
    TokenQuota,
    UsersExportsJobField,
    UsersExportsJobRequest,
    VerifyEmailJobRequest,
)

__all__ = [
    "AsyncManagementApiClient",
    "ManagementApiClient",
    "ImportErrorList",
    "JobErrorDetails",
    "JobFailure",
    "resolve_job_error_details",
    "ClientGrant",
    "ClientGrantCreateRequest",
    "ClientGrantUpdateRequest",
    "EmailVerificationIdentity",
    "EncryptionKey",
    "Job",
    "JobImportError",
    "JobImportErrorDetails",
    "JobSummary",
    "Organization",
    "OrganizationAddMembersRequest",
    "OrganizationBranding",
    "OrganizationDeleteMembersRequest",
    "OrganizationUpdateRequest",
    "ResourceServer",
    "ResourceServerUpdateRequest",
    "SubjectTypeAuthorization",
    "TokenQuota",
    "UsersExportsJobField",
    "UsersExportsJobRequest",
    "VerifyEmailJobRequest",
]
