"""Pydantic models for the Management API resources used by the SDK."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from auth0_sdk.core.enums import (
    ClientGrantSubjectType,
    OrganizationUsage,
    SubjectTypeAuthorizationClientPolicy,
    SubjectTypeAuthorizationUserPolicy,
    UsersExportsJobFormat,
)


class ResourceModel(BaseModel):
    """Base for response bodies; unknown fields are kept, not rejected."""

    model_config = ConfigDict(extra="allow")


class RequestModel(BaseModel):
    """Base for request bodies."""

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


# ---------------------------------------------------------------------------
# Jobs
# ---------------------------------------------------------------------------


class JobSummary(ResourceModel):
    """Counts reported for a finished users import."""

    failed: int | None = None
    updated: int | None = None
    inserted: int | None = None
    total: int | None = None


class Job(ResourceModel):
    """An asynchronous long-running operation such as a users import or export."""

    id: str | None = None
    type: str | None = Field(
        None, description="'users_import', 'users_export' or 'verification_email'"
    )
    status: str | None = Field(
        None, description="'pending', 'processing', 'completed' or 'failed'"
    )
    created_at: datetime | None = None
    connection_id: str | None = None
    connection: str | None = None
    external_id: str | None = None
    format: str | None = None
    limit: int | None = None
    location: str | None = Field(
        None, description="Download URL of a completed users export"
    )
    percentage_done: int | None = None
    time_left_seconds: int | None = None
    status_details: str | None = Field(
        None, description="Reason reported by the service for a failed job"
    )
    summary: JobSummary | None = None


class JobImportError(ResourceModel):
    code: str
    message: str = ""
    path: str = ""


class JobImportErrorDetails(ResourceModel):
    """Errors reported for one user record of a failed import."""

    user: Any = None
    errors: list[JobImportError] = Field(default_factory=list)


class EmailVerificationIdentity(RequestModel):
    """Secondary identity to verify instead of the user's primary one."""

    user_id: str
    provider: str


class VerifyEmailJobRequest(RequestModel):
    user_id: str
    client_id: str | None = None
    identity: EmailVerificationIdentity | None = None
    organization_id: str | None = None


class UsersExportsJobField(RequestModel):
    name: str
    export_as: str | None = None


class UsersExportsJobRequest(RequestModel):
    connection_id: str | None = None
    format: UsersExportsJobFormat | None = None
    limit: int | None = None
    fields: list[UsersExportsJobField] | None = None


# ---------------------------------------------------------------------------
# Organizations
# ---------------------------------------------------------------------------


class OrganizationBrandingColors(BaseModel):
    primary: str | None = None
    page_background: str | None = None


class OrganizationBranding(BaseModel):
    logo_url: str | None = None
    colors: OrganizationBrandingColors | None = None


class TokenQuotaClientCredentials(BaseModel):
    """Client credentials token issuance limits."""

    enforce: bool | None = None
    per_day: int | None = None
    per_hour: int | None = None


class TokenQuota(BaseModel):
    client_credentials: TokenQuotaClientCredentials | None = None


class Organization(ResourceModel):
    id: str | None = None
    name: str | None = None
    display_name: str | None = None
    branding: OrganizationBranding | None = None
    metadata: dict[str, Any] | None = None
    token_quota: TokenQuota | None = None


class OrganizationUpdateRequest(RequestModel):
    display_name: str | None = None
    name: str | None = None
    branding: OrganizationBranding | None = None
    metadata: dict[str, Any] | None = None
    token_quota: TokenQuota | None = None


class OrganizationAddMembersRequest(RequestModel):
    members: list[str]


class OrganizationDeleteMembersRequest(RequestModel):
    members: list[str]


# ---------------------------------------------------------------------------
# Client grants
# ---------------------------------------------------------------------------


class ClientGrant(ResourceModel):
    id: str | None = None
    audience: str | None = None
    client_id: str | None = None
    scope: list[str] | None = None
    organization_usage: OrganizationUsage | None = None
    allow_any_organization: bool | None = None
    subject_type: ClientGrantSubjectType | None = None
    authorization_details_types: list[str] | None = None
    allow_all_scopes: bool | None = None


class ClientGrantCreateRequest(RequestModel):
    audience: str
    client_id: str
    scope: list[str] = Field(default_factory=list)
    organization_usage: OrganizationUsage | None = None
    allow_any_organization: bool | None = None
    subject_type: ClientGrantSubjectType | None = None
    authorization_details_types: list[str] | None = None
    allow_all_scopes: bool | None = None


class ClientGrantUpdateRequest(RequestModel):
    scope: list[str] | None = None
    organization_usage: OrganizationUsage | None = None
    allow_any_organization: bool | None = None
    authorization_details_types: list[str] | None = None
    allow_all_scopes: bool | None = None


# ---------------------------------------------------------------------------
# Resource servers
# ---------------------------------------------------------------------------


class SubjectTypeAuthorizationUser(BaseModel):
    policy: SubjectTypeAuthorizationUserPolicy | None = None


class SubjectTypeAuthorizationClient(BaseModel):
    policy: SubjectTypeAuthorizationClientPolicy | None = None


class SubjectTypeAuthorization(BaseModel):
    """Application access permissions for user and client flows."""

    user: SubjectTypeAuthorizationUser | None = None
    client: SubjectTypeAuthorizationClient | None = None


class ResourceServer(ResourceModel):
    id: str | None = None
    name: str | None = None
    identifier: str | None = None
    signing_alg: str | None = None
    token_lifetime: int | None = None
    allow_offline_access: bool | None = None
    subject_type_authorization: SubjectTypeAuthorization | None = None


class ResourceServerUpdateRequest(RequestModel):
    name: str | None = None
    signing_alg: str | None = None
    token_lifetime: int | None = None
    allow_offline_access: bool | None = None
    subject_type_authorization: SubjectTypeAuthorization | None = None


# ---------------------------------------------------------------------------
# Keys
# ---------------------------------------------------------------------------


class EncryptionKey(ResourceModel):
    kid: str | None = None
    type: str | None = None
    state: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    parent_kid: str | None = None
    public_key: str | None = None
