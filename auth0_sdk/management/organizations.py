"""Organizations and their members."""

from __future__ import annotations

from auth0_sdk.management.base import (
    AsyncResourceClient,
    ResourceClient,
    path_segment,
)
from auth0_sdk.management.models import (
    Organization,
    OrganizationAddMembersRequest,
    OrganizationDeleteMembersRequest,
    OrganizationUpdateRequest,
)


def _org_path(organization_id: str) -> str:
    return f"/organizations/{path_segment(organization_id, 'organization_id')}"


class OrganizationsClient(ResourceClient):
    def get(self, organization_id: str) -> Organization:
        body = self.connection.request("GET", _org_path(organization_id))
        return Organization.model_validate(body)

    def update(
        self, organization_id: str, request: OrganizationUpdateRequest
    ) -> Organization:
        body = self.connection.request(
            "PATCH", _org_path(organization_id), json=request.to_payload()
        )
        return Organization.model_validate(body)

    def add_members(
        self, organization_id: str, request: OrganizationAddMembersRequest
    ) -> None:
        self.connection.request(
            "POST", f"{_org_path(organization_id)}/members", json=request.to_payload()
        )

    def delete_members(
        self, organization_id: str, request: OrganizationDeleteMembersRequest
    ) -> None:
        self.connection.request(
            "DELETE", f"{_org_path(organization_id)}/members", json=request.to_payload()
        )


class AsyncOrganizationsClient(AsyncResourceClient):
    async def get(self, organization_id: str) -> Organization:
        body = await self.connection.request("GET", _org_path(organization_id))
        return Organization.model_validate(body)

    async def update(
        self, organization_id: str, request: OrganizationUpdateRequest
    ) -> Organization:
        body = await self.connection.request(
            "PATCH", _org_path(organization_id), json=request.to_payload()
        )
        return Organization.model_validate(body)

    async def add_members(
        self, organization_id: str, request: OrganizationAddMembersRequest
    ) -> None:
        await self.connection.request(
            "POST", f"{_org_path(organization_id)}/members", json=request.to_payload()
        )

    async def delete_members(
        self, organization_id: str, request: OrganizationDeleteMembersRequest
    ) -> None:
        await self.connection.request(
            "DELETE", f"{_org_path(organization_id)}/members", json=request.to_payload()
        )
