"""Client grants: which APIs an application may request tokens for."""

from __future__ import annotations

from auth0_sdk.management.base import (
    AsyncResourceClient,
    ResourceClient,
    path_segment,
)
from auth0_sdk.management.models import (
    ClientGrant,
    ClientGrantCreateRequest,
    ClientGrantUpdateRequest,
)


class ClientGrantsClient(ResourceClient):
    def create(self, request: ClientGrantCreateRequest) -> ClientGrant:
        body = self.connection.request(
            "POST", "/client-grants", json=request.to_payload()
        )
        return ClientGrant.model_validate(body)

    def update(self, grant_id: str, request: ClientGrantUpdateRequest) -> ClientGrant:
        body = self.connection.request(
            "PATCH",
            f"/client-grants/{path_segment(grant_id, 'grant_id')}",
            json=request.to_payload(),
        )
        return ClientGrant.model_validate(body)

    def delete(self, grant_id: str) -> None:
        self.connection.request(
            "DELETE", f"/client-grants/{path_segment(grant_id, 'grant_id')}"
        )


class AsyncClientGrantsClient(AsyncResourceClient):
    async def create(self, request: ClientGrantCreateRequest) -> ClientGrant:
        body = await self.connection.request(
            "POST", "/client-grants", json=request.to_payload()
        )
        return ClientGrant.model_validate(body)

    async def update(
        self, grant_id: str, request: ClientGrantUpdateRequest
    ) -> ClientGrant:
        body = await self.connection.request(
            "PATCH",
            f"/client-grants/{path_segment(grant_id, 'grant_id')}",
            json=request.to_payload(),
        )
        return ClientGrant.model_validate(body)

    async def delete(self, grant_id: str) -> None:
        await self.connection.request(
            "DELETE", f"/client-grants/{path_segment(grant_id, 'grant_id')}"
        )
