"""Resource servers (APIs registered in the tenant)."""

from __future__ import annotations

from auth0_sdk.management.base import (
    AsyncResourceClient,
    ResourceClient,
    path_segment,
)
from auth0_sdk.management.models import ResourceServer, ResourceServerUpdateRequest


def _server_path(resource_server_id: str) -> str:
    return f"/resource-servers/{path_segment(resource_server_id, 'resource_server_id')}"


class ResourceServersClient(ResourceClient):
    def get(self, resource_server_id: str) -> ResourceServer:
        body = self.connection.request("GET", _server_path(resource_server_id))
        return ResourceServer.model_validate(body)

    def update(
        self, resource_server_id: str, request: ResourceServerUpdateRequest
    ) -> ResourceServer:
        body = self.connection.request(
            "PATCH", _server_path(resource_server_id), json=request.to_payload()
        )
        return ResourceServer.model_validate(body)


class AsyncResourceServersClient(AsyncResourceClient):
    async def get(self, resource_server_id: str) -> ResourceServer:
        body = await self.connection.request("GET", _server_path(resource_server_id))
        return ResourceServer.model_validate(body)

    async def update(
        self, resource_server_id: str, request: ResourceServerUpdateRequest
    ) -> ResourceServer:
        body = await self.connection.request(
            "PATCH", _server_path(resource_server_id), json=request.to_payload()
        )
        return ResourceServer.model_validate(body)
