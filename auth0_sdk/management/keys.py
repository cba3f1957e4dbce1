"""Tenant encryption keys."""

from __future__ import annotations

from auth0_sdk.management.base import (
    AsyncResourceClient,
    ResourceClient,
    path_segment,
)
from auth0_sdk.management.models import EncryptionKey


class KeysClient(ResourceClient):
    def get_encryption_key(self, kid: str) -> EncryptionKey:
        body = self.connection.request(
            "GET", f"/keys/encryption/{path_segment(kid, 'kid')}"
        )
        return EncryptionKey.model_validate(body)

    def delete_encryption_key(self, kid: str) -> None:
        self.connection.request("DELETE", f"/keys/encryption/{path_segment(kid, 'kid')}")


class AsyncKeysClient(AsyncResourceClient):
    async def get_encryption_key(self, kid: str) -> EncryptionKey:
        body = await self.connection.request(
            "GET", f"/keys/encryption/{path_segment(kid, 'kid')}"
        )
        return EncryptionKey.model_validate(body)

    async def delete_encryption_key(self, kid: str) -> None:
        await self.connection.request(
            "DELETE", f"/keys/encryption/{path_segment(kid, 'kid')}"
        )
