"""Request and response models for the passwordless endpoints."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from auth0_sdk.core.enums import PasswordlessEmailRequestType


class PasswordlessEmailRequest(BaseModel):
    """Start a passwordless flow that sends a link or a code by email.

    ``authentication_parameters`` are forwarded as ``authParams`` and end up
    on the authorize request a magic link points to.
    """

    client_id: str
    email: str
    client_secret: str | None = None
    type: PasswordlessEmailRequestType = PasswordlessEmailRequestType.LINK
    authentication_parameters: dict[str, Any] | None = None

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "client_id": self.client_id,
            "connection": "email",
            "email": self.email,
            "send": self.type.value,
        }
        if self.client_secret:
            payload["client_secret"] = self.client_secret
        if self.authentication_parameters:
            payload["authParams"] = self.authentication_parameters
        return payload


class PasswordlessSmsRequest(BaseModel):
    """Start a passwordless flow that sends a one-time code by SMS."""

    client_id: str
    phone_number: str
    client_secret: str | None = None

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "client_id": self.client_id,
            "connection": "sms",
            "phone_number": self.phone_number,
        }
        if self.client_secret:
            payload["client_secret"] = self.client_secret
        return payload


class PasswordlessEmailResponse(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str | None = Field(None, alias="_id")
    email: str | None = None
    email_verified: bool | None = None


class PasswordlessSmsResponse(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str | None = Field(None, alias="_id")
    phone_number: str | None = None
    phone_verified: bool | None = None
    request_language: str | None = None
