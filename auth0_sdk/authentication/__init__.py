"""Authentication API clients and models."""

from __future__ import annotations

from auth0_sdk.authentication.client import (
    AsyncAuthenticationApiClient,
    AuthenticationApiClient,
    build_forwarded_for_headers,
)
from auth0_sdk.authentication.models import (
    PasswordlessEmailRequest,
    PasswordlessEmailResponse,
    PasswordlessSmsRequest,
    PasswordlessSmsResponse,
)
from auth0_sdk.authentication.tokens import decode_id_token

__all__ = [
    "AsyncAuthenticationApiClient",
    "AuthenticationApiClient",
    "build_forwarded_for_headers",
    "decode_id_token",
    "PasswordlessEmailRequest",
    "PasswordlessEmailResponse",
    "PasswordlessSmsRequest",
    "PasswordlessSmsResponse",
]
