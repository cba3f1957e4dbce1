"""Exception hierarchy for the Auth0 SDK."""

from __future__ import annotations

from typing import Any

from auth0_sdk.core.models import RateLimitInfo


class Auth0Error(Exception):
    """Base exception for everything raised by the SDK."""


class ApiError(Auth0Error):
    """A non-2xx response from the Authentication or Management API.

    Attributes:
        status_code: HTTP status code.
        detail: Human-readable message (``message`` or ``error_description``).
        error: Short error name, e.g. ``"Bad Request"`` or ``"invalid_request"``.
        error_code: Machine-readable code from Management API bodies.
        body: The decoded JSON body, or the raw text when it was not JSON.
    """

    def __init__(
        self,
        status_code: int,
        detail: str,
        *,
        error: str | None = None,
        error_code: str | None = None,
        body: Any = None,
    ) -> None:
        self.status_code = status_code
        self.detail = detail
        self.error = error
        self.error_code = error_code
        self.body = body
        super().__init__(f"{status_code}: {detail}")


class BadRequestError(ApiError):
    """Raised on 400 or 422 responses."""


class UnauthorizedError(ApiError):
    """Raised on 401 or 403 responses."""


class NotFoundError(ApiError):
    """Raised on 404 responses."""


class ConflictError(ApiError):
    """Raised on 409 responses."""


class RateLimitError(ApiError):
    """Raised on 429 responses."""

    def __init__(
        self,
        status_code: int,
        detail: str,
        rate_limit_info: RateLimitInfo | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(status_code, detail, **kwargs)
        self.rate_limit_info = rate_limit_info


class JobErrorDetailsDecodeError(Auth0Error, ValueError):
    """The job errors endpoint returned a payload of an unexpected shape."""


class IdTokenValidationError(Auth0Error):
    """An ID token failed signature or claim validation."""
