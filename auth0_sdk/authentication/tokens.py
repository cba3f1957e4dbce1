"""Validation of HS256-signed ID tokens.

Applications whose ID tokens are signed with the client secret (HS256)
can validate them locally: no key set has to be fetched.
"""

from __future__ import annotations

import logging
from typing import Any

import jwt
from jwt.exceptions import (
    DecodeError,
    ExpiredSignatureError,
    ImmatureSignatureError,
    InvalidAudienceError,
    InvalidIssuerError,
    InvalidSignatureError,
    InvalidTokenError,
    MissingRequiredClaimError,
)

from auth0_sdk.core.exceptions import IdTokenValidationError

logger = logging.getLogger(__name__)

ID_TOKEN_ALGORITHM = "HS256"
DEFAULT_LEEWAY_SECONDS = 60

_REQUIRED_CLAIMS = ["exp", "iat", "iss", "aud", "sub"]


def decode_id_token(
    id_token: str,
    *,
    client_secret: str,
    client_id: str,
    issuer: str,
    leeway: int = DEFAULT_LEEWAY_SECONDS,
) -> dict[str, Any]:
    """Verify *id_token* and return its claims.

    The signature must be HS256 with *client_secret* as the key, ``aud`` must
    contain *client_id* and ``iss`` must equal *issuer* (``https://{domain}/``).
    Expiry and not-before checks allow *leeway* seconds of clock skew.

    Raises:
        ValueError: *id_token*, *client_secret* or *client_id* is empty.
        IdTokenValidationError: the token is malformed, badly signed, expired
            or issued for another client or tenant.
    """
    if not id_token:
        raise ValueError("id_token must be provided")
    if not client_secret:
        raise ValueError("client_secret must be provided (or set AUTH0_CLIENT_SECRET)")
    if not client_id:
        raise ValueError("client_id must be provided (or set AUTH0_CLIENT_ID)")

    try:
        return jwt.decode(
            id_token,
            client_secret,
            algorithms=[ID_TOKEN_ALGORITHM],
            audience=client_id,
            issuer=issuer,
            leeway=leeway,
            options={"require": _REQUIRED_CLAIMS},
        )
    except ExpiredSignatureError as exc:
        raise IdTokenValidationError("ID token has expired") from exc
    except ImmatureSignatureError as exc:
        raise IdTokenValidationError("ID token is not valid yet") from exc
    except InvalidAudienceError as exc:
        raise IdTokenValidationError(
            f"ID token audience does not include {client_id!r}"
        ) from exc
    except InvalidIssuerError as exc:
        raise IdTokenValidationError(
            f"ID token was not issued by {issuer!r}"
        ) from exc
    except InvalidSignatureError as exc:
        raise IdTokenValidationError("ID token signature is invalid") from exc
    except MissingRequiredClaimError as exc:
        raise IdTokenValidationError(f"ID token is missing a claim: {exc}") from exc
    except DecodeError as exc:
        raise IdTokenValidationError(f"ID token is malformed: {exc}") from exc
    except InvalidTokenError as exc:
        logger.debug("ID token rejected: %s", exc)
        raise IdTokenValidationError(f"ID token is invalid: {exc}") from exc
