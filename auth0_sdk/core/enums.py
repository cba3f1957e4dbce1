"""Enumerations and their wire-string representations.

Each member's value is the exact string the APIs send and accept, so
``LogoutInitiator("rp-logout")`` and ``LogoutInitiator.RP_LOGOUT.value`` are
the two directions of the lookup.
"""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

_E = TypeVar("_E", bound="WireEnum")


class WireEnum(str, Enum):
    """Base for enums that map one-to-one onto API strings."""

    def to_wire(self) -> str:
        return self.value

    @classmethod
    def from_wire(cls: type[_E], value: str) -> _E:
        """Return the member for *value*, raising ``ValueError`` if unknown."""
        try:
            return cls(value)
        except ValueError:
            allowed = ", ".join(member.value for member in cls)
            raise ValueError(
                f"{value!r} is not a valid {cls.__name__}; expected one of: {allowed}"
            ) from None

    def __str__(self) -> str:
        return self.value


class LogoutInitiator(WireEnum):
    """What started a back-channel logout."""

    RP_LOGOUT = "rp-logout"
    IDP_LOGOUT = "idp-logout"
    PASSWORD_CHANGED = "password-changed"
    SESSION_EXPIRED = "session-expired"
    SESSION_REVOKED = "session-revoked"
    ACCOUNT_DELETED = "account-deleted"
    EMAIL_IDENTIFIER_CHANGED = "email-identifier-changed"


class ClientGrantSubjectType(WireEnum):
    """The type of application access a client grant allows."""

    CLIENT = "client"
    USER = "user"


class OrganizationUsage(WireEnum):
    """Whether organizations can be used with client credentials exchanges."""

    DENY = "deny"
    ALLOW = "allow"
    REQUIRE = "require"


class SetUserRootAttributes(WireEnum):
    """When an external IdP connection creates users and updates root attributes."""

    ON_EACH_LOGIN = "on_each_login"
    ON_FIRST_LOGIN = "on_first_login"
    NEVER_ON_LOGIN = "never_on_login"


class SubjectTypeAuthorizationUserPolicy(WireEnum):
    ALLOW_ALL = "allow_all"
    REQUIRE_CLIENT_GRANT = "require_client_grant"
    DENY_ALL = "deny_all"


class SubjectTypeAuthorizationClientPolicy(WireEnum):
    REQUIRE_CLIENT_GRANT = "require_client_grant"
    DENY_ALL = "deny_all"


class UsersExportsJobFormat(WireEnum):
    JSON = "json"
    CSV = "csv"


class PasswordlessEmailRequestType(WireEnum):
    """Whether the passwordless email carries a magic link or a one-time code."""

    LINK = "link"
    CODE = "code"
