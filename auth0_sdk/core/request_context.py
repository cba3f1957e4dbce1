"""Correlation id for the API call currently in flight.

Every call made through a connection runs inside :func:`request_scope`, so
log records emitted while it is in flight (by the SDK or by custom transports)
carry the same id.  Outside a call the id is the empty string.
"""

from __future__ import annotations

import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator

request_id_var: ContextVar[str] = ContextVar("auth0_sdk_request_id", default="")


def generate_request_id() -> str:
    return uuid.uuid4().hex


def get_request_id() -> str:
    """Id of the call in flight, or ``""`` outside one."""
    return request_id_var.get()


@contextmanager
def request_scope(request_id: str | None = None) -> Iterator[str]:
    """Bind *request_id* (or a fresh one) for the duration of one API call.

    Nested scopes restore the outer id on exit.
    """
    rid = request_id or generate_request_id()
    token = request_id_var.set(rid)
    try:
        yield rid
    finally:
        request_id_var.reset(token)
