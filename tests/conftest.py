from __future__ import annotations

import httpx
import pytest

from auth0_sdk.core.request_context import request_id_var

RATE_HEADERS = {
    "x-ratelimit-limit": "50",
    "x-ratelimit-remaining": "49",
    "x-ratelimit-reset": "1700000000",
    "auth0-client-quota-limit": "b=per_hour;q=10;r=9;t=924,b=per_day;q=100;r=99;t=924",
}


def json_response(
    body: object,
    status_code: int = 200,
    headers: dict[str, str] | None = None,
) -> httpx.Response:
    hdrs = dict(RATE_HEADERS)
    if headers:
        hdrs.update(headers)
    return httpx.Response(status_code, json=body, headers=hdrs)


def error_response(
    status_code: int,
    message: str = "error",
    error_code: str | None = None,
    headers: dict[str, str] | None = None,
) -> httpx.Response:
    body: dict[str, object] = {
        "statusCode": status_code,
        "error": httpx.codes.get_reason_phrase(status_code),
        "message": message,
    }
    if error_code:
        body["errorCode"] = error_code
    return json_response(body, status_code, headers)


@pytest.fixture(autouse=True)
def _clear_request_id():
    """Make sure no test leaks a request ID into the next one."""
    token = request_id_var.set("")
    yield
    request_id_var.reset(token)
