"""Jobs: users imports and exports, verification emails and their errors."""

from __future__ import annotations

from typing import IO, Union

from auth0_sdk.management.base import (
    AsyncResourceClient,
    ResourceClient,
    path_segment,
)
from auth0_sdk.management.job_errors import (
    ImportErrorList,
    JobFailure,
    resolve_job_error_details,
)
from auth0_sdk.management.models import (
    Job,
    UsersExportsJobRequest,
    VerifyEmailJobRequest,
)

UsersFile = Union[bytes, IO[bytes]]


def _import_form(
    connection_id: str,
    upsert: bool,
    send_completion_email: bool,
    external_id: str | None,
) -> dict[str, str]:
    if not connection_id:
        raise ValueError("connection_id must be provided")
    form = {
        "connection_id": connection_id,
        "upsert": "true" if upsert else "false",
        "send_completion_email": "true" if send_completion_email else "false",
    }
    if external_id is not None:
        form["external_id"] = external_id
    return form


class JobsClient(ResourceClient):
    """Synchronous client for ``/jobs``."""

    def get(self, job_id: str) -> Job:
        body = self.connection.request("GET", f"/jobs/{path_segment(job_id, 'job_id')}")
        return Job.model_validate(body)

    def get_error_details(self, job_id: str) -> ImportErrorList | JobFailure | None:
        """Return the errors of a job, or ``None`` when it has none."""
        raw = self.connection.request_text(
            "GET", f"/jobs/{path_segment(job_id, 'job_id')}/errors"
        )
        return resolve_job_error_details(raw)

    def import_users(
        self,
        connection_id: str,
        file_name: str,
        content: UsersFile,
        *,
        upsert: bool = False,
        send_completion_email: bool = True,
        external_id: str | None = None,
    ) -> Job:
        """Upload a users file (JSON array of users) for import into *connection_id*."""
        form = _import_form(connection_id, upsert, send_completion_email, external_id)
        body = self.connection.request(
            "POST",
            "/jobs/users-imports",
            data=form,
            files={"users": (file_name, content, "text/json")},
        )
        return Job.model_validate(body)

    def export_users(self, request: UsersExportsJobRequest) -> Job:
        body = self.connection.request(
            "POST", "/jobs/users-exports", json=request.to_payload()
        )
        return Job.model_validate(body)

    def send_verification_email(self, request: VerifyEmailJobRequest) -> Job:
        body = self.connection.request(
            "POST", "/jobs/verification-email", json=request.to_payload()
        )
        return Job.model_validate(body)


class AsyncJobsClient(AsyncResourceClient):
    """Async client for ``/jobs``."""

    async def get(self, job_id: str) -> Job:
        body = await self.connection.request(
            "GET", f"/jobs/{path_segment(job_id, 'job_id')}"
        )
        return Job.model_validate(body)

    async def get_error_details(
        self, job_id: str
    ) -> ImportErrorList | JobFailure | None:
        """Return the errors of a job, or ``None`` when it has none."""
        raw = await self.connection.request_text(
            "GET", f"/jobs/{path_segment(job_id, 'job_id')}/errors"
        )
        return resolve_job_error_details(raw)

    async def import_users(
        self,
        connection_id: str,
        file_name: str,
        content: UsersFile,
        *,
        upsert: bool = False,
        send_completion_email: bool = True,
        external_id: str | None = None,
    ) -> Job:
        form = _import_form(connection_id, upsert, send_completion_email, external_id)
        body = await self.connection.request(
            "POST",
            "/jobs/users-imports",
            data=form,
            files={"users": (file_name, content, "text/json")},
        )
        return Job.model_validate(body)

    async def export_users(self, request: UsersExportsJobRequest) -> Job:
        body = await self.connection.request(
            "POST", "/jobs/users-exports", json=request.to_payload()
        )
        return Job.model_validate(body)

    async def send_verification_email(self, request: VerifyEmailJobRequest) -> Job:
        body = await self.connection.request(
            "POST", "/jobs/verification-email", json=request.to_payload()
        )
        return Job.model_validate(body)
