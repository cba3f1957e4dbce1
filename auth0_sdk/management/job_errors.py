"""Decoding of the ``GET /jobs/{id}/errors`` response.

The endpoint answers with one of two shapes depending on how the job failed:

* a JSON array with one entry per rejected user record, when an import ran
  but some records were invalid;
* a JSON object describing the job itself, with ``status == "failed"`` and a
  ``status_details`` message, when the job as a whole failed (for example an
  unparseable users file).

:func:`resolve_job_error_details` tells the two apart and returns an
explicitly tagged result.
"""

from __future__ import annotations

import json
from typing import Annotated, Iterator, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from auth0_sdk.core.exceptions import JobErrorDetailsDecodeError
from auth0_sdk.management.models import Job, JobImportErrorDetails

_IMPORT_ERRORS_ADAPTER = TypeAdapter(list[JobImportErrorDetails])


class ImportErrorList(BaseModel):
    """Per-record errors of a users import, in the order the service reported them."""

    kind: Literal["import_errors"] = "import_errors"
    entries: list[JobImportErrorDetails]

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[JobImportErrorDetails]:  # type: ignore[override]
        return iter(self.entries)

    def __getitem__(self, index: int) -> JobImportErrorDetails:
        return self.entries[index]


class JobFailure(BaseModel):
    """A job that failed as a whole.

    ``job`` is the job resource exactly as the service returned it, with
    ``status == "failed"`` and ``status_details`` explaining the failure.
    """

    kind: Literal["job_failure"] = "job_failure"
    job: Job


JobErrorDetails = Annotated[
    Union[ImportErrorList, JobFailure], Field(discriminator="kind")
]


def resolve_job_error_details(
    raw_json: str | bytes | None,
) -> ImportErrorList | JobFailure | None:
    """Decode the body returned by the job errors endpoint.

    Returns ``None`` when there is no error information: an absent or blank
    body, or an empty array.  Raises :class:`JobErrorDetailsDecodeError` when
    the body is not valid JSON or is neither an array nor an object.
    """
    if raw_json is None:
        return None
    if isinstance(raw_json, bytes):
        try:
            raw_json = raw_json.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise JobErrorDetailsDecodeError(
                f"Job error details are not valid UTF-8: {exc}"
            ) from exc
    raw_json = raw_json.lstrip("\ufeff")
    if not raw_json.strip():
        return None

    try:
        payload = json.loads(raw_json)
    except ValueError as exc:
        raise JobErrorDetailsDecodeError(
            f"Job error details are not valid JSON: {exc}"
        ) from exc

    try:
        if isinstance(payload, list):
            if not payload:
                return None
            return ImportErrorList(
                entries=_IMPORT_ERRORS_ADAPTER.validate_python(payload)
            )
        if isinstance(payload, dict):
            return JobFailure(job=Job.model_validate(payload))
    except PydanticValidationError as exc:
        raise JobErrorDetailsDecodeError(
            f"Job error details do not match the expected schema: {exc}"
        ) from exc

    raise JobErrorDetailsDecodeError(
        f"Expected a JSON array or object for job error details, "
        f"got {type(payload).__name__}"
    )
