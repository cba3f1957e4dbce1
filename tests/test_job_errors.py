"""Tests for auth0_sdk.management.job_errors: job error payload decoding."""

from __future__ import annotations

import json

import pytest
from pydantic import TypeAdapter

from auth0_sdk.core.exceptions import Auth0Error, JobErrorDetailsDecodeError
from auth0_sdk.management.job_errors import (
    ImportErrorList,
    JobErrorDetails,
    JobFailure,
    resolve_job_error_details,
)

_IMPORT_ERRORS = [
    {
        "user": {"email": "john.doe1@nonexistingdomain"},
        "errors": [
            {
                "code": "INVALID_FORMAT",
                "message": "Error in identities[0].profileData.email property",
                "path": "identities[0].profileData.email",
            }
        ],
    },
    {
        "user": {"email": "john.doe2@nonexistingdomain"},
        "errors": [
            {
                "code": "INVALID_FORMAT",
                "message": "Error in identities[0].profileData.email property",
                "path": "identities[0].profileData.email",
            },
            {"code": "MISSING_REQUIRED_PROPERTY", "message": "Missing password", "path": "password"},
        ],
    },
]

_FAILED_JOB = {
    "status": "failed",
    "type": "users_import",
    "id": "job_abc",
    "connection_id": "con_123",
    "connection": "Username-Password-Authentication",
    "created_at": "2024-05-01T10:00:00.000Z",
    "status_details": "Failed to parse users file JSON when importing users.",
}


class TestAbsent:
    @pytest.mark.parametrize(
        "raw", [None, "", "   \n", b"", "[]", " [ ] ", "\ufeff[]", b"\xef\xbb\xbf[]"]
    )
    def test_no_error_information(self, raw):
        assert resolve_job_error_details(raw) is None


class TestImportErrorList:
    def test_single_entry(self):
        raw = json.dumps(
            [
                {
                    "user": {"email": "john@example.com"},
                    "errors": [
                        {"code": "INVALID_FORMAT", "message": "Invalid email", "path": "email"}
                    ],
                }
            ]
        )
        result = resolve_job_error_details(raw)
        assert isinstance(result, ImportErrorList)
        assert result.kind == "import_errors"
        assert len(result) == 1
        assert result[0].errors[0].code == "INVALID_FORMAT"
        assert result[0].user == {"email": "john@example.com"}

    def test_entries_keep_order(self):
        result = resolve_job_error_details(json.dumps(_IMPORT_ERRORS))
        assert isinstance(result, ImportErrorList)
        assert [entry.user["email"] for entry in result] == [
            "john.doe1@nonexistingdomain",
            "john.doe2@nonexistingdomain",
        ]
        assert [error.code for error in result[1].errors] == [
            "INVALID_FORMAT",
            "MISSING_REQUIRED_PROPERTY",
        ]

    def test_bytes_input(self):
        result = resolve_job_error_details(json.dumps(_IMPORT_ERRORS).encode())
        assert isinstance(result, ImportErrorList)
        assert len(result) == 2

    def test_user_may_be_any_json_value(self):
        raw = json.dumps([{"user": "opaque", "errors": []}])
        result = resolve_job_error_details(raw)
        assert result[0].user == "opaque"
        assert result[0].errors == []


class TestJobFailure:
    def test_object_decodes_as_job_failure(self):
        result = resolve_job_error_details(json.dumps(_FAILED_JOB))
        assert isinstance(result, JobFailure)
        assert result.kind == "job_failure"
        assert result.job.status == "failed"
        assert result.job.type == "users_import"
        assert result.job.id == "job_abc"
        assert result.job.connection_id == "con_123"
        assert result.job.connection == "Username-Password-Authentication"
        assert result.job.status_details == "Failed to parse users file JSON when importing users."
        assert result.job.created_at is not None

    def test_unknown_fields_are_kept(self):
        result = resolve_job_error_details(json.dumps({**_FAILED_JOB, "new_field": 1}))
        assert result.job.model_extra == {"new_field": 1}

    def test_kind_field_in_job_payload(self):
        result = resolve_job_error_details(
            json.dumps({"status": "failed", "id": "job_1", "kind": "users_import"})
        )
        assert isinstance(result, JobFailure)
        assert result.kind == "job_failure"
        assert result.job.id == "job_1"
        assert result.job.model_extra == {"kind": "users_import"}

    def test_kind_field_survives_tagged_union(self):
        failure = resolve_job_error_details(
            json.dumps({**_FAILED_JOB, "kind": "users_import"})
        )
        restored = TypeAdapter(JobErrorDetails).validate_python(failure.model_dump())
        assert isinstance(restored, JobFailure)
        assert restored.job.model_extra == {"kind": "users_import"}

    def test_bom_before_object(self):
        result = resolve_job_error_details("\ufeff" + json.dumps(_FAILED_JOB))
        assert isinstance(result, JobFailure)


class TestContractViolations:
    @pytest.mark.parametrize(
        "raw",
        [
            pytest.param('"failed"', id="string"),
            pytest.param("42", id="number"),
            pytest.param("null", id="null"),
            pytest.param("true", id="boolean"),
        ],
    )
    def test_unexpected_shape_raises(self, raw):
        with pytest.raises(JobErrorDetailsDecodeError):
            resolve_job_error_details(raw)

    def test_invalid_json_raises(self):
        with pytest.raises(JobErrorDetailsDecodeError) as exc_info:
            resolve_job_error_details("[{not json")
        assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)

    def test_invalid_utf8_bytes_raise(self):
        with pytest.raises(JobErrorDetailsDecodeError):
            resolve_job_error_details(b"\xff\xfe[]")

    def test_array_of_wrong_items_raises(self):
        with pytest.raises(JobErrorDetailsDecodeError):
            resolve_job_error_details('[{"errors": [{"message": "no code"}]}]')

    def test_decode_error_is_value_error_and_auth0_error(self):
        with pytest.raises(ValueError):
            resolve_job_error_details("42")
        with pytest.raises(Auth0Error):
            resolve_job_error_details("42")


class TestTaggedUnion:
    def test_discriminator_round_trip(self):
        adapter = TypeAdapter(JobErrorDetails)
        failure = resolve_job_error_details(json.dumps(_FAILED_JOB))
        errors = resolve_job_error_details(json.dumps(_IMPORT_ERRORS))
        assert isinstance(adapter.validate_python(failure.model_dump()), JobFailure)
        assert isinstance(adapter.validate_python(errors.model_dump()), ImportErrorList)

    def test_resolving_twice_is_equal(self):
        raw = json.dumps(_IMPORT_ERRORS)
        assert resolve_job_error_details(raw) == resolve_job_error_details(raw)
