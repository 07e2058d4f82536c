"""Tests for response rendering."""

import json

import pytest

from truthlens.assembler import assemble
from truthlens.data import AnalysisKind, ExtractedFields, VerificationStatus
from truthlens.errors import (
    AuthenticationError,
    ExternalApiError,
    StorageError,
    ValidationError,
)
from truthlens.responses import error_response, result_response


def test_result_response_is_json_safe() -> None:
    result = assemble(
        None,
        ExtractedFields(score=82, verification_status=VerificationStatus.VERIFIED, flags=("x",)),
        "narrative",
        AnalysisKind.FACT_CHECK,
    )
    status, body = result_response(result)

    assert status == 200
    assert body["id"] == result.id
    assert body["timestamp"] == result.timestamp
    assert body["kind"] == "fact_check"
    assert body["verification_status"] == "VERIFIED"
    assert body["flags"] == ["x"]
    json.dumps(body)


@pytest.mark.parametrize(
    ("error", "status"),
    [
        (ValidationError("Content is required and cannot be empty."), 400),
        (AuthenticationError("Authentication required."), 401),
        (ExternalApiError("Failed to fetch content from URL.", status_code=400), 400),
        (ExternalApiError("The analysis service is unavailable."), 502),
        (StorageError("Failed to store analysis result."), 500),
    ],
)
def test_error_response_uses_error_status(error: Exception, status: int) -> None:
    code, body = error_response(error)
    assert code == status
    assert body == {"error": str(error)}


def test_upstream_details_are_not_exposed() -> None:
    error = ExternalApiError("Failed to analyze media.", upstream_status=403)
    _, body = error_response(error)
    assert body == {"error": "Failed to analyze media."}


def test_unexpected_error_is_generic() -> None:
    code, body = error_response(KeyError("secret internal detail"))
    assert code == 500
    assert body == {"error": "An unexpected error occurred."}
