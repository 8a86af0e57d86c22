# tests/core/test_error_payloads.py
"""
Testes do mapeamento exceção → ShellErrorPayload.
"""

import pytest

from dataflow_shell.core.errors import (
    ARTIFACT_PACKAGING_FAILED,
    ENGINE_SUBMISSION_ERROR,
    ENVIRONMENT_ALREADY_DEFINED,
    ENVIRONMENT_CONSTRUCTION_ERROR,
    ENVIRONMENT_NOT_DEFINED,
    INVALID_DEPENDENCY_ARCHIVE,
    INVALID_DEPENDENCY_PATH,
    UNSUPPORTED_SUBMISSION_MODE,
    to_error_payload,
)
from dataflow_shell.core.exceptions import (
    ArtifactPackagingFailed,
    ConstructionError,
    EnvironmentAlreadyDefined,
    EnvironmentNotDefined,
    InvalidDependencyArchive,
    InvalidDependencyPath,
    UnsupportedSubmissionMode,
)


@pytest.mark.parametrize(
    "exc_cls, code",
    [
        (ConstructionError, ENVIRONMENT_CONSTRUCTION_ERROR),
        (EnvironmentNotDefined, ENVIRONMENT_NOT_DEFINED),
        (EnvironmentAlreadyDefined, ENVIRONMENT_ALREADY_DEFINED),
        (InvalidDependencyPath, INVALID_DEPENDENCY_PATH),
        (InvalidDependencyArchive, INVALID_DEPENDENCY_ARCHIVE),
        (UnsupportedSubmissionMode, UNSUPPORTED_SUBMISSION_MODE),
        (ArtifactPackagingFailed, ARTIFACT_PACKAGING_FAILED),
    ],
)
def test_shell_exceptions_map_to_stable_codes(exc_cls, code):
    exc = exc_cls(message="m", details={"k": "v"}, hint="h")

    payload = to_error_payload(exc)

    assert payload.to_dict() == {"type": code, "message": "m", "details": {"k": "v"}, "hint": "h"}


def test_foreign_exception_keeps_class_and_message():
    payload = to_error_payload(ConnectionError("jobmanager unreachable"), job_name="job1")

    assert payload.type == ENGINE_SUBMISSION_ERROR
    assert payload.details == {
        "job_name": "job1",
        "exc_type": "ConnectionError",
        "exc_message": "jobmanager unreachable",
    }
