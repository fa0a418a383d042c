"""Error Hierarchy — codes, HTTP statuses and the REST envelope."""

from showcase.core.errors import (
    ErrorCategory,
    ResourceNotFoundError,
    ShowcaseError,
    StorageError,
    UseCaseBackendError,
    UseCaseValidationError,
)


def test_validation_error_is_400_with_field():
    err = UseCaseValidationError("Title is required", "title")
    assert err.http_status == 400
    assert err.field == "title"
    assert err.category == ErrorCategory.VALIDATION


def test_not_found_message_and_context():
    err = ResourceNotFoundError("Use case", "usecase_1")
    assert err.http_status == 404
    assert err.message == "Use case with ID usecase_1 not found"
    assert err.context.use_case_id == "usecase_1"


def test_storage_error_records_backend_and_operation():
    err = StorageError("disk full", "insert", "local")
    assert err.http_status == 503
    assert err.context.backend == "local"
    assert err.context.operation == "insert"
    assert "disk full" in err.message


def test_backend_error_keeps_operation_scoped_message():
    err = UseCaseBackendError("Failed to fetch use cases", "list")
    assert str(err) == "Failed to fetch use cases"
    assert err.code == "USE_CASE_BACKEND_ERROR"


def test_to_response_envelope():
    err = UseCaseBackendError("Failed to delete use case with ID x", "delete", "x")
    body = err.to_response()["error"]
    assert body["code"] == "USE_CASE_BACKEND_ERROR"
    assert body["category"] == "storage"
    assert body["severity"] == "critical"
    assert body["context"]["use_case_id"] == "x"
    assert body["context"]["operation"] == "delete"


def test_all_errors_share_base():
    for err in (
        UseCaseValidationError("m", "f"),
        ResourceNotFoundError("Use case", "1"),
        StorageError("m", "op", "remote"),
        UseCaseBackendError("m", "op"),
    ):
        assert isinstance(err, ShowcaseError)
