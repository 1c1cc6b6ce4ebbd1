# =============================================================================
# tests/test_exceptions.py - Error Envelope and Classification Tests
# =============================================================================

from fastapi import HTTPException
from fastapi.exceptions import RequestValidationError

from app.exceptions import (
    ApiError,
    ConflictError,
    ExplicitRejection,
    ForbiddenError,
    InternalFailure,
    PayloadTooLargeError,
    ResourceNotFoundError,
    UnauthorizedError,
    build_error_body,
    classify_error,
)


class TestBuildErrorBody:
    """Tests for the envelope builder."""

    def test_minimal_envelope(self):
        assert build_error_body(403, "forbidden") == {"status": 403, "message": "forbidden"}

    def test_extension_fields_included_when_set(self):
        body = build_error_body(409, "taken", code="SLUG_TAKEN", details={"slug": "abc"})

        assert body == {
            "status": 409,
            "message": "taken",
            "code": "SLUG_TAKEN",
            "details": {"slug": "abc"},
        }

    def test_none_extensions_dropped(self):
        assert build_error_body(400, "bad", code=None) == {"status": 400, "message": "bad"}


class TestApiError:
    """Tests for the application exception hierarchy."""

    def test_subclass_status_codes(self):
        assert UnauthorizedError("x").status_code == 401
        assert ForbiddenError("x").status_code == 403
        assert ConflictError("x").status_code == 409

    def test_explicit_status_overrides_class_default(self):
        assert ApiError("forbidden", status_code=403).status_code == 403

    def test_to_dict(self):
        error = ForbiddenError("Locked", code="PASSWORD_REQUIRED")
        assert error.to_dict() == {"status": 403, "message": "Locked", "code": "PASSWORD_REQUIRED"}

    def test_resource_not_found_message(self):
        error = ResourceNotFoundError("Paste", "abc")

        assert error.status_code == 404
        assert error.message == "Paste not found: abc"
        assert error.details == {"resource": "paste", "id": "abc"}

    def test_payload_too_large(self):
        error = PayloadTooLargeError(12.345, 10)

        assert error.status_code == 413
        assert error.message == "File too large: 12.3MB (max: 10MB)"


class TestClassifyError:
    """Tests for sorting errors into the two variants."""

    def test_api_error_is_explicit(self):
        outcome = classify_error(ForbiddenError("forbidden"))
        assert outcome == ExplicitRejection(status=403, message="forbidden")

    def test_http_exception_is_explicit(self):
        outcome = classify_error(HTTPException(status_code=401, detail="Not authenticated"))

        assert isinstance(outcome, ExplicitRejection)
        assert outcome.status == 401
        assert outcome.message == "Not authenticated"

    def test_validation_error_is_explicit_bad_request(self):
        outcome = classify_error(RequestValidationError([]))

        assert isinstance(outcome, ExplicitRejection)
        assert outcome.status == 400

    def test_unexpected_error_is_internal(self):
        outcome = classify_error(ValueError("boom"))
        assert outcome == InternalFailure(detail="ValueError: boom")

    def test_empty_message_falls_back(self):
        outcome = classify_error(ApiError("", status_code=418))
        assert outcome.message == "Internal server error"
