"""
Unit tests for the validation error type and the service exception hierarchy.
"""

import pickle

import pytest

from user_registration.utils.error_handling import (
    BaseApplicationError,
    ErrorCategory,
    ErrorSeverity,
    ExternalServiceError,
    RegistrationError,
    StorageError,
)
from user_registration.validators import ErrorCode, ValidationError


@pytest.mark.unit
class TestValidationError:

    def test_attributes(self):
        error = ValidationError("Postal code is required", ErrorCode.MISSING_POSTAL_CODE)
        assert error.message == "Postal code is required"
        assert error.code is ErrorCode.MISSING_POSTAL_CODE
        assert str(error) == "Postal code is required"

    def test_code_from_string(self):
        error = ValidationError("Too young", "AGE_TOO_YOUNG")
        assert error.code is ErrorCode.AGE_TOO_YOUNG

    def test_unknown_code_rejected(self):
        with pytest.raises(ValueError):
            ValidationError("Nope", "NOT_A_CODE")

    def test_read_only(self):
        error = ValidationError("Too young", ErrorCode.AGE_TOO_YOUNG)
        with pytest.raises(AttributeError):
            error.message = "changed"
        with pytest.raises(AttributeError):
            error.code = ErrorCode.AGE_TOO_OLD

    def test_to_dict(self):
        error = ValidationError("Too old", ErrorCode.AGE_TOO_OLD)
        assert error.to_dict() == {"message": "Too old", "code": "AGE_TOO_OLD"}

    def test_pickle_round_trip(self):
        error = ValidationError("Email address is required", ErrorCode.MISSING_EMAIL)
        restored = pickle.loads(pickle.dumps(error))
        assert restored.message == error.message
        assert restored.code is ErrorCode.MISSING_EMAIL
        assert str(restored) == "Email address is required"

    def test_is_an_exception(self):
        with pytest.raises(Exception):
            raise ValidationError("x", ErrorCode.XSS_DETECTED)

    def test_taxonomy_size(self):
        assert len(ErrorCode) == 20


@pytest.mark.unit
class TestApplicationErrors:

    def test_base_error_to_dict(self):
        original = OSError("disk full")
        error = BaseApplicationError("Something failed", details={"key": "value"},
                                     original_error=original)
        data = error.to_dict()

        assert data["error_code"] == "BaseApplicationError"
        assert data["message"] == "Something failed"
        assert data["severity"] == "medium"
        assert data["category"] == "system"
        assert data["details"] == {"key": "value"}
        assert data["original_error"] == repr(original)
        assert data["correlation_id"]

    def test_correlation_ids_are_unique(self):
        assert BaseApplicationError("a").correlation_id != BaseApplicationError("a").correlation_id

    def test_registration_error(self):
        error = RegistrationError("Registration form is invalid",
                                  field_errors={"email": "This email address is already registered"})
        assert error.category is ErrorCategory.VALIDATION
        assert error.severity is ErrorSeverity.LOW
        assert error.to_dict()["details"]["field_errors"]["email"].startswith("This email")

    def test_storage_error(self):
        error = StorageError("Write failed")
        assert error.category is ErrorCategory.STORAGE
        assert error.severity is ErrorSeverity.HIGH

    def test_external_service_error(self):
        error = ExternalServiceError("Boom", status_code=503)
        assert error.status_code == 503
        assert error.details == {"service_name": "user_api", "status_code": 503}
        assert error.category is ErrorCategory.EXTERNAL_SERVICE
