"""
Error handling and exception hierarchy for the registration services.

Field-level validation failures use ``user_registration.validators.errors.ValidationError``.
The exceptions defined here cover everything above the validators: a rejected
submission, an unreadable store and a failing remote collection endpoint.
"""

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional


class ErrorSeverity(Enum):
    """Error severity levels for monitoring and alerting."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCategory(Enum):
    """Error categories for classification and handling."""
    VALIDATION = "validation"
    STORAGE = "storage"
    EXTERNAL_SERVICE = "external_service"
    SYSTEM = "system"


class BaseApplicationError(Exception):
    """
    Base exception class for all application-specific errors.

    Provides common error attributes so callers can log and report
    failures in a uniform shape.
    """

    def __init__(
        self,
        message: str,
        error_code: str = None,
        details: Dict[str, Any] = None,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        category: ErrorCategory = ErrorCategory.SYSTEM,
        original_error: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        self.severity = severity
        self.category = category
        self.original_error = original_error
        self.correlation_id = str(uuid.uuid4())
        self.timestamp = datetime.now(timezone.utc)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format for logging."""
        result = {
            'error_code': self.error_code,
            'message': self.message,
            'severity': self.severity.value,
            'category': self.category.value,
            'correlation_id': self.correlation_id,
            'timestamp': self.timestamp.isoformat(),
            'details': self.details,
            'type': self.__class__.__name__,
        }
        if self.original_error is not None:
            result['original_error'] = repr(self.original_error)
        return result


class RegistrationError(BaseApplicationError):
    """Raised when a submission is rejected because one or more fields failed."""

    def __init__(self, message: str, field_errors: Dict[str, str] = None, **kwargs):
        super().__init__(
            message=message,
            severity=ErrorSeverity.LOW,
            category=ErrorCategory.VALIDATION,
            **kwargs
        )
        self.field_errors = field_errors or {}
        self.details['field_errors'] = self.field_errors


class StorageError(BaseApplicationError):
    """Raised when the local user collection cannot be written."""

    def __init__(self, message: str, **kwargs):
        super().__init__(
            message=message,
            severity=ErrorSeverity.HIGH,
            category=ErrorCategory.STORAGE,
            **kwargs
        )


class ExternalServiceError(BaseApplicationError):
    """Raised when the remote user collection endpoint fails."""

    def __init__(self, message: str, service_name: str = "user_api",
                 status_code: Optional[int] = None, **kwargs):
        super().__init__(
            message=message,
            severity=ErrorSeverity.HIGH,
            category=ErrorCategory.EXTERNAL_SERVICE,
            **kwargs
        )
        self.service_name = service_name
        self.status_code = status_code
        self.details.update({'service_name': service_name, 'status_code': status_code})
