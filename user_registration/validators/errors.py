"""
Validation error type shared by every field validator.

Validators signal failure exclusively by raising ``ValidationError``. The
machine-readable ``code`` drives presentation logic while ``message`` carries
the human-readable text shown next to the field.
"""

from enum import Enum
from typing import Any, Dict, Union


class ErrorCode(str, Enum):
    """Symbolic validation error codes."""
    # Birth date
    MISSING_DATE = "MISSING_DATE"
    INVALID_DATE_TYPE = "INVALID_DATE_TYPE"
    INVALID_DATE = "INVALID_DATE"
    FUTURE_DATE = "FUTURE_DATE"
    AGE_TOO_YOUNG = "AGE_TOO_YOUNG"
    AGE_TOO_OLD = "AGE_TOO_OLD"

    # Postal code
    MISSING_POSTAL_CODE = "MISSING_POSTAL_CODE"
    INVALID_POSTAL_CODE_TYPE = "INVALID_POSTAL_CODE_TYPE"
    INVALID_POSTAL_CODE_FORMAT = "INVALID_POSTAL_CODE_FORMAT"

    # Names and city
    MISSING_IDENTITY = "MISSING_IDENTITY"
    INVALID_IDENTITY_TYPE = "INVALID_IDENTITY_TYPE"
    INVALID_IDENTITY_FORMAT = "INVALID_IDENTITY_FORMAT"
    IDENTITY_TOO_SHORT = "IDENTITY_TOO_SHORT"
    IDENTITY_TOO_LONG = "IDENTITY_TOO_LONG"

    XSS_DETECTED = "XSS_DETECTED"

    # Email
    MISSING_EMAIL = "MISSING_EMAIL"
    INVALID_EMAIL_TYPE = "INVALID_EMAIL_TYPE"
    INVALID_EMAIL_FORMAT = "INVALID_EMAIL_FORMAT"
    EMAIL_TOO_LONG = "EMAIL_TOO_LONG"
    EMAIL_ALREADY_EXISTS = "EMAIL_ALREADY_EXISTS"


class ValidationError(Exception):
    """
    Raised when a single field fails validation.

    Both attributes are read-only once the error is constructed.

    Example:
        >>> try:
        ...     validate_email("invalid-email")
        ... except ValidationError as error:
        ...     error.code
        <ErrorCode.INVALID_EMAIL_FORMAT: 'INVALID_EMAIL_FORMAT'>
    """

    def __init__(self, message: str, code: Union[ErrorCode, str]):
        super().__init__(message)
        self._message = message
        self._code = ErrorCode(code)

    def __reduce__(self):
        return (self.__class__, (self._message, self._code))

    @property
    def message(self) -> str:
        return self._message

    @property
    def code(self) -> ErrorCode:
        return self._code

    def to_dict(self) -> Dict[str, Any]:
        """Convert validation error to dictionary format."""
        return {
            'message': self._message,
            'code': self._code.value,
        }

    def __repr__(self) -> str:
        return f"ValidationError({self._message!r}, {self._code.value!r})"
