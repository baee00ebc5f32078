"""
Validation for name-like fields: first name, last name and city.

Accepts any Unicode letters (so accented names pass), separated by spaces,
hyphens or apostrophes: "Jean-Pierre", "O'Connor", "De La Cruz".
"""

import re
from typing import Any

from .errors import ErrorCode, ValidationError
from .security import contains_xss

MIN_LENGTH = 2
MAX_LENGTH = 50

# [^\W\d_] is "any Unicode letter"
IDENTITY_PATTERN = re.compile(r"(?:[^\W\d_]|[ '’-])+")


def validate_identity(value: Any) -> None:
    """
    Validate a first name, last name or city.

    Raises:
        ValidationError: MISSING_IDENTITY, INVALID_IDENTITY_TYPE,
            INVALID_IDENTITY_FORMAT, XSS_DETECTED, IDENTITY_TOO_SHORT or
            IDENTITY_TOO_LONG
    """
    if value is None or (isinstance(value, str) and value == ""):
        raise ValidationError("This field is required", ErrorCode.MISSING_IDENTITY)

    if not isinstance(value, str):
        raise ValidationError("This field must be a string", ErrorCode.INVALID_IDENTITY_TYPE)

    if value.strip() == "":
        raise ValidationError("This field cannot be only whitespace", ErrorCode.MISSING_IDENTITY)

    if value != value.strip():
        raise ValidationError(
            "This field must not have leading or trailing whitespace",
            ErrorCode.INVALID_IDENTITY_FORMAT,
        )

    # Must run before length and format so injection attempts report as such
    if contains_xss(value, field="identity"):
        raise ValidationError(
            "Potential XSS injection detected. HTML tags and JavaScript are not allowed",
            ErrorCode.XSS_DETECTED,
        )

    if len(value) < MIN_LENGTH:
        raise ValidationError(
            f"This field must contain at least {MIN_LENGTH} characters",
            ErrorCode.IDENTITY_TOO_SHORT,
        )

    if len(value) > MAX_LENGTH:
        raise ValidationError(
            f"This field must not exceed {MAX_LENGTH} characters",
            ErrorCode.IDENTITY_TOO_LONG,
        )

    if not IDENTITY_PATTERN.fullmatch(value):
        raise ValidationError(
            "This field can only contain letters, spaces, hyphens and apostrophes (no digits or special characters)",
            ErrorCode.INVALID_IDENTITY_FORMAT,
        )
