"""Postal code validation: exactly five ASCII digits."""

import re
from typing import Any

from .errors import ErrorCode, ValidationError

POSTAL_CODE_PATTERN = re.compile(r"[0-9]{5}")


def validate_postal_code(code: Any) -> None:
    """
    Validate a 5-digit postal code. Leading zeros are allowed, surrounding
    whitespace is not.

    Raises:
        ValidationError: MISSING_POSTAL_CODE, INVALID_POSTAL_CODE_TYPE or
            INVALID_POSTAL_CODE_FORMAT
    """
    if code is None or (isinstance(code, str) and code == ""):
        raise ValidationError("Postal code is required", ErrorCode.MISSING_POSTAL_CODE)

    if not isinstance(code, str):
        raise ValidationError("Postal code must be a string", ErrorCode.INVALID_POSTAL_CODE_TYPE)

    if code.strip() == "":
        raise ValidationError("Postal code cannot be only whitespace", ErrorCode.MISSING_POSTAL_CODE)

    if not POSTAL_CODE_PATTERN.fullmatch(code):
        raise ValidationError(
            "Postal code must contain exactly 5 digits",
            ErrorCode.INVALID_POSTAL_CODE_FORMAT,
        )
