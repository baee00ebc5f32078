"""Birth date validation: legal age between 18 and 150 years."""

import datetime
from typing import Any, Optional

from ..utils.datetime import InvalidDate, as_date, calculate_age, today
from .errors import ErrorCode, ValidationError

MINIMUM_AGE = 18
MAXIMUM_AGE = 150


def validate_age(birth_date: Any, reference_date: Optional[datetime.date] = None) -> None:
    """
    Validate that a birth date belongs to someone aged 18 to 150 inclusive.

    Args:
        birth_date: ``datetime.date``/``datetime.datetime``, or the
            ``InvalidDate`` marker produced by ``parse_date``
        reference_date: Date the age is computed at (default: today)

    Raises:
        ValidationError: MISSING_DATE, INVALID_DATE_TYPE, INVALID_DATE,
            FUTURE_DATE, AGE_TOO_YOUNG or AGE_TOO_OLD
    """
    if birth_date is None:
        raise ValidationError("Birth date is required", ErrorCode.MISSING_DATE)

    if not isinstance(birth_date, (datetime.date, InvalidDate)):
        raise ValidationError("Birth date must be a date", ErrorCode.INVALID_DATE_TYPE)

    if isinstance(birth_date, InvalidDate):
        raise ValidationError("Birth date is not a valid date", ErrorCode.INVALID_DATE)

    birth = as_date(birth_date)
    reference = as_date(reference_date) if reference_date is not None else today()

    if birth > reference:
        raise ValidationError("Birth date cannot be in the future", ErrorCode.FUTURE_DATE)

    age = calculate_age(birth, reference)

    if age < MINIMUM_AGE:
        raise ValidationError(
            f"You must be at least {MINIMUM_AGE} years old to register",
            ErrorCode.AGE_TOO_YOUNG,
        )

    if age > MAXIMUM_AGE:
        raise ValidationError(
            f"Age cannot be over {MAXIMUM_AGE} years",
            ErrorCode.AGE_TOO_OLD,
        )
