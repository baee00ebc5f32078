"""
Field-name to validator routing for form layers.

``validate_field`` is the adaptation boundary between the raising
validators and a form that only wants a message to display: it returns the
error message, or an empty string when the value is valid.
"""

import datetime
from enum import Enum
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Union

from ..utils.datetime import parse_date
from .age import validate_age
from .email import validate_email_complete
from .errors import ValidationError
from .identity import validate_identity
from .postal_code import validate_postal_code

BIRTH_DATE_REQUIRED_MESSAGE = "Birth date is required"


class FormFieldName(str, Enum):
    """The six registration form fields."""
    FIRST_NAME = "firstName"
    LAST_NAME = "lastName"
    EMAIL = "email"
    BIRTH_DATE = "birthDate"
    POSTAL_CODE = "postalCode"
    CITY = "city"

    @classmethod
    def lookup(cls, name: Union[str, "FormFieldName"]) -> Optional["FormFieldName"]:
        try:
            return cls(name)
        except (ValueError, TypeError):
            return None


def _validate_birth_date(value: Any, reference_date: Optional[datetime.date] = None) -> None:
    validate_age(parse_date(value) if isinstance(value, str) else value, reference_date)


_VALIDATORS: Dict[FormFieldName, Callable[[Any], None]] = {
    FormFieldName.FIRST_NAME: validate_identity,
    FormFieldName.LAST_NAME: validate_identity,
    FormFieldName.CITY: validate_identity,
    FormFieldName.POSTAL_CODE: validate_postal_code,
}


def validate_field(field_name: Union[str, FormFieldName], value: Any,
                   existing_users: Optional[Iterable[Mapping[str, Any]]] = None,
                   reference_date: Optional[datetime.date] = None) -> str:
    """
    Validate one form field.

    Args:
        field_name: One of the ``FormFieldName`` values
        value: Raw field value
        existing_users: User collection snapshot for the email uniqueness
            check, or ``None`` to read the configured store
        reference_date: Date the birth date age is computed at (default: today)

    Returns:
        The validation error message, or ``""`` if the value is valid or the
        field name is unknown
    """
    field = FormFieldName.lookup(field_name)
    if field is None:
        return ""

    if field is FormFieldName.BIRTH_DATE and not value:
        return BIRTH_DATE_REQUIRED_MESSAGE

    try:
        if field is FormFieldName.BIRTH_DATE:
            _validate_birth_date(value, reference_date)
        elif field is FormFieldName.EMAIL:
            validate_email_complete(value, existing_users)
        else:
            _VALIDATORS[field](value)
    except ValidationError as error:
        return error.message

    return ""
