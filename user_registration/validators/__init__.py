"""
Field validators for the registration form.

Every validator is a plain function that returns ``None`` when the value is
acceptable and raises ``ValidationError`` on the first violated rule.
"""

from .age import MAXIMUM_AGE, MINIMUM_AGE, validate_age
from .dispatcher import FormFieldName, validate_field
from .email import (
    UserSource,
    email_in_collection,
    validate_email,
    validate_email_complete,
    validate_unique_email,
)
from .errors import ErrorCode, ValidationError
from .identity import validate_identity
from .postal_code import validate_postal_code
from .security import SecurityPatterns

__all__ = [
    'ErrorCode',
    'ValidationError',
    'MAXIMUM_AGE',
    'MINIMUM_AGE',
    'validate_age',
    'validate_postal_code',
    'validate_identity',
    'validate_email',
    'validate_unique_email',
    'validate_email_complete',
    'email_in_collection',
    'UserSource',
    'FormFieldName',
    'validate_field',
    'SecurityPatterns',
]
