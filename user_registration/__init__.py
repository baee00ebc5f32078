"""
User Registration Validation Package

Validation core for a user-registration form: field validators with coded
errors, calendar-exact age calculation, a field dispatcher for form layers,
and the services that snapshot, validate and persist submissions.

Package Components:
- validators: pure field validators and the field dispatcher
- models: UserRecord and its marshmallow schema
- services: key-value storage, user collection store, remote API client,
  registration workflow
- utils: structured logging, error hierarchy, date helpers
"""

__version__ = "1.0.0"

from . import models, services, utils, validators
from .models import UserRecord, UserRecordSchema
from .services import RegistrationService, UserApiClient, UserStore
from .utils.datetime import calculate_age
from .validators import (
    ErrorCode,
    FormFieldName,
    ValidationError,
    validate_age,
    validate_email,
    validate_email_complete,
    validate_field,
    validate_identity,
    validate_postal_code,
    validate_unique_email,
)

__all__ = [
    "__version__",
    "models",
    "services",
    "utils",
    "validators",
    "ErrorCode",
    "FormFieldName",
    "ValidationError",
    "calculate_age",
    "validate_age",
    "validate_email",
    "validate_email_complete",
    "validate_field",
    "validate_identity",
    "validate_postal_code",
    "validate_unique_email",
    "UserRecord",
    "UserRecordSchema",
    "RegistrationService",
    "UserApiClient",
    "UserStore",
]
