"""
Cross-cutting utilities: structured logging, error hierarchy and date helpers.
"""

from .datetime import (
    DateTimeError,
    InvalidDate,
    InvalidDateFormatError,
    calculate_age,
    calculate_person_age,
    now_iso,
    parse_date,
)
from .error_handling import (
    BaseApplicationError,
    ErrorCategory,
    ErrorSeverity,
    ExternalServiceError,
    RegistrationError,
    StorageError,
)
from .logging import (
    LogCategory,
    SecurityEventType,
    configure_logging,
    get_logger,
    log_security_event,
)

__all__ = [
    # Dates
    'DateTimeError',
    'InvalidDate',
    'InvalidDateFormatError',
    'calculate_age',
    'calculate_person_age',
    'now_iso',
    'parse_date',

    # Errors
    'BaseApplicationError',
    'ErrorCategory',
    'ErrorSeverity',
    'ExternalServiceError',
    'RegistrationError',
    'StorageError',

    # Logging
    'LogCategory',
    'SecurityEventType',
    'configure_logging',
    'get_logger',
    'log_security_event',
]
