"""
Email validation: format, then uniqueness against a user collection.

``validate_email_complete`` always finishes the format check before looking
at the collection, so a malformed address never reports as a duplicate.
"""

import re
from typing import Any, Iterable, List, Mapping, Optional, Protocol

from .errors import ErrorCode, ValidationError
from .security import contains_xss

MAX_EMAIL_LENGTH = 254

EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")

ALREADY_REGISTERED_MESSAGE = "This email address is already registered"


class UserSource(Protocol):
    """Anything that can hand back the current user collection snapshot."""

    def load_users(self) -> List[Mapping[str, Any]]:
        ...


def validate_email(email: Any) -> None:
    """
    Validate that an email address follows a standard format.

    Raises:
        ValidationError: MISSING_EMAIL, INVALID_EMAIL_TYPE,
            INVALID_EMAIL_FORMAT, EMAIL_TOO_LONG or XSS_DETECTED
    """
    if email is None or (isinstance(email, str) and email == ""):
        raise ValidationError("Email address is required", ErrorCode.MISSING_EMAIL)

    if not isinstance(email, str):
        raise ValidationError("Email address must be a string", ErrorCode.INVALID_EMAIL_TYPE)

    if email.strip() == "":
        raise ValidationError("Email address cannot be only whitespace", ErrorCode.MISSING_EMAIL)

    if email != email.strip():
        raise ValidationError(
            "Email address must not have leading or trailing whitespace",
            ErrorCode.INVALID_EMAIL_FORMAT,
        )

    if len(email) > MAX_EMAIL_LENGTH:
        raise ValidationError(
            f"Email address must not exceed {MAX_EMAIL_LENGTH} characters",
            ErrorCode.EMAIL_TOO_LONG,
        )

    if contains_xss(email, field="email"):
        raise ValidationError(
            "Potential XSS injection detected. HTML tags and JavaScript are not allowed in email",
            ErrorCode.XSS_DETECTED,
        )

    if not EMAIL_PATTERN.fullmatch(email):
        raise ValidationError(
            "Email address must be in a valid format (example@domain.com)",
            ErrorCode.INVALID_EMAIL_FORMAT,
        )

    local_part = email.split("@")[0]
    if ".." in local_part:
        raise ValidationError(
            "Email address cannot have consecutive dots in local part",
            ErrorCode.INVALID_EMAIL_FORMAT,
        )

    if local_part.startswith(".") or local_part.endswith("."):
        raise ValidationError(
            "Email address local part cannot start or end with a dot",
            ErrorCode.INVALID_EMAIL_FORMAT,
        )


def email_in_collection(email: str, users: Iterable[Mapping[str, Any]]) -> bool:
    """Case-insensitive membership test, ignoring users without an email."""
    email_lower = email.lower()
    for user in users:
        stored = user.get("email") if isinstance(user, Mapping) else None
        if stored and isinstance(stored, str) and stored.lower() == email_lower:
            return True
    return False


def validate_unique_email(email: str,
                          existing_users: Optional[Iterable[Mapping[str, Any]]] = None,
                          user_source: Optional[UserSource] = None) -> None:
    """
    Validate that an email address is not already registered.

    Args:
        email: The email address to check
        existing_users: Snapshot of the user collection. When ``None`` the
            snapshot is read from ``user_source``.
        user_source: Collection provider, defaulting to the configured local
            user store

    Raises:
        ValidationError: EMAIL_ALREADY_EXISTS
    """
    users = existing_users
    if users is None:
        if user_source is None:
            from ..services.user_store import default_user_store
            user_source = default_user_store()
        users = user_source.load_users()

    if email_in_collection(email, users):
        raise ValidationError(ALREADY_REGISTERED_MESSAGE, ErrorCode.EMAIL_ALREADY_EXISTS)


def validate_email_complete(email: Any,
                            existing_users: Optional[Iterable[Mapping[str, Any]]] = None,
                            user_source: Optional[UserSource] = None) -> None:
    """Validate email format, then uniqueness."""
    validate_email(email)
    validate_unique_email(email, existing_users, user_source)
