"""
Registration Service

Orchestrates the submit step of the registration form: take a fresh snapshot
of the user collection, re-run every field validator against it, build the
``UserRecord`` and persist it.

Business Logic Coverage:
- All six fields must be non-blank and pass their validator; one failure
  rejects the whole submission
- Email uniqueness is checked against the snapshot taken at submit time
- Age is computed with calendar-exact semantics at submit time
- Emails are lower-cased when stored

Two near-simultaneous submissions with the same email can both pass the
uniqueness check. A hard guarantee needs a uniqueness constraint in the
backing store.
"""

import datetime
from typing import Any, Dict, List, Mapping, Optional

from ..config import get_config
from ..models.user import UserRecord
from ..utils.datetime import as_date, calculate_age, now_iso, parse_date
from ..utils.error_handling import RegistrationError
from ..utils.logging import LogCategory, get_logger
from ..validators.dispatcher import FormFieldName, validate_field
from .api_client import UserApiClient
from .user_store import UserStore, default_user_store

FORM_FIELDS = [field.value for field in FormFieldName]


class RegistrationService:
    """
    Service for validating and persisting registration form submissions.

    Args:
        store: Local user collection (default: the configured local store)
        api_client: Remote collection client. When set, the snapshot used for
            uniqueness is fetched remotely and new users are also created there.
            Defaults to a ``UserApiClient`` when the configured
            ``PERSISTENCE_BACKEND`` is ``remote``.

    Example Usage:
        >>> service = RegistrationService(UserStore(MemoryStorage()))
        >>> record = service.register({
        ...     'firstName': 'Jean', 'lastName': 'Dupont',
        ...     'email': 'jean.dupont@example.com', 'birthDate': '1990-05-17',
        ...     'postalCode': '75001', 'city': 'Paris',
        ... })
    """

    def __init__(self, store: Optional[UserStore] = None,
                 api_client: Optional[UserApiClient] = None):
        self.store = store if store is not None else default_user_store()
        if api_client is None and get_config().uses_remote_backend():
            api_client = UserApiClient()
        self.api_client = api_client
        self.logger = get_logger("registration_service")

    def fetch_existing_users(self) -> List[Dict[str, Any]]:
        """Return the freshest known snapshot of the user collection."""
        if self.api_client is not None:
            return self.api_client.get_users()
        return self.store.load_users()

    def validate_form(self, form_data: Mapping[str, Any],
                      existing_users: List[Mapping[str, Any]],
                      reference_date: Optional[datetime.date] = None) -> Dict[str, str]:
        """Return the validation message of every form field (``""`` when valid)."""
        return {
            name: validate_field(name, form_data.get(name), existing_users, reference_date)
            for name in FORM_FIELDS
        }

    def is_form_valid(self, form_data: Mapping[str, Any],
                      existing_users: List[Mapping[str, Any]]) -> bool:
        """True if all six fields are filled in and pass validation."""
        if not self._all_fields_filled(form_data):
            return False
        return not any(self.validate_form(form_data, existing_users).values())

    def build_record(self, form_data: Mapping[str, Any],
                     reference_date: Optional[datetime.date] = None) -> UserRecord:
        """Build the record stored for a validated submission."""
        birth_date = form_data[FormFieldName.BIRTH_DATE.value]
        if isinstance(birth_date, str):
            birth_date = parse_date(birth_date)

        return UserRecord(
            first_name=form_data[FormFieldName.FIRST_NAME.value],
            last_name=form_data[FormFieldName.LAST_NAME.value],
            email=form_data[FormFieldName.EMAIL.value].lower(),
            age=calculate_age(as_date(birth_date), reference_date),
            postal_code=form_data[FormFieldName.POSTAL_CODE.value],
            city=form_data[FormFieldName.CITY.value],
            timestamp=now_iso(),
        )

    def register(self, form_data: Mapping[str, Any],
                 reference_date: Optional[datetime.date] = None) -> UserRecord:
        """
        Validate a submission and persist the resulting record.

        Args:
            form_data: Raw form values keyed by field name
            reference_date: Date the age is computed at (default: today)

        Returns:
            UserRecord: The stored record (with the server id when a remote
            API is configured)

        Raises:
            RegistrationError: When any field fails validation
            ExternalServiceError: When the remote API fails
            StorageError: When the local store cannot be written
        """
        self.logger.info("User registration initiated", category=LogCategory.AUDIT.value)

        existing_users = self.fetch_existing_users()
        field_errors = {
            name: message
            for name, message in self.validate_form(form_data, existing_users, reference_date).items()
            if message
        }

        if field_errors:
            self.logger.info(
                "User registration rejected",
                category=LogCategory.AUDIT.value,
                invalid_fields=sorted(field_errors),
            )
            raise RegistrationError("Registration form is invalid", field_errors=field_errors)

        record = self.build_record(form_data, reference_date)

        if self.api_client is not None:
            created = self.api_client.create_user(record)
            if isinstance(created, Mapping) and created.get('id') is not None:
                record.id = created['id']

        self.store.add_user(record)

        self.logger.info(
            "User registration completed",
            category=LogCategory.AUDIT.value,
            user_id=record.id,
            email_domain=record.email.split('@')[-1],
        )
        return record

    @staticmethod
    def _is_blank(value: Any) -> bool:
        if value is None:
            return True
        if isinstance(value, str):
            return value.strip() == ""
        return False

    def _all_fields_filled(self, form_data: Mapping[str, Any]) -> bool:
        return all(not self._is_blank(form_data.get(name)) for name in FORM_FIELDS)
