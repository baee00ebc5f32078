"""
Persistence and workflow services around the validators.

- storage: string key-value stores (JSON file and in-memory)
- user_store: the persisted user collection
- api_client: remote ``/users`` collection client
- registration_service: submit-time validation and persistence
"""

from .api_client import UserApiClient
from .registration_service import FORM_FIELDS, RegistrationService
from .storage import LocalStorage, MemoryStorage
from .user_store import DEFAULT_COLLECTION_KEY, UserStore, default_user_store

__all__ = [
    'LocalStorage',
    'MemoryStorage',
    'UserStore',
    'DEFAULT_COLLECTION_KEY',
    'default_user_store',
    'UserApiClient',
    'RegistrationService',
    'FORM_FIELDS',
]
