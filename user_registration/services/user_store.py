"""
Persisted user collection.

The collection is an ordered JSON array of user records stored as a single
string value under one key (``registeredUsers`` by default). A corrupt value
is read as an empty collection instead of failing: registration must not be
blocked by a damaged store.
"""

import json
from typing import Any, Dict, List, Mapping, Optional, Union

from marshmallow import ValidationError as SchemaValidationError

from ..config import get_config
from ..models.user import UserRecord, UserRecordSchema
from ..utils.logging import LogCategory, get_logger
from ..validators.email import email_in_collection
from .storage import LocalStorage, MemoryStorage

logger = get_logger("user_store")

DEFAULT_COLLECTION_KEY = "registeredUsers"

Storage = Union[LocalStorage, MemoryStorage]


class UserStore:
    """
    Read and append access to the stored user collection.

    Args:
        storage: Key-value storage holding the serialized collection
        collection_key: Key the collection is stored under
    """

    def __init__(self, storage: Storage, collection_key: str = DEFAULT_COLLECTION_KEY):
        self.storage = storage
        self.collection_key = collection_key
        self._schema = UserRecordSchema()

    def load_users(self) -> List[Dict[str, Any]]:
        """
        Return the stored collection as plain dictionaries.

        Missing, corrupt or non-array data yields an empty list.
        """
        raw = self.storage.get_item(self.collection_key)
        if not raw:
            return []

        try:
            users = json.loads(raw)
        except ValueError as e:
            logger.warning(
                "Stored user collection is corrupt, treating as empty",
                category=LogCategory.STORAGE.value,
                collection_key=self.collection_key,
                error=str(e),
            )
            return []

        if not isinstance(users, list):
            logger.warning(
                "Stored user collection is not a list, treating as empty",
                category=LogCategory.STORAGE.value,
                collection_key=self.collection_key,
            )
            return []

        return [user for user in users if isinstance(user, dict)]

    # Re-reading is always fresh; kept for callers that want an explicit refresh
    refresh = load_users

    def load_records(self) -> List[UserRecord]:
        """Return the stored collection as ``UserRecord`` objects, skipping invalid entries."""
        records = []
        for index, user in enumerate(self.load_users()):
            try:
                records.append(self._schema.load(user))
            except SchemaValidationError as e:
                logger.warning(
                    "Skipping invalid stored user record",
                    category=LogCategory.STORAGE.value,
                    index=index,
                    errors=e.messages,
                )
        return records

    def save_users(self, users: List[Mapping[str, Any]]) -> None:
        """Replace the stored collection."""
        self.storage.set_item(self.collection_key, json.dumps(list(users), ensure_ascii=False))

    def add_user(self, record: Union[UserRecord, Mapping[str, Any]]) -> List[Dict[str, Any]]:
        """
        Append a record to the collection and persist it.

        Returns:
            The updated collection
        """
        entry = self._schema.dump(record) if isinstance(record, UserRecord) else dict(record)
        users = self.load_users()
        users.append(entry)
        self.save_users(users)

        logger.info(
            "User record stored",
            category=LogCategory.STORAGE.value,
            collection_key=self.collection_key,
            collection_size=len(users),
        )
        return users

    def email_exists(self, email: str) -> bool:
        """Case-insensitive lookup of ``email`` in the stored collection."""
        return email_in_collection(email, self.load_users())

    def __len__(self) -> int:
        return len(self.load_users())


def default_user_store(config_name: Optional[str] = None) -> UserStore:
    """Build the local-storage-backed user store described by the configuration."""
    cfg = get_config(config_name)
    return UserStore(LocalStorage(cfg.STORAGE_PATH), cfg.USERS_COLLECTION_KEY)
