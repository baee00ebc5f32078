"""
HTTP client for the remote user collection endpoint.

Only two operations exist: list users and create a user. Failures are logged
and raised as ``ExternalServiceError``; there is no retry.
"""

from typing import Any, Dict, List, Mapping, Optional

import requests

from ..config import get_config
from ..models.user import UserRecord, UserRecordSchema
from ..utils.error_handling import ExternalServiceError
from ..utils.logging import LogCategory, get_logger

logger = get_logger("api_client")


class UserApiClient:
    """
    Client for a ``/users`` REST collection.

    Args:
        base_url: API root (default: ``API_BASE_URL`` from configuration)
        timeout: Request timeout in seconds (default: ``API_TIMEOUT``)
        session: Optional ``requests.Session`` to send requests through
    """

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None,
                 session: Optional[requests.Session] = None):
        cfg = get_config()
        self.base_url = (base_url or cfg.API_BASE_URL).rstrip('/')
        self.timeout = timeout if timeout is not None else cfg.API_TIMEOUT
        self.session = session or requests.Session()

    @property
    def users_url(self) -> str:
        return f"{self.base_url}/users"

    def get_users(self) -> List[Dict[str, Any]]:
        """
        Fetch all registered users.

        Raises:
            ExternalServiceError: If the request fails or the body is not a JSON array
        """
        try:
            response = self.session.get(self.users_url, timeout=self.timeout)
            response.raise_for_status()
            users = response.json()
        except requests.exceptions.RequestException as e:
            self._log_failure("Error fetching users", e)
            raise ExternalServiceError(
                "Failed to fetch users from remote API",
                status_code=self._status_of(e),
                original_error=e,
            ) from e
        except ValueError as e:
            self._log_failure("Invalid JSON in users response", e)
            raise ExternalServiceError("Remote API returned invalid JSON", original_error=e) from e

        if not isinstance(users, list):
            raise ExternalServiceError("Remote API returned a non-list user collection")

        logger.debug("Fetched users", category=LogCategory.EXTERNAL_SERVICE.value, count=len(users))
        return users

    def create_user(self, user_data: Any) -> Dict[str, Any]:
        """
        Create a user and return the created object, including the server id.

        Args:
            user_data: ``UserRecord`` or a mapping with camelCase keys

        Raises:
            ExternalServiceError: If the request fails
        """
        if isinstance(user_data, UserRecord):
            payload = UserRecordSchema().dump(user_data)
        else:
            payload = dict(user_data)

        try:
            response = self.session.post(self.users_url, json=payload, timeout=self.timeout)
            response.raise_for_status()
            created = response.json()
        except requests.exceptions.RequestException as e:
            self._log_failure("Error creating user", e)
            raise ExternalServiceError(
                "Failed to create user on remote API",
                status_code=self._status_of(e),
                original_error=e,
            ) from e
        except ValueError as e:
            self._log_failure("Invalid JSON in create response", e)
            raise ExternalServiceError("Remote API returned invalid JSON", original_error=e) from e

        logger.info("User created on remote API", category=LogCategory.EXTERNAL_SERVICE.value,
                    user_id=created.get('id') if isinstance(created, Mapping) else None)
        return created

    def _log_failure(self, message: str, error: Exception) -> None:
        logger.error(
            message,
            category=LogCategory.EXTERNAL_SERVICE.value,
            url=self.users_url,
            error_type=type(error).__name__,
            error_message=str(error),
        )

    @staticmethod
    def _status_of(error: requests.exceptions.RequestException) -> Optional[int]:
        response = getattr(error, 'response', None)
        return response.status_code if response is not None else None
