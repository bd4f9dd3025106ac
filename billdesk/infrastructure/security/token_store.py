"""
In-memory session token store.
"""
import logging
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class TokenStore:
    """
    Holds the bearer token and user of the current session.

    Cleared on logout and whenever the API answers 401.
    """

    def __init__(self, token: Optional[str] = None, user: Optional[Dict[str, Any]] = None):
        self._token = token
        self._user = user

    @property
    def token(self) -> Optional[str]:
        return self._token

    @property
    def user(self) -> Optional[Dict[str, Any]]:
        return self._user

    @property
    def is_authenticated(self) -> bool:
        return bool(self._token)

    def set(self, token: str, user: Optional[Dict[str, Any]] = None) -> None:
        self._token = token
        self._user = user

    def clear(self) -> None:
        if self._token:
            logger.info("Clearing session token")
        self._token = None
        self._user = None

    def auth_headers(self) -> Dict[str, str]:
        """Authorization header for the current token, if any."""
        if not self._token:
            return {}
        return {"Authorization": f"Bearer {self._token}"}
