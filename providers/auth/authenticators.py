"""
Authenticators for username/password pairs and static API tokens.
"""

import hashlib
import hmac
import logging
import os
import threading
from typing import Dict, Iterable, Optional, Tuple

from config.settings import settings
from interfaces import IAuthenticator, Credentials

logger = logging.getLogger(__name__)


class PasswordAuthenticator(IAuthenticator):
    """Checks passwords against salted SHA-256 digests kept in memory."""

    def __init__(self):
        self._users: Dict[str, Tuple[bytes, bytes]] = {}
        self._lock = threading.Lock()

    @staticmethod
    def _hash(password: str, salt: bytes) -> bytes:
        return hashlib.sha256(salt + password.encode('utf-8')).digest()

    def add_user(self, username: str, password: str) -> None:
        """
        Add or replace a user.

        Args:
            username: Login name
            password: Plain text password, only its digest is kept
        """
        if not username or not password:
            raise ValueError("Username and password are required")
        salt = os.urandom(16)
        with self._lock:
            self._users[username] = (salt, self._hash(password, salt))
        logger.info(f"Added user: {username}")

    def authenticate(self, credentials: Credentials) -> bool:
        if credentials.secret is None:
            return False
        with self._lock:
            entry = self._users.get(credentials.username)
        if entry is None:
            return False
        salt, digest = entry
        return hmac.compare_digest(digest, self._hash(credentials.secret, salt))


class TokenAuthenticator(IAuthenticator):
    """Accepts any credentials whose secret is a known token."""

    def __init__(self, tokens: Optional[Iterable[str]] = None):
        """
        Initialize token authenticator.

        Args:
            tokens: Accepted tokens, defaults to AUTH_TOKENS
        """
        if tokens is None:
            tokens = settings.split_list(settings.AUTH_TOKENS)
        self._tokens = frozenset(token.encode('utf-8') for token in tokens)

    def authenticate(self, credentials: Credentials) -> bool:
        if not credentials.secret:
            return False
        secret = credentials.secret.encode('utf-8')
        return any(hmac.compare_digest(secret, token) for token in self._tokens)
