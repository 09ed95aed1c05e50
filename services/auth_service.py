"""
Login through pluggable authentication methods.
"""

import logging

from interfaces import Credentials
from providers.capabilities import AUTHENTICATION
from providers.registry import CapabilityRegistry

logger = logging.getLogger(__name__)


class AuthenticationService:
    """Authenticates users with the method they choose."""

    def __init__(self, registry: CapabilityRegistry):
        """
        Initialize authentication service.

        Args:
            registry: Registry with authentication providers
        """
        self.registry = registry

    def login(self, method: str, credentials: Credentials) -> bool:
        """
        Authenticate credentials.

        Args:
            method: Authentication method, e.g. "password" or "token"
            credentials: Credentials to check

        Returns:
            True if the credentials are accepted

        Raises:
            UnknownProvider: If the method is not wired
            ProviderFailure: If the authenticator itself fails
        """
        accepted = bool(self.registry.invoke(AUTHENTICATION, method, credentials))
        if accepted:
            logger.info(f"User {credentials.username} authenticated via {method}")
        else:
            logger.warning(f"Authentication failed for {credentials.username} via {method}")
        return accepted
