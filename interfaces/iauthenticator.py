"""
Abstract interface for authentication methods.
"""

from abc import ABC, abstractmethod

from .models import Credentials


class IAuthenticator(ABC):
    """Abstract interface for checking credentials."""

    @abstractmethod
    def authenticate(self, credentials: Credentials) -> bool:
        """
        Check credentials.

        Args:
            credentials: Username and secret to verify

        Returns:
            True if the credentials are accepted
        """
        pass
