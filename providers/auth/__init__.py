"""
Authentication providers.
"""

from .authenticators import PasswordAuthenticator, TokenAuthenticator

__all__ = ['PasswordAuthenticator', 'TokenAuthenticator']
