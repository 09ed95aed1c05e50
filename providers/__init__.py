"""
Capability registry and the providers wired into it.
"""

from .capability import Capability
from .registry import CapabilityRegistry, RegistrationMode
from .exceptions import (
    RegistryError, UnknownCapability, UnknownProvider,
    DuplicateRegistration, ProviderFailure, InvalidProvider, CapabilityConflict
)

__all__ = [
    'Capability',
    'CapabilityRegistry',
    'RegistrationMode',
    'RegistryError',
    'UnknownCapability',
    'UnknownProvider',
    'DuplicateRegistration',
    'ProviderFailure',
    'InvalidProvider',
    'CapabilityConflict'
]
