"""
Error taxonomy raised by the capability registry.
"""

from typing import Optional


class RegistryError(Exception):
    """Base class for registry errors."""

    def __init__(self, message: str, capability: Optional[str] = None,
                 discriminator: Optional[str] = None):
        super().__init__(message)
        self.capability = capability
        self.discriminator = discriminator


class UnknownCapability(RegistryError):
    """Raised when a capability has not been defined on the registry."""

    def __init__(self, capability: str):
        super().__init__(f"Unknown capability: {capability}", capability=capability)


class UnknownProvider(RegistryError):
    """Raised when no provider is bound to a discriminator."""

    def __init__(self, capability: str, discriminator: str):
        super().__init__(
            f"No provider registered for {capability}/{discriminator}",
            capability=capability,
            discriminator=discriminator
        )


class DuplicateRegistration(RegistryError):
    """Raised in strict mode when a discriminator is already bound."""

    def __init__(self, capability: str, discriminator: str):
        super().__init__(
            f"Provider already registered for {capability}/{discriminator}",
            capability=capability,
            discriminator=discriminator
        )


class ProviderFailure(RegistryError):
    """
    Raised by invoke when a provider fails.

    The original exception is kept on ``cause`` and chained as ``__cause__``.
    """

    def __init__(self, capability: str, discriminator: str, cause: BaseException):
        super().__init__(
            f"Provider {capability}/{discriminator} failed: {cause!r}",
            capability=capability,
            discriminator=discriminator
        )
        self.cause = cause


class InvalidProvider(RegistryError, TypeError):
    """Raised when a provider does not implement the full capability interface."""

    def __init__(self, capability: str, discriminator: str, missing):
        super().__init__(
            f"Provider for {capability}/{discriminator} does not implement: {', '.join(missing)}",
            capability=capability,
            discriminator=discriminator
        )
        self.missing = list(missing)


class CapabilityConflict(RegistryError, ValueError):
    """Raised when a different capability is defined under a name already in use."""

    def __init__(self, capability: str):
        super().__init__(f"Capability name already defined: {capability}", capability=capability)
