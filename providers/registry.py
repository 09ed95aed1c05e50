"""
Capability registry for dispatching operations to interchangeable providers.
"""

import logging
import threading
from enum import Enum
from typing import Dict, Any, Optional, Set, Union, Iterable

from .capability import Capability
from .exceptions import (
    UnknownCapability, UnknownProvider, DuplicateRegistration,
    ProviderFailure, InvalidProvider, CapabilityConflict
)

logger = logging.getLogger(__name__)

CapabilityRef = Union[Capability, str]


class RegistrationMode(Enum):
    """How the registry treats a second registration under the same discriminator."""
    STRICT = "strict"
    PERMISSIVE = "permissive"


class CapabilityRegistry:
    """
    Two-level table of capability -> discriminator -> provider.

    Every read and write of the table happens under a single lock, so a lookup
    never observes a half-applied registration. Providers run outside the lock.
    """

    def __init__(self, mode: RegistrationMode = RegistrationMode.STRICT,
                 capabilities: Optional[Iterable[Capability]] = None):
        """
        Initialize capability registry.

        Args:
            mode: Strict (reject re-registration) or permissive (replace)
            capabilities: Capabilities to define up front
        """
        self.mode = mode
        self._capabilities: Dict[str, Capability] = {}
        self._providers: Dict[str, Dict[str, Any]] = {}
        self._lock = threading.RLock()

        for capability in capabilities or ():
            self.define(capability)

    def define(self, capability: Capability) -> None:
        """
        Define a capability so providers can be registered under it.

        Args:
            capability: Capability definition

        Raises:
            CapabilityConflict: If another capability already uses the name
        """
        with self._lock:
            existing = self._capabilities.get(capability.name)
            if existing is not None:
                if existing != capability:
                    raise CapabilityConflict(capability.name)
                return
            self._capabilities[capability.name] = capability
            self._providers[capability.name] = {}
        logger.debug(f"Defined capability: {capability.name}")

    def _capability(self, capability: CapabilityRef) -> Capability:
        name = capability.name if isinstance(capability, Capability) else capability
        try:
            defined = self._capabilities[name]
        except KeyError:
            raise UnknownCapability(name) from None
        if isinstance(capability, Capability) and capability != defined:
            raise CapabilityConflict(name)
        return defined

    def register(self, capability: CapabilityRef, discriminator: str, provider: Any) -> Optional[Any]:
        """
        Bind a provider to a discriminator.

        Args:
            capability: Capability or capability name
            discriminator: Key selecting the provider
            provider: Object implementing the capability interface

        Returns:
            The replaced provider in permissive mode, otherwise None

        Raises:
            UnknownCapability: If the capability is not defined
            InvalidProvider: If the provider does not implement the interface
            DuplicateRegistration: In strict mode, if the discriminator is bound
        """
        with self._lock:
            definition = self._capability(capability)
            missing = definition.missing_methods(provider)
            if missing:
                raise InvalidProvider(definition.name, discriminator, missing)

            table = self._providers[definition.name]
            replacing = discriminator in table
            if replacing and self.mode is RegistrationMode.STRICT:
                raise DuplicateRegistration(definition.name, discriminator)

            # Copy-on-write keeps previously handed out views consistent
            previous = table.get(discriminator)
            updated = dict(table)
            updated[discriminator] = provider
            self._providers[definition.name] = updated

        if replacing:
            logger.info(f"Replaced provider {definition.name}/{discriminator}")
        else:
            logger.info(f"Registered provider {definition.name}/{discriminator}")
        return previous

    def unregister(self, capability: CapabilityRef, discriminator: str) -> None:
        """
        Remove a binding. Removing an absent binding is a no-op.

        Args:
            capability: Capability or capability name
            discriminator: Key to remove
        """
        with self._lock:
            definition = self._capability(capability)
            table = self._providers[definition.name]
            if discriminator not in table:
                return
            updated = dict(table)
            del updated[discriminator]
            self._providers[definition.name] = updated
        logger.info(f"Unregistered provider {definition.name}/{discriminator}")

    def resolve(self, capability: CapabilityRef, discriminator: str) -> Any:
        """
        Look up the provider bound to a discriminator.

        Args:
            capability: Capability or capability name
            discriminator: Key selecting the provider

        Returns:
            The registered provider

        Raises:
            UnknownCapability: If the capability is not defined
            UnknownProvider: If nothing is bound to the discriminator
        """
        with self._lock:
            definition = self._capability(capability)
            table = self._providers[definition.name]
        if discriminator not in table:
            raise UnknownProvider(definition.name, discriminator)
        return table[discriminator]

    def invoke(self, capability: CapabilityRef, discriminator: str, payload: Any = None) -> Any:
        """
        Resolve a provider and run the capability operation on the payload.

        Args:
            capability: Capability or capability name
            discriminator: Key selecting the provider
            payload: Input handed to the provider

        Returns:
            Whatever the provider returns

        Raises:
            UnknownCapability: If the capability is not defined
            UnknownProvider: If nothing is bound to the discriminator
            ProviderFailure: If the provider raises
        """
        with self._lock:
            definition = self._capability(capability)
            table = self._providers[definition.name]
        if discriminator not in table:
            raise UnknownProvider(definition.name, discriminator)
        operation = definition.bind(table[discriminator])

        logger.debug(f"Invoking {definition.name}/{discriminator}")
        try:
            return operation(payload)
        except Exception as e:
            logger.error(f"Provider {definition.name}/{discriminator} failed: {e}", exc_info=True)
            raise ProviderFailure(definition.name, discriminator, e) from e

    def list_providers(self, capability: CapabilityRef) -> Set[str]:
        """
        List discriminators currently bound under a capability.

        Args:
            capability: Capability or capability name

        Returns:
            Set of discriminators
        """
        with self._lock:
            definition = self._capability(capability)
            return set(self._providers[definition.name])

    def list_capabilities(self) -> Set[str]:
        """
        List defined capability names.

        Returns:
            Set of capability names
        """
        with self._lock:
            return set(self._capabilities)

    def has_provider(self, capability: CapabilityRef, discriminator: str) -> bool:
        """
        Check whether a discriminator is bound.

        Args:
            capability: Capability or capability name
            discriminator: Key to check

        Returns:
            True if a provider is registered
        """
        with self._lock:
            definition = self._capability(capability)
            return discriminator in self._providers[definition.name]
