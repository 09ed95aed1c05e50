"""
Component factories that build the registry from configuration and wire services to it.
"""

import importlib
import logging
from typing import Any, Dict, Optional, Set, Tuple

from config.settings import settings as default_settings
from providers.capabilities import ALL_CAPABILITIES, LOGGING, PERSISTENCE
from providers.catalog import PROVIDER_CATALOG
from providers.log_sinks.sinks import DatabaseLogSink
from providers.registry import CapabilityRegistry, RegistrationMode
from services import (
    AreaService, AuditService, DocumentService,
    AuthenticationService, CheckoutService
)
from .container import DIContainer

logger = logging.getLogger(__name__)


class ComponentFactory:
    """Factory for the registry and the services that call through it."""

    def __init__(self, config: Any = None, catalog: Optional[Dict[str, Dict[str, str]]] = None):
        """
        Initialize component factory.

        Args:
            config: Settings object, defaults to the global settings
            catalog: Capability -> discriminator -> dotted provider path
        """
        self.config = config or default_settings
        self.catalog = PROVIDER_CATALOG if catalog is None else catalog

    def registration_mode(self) -> RegistrationMode:
        """
        Read the registration mode from configuration.

        Raises:
            ValueError: If REGISTRY_MODE is not a known mode
        """
        value = (self.config.REGISTRY_MODE or "").strip().lower()
        try:
            return RegistrationMode(value)
        except ValueError:
            raise ValueError(f"Invalid REGISTRY_MODE: {self.config.REGISTRY_MODE}") from None

    def disabled_providers(self) -> Set[Tuple[str, str]]:
        """Parse DISABLED_PROVIDERS into (capability, discriminator) pairs."""
        disabled = set()
        for item in self.config.split_list(self.config.DISABLED_PROVIDERS):
            capability, _, discriminator = item.partition(":")
            disabled.add((capability.strip(), discriminator.strip()))
        return disabled

    @staticmethod
    def _load_provider(path: str) -> Any:
        module_path, _, class_name = path.rpartition(".")
        module = importlib.import_module(module_path)
        return getattr(module, class_name)()

    def create_registry(self) -> CapabilityRegistry:
        """
        Create a registry with every enabled catalog provider registered.

        Returns:
            Wired capability registry

        Raises:
            ValueError: If the configuration is invalid
        """
        self.config.validate()
        registry = CapabilityRegistry(mode=self.registration_mode(), capabilities=ALL_CAPABILITIES)
        disabled = self.disabled_providers()

        for capability, providers in self.catalog.items():
            for discriminator, path in providers.items():
                if (capability, discriminator) in disabled:
                    logger.debug(f"Provider disabled by configuration: {capability}/{discriminator}")
                    continue
                try:
                    provider = self._load_provider(path)
                except (ImportError, AttributeError) as e:
                    logger.warning(f"Provider not available: {capability}/{discriminator} ({e})")
                    continue
                registry.register(capability, discriminator, provider)

        self._wire_database_log_sink(registry, disabled)

        logger.info(f"Registry ready with capabilities: {', '.join(sorted(registry.list_capabilities()))}")
        return registry

    def _wire_database_log_sink(self, registry: CapabilityRegistry,
                                disabled: Set[Tuple[str, str]]) -> None:
        if (LOGGING.name, "database") in disabled:
            return
        store_name = self.config.DEFAULT_RECORD_STORE
        if not registry.has_provider(PERSISTENCE, store_name):
            logger.warning(f"Database log sink not wired: record store '{store_name}' is not registered")
            return
        registry.register(LOGGING, "database", DatabaseLogSink(registry.resolve(PERSISTENCE, store_name)))

    def create_area_service(self, registry: CapabilityRegistry) -> AreaService:
        return AreaService(registry)

    def create_audit_service(self, registry: CapabilityRegistry) -> AuditService:
        return AuditService(
            registry,
            default_sink=self.config.DEFAULT_LOG_SINK,
            default_store=self.config.DEFAULT_RECORD_STORE
        )

    def create_document_service(self, registry: CapabilityRegistry) -> DocumentService:
        return DocumentService(
            registry,
            default_printer=self.config.DEFAULT_PRINTER,
            default_scanner=self.config.DEFAULT_SCANNER
        )

    def create_authentication_service(self, registry: CapabilityRegistry) -> AuthenticationService:
        return AuthenticationService(registry)

    def create_checkout_service(self, registry: CapabilityRegistry) -> CheckoutService:
        return CheckoutService(
            registry,
            store=self.config.DEFAULT_RECORD_STORE,
            printer=self.config.DEFAULT_PRINTER
        )


def build_container(factory: Optional[ComponentFactory] = None) -> DIContainer:
    """
    Build a container holding one registry and the services bound to it.

    Args:
        factory: Component factory, defaults to one using global settings

    Returns:
        Populated DI container
    """
    factory = factory or ComponentFactory()
    registry = factory.create_registry()

    container = DIContainer()
    container.register_instance(CapabilityRegistry, registry)
    container.register_factory(AreaService, lambda: factory.create_area_service(registry), singleton=True)
    container.register_factory(AuditService, lambda: factory.create_audit_service(registry), singleton=True)
    container.register_factory(DocumentService, lambda: factory.create_document_service(registry), singleton=True)
    container.register_factory(AuthenticationService,
                               lambda: factory.create_authentication_service(registry), singleton=True)
    container.register_factory(CheckoutService, lambda: factory.create_checkout_service(registry), singleton=True)
    return container
