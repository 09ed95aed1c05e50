"""
Dependency injection container for the registry and the services built on it.
"""

import threading
from typing import Dict, Any, Callable, Type, TypeVar

T = TypeVar('T')


class DIContainer:
    """Dependency injection container for component management."""

    def __init__(self):
        """Initialize the DI container."""
        self._services: Dict[Type, Any] = {}
        self._singletons: Dict[Type, Any] = {}
        self._factories: Dict[Type, Callable[[], Any]] = {}
        self._lock = threading.RLock()

    def register(self, interface: Type[T], implementation: Type[T],
                 singleton: bool = True) -> None:
        """
        Register a service implementation.

        Args:
            interface: Type the service is resolved by
            implementation: Concrete type, constructed without arguments
            singleton: Whether to create as singleton
        """
        with self._lock:
            self._services[interface] = implementation
            if singleton:
                self._singletons[interface] = None  # Created on first access

    def register_factory(self, interface: Type[T], factory: Callable[[], T],
                         singleton: bool = False) -> None:
        """
        Register a factory function for service creation.

        Args:
            interface: Type the service is resolved by
            factory: Function that returns the service
            singleton: Whether to cache the first result
        """
        with self._lock:
            self._factories[interface] = factory
            if singleton:
                self._singletons[interface] = None

    def register_instance(self, interface: Type[T], instance: T) -> None:
        """
        Register a pre-created instance.

        Args:
            interface: Type the service is resolved by
            instance: Pre-created instance
        """
        with self._lock:
            self._singletons[interface] = instance

    def resolve(self, interface: Type[T]) -> T:
        """
        Resolve a service implementation.

        Args:
            interface: Type to resolve

        Returns:
            Service instance

        Raises:
            ValueError: If service not registered
        """
        with self._lock:
            if interface in self._singletons:
                if self._singletons[interface] is None:
                    self._singletons[interface] = self._create(interface)
                return self._singletons[interface]

            return self._create(interface)

    def _create(self, interface: Type[T]) -> T:
        if interface in self._factories:
            return self._factories[interface]()
        if interface in self._services:
            return self._services[interface]()
        raise ValueError(f"Service not registered: {interface}")

    def has_service(self, interface: Type[T]) -> bool:
        """
        Check if a service is registered.

        Args:
            interface: Type to check

        Returns:
            True if service is registered
        """
        with self._lock:
            return (interface in self._singletons or
                    interface in self._factories or
                    interface in self._services)

    def clear(self) -> None:
        """Clear all registered services."""
        with self._lock:
            self._services.clear()
            self._singletons.clear()
            self._factories.clear()
