"""
Dependency injection container and factories for the registry and its services.
"""

from .container import DIContainer
from .factories import ComponentFactory, build_container

__all__ = ['DIContainer', 'ComponentFactory', 'build_container']
