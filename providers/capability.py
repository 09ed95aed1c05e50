"""
Capability contracts: a named operation bound to an abstract interface.
"""

import inspect
from dataclasses import dataclass
from typing import Any, Callable, List, Type


@dataclass(frozen=True)
class Capability:
    """
    An immutable capability definition.

    Attributes:
        name: Registry key of the capability
        interface: Abstract base class every provider must satisfy
        operation: Name of the interface method called by ``invoke``
        description: Human readable summary
    """
    name: str
    interface: Type
    operation: str
    description: str = ""

    def __post_init__(self):
        if self.operation not in getattr(self.interface, '__abstractmethods__', ()):
            raise ValueError(
                f"Operation '{self.operation}' is not an abstract method of {self.interface.__name__}"
            )

    def required_methods(self) -> List[str]:
        """Names of every abstract method of the interface."""
        return sorted(self.interface.__abstractmethods__)

    def missing_methods(self, provider: Any) -> List[str]:
        """
        List the interface methods a provider fails to implement.

        ABC subclasses are checked by the interpreter at instantiation, so only
        structurally conforming objects need a member by member check.
        """
        if isinstance(provider, self.interface):
            return []
        if inspect.isclass(provider):
            return self.required_methods()
        return [
            name for name in self.required_methods()
            if not callable(getattr(provider, name, None))
        ]

    def bind(self, provider: Any) -> Callable[[Any], Any]:
        """Return the provider's bound operation."""
        return getattr(provider, self.operation)
