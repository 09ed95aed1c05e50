"""
Shared fixtures for the capability registry tests.
"""

import pytest

from providers.capabilities import ALL_CAPABILITIES, AREA
from providers.registry import CapabilityRegistry, RegistrationMode
from providers.area import RectangleAreaProvider, CircleAreaProvider
from providers.log_sinks import FileLogSink


@pytest.fixture
def registry():
    """Empty strict registry with every capability defined."""
    return CapabilityRegistry(capabilities=ALL_CAPABILITIES)


@pytest.fixture
def permissive_registry():
    """Empty permissive registry with every capability defined."""
    return CapabilityRegistry(mode=RegistrationMode.PERMISSIVE, capabilities=ALL_CAPABILITIES)


@pytest.fixture
def area_registry(registry):
    """Registry with rectangle and circle calculators wired."""
    registry.register(AREA, "rectangle", RectangleAreaProvider())
    registry.register(AREA, "circle", CircleAreaProvider())
    return registry


@pytest.fixture
def file_sink(tmp_path):
    """File log sink writing under a temporary directory."""
    return FileLogSink(file_path=str(tmp_path / "logs" / "messages.log"))
