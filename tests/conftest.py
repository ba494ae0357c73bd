"""Pytest configuration and fixtures."""

import pytest

from snipit_backend.config import BackendConfig
from snipit_backend.context import BackendContext
from snipit_backend.integrations.model_store.fake import FakeModelStore
from snipit_backend.integrations.path_opener.fake import FakePathOpener
from snipit_backend.integrations.process_gateway.fake import FakeProcessGateway
from snipit_backend.services.backend_commands import BackendCommands


@pytest.fixture
def linux_config() -> BackendConfig:
    """Configuration with defaults as resolved on Linux."""
    return BackendConfig.from_env(environ={}, platform="linux")


@pytest.fixture
def windows_config() -> BackendConfig:
    """Configuration with defaults as resolved on Windows."""
    return BackendConfig.from_env(environ={}, platform="win32")


@pytest.fixture
def fake_gateway() -> FakeProcessGateway:
    """Create a fresh FakeProcessGateway."""
    return FakeProcessGateway()


@pytest.fixture
def fake_path_opener() -> FakePathOpener:
    """Create a fresh FakePathOpener."""
    return FakePathOpener()


@pytest.fixture
def fake_model_store() -> FakeModelStore:
    """Create a FakeModelStore with two installed models."""
    return FakeModelStore(models=["deepseek-r1:7b", "deepseek-r1:1.5b"])


@pytest.fixture
def backend_context(
    linux_config: BackendConfig,
    fake_gateway: FakeProcessGateway,
    fake_path_opener: FakePathOpener,
    fake_model_store: FakeModelStore,
) -> BackendContext:
    """Create a BackendContext with fake implementations."""
    return BackendContext(
        config=linux_config,
        gateway=fake_gateway,
        path_opener=fake_path_opener,
        model_store=fake_model_store,
    )


@pytest.fixture
def backend_commands(backend_context: BackendContext) -> BackendCommands:
    """Create BackendCommands over the fake context."""
    return BackendCommands(backend_context)
