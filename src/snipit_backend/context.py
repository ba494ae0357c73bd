"""Backend context for dependency injection."""

import os
from dataclasses import dataclass

from snipit_backend.config import BackendConfig
from snipit_backend.integrations.model_store.abc import ModelStore
from snipit_backend.integrations.model_store.fake import FakeModelStore
from snipit_backend.integrations.model_store.real import RealModelStore
from snipit_backend.integrations.path_opener.abc import PathOpener
from snipit_backend.integrations.path_opener.fake import FakePathOpener
from snipit_backend.integrations.path_opener.real import RealPathOpener
from snipit_backend.integrations.process_gateway.abc import ProcessGateway
from snipit_backend.integrations.process_gateway.fake import FakeProcessGateway
from snipit_backend.integrations.process_gateway.real import RealProcessGateway


@dataclass(frozen=True)
class BackendContext:
    """Backend context containing all dependencies.

    This is a frozen dataclass that holds all injected dependencies for the
    backend commands. Use create_context() in production and for_test() in tests.
    """

    config: BackendConfig
    gateway: ProcessGateway
    path_opener: PathOpener
    model_store: ModelStore

    @classmethod
    def for_test(
        cls,
        *,
        config: BackendConfig | None = None,
        gateway: ProcessGateway | None = None,
        path_opener: PathOpener | None = None,
        model_store: ModelStore | None = None,
    ) -> "BackendContext":
        """Create a test context with fake implementations.

        Args:
            config: Configuration (default: Linux defaults with an empty environment)
            gateway: Process gateway (default: FakeProcessGateway())
            path_opener: Path opener (default: FakePathOpener())
            model_store: Model store (default: empty FakeModelStore())

        Returns:
            BackendContext with fakes for every unspecified dependency
        """
        return cls(
            config=config or BackendConfig.from_env(environ={}, platform="linux"),
            gateway=gateway or FakeProcessGateway(),
            path_opener=path_opener or FakePathOpener(),
            model_store=model_store or FakeModelStore(),
        )


def create_context(config: BackendConfig | None = None) -> BackendContext:
    """Create production context with real implementations."""
    if config is None:
        config = BackendConfig.from_env()

    return BackendContext(
        config=config,
        gateway=RealProcessGateway(),
        path_opener=RealPathOpener(),
        model_store=RealModelStore(
            environ=os.environ,
            home_variable=config.home_variable,
            model_prefix=config.model_prefix,
        ),
    )
