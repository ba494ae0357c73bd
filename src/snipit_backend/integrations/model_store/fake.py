"""In-memory fake implementation of ModelStore for testing."""

from snipit_backend.errors import ConfigError
from snipit_backend.integrations.model_store.abc import ModelStore
from snipit_backend.models.model_group import ModelGroup


class FakeModelStore(ModelStore):
    """In-memory fake model store.

    All state is provided via constructor using keyword arguments.
    This class has NO public setup methods.
    """

    def __init__(
        self,
        *,
        models: list[str] | None = None,
        groups: list[ModelGroup] | None = None,
        missing_variable: str | None = None,
    ) -> None:
        """Create FakeModelStore with pre-configured contents.

        Args:
            models: Identifiers returned by list_installed_models()
            groups: Groups returned by list_model_groups()
            missing_variable: If set, every call raises ConfigError for this variable
        """
        self._models = models or []
        self._groups = groups or []
        self._missing_variable = missing_variable

    def list_installed_models(self) -> list[str]:
        if self._missing_variable is not None:
            raise ConfigError(self._missing_variable)
        return list(self._models)

    def list_model_groups(self) -> list[ModelGroup]:
        if self._missing_variable is not None:
            raise ConfigError(self._missing_variable)
        return list(self._groups)
