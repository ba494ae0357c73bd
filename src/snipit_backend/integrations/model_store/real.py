"""Real model store that scans the runner's manifest library on disk."""

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from snipit_backend.errors import ConfigError
from snipit_backend.integrations.model_store.abc import ModelStore
from snipit_backend.models.model_group import ModelGroup

logger = logging.getLogger(__name__)

LIBRARY_RELATIVE_PATH = Path(".ollama", "models", "manifests", "registry.ollama.ai", "library")
MANIFEST_SUFFIX = ".json"


class RealModelStore(ModelStore):
    """Production implementation reading <home>/.ollama/models/manifests/....

    The home directory is taken from an environment variable whose name depends on
    the platform (HOME or USERPROFILE); it is looked up on every call so that a
    missing variable fails only the operation that needs it.
    """

    def __init__(
        self,
        *,
        environ: Mapping[str, str],
        home_variable: str,
        model_prefix: str,
    ) -> None:
        self._environ = environ
        self._home_variable = home_variable
        self._model_prefix = model_prefix

    def library_path(self) -> Path:
        """Resolve the library directory from the environment.

        Raises:
            ConfigError: If the home directory environment variable is not set
        """
        home = self._environ.get(self._home_variable)
        if home is None:
            raise ConfigError(self._home_variable)
        return Path(home) / LIBRARY_RELATIVE_PATH

    def list_installed_models(self) -> list[str]:
        library = self.library_path()
        if not library.is_dir():
            logger.debug("Model library not found at %s", library)
            return []

        with os.scandir(library) as entries:
            return [entry.name for entry in entries if entry.name.startswith(self._model_prefix)]

    def list_model_groups(self) -> list[ModelGroup]:
        library = self.library_path()
        if not library.is_dir():
            logger.debug("Model library not found at %s", library)
            return []

        groups: list[ModelGroup] = []
        for group_dir in library.iterdir():
            if not group_dir.is_dir():
                continue
            models = sorted(
                _strip_manifest_suffix(tag.name) for tag in group_dir.iterdir() if tag.is_file()
            )
            groups.append(ModelGroup(group=group_dir.name, models=tuple(models)))

        return sorted(groups, key=lambda g: g.group)


def _strip_manifest_suffix(name: str) -> str:
    if name.endswith(MANIFEST_SUFFIX):
        return name[: -len(MANIFEST_SUFFIX)]
    return name
