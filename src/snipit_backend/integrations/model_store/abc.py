"""Abstract interface for enumerating locally installed models."""

from abc import ABC, abstractmethod

from snipit_backend.models.model_group import ModelGroup


class ModelStore(ABC):
    """Abstract interface for reading the runner's model library directory.

    All implementations must implement this interface for testability.
    """

    @abstractmethod
    def list_installed_models(self) -> list[str]:
        """List model identifiers whose name starts with the configured prefix.

        Returns:
            Matching entry names in directory-enumeration order (not sorted), or an
            empty list if the library directory does not exist.

        Raises:
            ConfigError: If the home directory environment variable is not set
        """
        ...

    @abstractmethod
    def list_model_groups(self) -> list[ModelGroup]:
        """List every model family in the library with its installed tags.

        Returns:
            Groups sorted by name, each with sorted tags, or an empty list if the
            library directory does not exist.

        Raises:
            ConfigError: If the home directory environment variable is not set
        """
        ...
