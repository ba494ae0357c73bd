"""Abstract interface for opening paths with the OS default handler."""

from abc import ABC, abstractmethod


class PathOpener(ABC):
    """Abstract interface for handing a path to the OS file browser.

    This interface enables dependency injection for testing without opening
    windows on the test machine.
    """

    @abstractmethod
    def open_path(self, path: str) -> bool:
        """Open a path with the OS default handler.

        Args:
            path: Filesystem path, passed to the OS unvalidated

        Returns:
            True if the OS accepted the request, False otherwise
        """
        ...
