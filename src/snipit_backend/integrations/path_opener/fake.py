"""In-memory fake implementation of PathOpener for testing."""

from snipit_backend.integrations.path_opener.abc import PathOpener


class FakePathOpener(PathOpener):
    """Fake path opener that records paths without opening anything.

    Attributes are provided via constructor; opened_paths is for assertions.
    """

    def __init__(self, *, succeeds: bool = True) -> None:
        """Create FakePathOpener.

        Args:
            succeeds: Value returned from every open_path() call (default: True)
        """
        self._succeeds = succeeds
        self._opened_paths: list[str] = []

    @property
    def opened_paths(self) -> list[str]:
        """Paths passed to open_path(), in call order."""
        return self._opened_paths.copy()

    def open_path(self, path: str) -> bool:
        self._opened_paths.append(path)
        return self._succeeds
