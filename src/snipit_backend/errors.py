"""Errors surfaced to callers of the backend commands."""

from snipit_backend.models.invocation import FailureKind


class CommandError(Exception):
    """Raised when a backend command fails.

    The message is the user-displayable diagnostic. Callers should treat it as
    opaque text; ``kind`` is kept for logging and tests only.
    """

    def __init__(self, message: str, kind: FailureKind | None = None) -> None:
        self.message = message
        self.kind = kind
        super().__init__(message)


class ConfigError(CommandError):
    """Raised when a required environment variable is missing."""

    def __init__(self, variable: str) -> None:
        self.variable = variable
        super().__init__(f"{variable} environment variable is not set")
