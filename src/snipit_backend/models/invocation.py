"""Invocation request and outcome data models.

An invocation is one run of one external process. The request describes what to
launch and what to feed it; the outcome is either the captured output or a
diagnostic explaining why the run failed.
"""

from dataclasses import dataclass
from enum import Enum


class LaunchStrategy(str, Enum):
    """How an executable is started on the host platform."""

    DIRECT = "direct"
    SHELL = "shell"

    def wrap(self, executable: str, args: tuple[str, ...]) -> list[str]:
        """Build the argument vector handed to the OS.

        SHELL routes the call through ``cmd /C`` so that executables only
        resolvable by the Windows shell (e.g. ``ollama.cmd`` shims) still start.
        """
        if self is LaunchStrategy.SHELL:
            return ["cmd", "/C", executable, *args]
        return [executable, *args]


class FailureKind(str, Enum):
    """Why an invocation did not succeed."""

    LAUNCH = "launch"
    STREAM = "stream"
    EXIT = "exit"


@dataclass(frozen=True)
class InvocationRequest:
    """A single external process invocation.

    Attributes:
        executable: Name or path of the executable to start
        args: Ordered arguments passed after the executable
        input_payload: Raw bytes written to stdin, or None to leave stdin unconnected
        strategy: Whether to start the executable directly or through the shell
    """

    executable: str
    args: tuple[str, ...] = ()
    input_payload: bytes | None = None
    strategy: LaunchStrategy = LaunchStrategy.DIRECT

    @property
    def argv(self) -> list[str]:
        return self.strategy.wrap(self.executable, self.args)


@dataclass(frozen=True)
class Success:
    """The process exited with status 0."""

    output: str


@dataclass(frozen=True)
class Failure:
    """The process could not run, or ran and exited with a failure status.

    Attributes:
        diagnostic: Decoded stderr for EXIT failures (possibly empty), otherwise the
            description of the OS error
        kind: Which stage of the invocation failed
    """

    diagnostic: str
    kind: FailureKind


InvocationOutcome = Success | Failure


def decode_lossy(data: bytes | None) -> str:
    """Decode process output as UTF-8, substituting U+FFFD for invalid bytes."""
    if not data:
        return ""
    return data.decode("utf-8", errors="replace")
