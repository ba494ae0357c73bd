"""Abstract interface for running external processes."""

from abc import ABC, abstractmethod
from dataclasses import replace

from snipit_backend.models.invocation import (
    Failure,
    FailureKind,
    InvocationOutcome,
    InvocationRequest,
)


class ProcessGateway(ABC):
    """Abstract interface for invoking one external process per call.

    This interface enables dependency injection for testing. The real
    implementation spawns OS processes; the fake returns pre-configured outcomes
    and records every request it receives.

    Implementations never raise for process-level problems. A process that cannot
    be started, whose pipes break, or that exits with a failure status is reported
    as a Failure value.
    """

    @abstractmethod
    def run_with_input(self, request: InvocationRequest) -> InvocationOutcome:
        """Run the request to completion, writing its payload to stdin.

        Args:
            request: Invocation to run. When input_payload is None stdin is left
                unconnected.

        Returns:
            Success with decoded stdout if the process exited with status 0,
            Failure(EXIT) with decoded stderr if it exited with any other status,
            Failure(LAUNCH) if it could not be started,
            Failure(STREAM) if writing stdin or reading output failed.

        Example:
            >>> gateway = RealProcessGateway()
            >>> gateway.run_with_input(
            ...     InvocationRequest("ollama", ("run", "deepseek-r1:7b"), b"Hello")
            ... )
            Success(output='Hi! How can I help?\\n')
        """
        ...

    def run_and_capture(self, request: InvocationRequest) -> InvocationOutcome:
        """Run the request without any stdin payload and capture its output.

        Any payload already set on the request is dropped.
        """
        return self.run_with_input(replace(request, input_payload=None))

    def run_and_check_success(
        self,
        request: InvocationRequest,
        require_output: bool = False,
    ) -> bool | Failure:
        """Report whether the process exited successfully.

        Args:
            request: Invocation to run (no stdin payload is sent)
            require_output: Also require non-blank stdout before reporting True

        Returns:
            True or False for a process that ran to completion, or the Failure if it
            could not be started or its pipes broke.
        """
        outcome = self.run_and_capture(request)
        if isinstance(outcome, Failure):
            if outcome.kind == FailureKind.EXIT:
                return False
            return outcome
        if require_output:
            return bool(outcome.output.strip())
        return True
