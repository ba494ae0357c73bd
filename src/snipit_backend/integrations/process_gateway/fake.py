"""In-memory fake implementation of ProcessGateway for testing."""

import threading

from snipit_backend.integrations.process_gateway.abc import ProcessGateway
from snipit_backend.models.invocation import (
    InvocationOutcome,
    InvocationRequest,
    Success,
    decode_lossy,
)


class FakeProcessGateway(ProcessGateway):
    """In-memory fake process gateway for unit testing.

    No processes are started. Outcomes are looked up by the request's full argv,
    falling back to a default. All state is provided via constructor using keyword
    arguments; this class has NO public setup methods.

    Requests are recorded under a lock because backend commands call the gateway
    from worker threads.

    Example:
        >>> gateway = FakeProcessGateway(
        ...     outcomes={("ollama", "--version"): Success("ollama version 0.5.7")}
        ... )
        >>> gateway.run_and_check_success(InvocationRequest("ollama", ("--version",)))
        True
    """

    def __init__(
        self,
        *,
        outcomes: dict[tuple[str, ...], InvocationOutcome] | None = None,
        default_outcome: InvocationOutcome | None = None,
        echo_input: bool = False,
    ) -> None:
        """Create FakeProcessGateway with pre-configured outcomes.

        Args:
            outcomes: Mapping of argv tuple -> outcome to return
            default_outcome: Outcome for argv not in outcomes (default: Success(""))
            echo_input: If True, unmatched requests succeed with their decoded payload
        """
        self._outcomes = outcomes or {}
        self._default_outcome = default_outcome or Success(output="")
        self._echo_input = echo_input
        self._requests: list[InvocationRequest] = []
        self._lock = threading.Lock()

    @property
    def requests(self) -> list[InvocationRequest]:
        """Read-only access to received requests for test assertions."""
        with self._lock:
            return self._requests.copy()

    @property
    def argvs(self) -> list[list[str]]:
        """Argument vectors of received requests, in call order."""
        return [request.argv for request in self.requests]

    def run_with_input(self, request: InvocationRequest) -> InvocationOutcome:
        """Record the request and return its configured outcome."""
        with self._lock:
            self._requests.append(request)

        key = tuple(request.argv)
        if key in self._outcomes:
            return self._outcomes[key]
        if self._echo_input:
            return Success(output=decode_lossy(request.input_payload))
        return self._default_outcome
