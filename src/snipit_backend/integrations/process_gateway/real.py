"""Real process gateway using subprocess."""

import logging
import subprocess
from typing import IO

from snipit_backend.integrations.process_gateway.abc import ProcessGateway
from snipit_backend.models.invocation import (
    Failure,
    FailureKind,
    InvocationOutcome,
    InvocationRequest,
    Success,
    decode_lossy,
)

logger = logging.getLogger(__name__)


def _write_all(stream: IO[bytes], payload: bytes) -> None:
    """Write the whole payload to an unbuffered pipe."""
    view = memoryview(payload)
    while view:
        written = stream.write(view)
        view = view[written:]


class RealProcessGateway(ProcessGateway):
    """Production implementation using subprocess.Popen.

    The Popen object is used as a context manager, so its pipes are closed and the
    child is waited on whichever way the invocation ends. A child whose stdin write
    fails is killed before the context exits, so no process outlives the call.

    Pipes are unbuffered (bufsize=0): a broken stdin pipe surfaces at the write
    instead of at a later flush during cleanup.
    """

    def run_with_input(self, request: InvocationRequest) -> InvocationOutcome:
        """Run the request, writing the whole payload before draining output.

        stdout and stderr are only read once stdin has been written in full. A child
        that writes more than a pipe buffer of output before it has read all of its
        input blocks, and the call never returns. Model runners read the whole
        prompt before generating, so they are not affected.
        """
        argv = request.argv
        stdin = subprocess.PIPE if request.input_payload is not None else subprocess.DEVNULL
        logger.debug("Launching %s", argv)

        try:
            process = subprocess.Popen(
                argv,
                bufsize=0,
                stdin=stdin,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
            )
        except OSError as e:
            logger.debug("Could not launch %s: %s", argv[0], e)
            return Failure(diagnostic=str(e), kind=FailureKind.LAUNCH)

        with process:
            if request.input_payload is not None and process.stdin is not None:
                try:
                    _write_all(process.stdin, request.input_payload)
                except OSError as e:
                    logger.debug("Writing stdin of %s failed: %s", argv[0], e)
                    process.kill()
                    return Failure(diagnostic=str(e), kind=FailureKind.STREAM)

            # communicate() closes stdin, then drains stdout and stderr together
            try:
                stdout, stderr = process.communicate()
            except OSError as e:
                process.kill()
                return Failure(diagnostic=str(e), kind=FailureKind.STREAM)

        logger.debug("%s exited with code %d", argv[0], process.returncode)
        if process.returncode == 0:
            return Success(output=decode_lossy(stdout))
        return Failure(diagnostic=decode_lossy(stderr), kind=FailureKind.EXIT)
