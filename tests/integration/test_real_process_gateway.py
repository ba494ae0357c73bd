"""Integration tests for RealProcessGateway.

These tests spawn real child processes using the running Python interpreter, so
they need no external tools.
"""

import asyncio
import os
import sys
from pathlib import Path

import pytest

from snipit_backend.integrations.process_gateway.real import RealProcessGateway
from snipit_backend.models.invocation import Failure, FailureKind, InvocationRequest, Success


def _python(code: str, payload: bytes | None = None) -> InvocationRequest:
    return InvocationRequest(sys.executable, ("-c", code), input_payload=payload)


def test_success_returns_stdout() -> None:
    outcome = RealProcessGateway().run_with_input(_python("print('hello')"))

    assert outcome == Success("hello\n")


def test_payload_is_written_to_stdin() -> None:
    code = "import sys; sys.stdout.write(sys.stdin.read()[::-1])"

    outcome = RealProcessGateway().run_with_input(_python(code, b"abc"))

    assert outcome == Success("cba")


def test_stdin_is_empty_without_payload() -> None:
    code = "import sys; sys.stdout.write(repr(sys.stdin.read()))"

    outcome = RealProcessGateway().run_and_capture(_python(code))

    assert outcome == Success("''")


def test_non_zero_exit_returns_stderr() -> None:
    code = "import sys; print('partial'); sys.stderr.write('model not found'); sys.exit(3)"

    outcome = RealProcessGateway().run_with_input(_python(code))

    assert outcome == Failure("model not found", FailureKind.EXIT)


def test_non_zero_exit_with_empty_stderr() -> None:
    outcome = RealProcessGateway().run_with_input(_python("raise SystemExit(1)"))

    assert outcome == Failure("", FailureKind.EXIT)


def test_invalid_utf8_output_is_replaced() -> None:
    code = "import sys; sys.stdout.buffer.write(b'ok\\xffend')"

    outcome = RealProcessGateway().run_with_input(_python(code))

    assert outcome == Success("ok\ufffdend")


def test_missing_executable_is_launch_failure() -> None:
    request = InvocationRequest("snipit-no-such-runner-xyz", ("--version",))

    outcome = RealProcessGateway().run_with_input(request)

    assert isinstance(outcome, Failure)
    assert outcome.kind == FailureKind.LAUNCH
    assert "snipit-no-such-runner-xyz" in outcome.diagnostic


def test_stdin_write_failure_is_stream_failure() -> None:
    # The child exits without reading, so a payload larger than the pipe buffer
    # cannot be written in full.
    payload = b"x" * (8 * 1024 * 1024)

    outcome = RealProcessGateway().run_with_input(_python("import sys; sys.exit(0)", payload))

    assert isinstance(outcome, Failure)
    assert outcome.kind == FailureKind.STREAM


def _record_pid(pid_file: Path, then: str = "") -> str:
    return f"import os, sys; open({str(pid_file)!r}, 'w').write(str(os.getpid())); {then}"


def _assert_reaped(pid_file: Path) -> None:
    """The child must already have been waited on: no zombie is left to collect."""
    pid = int(pid_file.read_text(encoding="utf-8"))
    with pytest.raises(ChildProcessError):
        os.waitpid(pid, os.WNOHANG)


@pytest.mark.skipif(sys.platform == "win32", reason="uses os.waitpid on POSIX children")
class TestChildIsReaped:
    """No child process outlives a call, whichever way it ends."""

    def test_after_stream_failure(self, tmp_path: Path) -> None:
        pid_file = tmp_path / "child.pid"
        payload = b"x" * (8 * 1024 * 1024)

        outcome = RealProcessGateway().run_with_input(
            _python(_record_pid(pid_file, "sys.exit(0)"), payload)
        )

        assert isinstance(outcome, Failure)
        assert outcome.kind == FailureKind.STREAM
        _assert_reaped(pid_file)

    def test_after_success(self, tmp_path: Path) -> None:
        pid_file = tmp_path / "child.pid"

        outcome = RealProcessGateway().run_with_input(
            _python(_record_pid(pid_file, "sys.stdin.read()"), b"prompt")
        )

        assert outcome == Success("")
        _assert_reaped(pid_file)

    def test_after_exit_failure(self, tmp_path: Path) -> None:
        pid_file = tmp_path / "child.pid"

        outcome = RealProcessGateway().run_and_capture(
            _python(_record_pid(pid_file, "sys.exit(4)"))
        )

        assert outcome == Failure("", FailureKind.EXIT)
        _assert_reaped(pid_file)


def test_large_output_does_not_deadlock() -> None:
    code = "import sys; sys.stdout.write('x' * 200000); sys.stderr.write('y' * 200000)"

    outcome = RealProcessGateway().run_with_input(_python(code))

    assert isinstance(outcome, Success)
    assert len(outcome.output) == 200000


def test_check_success_reports_exit_status() -> None:
    gateway = RealProcessGateway()

    assert gateway.run_and_check_success(_python("pass")) is True
    assert gateway.run_and_check_success(_python("raise SystemExit(2)")) is False
    assert gateway.run_and_check_success(_python("pass"), require_output=True) is False


async def test_concurrent_invocations_do_not_mix_output() -> None:
    gateway = RealProcessGateway()
    code = "import sys, time; data = sys.stdin.read(); time.sleep(0.2); sys.stdout.write(data)"

    first, second = await asyncio.gather(
        asyncio.to_thread(gateway.run_with_input, _python(code, b"first prompt")),
        asyncio.to_thread(gateway.run_with_input, _python(code, b"second prompt")),
    )

    assert first == Success("first prompt")
    assert second == Success("second prompt")
