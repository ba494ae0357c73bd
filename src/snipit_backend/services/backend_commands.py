"""Caller-facing backend commands.

Every command is a coroutine. The blocking work (spawning the runner, scanning the
model library, asking the OS to open a path) runs on a worker thread through
asyncio.to_thread, so the awaiting event loop stays responsive and concurrent
commands each get their own process.
"""

import asyncio

from snipit_backend.context import BackendContext
from snipit_backend.errors import CommandError
from snipit_backend.models.invocation import (
    Failure,
    InvocationOutcome,
    InvocationRequest,
    LaunchStrategy,
)
from snipit_backend.models.model_group import ModelGroup

END_SESSION_PROMPT = "/bye"


def _unwrap(outcome: InvocationOutcome) -> str:
    if isinstance(outcome, Failure):
        raise CommandError(outcome.diagnostic, kind=outcome.kind)
    return outcome.output


def _check(result: bool | Failure) -> bool:
    if isinstance(result, Failure):
        raise CommandError(result.diagnostic, kind=result.kind)
    return result


class BackendCommands:
    """The operations exposed to the UI layer.

    Failures are raised as CommandError carrying a user-displayable message.
    """

    def __init__(self, ctx: BackendContext) -> None:
        """Create BackendCommands with backend context.

        Args:
            ctx: Backend context with injected dependencies
        """
        self._ctx = ctx

    def _runner_request(self, *args: str, input_payload: bytes | None = None) -> InvocationRequest:
        config = self._ctx.config
        return InvocationRequest(
            executable=config.runner_executable,
            args=args,
            input_payload=input_payload,
            strategy=config.launch_strategy,
        )

    async def open_path(self, path: str) -> None:
        """Open a path in the OS file browser.

        Raises:
            CommandError: If the OS handler could not be started
        """
        opened = await asyncio.to_thread(self._ctx.path_opener.open_path, path)
        if not opened:
            raise CommandError(f"Failed to open folder: {path}")

    async def run_prompt(self, prompt: str, model: str | None = None) -> str:
        """Run a prompt through the runner and return its generated text.

        Args:
            prompt: Text written to the runner's stdin
            model: Model identifier (default: the configured default model)

        Raises:
            CommandError: If the runner could not start or exited with a failure
                status; the message is the runner's stderr
        """
        request = self._runner_request(
            "run",
            model or self._ctx.config.default_model,
            input_payload=prompt.encode("utf-8"),
        )
        outcome = await asyncio.to_thread(self._ctx.gateway.run_with_input, request)
        return _unwrap(outcome)

    async def close_model_session(self, model: str | None = None) -> None:
        """Ask the runner to unload a model by sending it the end-of-session prompt."""
        await self.run_prompt(END_SESSION_PROMPT, model)

    async def check_tool_installed(self) -> bool:
        """Check the runner answers ``--version`` with exit 0 and some output.

        Raises:
            CommandError: If the runner could not be started
        """
        request = self._runner_request("--version")
        result = await asyncio.to_thread(
            self._ctx.gateway.run_and_check_success, request, True
        )
        return _check(result)

    async def check_model_ready(self) -> bool:
        """Check the runner answers ``ps`` with exit 0. Output is not inspected.

        Raises:
            CommandError: If the runner could not be started
        """
        request = self._runner_request("ps")
        result = await asyncio.to_thread(self._ctx.gateway.run_and_check_success, request)
        return _check(result)

    async def tool_version(self) -> str:
        """Return the runner's trimmed ``--version`` output.

        Raises:
            CommandError: If the runner failed or printed nothing
        """
        request = self._runner_request("--version")
        outcome = await asyncio.to_thread(self._ctx.gateway.run_and_capture, request)
        version = _unwrap(outcome).strip()
        if not version:
            raise CommandError(f"{self._ctx.config.runner_executable} reported no version")
        return version

    async def list_installed_models(self) -> list[str]:
        """List installed model identifiers carrying the configured prefix.

        Raises:
            ConfigError: If the home directory environment variable is not set
        """
        return await asyncio.to_thread(self._ctx.model_store.list_installed_models)

    async def list_model_groups(self) -> list[ModelGroup]:
        """List installed model families with their tags.

        Raises:
            ConfigError: If the home directory environment variable is not set
        """
        return await asyncio.to_thread(self._ctx.model_store.list_model_groups)

    async def locate_tool_install_path(self) -> str:
        """Resolve where the runner is installed using ``which``/``where``.

        Locate commands may list several candidates or trailing blank lines, so only
        the first line is returned, trimmed.

        Raises:
            CommandError: If the locate command failed
        """
        config = self._ctx.config
        request = InvocationRequest(
            executable=config.locate_command,
            args=(config.runner_executable,),
            strategy=LaunchStrategy.DIRECT,
        )
        outcome = await asyncio.to_thread(self._ctx.gateway.run_and_capture, request)
        lines = _unwrap(outcome).splitlines()
        if not lines:
            return ""
        return lines[0].strip()
