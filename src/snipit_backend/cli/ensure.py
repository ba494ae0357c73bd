"""CLI error boundary for backend commands.

Backend commands raise CommandError with a user-displayable message. The CLI is the
only place those errors are caught: they are printed with a red "Error:" prefix and
the process exits with status 1.
"""

import asyncio
from collections.abc import Coroutine
from typing import Any, TypeVar

import click

from snipit_backend.cli.output import user_output
from snipit_backend.errors import CommandError

T = TypeVar("T")


class Ensure:
    """Helper class for asserting command outcomes with consistent error handling."""

    @staticmethod
    def invariant(condition: bool, error_message: str) -> None:
        """Ensure condition is true, otherwise output styled error and exit.

        Raises:
            SystemExit: If condition is false (with exit code 1)
        """
        if not condition:
            user_output(click.style("Error: ", fg="red") + error_message)
            raise SystemExit(1)

    @staticmethod
    def completes(command: Coroutine[Any, Any, T]) -> T:
        """Run a backend command to completion, exiting on CommandError.

        Args:
            command: Coroutine returned by a BackendCommands method

        Returns:
            The command's result

        Raises:
            SystemExit: If the command raised CommandError (with exit code 1)
        """
        try:
            return asyncio.run(command)
        except CommandError as e:
            message = e.message or "command failed without a diagnostic"
            user_output(click.style("Error: ", fg="red") + message)
            raise SystemExit(1) from e
