"""Output helpers for CLI commands with clear intent.

user_output is for humans and goes to stderr; machine_output is the command's
result and goes to stdout so it can be piped.
"""

import click


def user_output(message: str = "") -> None:
    """Write an informational message for the user to stderr."""
    click.echo(message, err=True)


def machine_output(message: str = "") -> None:
    """Write a command result to stdout."""
    click.echo(message)
