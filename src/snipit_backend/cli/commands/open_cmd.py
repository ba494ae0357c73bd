"""Open command implementation."""

import click

from snipit_backend.cli.ensure import Ensure
from snipit_backend.context import BackendContext
from snipit_backend.services.backend_commands import BackendCommands


@click.command("open")
@click.argument("path")
@click.pass_obj
def open_cmd(ctx: BackendContext, path: str) -> None:
    """Open PATH in the system file browser."""
    Ensure.completes(BackendCommands(ctx).open_path(path))
