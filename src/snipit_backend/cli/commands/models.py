"""Models command implementation."""

import click
from rich.console import Console
from rich.table import Table

from snipit_backend.cli.ensure import Ensure
from snipit_backend.cli.output import machine_output, user_output
from snipit_backend.context import BackendContext
from snipit_backend.models.model_group import ModelGroup
from snipit_backend.services.backend_commands import BackendCommands


@click.command("models")
@click.option("--groups", is_flag=True, help="Show every model family with its tags.")
@click.pass_obj
def models_cmd(ctx: BackendContext, groups: bool) -> None:
    """List installed models.

    By default prints one identifier per line for models matching the configured
    prefix. With --groups, prints a table of all installed model families.
    """
    commands = BackendCommands(ctx)
    if groups:
        _render_groups(Ensure.completes(commands.list_model_groups()))
        return

    models = Ensure.completes(commands.list_installed_models())
    if not models:
        user_output("No matching models installed.")
        return
    for model in models:
        machine_output(model)


def _render_groups(groups: list[ModelGroup]) -> None:
    if not groups:
        user_output("No models installed.")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("model", style="cyan", no_wrap=True)
    table.add_column("tags")
    for group in groups:
        tags = ", ".join(group.models) if group.models else "[dim]-[/dim]"
        table.add_row(group.group, tags)

    # Output table to stderr (consistent with user_output convention)
    console = Console(stderr=True)
    console.print(table)
