import logging

import click

from snipit_backend.cli.commands.models import models_cmd
from snipit_backend.cli.commands.open_cmd import open_cmd
from snipit_backend.cli.commands.runner import (
    bye_cmd,
    check_model_cmd,
    check_tool_cmd,
    locate_cmd,
    run_cmd,
    version_cmd,
)
from snipit_backend.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="snipit-backend")
@click.option("-v", "--verbose", is_flag=True, help="Log process launches and exit codes.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Drive a local language-model runner from the command line."""
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context()
    if verbose or ctx.obj.config.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


cli.add_command(bye_cmd)
cli.add_command(check_model_cmd)
cli.add_command(check_tool_cmd)
cli.add_command(locate_cmd)
cli.add_command(models_cmd)
cli.add_command(open_cmd)
cli.add_command(run_cmd)
cli.add_command(version_cmd)


def main() -> None:
    """CLI entry point used by the `snipit-backend` console script."""
    cli()
