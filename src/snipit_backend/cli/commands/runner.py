"""Commands that invoke the model runner executable."""

import click

from snipit_backend.cli.ensure import Ensure
from snipit_backend.cli.output import machine_output
from snipit_backend.context import BackendContext
from snipit_backend.services.backend_commands import BackendCommands


def _yes_no(value: bool) -> str:
    return "yes" if value else "no"


@click.command("run")
@click.argument("prompt")
@click.option("-m", "--model", default=None, help="Model identifier (default: configured model).")
@click.pass_obj
def run_cmd(ctx: BackendContext, prompt: str, model: str | None) -> None:
    """Run PROMPT through the model runner and print the response.

    Pass "-" as PROMPT to read the prompt from stdin.
    """
    if prompt == "-":
        prompt = click.get_text_stream("stdin").read()
    Ensure.invariant(bool(prompt.strip()), "Prompt is empty")

    output = Ensure.completes(BackendCommands(ctx).run_prompt(prompt, model))
    click.echo(output, nl=False)


@click.command("bye")
@click.option("-m", "--model", default=None, help="Model identifier (default: configured model).")
@click.pass_obj
def bye_cmd(ctx: BackendContext, model: str | None) -> None:
    """End the runner's session for a model so it is unloaded."""
    Ensure.completes(BackendCommands(ctx).close_model_session(model))


@click.command("check-tool")
@click.pass_obj
def check_tool_cmd(ctx: BackendContext) -> None:
    """Report whether the model runner is installed."""
    installed = Ensure.completes(BackendCommands(ctx).check_tool_installed())
    machine_output(_yes_no(installed))


@click.command("check-model")
@click.pass_obj
def check_model_cmd(ctx: BackendContext) -> None:
    """Report whether the model runner is ready to serve models."""
    ready = Ensure.completes(BackendCommands(ctx).check_model_ready())
    machine_output(_yes_no(ready))


@click.command("locate")
@click.pass_obj
def locate_cmd(ctx: BackendContext) -> None:
    """Print the install path of the model runner."""
    machine_output(Ensure.completes(BackendCommands(ctx).locate_tool_install_path()))


@click.command("version")
@click.pass_obj
def version_cmd(ctx: BackendContext) -> None:
    """Print the model runner's version string."""
    machine_output(Ensure.completes(BackendCommands(ctx).tool_version()))
