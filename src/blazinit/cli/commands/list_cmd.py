import click

from blazinit.cli.error_boundary import cli_error_boundary
from blazinit.cli.output import machine_output
from blazinit.core.context import BlazinitContext
from blazinit.core.profile.operations import list_profiles


@click.command("list")
@click.pass_obj
@cli_error_boundary
def list_cmd(ctx: BlazinitContext) -> None:
    """List all saved profiles."""
    names = list_profiles(ctx.profile_store)
    if not names:
        machine_output("No profiles found.")
        return

    machine_output("Saved profiles:")
    for name in names:
        if name == ctx.config.default_profile:
            machine_output(click.style(f"{name} (default)", fg="green"))
        else:
            machine_output(name)
