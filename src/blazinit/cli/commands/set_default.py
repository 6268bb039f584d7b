import click

from blazinit.cli.error_boundary import cli_error_boundary
from blazinit.cli.output import user_output
from blazinit.core.context import BlazinitContext
from blazinit.core.profile.operations import set_default_profile


@click.command("set-default")
@click.argument("profile")
@click.pass_obj
@cli_error_boundary
def set_default_cmd(ctx: BlazinitContext, profile: str) -> None:
    """Make PROFILE the default used when commands omit a profile."""
    set_default_profile(ctx.config_store, ctx.profile_store, profile)
    user_output(click.style(f"Default profile set to '{profile}'.", fg="green"))
