import click

from blazinit.cli.error_boundary import cli_error_boundary
from blazinit.cli.output import user_output
from blazinit.core.context import BlazinitContext
from blazinit.core.profile.operations import create_profile, set_default_profile


@click.command("create")
@click.argument("profile")
@click.option(
    "--default",
    "make_default",
    is_flag=True,
    help="Set this profile as the default profile after creation.",
)
@click.pass_obj
@cli_error_boundary
def create_cmd(ctx: BlazinitContext, profile: str, make_default: bool) -> None:
    """Create a new profile to hold packages."""
    create_profile(ctx.profile_store, profile)
    user_output(click.style(f"Successfully created profile '{profile}'.", fg="green"))

    if make_default:
        set_default_profile(ctx.config_store, ctx.profile_store, profile)
        user_output(f"Default profile set to '{profile}'.")
