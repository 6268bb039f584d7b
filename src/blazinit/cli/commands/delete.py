import click

from blazinit.cli.error_boundary import cli_error_boundary
from blazinit.cli.output import user_output
from blazinit.core.context import BlazinitContext
from blazinit.core.profile.operations import delete_profile


@click.command("delete")
@click.argument("profile")
@click.pass_obj
@cli_error_boundary
def delete_cmd(ctx: BlazinitContext, profile: str) -> None:
    """Delete an existing profile.

    The default profile cannot be deleted; use `set-default` to pick another
    default first.
    """
    delete_profile(ctx.profile_store, profile, ctx.config)
    user_output(click.style(f"Successfully deleted profile '{profile}'.", fg="green"))
