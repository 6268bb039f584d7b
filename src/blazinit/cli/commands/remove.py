import click

from blazinit.cli.core import resolve_profile_name
from blazinit.cli.error_boundary import cli_error_boundary
from blazinit.cli.output import user_output
from blazinit.core.context import BlazinitContext
from blazinit.core.profile.operations import remove_package


@click.command("remove")
@click.argument("package")
@click.argument("profile", required=False)
@click.pass_obj
@cli_error_boundary
def remove_cmd(ctx: BlazinitContext, package: str, profile: str | None) -> None:
    """Remove a package from a profile.

    Dependencies that were added alongside the package are kept.
    """
    profile_name = resolve_profile_name(ctx, profile)
    remove_package(ctx.profile_store, profile_name, package)
    user_output(click.style(f"Removed '{package}' from profile '{profile_name}'.", fg="green"))
