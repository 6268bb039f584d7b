import click

from blazinit.cli.core import resolve_profile_name
from blazinit.cli.error_boundary import cli_error_boundary
from blazinit.cli.output import user_output, warning_output
from blazinit.core.context import BlazinitContext
from blazinit.core.profile.operations import add_package


@click.command("add")
@click.argument("package")
@click.argument("profile", required=False)
@click.pass_obj
@cli_error_boundary
def add_cmd(ctx: BlazinitContext, package: str, profile: str | None) -> None:
    """Add a package and its dependencies to a profile.

    PROFILE defaults to the current default profile. Names missing from the
    registry, PACKAGE included, are skipped with a warning.
    """
    profile_name = resolve_profile_name(ctx, profile)
    report = add_package(ctx.profile_store, ctx.registry_store, profile_name, package)

    for name in report.missing:
        warning_output(f"Package '{name}' (dependency) not found in registry. Skipping.")

    if report.nothing_new:
        user_output(
            f"Package '{package}' and its dependencies are already in profile '{profile_name}'."
        )
        return

    user_output(f"Adding to profile '{profile_name}':")
    for pkg in report.added:
        user_output(f"- {pkg.name}")
    user_output(click.style(f"Successfully added {len(report.added)} package(s).", fg="green"))
