import click

from blazinit.cli.core import resolve_profile_name
from blazinit.cli.error_boundary import cli_error_boundary
from blazinit.cli.output import error_output, machine_output, user_output, warning_output
from blazinit.core.context import BlazinitContext
from blazinit.core.profile.operations import available_installers, plan_install, read_profile


@click.command("install")
@click.argument("profile", required=False)
@click.option(
    "--installer",
    "-i",
    help="Installer to use (e.g. apt, brew). Optional when the profile uses only one.",
)
@click.pass_obj
@cli_error_boundary
def install_cmd(ctx: BlazinitContext, profile: str | None, installer: str | None) -> None:
    """Print the commands that would install every package in a profile.

    Commands are written to stdout one per line and are never executed, so the
    output can be reviewed or piped to a shell:

        blazinit install work -i apt | sh
    """
    loaded = read_profile(ctx.profile_store, resolve_profile_name(ctx, profile))

    if not loaded.packages:
        user_output(f"Profile '{loaded.name}' has no packages to install.")
        return

    installers = available_installers(loaded)
    if installer is None:
        if len(installers) != 1:
            error_output(
                "Specify an installer with --installer. "
                f"Available: {', '.join(installers) if installers else '(none)'}"
            )
            raise SystemExit(1)
        installer = installers[0]

    plan = plan_install(loaded, installer)

    if not plan.steps:
        error_output(
            f"No package in profile '{loaded.name}' supports installer '{installer}'. "
            f"Available: {', '.join(installers) if installers else '(none)'}"
        )
        raise SystemExit(1)

    user_output(f"Install commands for profile '{plan.profile_name}' ({plan.installer}):")
    for step in plan.steps:
        machine_output(step.command)

    if plan.unsupported:
        warning_output(
            f"No '{plan.installer}' command for: {', '.join(plan.unsupported)}. Skipping."
        )
