import click

from blazinit.cli.core import resolve_profile_name
from blazinit.cli.error_boundary import cli_error_boundary
from blazinit.cli.output import machine_output
from blazinit.core.context import BlazinitContext
from blazinit.core.profile.operations import read_profile
from blazinit.core.profile.types import Profile


def format_profile(profile: Profile) -> list[str]:
    """Render a profile as indented text lines."""
    lines = [f"Profile: {click.style(profile.name, bold=True)}"]
    if not profile.packages:
        lines.append("  No packages in this profile.")
        return lines

    lines.append("  Packages:")
    for pkg in profile.packages:
        lines.append(f"  - {pkg.label}")
        if pkg.detect is not None:
            lines.append(f"    Detect: {pkg.detect}")
        if pkg.installers:
            lines.append("    Installers:")
            for installer, command in sorted(pkg.installers.items()):
                lines.append(f"      - {installer}: {command}")
        if pkg.dependencies:
            lines.append(f"    Dependencies: {', '.join(pkg.dependencies)}")
    return lines


@click.command("show")
@click.argument("profile", required=False)
@click.pass_obj
@cli_error_boundary
def show_cmd(ctx: BlazinitContext, profile: str | None) -> None:
    """List all packages in a profile.

    PROFILE defaults to the current default profile.
    """
    loaded = read_profile(ctx.profile_store, resolve_profile_name(ctx, profile))
    for line in format_profile(loaded):
        machine_output(line)
