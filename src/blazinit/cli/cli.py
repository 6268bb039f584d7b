import logging

import click

from blazinit.cli.commands.add import add_cmd
from blazinit.cli.commands.create import create_cmd
from blazinit.cli.commands.delete import delete_cmd
from blazinit.cli.commands.install import install_cmd
from blazinit.cli.commands.list_cmd import list_cmd
from blazinit.cli.commands.list_packages import list_packages_cmd
from blazinit.cli.commands.remove import remove_cmd
from blazinit.cli.commands.set_default import set_default_cmd
from blazinit.cli.commands.show import show_cmd
from blazinit.cli.error_boundary import cli_error_boundary
from blazinit.core.context import BlazinitContext, bootstrap, create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

logger = logging.getLogger(__name__)


@cli_error_boundary
def _prepare(ctx: click.Context, debug: bool) -> None:
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(debug=debug)

    blazinit_ctx: BlazinitContext = ctx.obj
    result = bootstrap(blazinit_ctx)
    if result.was_updated:
        logger.debug(
            "Registry synced from %s to %s", result.old_version, result.new_version
        )


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="blazinit")
@click.option(
    "--debug",
    is_flag=True,
    envvar="BLAZINIT_DEBUG",
    help="Log debug output to stderr (also enabled by BLAZINIT_DEBUG).",
)
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """Create, modify, and install software profiles.

    A profile is a saved set of packages picked from the bundled registry.
    Adding a package also adds everything it depends on.
    """
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="[DEBUG %(name)s:%(lineno)d] %(message)s",
        )

    _prepare(ctx, debug)


cli.add_command(add_cmd)
cli.add_command(create_cmd)
cli.add_command(delete_cmd)
cli.add_command(install_cmd)
cli.add_command(list_cmd)
cli.add_command(list_packages_cmd)
cli.add_command(remove_cmd)
cli.add_command(set_default_cmd)
cli.add_command(show_cmd)


def main() -> None:
    """CLI entry point used by the `blazinit` console script."""
    cli()
