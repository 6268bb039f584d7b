import click
from rich.console import Console
from rich.table import Table

from blazinit.cli.error_boundary import cli_error_boundary
from blazinit.cli.output import user_output
from blazinit.core.context import BlazinitContext
from blazinit.core.registry.lookup import list_packages
from blazinit.core.registry.types import RegistryEntry


def _build_table(entries: list[RegistryEntry]) -> Table:
    table = Table(show_header=True, header_style="bold", box=None)
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Display")
    table.add_column("Installers", style="dim")
    table.add_column("Dependencies", style="yellow")

    for entry in entries:
        table.add_row(
            entry.name,
            entry.display or "",
            ", ".join(sorted(entry.installers)),
            ", ".join(entry.dependencies),
        )
    return table


@click.command("list-packages")
@click.argument("query", required=False)
@click.pass_obj
@cli_error_boundary
def list_packages_cmd(ctx: BlazinitContext, query: str | None) -> None:
    """List packages available in the registry.

    QUERY filters by package name or display name (case-insensitive).
    """
    entries = list_packages(ctx.registry_store, query)
    if not entries:
        if query:
            user_output(f"No packages match '{query}'.")
        else:
            user_output("No packages found in registry.")
        return

    console = Console()
    console.print(_build_table(entries))
