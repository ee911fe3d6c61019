"""List command for showing available registry items."""

import click
from rich.console import Console
from rich.table import Table

from lally_ui.context import LallyContext


@click.command("list")
@click.pass_obj
def list_items(ctx: LallyContext) -> None:
    """List registry items available to add."""
    table = Table(show_header=True, header_style="bold", box=None)
    table.add_column("item", style="cyan", no_wrap=True)
    table.add_column("files", justify="right")
    table.add_column("description")

    for item in ctx.catalog.list_items():
        table.add_row(item.id, str(len(item.files)), item.description)

    Console(width=120).print(table)
