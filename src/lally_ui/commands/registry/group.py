"""Registry commands group."""

import click

from lally_ui.commands.registry.connect import connect
from lally_ui.commands.registry.export import export


@click.group("registry")
def registry_group() -> None:
    """Export the registry or connect a project to it."""


registry_group.add_command(connect)
registry_group.add_command(export)
