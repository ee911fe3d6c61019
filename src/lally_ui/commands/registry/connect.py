"""Connect command for registering the remote registry in components.json."""

import click

from lally_ui.cli.output import user_output
from lally_ui.constants import DEFAULT_REGISTRY_URL, REGISTRY_KEY
from lally_ui.context import LallyContext
from lally_ui.error_boundary import cli_error_boundary
from lally_ui.operations.connect import connect_registry


@click.command()
@click.option(
    "--url",
    "registry_url",
    default=DEFAULT_REGISTRY_URL,
    help="Registry URL template; must contain {name}",
)
@click.pass_obj
@cli_error_boundary
def connect(ctx: LallyContext, registry_url: str) -> None:
    """Add the @chris-lally registry to components.json."""
    if "{name}" not in registry_url:
        raise ValueError(f"Registry URL must contain a {{name}} placeholder: {registry_url}")

    config_path = connect_registry(ctx.cwd, registry_url)
    user_output(f"Configured {REGISTRY_KEY} registry in {config_path}")
