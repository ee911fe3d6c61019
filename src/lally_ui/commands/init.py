"""Init command for creating components.json."""

import click

from lally_ui.cli.output import user_output
from lally_ui.context import LallyContext
from lally_ui.error_boundary import cli_error_boundary
from lally_ui.io.components_json import components_json_path, save_components_config
from lally_ui.models.config import ComponentsConfig


@click.command()
@click.option(
    "--force",
    "-f",
    is_flag=True,
    help="Overwrite an existing components.json with defaults",
)
@click.pass_obj
@cli_error_boundary
def init(ctx: LallyContext, force: bool) -> None:
    """Initialize components.json with default aliases.

    Existing configuration is left untouched unless --force is given.
    """
    config_path = components_json_path(ctx.cwd)

    if config_path.exists() and not force:
        user_output(f"{config_path} already exists, leaving it unchanged")
        user_output("Use --force to reset it to defaults")
        return

    save_components_config(ctx.cwd, ComponentsConfig.default())
    user_output(f"Created {config_path}")

    user_output("\nYou can now add components using:")
    user_output("  lally-ui add <namespace/item>")
