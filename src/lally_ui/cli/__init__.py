import logging
import os

import click

from lally_ui.cli.output import user_output
from lally_ui.constants import DEBUG_ENV_VAR
from lally_ui.context import create_context
from lally_ui.error_boundary import cli_error_boundary

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])

# Track whether commands are registered
_commands_registered = False


class LazyGroup(click.Group):
    """Click Group that lazily loads commands."""

    def list_commands(self, ctx):
        """List available commands, registering them if needed."""
        if not _commands_registered:
            _register_commands()
        return super().list_commands(ctx)

    def get_command(self, ctx, cmd_name):
        """Get a command by name, registering if needed."""
        if not _commands_registered:
            _register_commands()
        return super().get_command(ctx, cmd_name)


def _configure_logging(debug: bool) -> None:
    if debug or os.environ.get(DEBUG_ENV_VAR):
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


@click.command(cls=LazyGroup, invoke_without_command=True, context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="lally-ui")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """Copy reusable UI component source into your project."""
    _configure_logging(debug)

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context()

    if ctx.invoked_subcommand is None:
        user_output(ctx.get_help())


def _register_commands() -> None:
    """Register all commands with the CLI group."""
    global _commands_registered

    if _commands_registered:
        return

    from lally_ui.commands.add import add
    from lally_ui.commands.doctor import doctor
    from lally_ui.commands.init import init
    from lally_ui.commands.list_cmd import list_items
    from lally_ui.commands.registry import registry_group

    cli.add_command(add)
    cli.add_command(doctor)
    cli.add_command(init)
    cli.add_command(list_items)
    cli.add_command(registry_group)

    _commands_registered = True


def main() -> None:
    """Entry point with error boundary."""
    cli_error_boundary(cli)()


if __name__ == "__main__":
    main()
