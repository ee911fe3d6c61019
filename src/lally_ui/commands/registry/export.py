"""Export command for writing shadcn registry JSON."""

import click

from lally_ui.cli.output import user_output
from lally_ui.constants import DEFAULT_EXPORT_DIR
from lally_ui.context import LallyContext
from lally_ui.error_boundary import cli_error_boundary
from lally_ui.operations.export import export_registry


@click.command()
@click.option(
    "--out",
    "out_dir",
    default=DEFAULT_EXPORT_DIR,
    show_default=True,
    help="Output directory, relative to the current directory",
)
@click.pass_obj
@cli_error_boundary
def export(ctx: LallyContext, out_dir: str) -> None:
    """Export every registry item as shadcn registry JSON."""
    target_dir = ctx.cwd / out_dir
    result = export_registry(ctx.catalog, ctx.template_root, target_dir)
    user_output(f"Exported {len(result.item_paths)} registry item(s) to {target_dir}")
