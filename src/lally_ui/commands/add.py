"""Add command for copying registry items into the project."""

import click

from lally_ui.cli.output import user_output
from lally_ui.constants import REGISTRY_KEY
from lally_ui.context import LallyContext
from lally_ui.error_boundary import cli_error_boundary
from lally_ui.operations.apply import apply_registry_item, resolve_item_reference
from lally_ui.operations.connect import has_connected_registry


@click.command(context_settings=dict(ignore_unknown_options=True))
@click.argument("item_ref", metavar="NAMESPACE/ITEM", required=False, default="")
@click.option(
    "--remote",
    is_flag=True,
    help="Install through the shadcn CLI from the connected registry",
)
@click.argument("extra_args", nargs=-1, type=click.UNPROCESSED)
@click.pass_obj
@cli_error_boundary
def add(ctx: LallyContext, item_ref: str, remote: bool, extra_args: tuple[str, ...]) -> None:
    """Add a registry item to the project.

    Template files are copied under the components alias from components.json
    with their imports rewritten. Files that already exist are skipped.

    With --remote, the install is delegated to `shadcn add` using the
    connected @chris-lally registry; remaining arguments are passed through.

    Examples:

        lally-ui add branding/logo-with-badge

        lally-ui add fumadocs/sdk-layout --remote -- --overwrite
    """
    item = resolve_item_reference(ctx.catalog, item_ref)
    if extra_args and not remote:
        joined = " ".join(extra_args)
        raise ValueError(f"Unexpected arguments: {joined} (only valid with --remote)")

    if remote:
        if not has_connected_registry(ctx.cwd):
            user_output(f"Error: Missing {REGISTRY_KEY} registry in components.json.")
            user_output("Run: lally-ui registry connect")
            raise SystemExit(1)

        exit_code = ctx.shadcn.add(ctx.cwd, f"{REGISTRY_KEY}/{item.slug}", extra_args)
        if exit_code != 0:
            raise SystemExit(exit_code)
        return

    results = apply_registry_item(ctx.cwd, item, ctx.template_root)
    for result in results:
        verb = "Created" if result.outcome == "created" else "Skipped"
        user_output(f"{verb} {result.target_path}")

    if item.dependencies:
        user_output(f"\nInstall dependencies: {' '.join(item.dependencies)}")
    if item.registry_dependencies:
        user_output(f"Requires shadcn components: {', '.join(item.registry_dependencies)}")
