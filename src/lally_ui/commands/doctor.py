"""Doctor command for validating the project setup."""

import click

from lally_ui.cli.output import user_output
from lally_ui.context import LallyContext
from lally_ui.error_boundary import cli_error_boundary
from lally_ui.operations.doctor import DoctorCheck, run_doctor


def _format_check(check: DoctorCheck) -> str:
    if check.passed:
        icon = click.style("✓", fg="green")
    elif check.severity == "warning":
        icon = click.style("!", fg="yellow")
    else:
        icon = click.style("✗", fg="red")
    return f"{icon} {check.name}: {check.message}"


@click.command()
@click.pass_obj
@cli_error_boundary
def doctor(ctx: LallyContext) -> None:
    """Validate components.json, aliases, registry connection and templates."""
    checks = run_doctor(ctx.cwd, ctx.catalog, ctx.template_root)
    for check in checks:
        user_output(_format_check(check))

    failures = [check for check in checks if check.is_failure]
    if failures:
        user_output(f"\n{len(failures)} check(s) failed")
        raise SystemExit(1)

    user_output("\nAll checks passed")
