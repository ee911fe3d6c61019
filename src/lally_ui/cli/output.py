"""Output helpers for CLI commands with clear intent.

user_output: human-facing progress and diagnostics (stderr)
machine_output: data meant to be piped or parsed (stdout)
"""

import click


def user_output(message: str = "") -> None:
    """Write a message for the user to stderr."""
    click.echo(message, err=True)


def machine_output(message: str = "") -> None:
    """Write structured output to stdout."""
    click.echo(message)
