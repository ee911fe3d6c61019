"""Tests for the CLI error boundary."""

import pytest

from lally_ui.error_boundary import cli_error_boundary
from lally_ui.exceptions import UnknownItemError


@pytest.mark.parametrize(
    "error",
    [
        UnknownItemError("Unknown demo item: nope", ["section"]),
        FileNotFoundError("missing.tsx"),
        ValueError("bad input"),
        PermissionError("denied"),
    ],
)
def test_well_known_errors_exit_with_message(
    error: Exception, capsys: pytest.CaptureFixture[str]
) -> None:
    @cli_error_boundary
    def command() -> None:
        raise error

    with pytest.raises(SystemExit) as exc_info:
        command()

    assert exc_info.value.code == 1
    assert capsys.readouterr().err.startswith(f"Error: {error}")


def test_other_errors_propagate() -> None:
    @cli_error_boundary
    def command() -> None:
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        command()
