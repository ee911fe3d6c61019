"""Fake shadcn CLI implementation for testing.

FakeShadcnCli records add() calls without spawning a process.
"""

from collections.abc import Sequence
from pathlib import Path

from lally_ui.integrations.shadcn.abc import ShadcnCli


class FakeShadcnCli(ShadcnCli):
    """In-memory fake that tracks calls and returns a preset exit code.

    This class has NO public setup methods. All state is provided via constructor
    or captured during execution.
    """

    def __init__(self, *, exit_code: int = 0) -> None:
        """Create FakeShadcnCli.

        Args:
            exit_code: Exit code returned from every add() call
        """
        self._exit_code = exit_code
        self._add_calls: list[tuple[Path, str, list[str]]] = []

    @property
    def add_calls(self) -> list[tuple[Path, str, list[str]]]:
        """Get the (cwd, registry_ref, extra_args) tuples passed to add().

        This property is for test assertions only.
        """
        return self._add_calls

    def add(self, cwd: Path, registry_ref: str, extra_args: Sequence[str]) -> int:
        self._add_calls.append((cwd, registry_ref, list(extra_args)))
        return self._exit_code
