"""shadcn CLI abstraction for remote registry installs.

`lally-ui add --remote` hands the install to the shadcn CLI, which fetches
the item from the connected registry. This ABC keeps that subprocess out of
tests.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path


class ShadcnCli(ABC):
    """Abstract shadcn CLI operations for dependency injection."""

    @abstractmethod
    def add(self, cwd: Path, registry_ref: str, extra_args: Sequence[str]) -> int:
        """Run `shadcn add <registry_ref> [extra_args]` in cwd.

        Args:
            cwd: Consumer project directory
            registry_ref: Registry reference, e.g. "@chris-lally/branding-logo-with-badge"
            extra_args: Additional arguments forwarded to shadcn

        Returns:
            The process exit code
        """
        ...
