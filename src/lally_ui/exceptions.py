"""Exceptions raised by lally-ui operations.

All of these are caught by the CLI error boundary and reported as a single
"Error: ..." line with exit code 1.
"""

from pathlib import Path


class LallyUiError(Exception):
    """Base class for well-known lally-ui failures."""


class ConfigurationMissingError(LallyUiError):
    """Raised when the consumer project has no components.json."""


class UnknownItemError(LallyUiError):
    """Raised when a namespace or item is not in the registry catalog."""

    def __init__(self, message: str, available: list[str], label: str = "Available") -> None:
        self.available = available
        super().__init__(f"{message}\n{label}: {', '.join(available)}")


class ManifestInconsistencyError(LallyUiError):
    """Raised when a declared template source is missing from the template root.

    This indicates a corrupt package install rather than a user error.
    """

    def __init__(self, message: str, path: Path) -> None:
        self.path = path
        super().__init__(message)
