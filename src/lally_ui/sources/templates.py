"""Bundled template source resolver."""

from pathlib import Path

from lally_ui.exceptions import ManifestInconsistencyError
from lally_ui.models.registry import RegistryFile


def bundled_template_root() -> Path:
    """Directory of template files shipped in package data."""
    return Path(__file__).parent.parent / "data" / "templates"


def resolve_template_source(template_root: Path, file: RegistryFile) -> Path:
    """Resolve a registry file's source under the template root.

    Raises:
        ManifestInconsistencyError: If the source file does not exist
    """
    source_path = template_root / file.source
    if not source_path.is_file():
        raise ManifestInconsistencyError(
            f"Missing template source: {source_path}. Reinstall lally-ui.",
            path=source_path,
        )
    return source_path
