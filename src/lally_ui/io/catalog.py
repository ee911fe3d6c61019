"""Registry catalog I/O."""

from pathlib import Path
from typing import Any

import yaml

from lally_ui.models.registry import RegistryCatalog, RegistryFile, RegistryItem


def bundled_catalog_path() -> Path:
    """Path to the registry.yaml shipped with the package."""
    return Path(__file__).parent.parent / "data" / "registry.yaml"


def load_catalog(catalog_path: Path | None = None) -> RegistryCatalog:
    """Load registry.yaml into an immutable RegistryCatalog.

    Args:
        catalog_path: Catalog file to read (defaults to the bundled catalog)

    Returns:
        RegistryCatalog with items in file order

    Raises:
        ValueError: If an entry is missing required fields or ids collide
    """
    if catalog_path is None:
        catalog_path = bundled_catalog_path()

    with open(catalog_path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not data or "items" not in data:
        return RegistryCatalog([])

    return RegistryCatalog([_parse_item(entry, index) for index, entry in enumerate(data["items"])])


def _parse_item(entry: dict[str, Any], index: int) -> RegistryItem:
    for key in ("id", "namespace", "name", "description", "files"):
        if key not in entry:
            raise ValueError(f"Registry item #{index} is missing required field: {key}")

    files = []
    for file_entry in entry["files"]:
        if "source" not in file_entry or "target" not in file_entry:
            raise ValueError(f"Registry item '{entry['id']}' has a file without source/target")
        replace_imports = file_entry.get("replace_imports")
        files.append(
            RegistryFile(
                source=file_entry["source"],
                target=file_entry["target"],
                replace_imports=dict(replace_imports) if replace_imports else None,
            )
        )

    dependencies = entry.get("dependencies")
    registry_dependencies = entry.get("registry_dependencies")

    return RegistryItem(
        id=entry["id"],
        namespace=entry["namespace"],
        name=entry["name"],
        description=entry["description"],
        files=tuple(files),
        dependencies=tuple(dependencies) if dependencies else None,
        registry_dependencies=tuple(registry_dependencies) if registry_dependencies else None,
    )
