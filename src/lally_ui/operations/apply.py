"""Apply registry items to a consumer project (the `add` path)."""

import logging
from pathlib import Path

from lally_ui.exceptions import UnknownItemError
from lally_ui.models.registry import RegistryCatalog, RegistryItem
from lally_ui.operations.aliases import read_alias_context
from lally_ui.operations.imports import apply_import_replacements, resolve_replacements
from lally_ui.operations.materialize import MaterializedFile, write_if_missing
from lally_ui.sources.templates import resolve_template_source

logger = logging.getLogger(__name__)


def resolve_item_reference(catalog: RegistryCatalog, reference: str) -> RegistryItem:
    """Look up a "<namespace>/<name>" reference in the catalog.

    Raises:
        ValueError: If the reference is empty or not in namespace/name form
        UnknownItemError: If the namespace or the item is not registered
    """
    if not reference:
        raise ValueError("Missing component/template name. Usage: lally-ui add <namespace/item>")

    namespace, _, name = reference.partition("/")
    if not namespace or not name or "/" in name:
        raise ValueError(
            f"Invalid item format: {reference}. "
            "Use <namespace/item>, for example: fumadocs/sdk-layout"
        )

    namespaces = catalog.namespaces()
    if namespace not in namespaces:
        raise UnknownItemError(
            f"Unknown namespace: {namespace}", namespaces, label="Available namespaces"
        )

    item = catalog.find(reference)
    if item is None:
        available = [entry.name for entry in catalog.items_in_namespace(namespace)]
        raise UnknownItemError(f"Unknown {namespace} item: {name}", available)

    return item


def apply_registry_item(
    cwd: Path, item: RegistryItem, template_root: Path
) -> list[MaterializedFile]:
    """Copy an item's template files into the project, rewriting imports.

    Files are processed in manifest order. Existing targets are skipped, so
    applying the same item twice never overwrites consumer changes.

    Args:
        cwd: Consumer project root (must contain components.json)
        item: Registry item to apply
        template_root: Directory holding the item's template sources

    Returns:
        One MaterializedFile per item file, in manifest order

    Raises:
        ConfigurationMissingError: If components.json is missing
        ManifestInconsistencyError: If a template source is missing
    """
    resolution = read_alias_context(cwd)
    logger.debug("Applying %s into %s", item.id, resolution.components_root)

    results: list[MaterializedFile] = []
    for file in item.files:
        source_path = resolve_template_source(template_root, file)
        source = source_path.read_text(encoding="utf-8")

        replacements = resolve_replacements(file.replace_imports, resolution.aliases)
        transformed = apply_import_replacements(source, replacements)

        target_path = resolution.components_root / file.target
        outcome = write_if_missing(target_path, transformed)
        results.append(MaterializedFile(target_path=target_path, outcome=outcome))

    return results
