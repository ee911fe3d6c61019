"""Export the registry catalog as shadcn-compatible registry JSON.

There is no consumer project at export time, so imports are always
rewritten with DEFAULT_ALIASES. This is unlike the apply path, which uses
the consumer's own aliases.
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from lally_ui.constants import REGISTRY_HOMEPAGE, REGISTRY_NAME
from lally_ui.exceptions import ManifestInconsistencyError
from lally_ui.io.components_json import write_json
from lally_ui.models.config import DEFAULT_ALIASES
from lally_ui.models.export import (
    ExportedRegistryFile,
    ExportedRegistryItem,
    RegistryManifest,
    RegistryManifestItem,
    to_json_document,
)
from lally_ui.models.registry import RegistryCatalog, RegistryFileType, RegistryItem
from lally_ui.operations.imports import apply_import_replacements, resolve_replacements
from lally_ui.sources.templates import resolve_template_source

logger = logging.getLogger(__name__)

REGISTRY_MANIFEST_FILENAME = "registry.json"


@dataclass(frozen=True)
class ExportResult:
    """Paths written by export_registry."""

    item_paths: list[Path]
    manifest_path: Path


def classify_file_type(target: str) -> RegistryFileType:
    """Classify a target path, first matching rule wins."""
    if target.startswith("app/"):
        return "registry:page"
    if target.startswith("hooks/") or "/hooks/" in target:
        return "registry:hook"
    if (
        target.startswith("lib/")
        or "/lib/" in target
        or target.startswith("types/")
        or "/types/" in target
    ):
        return "registry:lib"
    return "registry:component"


def title_case(text: str) -> str:
    """'branding-logo-with-badge' -> 'Branding Logo With Badge'."""
    spaced = re.sub(r"[-_]", " ", text)
    return re.sub(r"\b\w", lambda m: m.group(0).upper(), spaced)


def registry_file_path(item: RegistryItem, target: str) -> str:
    return f"registry/{REGISTRY_NAME}/{item.slug}/{target}"


def build_item_document(item: RegistryItem, template_root: Path) -> ExportedRegistryItem:
    """Read and rewrite an item's files into its registry-item document.

    Raises:
        ManifestInconsistencyError: If any template source is missing
    """
    files: list[ExportedRegistryFile] = []
    for file in item.files:
        source_path = resolve_template_source(template_root, file)
        source = source_path.read_text(encoding="utf-8")
        replacements = resolve_replacements(file.replace_imports, DEFAULT_ALIASES)
        files.append(
            ExportedRegistryFile(
                path=registry_file_path(item, file.target),
                content=apply_import_replacements(source, replacements),
                type=classify_file_type(file.target),
                target=file.target,
            )
        )

    return ExportedRegistryItem(
        name=item.slug,
        title=title_case(item.slug),
        description=item.description,
        dependencies=list(item.dependencies) if item.dependencies is not None else None,
        registry_dependencies=(
            list(item.registry_dependencies) if item.registry_dependencies is not None else None
        ),
        files=files,
    )


def export_registry(catalog: RegistryCatalog, template_root: Path, out_dir: Path) -> ExportResult:
    """Write one JSON document per item plus the aggregate registry.json.

    Every item document is built before anything is written, so a missing
    template source aborts the export without leaving partial output. Item
    files are written before registry.json; readers never see a manifest
    that references an item file which does not exist yet.

    Args:
        catalog: Items to export
        template_root: Directory holding template sources
        out_dir: Output directory (created if missing)

    Returns:
        ExportResult listing the written files

    Raises:
        ManifestInconsistencyError: If the template root or a source is missing
    """
    if not template_root.is_dir():
        raise ManifestInconsistencyError(
            f"Missing templates directory: {template_root}", path=template_root
        )

    documents = [build_item_document(item, template_root) for item in catalog.list_items()]

    item_paths: list[Path] = []
    for document in documents:
        item_path = out_dir / f"{document.name}.json"
        write_json(item_path, to_json_document(document))
        item_paths.append(item_path)
        logger.debug("Wrote registry item %s", item_path)

    manifest = RegistryManifest(
        name=REGISTRY_NAME,
        homepage=REGISTRY_HOMEPAGE,
        items=[RegistryManifestItem.from_item(document) for document in documents],
    )
    manifest_path = out_dir / REGISTRY_MANIFEST_FILENAME
    write_json(manifest_path, to_json_document(manifest))
    logger.debug("Wrote registry manifest %s", manifest_path)

    return ExportResult(item_paths=item_paths, manifest_path=manifest_path)
