from lally_ui.operations.aliases import read_alias_context, resolve_alias_path
from lally_ui.operations.apply import apply_registry_item, resolve_item_reference
from lally_ui.operations.connect import connect_registry, has_connected_registry
from lally_ui.operations.doctor import DoctorCheck, run_doctor
from lally_ui.operations.export import ExportResult, classify_file_type, export_registry
from lally_ui.operations.imports import (
    apply_import_replacements,
    interpolate_aliases,
    resolve_replacements,
)
from lally_ui.operations.materialize import MaterializedFile, write_if_missing

__all__ = [
    "DoctorCheck",
    "ExportResult",
    "MaterializedFile",
    "apply_import_replacements",
    "apply_registry_item",
    "classify_file_type",
    "connect_registry",
    "export_registry",
    "has_connected_registry",
    "interpolate_aliases",
    "read_alias_context",
    "resolve_alias_path",
    "resolve_item_reference",
    "resolve_replacements",
    "run_doctor",
    "write_if_missing",
]
