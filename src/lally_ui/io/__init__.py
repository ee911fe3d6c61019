from lally_ui.io.catalog import bundled_catalog_path, load_catalog
from lally_ui.io.components_json import (
    components_json_path,
    load_components_config,
    load_components_document,
    save_components_config,
    save_components_document,
    write_json,
)

__all__ = [
    "bundled_catalog_path",
    "components_json_path",
    "load_catalog",
    "load_components_config",
    "load_components_document",
    "save_components_config",
    "save_components_document",
    "write_json",
]
