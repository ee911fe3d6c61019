"""Connect the consumer's components.json to the lally-ui remote registry."""

import logging
from pathlib import Path

from lally_ui.constants import REGISTRY_KEY
from lally_ui.io.components_json import (
    components_json_path,
    load_components_config,
    load_components_document,
    save_components_document,
)

logger = logging.getLogger(__name__)


def connect_registry(cwd: Path, registry_url: str) -> Path:
    """Register the lally-ui registry URL under registries["@chris-lally"].

    All other keys in components.json are preserved, in their original order
    and including explicit nulls. Other registry entries are left untouched.

    Returns:
        Path of the updated components.json

    Raises:
        ConfigurationMissingError: If components.json does not exist
    """
    document = load_components_document(cwd)
    registries = document.get("registries")
    updated = dict(registries) if registries is not None else {}
    updated[REGISTRY_KEY] = registry_url
    document["registries"] = updated

    logger.debug("Setting %s=%s", REGISTRY_KEY, registry_url)
    return save_components_document(cwd, document)


def has_connected_registry(cwd: Path) -> bool:
    """Check whether components.json has a non-empty lally-ui registry entry."""
    if not components_json_path(cwd).exists():
        return False
    config = load_components_config(cwd)
    if config.registries is None:
        return False
    return bool(config.registries.get(REGISTRY_KEY))
