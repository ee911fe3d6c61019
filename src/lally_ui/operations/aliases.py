"""Alias resolution against the consumer's components.json."""

import logging
import os
from pathlib import Path

from lally_ui.io.components_json import load_components_config
from lally_ui.models.config import AliasResolution

logger = logging.getLogger(__name__)

# Alias prefix that maps to the project's src/ directory
SHORTHAND_ROOT = "@/"


def resolve_alias_path(alias: str, cwd: Path) -> Path:
    """Map an import alias to an absolute filesystem path.

    "@/components" -> <cwd>/src/components. Anything else is treated as a
    path relative to cwd (absolute paths stay absolute).
    """
    if alias.startswith(SHORTHAND_ROOT):
        resolved = cwd / "src" / alias[len(SHORTHAND_ROOT) :]
    else:
        resolved = cwd / alias
    return Path(os.path.normpath(resolved))


def read_alias_context(cwd: Path) -> AliasResolution:
    """Read aliases from components.json and resolve the components root.

    Raises:
        ConfigurationMissingError: If components.json does not exist
        ValueError: If components.json is malformed
    """
    config = load_components_config(cwd)
    aliases = config.alias_context()
    components_root = resolve_alias_path(aliases.components_alias, cwd)
    logger.debug("Resolved aliases=%s components_root=%s", aliases, components_root)
    return AliasResolution(aliases=aliases, components_root=components_root)
