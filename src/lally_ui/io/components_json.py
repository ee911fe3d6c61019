"""I/O operations for the consumer's components.json.

Writes go through a temporary file and a rename so an interrupted write
never leaves a truncated config behind.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from lally_ui.constants import COMPONENTS_JSON
from lally_ui.exceptions import ConfigurationMissingError
from lally_ui.models.config import ComponentsConfig


def components_json_path(cwd: Path) -> Path:
    return cwd / COMPONENTS_JSON


def _read_components_json(cwd: Path) -> tuple[Path, str]:
    config_path = components_json_path(cwd)
    if not config_path.exists():
        raise ConfigurationMissingError(
            f"Missing {COMPONENTS_JSON} in {cwd}. Run 'lally-ui init' first."
        )
    return config_path, config_path.read_text(encoding="utf-8")


def load_components_config(cwd: Path) -> ComponentsConfig:
    """Load and validate components.json from the project directory.

    Raises:
        ConfigurationMissingError: If the file does not exist
        ValueError: If the file is not valid JSON or has wrongly typed fields
    """
    config_path, raw = _read_components_json(cwd)
    try:
        return ComponentsConfig.model_validate_json(raw)
    except ValidationError as e:
        raise ValueError(f"Invalid {config_path}: {e}") from e


def load_components_document(cwd: Path) -> dict[str, Any]:
    """Load components.json as a plain dict, validated like load_components_config.

    Used for read/modify/write cycles: key order and explicit nulls survive
    unchanged because the dict is never round-tripped through the model.

    Raises:
        ConfigurationMissingError: If the file does not exist
        ValueError: If the file is not valid JSON or has wrongly typed fields
    """
    config_path, raw = _read_components_json(cwd)
    try:
        ComponentsConfig.model_validate_json(raw)
    except ValidationError as e:
        raise ValueError(f"Invalid {config_path}: {e}") from e
    return json.loads(raw)


def save_components_config(cwd: Path, config: ComponentsConfig) -> Path:
    """Write components.json atomically with 2-space indentation."""
    return save_components_document(cwd, config.to_dict())


def save_components_document(cwd: Path, document: dict[str, Any]) -> Path:
    config_path = components_json_path(cwd)
    write_json(config_path, document, atomic=True)
    return config_path


def write_json(path: Path, data: object, *, atomic: bool = False) -> None:
    """Write JSON with 2-space indent and a trailing newline, creating parents."""
    path.parent.mkdir(parents=True, exist_ok=True)
    content = json.dumps(data, indent=2, ensure_ascii=False) + "\n"

    if not atomic:
        path.write_text(content, encoding="utf-8")
        return

    temp_path = path.with_suffix(path.suffix + ".tmp")
    temp_path.write_text(content, encoding="utf-8")
    temp_path.replace(path)
