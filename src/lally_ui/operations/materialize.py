"""Idempotent file materialization into the consumer project."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

logger = logging.getLogger(__name__)

WriteOutcome = Literal["created", "skipped"]


@dataclass(frozen=True)
class MaterializedFile:
    """Result of materializing one registry file."""

    target_path: Path
    outcome: WriteOutcome


def write_if_missing(path: Path, content: str) -> WriteOutcome:
    """Write content to path unless a file already exists there.

    Existing files are never overwritten, so repeated installs leave
    consumer edits untouched. Skipping is a normal outcome, not an error.

    Returns:
        "created" if the file was written, "skipped" if it already existed
    """
    if path.exists():
        logger.debug("Skipping existing file: %s", path)
        return "skipped"

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    logger.debug("Wrote %d chars to %s", len(content), path)
    return "created"
