"""Project health checks for `lally-ui doctor`."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from lally_ui.constants import COMPONENTS_JSON, REGISTRY_KEY
from lally_ui.exceptions import ConfigurationMissingError
from lally_ui.models.registry import RegistryCatalog
from lally_ui.operations.aliases import read_alias_context
from lally_ui.operations.connect import has_connected_registry

CheckSeverity = Literal["error", "warning"]


@dataclass(frozen=True)
class DoctorCheck:
    """Outcome of a single doctor check."""

    name: str
    passed: bool
    message: str
    severity: CheckSeverity = "error"

    @property
    def is_failure(self) -> bool:
        return not self.passed and self.severity == "error"


def find_missing_template_sources(catalog: RegistryCatalog, template_root: Path) -> list[Path]:
    """List declared template sources that do not exist under template_root."""
    missing = []
    for item in catalog.list_items():
        for file in item.files:
            source_path = template_root / file.source
            if not source_path.is_file():
                missing.append(source_path)
    return missing


def check_project_config(cwd: Path) -> list[DoctorCheck]:
    """Check components.json, alias resolution and registry connection."""
    try:
        resolution = read_alias_context(cwd)
    except (ConfigurationMissingError, ValueError) as e:
        return [DoctorCheck(name=COMPONENTS_JSON, passed=False, message=str(e))]

    aliases = resolution.aliases
    checks = [
        DoctorCheck(name=COMPONENTS_JSON, passed=True, message="found and valid"),
        DoctorCheck(
            name="aliases",
            passed=True,
            message=(
                f"components={aliases.components_alias} ui={aliases.ui_alias} "
                f"utils={aliases.utils_alias}"
            ),
        ),
    ]

    if resolution.components_root.is_dir():
        checks.append(
            DoctorCheck(
                name="components root",
                passed=True,
                message=str(resolution.components_root),
            )
        )
    else:
        checks.append(
            DoctorCheck(
                name="components root",
                passed=False,
                message=f"{resolution.components_root} does not exist yet (created on first add)",
                severity="warning",
            )
        )

    if has_connected_registry(cwd):
        checks.append(
            DoctorCheck(name="registry", passed=True, message=f"{REGISTRY_KEY} connected")
        )
    else:
        checks.append(
            DoctorCheck(
                name="registry",
                passed=False,
                message=f"{REGISTRY_KEY} not connected (run 'lally-ui registry connect')",
                severity="warning",
            )
        )

    return checks


def check_templates(catalog: RegistryCatalog, template_root: Path) -> DoctorCheck:
    missing = find_missing_template_sources(catalog, template_root)
    if missing:
        listing = ", ".join(str(path) for path in missing)
        return DoctorCheck(
            name="templates",
            passed=False,
            message=f"{len(missing)} missing template source(s): {listing}",
        )
    return DoctorCheck(
        name="templates",
        passed=True,
        message=f"{len(catalog)} item(s), all template sources present",
    )


def run_doctor(cwd: Path, catalog: RegistryCatalog, template_root: Path) -> list[DoctorCheck]:
    """Run every doctor check in display order."""
    return [*check_project_config(cwd), check_templates(catalog, template_root)]
