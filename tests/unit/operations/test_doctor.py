"""Tests for doctor checks."""

from pathlib import Path

from lally_ui.models.registry import RegistryCatalog
from lally_ui.operations.connect import connect_registry
from lally_ui.operations.doctor import find_missing_template_sources, run_doctor


def _by_name(checks: list) -> dict:
    return {check.name: check for check in checks}


def test_missing_config_is_a_failure(
    tmp_path: Path, template_root: Path, sample_catalog: RegistryCatalog
) -> None:
    checks = _by_name(run_doctor(tmp_path, sample_catalog, template_root))

    assert checks["components.json"].is_failure
    assert checks["templates"].passed


def test_unconnected_registry_and_missing_root_are_warnings(
    project_dir: Path, template_root: Path, sample_catalog: RegistryCatalog
) -> None:
    checks = run_doctor(project_dir, sample_catalog, template_root)
    by_name = _by_name(checks)

    assert by_name["registry"].severity == "warning"
    assert not by_name["registry"].passed
    assert by_name["components root"].severity == "warning"
    assert not any(check.is_failure for check in checks)


def test_healthy_project_passes_all_checks(
    project_dir: Path, template_root: Path, sample_catalog: RegistryCatalog
) -> None:
    (project_dir / "src" / "components").mkdir(parents=True)
    connect_registry(project_dir, "https://example.com/r/{name}.json")

    checks = run_doctor(project_dir, sample_catalog, template_root)

    assert all(check.passed for check in checks)


def test_missing_template_source_is_reported(
    project_dir: Path, template_root: Path, sample_catalog: RegistryCatalog
) -> None:
    (template_root / "branding" / "logo.tsx").unlink()

    missing = find_missing_template_sources(sample_catalog, template_root)
    checks = _by_name(run_doctor(project_dir, sample_catalog, template_root))

    assert missing == [template_root / "branding" / "logo.tsx"]
    assert checks["templates"].is_failure
