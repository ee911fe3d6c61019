"""Tests for the doctor and list commands."""

import json
from pathlib import Path

from click.testing import CliRunner

from lally_ui.cli import cli
from lally_ui.context import LallyContext
from lally_ui.models.registry import RegistryCatalog


def test_doctor_passes_with_warnings(
    cli_runner: CliRunner, project_dir: Path, template_root: Path, sample_catalog: RegistryCatalog
) -> None:
    ctx = LallyContext.for_test(
        catalog=sample_catalog, template_root=template_root, cwd=project_dir
    )

    result = cli_runner.invoke(cli, ["doctor"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "All checks passed" in result.output
    assert "not connected" in result.output


def test_doctor_fails_without_components_json(
    cli_runner: CliRunner, tmp_path: Path, template_root: Path, sample_catalog: RegistryCatalog
) -> None:
    ctx = LallyContext.for_test(catalog=sample_catalog, template_root=template_root, cwd=tmp_path)

    result = cli_runner.invoke(cli, ["doctor"], obj=ctx)

    assert result.exit_code == 1
    assert "1 check(s) failed" in result.output


def test_doctor_with_bundled_templates(cli_runner: CliRunner, project_dir: Path) -> None:
    result = cli_runner.invoke(cli, ["doctor"], obj=LallyContext.for_test(cwd=project_dir))

    assert result.exit_code == 0, result.output
    assert "all template sources present" in result.output


def test_list_shows_catalog_items(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["list"], obj=LallyContext.for_test())

    assert result.exit_code == 0, result.output
    assert "fumadocs/sdk-layout" in result.output
    assert "branding/logo-with-badge" in result.output


def test_no_subcommand_shows_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [], obj=LallyContext.for_test())

    assert result.exit_code == 0
    assert "registry" in result.output
    assert "add" in result.output


def test_debug_flag_is_handled_by_group(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--debug", "list"], obj=LallyContext.for_test())

    assert result.exit_code == 0, result.output
    assert "fumadocs/sdk-layout" in result.output


def test_doctor_accepts_object_valued_registries(
    cli_runner: CliRunner, tmp_path: Path, template_root: Path, sample_catalog: RegistryCatalog
) -> None:
    config = {"registries": {"@acme": {"url": "https://acme.example/r/{name}.json"}}}
    (tmp_path / "components.json").write_text(json.dumps(config), encoding="utf-8")
    ctx = LallyContext.for_test(catalog=sample_catalog, template_root=template_root, cwd=tmp_path)

    result = cli_runner.invoke(cli, ["doctor"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "Invalid" not in result.output
