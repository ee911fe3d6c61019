"""Tests for registry connection in components.json."""

import json
from pathlib import Path

import pytest

from lally_ui.exceptions import ConfigurationMissingError
from lally_ui.operations.connect import connect_registry, has_connected_registry


def test_connect_adds_registry_and_preserves_keys(tmp_path: Path) -> None:
    original = {
        "style": "new-york",
        "aliases": {"components": "@/components"},
        "registries": {"@other": "https://other.example/{name}.json"},
    }
    (tmp_path / "components.json").write_text(json.dumps(original), encoding="utf-8")

    connect_registry(tmp_path, "https://example.com/r/{name}.json")

    saved = json.loads((tmp_path / "components.json").read_text(encoding="utf-8"))
    assert saved["style"] == "new-york"
    assert saved["aliases"] == {"components": "@/components"}
    assert saved["registries"] == {
        "@other": "https://other.example/{name}.json",
        "@chris-lally": "https://example.com/r/{name}.json",
    }


def test_connect_requires_components_json(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationMissingError):
        connect_registry(tmp_path, "https://example.com/r/{name}.json")


def test_has_connected_registry(project_dir: Path) -> None:
    assert has_connected_registry(project_dir) is False

    connect_registry(project_dir, "https://example.com/r/{name}.json")

    assert has_connected_registry(project_dir) is True


def test_has_connected_registry_without_config(tmp_path: Path) -> None:
    assert has_connected_registry(tmp_path) is False


def test_connect_keeps_key_order_and_explicit_nulls(tmp_path: Path) -> None:
    original = {
        "$schema": "https://ui.shadcn.com/schema.json",
        "style": "new-york",
        "iconLibrary": None,
        "aliases": {"components": "@/components"},
    }
    (tmp_path / "components.json").write_text(json.dumps(original), encoding="utf-8")

    connect_registry(tmp_path, "https://example.com/r/{name}.json")

    saved = json.loads((tmp_path / "components.json").read_text(encoding="utf-8"))
    assert list(saved) == ["$schema", "style", "iconLibrary", "aliases", "registries"]
    assert saved["iconLibrary"] is None
    assert saved["registries"] == {"@chris-lally": "https://example.com/r/{name}.json"}


def test_connect_keeps_object_valued_registries(tmp_path: Path) -> None:
    acme = {"url": "https://acme.example/r/{name}.json", "headers": {"Authorization": "x"}}
    original = {"registries": {"@acme": acme}}
    (tmp_path / "components.json").write_text(json.dumps(original), encoding="utf-8")

    assert has_connected_registry(tmp_path) is False

    connect_registry(tmp_path, "https://example.com/r/{name}.json")

    saved = json.loads((tmp_path / "components.json").read_text(encoding="utf-8"))
    assert saved["registries"] == {
        "@acme": acme,
        "@chris-lally": "https://example.com/r/{name}.json",
    }
    assert has_connected_registry(tmp_path) is True
