"""Tests for RegistryCatalog lookups."""

import pytest

from lally_ui.io.catalog import load_catalog
from lally_ui.models.registry import RegistryCatalog, RegistryFile, RegistryItem


def _item(item_id: str) -> RegistryItem:
    namespace, name = item_id.split("/")
    return RegistryItem(
        id=item_id,
        namespace=namespace,
        name=name,
        description="",
        files=(RegistryFile(source="a.tsx", target="a.tsx"),),
    )


def test_find_returns_item_with_exact_id() -> None:
    catalog = load_catalog()

    item = catalog.find("branding/logo-with-badge")

    assert item is not None
    assert item.id == "branding/logo-with-badge"
    assert item.namespace == "branding"
    assert item.name == "logo-with-badge"


def test_find_unknown_id_returns_none() -> None:
    catalog = load_catalog()

    assert catalog.find("nonexistent/thing") is None


def test_list_items_preserves_declaration_order() -> None:
    catalog = RegistryCatalog([_item("b/two"), _item("a/one"), _item("b/three")])

    assert [item.id for item in catalog.list_items()] == ["b/two", "a/one", "b/three"]


def test_namespaces_are_unique_in_first_seen_order() -> None:
    catalog = RegistryCatalog([_item("b/two"), _item("a/one"), _item("b/three")])

    assert catalog.namespaces() == ["b", "a"]
    assert [item.name for item in catalog.items_in_namespace("b")] == ["two", "three"]


def test_duplicate_ids_are_rejected() -> None:
    with pytest.raises(ValueError, match="Duplicate registry item id: a/one"):
        RegistryCatalog([_item("a/one"), _item("a/one")])


def test_id_must_match_namespace_and_name() -> None:
    item = RegistryItem(id="a/one", namespace="a", name="other", description="", files=())

    with pytest.raises(ValueError, match="does not match"):
        RegistryCatalog([item])


def test_slug_flattens_namespace_separator() -> None:
    assert _item("fumadocs/sdk-layout").slug == "fumadocs-sdk-layout"


def test_items_sharing_an_export_slug_are_rejected() -> None:
    with pytest.raises(ValueError, match="both export as 'a-b-c'"):
        RegistryCatalog([_item("a/b-c"), _item("a-b/c")])
