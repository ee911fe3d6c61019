"""Pydantic models for exported registry JSON documents.

These mirror the shadcn registry schemas (registry-item.json and
registry.json). Field order is the key order of the written JSON. Optional
fields default to None and are dropped on dump, so a document only carries
the keys an item actually declares.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from lally_ui.constants import REGISTRY_ITEM_SCHEMA_URL, REGISTRY_SCHEMA_URL
from lally_ui.models.registry import RegistryFileType


class ExportedRegistryFile(BaseModel):
    """File entry in a per-item document, including its rewritten content."""

    model_config = ConfigDict(frozen=True)

    path: str
    content: str
    type: RegistryFileType
    target: str | None = None


class ExportedFileRef(BaseModel):
    """File entry as listed in the aggregate registry.json."""

    model_config = ConfigDict(frozen=True)

    path: str
    type: RegistryFileType
    target: str | None = None

    @staticmethod
    def from_file(file: ExportedRegistryFile) -> "ExportedFileRef":
        return ExportedFileRef(path=file.path, type=file.type, target=file.target)


class ExportedRegistryItem(BaseModel):
    """Per-item document written to <out>/<slug>.json."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    schema_url: str = Field(default=REGISTRY_ITEM_SCHEMA_URL, alias="$schema")
    name: str
    type: Literal["registry:component"] = "registry:component"
    title: str
    description: str
    dependencies: list[str] | None = None
    registry_dependencies: list[str] | None = Field(default=None, alias="registryDependencies")
    files: list[ExportedRegistryFile]


class RegistryManifestItem(BaseModel):
    """Item entry in the aggregate registry.json (file content omitted)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    type: Literal["registry:component"] = "registry:component"
    title: str
    description: str
    dependencies: list[str] | None = None
    registry_dependencies: list[str] | None = Field(default=None, alias="registryDependencies")
    files: list[ExportedFileRef]

    @staticmethod
    def from_item(item: ExportedRegistryItem) -> "RegistryManifestItem":
        return RegistryManifestItem(
            name=item.name,
            title=item.title,
            description=item.description,
            dependencies=item.dependencies,
            registry_dependencies=item.registry_dependencies,
            files=[ExportedFileRef.from_file(file) for file in item.files],
        )


class RegistryManifest(BaseModel):
    """Aggregate document written to <out>/registry.json."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    schema_url: str = Field(default=REGISTRY_SCHEMA_URL, alias="$schema")
    name: str
    homepage: str
    items: list[RegistryManifestItem]


def to_json_document(model: BaseModel) -> dict[str, Any]:
    """Dump a model using its JSON key names, omitting unset optional fields."""
    return model.model_dump(mode="json", by_alias=True, exclude_none=True)
