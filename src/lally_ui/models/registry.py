"""Registry catalog models."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal

RegistryFileType = Literal[
    "registry:component",
    "registry:lib",
    "registry:hook",
    "registry:page",
]


@dataclass(frozen=True)
class RegistryFile:
    """One template file shipped by a registry item."""

    source: str  # Relative to the template root
    target: str  # Relative to the consumer's resolved components root
    replace_imports: dict[str, str] | None = None  # Old specifier -> templated specifier


@dataclass(frozen=True)
class RegistryItem:
    """An installable unit of UI source with its file manifest."""

    id: str  # "<namespace>/<name>", unique within a catalog
    namespace: str
    name: str
    description: str
    files: tuple[RegistryFile, ...]
    dependencies: tuple[str, ...] | None = None  # External npm packages
    registry_dependencies: tuple[str, ...] | None = None  # Other registry item names

    @property
    def slug(self) -> str:
        """Flat name used for exported files and remote registry references."""
        return self.id.replace("/", "-")


class RegistryCatalog:
    """Immutable lookup table of registry items.

    Constructed once (usually from the bundled registry.yaml) and injected
    through LallyContext, so tests can substitute their own catalog.
    """

    def __init__(self, items: Sequence[RegistryItem]) -> None:
        seen: set[str] = set()
        seen_slugs: dict[str, str] = {}
        for item in items:
            expected_id = f"{item.namespace}/{item.name}"
            if item.id != expected_id:
                raise ValueError(
                    f"Registry item id '{item.id}' does not match namespace/name '{expected_id}'"
                )
            if item.id in seen:
                raise ValueError(f"Duplicate registry item id: {item.id}")
            seen.add(item.id)
            if item.slug in seen_slugs:
                raise ValueError(
                    f"Registry items '{seen_slugs[item.slug]}' and '{item.id}' "
                    f"both export as '{item.slug}'"
                )
            seen_slugs[item.slug] = item.id

        self._items = tuple(items)
        self._by_id = {item.id: item for item in self._items}

    def list_items(self) -> tuple[RegistryItem, ...]:
        """Return all items in declaration order."""
        return self._items

    def find(self, item_id: str) -> RegistryItem | None:
        """Return the item with this exact id, or None if it is not registered."""
        return self._by_id.get(item_id)

    def namespaces(self) -> list[str]:
        """Return namespaces in first-seen order."""
        return list(dict.fromkeys(item.namespace for item in self._items))

    def items_in_namespace(self, namespace: str) -> list[RegistryItem]:
        return [item for item in self._items if item.namespace == namespace]

    def __len__(self) -> int:
        return len(self._items)
