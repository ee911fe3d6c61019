from lally_ui.models.config import (
    DEFAULT_ALIASES,
    AliasContext,
    AliasesConfig,
    AliasResolution,
    ComponentsConfig,
)
from lally_ui.models.registry import RegistryCatalog, RegistryFile, RegistryFileType, RegistryItem

__all__ = [
    "DEFAULT_ALIASES",
    "AliasContext",
    "AliasResolution",
    "AliasesConfig",
    "ComponentsConfig",
    "RegistryCatalog",
    "RegistryFile",
    "RegistryFileType",
    "RegistryItem",
]
