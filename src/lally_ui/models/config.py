"""Models for the consumer's components.json file."""

from dataclasses import dataclass
from typing import Any
from pathlib import Path

from pydantic import BaseModel, ConfigDict

DEFAULT_COMPONENTS_ALIAS = "@/components"
DEFAULT_UI_ALIAS = "@/components/ui"
DEFAULT_UTILS_ALIAS = "@/lib/utils"


class AliasesConfig(BaseModel):
    """The "aliases" block of components.json.

    Unknown aliases (shadcn also writes "lib" and "hooks") are preserved.
    """

    model_config = ConfigDict(extra="allow")

    components: str | None = None
    ui: str | None = None
    utils: str | None = None


class ComponentsConfig(BaseModel):
    """components.json as read and written by lally-ui.

    The file is owned by the consumer project. Only the fields below are
    interpreted; every other key is kept as-is so a read/modify/write cycle
    never drops shadcn settings.
    """

    model_config = ConfigDict(extra="allow")

    aliases: AliasesConfig | None = None
    # Values are URL templates or shadcn registry objects ({"url": ..., "headers": ...})
    registries: dict[str, Any] | None = None

    def alias_context(self) -> "AliasContext":
        """Build an AliasContext, defaulting each missing alias independently."""
        aliases = self.aliases if self.aliases is not None else AliasesConfig()
        return AliasContext(
            components_alias=(
                aliases.components if aliases.components is not None else DEFAULT_COMPONENTS_ALIAS
            ),
            ui_alias=aliases.ui if aliases.ui is not None else DEFAULT_UI_ALIAS,
            utils_alias=aliases.utils if aliases.utils is not None else DEFAULT_UTILS_ALIAS,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to components.json format, keeping unknown keys."""
        return self.model_dump(mode="json", exclude_unset=True)

    @staticmethod
    def default() -> "ComponentsConfig":
        """Configuration written by `lally-ui init`."""
        return ComponentsConfig(
            aliases=AliasesConfig(
                components=DEFAULT_COMPONENTS_ALIAS,
                ui=DEFAULT_UI_ALIAS,
                utils=DEFAULT_UTILS_ALIAS,
            ),
        )


@dataclass(frozen=True)
class AliasContext:
    """Resolved import aliases for one invocation."""

    components_alias: str
    ui_alias: str
    utils_alias: str


DEFAULT_ALIASES = AliasContext(
    components_alias=DEFAULT_COMPONENTS_ALIAS,
    ui_alias=DEFAULT_UI_ALIAS,
    utils_alias=DEFAULT_UTILS_ALIAS,
)


@dataclass(frozen=True)
class AliasResolution:
    """Aliases plus the absolute directory that component targets are relative to."""

    aliases: AliasContext
    components_root: Path
