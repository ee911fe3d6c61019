"""Shared constants for lally-ui."""

COMPONENTS_JSON = "components.json"

REGISTRY_NAME = "chris-lally"
REGISTRY_KEY = "@chris-lally"
REGISTRY_HOMEPAGE = "https://github.com/ChrisLally/lally-ui"
DEFAULT_REGISTRY_URL = (
    "https://raw.githubusercontent.com/ChrisLally/lally-ui/main/packages/ui/public/r/{name}.json"
)

REGISTRY_ITEM_SCHEMA_URL = "https://ui.shadcn.com/schema/registry-item.json"
REGISTRY_SCHEMA_URL = "https://ui.shadcn.com/schema/registry.json"

DEFAULT_EXPORT_DIR = "public/r"

# Environment variable that turns on debug logging (same effect as --debug)
DEBUG_ENV_VAR = "LALLY_UI_DEBUG"
