from lally_ui.integrations.shadcn.abc import ShadcnCli
from lally_ui.integrations.shadcn.real import RealShadcnCli

__all__ = [
    "RealShadcnCli",
    "ShadcnCli",
]
