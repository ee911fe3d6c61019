"""Real shadcn CLI implementation using npx."""

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path

from lally_ui.integrations.shadcn.abc import ShadcnCli

logger = logging.getLogger(__name__)

SHADCN_PACKAGE = "shadcn@latest"


class RealShadcnCli(ShadcnCli):
    """Production implementation that shells out to `npx shadcn@latest`."""

    def add(self, cwd: Path, registry_ref: str, extra_args: Sequence[str]) -> int:
        """Run shadcn with inherited stdio so prompts reach the user.

        Raises:
            FileNotFoundError: If npx is not installed
        """
        cmd = ["npx", "--yes", SHADCN_PACKAGE, "add", registry_ref, *extra_args]
        logger.debug("Running %s in %s", cmd, cwd)
        result = subprocess.run(cmd, cwd=cwd, check=False)
        return result.returncode
