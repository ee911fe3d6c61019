"""Application context with dependency injection.

LallyContext holds the registry catalog, template root, working directory
and the shadcn delegate. It is created once at the CLI entry point and
passed to commands through Click's context object.
"""

from dataclasses import dataclass
from pathlib import Path

from lally_ui.integrations.shadcn.abc import ShadcnCli
from lally_ui.models.registry import RegistryCatalog


@dataclass(frozen=True)
class LallyContext:
    """Immutable context holding all dependencies for lally-ui commands.

    Attributes:
        catalog: Registry items available to add/export
        template_root: Directory containing template sources for the catalog
        shadcn: shadcn CLI used by `add --remote`
        cwd: Consumer project directory
    """

    catalog: RegistryCatalog
    template_root: Path
    shadcn: ShadcnCli
    cwd: Path

    @staticmethod
    def for_test(
        catalog: RegistryCatalog | None = None,
        template_root: Path | None = None,
        shadcn: ShadcnCli | None = None,
        cwd: Path | None = None,
    ) -> "LallyContext":
        """Create test context with optional pre-configured implementations.

        Uses the bundled catalog and templates and a FakeShadcnCli unless
        overridden, so no subprocess is ever spawned.

        Example:
            >>> from lally_ui.integrations.shadcn.fake import FakeShadcnCli
            >>> shadcn = FakeShadcnCli(exit_code=2)
            >>> ctx = LallyContext.for_test(shadcn=shadcn, cwd=tmp_path)
        """
        from lally_ui.integrations.shadcn.fake import FakeShadcnCli
        from lally_ui.io.catalog import load_catalog
        from lally_ui.sources.templates import bundled_template_root

        resolved_catalog = catalog if catalog is not None else load_catalog()
        resolved_template_root = (
            template_root if template_root is not None else bundled_template_root()
        )
        resolved_shadcn: ShadcnCli = shadcn if shadcn is not None else FakeShadcnCli()
        resolved_cwd = cwd if cwd is not None else Path("/fake/project")

        return LallyContext(
            catalog=resolved_catalog,
            template_root=resolved_template_root,
            shadcn=resolved_shadcn,
            cwd=resolved_cwd,
        )


def create_context() -> LallyContext:
    """Create production context with the bundled catalog and real shadcn CLI."""
    from lally_ui.integrations.shadcn.real import RealShadcnCli
    from lally_ui.io.catalog import load_catalog
    from lally_ui.sources.templates import bundled_template_root

    return LallyContext(
        catalog=load_catalog(),
        template_root=bundled_template_root(),
        shadcn=RealShadcnCli(),
        cwd=Path.cwd(),
    )
