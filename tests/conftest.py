"""Pytest configuration and fixtures."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from lally_ui.integrations.shadcn.fake import FakeShadcnCli
from lally_ui.models.registry import RegistryCatalog, RegistryFile, RegistryItem

SDK_SECTION_SOURCE = """import { cn } from '../../../lib/cn';
import { type ReactNode } from 'react';

export function Section({ children }: { children: ReactNode }) {
  return <section className={cn('grid')}>{children}</section>;
}
"""

LOGO_SOURCE = """import { Badge } from "@/components/ui/badge";

export function Logo() {
  return <Badge>beta</Badge>;
}
"""


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Consumer project with an empty components.json (all aliases default)."""
    project = tmp_path / "project"
    project.mkdir()
    (project / "components.json").write_text(json.dumps({"style": "new-york"}), encoding="utf-8")
    return project


@pytest.fixture
def template_root(tmp_path: Path) -> Path:
    """Template root with the sources used by sample_catalog."""
    root = tmp_path / "templates"
    section = root / "demo" / "sections" / "section.tsx"
    section.parent.mkdir(parents=True)
    section.write_text(SDK_SECTION_SOURCE, encoding="utf-8")

    logo = root / "branding" / "logo.tsx"
    logo.parent.mkdir(parents=True)
    logo.write_text(LOGO_SOURCE, encoding="utf-8")

    hook = root / "demo" / "hooks" / "use-section.ts"
    hook.parent.mkdir(parents=True)
    hook.write_text("export function useSection() {}\n", encoding="utf-8")
    return root


@pytest.fixture
def sample_catalog() -> RegistryCatalog:
    return RegistryCatalog(
        [
            RegistryItem(
                id="demo/section",
                namespace="demo",
                name="section",
                description="A demo section.",
                dependencies=("clsx",),
                files=(
                    RegistryFile(
                        source="demo/sections/section.tsx",
                        target="demo/section.tsx",
                        replace_imports={"../../../lib/cn": "{utilsAlias}"},
                    ),
                    RegistryFile(
                        source="demo/hooks/use-section.ts",
                        target="hooks/use-section.ts",
                    ),
                ),
            ),
            RegistryItem(
                id="branding/logo-with-badge",
                namespace="branding",
                name="logo-with-badge",
                description="Logo with badge.",
                registry_dependencies=("badge",),
                files=(
                    RegistryFile(
                        source="branding/logo.tsx",
                        target="components/branding/logo.tsx",
                    ),
                ),
            ),
        ]
    )


@pytest.fixture
def fake_shadcn() -> FakeShadcnCli:
    return FakeShadcnCli()
