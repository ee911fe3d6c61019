"""Import path rewriting for template sources.

Supported grammar is deliberately narrow: a `from` keyword followed by a
single- or double-quoted module specifier on the same line, e.g.

    import { cn } from '../../../lib/cn';
    } from "@/components/ui/combobox";

Dynamic `import()` calls, `require()` and bare `import 'x'` side-effect
imports are not rewritten. Templates only use the form above.
"""

import re

from lally_ui.models.config import AliasContext

COMPONENTS_ALIAS_PLACEHOLDER = "{componentsAlias}"
UI_ALIAS_PLACEHOLDER = "{uiAlias}"
UTILS_ALIAS_PLACEHOLDER = "{utilsAlias}"


def interpolate_aliases(template: str, aliases: AliasContext) -> str:
    """Substitute alias placeholders with literal alias values.

    No path arithmetic or validation happens here.
    """
    return (
        template.replace(COMPONENTS_ALIAS_PLACEHOLDER, aliases.components_alias)
        .replace(UI_ALIAS_PLACEHOLDER, aliases.ui_alias)
        .replace(UTILS_ALIAS_PLACEHOLDER, aliases.utils_alias)
    )


def resolve_replacements(
    replace_imports: dict[str, str] | None, aliases: AliasContext
) -> dict[str, str] | None:
    """Interpolate aliases into every replacement specifier."""
    if replace_imports is None:
        return None
    return {old: interpolate_aliases(new, aliases) for old, new in replace_imports.items()}


def apply_import_replacements(content: str, replace_imports: dict[str, str] | None) -> str:
    """Rewrite `from '<old>'` clauses to reference the mapped specifier.

    Keys are matched literally (regex metacharacters are escaped) and every
    occurrence is replaced. The original quote character and the rest of the
    statement are preserved.

    Args:
        content: Template source text
        replace_imports: Mapping of exact old specifier to new specifier

    Returns:
        Rewritten source; the input itself when there is nothing to replace
    """
    if not replace_imports:
        return content

    result = content
    for old, new in replace_imports.items():
        pattern = re.compile(r"(\bfrom[ \t]+)(['\"])" + re.escape(old) + r"\2")
        result = pattern.sub(
            lambda m, new=new: f"{m.group(1)}{m.group(2)}{new}{m.group(2)}", result
        )
    return result
