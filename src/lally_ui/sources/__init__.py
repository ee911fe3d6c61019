from lally_ui.sources.templates import bundled_template_root, resolve_template_source

__all__ = ["bundled_template_root", "resolve_template_source"]
