from lally_ui.commands.registry.group import registry_group

__all__ = ["registry_group"]
