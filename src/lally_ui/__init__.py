"""lally-ui: copy reusable UI component source into consumer projects.

Import from submodules:
- operations: apply, export, connect and doctor building blocks
- io: catalog and components.json loading
- context: LallyContext for dependency injection
"""
