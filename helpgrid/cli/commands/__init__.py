# helpgrid/cli/commands/__init__.py
# Subcommands registered on the root Typer app
