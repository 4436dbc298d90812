# helpgrid/cli/commands/preview.py
# Preview themes & layouts w/ a built-in sample spec

from __future__ import annotations

from typing import Optional

import typer

from ..app import app
from ..decorators import handle_helpgrid_error
from ...config.settings import get_settings
from ...core.types import COMMON_FLAGS, HelpConfig, flag
from ...help.renderer import render as render_help


# sample spec exercising aliases, defaults, groups, required & variadic markers
def sample_config(settings, **overrides) -> HelpConfig:
    return HelpConfig.from_options(
        settings,
        command="not-sync",
        description=(
            "Disable file synchronization for files in an auto detected cloud storage "
            "such as Dropbox, iCloudDrive or OneDrive."
        ),
        usage=["not-sync [options] <path>...", "not-sync <path>..."],
        args={"path...*": "Path or list of paths to disable synchronization for."},
        flags={
            "cwd": flag("Set current working directory for relative paths.", alias="c"),
            "ignoreConfigs": flag(
                "(CSV) Ignore configuration files (e.g. .gitignore, .prettierignore).",
                alias="i",
                default="node_modules,dist",
            ),
            "dry": flag("Prevents changes to be written to disk.", alias="d", type="boolean"),
            "verbose": flag("Outputs extra information.", alias="v", type="boolean", default=True),
            "colors": flag("Favorite colors.", type="string", multiple=True, required=True),
            "size": flag("Size.", alias="s", type="number", required=lambda: True),
            **COMMON_FLAGS,
        },
        groups={
            "cwd": {"title": "General Options", "description": "Where & how files are processed."},
            "colors": {"title": "Appearance Options"},
            "help": {"title": "Other"},
        },
        examples=["not-sync node_modules,dist,coverage"],
        **{key: value for key, value in overrides.items() if value is not None},
    )


# * Render the sample spec w/ the current settings
@app.command(help="Render a sample spec to preview themes & layout settings.")
@handle_helpgrid_error
def preview(
    ctx: typer.Context,
    width: Optional[int] = typer.Option(None, "--width", "-w", min=1, help="Line length."),
    theme: Optional[str] = typer.Option(None, "--theme", "-t", help="Theme name."),
    no_color: bool = typer.Option(False, "--no-color", help="Render plain text."),
) -> None:
    config = sample_config(
        get_settings(ctx),
        line_length=width,
        theme=theme,
        color=False if no_color else None,
        auto_help=False,
    )
    typer.echo(render_help(config), nl=False)
