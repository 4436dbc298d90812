# helpgrid/cli/commands/render.py
# Render a JSON help spec to the terminal

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from ..app import app
from ..decorators import handle_helpgrid_error
from ...config.settings import get_settings
from ...core.verbose import vlog_config
from ...help.renderer import render as render_help
from ...spec_io.specs import load_help_spec


# * Render help text from a JSON spec; CLI options override spec values & settings
@app.command(help="Render help text from a JSON help spec.")
@handle_helpgrid_error
def render(
    ctx: typer.Context,
    spec: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON help spec."),
    pkg: Optional[Path] = typer.Option(
        None, "--pkg", "-p", exists=True, dir_okay=False, help="package.json-style metadata file."
    ),
    width: Optional[int] = typer.Option(None, "--width", "-w", min=1, help="Line length."),
    title_length: Optional[int] = typer.Option(None, "--title-length", min=1, help="Title band width."),
    multiline_threshold: Optional[int] = typer.Option(
        None, "--multiline-threshold", min=0, help="Free columns below which descriptions get their own row."
    ),
    theme: Optional[str] = typer.Option(None, "--theme", "-t", help="Theme name."),
    no_color: bool = typer.Option(False, "--no-color", help="Render plain text."),
    auto_help: Optional[bool] = typer.Option(
        None, "--auto-help/--no-auto-help", help="Omit/show the command name & description header."
    ),
) -> None:
    settings = get_settings(ctx)
    config = load_help_spec(
        spec,
        settings,
        pkg_path=pkg,
        line_length=width,
        title_length=title_length,
        multiline_threshold=multiline_threshold,
        theme=theme,
        color=False if no_color else None,
        auto_help=auto_help,
    )
    vlog_config("command", config.command)
    vlog_config("line_length", config.line_length)
    vlog_config("theme", config.theme)
    typer.echo(render_help(config), nl=False)
