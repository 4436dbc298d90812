# helpgrid/cli/commands/help.py
# helpgrid-rendered help for the CLI itself, built by introspecting the Click commands

from __future__ import annotations

from typing import Any, Optional

import typer

from ..app import app
from ..decorators import handle_helpgrid_error
from ...config.settings import HelpSettings, get_settings
from ...core.types import HelpConfig
from ...help.renderer import render as render_help
from ...integrations.click_flags import args_from_command, flags_from_command

PROG = "helpgrid"

EXAMPLES = [
    f"{PROG} render help.json --pkg package.json",
    f"{PROG} preview --theme mono --width 80",
    f"{PROG} config set line_length 100",
    f"{PROG} help render",
]


# * Build a help config for one click command
def command_config(command: Any, name: str, settings: HelpSettings) -> HelpConfig:
    return HelpConfig.from_options(
        settings,
        command=f"{PROG} {name}",
        description=command.help or None,
        args=args_from_command(command),
        flags=flags_from_command(command),
        auto_help=False,
    )


# * Build the overview help config for the root group
def app_config(ctx: typer.Context, settings: HelpSettings) -> HelpConfig:
    group = ctx.find_root().command
    names = group.list_commands(ctx) if hasattr(group, "list_commands") else []
    return HelpConfig.from_options(
        settings,
        command=PROG,
        description="Colorized, column-aligned help text for command-line tools.",
        usage=[f"{PROG} [options] <command> [args]"],
        args={"command": f"One of: {', '.join(names)}."},
        flags=flags_from_command(group),
        examples=EXAMPLES,
        auto_help=False,
    )


# * Print the overview help for the root app
def show_app_help(ctx: typer.Context) -> None:
    typer.echo(render_help(app_config(ctx, get_settings(ctx))), nl=False)


# * Show helpgrid-rendered help for the app or one of its commands
@app.command(name="help", help="Show help for helpgrid or one of its commands.")
@handle_helpgrid_error
def help_cmd(
    ctx: typer.Context,
    command: Optional[str] = typer.Argument(None, help="Command to show help for."),
) -> None:
    if command is None:
        show_app_help(ctx)
        return

    group = ctx.find_root().command
    target = group.get_command(ctx, command) if hasattr(group, "list_commands") else None
    if target is None:
        raise typer.BadParameter(f"Unknown command: {command}")
    typer.echo(render_help(command_config(target, command, get_settings(ctx))), nl=False)
