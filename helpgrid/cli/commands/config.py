# helpgrid/cli/commands/config.py
# Settings mgmt subcommands (list/get/set/reset/path) w/ JSON-backed storage

from __future__ import annotations

import json
from typing import Any

import typer
from rich.markup import escape

from ..app import app
from ..console import console
from ..decorators import handle_helpgrid_error
from ...config.settings import settings_manager, known_keys
from ...core.output import get_output_manager
from ...ui.core.rich_components import themed_grid

# * Sub-app for config commands; registered on root app
config_app = typer.Typer(rich_markup_mode="rich", help="Manage helpgrid settings.")
app.add_typer(config_app, name="config")


# coerce string value to JSON value (numbers, bools, null) or keep raw string
def _coerce_value(raw: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


# * Print current settings & config path
def _print_current_settings() -> None:
    data = settings_manager.list_settings()

    console.print()
    console.print("[bold]Current Configuration[/]")
    console.print(f"[dim]Config file: {escape(str(settings_manager.config_path))}[/]")
    console.print()

    grid = themed_grid(padding=(0, 2))
    grid.add_column(style="cyan")
    grid.add_column()
    for key, value in data.items():
        grid.add_row(key, escape(json.dumps(value)))
    console.print(grid)


@config_app.callback(invoke_without_command=True)
def config_callback(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        _print_current_settings()


# * Explicit 'list' command to show current settings
@config_app.command(name="list")
def list_cmd() -> None:
    _print_current_settings()


# * Get a specific setting value & print as JSON
@config_app.command()
def get(key: str) -> None:
    if key not in known_keys():
        raise typer.BadParameter(f"Unknown setting: {key}")
    typer.echo(json.dumps(settings_manager.get(key)))


# * Set a specific setting value; values are JSON-coerced when possible
@config_app.command(name="set")
@handle_helpgrid_error
def set_cmd(key: str, value: str) -> None:
    if key not in known_keys():
        raise typer.BadParameter(f"Unknown setting: {key}")
    coerced = _coerce_value(value)
    settings_manager.set(key, coerced)
    get_output_manager().info(f"[green]✓[/] Set {key} = {escape(json.dumps(coerced))}")


# * Reset all settings to defaults
@config_app.command()
def reset() -> None:
    settings_manager.reset()
    get_output_manager().info("[green]✓[/] Reset settings to defaults")


# * Show the configuration file path
@config_app.command()
def path() -> None:
    typer.echo(str(settings_manager.config_path))
