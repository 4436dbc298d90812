# helpgrid/cli/app.py
# Root Typer application & command registration
#
# ! Command imports at bottom of file are deferred to avoid circular dependencies w/ the app object.

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

# load environment variables once at startup (HELPGRID_HOME may live in .env)
load_dotenv()

from ..config.settings import settings_manager


app = typer.Typer(
    rich_markup_mode="rich",
    add_completion=False,
    no_args_is_help=False,
    context_settings={"help_option_names": ["--help", "-h"]},
)


# * Load settings, set up logging & show helpgrid-rendered help when no subcommand is used
@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log measurements & layout decisions."
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug output."),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress log output."),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", help="Write verbose logs to file (enables verbose mode)."
    ),
) -> None:
    # respect injected ctx.obj from tests/embedding; only load if absent
    if getattr(ctx, "obj", None) is None:
        ctx.obj = settings_manager.load()

    from ..core.output import reset_output_manager
    from ..core.verbose import init_verbose

    # log_file implies verbose mode
    init_verbose(
        enabled=verbose or log_file is not None,
        log_file=log_file,
        debug=debug,
        quiet=quiet,
    )
    # close the log file once the command finishes
    ctx.call_on_close(reset_output_manager)

    if ctx.invoked_subcommand is None:
        from .commands.help import show_app_help

        show_app_help(ctx)
        ctx.exit()


# ! import command modules here to avoid circular import w/ app object
from .commands import render as _render  # noqa: F401,E402
from .commands import preview as _preview  # noqa: F401,E402
from .commands import config as _config  # noqa: F401,E402
from .commands import help as _help  # noqa: F401,E402
