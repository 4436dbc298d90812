# helpgrid/cli/console.py
# Shared console for CLI output & logging
#
# - Console is created as a bare Console() at import time
# - The _ConsoleProxy lets tests swap the underlying console w/out breaking module-level references

from __future__ import annotations

from typing import Optional, Any

from rich.console import Console


# proxy delegating to underlying Console instance; all Console methods forwarded via __getattr__
class _ConsoleProxy:
    __slots__ = ("_console",)

    def __init__(self) -> None:
        self._console = Console()

    def __getattr__(self, name: str) -> Any:
        return getattr(self._console, name)

    def _set_console(self, new_console: Console) -> None:
        self._console = new_console

    def _get_console(self) -> Console:
        return self._console


console = _ConsoleProxy()


# * Get the underlying Console instance
def get_console() -> Console:
    if hasattr(console, "_get_console"):
        return console._get_console()
    return console  # type: ignore[return-value]


# * Configure console w/ specific settings (useful for tests & CLI modes)
def configure_console(
    width: Optional[int] = None,
    force_terminal: Optional[bool] = None,
    no_color: Optional[bool] = None,
    stderr: bool = False,
) -> Console:
    kwargs: dict[str, Any] = {"stderr": stderr}
    if width is not None:
        kwargs["width"] = width
    if force_terminal is not None:
        kwargs["force_terminal"] = force_terminal
    if no_color is not None:
        kwargs["no_color"] = no_color
    console._set_console(Console(**kwargs))
    return console._get_console()


# * Reset console to default configuration (useful for tests)
def reset_console() -> Console:
    console._set_console(Console())
    return console._get_console()
