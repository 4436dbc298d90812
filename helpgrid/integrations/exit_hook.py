# helpgrid/integrations/exit_hook.py
# Exit-code interception: show help instead of failing when the flag parser exits w/ a usage error

from __future__ import annotations

from contextlib import contextmanager
from typing import Callable, Iterator

import typer

USAGE_ERROR_EXIT_CODE = 2


# usage errors raised w/o standalone mode carry their exit code (click & typer's fork alike)
def _is_usage_error(error: BaseException, code: int) -> bool:
    if isinstance(error, SystemExit):
        return error.code == code
    return getattr(error, "exit_code", None) == code


# * Print help & exit 0 when the wrapped block exits w/ the usage-error code; other exits propagate
@contextmanager
def help_on_usage_error(
    help_text: str,
    code: int = USAGE_ERROR_EXIT_CODE,
    echo: Callable[[str], None] = typer.echo,
) -> Iterator[None]:
    try:
        yield
    except (SystemExit, Exception) as e:
        if not _is_usage_error(e, code):
            raise
        echo(help_text)
        raise SystemExit(0) from e
