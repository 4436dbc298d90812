# helpgrid/cli/decorators.py
# CLI decorator mapping helpgrid errors to styled messages & exit code 1

import functools
from typing import Callable, TypeVar, Any, cast

from rich.markup import escape

from ..core.exceptions import (
    HelpgridError,
    ConfigurationError,
    JSONParsingError,
    format_error_message,
)

F = TypeVar("F", bound=Callable[..., Any])


# * Decorator for handling helpgrid errors in CLI commands w/ Rich output
def handle_helpgrid_error(func: F) -> F:
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        from .console import console

        try:
            return func(*args, **kwargs)
        except JSONParsingError as e:
            console.print(format_error_message("JSON Parsing Error", escape(str(e))), markup=True)
            raise SystemExit(1)
        except ConfigurationError as e:
            console.print(format_error_message("Configuration Error", escape(str(e))), markup=True)
            raise SystemExit(1)
        except HelpgridError as e:
            console.print(format_error_message("Error", escape(str(e))), markup=True)
            raise SystemExit(1)

    return cast(F, wrapper)
