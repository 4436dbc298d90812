# helpgrid/integrations/__init__.py
# Adapters between helpgrid & flag parsers / process lifecycle

from .click_flags import args_from_command, flags_from_command
from .exit_hook import help_on_usage_error, USAGE_ERROR_EXIT_CODE

__all__ = [
    "args_from_command",
    "flags_from_command",
    "help_on_usage_error",
    "USAGE_ERROR_EXIT_CODE",
]
