# helpgrid/__init__.py
# Colorized, column-aligned help text for command-line tools

from .core.exceptions import ConfigurationError, HelpgridError
from .core.types import (
    COMMON_FLAGS,
    FlagDescriptor,
    GroupDescriptor,
    HelpConfig,
    PackageMetadata,
    RequiredComputed,
    RequiredLiteral,
    flag,
)
from .help.renderer import render

__version__ = "0.1.0"

__all__ = [
    "COMMON_FLAGS",
    "ConfigurationError",
    "FlagDescriptor",
    "GroupDescriptor",
    "HelpConfig",
    "HelpgridError",
    "PackageMetadata",
    "RequiredComputed",
    "RequiredLiteral",
    "flag",
    "render",
]
