# helpgrid/ui/theming/__init__.py
# Named help styles & theme palettes

from .theme_definitions import THEMES, DEFAULT_THEME
from .theme_engine import HelpRoles, get_help_theme, theme_names, styled, compose

__all__ = [
    "THEMES",
    "DEFAULT_THEME",
    "HelpRoles",
    "get_help_theme",
    "theme_names",
    "styled",
    "compose",
]
