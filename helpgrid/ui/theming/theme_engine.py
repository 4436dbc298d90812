# helpgrid/ui/theming/theme_engine.py
# Theme engine: named help style roles, Rich theme lookup & text decoration helpers

from __future__ import annotations

from ..core.rich_components import Text, Theme
from .theme_definitions import THEMES, DEFAULT_THEME
from ...core.exceptions import UnknownThemeError


# * HelpRoles names every style the layout engine may request; themes decide how they look
class HelpRoles:
    PROMPT = "help.prompt"
    COMMAND = "help.command"
    COMMAND_NAME = "help.command.name"
    OPTION = "help.option"
    ARGUMENT = "help.argument"
    REQUIRED = "help.required"
    DEFAULT_LABEL = "help.default.label"
    DEFAULT_VALUE = "help.default.value"
    GROUP = "help.group"
    DESCRIPTION = "help.description"

    @staticmethod
    def title(section: str) -> str:
        return f"help.title.{section}"


# * valid theme names
def theme_names() -> list[str]:
    return sorted(THEMES)


# * generate Rich theme for a named palette
def get_help_theme(name: str = DEFAULT_THEME) -> Theme:
    palette = THEMES.get(name)
    if palette is None:
        valid = ", ".join(theme_names())
        raise UnknownThemeError(f"Unknown theme '{name}'. Valid themes: {valid}", name)
    return Theme(palette)


# * Decorate a text span w/ a named role
def styled(text: str, role: str) -> Text:
    return Text(text, style=role)


# * Join plain strings & styled spans into one Text
def compose(*parts: str | Text) -> Text:
    result = Text()
    for part in parts:
        result.append(part)
    return result
